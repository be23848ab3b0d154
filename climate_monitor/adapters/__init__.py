"""
Adapters for Climate Monitor hexagonal architecture.

This module contains the concrete implementations of port interfaces
that handle external I/O and infrastructure concerns.
"""

from .secrets import StaticSecretStore, SQLiteSecretStore

__all__ = ["StaticSecretStore", "SQLiteSecretStore"]

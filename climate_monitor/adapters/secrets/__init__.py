"""
Device secret store adapters for Climate Monitor.

This module contains secret stores backing the device secret port,
an in-memory configured set and a read-only SQLite table.
"""

from .static import StaticSecretStore
from .sqlite_secrets import SQLiteSecretStore
from .factory import secret_store_from_settings

__all__ = ["StaticSecretStore", "SQLiteSecretStore", "secret_store_from_settings"]

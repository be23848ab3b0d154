"""
Port interfaces for Climate Monitor hexagonal architecture.

This module defines the port interfaces (Protocols) that define
the contracts between the core domain and external adapters.
"""

from .secrets import DeviceSecretPort
from .alerts import AlertEvaluatorPort

__all__ = ["DeviceSecretPort", "AlertEvaluatorPort"]

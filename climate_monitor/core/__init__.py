"""
Core domain models and pure functions for Climate Monitor.

This module contains the domain models and pure business logic
that are independent of external I/O and infrastructure concerns.
"""

from .models import Alert, AlertKind, DeviceReading, FailureKind, Outcome, FIRMWARE_FIELD
from .semver import is_valid_semver, SEMVER_PATTERN
from .alerts import AlertEvaluator

__all__ = ["Alert", "AlertKind", "DeviceReading", "FailureKind", "Outcome", "FIRMWARE_FIELD",
           "is_valid_semver", "SEMVER_PATTERN", "AlertEvaluator"]

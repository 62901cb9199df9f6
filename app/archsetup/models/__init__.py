"""Data models for archsetup.

This module exports the core data structures used throughout the application.
"""

from archsetup.models.package import (
    ClassifiedPackages,
    InstallOutcome,
    InstallResult,
    PackageRecord,
    PackageSource,
    validate_package_name,
)
from archsetup.models.service import ServiceOutcome, ServiceResult, ServiceScope
from archsetup.models.summary import RunSummary

__all__ = [
    "ClassifiedPackages",
    "InstallOutcome",
    "InstallResult",
    "PackageRecord",
    "PackageSource",
    "RunSummary",
    "ServiceOutcome",
    "ServiceResult",
    "ServiceScope",
    "validate_package_name",
]

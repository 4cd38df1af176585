"""
핵심 모듈 패키지
"""

from .configuration import XmlConfigProvider
from .error_handling import (
    BackupError,
    ConfigurationError,
    FileSystemError,
    RecycleBinError,
    RecycleBinSecurityError,
)
from .models import (
    BackupDestination,
    Container,
    DeletionOutcome,
    DeletionProperties,
    ExportObject,
    ExportSettings,
    FeatureScope,
    HookRegistration,
)

__all__ = [
    "XmlConfigProvider",
    "BackupError",
    "ConfigurationError",
    "FileSystemError",
    "RecycleBinError",
    "RecycleBinSecurityError",
    "BackupDestination",
    "Container",
    "DeletionOutcome",
    "DeletionProperties",
    "ExportObject",
    "ExportSettings",
    "FeatureScope",
    "HookRegistration",
]

"""Core NoSQLKit utilities.

This module exports core utilities for use throughout the application.
"""

from nosqlkit.core.config import Settings, get_settings
from nosqlkit.core.exceptions import (
    NAMESPACE_EXISTS_CODE,
    ArtifactWriteError,
    CollectionDefinitionError,
    ExternalSyncError,
    NoSQLKitError,
    PersistenceError,
    SchemaSynthesisError,
)
from nosqlkit.core.logging import (
    LoggingContext,
    clear_context,
    configure_logging,
    get_logger,
)

__all__ = [
    "NAMESPACE_EXISTS_CODE",
    "ArtifactWriteError",
    "CollectionDefinitionError",
    "ExternalSyncError",
    "LoggingContext",
    "NoSQLKitError",
    "PersistenceError",
    "SchemaSynthesisError",
    "Settings",
    "clear_context",
    "configure_logging",
    "get_logger",
    "get_settings",
]

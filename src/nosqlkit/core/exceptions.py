"""Exceptions raised by NoSQLKit components."""

from typing import Any

# MongoDB "NamespaceExists" error code
NAMESPACE_EXISTS_CODE = 48


class NoSQLKitError(Exception):
    """Base class for all NoSQLKit errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class SchemaSynthesisError(NoSQLKitError):
    """Raised when a collection definition cannot be turned into a validation schema."""

    def __init__(self, collection: str, message: str, property_name: str | None = None) -> None:
        self.collection = collection
        self.property_name = property_name
        location = f"{collection}.{property_name}" if property_name else collection
        super().__init__(f"{location}: {message}")


class CollectionDefinitionError(NoSQLKitError, ValueError):
    """Raised when submitted collection definitions fail validation."""

    def __init__(self, errors: list[Any]) -> None:
        self.errors = errors
        details = "; ".join(f"{e.field}: {e.message}" for e in errors)
        super().__init__(f"Validation failed: {details}")


class PersistenceError(NoSQLKitError):
    """Raised when reading or writing the structured-data store fails."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


class ArtifactWriteError(NoSQLKitError):
    """A generated artifact could not be rendered or written.

    Recorded against the file it concerns; never raised out of a batch.
    """

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


class ExternalSyncError(NoSQLKitError):
    """Applying a validation schema to the document store failed.

    Recorded against the collection it concerns; never raised out of a batch.
    """

    def __init__(self, collection: str, message: str, code: int | None = None) -> None:
        self.collection = collection
        self.code = code
        super().__init__(f"{collection}: {message}")

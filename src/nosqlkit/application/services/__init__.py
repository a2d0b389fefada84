"""Application services for NoSQLKit."""

from nosqlkit.application.services.nosql_service import NoSQLService

__all__ = ["NoSQLService"]

"""Structured-data file storage.

The file store reads and writes payloads keyed by path, either as JSON
documents or as raw text. Every failure is surfaced as a PersistenceError.
"""

import json
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Any

from nosqlkit.core.exceptions import PersistenceError
from nosqlkit.core.logging import get_logger

logger = get_logger(__name__)


class DataKind(str, Enum):
    """Payload kinds supported by file stores."""

    JSON = "json"
    TEXT = "text"


class FileStore(ABC):
    """Abstract base class for file stores."""

    @abstractmethod
    def read(self, path: str | Path, kind: DataKind = DataKind.JSON) -> Any:
        """Read a payload.

        Raises:
            PersistenceError: If the file is missing, unreadable or malformed.
        """
        ...

    @abstractmethod
    def write(
        self,
        path: str | Path,
        data: Any,
        kind: DataKind = DataKind.JSON,
        create_dirs: bool = True,
    ) -> None:
        """Write a payload, replacing any previous content.

        Raises:
            PersistenceError: If the payload cannot be written.
        """
        ...

    @abstractmethod
    def exists(self, path: str | Path) -> bool:
        """Check whether a payload exists at path."""
        ...

    @abstractmethod
    def ensure_dir(self, path: str | Path) -> None:
        """Create a directory and its parents if missing."""
        ...


class LocalFileStore(FileStore):
    """File store backed by the local filesystem."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def read(self, path: str | Path, kind: DataKind = DataKind.JSON) -> Any:
        target = Path(path)
        try:
            content = target.read_text(encoding=self.encoding)
        except OSError as e:
            raise PersistenceError(str(target), f"cannot read file: {e}") from e

        if kind is DataKind.TEXT:
            return content
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise PersistenceError(str(target), f"invalid JSON: {e}") from e

    def write(
        self,
        path: str | Path,
        data: Any,
        kind: DataKind = DataKind.JSON,
        create_dirs: bool = True,
    ) -> None:
        target = Path(path)
        if kind is DataKind.JSON:
            try:
                content = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
            except (TypeError, ValueError) as e:
                raise PersistenceError(str(target), f"cannot serialize payload: {e}") from e
        else:
            content = str(data)

        try:
            if create_dirs:
                target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding=self.encoding)
        except OSError as e:
            raise PersistenceError(str(target), f"cannot write file: {e}") from e

        logger.debug("File written", path=str(target), kind=kind.value, size=len(content))

    def exists(self, path: str | Path) -> bool:
        return Path(path).is_file()

    def ensure_dir(self, path: str | Path) -> None:
        try:
            Path(path).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PersistenceError(str(path), f"cannot create directory: {e}") from e

"""
Catalog storage backends.

A storage backend owns a single keyed slot holding the serialized
catalog (a JSON array of application records). The catalog reads and
rewrites the whole slot on every operation.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, List, Union

from common.exceptions import CatalogCorruptError, StorageUnavailableError
from utils.atomic_write import atomic_write_text, quarantine

from .models import Application

logger = logging.getLogger(__name__)


def encode_collection(applications: List[Application]) -> str:
    """Serialize a collection to the persisted JSON layout."""
    return json.dumps(
        [app.to_dict() for app in applications],
        indent=2,
        ensure_ascii=False,
    ) + "\n"


def decode_collection(raw: str, location: str = "<memory>") -> List[Application]:
    """
    Parse a persisted collection.

    Raises:
        CatalogCorruptError: if the text is not a valid collection
    """
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise CatalogCorruptError(location, "invalid JSON", cause=e)

    if not isinstance(data, list):
        raise CatalogCorruptError(location, f"expected a list, got {type(data).__name__}")

    applications = []
    seen = set()
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise CatalogCorruptError(location, f"record {index} is not an object")
        try:
            app = Application.from_dict(record)
        except ValueError as e:
            raise CatalogCorruptError(location, f"record {index}: {e}", cause=e)
        if app.id in seen:
            raise CatalogCorruptError(location, f"duplicate id '{app.id}'")
        seen.add(app.id)
        applications.append(app)

    return applications


class CatalogStorage(ABC):
    """Base class for catalog storage backends."""

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable description of the slot."""
        pass

    @abstractmethod
    def read(self) -> Optional[List[Application]]:
        """
        Read the stored collection.

        Returns:
            The collection, or None when the slot does not exist.

        Raises:
            CatalogCorruptError: slot exists but cannot be decoded
            StorageUnavailableError: slot cannot be read
        """
        pass

    @abstractmethod
    def write(self, applications: List[Application]) -> None:
        """Replace the stored collection. Failed writes leave the slot as it was."""
        pass

    @abstractmethod
    def discard(self) -> None:
        """Remove the slot so the next read reports it as absent."""
        pass


class JsonFileStorage(CatalogStorage):
    """Stores the catalog as ``<data_dir>/<key>.json``."""

    def __init__(self, data_dir: Union[str, Path], key: str = "applications"):
        self.data_dir = Path(data_dir)
        self.key = key
        self.path = self.data_dir / f"{key}.json"

    @property
    def location(self) -> str:
        return str(self.path)

    def read(self) -> Optional[List[Application]]:
        if not self.path.exists():
            return None

        try:
            raw = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise CatalogCorruptError(self.location, "not UTF-8 text", cause=e)
        except OSError as e:
            raise StorageUnavailableError(self.location, "read", cause=e)

        return decode_collection(raw, self.location)

    def write(self, applications: List[Application]) -> None:
        try:
            atomic_write_text(self.path, encode_collection(applications), mode=0o600)
        except OSError as e:
            raise StorageUnavailableError(self.location, "write", cause=e)
        logger.debug(f"Wrote {len(applications)} applications to {self.path}")

    def discard(self) -> None:
        try:
            target = quarantine(self.path)
        except OSError as e:
            raise StorageUnavailableError(self.location, "discard", cause=e)
        logger.warning(f"Moved unreadable catalog to {target}")


class MemoryStorage(CatalogStorage):
    """
    In-memory slot holding the serialized collection.

    ``raw`` is the stored text exactly as a file would hold it, so tests
    can plant corrupt data by assigning to it.
    """

    def __init__(self, raw: Optional[str] = None):
        self.raw = raw
        self.writes = 0

    @property
    def location(self) -> str:
        return "<memory>"

    def read(self) -> Optional[List[Application]]:
        if self.raw is None:
            return None
        return decode_collection(self.raw, self.location)

    def write(self, applications: List[Application]) -> None:
        self.raw = encode_collection(applications)
        self.writes += 1

    def discard(self) -> None:
        self.raw = None

"""
App Catalog - the application store behind the listing and admin pages.

Owns the stored collection of applications: assigns identity, seeds
example entries on first use, and implements list/get/create/update/
delete over a pluggable storage backend.
"""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Optional, List, Dict, Callable, Tuple

from common.exceptions import CatalogCorruptError
from common.logging_config import LogContext

from .models import Application, ApplicationPatch, EDITABLE_FIELDS, utc_timestamp
from .seed import DEFAULT_APPLICATIONS, build_seed
from .storage import CatalogStorage

logger = logging.getLogger(__name__)


def new_application_id() -> str:
    """Random UUID4 string; collisions are treated as impossible."""
    return str(uuid.uuid4())


class ApplicationCatalog:
    """
    Application catalog management.

    Every operation reads the full collection from storage, modifies it
    and writes it back, holding a per-instance lock for the whole cycle.
    Not-found conditions are reported with None/False, never raised.

    A missing slot is seeded with the example entries. A corrupt slot is
    moved aside and reseeded, unless ``strict`` is set, in which case
    CatalogCorruptError propagates. I/O failures always propagate as
    StorageUnavailableError.
    """

    def __init__(
        self,
        storage: CatalogStorage,
        seed: Optional[List[Dict[str, str]]] = None,
        strict: bool = False,
        clock: Callable[[], str] = utc_timestamp,
        id_factory: Callable[[], str] = new_application_id,
    ):
        """
        Initialize ApplicationCatalog.

        Args:
            storage: Backend holding the serialized collection
            seed: Entries written when the slot is absent (default: examples)
            strict: Raise on corrupt data instead of reseeding
            clock: Source of createdAt stamps
            id_factory: Source of new application ids
        """
        self.storage = storage
        self.strict = strict
        self._seed = DEFAULT_APPLICATIONS if seed is None else seed
        self._clock = clock
        self._id_factory = id_factory
        self._lock = threading.Lock()

    def initialize(self) -> bool:
        """
        Seed the catalog if no collection exists yet.

        An existing collection, even an empty one, is never reseeded.
        Reads run the same check, so calling this is optional but makes
        the seeding moment explicit.

        Returns:
            True if the catalog was seeded by this call.
        """
        with self._lock:
            _, seeded = self._load()
        return seeded

    def _load(self) -> Tuple[List[Application], bool]:
        try:
            applications = self.storage.read()
        except CatalogCorruptError as e:
            if self.strict:
                raise
            logger.warning(f"Discarding unreadable catalog: {e}")
            self.storage.discard()
            applications = None

        if applications is not None:
            return applications, False

        applications = build_seed(self._clock(), self._seed)
        self.storage.write(applications)
        logger.info(f"Seeded catalog with {len(applications)} example applications")
        return applications, True

    def list(self) -> List[Application]:
        """Get all applications in insertion order."""
        with self._lock:
            applications, _ = self._load()
        return applications

    def all(self) -> List[Application]:
        """Alias for list()."""
        return self.list()

    def get(self, app_id: str) -> Optional[Application]:
        """Get application by ID, or None."""
        for app in self.list():
            if app.id == app_id:
                return app
        return None

    def create(
        self,
        name: str,
        description: str,
        link: str,
        image_url: str,
    ) -> Application:
        """
        Add a new application at the end of the catalog.

        Field values are stored as given; validation belongs to the caller.

        Returns:
            The stored application with its new id and createdAt.
        """
        _require_strings(name=name, description=description, link=link, image_url=image_url)

        with self._lock:
            applications, _ = self._load()
            app = Application(
                id=self._id_factory(),
                name=name,
                description=description,
                link=link,
                image_url=image_url,
                created_at=self._clock(),
            )
            self.storage.write(applications + [app])

        with LogContext(app_id=app.id, operation="create"):
            logger.info(f"Created application '{app.name}' ({app.id})")
        return app

    def update(self, app_id: str, patch: ApplicationPatch) -> Optional[Application]:
        """
        Merge ``patch`` into an existing application.

        Omitted fields, id and createdAt are preserved.

        Returns:
            The merged application, or None if no application has that id.
        """
        _require_strings(**{
            attr: getattr(patch, attr)
            for attr, _ in EDITABLE_FIELDS
            if getattr(patch, attr) is not None
        })

        with self._lock:
            applications, _ = self._load()
            for index, current in enumerate(applications):
                if current.id == app_id:
                    break
            else:
                logger.debug(f"Update skipped, no application {app_id}")
                return None

            if patch.is_empty():
                return current

            updated = patch.apply(current)
            applications[index] = updated
            self.storage.write(applications)

        with LogContext(app_id=app_id, operation="update", fields=sorted(patch.to_dict())):
            logger.info(f"Updated application '{updated.name}' ({app_id})")
        return updated

    def delete(self, app_id: str) -> bool:
        """
        Remove an application permanently.

        Returns:
            True if an application was removed, False if none matched.
        """
        with self._lock:
            applications, _ = self._load()
            remaining = [app for app in applications if app.id != app_id]

            if len(remaining) == len(applications):
                logger.debug(f"Delete skipped, no application {app_id}")
                return False

            self.storage.write(remaining)

        with LogContext(app_id=app_id, operation="delete"):
            logger.info(f"Deleted application {app_id}")
        return True

    def __len__(self) -> int:
        return len(self.list())

    def __contains__(self, app_id: object) -> bool:
        return isinstance(app_id, str) and self.get(app_id) is not None


def _require_strings(**values) -> None:
    for name, value in values.items():
        if not isinstance(value, str):
            raise TypeError(f"{name} must be a string, not {type(value).__name__}")

"""
Catalog entity model.

``Application`` is the only record the catalog stores. Serialized field
names follow the persisted layout (``imageUrl``, ``createdAt``).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional, Dict, Any, Tuple

# Attribute name -> serialized name, for the fields an update may replace
EDITABLE_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("name", "name"),
    ("description", "description"),
    ("link", "link"),
    ("image_url", "imageUrl"),
)


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds, e.g. 2024-05-01T12:00:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class Application:
    """A curated catalog entry."""
    id: str
    name: str
    description: str
    link: str
    image_url: str
    created_at: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "link": self.link,
            "imageUrl": self.image_url,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Application":
        """
        Create from dictionary.

        Raises:
            ValueError: if a field is missing or is not a string
        """
        values = {}
        for attr, key in (("id", "id"), *EDITABLE_FIELDS, ("created_at", "createdAt")):
            if key not in data:
                raise ValueError(f"missing field '{key}'")
            if not isinstance(data[key], str):
                raise ValueError(f"field '{key}' must be a string")
            values[attr] = data[key]
        return cls(**values)


@dataclass(frozen=True)
class ApplicationPatch:
    """
    Partial update for an application.

    ``None`` means "leave unchanged"; an empty string is a real value
    (clearing the image, for instance).
    """
    name: Optional[str] = None
    description: Optional[str] = None
    link: Optional[str] = None
    image_url: Optional[str] = None

    def is_empty(self) -> bool:
        return all(getattr(self, attr) is None for attr, _ in EDITABLE_FIELDS)

    def to_dict(self) -> Dict[str, Any]:
        """Serialized form holding only the fields that are set."""
        return {
            key: getattr(self, attr)
            for attr, key in EDITABLE_FIELDS
            if getattr(self, attr) is not None
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ApplicationPatch":
        """
        Build a patch from serialized or attribute names.

        ``id`` and ``createdAt`` are ignored; they are never replaceable.
        """
        values = {}
        for attr, key in EDITABLE_FIELDS:
            if key in data:
                values[attr] = data[key]
            elif attr in data:
                values[attr] = data[attr]
        for attr, value in values.items():
            if value is not None and not isinstance(value, str):
                raise ValueError(f"field '{attr}' must be a string")
        return cls(**values)

    def apply(self, app: Application) -> Application:
        """Return ``app`` with the present fields replaced."""
        changes = {
            attr: getattr(self, attr)
            for attr, _ in EDITABLE_FIELDS
            if getattr(self, attr) is not None
        }
        return replace(app, **changes)

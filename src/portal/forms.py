"""
Application form validation.

Field checks live here, not in the catalog: the store accepts whatever
strings it is given, so every admin entry point validates first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Dict, Any
from urllib.parse import urlparse

from catalog.images import is_image_data_url
from catalog.models import Application, ApplicationPatch
from common.exceptions import ValidationError

REQUIRED_FIELDS = ("name", "description", "link")


def _is_http_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def validate_application(fields: Dict[str, Any], partial: bool = False) -> Dict[str, str]:
    """
    Check and clean application fields.

    Args:
        fields: Values keyed by attribute name (name, description, link, image_url)
        partial: Only check the fields that are present (edits)

    Returns:
        Cleaned values, stripped of surrounding whitespace.

    Raises:
        ValidationError: with one message per invalid field
    """
    errors: Dict[str, str] = {}
    cleaned: Dict[str, str] = {}

    for name in REQUIRED_FIELDS + ("image_url",):
        if name not in fields or fields[name] is None:
            if name in REQUIRED_FIELDS and not partial:
                errors[name] = "is required"
            continue

        value = fields[name]
        if not isinstance(value, str):
            errors[name] = "must be text"
            continue

        value = value.strip()
        if name in REQUIRED_FIELDS and not value:
            errors[name] = "is required"
            continue

        if name == "link" and not _is_http_url(value):
            errors[name] = "must be an http(s) URL"
            continue

        if name == "image_url" and value:
            if not (_is_http_url(value) or is_image_data_url(value)):
                errors[name] = "must be an http(s) URL or an embedded image"
                continue

        cleaned[name] = value

    if errors:
        raise ValidationError(errors)
    return cleaned


@dataclass
class ApplicationForm:
    """Values entered in the add/edit form."""
    name: Optional[str] = None
    description: Optional[str] = None
    link: Optional[str] = None
    image_url: Optional[str] = None

    @classmethod
    def from_application(cls, app: Application) -> "ApplicationForm":
        """Prefill the form from a stored application."""
        return cls(
            name=app.name,
            description=app.description,
            link=app.link,
            image_url=app.image_url,
        )

    def _values(self) -> Dict[str, Optional[str]]:
        return {
            "name": self.name,
            "description": self.description,
            "link": self.link,
            "image_url": self.image_url,
        }

    def to_create_kwargs(self) -> Dict[str, str]:
        """Validated keyword arguments for ApplicationCatalog.create()."""
        cleaned = validate_application(self._values())
        cleaned.setdefault("image_url", "")
        return cleaned

    def to_patch(self) -> ApplicationPatch:
        """Validated patch holding only the fields that were filled in."""
        return ApplicationPatch(**validate_application(self._values(), partial=True))

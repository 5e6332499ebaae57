"""
Image helpers for application entries.

Uploaded images are embedded in the catalog as base64 data URLs; the
store itself treats ``image_url`` as an opaque string.
"""

from __future__ import annotations

import base64
import binascii
import logging
import mimetypes
from pathlib import Path
from typing import Union

from common.exceptions import UnsupportedImageError, ImageReadError

logger = logging.getLogger(__name__)

DATA_URL_PREFIX = "data:"


def image_to_data_url(path: Union[str, Path]) -> str:
    """
    Read an image file and encode it as a data URL.

    Args:
        path: Local image file

    Returns:
        ``data:<mime>;base64,<payload>``

    Raises:
        UnsupportedImageError: file type is not an image
        ImageReadError: file is missing or unreadable
    """
    path = Path(path)
    mime_type, _ = mimetypes.guess_type(path.name)
    if not mime_type or not mime_type.startswith("image/"):
        raise UnsupportedImageError(str(path), mime_type)

    try:
        payload = path.read_bytes()
    except OSError as e:
        raise ImageReadError(str(path), cause=e)

    encoded = base64.b64encode(payload).decode("ascii")
    logger.debug(f"Encoded {path.name} ({len(payload)} bytes) as {mime_type}")
    return f"{DATA_URL_PREFIX}{mime_type};base64,{encoded}"


def is_data_url(value: str) -> bool:
    """Check whether an image value is an embedded data URL."""
    return value.startswith(DATA_URL_PREFIX)


def is_image_data_url(value: str) -> bool:
    """Check for a well-formed base64 image data URL."""
    if not value.startswith(DATA_URL_PREFIX + "image/"):
        return False
    header, sep, payload = value.partition(",")
    if not sep or not header.endswith(";base64"):
        return False
    try:
        base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        return False
    return True


def describe_image(value: str) -> str:
    """Short display text for an image value."""
    if not value:
        return "(none)"
    if not is_data_url(value):
        return value

    header, _, payload = value.partition(",")
    mime_type = header[len(DATA_URL_PREFIX):].split(";", 1)[0] or "unknown"
    # base64 expands 3 bytes to 4 characters
    size = len(payload) * 3 // 4 - payload.count("=")
    return f"embedded {mime_type} ({size} bytes)"

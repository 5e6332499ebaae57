"""
AppReferenceHub Utility Modules

File helpers shared by the catalog, session and preference stores.
"""

from .atomic_write import (
    atomic_write_text,
    atomic_write_json,
    quarantine,
)

__all__ = [
    "atomic_write_text",
    "atomic_write_json",
    "quarantine",
]

"""
AppReferenceHub Catalog

Application records, their storage and the catalog store.
"""

from .app_catalog import ApplicationCatalog
from .models import Application, ApplicationPatch
from .storage import CatalogStorage, JsonFileStorage, MemoryStorage

__all__ = [
    "ApplicationCatalog",
    "Application",
    "ApplicationPatch",
    "CatalogStorage",
    "JsonFileStorage",
    "MemoryStorage",
]

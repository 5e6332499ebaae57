"""
AppReferenceHub Common Utilities

Shared exceptions, logging, decorators and configuration.
"""

from .exceptions import (
    HubError, CatalogError, CatalogCorruptError, StorageUnavailableError,
    ApplicationNotFoundError, ValidationError, AuthError, AuthenticationError,
    NotAuthenticatedError, ImageError, UnsupportedImageError, ImageReadError,
    ConfigError, InvalidConfigError, TemplateError, TemplateNotFoundError,
    TemplateRenderError,
)
from .decorators import handle_errors, require_login
from .logging_config import setup_logging, LogContext, JSONFormatter
from .config import HubConfig, load_config, save_config

__all__ = [
    # Exceptions
    "HubError", "CatalogError", "CatalogCorruptError", "StorageUnavailableError",
    "ApplicationNotFoundError", "ValidationError", "AuthError", "AuthenticationError",
    "NotAuthenticatedError", "ImageError", "UnsupportedImageError", "ImageReadError",
    "ConfigError", "InvalidConfigError", "TemplateError", "TemplateNotFoundError",
    "TemplateRenderError",
    # Decorators
    "handle_errors", "require_login",
    # Logging
    "setup_logging", "LogContext", "JSONFormatter",
    # Configuration
    "HubConfig", "load_config", "save_config",
]

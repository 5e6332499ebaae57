"""
AppReferenceHub Exception Hierarchy

Provides clear, actionable error messages with structured information
for logging, user feedback, and programmatic error handling.
"""

from typing import Optional, Dict, Any


class HubError(Exception):
    """
    Base exception for all AppReferenceHub errors.

    Attributes:
        message: Human-readable error message
        code: Machine-readable error code
        details: Additional context as key-value pairs
        cause: Original exception that caused this error
        recoverable: Whether the error is recoverable
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
        recoverable: bool = True,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}
        self.cause = cause
        self.recoverable = recoverable

    def __str__(self):
        s = f"[{self.code}] {self.message}"
        if self.details:
            s += f" (details: {self.details})"
        if self.cause:
            s += f" caused by: {self.cause}"
        return s

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
            "recoverable": self.recoverable,
        }


# =============================================================================
# Catalog errors
# =============================================================================

class CatalogError(HubError):
    """Base for catalog storage errors."""
    pass


class CatalogCorruptError(CatalogError):
    """Stored collection exists but cannot be decoded."""
    def __init__(self, location: str, reason: str, cause: Optional[Exception] = None):
        super().__init__(
            f"Catalog data at {location} is corrupt: {reason}",
            code="CATALOG_CORRUPT",
            details={"location": location, "reason": reason},
            cause=cause,
        )


class StorageUnavailableError(CatalogError):
    """Persistent medium cannot be read or written."""
    def __init__(self, location: str, operation: str, cause: Optional[Exception] = None):
        super().__init__(
            f"Cannot {operation} catalog storage at {location}",
            code="STORAGE_UNAVAILABLE",
            details={"location": location, "operation": operation},
            cause=cause,
            recoverable=False,
        )


class ApplicationNotFoundError(CatalogError):
    """Application does not exist."""
    def __init__(self, app_id: str):
        super().__init__(
            f"Application '{app_id}' not found",
            code="APPLICATION_NOT_FOUND",
            details={"app_id": app_id},
        )


# =============================================================================
# Validation errors
# =============================================================================

class ValidationError(HubError):
    """One or more form fields are invalid."""
    def __init__(self, errors: Dict[str, str]):
        fields = ", ".join(f"{name}: {reason}" for name, reason in errors.items())
        super().__init__(
            f"Invalid application fields ({fields})",
            code="VALIDATION_FAILED",
            details={"fields": dict(errors)},
        )
        self.errors = dict(errors)


# =============================================================================
# Authentication errors
# =============================================================================

class AuthError(HubError):
    """Base for authentication errors."""
    pass


class AuthenticationError(AuthError):
    """Login rejected."""
    def __init__(self, email: str):
        super().__init__(
            "Invalid email or password",
            code="LOGIN_FAILED",
            details={"email": email},
        )


class NotAuthenticatedError(AuthError):
    """Operation requires a logged-in user."""
    def __init__(self, operation: str):
        super().__init__(
            f"You must be logged in to {operation}",
            code="NOT_AUTHENTICATED",
            details={"operation": operation},
        )


# =============================================================================
# Image errors
# =============================================================================

class ImageError(HubError):
    """Base for image conversion errors."""
    pass


class UnsupportedImageError(ImageError):
    """File is not a recognised image type."""
    def __init__(self, path: str, mime_type: Optional[str]):
        super().__init__(
            f"Not an image file: {path}",
            code="UNSUPPORTED_IMAGE",
            details={"path": path, "mime_type": mime_type},
        )


class ImageReadError(ImageError):
    """Image file could not be read."""
    def __init__(self, path: str, cause: Optional[Exception] = None):
        super().__init__(
            f"Cannot read image file: {path}",
            code="IMAGE_READ_FAILED",
            details={"path": path},
            cause=cause,
        )


# =============================================================================
# Configuration errors
# =============================================================================

class ConfigError(HubError):
    """Base for configuration errors."""
    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration."""
    def __init__(self, field: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration: {field}={value}: {reason}",
            code="INVALID_CONFIG",
            details={"field": field, "value": str(value), "reason": reason},
        )


# =============================================================================
# Template errors
# =============================================================================

class TemplateError(HubError):
    """Template-related errors."""
    pass


class TemplateNotFoundError(TemplateError):
    """Template not found."""
    def __init__(self, template_name: str):
        super().__init__(
            f"Template not found: {template_name}",
            code="TEMPLATE_NOT_FOUND",
            details={"template": template_name},
        )


class TemplateRenderError(TemplateError):
    """Template rendering failed."""
    def __init__(self, template_name: str, reason: str):
        super().__init__(
            f"Failed to render template '{template_name}': {reason}",
            code="TEMPLATE_RENDER_FAILED",
            details={"template": template_name, "reason": reason},
        )

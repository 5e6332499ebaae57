"""
Error Handling Decorators

Provides decorators for consistent error handling and access checks
across AppReferenceHub.
"""

from __future__ import annotations

import functools
import logging
from typing import Type, Callable, Any, Optional

from .exceptions import NotAuthenticatedError

logger = logging.getLogger(__name__)


def handle_errors(
    *exception_types: Type[Exception],
    default: Any = None,
    log_level: int = logging.ERROR,
    reraise: bool = False,
    message: Optional[str] = None,
):
    """
    Decorator to handle exceptions consistently.

    Args:
        exception_types: Exception types to catch (default: Exception)
        default: Value to return on error
        log_level: Logging level for errors
        reraise: Whether to re-raise after logging
        message: Custom error message prefix

    Example:
        @handle_errors(OSError, ValueError, default=None)
        def read_preference(path):
            ...
    """
    if not exception_types:
        exception_types = (Exception,)

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except exception_types as e:
                prefix = message or f"{func.__name__} failed"
                logger.log(
                    log_level,
                    f"{prefix}: {e}",
                    exc_info=log_level >= logging.ERROR,
                )
                if reraise:
                    raise
                return default
        return wrapper
    return decorator


def require_login(session_factory: Callable[..., Any], operation: Optional[str] = None):
    """
    Decorator that refuses to run unless a user is logged in.

    The session factory receives the same arguments as the wrapped
    function and must return an object with ``current_user()``.

    Args:
        session_factory: Callable returning the active session
        operation: Operation name for the error message

    Example:
        @require_login(lambda args: get_session(args), operation="add applications")
        def cmd_add(args):
            ...
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            session = session_factory(*args, **kwargs)
            user = session.current_user()
            if user is None:
                logger.warning(f"Refused {func.__name__}: no user logged in")
                raise NotAuthenticatedError(operation or func.__name__)
            return func(*args, **kwargs)
        return wrapper
    return decorator

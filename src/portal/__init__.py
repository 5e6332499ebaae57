"""
AppReferenceHub Portal

Form validation and HTML rendering for the listing and admin pages.
"""

from .forms import ApplicationForm, validate_application
from .renderer import PageRenderer, write_page, format_date

__all__ = [
    "ApplicationForm",
    "validate_application",
    "PageRenderer",
    "write_page",
    "format_date",
]

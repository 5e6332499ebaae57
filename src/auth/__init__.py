"""
AppReferenceHub Auth

Login session stub gating the admin tools.
"""

from .session import AuthSession, User, DEMO_EMAIL, DEMO_PASSWORD

__all__ = [
    "AuthSession",
    "User",
    "DEMO_EMAIL",
    "DEMO_PASSWORD",
]

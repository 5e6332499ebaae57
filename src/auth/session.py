"""
Admin session stub.

A single admin account checked against configured credentials. The
logged-in user is kept in a small JSON file so separate CLI runs share
the session. This gates the admin tools only; it is not a security
boundary.
"""

from __future__ import annotations

import hmac
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Dict, Any, Union

from common.decorators import handle_errors
from common.exceptions import AuthenticationError
from utils.atomic_write import atomic_write_json

logger = logging.getLogger(__name__)

DEMO_EMAIL = "admin@example.com"
DEMO_PASSWORD = "password123"


@dataclass(frozen=True)
class User:
    """Logged-in identity."""
    id: str
    email: str
    is_admin: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "email": self.email, "isAdmin": self.is_admin}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        return cls(
            id=str(data["id"]),
            email=str(data["email"]),
            is_admin=bool(data.get("isAdmin", False)),
        )


class AuthSession:
    """
    File-backed login session.

    Example:
        session = AuthSession(Path("~/.config/refhub/session.json").expanduser())
        session.login("admin@example.com", "password123")
        session.current_user()  # User(id="1", ...)
    """

    def __init__(
        self,
        session_path: Union[str, Path],
        admin_email: str = DEMO_EMAIL,
        admin_password: str = DEMO_PASSWORD,
    ):
        self.session_path = Path(session_path)
        self._admin_email = admin_email
        self._admin_password = admin_password

    def login(self, email: str, password: str) -> User:
        """
        Log in with the admin credentials.

        Raises:
            AuthenticationError: if the credentials do not match
        """
        email_ok = email.strip().lower() == self._admin_email.lower()
        password_ok = hmac.compare_digest(
            password.encode("utf-8"), self._admin_password.encode("utf-8")
        )
        if not (email_ok and password_ok):
            logger.warning(f"Failed login attempt for {email}")
            raise AuthenticationError(email)

        user = User(id="1", email=self._admin_email, is_admin=True)
        atomic_write_json(self.session_path, {"user": user.to_dict()}, mode=0o600)
        logger.info(f"User {user.email} logged in")
        return user

    def logout(self) -> None:
        """End the session. Logging out twice is harmless."""
        user = self.current_user()
        self.session_path.unlink(missing_ok=True)
        if user:
            logger.info(f"User {user.email} logged out")

    @handle_errors(OSError, ValueError, KeyError, TypeError, default=None,
                   log_level=logging.WARNING, message="Ignoring unreadable session")
    def current_user(self) -> Optional[User]:
        """Return the logged-in user, or None."""
        if not self.session_path.exists():
            return None
        data = json.loads(self.session_path.read_text(encoding="utf-8"))
        return User.from_dict(data["user"])

    @property
    def is_authenticated(self) -> bool:
        return self.current_user() is not None

"""
AppReferenceHub configuration.

Settings live in ``~/.config/refhub/config.json``; every key is optional
and falls back to the defaults below. ``REFHUB_DATA_DIR`` and
``REFHUB_CONFIG_DIR`` override the two directories.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional, Dict, Any, Union

from utils.atomic_write import atomic_write_json

from .exceptions import InvalidConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.json"


def _default_data_dir() -> Path:
    return Path.home() / ".local/share/refhub"


def _default_config_dir() -> Path:
    return Path.home() / ".config/refhub"


@dataclass
class HubConfig:
    """Runtime settings for the catalog and its admin tools."""
    data_dir: Path = field(default_factory=_default_data_dir)
    config_dir: Path = field(default_factory=_default_config_dir)
    storage_key: str = "applications"
    strict_storage: bool = False
    admin_email: str = "admin@example.com"
    admin_password: str = "password123"
    default_language: str = "en"
    log_file: Optional[Path] = None
    json_logs: bool = False

    @property
    def session_path(self) -> Path:
        return self.config_dir / "session.json"

    @property
    def preference_path(self) -> Path:
        return self.config_dir / "preferences.json"

    @property
    def templates_dir(self) -> Path:
        return self.config_dir / "templates"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "data_dir": str(self.data_dir),
            "config_dir": str(self.config_dir),
            "storage_key": self.storage_key,
            "strict_storage": self.strict_storage,
            "admin_email": self.admin_email,
            "admin_password": self.admin_password,
            "default_language": self.default_language,
            "log_file": str(self.log_file) if self.log_file else None,
            "json_logs": self.json_logs,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HubConfig":
        """Create from dictionary, rejecting unknown keys and bad types."""
        known = {f.name for f in fields(cls)}
        for key in data:
            if key not in known:
                raise InvalidConfigError(key, data[key], "unknown setting")

        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            if key in ("data_dir", "config_dir"):
                if not isinstance(value, str) or not value:
                    raise InvalidConfigError(key, value, "expected a directory path")
                kwargs[key] = Path(value).expanduser()
            elif key == "log_file":
                if value is not None and not isinstance(value, str):
                    raise InvalidConfigError(key, value, "expected a file path")
                kwargs[key] = Path(value).expanduser() if value else None
            elif key in ("strict_storage", "json_logs"):
                if not isinstance(value, bool):
                    raise InvalidConfigError(key, value, "expected true or false")
                kwargs[key] = value
            else:
                if not isinstance(value, str) or not value:
                    raise InvalidConfigError(key, value, "expected a non-empty string")
                kwargs[key] = value

        return cls(**kwargs)


def load_config(path: Optional[Union[str, Path]] = None) -> HubConfig:
    """
    Load configuration.

    Args:
        path: Explicit config file; defaults to the file in the config dir

    Returns:
        Merged configuration.
    """
    config_dir = Path(os.environ.get("REFHUB_CONFIG_DIR") or _default_config_dir())
    config_path = Path(path) if path else config_dir / CONFIG_FILENAME

    data: Dict[str, Any] = {}
    if config_path.exists():
        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise InvalidConfigError(str(config_path), "<file>", f"unreadable: {e}")
        if not isinstance(data, dict):
            raise InvalidConfigError(str(config_path), "<file>", "expected a JSON object")
        logger.debug(f"Loaded configuration from {config_path}")

    data.setdefault("config_dir", str(config_dir))
    if os.environ.get("REFHUB_DATA_DIR"):
        data["data_dir"] = os.environ["REFHUB_DATA_DIR"]

    return HubConfig.from_dict(data)


def save_config(config: HubConfig, path: Optional[Union[str, Path]] = None) -> Path:
    """Write configuration to disk atomically and return the path."""
    config_path = Path(path) if path else config.config_dir / CONFIG_FILENAME
    atomic_write_json(config_path, config.to_dict(), mode=0o600)
    logger.info(f"Saved configuration to {config_path}")
    return config_path

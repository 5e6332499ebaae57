"""
Page Renderer

Renders the public listing and the admin dashboard to HTML with Jinja2,
loading templates from several locations with fallback support.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, List, Sequence, Union

from jinja2 import (
    ChoiceLoader, Environment, FileSystemLoader, TemplateNotFound,
    TemplateError as JinjaTemplateError, select_autoescape,
)

from auth.session import User
from catalog.models import Application
from common.exceptions import TemplateNotFoundError, TemplateRenderError
from i18n.language import Translator
from utils.atomic_write import atomic_write_text

logger = logging.getLogger(__name__)

HOME_TEMPLATE = "home.html.j2"
ADMIN_TEMPLATE = "admin.html.j2"


def format_date(value: str) -> str:
    """Render a createdAt stamp as YYYY-MM-DD; unparsable values pass through."""
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date().isoformat()
    except (AttributeError, ValueError):
        return value


class PageRenderer:
    """
    Renders catalog pages from Jinja2 templates.

    Search order:
    1. Extra directories passed by the caller (user overrides)
    2. Templates shipped with the package
    """

    PACKAGE_TEMPLATES = Path(__file__).parent / "templates"

    def __init__(self, additional_paths: Optional[List[Path]] = None):
        self._paths = [Path(p) for p in (additional_paths or [])]
        self._paths.append(self.PACKAGE_TEMPLATES)
        self._env = self._create_environment()

    def _create_environment(self) -> Environment:
        """Create Jinja2 environment with all template paths."""
        loaders = []

        for path in self._paths:
            if path.exists() and path.is_dir():
                loaders.append(FileSystemLoader(str(path)))
                logger.debug(f"Added template path: {path}")

        env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(enabled_extensions=("html", "html.j2", "j2")),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        env.filters["format_date"] = format_date
        return env

    def render(self, name: str, **variables) -> str:
        """
        Render a template with variables.

        Raises:
            TemplateNotFoundError: no search path holds the template
            TemplateRenderError: the template failed while rendering
        """
        try:
            template = self._env.get_template(name)
        except TemplateNotFound:
            raise TemplateNotFoundError(name)

        try:
            return template.render(**variables)
        except JinjaTemplateError as e:
            raise TemplateRenderError(name, str(e))

    def render_home(self, applications: Sequence[Application], translator: Translator) -> str:
        """Render the public listing page."""
        return self.render(
            HOME_TEMPLATE,
            applications=list(applications),
            t=translator.t,
            lang=translator.code,
            dir=translator.direction,
        )

    def render_admin(
        self,
        applications: Sequence[Application],
        translator: Translator,
        user: User,
    ) -> str:
        """Render the admin dashboard for a logged-in user."""
        return self.render(
            ADMIN_TEMPLATE,
            applications=list(applications),
            t=translator.t,
            lang=translator.code,
            dir=translator.direction,
            user=user,
        )

    def list_templates(self) -> List[str]:
        """List all available page templates."""
        templates = []
        for path in self._paths:
            if path.exists():
                templates.extend(f.name for f in path.glob("*.html.j2"))
        return sorted(set(templates))


def write_page(path: Union[str, Path], html: str) -> Path:
    """Write a rendered page atomically."""
    path = Path(path)
    atomic_write_text(path, html)
    logger.info(f"Wrote page to {path}")
    return path

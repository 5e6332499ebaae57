"""
Tests for HTML page rendering.
"""

import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from auth.session import User
from catalog.models import ApplicationPatch
from common.exceptions import TemplateNotFoundError, TemplateRenderError
from i18n import Language, Translator
from portal.renderer import PageRenderer, format_date, write_page


@pytest.fixture
def renderer():
    return PageRenderer()


@pytest.fixture
def admin_user():
    return User(id="1", email="admin@example.com")


class TestFormatDate:

    def test_iso_stamp(self):
        assert format_date("2024-03-05T10:20:30.000Z") == "2024-03-05"

    def test_unparsable_passes_through(self):
        assert format_date("yesterday") == "yesterday"


class TestHomePage:

    def test_lists_applications_in_order(self, renderer, catalog):
        html = renderer.render_home(catalog.list(), Translator(Language.EN))

        positions = [html.index(f'id="app-{app_id}"') for app_id in ("1", "2", "3")]
        assert positions == sorted(positions)
        assert "Code Generator" in html
        assert "View Application" in html

    def test_language_and_direction(self, renderer, catalog):
        html = renderer.render_home(catalog.list(), Translator(Language.AR))

        assert '<html lang="ar" dir="rtl">' in html
        assert "عرض التطبيق" in html

    def test_empty_state(self, renderer):
        html = renderer.render_home([], Translator(Language.EN))

        assert "No applications found" in html
        assert "<article" not in html

    def test_values_are_escaped(self, renderer, sample_application):
        app = ApplicationPatch(name="<script>alert(1)</script>").apply(sample_application)

        html = renderer.render_home([app], Translator())

        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;" in html

    def test_missing_image_omits_img(self, renderer, sample_application):
        app = ApplicationPatch(image_url="").apply(sample_application)

        assert "<img" not in renderer.render_home([app], Translator())


class TestAdminPage:

    def test_table_rows(self, renderer, catalog, admin_user):
        html = renderer.render_admin(catalog.list(), Translator(), admin_user)

        assert "Admin Dashboard" in html
        assert "admin@example.com" in html
        assert "refhub delete 2" in html
        assert "2024-01-01" in html

    def test_empty_row(self, renderer, admin_user):
        html = renderer.render_admin([], Translator(), admin_user)

        assert 'class="empty"' in html


class TestTemplateLookup:

    def test_lists_packaged_templates(self, renderer):
        assert {"base.html.j2", "home.html.j2", "admin.html.j2"} <= set(renderer.list_templates())

    def test_override_directory_wins(self, tmp_path, sample_application):
        (tmp_path / "home.html.j2").write_text("custom {{ applications|length }}")

        html = PageRenderer([tmp_path]).render_home([sample_application], Translator())

        assert html == "custom 1"

    def test_missing_template(self, renderer):
        with pytest.raises(TemplateNotFoundError):
            renderer.render("nope.html.j2")

    def test_render_failure(self, tmp_path):
        (tmp_path / "broken.html.j2").write_text("{{ missing.attr }}")

        with pytest.raises(TemplateRenderError):
            PageRenderer([tmp_path]).render("broken.html.j2")


def test_write_page(tmp_path):
    path = write_page(tmp_path / "site" / "index.html", "<p>hi</p>")

    assert path.read_text() == "<p>hi</p>"

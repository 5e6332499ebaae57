"""
Tests for the application catalog store.
"""

import json
import threading

import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from catalog.app_catalog import ApplicationCatalog
from catalog.models import ApplicationPatch
from catalog.seed import DEFAULT_APPLICATIONS
from catalog.storage import MemoryStorage
from common.exceptions import CatalogCorruptError, StorageUnavailableError


def _new_tool(catalog, name="Tool"):
    return catalog.create(
        name=name,
        description="d",
        link="https://x",
        image_url="https://y",
    )


class TestSeeding:
    """Tests for first-use seeding."""

    @pytest.mark.unit
    def test_empty_medium_lists_seed_entries(self, memory_storage):
        catalog = ApplicationCatalog(memory_storage)

        apps = catalog.list()

        assert [a.name for a in apps] == [e["name"] for e in DEFAULT_APPLICATIONS]
        assert len({a.id for a in apps}) == 3
        assert all(a.created_at for a in apps)

    @pytest.mark.unit
    def test_initialize_reports_seeding(self, memory_storage):
        catalog = ApplicationCatalog(memory_storage)

        assert catalog.initialize() is True
        assert catalog.initialize() is False

    @pytest.mark.unit
    def test_initialize_is_idempotent(self, memory_storage, fixed_clock):
        catalog = ApplicationCatalog(memory_storage, clock=fixed_clock)

        catalog.initialize()
        first = catalog.list()
        catalog.initialize()

        assert catalog.list() == first

    @pytest.mark.unit
    def test_empty_collection_is_not_reseeded(self):
        storage = MemoryStorage(raw="[]")
        catalog = ApplicationCatalog(storage)

        assert catalog.initialize() is False
        assert catalog.list() == []
        assert storage.writes == 0

    @pytest.mark.unit
    def test_custom_seed(self, memory_storage):
        catalog = ApplicationCatalog(memory_storage, seed=[])

        assert catalog.initialize() is True
        assert catalog.list() == []

    @pytest.mark.unit
    def test_deleting_everything_does_not_reseed(self, catalog):
        for app in catalog.list():
            catalog.delete(app.id)

        assert catalog.list() == []
        assert catalog.initialize() is False


class TestCorruptStorage:
    """Corrupt data is reseeded by default and raised in strict mode."""

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", [
        "{not json",
        '{"apps": []}',
        '[1, 2]',
        '[{"id": "1", "name": "missing fields"}]',
    ])
    def test_corrupt_data_is_reseeded(self, raw):
        storage = MemoryStorage(raw=raw)
        catalog = ApplicationCatalog(storage)

        apps = catalog.list()

        assert len(apps) == 3
        assert storage.read() == apps

    @pytest.mark.unit
    def test_strict_mode_raises(self):
        catalog = ApplicationCatalog(MemoryStorage(raw="{not json"), strict=True)

        with pytest.raises(CatalogCorruptError):
            catalog.list()

    @pytest.mark.unit
    def test_duplicate_ids_are_corrupt(self, catalog):
        storage = catalog.storage
        record = json.loads(storage.raw)[0]
        storage.raw = json.dumps([record, record])

        strict = ApplicationCatalog(storage, strict=True)
        with pytest.raises(CatalogCorruptError, match="duplicate"):
            strict.list()


class TestCreate:
    """Tests for create()."""

    @pytest.mark.unit
    def test_create_appends_with_fresh_id(self, catalog):
        before = catalog.list()

        app = _new_tool(catalog)

        assert app.id not in {a.id for a in before}
        assert app.created_at
        assert catalog.list()[-1] == app
        assert len(catalog.list()) == len(before) + 1

    @pytest.mark.unit
    def test_create_then_get_round_trip(self, catalog):
        app = _new_tool(catalog)

        assert catalog.get(app.id) == app

    @pytest.mark.unit
    def test_created_at_comes_from_clock(self, catalog):
        app = _new_tool(catalog)

        # Clock tick 1 stamped the seed entries
        assert app.created_at == "2024-01-01T00:00:02.000Z"

    @pytest.mark.unit
    def test_ids_are_unique(self, catalog):
        apps = [_new_tool(catalog, name=f"Tool {i}") for i in range(50)]

        assert len({a.id for a in apps}) == 50

    @pytest.mark.unit
    def test_custom_id_factory(self, memory_storage):
        catalog = ApplicationCatalog(memory_storage, seed=[], id_factory=lambda: "fixed")

        assert _new_tool(catalog).id == "fixed"

    @pytest.mark.unit
    def test_non_string_field_rejected(self, catalog):
        with pytest.raises(TypeError):
            catalog.create(name="Tool", description=None, link="https://x", image_url="")

    @pytest.mark.unit
    def test_failed_write_leaves_catalog_unchanged(self, catalog, monkeypatch):
        before = catalog.list()

        def broken_write(applications):
            raise StorageUnavailableError("<memory>", "write")

        monkeypatch.setattr(catalog.storage, "write", broken_write)

        with pytest.raises(StorageUnavailableError):
            _new_tool(catalog)

        assert catalog.list() == before


class TestGet:
    """Tests for get()."""

    @pytest.mark.unit
    def test_get_existing(self, catalog):
        assert catalog.get("1").name == "Code Generator"

    @pytest.mark.unit
    def test_get_missing_returns_none(self, catalog):
        assert catalog.get("missing-id") is None

    @pytest.mark.unit
    def test_contains_and_len(self, catalog):
        assert "2" in catalog
        assert "missing-id" not in catalog
        assert len(catalog) == 3


class TestUpdate:
    """Tests for update()."""

    @pytest.mark.unit
    def test_update_changes_only_given_field(self, catalog):
        before = catalog.get("1")

        updated = catalog.update("1", ApplicationPatch(description="X"))

        assert updated.description == "X"
        assert updated.name == before.name
        assert updated.link == before.link
        assert updated.image_url == before.image_url
        assert updated.id == before.id
        assert updated.created_at == before.created_at
        assert catalog.get("1") == updated

    @pytest.mark.unit
    def test_update_can_clear_image(self, catalog):
        updated = catalog.update("2", ApplicationPatch(image_url=""))

        assert updated.image_url == ""

    @pytest.mark.unit
    def test_update_missing_returns_none(self, catalog):
        before = catalog.list()
        writes = catalog.storage.writes

        assert catalog.update("missing-id", ApplicationPatch(name="Z")) is None
        assert catalog.list() == before
        assert catalog.storage.writes == writes

    @pytest.mark.unit
    def test_empty_patch_does_not_write(self, catalog):
        writes = catalog.storage.writes

        result = catalog.update("1", ApplicationPatch())

        assert result == catalog.get("1")
        assert catalog.storage.writes == writes


class TestDelete:
    """Tests for delete()."""

    @pytest.mark.unit
    def test_delete_existing(self, catalog):
        assert catalog.delete("2") is True
        assert catalog.get("2") is None

    @pytest.mark.unit
    def test_delete_missing(self, catalog):
        before = catalog.list()
        writes = catalog.storage.writes

        assert catalog.delete("missing-id") is False
        assert catalog.list() == before
        assert catalog.storage.writes == writes


class TestOrdering:
    """List order follows insertion order."""

    @pytest.mark.unit
    def test_updates_do_not_reorder(self, catalog):
        created = _new_tool(catalog)
        catalog.update("1", ApplicationPatch(name="Renamed"))

        assert [a.id for a in catalog.list()] == ["1", "2", "3", created.id]

    @pytest.mark.unit
    def test_delete_keeps_survivor_order(self, catalog):
        a = _new_tool(catalog, "A")
        b = _new_tool(catalog, "B")
        catalog.delete("2")

        assert [x.id for x in catalog.list()] == ["1", "3", a.id, b.id]


class TestConcurrency:
    """Mutations from several threads must not lose writes."""

    @pytest.mark.unit
    def test_parallel_creates(self, catalog):
        def worker(n):
            for i in range(10):
                _new_tool(catalog, name=f"T{n}-{i}")

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(catalog.list()) == 3 + 40


class TestFileCatalog:
    """Catalog backed by a JSON file."""

    @pytest.mark.integration
    def test_changes_survive_reopen(self, file_catalog):
        from catalog.storage import JsonFileStorage

        app = _new_tool(file_catalog)
        file_catalog.delete("1")

        reopened = ApplicationCatalog(JsonFileStorage(file_catalog.storage.data_dir))

        assert reopened.initialize() is False
        assert [a.id for a in reopened.list()] == ["2", "3", app.id]

    @pytest.mark.integration
    def test_corrupt_file_is_quarantined_and_reseeded(self, file_catalog):
        path = file_catalog.storage.path
        path.write_text("{broken", encoding="utf-8")

        apps = file_catalog.list()

        assert len(apps) == 3
        assert path.with_name(path.name + ".corrupt").read_text() == "{broken"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

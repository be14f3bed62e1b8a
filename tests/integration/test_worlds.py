import pytest
from sqlalchemy import inspect

from worldscribe import world as world_module
from worldscribe.db import database, migrations, models
from worldscribe.errors import ConflictError, NotConnectedError, NotFoundError, ValidationError
from worldscribe.world import WorldManager, create_world, list_worlds

pytestmark = pytest.mark.integration


def test_create_world_seeds_default_taxonomy(manager, worlds_folder):
    folder = create_world(worlds_folder, "Middle Earth")
    assert folder == worlds_folder / "Middle Earth"
    assert (folder / database.DATABASE_FILENAME).is_file()
    assert (folder / database.UPLOADS_DIRNAME).is_dir()

    world = manager.open(folder)
    with world.session() as db:
        assert db.query(models.Category).count() == 5
        assert db.query(models.Field).count() == 11
        assert db.query(models.Article).count() == 0


def test_create_world_creates_missing_worlds_folder(tmp_path):
    folder = create_world(tmp_path / "not" / "yet", "Narnia")
    assert folder.is_dir()


def test_create_world_conflict(worlds_folder):
    create_world(worlds_folder, "Narnia")
    with pytest.raises(ConflictError):
        create_world(worlds_folder, "Narnia")


def test_create_world_invalid_name_creates_nothing(worlds_folder):
    with pytest.raises(ValidationError):
        create_world(worlds_folder, "Bad:Name")
    assert list(worlds_folder.iterdir()) == []


def test_create_world_failure_removes_partial_folder(monkeypatch, worlds_folder):
    def boom(db):
        raise RuntimeError("seed failed")

    monkeypatch.setattr(world_module.repo_categories, "insert_default_categories", boom)
    with pytest.raises(RuntimeError):
        create_world(worlds_folder, "Broken")
    assert not (worlds_folder / "Broken").exists()


def test_list_worlds_paginates_sorted_folder_names(worlds_folder):
    for letter in "TSRQPONMLKJIHGFEDCBA":
        (worlds_folder / f"World {letter}").mkdir()
    (worlds_folder / "notes.txt").write_text("not a world")

    page = list_worlds(worlds_folder, 2, 5)
    assert page.items == ["World F", "World G", "World H", "World I", "World J"]
    assert page.has_more is True

    last = WorldManager.list_worlds(worlds_folder, 4, 5)
    assert last.items == ["World P", "World Q", "World R", "World S", "World T"]
    assert last.has_more is False


def test_list_worlds_missing_root(tmp_path):
    with pytest.raises(NotFoundError):
        list_worlds(tmp_path / "missing")


def test_open_nonexistent_world_clears_state(manager, world, tmp_path):
    assert manager.is_open
    with pytest.raises(NotFoundError, match="not found"):
        manager.open(tmp_path / "nowhere")
    assert manager.world is None
    assert manager.is_open is False
    with pytest.raises(NotConnectedError):
        manager.require_world()


def test_current_world_name_and_switching(manager, worlds_folder):
    with pytest.raises(NotConnectedError):
        manager.current_world_name()

    first = create_world(worlds_folder, "First")
    second = create_world(worlds_folder, "Second")
    manager.open(first)
    assert manager.current_world_name() == "First"
    manager.open(second)
    assert manager.current_world_name() == "Second"


def test_close_is_idempotent(manager, world):
    manager.close()
    manager.close()
    assert manager.world is None


def test_open_without_migrating_keeps_revision(manager, worlds_folder):
    folder = create_world(worlds_folder, "Old")
    engine = database.create_world_engine(folder)
    try:
        migrations.downgrade(engine, "3c1f0e2a9b7d")
        assert migrations.current_revision(engine) == "3c1f0e2a9b7d"
    finally:
        engine.dispose()

    world = manager.open(folder, migrate_to_latest=False)
    assert migrations.current_revision(world.engine) == "3c1f0e2a9b7d"

    world = manager.open(folder)
    assert migrations.current_revision(world.engine) == migrations.head_revision()


def test_open_folder_without_database_creates_schema(manager, worlds_folder):
    folder = worlds_folder / "Bare"
    folder.mkdir()
    world = manager.open(folder, migrate_to_latest=False)
    assert (folder / database.UPLOADS_DIRNAME).is_dir()
    assert "categories" in inspect(world.engine).get_table_names()

"""
World connection management.

A World is a folder holding ``database.sqlite`` and an ``uploads`` folder.
:class:`WorldManager` keeps at most one World open at a time; opening another
closes the current one first. The API layer uses the process-wide
``world_manager`` instance, while tests and scripts can build their own.
"""
from __future__ import annotations

import logging
import shutil
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from worldscribe.db import database, migrations
from worldscribe.db.pagination import Page, paginate_sequence
from worldscribe.db.repositories import categories as repo_categories
from worldscribe.errors import ConflictError, NotConnectedError, NotFoundError, ValidationError
from worldscribe.storage.images import ImageStore

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

FORBIDDEN_WORLD_NAME_CHARACTERS = ('/', '\\', '.', '<', '>', ':', '"', '|', '?', '*')


def validate_world_name(name: Optional[str]) -> str:
    """Return ``name`` if it is usable as a World folder name, else raise."""
    if not name:
        raise ValidationError("World name cannot be empty")
    if name.endswith(" "):
        raise ValidationError("World name cannot end on a space")
    if any(character in name for character in FORBIDDEN_WORLD_NAME_CHARACTERS):
        raise ValidationError("World name contains forbidden characters")
    if any(ord(character) < 32 or ord(character) == 127 for character in name):
        raise ValidationError("World name contains control characters")
    return name


@dataclass
class World:
    """Handle on an open World: its folder, database engine and image store."""

    folder_path: Path
    engine: Engine
    SessionLocal: sessionmaker
    images: ImageStore

    @property
    def name(self) -> str:
        return self.folder_path.name

    @contextmanager
    def session(self) -> Iterator[Session]:
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    def dispose(self) -> None:
        self.engine.dispose()


def _prepare_schema(engine: Engine, migrate_to_latest: bool) -> None:
    if migrate_to_latest or not database.has_tables(engine):
        migrations.upgrade(engine, "head")


def list_worlds(root_path: PathLike, page: Optional[int] = None, size: Optional[int] = None) -> Page[str]:
    """List World folder names under ``root_path`` in ascending order."""
    root = Path(root_path)
    if not root.is_dir():
        raise NotFoundError(f'Worlds folder "{root}" not found')
    names = sorted(entry.name for entry in root.iterdir() if entry.is_dir())
    return paginate_sequence(names, page, size)


def create_world(worlds_folder_path: PathLike, new_world_name: Optional[str]) -> Path:
    """Create a World folder with its database, uploads folder and default taxonomy."""
    name = validate_world_name(new_world_name)
    worlds_folder = Path(worlds_folder_path)
    world_folder = worlds_folder / name
    if world_folder.exists():
        raise ConflictError(f"A World already exists with the name {name}")

    worlds_folder.mkdir(parents=True, exist_ok=True)
    world_folder.mkdir()
    engine = None
    try:
        (world_folder / database.UPLOADS_DIRNAME).mkdir()
        engine = database.create_world_engine(world_folder)
        migrations.upgrade(engine, "head")
        db = database.make_session_factory(engine)()
        try:
            repo_categories.insert_default_categories(db)
        finally:
            db.close()
    except Exception:
        logger.error("world_create_failed: path=%s", world_folder, exc_info=True)
        if engine is not None:
            engine.dispose()
        shutil.rmtree(world_folder, ignore_errors=True)
        raise
    engine.dispose()
    logger.info("world_created: path=%s", world_folder)
    return world_folder


class WorldManager:
    """Tracks the single open World of this process."""

    def __init__(self):
        self._world: Optional[World] = None

    @property
    def world(self) -> Optional[World]:
        return self._world

    @property
    def is_open(self) -> bool:
        return self._world is not None

    def require_world(self) -> World:
        if self._world is None:
            raise NotConnectedError()
        return self._world

    def current_world_name(self) -> str:
        return self.require_world().name

    def open(self, world_folder_path: PathLike, migrate_to_latest: bool = True) -> World:
        """Open a World, closing whichever World was open before."""
        self.close()
        folder = Path(world_folder_path)
        if not folder.is_dir():
            raise NotFoundError(f'World at "{world_folder_path}" not found')

        engine = database.create_world_engine(folder)
        try:
            _prepare_schema(engine, migrate_to_latest)
            uploads = folder / database.UPLOADS_DIRNAME
            uploads.mkdir(exist_ok=True)
        except Exception:
            engine.dispose()
            logger.error("world_open_failed: path=%s", folder, exc_info=True)
            raise
        self._world = World(
            folder_path=folder,
            engine=engine,
            SessionLocal=database.make_session_factory(engine),
            images=ImageStore(uploads),
        )
        logger.info("world_opened: path=%s", folder)
        return self._world

    def close(self) -> None:
        """Release the open World, if any. Safe to call at any time."""
        world, self._world = self._world, None
        if world is None:
            return
        try:
            world.dispose()
        except Exception:
            logger.warning("world_dispose_failed: path=%s", world.folder_path, exc_info=True)
        logger.info("world_closed: path=%s", world.folder_path)

    # Aliases matching the operation names used by callers of the manager.
    create = staticmethod(create_world)
    list_worlds = staticmethod(list_worlds)


world_manager = WorldManager()

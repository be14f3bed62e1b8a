"""
Shared FastAPI dependencies.

``require_world`` is the not-connected guard: entity routers declare it so it
runs before any of their endpoints touch a database.
"""
from typing import Iterator

from fastapi import Depends
from sqlalchemy.orm import Session

from worldscribe.storage.images import ImageStore
from worldscribe.world import World, WorldManager, world_manager


def get_world_manager() -> WorldManager:
    return world_manager


def require_world(manager: WorldManager = Depends(get_world_manager)) -> World:
    return manager.require_world()


def get_db(world: World = Depends(require_world)) -> Iterator[Session]:
    """Dependency to get a session on the open World's database."""
    db = world.SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_images(world: World = Depends(require_world)) -> ImageStore:
    return world.images

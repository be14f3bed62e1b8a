"""
World API endpoints.

Create and list World folders, connect to or disconnect from a World, and
report the open World's name.
"""
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends

from worldscribe.db import schemas
from worldscribe.api.deps import get_world_manager
from worldscribe.utils.settings import get_settings
from worldscribe.world import WorldManager

router = APIRouter(tags=["worlds"])


@router.post("/worlds", response_model=schemas.Message)
def create_world_endpoint(
    payload: schemas.WorldCreate,
    manager: WorldManager = Depends(get_world_manager),
):
    worlds_folder = payload.worlds_folder_path or get_settings().worlds_folder
    manager.create(Path(worlds_folder), payload.new_world_name)
    return {"message": "Created World and default Categories successfully"}


@router.get("/worlds", response_model=schemas.PageOut[str])
def list_worlds_endpoint(
    path: Optional[str] = None,
    page: Optional[int] = None,
    size: Optional[int] = None,
    manager: WorldManager = Depends(get_world_manager),
):
    result = manager.list_worlds(Path(path) if path else get_settings().worlds_folder, page, size)
    return {"items": result.items, "has_more": result.has_more}


@router.post("/world-accesses", response_model=schemas.Message)
def world_access_endpoint(
    payload: Optional[schemas.WorldAccess] = None,
    manager: WorldManager = Depends(get_world_manager),
):
    if payload is None or not payload.world_folder_path:
        manager.close()
        return {"message": "Disconnected from World successfully"}
    manager.open(payload.world_folder_path)
    return {"message": "Connected to World successfully"}


@router.get("/worlds/current/name", response_model=schemas.WorldName)
def current_world_name_endpoint(manager: WorldManager = Depends(get_world_manager)):
    return {"name": manager.current_world_name()}

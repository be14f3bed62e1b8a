from typing import Optional

from pydantic import BaseModel


class WorldCreate(BaseModel):
    new_world_name: str
    worlds_folder_path: Optional[str] = None


class WorldAccess(BaseModel):
    world_folder_path: Optional[str] = None


class WorldName(BaseModel):
    name: str


class Message(BaseModel):
    message: str

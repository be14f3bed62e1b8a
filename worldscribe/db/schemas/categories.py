from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field as PydanticField

from worldscribe.db.types import ImageDescriptor


class CategoryBase(BaseModel):
    name: str = PydanticField(min_length=1)
    description: Optional[str] = None


class CategoryCreate(CategoryBase):
    pass


class CategoryNameUpdate(BaseModel):
    name: str = PydanticField(min_length=1)


class CategoryDescriptionUpdate(BaseModel):
    description: str


class Category(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    image: Optional[ImageDescriptor] = None
    icon: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class CategoryMetadata(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class FieldCreate(BaseModel):
    name: str = PydanticField(min_length=1)


class Field(BaseModel):
    id: int
    name: str
    category_id: int
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)

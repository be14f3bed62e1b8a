from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field as PydanticField

from worldscribe.db.types import ImageDescriptor


class ArticleCreate(BaseModel):
    name: str = PydanticField(min_length=1)
    category_id: int


class ArticleNameUpdate(BaseModel):
    name: str = PydanticField(min_length=1)


class Article(BaseModel):
    id: int
    name: str
    category_id: int
    image: Optional[ImageDescriptor] = None
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class ArticleMetadata(BaseModel):
    id: int
    name: str
    category_id: int
    category_name: str
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class FieldValueUpdate(BaseModel):
    value: str = ""


class FieldValue(BaseModel):
    id: int
    value: str
    field_id: int
    article_id: int
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class ArticleFieldValue(BaseModel):
    field_id: int
    field_name: str
    value: str
    model_config = ConfigDict(from_attributes=True)

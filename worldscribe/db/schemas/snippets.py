from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field as PydanticField


class SnippetCreate(BaseModel):
    name: str = PydanticField(min_length=1)
    content: str = ""
    article_id: int


class SnippetUpdate(BaseModel):
    name: Optional[str] = PydanticField(default=None, min_length=1)
    content: Optional[str] = None


class Snippet(BaseModel):
    id: int
    name: str
    content: str
    article_id: int
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ConnectionCreate(BaseModel):
    main_article_id: int
    other_article_id: int
    other_article_role: str = ""
    description_content: Optional[str] = None
    description_id: Optional[int] = None


class ConnectionPairCreate(BaseModel):
    article_id: int
    other_article_id: int
    # Role of other_article_id seen from article_id, and the reverse
    other_article_role: str = ""
    article_role: str = ""
    description_content: str = ""


class ConnectionRoleUpdate(BaseModel):
    other_article_role: str


class ConnectionDescriptionUpdate(BaseModel):
    content: str


class Connection(BaseModel):
    id: int
    main_article_id: int
    other_article_id: int
    other_article_role: str
    connection_description_id: int
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class ConnectionDescription(BaseModel):
    id: int
    content: str
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class ArticleConnection(BaseModel):
    """Outgoing connection of an article, with the display data a client needs."""

    id: int
    main_article_id: int
    other_article_id: int
    other_article_name: str
    other_article_role: str
    connection_description_id: int
    description: str
    model_config = ConfigDict(from_attributes=True)

"""
Domain-split Pydantic schemas with a compatibility aggregator.
"""

from .common import PageOut
from .categories import (
    CategoryBase,
    CategoryCreate,
    CategoryNameUpdate,
    CategoryDescriptionUpdate,
    Category,
    CategoryMetadata,
    FieldCreate,
    Field,
)
from .articles import (
    ArticleCreate,
    ArticleNameUpdate,
    Article,
    ArticleMetadata,
    FieldValueUpdate,
    FieldValue,
    ArticleFieldValue,
)
from .connections import (
    ConnectionCreate,
    ConnectionPairCreate,
    ConnectionRoleUpdate,
    ConnectionDescriptionUpdate,
    Connection,
    ConnectionDescription,
    ArticleConnection,
)
from .snippets import SnippetCreate, SnippetUpdate, Snippet
from .worlds import WorldCreate, WorldAccess, WorldName, Message
from worldscribe.db.types import ImageDescriptor

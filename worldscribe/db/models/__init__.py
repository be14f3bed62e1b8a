"""
Domain-split SQLAlchemy models.

Exposes `Base`, `now_utc`, and all ORM classes of a World database.
"""

from .base import Base, now_utc, TimestampedMixin  # re-export

from .categories import Category, Field
from .articles import Article, FieldValue
from .connections import Connection, ConnectionDescription
from .snippets import Snippet

__all__ = [
    # base
    "Base",
    "now_utc",
    "TimestampedMixin",
    # categories
    "Category",
    "Field",
    # articles
    "Article",
    "FieldValue",
    # connections
    "Connection",
    "ConnectionDescription",
    # snippets
    "Snippet",
]

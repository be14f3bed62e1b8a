from sqlalchemy import Column, String, Text, ForeignKey, Index, Integer, UniqueConstraint
from sqlalchemy.orm import relationship

from .base import Base, TimestampedMixin
from worldscribe.db.types import ImageDescriptorType


class Article(TimestampedMixin, Base):
    __tablename__ = 'articles'
    name = Column(String(255), nullable=False)
    category_id = Column(Integer, ForeignKey('categories.id'), nullable=False)
    image = Column(ImageDescriptorType(), nullable=True)

    category = relationship("Category")
    field_values = relationship("FieldValue", order_by="FieldValue.field_id", viewonly=True)
    snippets = relationship("Snippet", order_by="Snippet.id", viewonly=True)

    __table_args__ = (
        Index('idx_articles_category_id', 'category_id'),
        Index('idx_articles_name', 'name'),
    )


class FieldValue(TimestampedMixin, Base):
    __tablename__ = 'field_values'
    value = Column(Text, nullable=False, default='')
    field_id = Column(Integer, ForeignKey('fields.id'), nullable=False)
    article_id = Column(Integer, ForeignKey('articles.id'), nullable=False)

    article = relationship("Article")
    field = relationship("Field")

    __table_args__ = (
        UniqueConstraint('field_id', 'article_id', name='uq_field_values_field_article'),
        Index('idx_field_values_article_id', 'article_id'),
    )

from sqlalchemy import Column, String, Text, ForeignKey, Index, Integer
from sqlalchemy.orm import relationship

from .base import Base, TimestampedMixin
from worldscribe.db.types import ImageDescriptorType


class Category(TimestampedMixin, Base):
    __tablename__ = 'categories'
    name = Column(String(255), nullable=False, unique=True)
    description = Column(Text, nullable=True)
    image = Column(ImageDescriptorType(), nullable=True)
    icon = Column(String(255), nullable=True)

    fields = relationship("Field", order_by="Field.id", viewonly=True)
    articles = relationship("Article", order_by="Article.id", viewonly=True)


class Field(TimestampedMixin, Base):
    __tablename__ = 'fields'
    name = Column(String(255), nullable=False)
    category_id = Column(Integer, ForeignKey('categories.id'), nullable=False)

    category = relationship("Category")

    __table_args__ = (
        Index('idx_fields_category_id', 'category_id'),
    )

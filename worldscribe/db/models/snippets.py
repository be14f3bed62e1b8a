from sqlalchemy import Column, String, Text, ForeignKey, Index, Integer
from sqlalchemy.orm import relationship

from .base import Base, TimestampedMixin


class Snippet(TimestampedMixin, Base):
    __tablename__ = 'snippets'
    name = Column(String(255), nullable=False)
    content = Column(Text, nullable=False, default='')
    article_id = Column(Integer, ForeignKey('articles.id'), nullable=False)

    article = relationship("Article")

    __table_args__ = (
        Index('idx_snippets_article_id', 'article_id'),
    )

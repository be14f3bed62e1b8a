from sqlalchemy import Column, Text, ForeignKey, Index, Integer
from sqlalchemy.orm import relationship

from .base import Base, TimestampedMixin


class ConnectionDescription(TimestampedMixin, Base):
    __tablename__ = 'connection_descriptions'
    content = Column(Text, nullable=False, default='')

    connections = relationship("Connection", viewonly=True)


class Connection(TimestampedMixin, Base):
    __tablename__ = 'connections'
    main_article_id = Column(Integer, ForeignKey('articles.id'), nullable=False)
    other_article_id = Column(Integer, ForeignKey('articles.id'), nullable=False)
    # Relationship of the other article, seen from the main article
    other_article_role = Column(Text, nullable=False, default='')
    connection_description_id = Column(Integer, ForeignKey('connection_descriptions.id'), nullable=False)

    main_article = relationship("Article", foreign_keys=[main_article_id])
    other_article = relationship("Article", foreign_keys=[other_article_id])
    connection_description = relationship("ConnectionDescription")

    __table_args__ = (
        Index('idx_connections_main_article_id', 'main_article_id'),
        Index('idx_connections_other_article_id', 'other_article_id'),
        Index('idx_connections_description_id', 'connection_description_id'),
    )

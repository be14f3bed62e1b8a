"""
Article repository functions.

Implements article CRUD, listings, image handling and the cascading delete
that removes connections, field values and snippets with the article.
"""
from __future__ import annotations

import logging
from typing import Optional, Tuple

from sqlalchemy import or_
from sqlalchemy.orm import Session

from worldscribe.db import models, schemas
from worldscribe.db.pagination import Page, paginate_by_name
from worldscribe.db.repositories import connections as repo_connections
from worldscribe.db.repositories import images as repo_images
from worldscribe.db.repositories.lookups import get_article, get_category
from worldscribe.db.types import ImageDescriptor
from worldscribe.storage.images import ImageStore

logger = logging.getLogger(__name__)


def create_article(db: Session, name: str, category_id: int) -> models.Article:
    """Create an article plus one empty FieldValue per field of its category."""
    get_category(db, category_id)
    db_article = models.Article(name=name, category_id=category_id)
    try:
        db.add(db_article)
        db.flush()
        field_ids = [
            field_id
            for (field_id,) in db.query(models.Field.id)
            .filter(models.Field.category_id == category_id)
            .order_by(models.Field.id)
        ]
        for field_id in field_ids:
            db.add(models.FieldValue(field_id=field_id, article_id=db_article.id, value=''))
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_article)
    logger.info("article_created: id=%s category_id=%s field_values=%d", db_article.id, category_id, len(field_ids))
    return db_article


def get_articles(db: Session, page: Optional[int] = None, size: Optional[int] = None) -> Page:
    return paginate_by_name(db.query(models.Article), models.Article, page, size)


def get_articles_by_category(
    db: Session, category_id: int, page: Optional[int] = None, size: Optional[int] = None
) -> Page:
    get_category(db, category_id)
    q = db.query(models.Article).filter(models.Article.category_id == category_id)
    return paginate_by_name(q, models.Article, page, size)


def get_article_metadata(db: Session, article_id: int) -> schemas.ArticleMetadata:
    get_article(db, article_id)
    row = (
        db.query(
            models.Article.id,
            models.Article.name,
            models.Article.category_id,
            models.Category.name.label("category_name"),
            models.Article.created_at,
            models.Article.updated_at,
        )
        .join(models.Category, models.Category.id == models.Article.category_id)
        .filter(models.Article.id == article_id)
        .one()
    )
    return schemas.ArticleMetadata.model_validate(row)


def update_article_name(db: Session, article_id: int, name: str) -> models.Article:
    db_article = get_article(db, article_id)
    db_article.name = name
    db.commit()
    db.refresh(db_article)
    return db_article


def set_article_image(
    db: Session, images: ImageStore, article_id: int, content: bytes, mimetype: str
) -> ImageDescriptor:
    db_article = get_article(db, article_id)
    return repo_images.set_image(db, images, db_article, content, mimetype)


def get_article_image(db: Session, images: ImageStore, article_id: int) -> Tuple[bytes, str]:
    return repo_images.get_image(images, get_article(db, article_id), "Article")


def delete_article_rows(db: Session, article_id: int) -> schemas.Article:
    """Remove an article and everything hanging off it, without committing.

    Order: connections on either endpoint, descriptions left unreferenced,
    field values, snippets, then the article row. Returns the pre-delete
    record; the image file is left for the caller to remove after commit.
    """
    db_article = get_article(db, article_id)
    deleted = schemas.Article.model_validate(db_article)

    connections = (
        db.query(models.Connection.id, models.Connection.connection_description_id)
        .filter(
            or_(
                models.Connection.main_article_id == article_id,
                models.Connection.other_article_id == article_id,
            )
        )
        .all()
    )
    if connections:
        db.query(models.Connection).filter(
            models.Connection.id.in_([c.id for c in connections])
        ).delete(synchronize_session=False)
        repo_connections.delete_orphaned_descriptions(
            db, [c.connection_description_id for c in connections]
        )

    db.query(models.FieldValue).filter(
        models.FieldValue.article_id == article_id
    ).delete(synchronize_session=False)
    db.query(models.Snippet).filter(
        models.Snippet.article_id == article_id
    ).delete(synchronize_session=False)
    db.delete(db_article)
    db.flush()
    return deleted


def delete_article(db: Session, images: ImageStore, article_id: int) -> schemas.Article:
    """Delete an article with its full cascade, then its image file."""
    try:
        deleted = delete_article_rows(db, article_id)
        db.commit()
    except Exception:
        db.rollback()
        raise
    images.delete(deleted.image)
    logger.info("article_deleted: id=%s", article_id)
    return deleted

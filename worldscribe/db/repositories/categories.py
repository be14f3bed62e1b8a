"""
Category repository functions.

Implements category CRUD, image handling, the default taxonomy seeded into new
Worlds and the cascading delete that removes every article of the category
before the category itself.
"""
from __future__ import annotations

import logging
from typing import Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from worldscribe.db import models, schemas
from worldscribe.db.pagination import Page, paginate_by_name
from worldscribe.db.repositories import articles as repo_articles
from worldscribe.db.repositories import images as repo_images
from worldscribe.db.repositories.lookups import get_category
from worldscribe.db.types import ImageDescriptor
from worldscribe.errors import ConflictError
from worldscribe.storage.images import ImageStore

logger = logging.getLogger(__name__)

# Seeded into every newly created World.
DEFAULT_CATEGORIES = (
    ("Concept", ("Description",)),
    ("Group", ("Mandate / Description", "History")),
    ("Item", ("Properties / Description", "History")),
    ("Person", ("Nicknames / Aliases", "Age", "Gender", "Short Bio")),
    ("Place", ("Description", "History")),
)


def _name_conflict(name: str) -> ConflictError:
    return ConflictError(f"The current World already has a Category named '{name}'")


def get_category_by_name(db: Session, name: str) -> Optional[models.Category]:
    return db.query(models.Category).filter(models.Category.name == name).first()


def create_category(db: Session, name: str, description: Optional[str] = None) -> models.Category:
    if get_category_by_name(db, name) is not None:
        raise _name_conflict(name)
    db_category = models.Category(name=name, description=description if description is not None else '')
    db.add(db_category)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise _name_conflict(name) from e
    db.refresh(db_category)
    logger.info("category_created: id=%s name=%s", db_category.id, name)
    return db_category


def insert_default_categories(db: Session) -> None:
    """Seed the fixed default taxonomy in a single transaction."""
    try:
        for category_name, field_names in DEFAULT_CATEGORIES:
            db_category = models.Category(name=category_name, description='')
            db.add(db_category)
            db.flush()
            for field_name in field_names:
                db.add(models.Field(name=field_name, category_id=db_category.id))
        db.commit()
    except Exception:
        db.rollback()
        raise


def get_categories(db: Session, page: Optional[int] = None, size: Optional[int] = None) -> Page:
    return paginate_by_name(db.query(models.Category), models.Category, page, size)


def get_category_metadata(db: Session, category_id: int) -> schemas.CategoryMetadata:
    return schemas.CategoryMetadata.model_validate(get_category(db, category_id))


def update_category_name(db: Session, category_id: int, name: str) -> models.Category:
    db_category = get_category(db, category_id)
    existing = get_category_by_name(db, name)
    if existing is not None and existing.id != db_category.id:
        raise _name_conflict(name)
    db_category.name = name
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise _name_conflict(name) from e
    db.refresh(db_category)
    return db_category


def update_category_description(db: Session, category_id: int, description: str) -> models.Category:
    db_category = get_category(db, category_id)
    db_category.description = description
    db.commit()
    db.refresh(db_category)
    return db_category


def set_category_image(
    db: Session, images: ImageStore, category_id: int, content: bytes, mimetype: str
) -> ImageDescriptor:
    db_category = get_category(db, category_id)
    return repo_images.set_image(db, images, db_category, content, mimetype)


def get_category_image(db: Session, images: ImageStore, category_id: int) -> Tuple[bytes, str]:
    return repo_images.get_image(images, get_category(db, category_id), "Category")


def delete_category(db: Session, images: ImageStore, category_id: int) -> schemas.Category:
    """Delete a category, all of its articles (full cascade) and its fields.

    Everything is removed in one transaction; image files of the deleted
    articles and then the category's own image are removed after commit.
    """
    db_category = get_category(db, category_id)
    deleted = schemas.Category.model_validate(db_category)
    article_images = []
    try:
        article_ids = [
            article_id
            for (article_id,) in db.query(models.Article.id)
            .filter(models.Article.category_id == category_id)
            .order_by(models.Article.id)
        ]
        for article_id in article_ids:
            article_images.append(repo_articles.delete_article_rows(db, article_id).image)
        db.query(models.Field).filter(
            models.Field.category_id == category_id
        ).delete(synchronize_session=False)
        db.delete(db_category)
        db.commit()
    except Exception:
        db.rollback()
        raise
    for descriptor in article_images:
        images.delete(descriptor)
    images.delete(deleted.image)
    logger.info("category_deleted: id=%s articles=%d", category_id, len(article_ids))
    return deleted

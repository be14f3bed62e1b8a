"""
Field repository functions.

Fields have no independent delete; they go away with their category.
"""
from __future__ import annotations

from typing import List

from sqlalchemy.orm import Session

from worldscribe.db import models
from worldscribe.db.repositories.lookups import get_category
from worldscribe.errors import NotFoundError


def get_field(db: Session, field_id: int) -> models.Field:
    db_field = db.query(models.Field).filter(models.Field.id == field_id).first()
    if db_field is None:
        raise NotFoundError(f"Field '{field_id}' not found")
    return db_field


def get_fields(db: Session, category_id: int) -> List[models.Field]:
    get_category(db, category_id)
    return (
        db.query(models.Field)
        .filter(models.Field.category_id == category_id)
        .order_by(models.Field.id)
        .all()
    )


def create_field(db: Session, category_id: int, name: str) -> models.Field:
    """Add a field to a category and an empty value for each of its existing articles."""
    get_category(db, category_id)
    db_field = models.Field(name=name, category_id=category_id)
    try:
        db.add(db_field)
        db.flush()
        for (article_id,) in db.query(models.Article.id).filter(models.Article.category_id == category_id):
            db.add(models.FieldValue(field_id=db_field.id, article_id=article_id, value=''))
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_field)
    return db_field

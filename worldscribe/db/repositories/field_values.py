"""
FieldValue repository functions.
"""
from __future__ import annotations

from typing import List

from sqlalchemy.orm import Session

from worldscribe.db import models, schemas
from worldscribe.db.repositories.fields import get_field
from worldscribe.db.repositories.lookups import get_article
from worldscribe.errors import ValidationError


def get_field_value(db: Session, field_id: int, article_id: int):
    return db.query(models.FieldValue).filter(
        models.FieldValue.field_id == field_id,
        models.FieldValue.article_id == article_id,
    ).first()


def update_field_value(db: Session, field_id: int, article_id: int, value: str) -> models.FieldValue:
    """Set the value of a field on an article, creating the row if it is missing.

    A missing row is only created when the field belongs to the article's
    category.
    """
    db_value = get_field_value(db, field_id, article_id)
    if db_value is None:
        db_article = get_article(db, article_id)
        db_field = get_field(db, field_id)
        if db_field.category_id != db_article.category_id:
            raise ValidationError(
                f"Field '{field_id}' does not belong to the Category of Article '{article_id}'"
            )
        db_value = models.FieldValue(field_id=field_id, article_id=article_id, value=value)
        db.add(db_value)
    else:
        db_value.value = value
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_value)
    return db_value


def get_field_values(db: Session, article_id: int) -> List[schemas.ArticleFieldValue]:
    get_article(db, article_id)
    rows = (
        db.query(
            models.Field.id.label("field_id"),
            models.Field.name.label("field_name"),
            models.FieldValue.value,
        )
        .join(models.FieldValue, models.FieldValue.field_id == models.Field.id)
        .filter(models.FieldValue.article_id == article_id)
        .order_by(models.Field.id)
        .all()
    )
    return [schemas.ArticleFieldValue.model_validate(row) for row in rows]

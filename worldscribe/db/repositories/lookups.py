"""
Existence lookups shared by the repositories.

Kept free of other repository imports so any repository can use them without
creating an import cycle.
"""
from sqlalchemy.orm import Session

from worldscribe.db import models
from worldscribe.errors import NotFoundError


def get_category(db: Session, category_id: int) -> models.Category:
    db_category = db.query(models.Category).filter(models.Category.id == category_id).first()
    if db_category is None:
        raise NotFoundError(f"Category '{category_id}' not found")
    return db_category


def get_article(db: Session, article_id: int) -> models.Article:
    db_article = db.query(models.Article).filter(models.Article.id == article_id).first()
    if db_article is None:
        raise NotFoundError(f"Article '{article_id}' not found")
    return db_article

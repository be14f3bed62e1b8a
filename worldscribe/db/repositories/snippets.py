"""
Snippet repository functions.

Snippets are free-standing notes attached to one article.
"""
from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from worldscribe.db import models, schemas
from worldscribe.db.repositories.lookups import get_article
from worldscribe.errors import NotFoundError


def get_snippet(db: Session, snippet_id: int) -> models.Snippet:
    db_snippet = db.query(models.Snippet).filter(models.Snippet.id == snippet_id).first()
    if db_snippet is None:
        raise NotFoundError(f"Snippet '{snippet_id}' not found")
    return db_snippet


def create_snippet(db: Session, name: str, content: str, article_id: int) -> models.Snippet:
    get_article(db, article_id)
    db_snippet = models.Snippet(name=name, content=content or '', article_id=article_id)
    db.add(db_snippet)
    db.commit()
    db.refresh(db_snippet)
    return db_snippet


def update_snippet(
    db: Session, snippet_id: int, *, name: Optional[str] = None, content: Optional[str] = None
) -> models.Snippet:
    db_snippet = get_snippet(db, snippet_id)
    if name is not None:
        db_snippet.name = name
    if content is not None:
        db_snippet.content = content
    db.commit()
    db.refresh(db_snippet)
    return db_snippet


def delete_snippet(db: Session, snippet_id: int) -> schemas.Snippet:
    db_snippet = get_snippet(db, snippet_id)
    deleted = schemas.Snippet.model_validate(db_snippet)
    try:
        db.delete(db_snippet)
        db.commit()
    except Exception:
        db.rollback()
        raise
    return deleted


def get_snippets_for_article(db: Session, article_id: int) -> List[models.Snippet]:
    get_article(db, article_id)
    return (
        db.query(models.Snippet)
        .filter(models.Snippet.article_id == article_id)
        .order_by(models.Snippet.name.asc(), models.Snippet.id.asc())
        .all()
    )

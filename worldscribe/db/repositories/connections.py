"""
Connection repository functions.

Connections are directed (main -> other). A two-way relationship is two rows
sharing one ConnectionDescription; a description is removed as soon as no
connection references it any more.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from worldscribe.db import models, schemas
from worldscribe.db.repositories.lookups import get_article
from worldscribe.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def get_connection(db: Session, connection_id: int) -> models.Connection:
    db_connection = db.query(models.Connection).filter(models.Connection.id == connection_id).first()
    if db_connection is None:
        raise NotFoundError(f"Connection '{connection_id}' not found")
    return db_connection


def get_connection_description(db: Session, description_id: int) -> models.ConnectionDescription:
    db_description = (
        db.query(models.ConnectionDescription)
        .filter(models.ConnectionDescription.id == description_id)
        .first()
    )
    if db_description is None:
        raise NotFoundError(f"Connection description '{description_id}' not found")
    return db_description


def count_description_references(db: Session, description_id: int) -> int:
    return (
        db.query(func.count(models.Connection.id))
        .filter(models.Connection.connection_description_id == description_id)
        .scalar()
    )


def delete_orphaned_descriptions(db: Session, description_ids: Iterable[int]) -> List[int]:
    """Delete the given descriptions that no connection references any more.

    Does not commit; callers run this inside their own transaction after the
    referencing connections are gone.
    """
    removed = []
    for description_id in sorted(set(description_ids)):
        if count_description_references(db, description_id) == 0:
            db.query(models.ConnectionDescription).filter(
                models.ConnectionDescription.id == description_id
            ).delete(synchronize_session=False)
            removed.append(description_id)
    if removed:
        logger.info("connection_descriptions_removed: ids=%s", removed)
    return removed


def _validate_endpoints(db: Session, main_article_id: int, other_article_id: int) -> None:
    if main_article_id == other_article_id:
        raise ValidationError("An Article cannot be connected to itself")
    get_article(db, main_article_id)
    get_article(db, other_article_id)


def create_connection(
    db: Session,
    main_article_id: int,
    other_article_id: int,
    other_article_role: str = "",
    *,
    description_content: Optional[str] = None,
    description_id: Optional[int] = None,
) -> models.Connection:
    """Create one directed connection.

    Exactly one of ``description_content`` (creates a new description) or
    ``description_id`` (shares an existing one) must be given.
    """
    if (description_content is None) == (description_id is None):
        raise ValidationError("Provide either description content or an existing description id, but not both")
    _validate_endpoints(db, main_article_id, other_article_id)
    if description_id is not None:
        get_connection_description(db, description_id)
    try:
        if description_id is None:
            db_description = models.ConnectionDescription(content=description_content)
            db.add(db_description)
            db.flush()
            description_id = db_description.id
        db_connection = models.Connection(
            main_article_id=main_article_id,
            other_article_id=other_article_id,
            other_article_role=other_article_role or "",
            connection_description_id=description_id,
        )
        db.add(db_connection)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_connection)
    return db_connection


def create_connection_pair(
    db: Session,
    article_id: int,
    other_article_id: int,
    *,
    other_article_role: str = "",
    article_role: str = "",
    description_content: str = "",
) -> List[models.Connection]:
    """Create A->B and B->A sharing one new description, in one transaction."""
    _validate_endpoints(db, article_id, other_article_id)
    try:
        db_description = models.ConnectionDescription(content=description_content or "")
        db.add(db_description)
        db.flush()
        forward = models.Connection(
            main_article_id=article_id,
            other_article_id=other_article_id,
            other_article_role=other_article_role or "",
            connection_description_id=db_description.id,
        )
        backward = models.Connection(
            main_article_id=other_article_id,
            other_article_id=article_id,
            other_article_role=article_role or "",
            connection_description_id=db_description.id,
        )
        db.add_all([forward, backward])
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(forward)
    db.refresh(backward)
    return [forward, backward]


def update_connection_role(db: Session, connection_id: int, other_article_role: str) -> models.Connection:
    db_connection = get_connection(db, connection_id)
    db_connection.other_article_role = other_article_role
    db.commit()
    db.refresh(db_connection)
    return db_connection


def update_connection_description(db: Session, description_id: int, content: str) -> models.ConnectionDescription:
    db_description = get_connection_description(db, description_id)
    db_description.content = content
    db.commit()
    db.refresh(db_description)
    return db_description


def delete_connection(db: Session, connection_id: int) -> schemas.Connection:
    """Delete a connection and, if it was the last reference, its description."""
    db_connection = get_connection(db, connection_id)
    deleted = schemas.Connection.model_validate(db_connection)
    try:
        db.delete(db_connection)
        db.flush()
        delete_orphaned_descriptions(db, [deleted.connection_description_id])
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info("connection_deleted: id=%s", connection_id)
    return deleted


def get_connections_for_article(db: Session, article_id: int) -> List[schemas.ArticleConnection]:
    """Outgoing connections of an article, ordered by the other article's name."""
    get_article(db, article_id)
    rows = (
        db.query(
            models.Connection.id,
            models.Connection.main_article_id,
            models.Connection.other_article_id,
            models.Article.name.label("other_article_name"),
            models.Connection.other_article_role,
            models.Connection.connection_description_id,
            models.ConnectionDescription.content.label("description"),
        )
        .join(models.Article, models.Article.id == models.Connection.other_article_id)
        .join(
            models.ConnectionDescription,
            models.ConnectionDescription.id == models.Connection.connection_description_id,
        )
        .filter(models.Connection.main_article_id == article_id)
        .order_by(models.Article.name.asc(), models.Connection.id.asc())
        .all()
    )
    return [schemas.ArticleConnection.model_validate(row) for row in rows]

"""
Connection API endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from worldscribe.db import schemas
from worldscribe.db.repositories import connections as repo_connections
from worldscribe.api.deps import get_db, require_world

router = APIRouter(tags=["connections"], dependencies=[Depends(require_world)])


@router.post("/connections", response_model=schemas.Connection)
def create_connection_endpoint(payload: schemas.ConnectionCreate, db: Session = Depends(get_db)):
    return repo_connections.create_connection(
        db,
        payload.main_article_id,
        payload.other_article_id,
        payload.other_article_role,
        description_content=payload.description_content,
        description_id=payload.description_id,
    )


@router.post("/connections/pairs", response_model=List[schemas.Connection])
def create_connection_pair_endpoint(payload: schemas.ConnectionPairCreate, db: Session = Depends(get_db)):
    return repo_connections.create_connection_pair(
        db,
        payload.article_id,
        payload.other_article_id,
        other_article_role=payload.other_article_role,
        article_role=payload.article_role,
        description_content=payload.description_content,
    )


@router.patch("/connections/{connection_id}/role", response_model=schemas.Connection)
def update_connection_role_endpoint(
    connection_id: int,
    payload: schemas.ConnectionRoleUpdate,
    db: Session = Depends(get_db),
):
    return repo_connections.update_connection_role(db, connection_id, payload.other_article_role)


@router.delete("/connections/{connection_id}", response_model=schemas.Connection)
def delete_connection_endpoint(connection_id: int, db: Session = Depends(get_db)):
    return repo_connections.delete_connection(db, connection_id)


@router.patch("/connection-descriptions/{description_id}", response_model=schemas.ConnectionDescription)
def update_connection_description_endpoint(
    description_id: int,
    payload: schemas.ConnectionDescriptionUpdate,
    db: Session = Depends(get_db),
):
    return repo_connections.update_connection_description(db, description_id, payload.content)

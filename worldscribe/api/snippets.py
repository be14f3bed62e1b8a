"""
Snippet API endpoints.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from worldscribe.db import schemas
from worldscribe.db.repositories import snippets as repo_snippets
from worldscribe.api.deps import get_db, require_world

router = APIRouter(prefix="/snippets", tags=["snippets"], dependencies=[Depends(require_world)])


@router.post("", response_model=schemas.Snippet)
def create_snippet_endpoint(payload: schemas.SnippetCreate, db: Session = Depends(get_db)):
    return repo_snippets.create_snippet(db, payload.name, payload.content, payload.article_id)


@router.patch("/{snippet_id}", response_model=schemas.Snippet)
def update_snippet_endpoint(snippet_id: int, payload: schemas.SnippetUpdate, db: Session = Depends(get_db)):
    return repo_snippets.update_snippet(db, snippet_id, name=payload.name, content=payload.content)


@router.delete("/{snippet_id}", response_model=schemas.Snippet)
def delete_snippet_endpoint(snippet_id: int, db: Session = Depends(get_db)):
    return repo_snippets.delete_snippet(db, snippet_id)

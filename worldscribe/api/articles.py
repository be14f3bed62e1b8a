"""
Article API endpoints.

Create, list, rename, illustrate and delete articles, plus the per-article
field values, connections and snippets.
"""
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Header, Response
from sqlalchemy.orm import Session

from worldscribe.db import schemas
from worldscribe.db.repositories import articles as repo_articles
from worldscribe.db.repositories import connections as repo_connections
from worldscribe.db.repositories import field_values as repo_field_values
from worldscribe.db.repositories import snippets as repo_snippets
from worldscribe.api.deps import get_db, get_images, require_world
from worldscribe.storage.images import ImageStore

router = APIRouter(prefix="/articles", tags=["articles"], dependencies=[Depends(require_world)])


@router.post("", response_model=schemas.Article)
def create_article_endpoint(payload: schemas.ArticleCreate, db: Session = Depends(get_db)):
    return repo_articles.create_article(db, payload.name, payload.category_id)


@router.get("", response_model=schemas.PageOut[schemas.Article])
def list_articles_endpoint(
    page: Optional[int] = None,
    size: Optional[int] = None,
    db: Session = Depends(get_db),
):
    result = repo_articles.get_articles(db, page, size)
    return schemas.PageOut[schemas.Article](
        items=[schemas.Article.model_validate(a) for a in result.items],
        has_more=result.has_more,
    )


@router.get("/{article_id}/metadata", response_model=schemas.ArticleMetadata)
def get_article_metadata_endpoint(article_id: int, db: Session = Depends(get_db)):
    return repo_articles.get_article_metadata(db, article_id)


@router.patch("/{article_id}/name", response_model=schemas.Article)
def update_article_name_endpoint(
    article_id: int,
    payload: schemas.ArticleNameUpdate,
    db: Session = Depends(get_db),
):
    return repo_articles.update_article_name(db, article_id, payload.name)


@router.put("/{article_id}/image", response_model=schemas.Message)
def set_article_image_endpoint(
    article_id: int,
    content: bytes = Body(..., media_type="image/*"),
    content_type: Optional[str] = Header(default=None),
    db: Session = Depends(get_db),
    images: ImageStore = Depends(get_images),
):
    repo_articles.set_article_image(db, images, article_id, content, content_type)
    return {"message": f"image has been uploaded for article: {article_id}"}


@router.get("/{article_id}/image")
def get_article_image_endpoint(
    article_id: int,
    db: Session = Depends(get_db),
    images: ImageStore = Depends(get_images),
):
    content, mimetype = repo_articles.get_article_image(db, images, article_id)
    return Response(content=content, media_type=mimetype)


@router.delete("/{article_id}", response_model=schemas.Article)
def delete_article_endpoint(
    article_id: int,
    db: Session = Depends(get_db),
    images: ImageStore = Depends(get_images),
):
    return repo_articles.delete_article(db, images, article_id)


@router.get("/{article_id}/field-values", response_model=List[schemas.ArticleFieldValue])
def list_field_values_endpoint(article_id: int, db: Session = Depends(get_db)):
    return repo_field_values.get_field_values(db, article_id)


@router.put("/{article_id}/field-values/{field_id}", response_model=schemas.FieldValue)
def update_field_value_endpoint(
    article_id: int,
    field_id: int,
    payload: schemas.FieldValueUpdate,
    db: Session = Depends(get_db),
):
    return repo_field_values.update_field_value(db, field_id, article_id, payload.value)


@router.get("/{article_id}/connections", response_model=List[schemas.ArticleConnection])
def list_article_connections_endpoint(article_id: int, db: Session = Depends(get_db)):
    return repo_connections.get_connections_for_article(db, article_id)


@router.get("/{article_id}/snippets", response_model=List[schemas.Snippet])
def list_article_snippets_endpoint(article_id: int, db: Session = Depends(get_db)):
    return repo_snippets.get_snippets_for_article(db, article_id)

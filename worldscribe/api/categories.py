"""
Category API endpoints.

Create, list, rename, describe, illustrate and delete categories, plus the
per-category article and field listings.
"""
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Header, Response
from sqlalchemy.orm import Session

from worldscribe.db import schemas
from worldscribe.db.repositories import articles as repo_articles
from worldscribe.db.repositories import categories as repo_categories
from worldscribe.db.repositories import fields as repo_fields
from worldscribe.api.deps import get_db, get_images, require_world
from worldscribe.storage.images import ImageStore

router = APIRouter(prefix="/categories", tags=["categories"], dependencies=[Depends(require_world)])


@router.post("", response_model=schemas.Category)
def create_category_endpoint(payload: schemas.CategoryCreate, db: Session = Depends(get_db)):
    return repo_categories.create_category(db, payload.name, payload.description)


@router.get("", response_model=schemas.PageOut[schemas.Category])
def list_categories_endpoint(
    page: Optional[int] = None,
    size: Optional[int] = None,
    db: Session = Depends(get_db),
):
    result = repo_categories.get_categories(db, page, size)
    return schemas.PageOut[schemas.Category](
        items=[schemas.Category.model_validate(c) for c in result.items],
        has_more=result.has_more,
    )


@router.get("/{category_id}/metadata", response_model=schemas.CategoryMetadata)
def get_category_metadata_endpoint(category_id: int, db: Session = Depends(get_db)):
    return repo_categories.get_category_metadata(db, category_id)


@router.patch("/{category_id}/name", response_model=schemas.Category)
def update_category_name_endpoint(
    category_id: int,
    payload: schemas.CategoryNameUpdate,
    db: Session = Depends(get_db),
):
    return repo_categories.update_category_name(db, category_id, payload.name)


@router.patch("/{category_id}/description", response_model=schemas.Category)
def update_category_description_endpoint(
    category_id: int,
    payload: schemas.CategoryDescriptionUpdate,
    db: Session = Depends(get_db),
):
    return repo_categories.update_category_description(db, category_id, payload.description)


@router.put("/{category_id}/image", response_model=schemas.Message)
def set_category_image_endpoint(
    category_id: int,
    content: bytes = Body(..., media_type="image/*"),
    content_type: Optional[str] = Header(default=None),
    db: Session = Depends(get_db),
    images: ImageStore = Depends(get_images),
):
    repo_categories.set_category_image(db, images, category_id, content, content_type)
    return {"message": f"image has been uploaded for category: {category_id}"}


@router.get("/{category_id}/image")
def get_category_image_endpoint(
    category_id: int,
    db: Session = Depends(get_db),
    images: ImageStore = Depends(get_images),
):
    content, mimetype = repo_categories.get_category_image(db, images, category_id)
    return Response(content=content, media_type=mimetype)


@router.delete("/{category_id}", response_model=schemas.Category)
def delete_category_endpoint(
    category_id: int,
    db: Session = Depends(get_db),
    images: ImageStore = Depends(get_images),
):
    return repo_categories.delete_category(db, images, category_id)


@router.get("/{category_id}/articles", response_model=schemas.PageOut[schemas.Article])
def list_category_articles_endpoint(
    category_id: int,
    page: Optional[int] = None,
    size: Optional[int] = None,
    db: Session = Depends(get_db),
):
    result = repo_articles.get_articles_by_category(db, category_id, page, size)
    return schemas.PageOut[schemas.Article](
        items=[schemas.Article.model_validate(a) for a in result.items],
        has_more=result.has_more,
    )


@router.post("/{category_id}/fields", response_model=schemas.Field)
def create_field_endpoint(category_id: int, payload: schemas.FieldCreate, db: Session = Depends(get_db)):
    return repo_fields.create_field(db, category_id, payload.name)


@router.get("/{category_id}/fields", response_model=List[schemas.Field])
def list_fields_endpoint(category_id: int, db: Session = Depends(get_db)):
    return repo_fields.get_fields(db, category_id)

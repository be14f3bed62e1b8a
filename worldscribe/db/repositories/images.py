"""
Image helpers shared by the category and article repositories.
"""
from __future__ import annotations

import logging
from typing import Tuple

from sqlalchemy.orm import Session

from worldscribe.db.types import ImageDescriptor
from worldscribe.errors import NotFoundError
from worldscribe.storage.images import ImageStore

logger = logging.getLogger(__name__)


def set_image(db: Session, images: ImageStore, entity, content: bytes, mimetype: str) -> ImageDescriptor:
    """Replace ``entity.image`` with a newly stored file.

    The new file is written first; a failed write raises before the row is
    touched. The previous file is removed only once the new descriptor is
    committed, and a missing previous file is not an error.
    """
    previous = entity.image
    descriptor = images.save(content, mimetype)
    entity.image = descriptor
    try:
        db.commit()
    except Exception:
        db.rollback()
        images.delete(descriptor)
        raise
    images.delete(previous)
    db.refresh(entity)
    return descriptor


def get_image(images: ImageStore, entity, label: str) -> Tuple[bytes, str]:
    """Return ``(content, mimetype)`` for the entity's image."""
    missing = NotFoundError(f"Image does not exist for {label} '{entity.id}'")
    descriptor = entity.image
    if descriptor is None:
        raise missing
    try:
        content = images.read(descriptor)
    except NotFoundError as e:
        logger.warning("image_reference_dangling: %s=%s filename=%s", label.lower(), entity.id, descriptor.filename)
        raise missing from e
    return content, descriptor.mimetype

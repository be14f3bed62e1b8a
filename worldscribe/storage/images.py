"""
Image store: opaque files in a World's uploads folder.

Filenames are generated here and never taken from the upload. Database rows
only ever hold the resulting :class:`ImageDescriptor`.
"""
from __future__ import annotations

import logging
import uuid
from pathlib import Path
from typing import Optional

from worldscribe.db.types import ImageDescriptor
from worldscribe.errors import ImageStoreError, NotFoundError, ValidationError
from worldscribe.utils.settings import get_settings

logger = logging.getLogger(__name__)


class ImageStore:
    """Read, write and delete image files under a single root folder."""

    def __init__(self, root: Path, max_bytes: Optional[int] = None):
        self.root = Path(root)
        self.max_bytes = max_bytes if max_bytes is not None else get_settings().max_image_bytes

    def path_for(self, filename: str) -> Path:
        if not filename or "/" in filename or "\\" in filename or filename in (".", ".."):
            raise ValidationError(f"Invalid image filename '{filename}'")
        return self.root / filename

    def validate(self, content: bytes, mimetype: Optional[str]) -> None:
        if not content:
            raise ValidationError("Image content cannot be empty")
        if len(content) > self.max_bytes:
            raise ValidationError(f"Image exceeds the maximum size of {self.max_bytes} bytes")
        if not mimetype or not mimetype.lower().startswith("image/"):
            raise ValidationError(f"Unsupported image type '{mimetype}'")

    def save(self, content: bytes, mimetype: str) -> ImageDescriptor:
        """Write a new file under a freshly generated name."""
        self.validate(content, mimetype)
        filename = uuid.uuid4().hex
        path = self.path_for(filename)
        try:
            path.write_bytes(content)
        except OSError as e:
            logger.error("image_write_failed: path=%s error=%s", path, e)
            raise ImageStoreError(f"Failed to store image: {e}") from e
        logger.info("image_saved: filename=%s mimetype=%s bytes=%d", filename, mimetype, len(content))
        return ImageDescriptor(filename=filename, mimetype=mimetype)

    def read(self, descriptor: ImageDescriptor) -> bytes:
        path = self.path_for(descriptor.filename)
        try:
            return path.read_bytes()
        except FileNotFoundError as e:
            raise NotFoundError(f"Image file '{descriptor.filename}' is missing from the uploads folder") from e

    def exists(self, descriptor: ImageDescriptor) -> bool:
        return self.path_for(descriptor.filename).is_file()

    def delete(self, descriptor: Optional[ImageDescriptor]) -> bool:
        """Best-effort removal; returns whether a file was actually deleted."""
        if descriptor is None:
            return False
        try:
            path = self.path_for(descriptor.filename)
            path.unlink()
        except FileNotFoundError:
            logger.info("image_already_missing: filename=%s", descriptor.filename)
            return False
        except (OSError, ValidationError) as e:
            logger.warning("image_delete_failed: filename=%s error=%s", descriptor.filename, e)
            return False
        logger.info("image_deleted: filename=%s", descriptor.filename)
        return True

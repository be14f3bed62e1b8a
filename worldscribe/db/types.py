"""Custom SQLAlchemy types used by the persistence layer."""
from __future__ import annotations

import json
import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from sqlalchemy.types import Text, TypeDecorator

logger = logging.getLogger(__name__)


class ImageDescriptor(BaseModel):
    """Reference to a file in a World's uploads folder."""

    filename: str
    mimetype: str
    model_config = ConfigDict(frozen=True, from_attributes=True)

    def to_json(self) -> str:
        return json.dumps({"filename": self.filename, "mimetype": self.mimetype})

    @classmethod
    def from_json(cls, raw: str) -> "ImageDescriptor":
        return cls.model_validate(json.loads(raw))


FALLBACK_MIMETYPE = "application/octet-stream"


def _salvage_descriptor(raw: Any) -> Optional[ImageDescriptor]:
    """Recover the filename from a malformed stored descriptor.

    Accepts an object with a filename but no usable mimetype, or a bare
    filename (quoted or not). Anything else yields ``None``.
    """
    try:
        data = json.loads(raw)
    except (ValueError, TypeError):
        data = raw
    if isinstance(data, dict):
        filename, mimetype = data.get("filename"), data.get("mimetype")
    else:
        filename, mimetype = data, None
    if not isinstance(filename, str):
        return None
    filename = filename.strip()
    if not filename or filename in (".", "..") or any(c in filename for c in "/\\{}[]\" \t\n"):
        return None
    if not isinstance(mimetype, str) or not mimetype:
        mimetype = FALLBACK_MIMETYPE
    return ImageDescriptor(filename=filename, mimetype=mimetype)


class ImageDescriptorType(TypeDecorator[ImageDescriptor]):
    """Store an :class:`ImageDescriptor` as JSON text.

    ``None`` maps to SQL NULL; an empty object is never written. Rows written
    by hand (or by older clients) may hold slightly different JSON spacing, so
    reads parse rather than compare text. A malformed value still yields its
    filename when one can be recovered, so the file is not orphaned.
    """

    cache_ok = True
    impl = Text

    def process_bind_param(self, value: Any, dialect) -> Optional[str]:  # type: ignore[override]
        if value is None:
            return None
        if isinstance(value, ImageDescriptor):
            return value.to_json()
        if isinstance(value, dict):
            return ImageDescriptor.model_validate(value).to_json()
        if isinstance(value, str):
            return ImageDescriptor.from_json(value).to_json()
        raise TypeError(f"ImageDescriptorType expects an ImageDescriptor, got {type(value)!r}")

    def process_result_value(self, value: Any, dialect) -> Optional[ImageDescriptor]:  # type: ignore[override]
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        try:
            return ImageDescriptor.from_json(value)
        except (ValueError, TypeError):
            salvaged = _salvage_descriptor(value)
        if salvaged is None:
            logger.warning("Ignoring unreadable image descriptor: %r", value)
        else:
            logger.warning("Recovered partial image descriptor: %r", value)
        return salvaged

    def copy(self, **kwargs):  # type: ignore[override]
        return ImageDescriptorType()

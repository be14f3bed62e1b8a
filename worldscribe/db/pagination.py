"""
Page/size windowing shared by every listing.

Pages are 1-indexed. One extra row is fetched past the window so ``has_more``
is known without a COUNT query.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, List, Optional, Sequence, Tuple, TypeVar

from sqlalchemy.orm import Query

from worldscribe.utils.settings import get_settings

T = TypeVar("T")

# SQLite binds OFFSET and LIMIT as signed 64-bit integers
MAX_SQL_INTEGER = 2 ** 63 - 1


@dataclass
class Page(Generic[T]):
    items: List[T] = field(default_factory=list)
    has_more: bool = False


def normalize_page_params(page: Optional[int], size: Optional[int]) -> Tuple[int, int]:
    """Return a usable (page, size) pair.

    Missing values take the defaults (page 1, configured page size); values
    below 1 are clamped to 1 and sizes above the configured maximum are
    clamped to that maximum.
    """
    settings = get_settings()
    page = 1 if page is None else max(int(page), 1)
    size = settings.default_page_size if size is None else max(int(size), 1)
    return page, min(size, settings.max_page_size)


def paginate(query: Query, page: Optional[int], size: Optional[int], *order_by) -> Page:
    """Window an ORM query.

    ``order_by`` must end with the primary key so rows sharing a sort value
    keep a stable order across pages. Offsets past the largest SQL
    integer are clamped, so an absurd page number yields an empty page.
    """
    page, size = normalize_page_params(page, size)
    offset = min((page - 1) * size, MAX_SQL_INTEGER - (size + 1))
    rows = query.order_by(*order_by).offset(offset).limit(size + 1).all()
    return Page(items=rows[:size], has_more=len(rows) > size)


def paginate_by_name(query: Query, model, page: Optional[int], size: Optional[int]) -> Page:
    return paginate(query, page, size, model.name.asc(), model.id.asc())


def paginate_sequence(items: Sequence[T], page: Optional[int], size: Optional[int]) -> Page[T]:
    """Window an already-sorted in-memory sequence."""
    page, size = normalize_page_params(page, size)
    offset = (page - 1) * size
    window = list(items[offset:offset + size + 1])
    return Page(items=window[:size], has_more=len(window) > size)

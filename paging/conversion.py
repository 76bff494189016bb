"""Page number/size to offset/limit conversion."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from paging.contracts import Pageable
from paging.core.config import DEFAULT_MAX_PAGE_SIZE, get_settings

if TYPE_CHECKING:
    from paging.simple import OffsetParams

logger = logging.getLogger(__name__)


def normalize_page_number(page_number: int) -> int:
    """Treat page 0 as the first page."""
    return 1 if page_number == 0 else page_number


def build_page_size(
    page_size: int,
    default_page_size: int | None = None,
    max_page_size: int | None = None,
) -> int:
    """Resolve the effective limit for a requested page size.

    ``None`` for either setting selects the library-wide value: the configured
    default page size and ``DEFAULT_MAX_PAGE_SIZE``. A zero ``default_page_size``
    falls back to the configured default, a zero ``max_page_size`` falls back to
    ``DEFAULT_MAX_PAGE_SIZE``.
    """
    if default_page_size is None:
        default_page_size = get_settings().default_page_size
    if max_page_size is None:
        max_page_size = DEFAULT_MAX_PAGE_SIZE

    if page_size == 0:
        if default_page_size > 0:
            logger.debug("Page size unspecified, using default %s", default_page_size)
            return default_page_size
        fallback = get_settings().default_page_size
        logger.debug("Page size and default unspecified, using library default %s", fallback)
        return fallback

    ceiling = max_page_size if max_page_size > 0 else DEFAULT_MAX_PAGE_SIZE
    if page_size > ceiling:
        logger.debug("Page size %s clamped to %s", page_size, ceiling)
        return ceiling
    return page_size


def compute_offset(page_number: int, limit: int) -> int:
    """Offset of the first record on ``page_number`` for pages of ``limit`` records."""
    return (normalize_page_number(page_number) - 1) * limit


def compute_bounds(
    pageable: Pageable,
    default_page_size: int | None = None,
    max_page_size: int | None = None,
) -> tuple[int, int]:
    """Return ``(offset, limit)`` for any pageable object."""
    limit = build_page_size(pageable.page_size, default_page_size, max_page_size)
    return compute_offset(pageable.page_number, limit), limit


def to_offset_params(
    pageable: Pageable,
    default_page_size: int | None = None,
    max_page_size: int | None = None,
) -> OffsetParams:
    """Convert any pageable object into :class:`~paging.simple.OffsetParams`."""
    from paging.simple import OffsetParams

    offset, limit = compute_bounds(pageable, default_page_size, max_page_size)
    return OffsetParams(offset=offset, limit=limit)

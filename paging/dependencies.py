"""FastAPI dependencies binding page params from query strings."""

from __future__ import annotations

from fastapi import Depends, Query

from paging.core.config import U32_MAX
from paging.simple import OffsetParams, PageParams


def get_page_params(
    page_number: int = Query(default=0, ge=0, le=U32_MAX),
    page_size: int = Query(default=0, ge=0, le=U32_MAX),
) -> PageParams:
    """FastAPI dependency for page params; zero means unspecified."""
    return PageParams(page_number=page_number, page_size=page_size)


def get_offset_params(params: PageParams = Depends(get_page_params)) -> OffsetParams:
    """FastAPI dependency converting page params with the library defaults."""
    return params.into_offset()

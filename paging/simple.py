"""Plain page and offset parameter pairs."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from paging.conversion import to_offset_params
from paging.core.config import U32_MAX, U64_MAX


class PageParams(BaseModel):
    """Page query params without any extra payload.

    Example::

        PageParams(page_number=5, page_size=20).into_offset()
        # OffsetParams(offset=80, limit=20)
    """

    model_config = ConfigDict(frozen=True)

    page_number: int = Field(default=0, ge=0, le=U32_MAX)
    page_size: int = Field(default=0, ge=0, le=U32_MAX)

    def into_offset(
        self,
        default_page_size: int | None = None,
        max_page_size: int | None = None,
    ) -> OffsetParams:
        """Convert to offset params; without arguments the library defaults apply."""
        return to_offset_params(self, default_page_size, max_page_size)


class OffsetParams(BaseModel):
    """Offset query params computed from page params.

    Normally produced by ``PageParams.into_offset``. Building one directly
    skips the paging policy, so only the field bounds are checked.
    """

    model_config = ConfigDict(frozen=True)

    offset: int = Field(ge=0, le=U64_MAX)
    limit: int = Field(ge=0, le=U32_MAX)

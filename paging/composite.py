"""Page and offset requests carrying an arbitrary query payload."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from paging.conversion import to_offset_params
from paging.core.config import U32_MAX, U64_MAX

T = TypeVar("T")


class PageRequest(BaseModel, Generic[T]):
    """Page query with extra query params unrelated to pagination.

    ``payload`` is typically a filter object, e.g.
    ``PageRequest[UserQuery](page_number=10, page_size=20, payload=UserQuery(user_id=10))``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    page_number: int = Field(default=0, ge=0, le=U32_MAX)
    page_size: int = Field(default=0, ge=0, le=U32_MAX)
    payload: T | None = None

    def into_offset(
        self,
        default_page_size: int | None = None,
        max_page_size: int | None = None,
    ) -> OffsetRequest[T]:
        """Convert to an offset request that takes over this request's payload.

        The payload is handed over as the same object, it is neither copied nor
        validated again. Do not keep using this request after conversion.
        """
        bounds = to_offset_params(self, default_page_size, max_page_size)
        return _offset_request_type(self).model_construct(
            offset=bounds.offset,
            limit=bounds.limit,
            payload=self.payload,
        )


class OffsetRequest(BaseModel, Generic[T]):
    """Offset query with the payload of the page request it was built from."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    offset: int = Field(ge=0, le=U64_MAX)
    limit: int = Field(ge=0, le=U32_MAX)
    payload: T | None = None


def _offset_request_type(request: PageRequest[Any]) -> type[OffsetRequest[Any]]:
    """Return ``OffsetRequest`` parametrized like ``request``."""
    args = request.__pydantic_generic_metadata__["args"]
    if not args:
        return OffsetRequest
    return OffsetRequest[args]  # type: ignore[index]

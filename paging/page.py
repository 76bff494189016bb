"""Query result page."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar, overload

from pydantic import BaseModel, ConfigDict, Field

from paging.core.config import U64_MAX
from paging.shared.exceptions import PageIndexError

T = TypeVar("T")
D = TypeVar("D")


class Page(BaseModel, Generic[T]):
    """Records of the current page plus the total across all pages.

    ``total`` is whatever the query layer counted; it is not checked against
    the number of records. Iterating a page yields its records, not the
    model fields, so use ``model_dump()`` rather than ``dict(page)``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    records: tuple[T, ...] = ()
    total: int = Field(default=0, ge=0, le=U64_MAX)

    @property
    def size(self) -> int:
        """Number of records on this page."""
        return len(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def __getitem__(self, index: int) -> T:
        index = operator.index(index)
        if index < 0 or index >= len(self.records):
            raise PageIndexError(index, len(self.records))
        return self.records[index]

    @overload
    def get(self, index: int) -> T | None: ...

    @overload
    def get(self, index: int, default: D) -> T | D: ...

    def get(self, index, default=None):
        """Return the record at ``index`` or ``default`` when out of range."""
        try:
            return self[index]
        except PageIndexError:
            return default

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        return iter(self.records)


def build_page(records: Iterable[T], total: int) -> Page[T]:
    """Build page object from query result and total count."""
    return Page(records=tuple(records), total=total)

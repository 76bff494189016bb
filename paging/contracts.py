"""Capability contracts shared by the pagination parameter types."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Pageable(Protocol):
    """Anything that describes a page: 1-based number and page size.

    Zero in either field means "unspecified". Any object with these two
    attributes can be handed to :func:`paging.conversion.to_offset_params`.
    """

    @property
    def page_number(self) -> int:
        """Page number, 1-based."""

    @property
    def page_size(self) -> int:
        """Requested number of records per page."""


@runtime_checkable
class Offsetable(Protocol):
    """Anything that describes an offset-based query window."""

    @property
    def offset(self) -> int:
        """Number of records to skip."""

    @property
    def limit(self) -> int:
        """Maximum number of records to return."""

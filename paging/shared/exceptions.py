"""Custom exception hierarchy."""

from __future__ import annotations


class PagingException(Exception):
    """Base paging exception."""

    code = "paging_error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class PageIndexError(PagingException, IndexError):
    """Raised when a page is indexed past its last record."""

    code = "page_index_out_of_range"

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"page index {index} out of range for {size} records")

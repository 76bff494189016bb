"""Page/offset pagination parameters and result pages.

Requests usually arrive page based (``PageParams`` or ``PageRequest``) from a
client; before querying a datastore they are converted with ``into_offset``::

    from paging import PageParams

    offset_params = PageParams(page_number=5, page_size=20).into_offset()
    assert offset_params.offset == 80
    assert offset_params.limit == 20
"""

from paging.composite import OffsetRequest, PageRequest
from paging.contracts import Offsetable, Pageable
from paging.conversion import build_page_size, compute_offset, to_offset_params
from paging.core.config import DEFAULT_MAX_PAGE_SIZE, PAGE_SIZE_CHOICES, Settings, get_settings
from paging.page import Page, build_page
from paging.shared.exceptions import PageIndexError, PagingException
from paging.simple import OffsetParams, PageParams

__all__ = [
    "DEFAULT_MAX_PAGE_SIZE",
    "PAGE_SIZE_CHOICES",
    "OffsetParams",
    "OffsetRequest",
    "Offsetable",
    "Page",
    "PageIndexError",
    "PageParams",
    "PageRequest",
    "Pageable",
    "PagingException",
    "Settings",
    "build_page",
    "build_page_size",
    "compute_offset",
    "get_settings",
    "to_offset_params",
]

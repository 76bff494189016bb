from __future__ import annotations

import logging
from types import SimpleNamespace

import pytest

from paging.contracts import Offsetable, Pageable
from paging.conversion import build_page_size, compute_offset, to_offset_params
from paging.core.config import DEFAULT_MAX_PAGE_SIZE, U32_MAX, get_settings
from paging.simple import OffsetParams, PageParams


@pytest.mark.parametrize(
    ("page_size", "default_page_size", "max_page_size", "expected"),
    [
        (0, 0, 0, 20),
        (10, 0, 0, 10),
        (300, 0, 0, 100),
        (0, 6, 0, 6),
        (3, 6, 0, 3),
        (0, 6, 30, 6),
        (11, 6, 30, 11),
        (42, 6, 33, 33),
    ],
)
def test_build_page_size(
    page_size: int,
    default_page_size: int,
    max_page_size: int,
    expected: int,
) -> None:
    assert build_page_size(page_size, default_page_size, max_page_size) == expected


def test_build_page_size_without_settings_uses_library_defaults() -> None:
    assert build_page_size(0) == 20
    assert build_page_size(101) == DEFAULT_MAX_PAGE_SIZE
    assert build_page_size(100) == 100


def test_library_default_follows_configured_page_size(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PAGING_DEFAULT_PAGE_SIZE", "15")
    get_settings.cache_clear()

    assert build_page_size(0, 0, 0) == 15
    assert PageParams(page_number=3).into_offset() == OffsetParams(offset=30, limit=15)


def test_compute_offset_treats_page_zero_as_first_page() -> None:
    assert compute_offset(0, 25) == compute_offset(1, 25) == 0
    assert compute_offset(4, 25) == 75


def test_compute_offset_exceeds_32_bits() -> None:
    offset = compute_offset(U32_MAX, DEFAULT_MAX_PAGE_SIZE)
    assert offset == (U32_MAX - 1) * DEFAULT_MAX_PAGE_SIZE
    assert offset > U32_MAX


def test_to_offset_params_accepts_any_pageable() -> None:
    pageable = SimpleNamespace(page_number=5, page_size=0)
    assert isinstance(pageable, Pageable)

    result = to_offset_params(pageable, 7, 15)

    assert isinstance(result, Offsetable)
    assert result.offset == 28
    assert result.limit == 7


@pytest.mark.parametrize(
    ("page_number", "page_size"),
    [(1, 1), (2, 20), (9, 99), (1000, 100), (3, 120)],
)
def test_offset_is_consistent_with_limit(page_number: int, page_size: int) -> None:
    result = to_offset_params(PageParams(page_number=page_number, page_size=page_size))
    assert result.limit == min(page_size, DEFAULT_MAX_PAGE_SIZE)
    assert result.offset == (page_number - 1) * result.limit


def test_clamping_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="paging.conversion"):
        build_page_size(300, 0, 0)

    assert "clamped to 100" in caplog.text

"""Paging helpers for the task list, plus keyword clean-up for task edits."""

from __future__ import annotations

from typing import Iterable, Sequence, TypeVar

T = TypeVar("T")

OFFLINE_PAGE_SIZE = 20


def _check_page_size(page_size: int) -> None:
    if page_size <= 0:
        raise ValueError(f"page size must be positive, got {page_size}")


def total_pages(total: int, page_size: int) -> int:
    """Number of pages needed for ``total`` items; an empty list still has one page."""
    _check_page_size(page_size)
    if total <= 0:
        return 1
    return -(-total // page_size)


def clamp_page(page: int, total: int, page_size: int) -> int:
    """Keep a page number between 1 and the last page."""
    return max(1, min(page, total_pages(total, page_size)))


def take_page(items: Sequence[T], page: int, page_size: int) -> list[T]:
    """The items on the given 1-based page; an empty list past the end."""
    _check_page_size(page_size)
    start = max(page - 1, 0) * page_size
    if start >= len(items):
        return []
    return list(items[start : start + page_size])


def clean_keywords(keywords: Iterable[str]) -> set[str]:
    """Drop blank keywords and collapse duplicates."""
    return {keyword for keyword in keywords if keyword.strip()}
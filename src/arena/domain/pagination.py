"""Page-based slicing for character listings."""

from __future__ import annotations

import math
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True, slots=True)
class PageRequest:
    page: int
    limit: int
    offset: int


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    """One slice of a listing plus navigation metadata."""

    data: list[T]
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    has_next_page: bool
    has_previous_page: bool


def _leading_int(raw: object) -> int | None:
    """Parse the leading integer of ``raw`` (``"2.5"`` -> 2, ``"abc"`` -> None)."""

    if raw is None:
        return None
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    match = _LEADING_INT.match(str(raw))
    return int(match.group(1)) if match else None


def parse_page_request(
    page: object = None,
    limit: object = None,
    *,
    default_limit: int = DEFAULT_LIMIT,
    max_limit: int = MAX_LIMIT,
) -> PageRequest:
    """Normalise raw ``page``/``limit`` query values.

    Missing, zero, or unparsable values fall back to the defaults; a page
    below 1 becomes 1, a limit below 1 becomes ``default_limit`` and a limit
    above ``max_limit`` is capped.
    """
    page_value = _leading_int(page) or DEFAULT_PAGE
    limit_value = _leading_int(limit) or default_limit

    if page_value < 1:
        page_value = DEFAULT_PAGE
    if limit_value < 1:
        limit_value = default_limit
    elif limit_value > max_limit:
        limit_value = max_limit

    return PageRequest(page=page_value, limit=limit_value, offset=(page_value - 1) * limit_value)


def paginate(items: Sequence[T], request: PageRequest) -> Page[T]:
    """Slice ``items`` according to ``request``."""

    total_items = len(items)
    total_pages = math.ceil(total_items / request.limit)
    data = list(items[request.offset : request.offset + request.limit])
    return Page(
        data=data,
        current_page=request.page,
        total_pages=total_pages,
        total_items=total_items,
        items_per_page=request.limit,
        has_next_page=request.page < total_pages,
        has_previous_page=request.page > 1,
    )

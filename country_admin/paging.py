"""
Pure derivations for the country list: visible window and selection state.

The list is fetched once and never re-queried, so every value shown in the
footer or the header checkbox can be computed from the full collection,
the 1-indexed current page and the selection set.
"""

import math
from typing import AbstractSet, Sequence, Tuple, TypeVar

T = TypeVar("T")


def total_pages(total: int, page_size: int) -> int:
    return math.ceil(total / page_size)


def clamp_page(page: int, total: int, page_size: int) -> int:
    """Keep a page number inside [1, last page]; an empty list still has page 1."""
    return max(1, min(page, max(total_pages(total, page_size), 1)))


def page_bounds(page: int, total: int, page_size: int) -> Tuple[int, int]:
    """
    Half-open index range [start, end) of the rows on `page`.

    Both ends are clamped to the collection, so a page past the end yields
    an empty range rather than an error.
    """
    start = min((page - 1) * page_size, total)
    end = min(page * page_size, total)
    return start, end


def page_window(items: Sequence[T], page: int, page_size: int) -> Sequence[T]:
    start, end = page_bounds(page, len(items), page_size)
    return items[start:end]


def has_previous(page: int) -> bool:
    return page > 1


def has_next(page: int, total: int, page_size: int) -> bool:
    return page < total_pages(total, page_size)


def range_label(page: int, total: int, page_size: int) -> str:
    """Footer text such as "41-45 / 45"."""
    start, end = page_bounds(page, total, page_size)
    return f"{start + 1}-{end} / {total}"


def all_selected(selected: AbstractSet[int], window_ids: Sequence[int]) -> bool:
    """
    State of the header checkbox.

    Only sizes are compared: the box is checked whenever the selection holds
    as many ids as the current page shows, whichever page they came from.
    An empty page with an empty selection is therefore checked.
    """
    return len(selected) == len(window_ids)

"""
Interactive search filtering.

The admin tables load a whole collection and narrow it in memory as the
user types; the server-side prefix lookup is a separate endpoint.
"""
from typing import Callable, Iterable, Optional, TypeVar

T = TypeVar("T")


def matches_term(term: str, *values: Optional[str]) -> bool:
    """True if any value contains ``term`` as a case-insensitive substring."""
    needle = term.casefold()
    return any(value is not None and needle in value.casefold() for value in values)


def filter_by_term(
    items: Iterable[T],
    term: Optional[str],
    fields: Callable[[T], tuple[Optional[str], ...]],
) -> list[T]:
    """
    Keep the items whose display fields contain ``term``.

    A missing or blank term keeps everything. Order is preserved, so
    filtering an already filtered list by the same term is a no-op.
    """
    items = list(items)
    if term is None or not term.strip():
        return items
    return [item for item in items if matches_term(term, *fields(item))]

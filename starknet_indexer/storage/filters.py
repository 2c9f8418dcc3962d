"""Query filters and filter options shared by storage tables."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, Optional


class SortOrder(str, enum.Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


@dataclass
class BetweenFilter:
    """Inclusive range bounds."""

    from_: int = 0
    to: int = 0


@dataclass
class IntegerFilter:
    """Comparisons on an integer column; zero means unset."""

    eq: int = 0
    neq: int = 0
    gt: int = 0
    gte: int = 0
    lt: int = 0
    lte: int = 0
    between: Optional[BetweenFilter] = None


@dataclass
class TimeFilter:
    """Comparisons on a timestamp column in seconds; zero means unset."""

    gt: int = 0
    gte: int = 0
    lt: int = 0
    lte: int = 0
    between: Optional[BetweenFilter] = None


@dataclass
class EnumFilter:
    """Comparisons on an enumerated integer column."""

    eq: int = 0
    neq: int = 0
    in_: list[int] = field(default_factory=list)
    notin: list[int] = field(default_factory=list)


@dataclass
class EnumStringFilter:
    """Comparisons on an enumerated string column."""

    eq: str = ""
    neq: str = ""
    in_: list[str] = field(default_factory=list)
    notin: list[str] = field(default_factory=list)


@dataclass
class StringFilter:
    """Equality or membership on a string column."""

    eq: str = ""
    in_: list[str] = field(default_factory=list)


@dataclass
class EqualityFilter:
    """Equality or inequality on a string column."""

    eq: str = ""
    neq: str = ""


@dataclass
class BytesFilter:
    """Equality or membership on a binary column."""

    eq: bytes = b""
    in_: list[bytes] = field(default_factory=list)


@dataclass
class IdFilter:
    """Equality or membership on an identity column."""

    eq: int = 0
    in_: list[int] = field(default_factory=list)


FilterOption = Callable[["FilterOptions"], None]


@dataclass
class FilterOptions:
    """Paging, sorting and height limits applied to a filtered query."""

    limit: int = 0
    offset: int = 0
    sort_field: str = ""
    sort_order: Optional[SortOrder] = None
    sort_fields: list[str] = field(default_factory=list)
    max_height: int = 0
    height_column_name: str = ""
    cursor: int = 0

    @classmethod
    def build(cls, *options: FilterOption) -> "FilterOptions":
        """Create options with each option applied in order."""
        result = cls()
        for option in options:
            option(result)
        return result


def with_limit_filter(limit: int) -> FilterOption:
    """Limit the number of rows; non-positive values are ignored."""

    def apply(opts: FilterOptions) -> None:
        if limit > 0:
            opts.limit = limit

    return apply


def with_offset_filter(offset: int) -> FilterOption:
    """Skip rows; non-positive values are ignored."""

    def apply(opts: FilterOptions) -> None:
        if offset > 0:
            opts.offset = offset

    return apply


def with_sort_filter(field: str, order: SortOrder) -> FilterOption:  # noqa: F811
    """Sort by one field in the given order."""

    def apply(opts: FilterOptions) -> None:
        opts.sort_field = field
        opts.sort_order = order

    return apply


def with_asc_sort_by_id_filter() -> FilterOption:
    """Sort by id ascending."""
    return with_sort_filter("id", SortOrder.ASC)


def with_desc_sort_by_id_filter() -> FilterOption:
    """Sort by id descending."""
    return with_sort_filter("id", SortOrder.DESC)


def with_multi_sort(*fields: str) -> FilterOption:
    """Sort by several fields."""

    def apply(opts: FilterOptions) -> None:
        opts.sort_fields = list(fields)

    return apply


def with_max_height(height: int, column_name: str) -> FilterOption:
    """Limit rows to those at or below a height in the named column."""

    def apply(opts: FilterOptions) -> None:
        opts.max_height = height
        opts.height_column_name = column_name

    return apply


def with_cursor(cursor: int) -> FilterOption:
    """Continue from the given row id."""

    def apply(opts: FilterOptions) -> None:
        opts.cursor = cursor

    return apply
import sys
from dataclasses import dataclass, replace
from typing import Callable

from pagelinks.utils.exceptions import ValidationError

SortParser = Callable[[str], str]


@dataclass(frozen=True)
class LimitBounds:
    minimum: int = 1
    maximum: int = 1000
    default: int = 50


DEFAULT_BOUNDS = LimitBounds()


@dataclass(frozen=True)
class PaginationRequest:
    limit: int = 100
    offset: int = 0
    sort: str = ""

    def validate(self) -> "PaginationRequest":
        if self.limit < 1:
            raise ValidationError("limit must be positive")
        if self.offset < 0:
            raise ValidationError("offset cannot be negative")
        return self

    def __str__(self) -> str:
        return f"Limit: {self.limit}, Offset: {self.offset}, Sort: {self.sort}"

    @classmethod
    def from_args(
        cls,
        limit: int | None = None,
        offset: int | None = None,
        sort: str | None = None,
        *,
        bounds: LimitBounds = DEFAULT_BOUNDS,
        sort_parser: SortParser | None = None,
    ) -> "PaginationRequest":
        """Build a request from optional client arguments.

        A missing limit falls back to ``bounds.default``; an explicit one must
        lie within ``[bounds.minimum, bounds.maximum]``. A missing or negative
        offset becomes 0.
        """
        if limit is None:
            limit = bounds.default
        elif limit < bounds.minimum or limit > bounds.maximum:
            raise ValidationError(
                f"limit must have a value between {bounds.minimum} and {bounds.maximum}"
            )

        if offset is None or offset < 0:
            offset = 0

        sort = sort or ""
        if sort and sort_parser is not None:
            sort = sort_parser(sort)

        return cls(limit=limit, offset=offset, sort=sort)


class PaginationBuilder:
    def __init__(self) -> None:
        self._request = PaginationRequest(limit=100, offset=0)

    def with_limit(self, limit: int) -> "PaginationBuilder":
        self._request = replace(self._request, limit=limit)
        return self

    def with_offset(self, offset: int) -> "PaginationBuilder":
        self._request = replace(self._request, offset=offset)
        return self

    def with_sort(self, sort: str) -> "PaginationBuilder":
        self._request = replace(self._request, sort=sort)
        return self

    def build(self) -> PaginationRequest:
        return self._request


def builder() -> PaginationBuilder:
    return PaginationBuilder()


def default_pagination() -> PaginationRequest:
    return builder().build()


def fetch_all() -> PaginationRequest:
    return builder().with_limit(sys.maxsize).with_offset(0).build()


def fetch_one() -> PaginationRequest:
    return builder().with_limit(1).with_offset(0).build()

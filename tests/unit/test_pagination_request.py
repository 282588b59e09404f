import sys

import pytest

from pagelinks.utils.exceptions import ValidationError
from pagelinks.utils.pagination import (
    LimitBounds,
    PaginationRequest,
    builder,
    default_pagination,
    fetch_all,
    fetch_one,
)


def test_from_args_defaults():
    p = PaginationRequest.from_args()
    assert (p.limit, p.offset, p.sort) == (50, 0, "")


def test_from_args_explicit_values():
    p = PaginationRequest.from_args(1000, 30, "-created_at")
    assert (p.limit, p.offset, p.sort) == (1000, 30, "-created_at")


@pytest.mark.parametrize("limit", [0, -3, 1001])
def test_from_args_limit_out_of_range(limit):
    with pytest.raises(ValidationError, match="between 1 and 1000"):
        PaginationRequest.from_args(limit=limit)


def test_from_args_negative_offset_becomes_zero():
    assert PaginationRequest.from_args(limit=10, offset=-5).offset == 0


def test_from_args_custom_bounds():
    bounds = LimitBounds(minimum=5, maximum=20, default=10)
    assert PaginationRequest.from_args(bounds=bounds).limit == 10
    with pytest.raises(ValidationError, match="between 5 and 20"):
        PaginationRequest.from_args(limit=21, bounds=bounds)


def test_from_args_sort_parser():
    p = PaginationRequest.from_args(sort="Name", sort_parser=str.lower)
    assert p.sort == "name"

    def reject(sort: str) -> str:
        raise ValidationError(f"unknown sort field {sort}")

    with pytest.raises(ValidationError):
        PaginationRequest.from_args(sort="nope", sort_parser=reject)


def test_validate():
    assert PaginationRequest(limit=1, offset=0).validate().limit == 1
    with pytest.raises(ValidationError, match="limit must be positive"):
        PaginationRequest(limit=0).validate()
    with pytest.raises(ValidationError, match="offset cannot be negative"):
        PaginationRequest(limit=10, offset=-1).validate()


def test_str():
    assert str(PaginationRequest(limit=10, offset=20, sort="name")) == "Limit: 10, Offset: 20, Sort: name"


def test_builder():
    p = builder().with_limit(25).with_offset(75).with_sort("id").build()
    assert p == PaginationRequest(limit=25, offset=75, sort="id")
    assert default_pagination() == PaginationRequest(limit=100, offset=0, sort="")


def test_fetch_all_and_one():
    assert fetch_all() == PaginationRequest(limit=sys.maxsize, offset=0)
    assert fetch_one() == PaginationRequest(limit=1, offset=0)

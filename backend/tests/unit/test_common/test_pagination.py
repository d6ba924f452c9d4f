import math

import pytest

from keyword_board.common.pagination import (
    MAX_PAGE_VALUE,
    page_offset,
    parse_positive_int,
    total_pages,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, 15),
        ("", 15),
        ("abc", 15),
        ("0", 15),
        ("-3", 15),
        ("20", 20),
        (" 7 ", 7),
        ("3abc", 3),
        ("2.9", 2),
        ("2147483647", 2147483647),
        ("2147483648", 15),
        ("99999999999999999999", 15),
        ("0000000000000000000042", 42),
        ("9" * 5000, 15),
    ],
)
def test_parse_positive_int(raw, expected):
    assert parse_positive_int(raw, 15) == expected


@pytest.mark.parametrize("total", [0, 1, 14, 15, 16, 30, 31, 100])
@pytest.mark.parametrize("limit", [1, 7, 15])
def test_total_pages_is_ceiling(total, limit):
    assert total_pages(total, limit) == math.ceil(total / limit)


def test_total_pages_rejects_non_positive_limit():
    with pytest.raises(ValueError):
        total_pages(10, 0)


def test_page_offset():
    assert page_offset(1, 15) == 0
    assert page_offset(3, 15) == 30


def test_largest_offset_fits_signed_64_bit():
    assert page_offset(MAX_PAGE_VALUE, MAX_PAGE_VALUE) < 2**63

"""Tests for query/path normalization."""
from __future__ import annotations

import pytest

from testimonials_api.api.params import (
    MAX_LIMIT,
    MAX_PAGE,
    PaginationOptions,
    parse_id,
    parse_int_prefix,
    parse_pagination,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, None),
        ("", None),
        ("abc", None),
        ("12", 12),
        (" 7", 7),
        ("12abc", 12),
        ("-3", -3),
        ("3.9", 3),
        ("\u0663", None),
        ("0042", 42),
        ("1" * 19, 10**18),
        ("-" + "1" * 19, -(10**18)),
    ],
)
def test_parse_int_prefix(raw, expected):
    assert parse_int_prefix(raw) == expected


def test_pagination_defaults():
    assert parse_pagination() == PaginationOptions(page=1, limit=10)


@pytest.mark.parametrize("limit", ["51", "1000", "999999999"])
def test_limit_is_clamped(limit):
    assert parse_pagination("1", limit).limit == MAX_LIMIT


def test_limit_at_maximum_is_kept():
    assert parse_pagination("2", "50") == PaginationOptions(page=2, limit=50)


@pytest.mark.parametrize("limit", ["9" * 19, "1" + "0" * 20, "7" * 5000])
def test_long_limits_are_clamped(limit):
    assert parse_pagination("1", limit).limit == MAX_LIMIT


def test_long_pages_are_capped():
    assert parse_pagination("9" * 19, "10").page == MAX_PAGE
    assert parse_pagination("-" + "9" * 19, "10").page == 1


def test_unicode_digits_are_not_numbers():
    assert parse_pagination("\u0663", "\u0663") == PaginationOptions(page=1, limit=10)


def test_non_positive_values_are_raised_to_one():
    assert parse_pagination("0", "-5") == PaginationOptions(page=1, limit=1)


def test_page_is_bounded():
    options = parse_pagination("9" * 18, "50")
    assert options.page == MAX_PAGE
    assert options.offset < 2**63


def test_offset():
    assert PaginationOptions(page=3, limit=10).offset == 20


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("42", 42),
        (" 42 ", 42),
        ("", 0),
        ("7.0", 7),
        ("1e2", 100),
        ("-1", -1),
        ("abc", None),
        ("4.5", None),
        ("NaN", None),
        ("inf", None),
        ("1e30", None),
        ("1e999999999999999999", None),
        ("1e9999999999999999999", None),
        ("-1e999999999999999999", None),
        ("Infinity", None),
        ("1_0", None),
        ("\u0663", None),
        ("0x10", 16),
        ("0o17", 15),
        ("0b101", 5),
        ("-0x10", None),
        ("0x" + "f" * 20, None),
        ("+5", 5),
        ("1.", 1),
        ("9" * 5000, None),
    ],
)
def test_parse_id(raw, expected):
    assert parse_id(raw) == expected

"""Tests for numeric formatting helpers."""

from nutrition_calculator.services.formatting import format_number, format_percent


def test_format_number_fixed_digits() -> None:
    assert format_number(258) == "258"
    assert format_number(3.10077, 1) == "3.1"
    assert format_number(40, 1) == "40.0"


def test_format_number_groups_thousands() -> None:
    assert format_number(1032) == "1,032"
    assert format_number(1234567.891, 2) == "1,234,567.89"


def test_format_number_non_finite_is_zero() -> None:
    assert format_number(float("nan")) == "0"
    assert format_number(float("inf"), 1) == "0"
    assert format_number(None) == "0"


def test_format_number_drops_negative_zero() -> None:
    assert format_number(-0.01, 1) == "0.0"


def test_format_percent() -> None:
    assert format_percent(34.883) == "34.9%"
    assert format_percent(float("nan")) == "0%"

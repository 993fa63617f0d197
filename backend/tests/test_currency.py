from __future__ import annotations

import pytest

from core.currency import format_currency, format_duration, parse_currency, parse_percentage


@pytest.mark.parametrize(
    "text, expected",
    [
        ("R$ 1.234,56", 1234.56),
        ("R$ 1.000.000,00", 1_000_000.0),
        ("150000", 150_000.0),
        ("  2.500 ", 2500.0),
        ("", 0.0),
        ("abc", 0.0),
        (None, 0.0),
        (42, 42.0),
        ("nan", 0.0),
        ("inf", 0.0),
        ("Infinity", 0.0),
        ("12abc", 12.0),
        ("1_000", 1.0),
    ],
)
def test_parse_currency(text, expected):
    assert parse_currency(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1", 1.0),
        ("1.5", 1.5),
        ("1,5", 1.5),
        ("0,8 %", 0.8),
        ("six", 0.0),
        ("", 0.0),
        ("nan", 0.0),
        ("-inf", 0.0),
        ("1_0", 1.0),
        ("1e3", 1.0),
        ("-0,5", -0.5),
    ],
)
def test_parse_percentage(text, expected):
    assert parse_percentage(text) == expected


def test_format_currency_uses_brazilian_separators():
    assert format_currency(1_234_567.891) == "R$ 1.234.567,89"
    assert format_currency(0) == "R$ 0,00"
    assert format_currency(-1234.5) == "-R$ 1.234,50"


def test_format_duration():
    assert format_duration(20, 1) == "20 anos 1 meses"
    assert format_duration(0, 0) == "0 anos 0 meses"
    assert format_duration(999, 0) == "Nunca"
    assert format_duration(1, 1) == "1 anos 1 meses"

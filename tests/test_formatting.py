"""Tests for display-formatting helpers."""

from __future__ import annotations

from decimal import Decimal

import pytest

from irsite.services.formatting import format_compact_currency


@pytest.mark.parametrize(
    "value, expected",
    [
        (2_500_000_000, "$2.5B"),
        (Decimal("1250000000.00"), "$1.2B"),
        (350_000_000, "$350.0M"),
        (4_200_000_000_000, "$4.2T"),
        (12_500, "$12.5K"),
        (999, "$999"),
        (-3_000_000, "-$3.0M"),
        (999_960_000, "$1.0B"),
        (999_960, "$1.0M"),
        (999_960_000_000, "$1.0T"),
        (999.6, "$1.0K"),
        (999_940_000, "$999.9M"),
        (-999_960_000, "-$1.0B"),
    ],
)
def test_format_compact_currency(value, expected):
    """Amounts format with the right scale suffix."""
    assert format_compact_currency(value) == expected


def test_format_compact_currency_none():
    """None formats as None."""
    assert format_compact_currency(None) is None


def test_format_compact_currency_never_shows_four_digit_scale():
    """Rounded values at a scale boundary move up to the next suffix."""
    for value in [999_999, 999_999_999, 999_999_999_999]:
        formatted = format_compact_currency(value)
        assert formatted.startswith("$1.0"), formatted

"""Pure display-formatting helpers (no DB access)."""

from __future__ import annotations

from decimal import Decimal

_SCALES = [
    (1_000, "K"),
    (1_000_000, "M"),
    (1_000_000_000, "B"),
    (1_000_000_000_000, "T"),
]


def format_compact_currency(value: Decimal | float | None, symbol: str = "$") -> str | None:
    """Format a money amount compactly, e.g. ``2_500_000_000`` → ``"$2.5B"``.

    Amounts are rounded before the scale is picked, so ``999_960_000`` is
    ``"$1.0B"``, not ``"$1000.0M"``.  Returns None when ``value`` is None.
    """
    if value is None:
        return None
    amount = float(value)
    sign = "-" if amount < 0 else ""
    amount = abs(amount)
    if round(amount) < 1_000:
        return f"{sign}{symbol}{amount:,.0f}"
    for threshold, suffix in _SCALES:
        scaled = round(amount / threshold, 1)
        if scaled < 1_000 or suffix == _SCALES[-1][1]:
            return f"{sign}{symbol}{scaled:.1f}{suffix}"

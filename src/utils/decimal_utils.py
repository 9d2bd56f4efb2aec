"""Decimal helpers for ledger amounts."""

from decimal import ROUND_HALF_UP, Decimal

_ZERO = Decimal("0")


def coerce_decimal(value) -> Decimal:
    """Convert a stored or displayed amount to Decimal.

    Floats go through ``str`` so SQLite REAL values keep their printed
    digits. ``None`` counts as zero.
    """
    if value is None:
        return _ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_amount(value, decimals: int = 2) -> Decimal:
    """Round an amount half-up to ``decimals`` fractional digits."""
    quantum = Decimal(1).scaleb(-decimals)
    return coerce_decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)


__all__ = ["coerce_decimal", "round_amount"]

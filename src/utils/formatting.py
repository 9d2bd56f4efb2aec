"""Display formatting helpers shared by the dashboard and reports."""

from src.utils.decimal_utils import coerce_decimal, round_amount

DEFAULT_CURRENCY_PREFIX = "RS."


def _group_digits(digits: str) -> str:
    """Group whole-unit digits Indian style: last three, then pairs."""
    if len(digits) <= 3:
        return digits
    head, groups = digits[:-3], [digits[-3:]]
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    return ",".join([head, *groups])


def format_currency(
    value,
    prefix: str = DEFAULT_CURRENCY_PREFIX,
    decimals: int = 2,
) -> str:
    """Format an amount by magnitude with a currency prefix.

    Args:
        value: Numeric value to format.
        prefix: Currency prefix placed before the amount.
        decimals: Number of fractional digits.

    Returns:
        str: Formatted value such as ``RS. 1,23,456.50``.
    """
    rounded = round_amount(abs(coerce_decimal(value)), decimals)
    whole, _, fraction = f"{rounded:.{decimals}f}".partition(".")
    grouped = _group_digits(whole)
    if fraction:
        return f"{prefix} {grouped}.{fraction}"
    return f"{prefix} {grouped}"


def format_currency_for_display(
    value,
    prefix: str = DEFAULT_CURRENCY_PREFIX,
) -> str:
    """Format an amount in whole units for summary cards."""
    return format_currency(value, prefix=prefix, decimals=0)


def format_percent(value) -> str:
    """Format a percentage with one decimal."""
    return f"{coerce_decimal(value):.1f}%"


__all__ = [
    "DEFAULT_CURRENCY_PREFIX",
    "format_currency",
    "format_currency_for_display",
    "format_percent",
]

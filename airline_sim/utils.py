"""Utility functions for formatting and clamping."""

import math


def format_money(amount: float) -> str:
    """
    Format a money amount as whole dollars with thousand separators.

    Args:
        amount: Amount to format

    Returns:
        Formatted string, floored toward negative infinity

    Examples:
        >>> format_money(12345.67)
        '12,345'
        >>> format_money(1234567.89)
        '1,234,567'
        >>> format_money(-1500.5)
        '-1,501'
    """
    return f"{math.floor(amount):,}"


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))

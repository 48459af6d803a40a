"""
Simple metrics calculation utilities.

Parsing and guarded division shared by the ACoS engine.
"""

import re

import numpy as np

# Leading decimal number, optionally signed, with an optional exponent
_NUMBER_PREFIX = re.compile(r'^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?', re.ASCII)


def parse_number(value) -> float:
    """
    Convert free-form user text into a number.

    Grouping commas are stripped and the leading decimal number is parsed,
    so partial edits like "12%" or "1,234.5 USD" still read as numbers.

    Args:
        value: Text, number or None

    Returns:
        Parsed value, or 0.0 when nothing parses or the result is not finite
    """
    if value is None:
        return 0.0

    text = str(value).replace(',', '')
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        return 0.0

    number = float(match.group(0))
    if not np.isfinite(number):
        return 0.0
    return number


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide, returning 0.0 unless the denominator is positive."""
    if denominator > 0:
        return numerator / denominator
    return 0.0


def finite_or_zero(value: float) -> float:
    """Replace non-finite values with 0.0."""
    return float(value) if np.isfinite(value) else 0.0


def calculate_acos(spend: float, sales: float) -> float:
    """Calculate Advertising Cost of Sale."""
    return finite_or_zero(safe_divide(spend, sales))


def calculate_cpc(spend: float, clicks: float) -> float:
    """Calculate Cost per Click."""
    return finite_or_zero(safe_divide(spend, clicks))


def calculate_cvr(orders: float, clicks: float) -> float:
    """Calculate Conversion Rate (as a ratio, not a percent)."""
    return finite_or_zero(safe_divide(orders, clicks))


def calculate_aov(sales: float, orders: float) -> float:
    """Calculate Average Order Value."""
    return finite_or_zero(safe_divide(sales, orders))

"""
Display formatting for calculator output.

Ratios (ACoS, CVR) are shown as percentages, money with a dollar sign,
unit counts as whole numbers.
"""

import math


def format_percent(ratio: float) -> str:
    """0.3 -> '30.00%'"""
    return f"{ratio * 100:.2f}%"


def format_money(amount: float) -> str:
    """0.6 -> '$0.60'"""
    return f"${amount:.2f}"


def format_units(count: float) -> str:
    """
    Round a unit count to a whole number.

    Halves round up (59.5 -> '60') rather than to even.
    """
    return f"{math.floor(count + 0.5)}"


def format_delta(delta: float) -> str:
    """Change in ACoS, in percentage points: -0.05 -> '-5.00%'"""
    return f"{delta * 100:.2f}%"


def format_chart_value(percent: float) -> str:
    """Chart values are already percentages: 25 -> '25.00%'"""
    return f"{float(percent):.2f}%"

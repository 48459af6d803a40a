"""
Current-period efficiency metrics.

Derives ACoS, CPC, CVR and AOV from observed spend, sales, clicks and orders.
Every ratio reads 0 when its denominator is not positive.
"""

from dataclasses import dataclass, asdict
from typing import Dict

from utils.metrics import calculate_acos, calculate_cpc, calculate_cvr, calculate_aov


@dataclass(frozen=True)
class CurrentMetrics:
    """Observed totals plus the ratios derived from them."""
    spend: float
    sales: float
    clicks: float
    orders: float
    acos: float
    cpc: float
    cvr: float
    aov: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def compute_current_metrics(
    spend: float,
    sales: float,
    clicks: float,
    orders: float
) -> CurrentMetrics:
    """
    Compute current efficiency metrics.

    Args:
        spend: Advertising spend
        sales: Advertising sales
        clicks: Ad clicks
        orders: Ad orders

    Returns:
        CurrentMetrics with acos = spend/sales, cpc = spend/clicks,
        cvr = orders/clicks and aov = sales/orders
    """
    return CurrentMetrics(
        spend=spend,
        sales=sales,
        clicks=clicks,
        orders=orders,
        acos=calculate_acos(spend, sales),
        cpc=calculate_cpc(spend, clicks),
        cvr=calculate_cvr(orders, clicks),
        aov=calculate_aov(sales, orders)
    )

"""
ACoS Forecast under a new CPC and conversion rate

Keeps the current click volume constant and asks what happens to ACoS
if clicks cost `new_cpc` and convert at `new_cvr_percent`:

    Estimated Spend  = Clicks × New CPC
    Estimated Orders = Clicks × New CVR
    Estimated Sales  = Estimated Orders × Current AOV
    New ACoS         = Estimated Spend ÷ Estimated Sales
"""

from dataclasses import dataclass, asdict
from typing import Dict

from utils.metrics import safe_divide, finite_or_zero


@dataclass(frozen=True)
class Forecast:
    """Forecast outcome. `cvr` is a ratio; `delta` is new minus current ACoS."""
    cpc: float
    cvr: float
    clicks: float
    est_orders: float
    est_spend: float
    est_sales: float
    new_acos: float
    delta: float

    @property
    def is_improvement(self) -> bool:
        """Lower ACoS is better."""
        return self.delta < 0

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def compute_forecast(
    clicks: float,
    aov: float,
    current_acos: float,
    new_cpc: float,
    new_cvr_percent: float
) -> Forecast:
    """
    Forecast spend, orders, sales and ACoS at a new CPC and CVR.

    With no historical orders (aov == 0) estimated sales are 0 and the
    new ACoS reads 0.
    A ratio that overflows also reads 0.

    Args:
        clicks: Current click volume, held fixed
        aov: Current average order value
        current_acos: Current ACoS ratio, used for the delta
        new_cpc: Hypothetical cost per click
        new_cvr_percent: Hypothetical conversion rate in percent (12 = 12%)

    Returns:
        Forecast
    """
    cvr = new_cvr_percent / 100
    est_orders = clicks * cvr
    est_spend = clicks * new_cpc
    est_sales = est_orders * aov
    new_acos = finite_or_zero(safe_divide(est_spend, est_sales))

    return Forecast(
        cpc=new_cpc,
        cvr=cvr,
        clicks=clicks,
        est_orders=est_orders,
        est_spend=est_spend,
        est_sales=est_sales,
        new_acos=new_acos,
        delta=finite_or_zero(new_acos - current_acos)
    )

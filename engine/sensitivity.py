"""
Sensitivity Sweep: ACoS vs Conversion Rate

Holds click volume and CPC fixed and evaluates ACoS at a range of
hypothetical conversion rates. Higher CVR lowers ACoS.
"""

import numpy as np
from dataclasses import dataclass, asdict
from typing import Dict, List, Tuple

from utils.metrics import safe_divide, finite_or_zero


@dataclass(frozen=True)
class SweepRange:
    """Inclusive range of conversion rates to sweep, in percent."""
    start_pct: float = 2.0
    end_pct: float = 30.0
    step_pct: float = 2.0

    def __post_init__(self):
        if self.step_pct <= 0:
            raise ValueError(f"step_pct must be positive, got {self.step_pct}")

    def percents(self) -> np.ndarray:
        """Swept percents, start to end inclusive. Empty if end < start."""
        if self.end_pct < self.start_pct:
            return np.array([], dtype=float)

        # Tolerance keeps the end point when (end - start) / step lands just under an integer
        n_points = int(np.floor((self.end_pct - self.start_pct) / self.step_pct + 1e-9)) + 1
        grid = self.start_pct + self.step_pct * np.arange(n_points)
        return np.round(grid, 10)


@dataclass(frozen=True)
class SensitivityPoint:
    """One point of the ACoS curve."""
    label: str
    cvr_percent: float
    acos_percent: float

    def to_dict(self) -> Dict:
        return asdict(self)


def _percent_label(pct: float) -> str:
    return f"{pct:g}%"


def compute_sensitivity_series(
    clicks: float,
    aov: float,
    new_cpc: float,
    sweep_range: SweepRange = SweepRange()
) -> List[SensitivityPoint]:
    """
    Evaluate ACoS (in percent) across a range of conversion rates.

    Args:
        clicks: Click volume, held fixed
        aov: Average order value
        new_cpc: Cost per click, held fixed
        sweep_range: Conversion rates to evaluate

    Returns:
        One SensitivityPoint per swept percent, in increasing CVR order
    """
    points = []
    for pct in sweep_range.percents():
        pct = float(pct)
        cvr = pct / 100
        orders = clicks * cvr
        spend = clicks * new_cpc
        sales = orders * aov
        acos_percent = safe_divide(spend, sales) * 100

        points.append(SensitivityPoint(
            label=_percent_label(pct),
            cvr_percent=pct,
            acos_percent=finite_or_zero(acos_percent)
        ))

    return points


def sensitivity_pairs(series: List[SensitivityPoint]) -> List[Tuple[str, float]]:
    """(label, acos_percent) pairs, the shape a line chart takes."""
    return [(point.label, point.acos_percent) for point in series]

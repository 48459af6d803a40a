"""
ACoS Forecaster: calculator module

Holds the six raw text inputs a user edits and recomputes every derived
value whenever one of them changes:

- Current metrics from spend, sales, clicks and orders
- Forecast under a new CPC and CVR (clicks held constant)
- Sensitivity curve of ACoS vs CVR, with current ACoS as reference line

Inputs stay as text until `parse_number` turns them into numbers, so a
half-typed value never breaks the calculation.
"""

import json
import pandas as pd
from pathlib import Path
from dataclasses import dataclass, asdict, replace
from typing import Dict, List, Optional

from engine import (
    CurrentMetrics,
    Forecast,
    SensitivityPoint,
    SweepRange,
    compute_current_metrics,
    compute_forecast,
    compute_sensitivity_series,
    parse_number
)
from utils.metrics import finite_or_zero
from utils.formatting import (
    format_percent,
    format_money,
    format_units,
    format_delta
)


# Field name -> label shown next to the input
INPUT_FIELDS = {
    'spend': 'Ad Spend ($)',
    'sales': 'Ad Sales ($)',
    'clicks': 'Ad Clicks',
    'orders': 'Ad Orders',
    'new_cpc': 'New CPC ($)',
    'new_cvr_pct': 'New CVR (%)'
}

FORECAST_LOGIC = [
    "We keep your current click volume constant.",
    "Estimated Spend = Clicks x New CPC",
    "Estimated Orders = Clicks x New CVR",
    "Estimated Sales = Estimated Orders x Current AOV",
    "New ACoS = Estimated Spend / Estimated Sales"
]


@dataclass(frozen=True)
class RawInputs:
    """User-editable values, kept as typed."""
    spend: str = "300"
    sales: str = "1000"
    clicks: str = "500"
    orders: str = "50"
    new_cpc: str = "0.60"
    new_cvr_pct: str = "12"

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


DEFAULT_INPUTS = RawInputs()


@dataclass(frozen=True)
class ForecastReport:
    """Everything the presentation layer renders for one set of inputs."""
    current: CurrentMetrics
    forecast: Forecast
    sensitivity: List[SensitivityPoint]
    reference_acos_pct: float


def build_report(
    inputs: RawInputs,
    sweep_range: Optional[SweepRange] = None
) -> ForecastReport:
    """
    Parse raw inputs and run the full calculation.

    Args:
        inputs: Raw text inputs
        sweep_range: CVR range for the sensitivity curve (default 2%-30% by 2)

    Returns:
        ForecastReport
    """
    sweep_range = sweep_range or SweepRange()

    current = compute_current_metrics(
        spend=parse_number(inputs.spend),
        sales=parse_number(inputs.sales),
        clicks=parse_number(inputs.clicks),
        orders=parse_number(inputs.orders)
    )

    new_cpc = parse_number(inputs.new_cpc)
    forecast = compute_forecast(
        clicks=current.clicks,
        aov=current.aov,
        current_acos=current.acos,
        new_cpc=new_cpc,
        new_cvr_percent=parse_number(inputs.new_cvr_pct)
    )

    sensitivity = compute_sensitivity_series(
        clicks=current.clicks,
        aov=current.aov,
        new_cpc=new_cpc,
        sweep_range=sweep_range
    )

    return ForecastReport(
        current=current,
        forecast=forecast,
        sensitivity=sensitivity,
        reference_acos_pct=finite_or_zero(current.acos * 100)
    )


class AcosForecaster:
    """
    ACoS forecasting calculator.

    Every input change triggers a full, synchronous recompute; there is
    no cache to invalidate.

    Example:
        >>> forecaster = AcosForecaster()
        >>> report = forecaster.set_input('new_cvr_pct', '15')
        >>> report.forecast.new_acos
        0.2
    """

    def __init__(
        self,
        inputs: Optional[RawInputs] = None,
        sweep_range: Optional[SweepRange] = None
    ):
        """
        Initialize forecaster and compute the first report.

        Args:
            inputs: Raw text inputs (defaults to the sample campaign)
            sweep_range: CVR range for the sensitivity curve
        """
        self.inputs = inputs or DEFAULT_INPUTS
        self.sweep_range = sweep_range or SweepRange()
        self.report = self.compute()

    def compute(self) -> ForecastReport:
        """Recompute everything from the current raw inputs."""
        self.report = build_report(self.inputs, self.sweep_range)
        return self.report

    def set_input(self, field: str, text) -> ForecastReport:
        """
        Replace one raw input and recompute.

        Args:
            field: One of INPUT_FIELDS
            text: New raw value, as typed

        Returns:
            Updated report
        """
        return self.update(**{field: text})

    def update(self, **changes) -> ForecastReport:
        """Replace several raw inputs at once and recompute."""
        unknown = sorted(set(changes) - set(INPUT_FIELDS))
        if unknown:
            raise ValueError(f"Unknown input field(s): {', '.join(unknown)}")

        text_changes = {name: '' if value is None else str(value) for name, value in changes.items()}
        self.inputs = replace(self.inputs, **text_changes)
        return self.compute()

    def summary_lines(self) -> List[str]:
        """Formatted report, one line per metric."""
        current = self.report.current
        forecast = self.report.forecast

        lines = [
            "Current Metrics",
            f"  ACoS:        {format_percent(current.acos)}",
            f"  Avg CPC:     {format_money(current.cpc)}",
            f"  Ad CVR:      {format_percent(current.cvr)}",
            f"  Ad AOV:      {format_money(current.aov)}",
            "",
            "Forecast (New CPC & CVR)",
            f"  New ACoS:    {format_percent(forecast.new_acos)}",
            f"  Change:      {format_delta(forecast.delta)}",
            f"  Est. Spend:  {format_money(forecast.est_spend)}",
            f"  Est. Orders: {format_units(forecast.est_orders)}",
            f"  Est. Sales:  {format_money(forecast.est_sales)}",
            "",
            "Negative change = improvement (lower ACoS), positive = decline (higher ACoS).",
            ""
        ]
        lines.extend(f"  - {step}" for step in FORECAST_LOGIC)
        return lines

    def to_dict(self) -> Dict:
        """JSON-serialisable snapshot of inputs and results."""
        return {
            'inputs': self.inputs.to_dict(),
            'sweep_range': asdict(self.sweep_range),
            'current_metrics': self.report.current.to_dict(),
            'forecast': self.report.forecast.to_dict(),
            'sensitivity': [point.to_dict() for point in self.report.sensitivity],
            'reference_acos_pct': self.report.reference_acos_pct
        }

    def sensitivity_frame(self) -> pd.DataFrame:
        """
        Sensitivity curve as a DataFrame.

        Columns: label, cvr_percent, acos_percent, above_current
        (whether that CVR would leave ACoS worse than today).
        """
        df = pd.DataFrame(
            [point.to_dict() for point in self.report.sensitivity],
            columns=['label', 'cvr_percent', 'acos_percent']
        )
        df['above_current'] = df['acos_percent'] > self.report.reference_acos_pct
        return df

    def save_result(
        self,
        filename_prefix: str = 'acos_forecast',
        output_dir: str = 'outputs'
    ) -> Path:
        """Save result to JSON file."""
        output_path = Path(output_dir)
        output_path.mkdir(parents=True, exist_ok=True)

        filepath = output_path / f"{filename_prefix}_result.json"

        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2, default=str)

        print(f"[SAVED] Result saved: {filepath}")
        return filepath

"""
ACoS Metrics Engine

Pure calculations behind the ACoS forecaster:
- current_metrics: ACoS, CPC, CVR and AOV from observed totals
- forecast: ACoS under a new CPC and conversion rate, clicks held fixed
- sensitivity: ACoS swept across a range of conversion rates
"""

from utils.metrics import parse_number, safe_divide
from engine.current_metrics import CurrentMetrics, compute_current_metrics
from engine.forecast import Forecast, compute_forecast
from engine.sensitivity import (
    SweepRange,
    SensitivityPoint,
    compute_sensitivity_series,
    sensitivity_pairs
)

__all__ = [
    'parse_number',
    'safe_divide',
    'CurrentMetrics',
    'compute_current_metrics',
    'Forecast',
    'compute_forecast',
    'SweepRange',
    'SensitivityPoint',
    'compute_sensitivity_series',
    'sensitivity_pairs'
]

"""
Calculator layer over the ACoS metrics engine.
"""

from calculator.acos_forecaster import (
    AcosForecaster,
    ForecastReport,
    RawInputs,
    DEFAULT_INPUTS,
    INPUT_FIELDS,
    build_report
)

__all__ = [
    'AcosForecaster',
    'ForecastReport',
    'RawInputs',
    'DEFAULT_INPUTS',
    'INPUT_FIELDS',
    'build_report'
]

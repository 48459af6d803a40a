"""
Main script to run the ACoS forecast.

Prints current metrics, the forecast at the new CPC/CVR and the
sensitivity curve, then saves everything to outputs/.

Usage:
    python run_forecast.py
"""

from calculator.acos_forecaster import AcosForecaster, RawInputs, INPUT_FIELDS
from utils.formatting import format_chart_value


def main():
    """Run the forecast on the sample campaign."""

    forecaster = AcosForecaster(RawInputs(
        spend="300",
        sales="1,000",
        clicks="500",
        orders="50",
        new_cpc="0.60",
        new_cvr_pct="12"
    ))

    print("\n" + "="*70)
    print("ACOS FORECASTER")
    print("="*70)

    for name, label in INPUT_FIELDS.items():
        print(f"  {label:<14} {getattr(forecaster.inputs, name)}")
    print()

    for line in forecaster.summary_lines():
        print(line)

    print("\n" + "="*70)
    print("SENSITIVITY: ACOS VS CVR")
    print("="*70)

    reference = forecaster.report.reference_acos_pct
    for point in forecaster.report.sensitivity:
        marker = " <- above current" if point.acos_percent > reference else ""
        print(f"  CVR {point.label:>4}: {format_chart_value(point.acos_percent)}{marker}")
    print(f"  Current ACoS: {format_chart_value(reference)}")

    forecaster.save_result()

    print("\n" + "="*70)
    print("[DONE]")
    print("="*70)
    print("\nNext step: Run visualize.py to create the chart!")
    print("="*70)

    return forecaster


if __name__ == "__main__":
    main()

"""
Simple visualization utility.
"""

import json
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import seaborn as sns
from pathlib import Path

from engine.sensitivity import SensitivityPoint, sensitivity_pairs
from utils.formatting import format_percent, format_money, format_units, format_delta

# Set style
sns.set_style("whitegrid")
plt.rcParams['figure.figsize'] = (14, 8)


def visualize_all_results(output_dir: str = 'outputs'):
    """
    Create all visualizations from result files.

    Args:
        output_dir: Directory containing result JSON files
    """
    output_path = Path(output_dir)

    print("\nCreating visualizations...")

    created = []
    for filepath in sorted(output_path.glob('*_result.json')):
        with open(filepath, 'r') as f:
            result = json.load(f)
        print(f"[OK] Loaded {filepath.name}")

        if 'sensitivity' not in result:
            continue

        prefix = filepath.name[:-len('_result.json')]
        created.append(plot_sensitivity(result, output_path, filename=f"viz_{prefix}.png"))

    print("\n[DONE] All visualizations created!")
    print(f"Saved to: {output_path}/")
    return created


def plot_sensitivity(result: dict, output_dir: Path, filename: str = 'viz_acos_sensitivity.png') -> Path:
    """
    Plot ACoS vs CVR with current ACoS as a dashed reference line.

    Args:
        result: Dict from AcosForecaster.to_dict()
        output_dir: Where to save the PNG
        filename: Output file name

    Returns:
        Path of the saved chart
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    fig, axes = plt.subplots(1, 2, figsize=(14, 6), gridspec_kw={'width_ratios': [2, 1]})
    fig.suptitle('Sensitivity: ACoS vs CVR', fontsize=16, fontweight='bold')

    series = [SensitivityPoint(**p) for p in result['sensitivity']]
    pairs = sensitivity_pairs(series)
    labels = [label for label, _ in pairs]
    values = [value for _, value in pairs]
    reference = result['reference_acos_pct']

    # 1. ACoS curve
    ax1 = axes[0]
    ax1.plot(labels, values, linewidth=3, color='#007aff', label='Forecast ACoS')
    ax1.axhline(reference, linestyle='--', color='#ff4d4f', label=f'Current ACoS ({reference:.2f}%)')
    ax1.set_xlabel('CVR')
    ax1.set_ylabel('ACoS (%)')
    ax1.set_title('Holding CPC at your chosen value. Higher CVR lowers ACoS.')
    ax1.legend()
    ax1.grid(alpha=0.3)

    # 2. Metrics
    ax2 = axes[1]
    ax2.axis('off')
    current = result['current_metrics']
    forecast = result['forecast']
    metrics_text = f"""
    Current
    ACoS: {format_percent(current['acos'])}
    Avg CPC: {format_money(current['cpc'])}
    Ad CVR: {format_percent(current['cvr'])}
    Ad AOV: {format_money(current['aov'])}

    Forecast
    New ACoS: {format_percent(forecast['new_acos'])}
    Change: {format_delta(forecast['delta'])}
    Est. Spend: {format_money(forecast['est_spend'])}
    Est. Orders: {format_units(forecast['est_orders'])}
    Est. Sales: {format_money(forecast['est_sales'])}
    """
    ax2.text(0.05, 0.5, metrics_text, fontsize=12, family='monospace', va='center',
            bbox=dict(boxstyle='round', facecolor='lightblue', alpha=0.5))

    plt.tight_layout()
    filepath = output_dir / filename
    plt.savefig(filepath, dpi=150, bbox_inches='tight')
    plt.close(fig)
    print(f"[OK] Created {filename}")
    return filepath

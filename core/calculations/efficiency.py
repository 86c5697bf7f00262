"""
Efficiency Classification

Maps efficiency percentages to display tiers and prepares the
actual vs. possible comparison data for charting.
"""

import math
from typing import List, Tuple

import pandas as pd

from core.calculations.production import ProductionMetrics

TIER_EXCELLENT = "excellent"
TIER_GOOD = "good"
TIER_CAUTION = "caution"
TIER_POOR = "poor"

# (lower bound in percent, tier), checked top-down
EFFICIENCY_THRESHOLDS: List[Tuple[float, str]] = [
    (95.0, TIER_EXCELLENT),
    (85.0, TIER_GOOD),
    (75.0, TIER_CAUTION),
]


def classify_efficiency(percentage: float) -> str:
    """
    Classify an efficiency percentage into a display tier.

    - "excellent": >= 95%
    - "good": >= 85%
    - "caution": >= 75%
    - "poor": everything else, including non-finite values

    Args:
        percentage: Efficiency in percent (e.g. 87.5)

    Returns:
        Tier name
    """
    if percentage is None or not math.isfinite(percentage):
        return TIER_POOR

    for threshold, tier in EFFICIENCY_THRESHOLDS:
        if percentage >= threshold:
            return tier

    return TIER_POOR


def build_performance_frame(metrics: ProductionMetrics, actual_boxes: float) -> pd.DataFrame:
    """
    Build the two-row frame compared in the performance chart.

    Args:
        metrics: ProductionMetrics from calculate_production_metrics
        actual_boxes: Boxes actually completed (operator input)

    Returns:
        DataFrame with columns: name, value
    """
    return pd.DataFrame([
        {'name': 'Actual', 'value': float(actual_boxes)},
        {'name': 'Possible', 'value': metrics.possible_boxes},
    ])

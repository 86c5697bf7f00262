"""
Formatting Utilities

Functions for formatting shift times and metrics for display, and for
validating operator inputs before calculation.
"""

import logging
import math
import pandas as pd
from typing import Tuple, List

from core.calculations.efficiency import classify_efficiency
from core.calculations.production import (
    METRIC_DISPLAY_FORMATS,
    ProductionInputs,
    ProductionMetrics,
    calculate_production_metrics,
    collect_input_errors,
)
from core.exceptions import InvalidInputError
from core.time_windows.models import ShiftWindow

logger = logging.getLogger(__name__)

# Downtime above this share of the shift is flagged
HIGH_DOWNTIME_RATIO = 0.5


def format_shift_window(shift: ShiftWindow) -> str:
    """
    Format a shift as "HH:MM - HH:MM (x.xx hrs)", marking overnight shifts.

    Args:
        shift: ShiftWindow to format

    Returns:
        Formatted shift string
    """
    overnight = ", overnight" if shift.is_overnight else ""
    return f"{shift.start_time} - {shift.stop_time} ({shift.total_hours:.2f} hrs{overnight})"


def format_efficiency(percentage: float) -> str:
    """Format an efficiency percentage with two decimals, "n/a" if not finite"""
    if percentage is None or not math.isfinite(percentage):
        return "n/a"
    return f"{percentage:.2f}%"


def metrics_to_frame(metrics: ProductionMetrics) -> pd.DataFrame:
    """
    Convert metrics to a two-column table for display.

    Efficiency rows carry their tier in a third column; other rows leave it
    empty.

    Args:
        metrics: ProductionMetrics to tabulate

    Returns:
        DataFrame with columns: Metric, Value, Tier
    """
    display = metrics.to_display_dict()
    rows = []
    for name, label, _, unit in METRIC_DISPLAY_FORMATS:
        tier = classify_efficiency(getattr(metrics, name)) if unit == "%" else ""
        rows.append({'Metric': label, 'Value': display[label], 'Tier': tier})
    return pd.DataFrame(rows)


def validate_production_inputs(inputs: ProductionInputs) -> Tuple[List[str], List[str], bool]:
    """
    Validate production inputs and return validation results with warnings/errors.

    Errors block calculation (zero denominators, malformed times, non-finite
    values). Warnings flag readings that calculate fine but look suspicious.

    Args:
        inputs: ProductionInputs entered by the operator

    Returns:
        Tuple of (validation_errors, validation_warnings, is_valid)
    """
    validation_errors = collect_input_errors(inputs)
    validation_warnings = []

    if validation_errors:
        return validation_errors, validation_warnings, False

    # Scale reading went down over the shift
    if inputs.stop_weight < inputs.start_weight:
        validation_warnings.append(
            f"⚠️ Stop weight ({inputs.stop_weight:.1f} lbs) is below start weight "
            f"({inputs.start_weight:.1f} lbs) - total weight will be negative"
        )

    shift = inputs.shift
    if shift.is_overnight:
        validation_warnings.append(
            f"⚠️ Stop time {shift.stop_time} is earlier than start time {shift.start_time} - "
            f"treated as an overnight shift of {shift.total_hours:.2f} hours"
        )

    if inputs.idle_time > shift.total_hours * HIGH_DOWNTIME_RATIO:
        validation_warnings.append(
            f"⚠️ Down time ({inputs.idle_time:.2f} hrs) is more than half of the shift "
            f"({shift.total_hours:.2f} hrs)"
        )

    try:
        possible_boxes = calculate_production_metrics(inputs).possible_boxes
    except InvalidInputError as e:
        # Raw inputs pass but derived values underflow or overflow
        return e.errors, [], False

    if inputs.actual_boxes > possible_boxes:
        validation_warnings.append(
            f"⚠️ Actual boxes ({inputs.actual_boxes}) exceed possible boxes "
            f"({possible_boxes:.2f}) - check production rate and piece hot length"
        )

    if validation_warnings:
        logger.info(f"Production inputs accepted with {len(validation_warnings)} warning(s)")

    return validation_errors, validation_warnings, True

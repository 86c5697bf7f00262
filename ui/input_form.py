"""
Production Input Form UI Component

Provides the operator input card: scale weights, shift times, downtime,
piece geometry, line speed and completed boxes.
"""

import streamlit as st
import logging
from datetime import time
from typing import Optional

from core.calculations.production import ProductionInputs
from core.time_windows.models import split_time_string

logger = logging.getLogger(__name__)


def _time_from_string(time_str: str) -> time:
    """Convert "HH:MM" to a datetime.time for the time widget"""
    hours, minutes = split_time_string(time_str)
    return time(hours, minutes)


def render_production_inputs(
    defaults: ProductionInputs,
    key_prefix: Optional[str] = None
) -> ProductionInputs:
    """
    Render the input card and return the current operator inputs.

    Widgets are seeded from ``defaults`` on first render; afterwards
    Streamlit keeps the operator's values in session state, and every
    change reruns the script so the metrics are recalculated.

    Args:
        defaults: Default-seeded inputs (from utils.config.get_default_inputs)
        key_prefix: Optional unique key prefix for Streamlit widgets

    Returns:
        ProductionInputs built from the widget values
    """
    if key_prefix is None:
        key_prefix = "production_inputs"

    st.subheader("📝 Input Values")

    col1, col2 = st.columns(2)

    with col1:
        start_weight = st.number_input(
            "Start Weight (lbs)",
            value=float(defaults.start_weight),
            step=0.1,
            format="%.1f",
            key=f"{key_prefix}_start_weight"
        )

    with col2:
        stop_weight = st.number_input(
            "Stop Weight (lbs)",
            value=float(defaults.stop_weight),
            step=0.1,
            format="%.1f",
            key=f"{key_prefix}_stop_weight"
        )

    with col1:
        start_time = st.time_input(
            "Start Time",
            value=_time_from_string(defaults.start_time),
            step=60,
            key=f"{key_prefix}_start_time"
        )

    with col2:
        stop_time = st.time_input(
            "Stop Time",
            value=_time_from_string(defaults.stop_time),
            step=60,
            key=f"{key_prefix}_stop_time",
            help="A stop time earlier than the start time is treated as an overnight shift"
        )

    with col1:
        idle_time = st.number_input(
            "Down Time (hours)",
            value=float(defaults.idle_time),
            step=0.1,
            key=f"{key_prefix}_idle_time"
        )

    with col2:
        production_rate = st.number_input(
            "Production Rate (ft/min)",
            value=float(defaults.production_rate),
            step=1.0,
            key=f"{key_prefix}_production_rate"
        )

    with col1:
        piece_hot_length = st.number_input(
            "Piece Hot Length (ft)",
            value=float(defaults.piece_hot_length),
            step=0.01,
            key=f"{key_prefix}_piece_hot_length",
            help="Length of a single piece as cut, before shrinkage"
        )

    with col2:
        parts_per_box = st.number_input(
            "Pieces Per Box",
            value=int(defaults.parts_per_box),
            step=1,
            key=f"{key_prefix}_parts_per_box"
        )

    actual_boxes = st.number_input(
        "Actual Boxes Completed",
        value=int(defaults.actual_boxes),
        step=1,
        key=f"{key_prefix}_actual_boxes"
    )

    inputs = ProductionInputs(
        start_weight=start_weight,
        stop_weight=stop_weight,
        start_time=start_time.strftime("%H:%M"),
        stop_time=stop_time.strftime("%H:%M"),
        idle_time=idle_time,
        piece_hot_length=piece_hot_length,
        parts_per_box=parts_per_box,
        production_rate=production_rate,
        actual_boxes=actual_boxes
    )

    logger.debug(f"Form inputs: {inputs}")

    return inputs

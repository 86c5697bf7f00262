"""
Metrics Display Functions

UI components for displaying the production summary, performance analysis
and the actual vs. possible boxes chart.
"""

import streamlit as st
import pandas as pd
import plotly.graph_objects as go
import logging
from typing import List

from core.calculations.efficiency import (
    TIER_CAUTION,
    TIER_EXCELLENT,
    TIER_GOOD,
    TIER_POOR,
    build_performance_frame,
    classify_efficiency,
)
from core.calculations.production import ProductionInputs, ProductionMetrics
from utils.formatting import format_efficiency, format_shift_window

logger = logging.getLogger(__name__)

# tier -> (light mode, dark mode)
TIER_COLORS = {
    TIER_EXCELLENT: ('#16a34a', '#4ade80'),  # Green
    TIER_GOOD: ('#2563eb', '#60a5fa'),       # Blue
    TIER_CAUTION: ('#ca8a04', '#facc15'),    # Yellow
    TIER_POOR: ('#dc2626', '#f87171'),       # Red
}

FORMULAS = [
    ("Total Weight", "Stop Weight - Start Weight"),
    ("Total Hours", "Stop Time - Start Time"),
    ("Actual Runtime", "Total Hours - Idle Time"),
    ("Weight Per Hour", "Total Weight / Actual Runtime"),
    ("Total Feet", "Production Rate (ft/min) × 60 × Actual Runtime"),
    ("Possible Pieces", "Total Feet / Piece Hot Length"),
    ("Possible Boxes", "Possible Pieces / Pieces Per Box"),
    ("Actual Pieces", "Actual Boxes × Pieces Per Box"),
    ("Nominal Yield", "Possible Boxes / Actual Runtime"),
    ("Difference", "Possible Boxes - Actual Boxes"),
    ("Scrap Time", "Difference / Nominal Yield"),
]


def get_efficiency_color(percentage: float, dark_mode: bool = False) -> str:
    """Hex color for an efficiency percentage in the current mode"""
    light, dark = TIER_COLORS[classify_efficiency(percentage)]
    return dark if dark_mode else light


def _render_value_rows(rows: List[tuple]):
    """Render (label, value, color) rows as a two-column grid"""
    for label, value, color in rows:
        col1, col2 = st.columns(2)
        with col1:
            st.markdown(f"{label}:")
        with col2:
            if color:
                st.markdown(
                    f"<span style='color:{color}; font-weight:600'>{value}</span>",
                    unsafe_allow_html=True
                )
            else:
                st.markdown(f"**{value}**")


def render_production_summary(
    metrics: ProductionMetrics,
    inputs: ProductionInputs,
    dark_mode: bool = False
):
    """
    Display the production summary in two columns.

    Shows:
    - Weight, hours, runtime, weight per hour and total feet on the left
    - Possible pieces/boxes, actual pieces, nominal yield and box efficiency on the right

    Args:
        metrics: ProductionMetrics from calculate_production_metrics
        inputs: ProductionInputs the metrics were calculated from
        dark_mode: Use the dark palette for efficiency colors
    """
    st.subheader("📊 Production Summary")
    st.caption(f"Shift: {format_shift_window(inputs.shift)}")

    display = metrics.to_display_dict()

    col1, col2 = st.columns(2)

    with col1:
        _render_value_rows([
            ("Total Weight", display["Total Weight"], None),
            ("Total Hours", display["Total Hours"], None),
            ("Actual Runtime", display["Actual Runtime"], None),
            ("Weight Per Hour", display["Weight Per Hour"], None),
            ("Total Feet", display["Total Feet"], None),
        ])

    with col2:
        _render_value_rows([
            ("Possible Pieces", display["Possible Pieces"], None),
            ("Possible Boxes", display["Possible Boxes"], None),
            ("Actual Pieces", display["Actual Pieces"], None),
            ("Nominal Yield", display["Nominal Yield"], None),
            (
                "Box Efficiency",
                format_efficiency(metrics.box_efficiency_percent),
                get_efficiency_color(metrics.box_efficiency_percent, dark_mode)
            ),
        ])


def build_performance_chart(performance_df: pd.DataFrame, dark_mode: bool = False) -> go.Figure:
    """
    Build the actual vs. possible boxes bar chart.

    Args:
        performance_df: DataFrame from build_performance_frame (columns: name, value)
        dark_mode: Use the dark template and bar color

    Returns:
        Plotly figure with a single "Boxes" bar trace
    """
    fig = go.Figure()

    fig.add_trace(go.Bar(
        x=performance_df['name'],
        y=performance_df['value'],
        name='Boxes',
        marker_color='#3B82F6' if dark_mode else '#1D4ED8',
        hovertemplate='%{x}<br>%{y:.2f} boxes<extra></extra>'
    ))

    fig.update_layout(
        template='plotly_dark' if dark_mode else 'plotly_white',
        yaxis_title='Boxes',
        height=300,
        margin=dict(t=20, r=30, l=20, b=20),
        showlegend=True,
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1)
    )

    return fig


def render_performance_analysis(
    metrics: ProductionMetrics,
    inputs: ProductionInputs,
    dark_mode: bool = False
):
    """
    Display difference, scrap time, piece efficiency and the boxes chart.

    Args:
        metrics: ProductionMetrics from calculate_production_metrics
        inputs: ProductionInputs the metrics were calculated from
        dark_mode: Use the dark palette for colors and chart
    """
    st.subheader("📈 Performance Analysis")

    display = metrics.to_display_dict()

    col1, col2 = st.columns([1, 2])

    with col1:
        _render_value_rows([
            ("Difference", display["Difference"], None),
            ("Scrap Time", display["Scrap Time"], None),
            (
                "Piece Efficiency",
                format_efficiency(metrics.piece_efficiency_percent),
                get_efficiency_color(metrics.piece_efficiency_percent, dark_mode)
            ),
        ])

    with col2:
        performance_df = build_performance_frame(metrics, inputs.actual_boxes)
        fig = build_performance_chart(performance_df, dark_mode)
        st.plotly_chart(fig, use_container_width=True)


def render_formula_explanation():
    """Display the formulas behind each summary value"""
    st.subheader("🧮 Formula Explanation")

    half = (len(FORMULAS) + 1) // 2
    col1, col2 = st.columns(2)

    for column, offset, formulas in [(col1, 0, FORMULAS[:half]), (col2, half, FORMULAS[half:])]:
        with column:
            for i, (name, formula) in enumerate(formulas, start=offset + 1):
                st.markdown(f"**{i}. {name}** = {formula}")


def render_validation_messages(errors: List[str], warnings: List[str]):
    """
    Display input validation results.

    Args:
        errors: Blocking problems, shown as errors
        warnings: Non-blocking observations, shown as warnings
    """
    for error in errors:
        st.error(f"❌ {error}")

    for warning in warnings:
        st.warning(warning)

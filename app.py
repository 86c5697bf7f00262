"""
Production Calculator - Main Application

Shift production metrics from operator readings:
- Weight throughput from start/stop scale readings
- Possible vs. actual boxes from line speed and piece geometry
- Box and piece efficiency, scrap time

Run with: streamlit run app.py
"""

import streamlit as st
import logging

from config import Config
from utils.config import load_config, validate_config, get_app_config
from utils.formatting import validate_production_inputs
from core.calculations.production import ProductionInputs, calculate_production_metrics
from ui.input_form import render_production_inputs
from ui.metrics_display import (
    render_production_summary,
    render_performance_analysis,
    render_formula_explanation,
    render_validation_messages
)

# Configure logging
logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Load configuration
load_config()

# Streamlit page config
st.set_page_config(
    page_title="Production Calculator",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Validate configuration
config_errors = validate_config()
if config_errors:
    st.error("❌ Configuration errors detected:")
    for error in config_errors:
        st.error(error)
    st.stop()

app_config = get_app_config()

# Sidebar with mode toggle and info
with st.sidebar:
    st.header("⚙️ Display")
    dark_mode = st.toggle("Dark Mode", value=app_config["dark_mode"], key="dark_mode")

    st.header("ℹ️ About")
    st.markdown("""
    Enter the shift readings; every change recalculates the metrics.

    **Efficiency colors:**
    - 🟢 ≥ 95% excellent
    - 🔵 ≥ 85% good
    - 🟡 ≥ 75% caution
    - 🔴 below 75% poor
    """)

if dark_mode:
    st.markdown("""
    <style>
    .stApp { background-color: #111827; color: #f3f4f6; }
    .stApp h1, .stApp h2, .stApp h3 { color: #60a5fa; }
    .stApp label, .stApp p { color: #d1d5db; }
    </style>
    """, unsafe_allow_html=True)

# Main app title
st.title("🏭 Production Calculator")

col_inputs, col_summary = st.columns([1, 2])

with col_inputs:
    inputs = render_production_inputs(
        ProductionInputs.from_dict(app_config["default_inputs"]),
        key_prefix="production_inputs"
    )

with col_summary:
    errors, warnings, is_valid = validate_production_inputs(inputs)
    render_validation_messages(errors, warnings)

    if not is_valid:
        logger.info(f"Skipping calculation: {len(errors)} input error(s)")
        st.info("Correct the inputs above to see production metrics.")
        st.stop()

    metrics = calculate_production_metrics(inputs)
    render_production_summary(metrics, inputs, dark_mode)
    st.divider()
    render_performance_analysis(metrics, inputs, dark_mode)

st.divider()
render_formula_explanation()

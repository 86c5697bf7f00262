"""
Configuration Management

Simple utility for loading and validating environment configuration.
"""

import os
from typing import Any, Dict, Optional
from dotenv import load_dotenv

from config import Config
from core.calculations.production import ProductionInputs, collect_input_errors


def load_config(env_path: Optional[str] = None) -> bool:
    """
    Load environment configuration from .env file.

    Args:
        env_path: Optional path to .env file. If None, searches in current directory.

    Returns:
        bool: True if .env file was found and loaded, False otherwise
    """
    if env_path:
        return load_dotenv(env_path)
    return load_dotenv()


def get_app_config() -> Dict[str, Any]:
    """
    Get application settings.

    Returns:
        dict: log_level, dark_mode and the default-seeded inputs as a dict

    Raises:
        ValueError: If a default input override cannot be parsed
    """
    return {
        "log_level": Config.LOG_LEVEL,
        "dark_mode": Config.DEFAULT_DARK_MODE,
        "default_inputs": get_default_inputs().to_dict(),
    }


def get_default_inputs() -> ProductionInputs:
    """
    Get the default-seeded operator inputs.

    Each field can be overridden with a DEFAULT_<FIELD> environment variable,
    e.g. DEFAULT_START_WEIGHT or DEFAULT_PARTS_PER_BOX.

    Returns:
        ProductionInputs with environment overrides applied

    Raises:
        ValueError: If a numeric override cannot be parsed
    """
    defaults = ProductionInputs()

    converters = {
        "start_weight": float,
        "stop_weight": float,
        "start_time": str,
        "stop_time": str,
        "idle_time": float,
        "piece_hot_length": float,
        "parts_per_box": int,
        "production_rate": float,
        "actual_boxes": int,
    }

    values = {}
    for name, convert in converters.items():
        env_value = os.getenv(f"DEFAULT_{name.upper()}")
        if env_value is None or not env_value.strip():
            values[name] = getattr(defaults, name)
            continue
        try:
            values[name] = convert(env_value.strip())
        except ValueError:
            raise ValueError(
                f"Invalid DEFAULT_{name.upper()}={env_value!r}: expected {convert.__name__}"
            )

    return ProductionInputs(**values)


def validate_config() -> list:
    """
    Validate that the configured defaults can be calculated.

    Returns:
        list: List of configuration problems (empty if all valid)
    """
    problems = []

    try:
        inputs = get_default_inputs()
    except ValueError as e:
        return [str(e)]

    for error in collect_input_errors(inputs):
        problems.append(f"Default inputs: {error}")

    return problems

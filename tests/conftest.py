"""
Shared fixtures for calculator tests
"""

import pytest

from core.calculations.production import ProductionInputs

DEFAULT_ENV_VARS = [
    "DEFAULT_START_WEIGHT",
    "DEFAULT_STOP_WEIGHT",
    "DEFAULT_START_TIME",
    "DEFAULT_STOP_TIME",
    "DEFAULT_IDLE_TIME",
    "DEFAULT_PIECE_HOT_LENGTH",
    "DEFAULT_PARTS_PER_BOX",
    "DEFAULT_PRODUCTION_RATE",
    "DEFAULT_ACTUAL_BOXES",
]


@pytest.fixture(autouse=True)
def clean_default_env(monkeypatch):
    """Keep DEFAULT_* overrides from the host environment out of the tests"""
    for name in DEFAULT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def default_inputs():
    """The seeded shift: 07:20 to 14:50, 0.5 h down, 156 boxes of 6"""
    return ProductionInputs(
        start_weight=35274.0,
        stop_weight=38322.4,
        start_time="07:20",
        stop_time="14:50",
        idle_time=0.5,
        piece_hot_length=4.5,
        parts_per_box=6,
        production_rate=120,
        actual_boxes=156,
    )

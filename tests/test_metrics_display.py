import pytest

from core.calculations.efficiency import build_performance_frame
from core.calculations.production import compute
from ui.metrics_display import FORMULAS, build_performance_chart, get_efficiency_color


def test_efficiency_colors_by_mode():
    assert get_efficiency_color(96.0) == "#16a34a"
    assert get_efficiency_color(96.0, dark_mode=True) == "#4ade80"
    assert get_efficiency_color(90.0) == "#2563eb"
    assert get_efficiency_color(80.0) == "#ca8a04"
    assert get_efficiency_color(8.36) == "#dc2626"


def test_performance_chart(default_inputs):
    metrics = compute(default_inputs)
    fig = build_performance_chart(build_performance_frame(metrics, default_inputs.actual_boxes))

    assert len(fig.data) == 1
    bar = fig.data[0]
    assert bar.name == "Boxes"
    assert list(bar.x) == ["Actual", "Possible"]
    assert list(bar.y) == pytest.approx([156.0, metrics.possible_boxes])
    assert bar.marker.color == "#1D4ED8"


def test_performance_chart_dark_mode(default_inputs):
    metrics = compute(default_inputs)
    fig = build_performance_chart(build_performance_frame(metrics, 156), dark_mode=True)
    assert fig.data[0].marker.color == "#3B82F6"


def test_formula_list_covers_eleven_outputs():
    assert len(FORMULAS) == 11
    assert FORMULAS[-1] == ("Scrap Time", "Difference / Nominal Yield")

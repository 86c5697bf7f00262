from dataclasses import replace

from core.calculations.production import compute
from core.time_windows.models import ShiftWindow
from utils.formatting import (
    format_efficiency,
    format_shift_window,
    metrics_to_frame,
    validate_production_inputs,
)


def test_format_shift_window():
    assert format_shift_window(ShiftWindow("07:20", "14:50")) == "07:20 - 14:50 (7.50 hrs)"
    assert format_shift_window(ShiftWindow("22:00", "02:00")) == "22:00 - 02:00 (4.00 hrs, overnight)"


def test_format_efficiency():
    assert format_efficiency(8.357) == "8.36%"
    assert format_efficiency(float("inf")) == "n/a"


def test_metrics_to_frame(default_inputs):
    frame = metrics_to_frame(compute(default_inputs))

    assert list(frame.columns) == ["Metric", "Value", "Tier"]
    assert len(frame) == 13
    rows = frame.set_index("Metric")
    assert rows.loc["Total Weight", "Value"] == "3048.4 lbs"
    assert rows.loc["Total Weight", "Tier"] == ""
    assert rows.loc["Box Efficiency", "Tier"] == "poor"


class TestValidateProductionInputs:
    def test_default_inputs_are_clean(self, default_inputs):
        errors, warnings, is_valid = validate_production_inputs(default_inputs)
        assert is_valid
        assert errors == []
        assert warnings == []

    def test_errors_block(self, default_inputs):
        errors, warnings, is_valid = validate_production_inputs(replace(default_inputs, parts_per_box=0))
        assert not is_valid
        assert errors == ["Pieces per box must be greater than 0"]
        assert warnings == []

    def test_derived_underflow_blocks(self, default_inputs):
        errors, warnings, is_valid = validate_production_inputs(
            replace(default_inputs, production_rate=1e-300, piece_hot_length=1e300)
        )
        assert not is_valid
        assert errors
        assert warnings == []

    def test_overnight_warning(self, default_inputs):
        _, warnings, is_valid = validate_production_inputs(
            replace(default_inputs, start_time="22:00", stop_time="06:00")
        )
        assert is_valid
        assert any("overnight" in warning for warning in warnings)

    def test_negative_weight_warning(self, default_inputs):
        _, warnings, _ = validate_production_inputs(replace(default_inputs, stop_weight=35000.0))
        assert any("below start weight" in warning for warning in warnings)

    def test_high_downtime_warning(self, default_inputs):
        _, warnings, _ = validate_production_inputs(replace(default_inputs, idle_time=4.0))
        assert any("more than half of the shift" in warning for warning in warnings)

    def test_boxes_above_possible_warning(self, default_inputs):
        _, warnings, _ = validate_production_inputs(replace(default_inputs, actual_boxes=2000))
        assert any("exceed possible boxes" in warning for warning in warnings)

import pytest

from core.exceptions import InvalidInputError
from core.time_windows.models import (
    ShiftWindow,
    calculate_total_hours,
    format_time_string,
    parse_time_minutes,
    parse_time_string,
    split_time_string,
)


class TestParseTimeString:
    def test_hours_and_minutes(self):
        assert parse_time_string("07:20") == pytest.approx(7 + 20 / 60)
        assert parse_time_string("14:50") == pytest.approx(14 + 50 / 60)

    def test_midnight(self):
        assert parse_time_string("00:00") == 0

    def test_single_digit_halves_parse_as_integers(self):
        assert parse_time_string("7:5") == pytest.approx(7 + 5 / 60)

    @pytest.mark.parametrize(
        "bad", ["", "0720", "07:2x", "ab:cd", "07:20:00", "24:00", "07:60", "-1:30", "+7:20", " 7 :20", "07:+5", "07: 5"]
    )
    def test_malformed_times_are_rejected(self, bad):
        with pytest.raises(InvalidInputError):
            parse_time_string(bad)

    def test_surrounding_whitespace_is_ignored(self):
        assert split_time_string(" 07:20 ") == (7, 20)
        assert parse_time_minutes("07:20") == 440

    def test_non_string_is_rejected(self):
        with pytest.raises(InvalidInputError):
            parse_time_string(7.5)

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_time_string("noon")


class TestFormatTimeString:
    def test_zero_padded(self):
        assert format_time_string(7.5) == "07:30"
        assert format_time_string(0.0) == "00:00"

    def test_inverse_of_parse(self):
        for value in ["00:05", "07:20", "14:50", "23:59"]:
            assert format_time_string(parse_time_string(value)) == value

    def test_minutes_round_without_carry(self):
        # 59.994 minutes rounds up to 60 and is not carried into the hour
        assert format_time_string(7.9999) == "07:60"


class TestTotalHours:
    def test_same_day_shift(self):
        assert calculate_total_hours("07:20", "14:50") == pytest.approx(7.5)

    def test_overnight_shift_adds_a_day(self):
        # raw difference is -20 hours
        assert calculate_total_hours("22:00", "02:00") == pytest.approx(4.0)

    def test_equal_times_give_zero(self):
        assert calculate_total_hours("08:00", "08:00") == 0

    def test_whole_minute_shift_is_exact(self):
        # Subtracting the decimal-hour values is off by one ulp
        assert calculate_total_hours("07:20", "14:50") == 7.5
        assert calculate_total_hours("22:10", "06:40") == 8.5


class TestShiftWindow:
    def test_day_shift(self):
        shift = ShiftWindow("07:20", "14:50", 0.5)
        assert not shift.is_overnight
        assert shift.total_hours == pytest.approx(7.5)
        assert shift.runtime_hours == pytest.approx(7.0)

    def test_overnight_shift(self):
        shift = ShiftWindow("22:00", "02:00")
        assert shift.raw_hours == pytest.approx(-20.0)
        assert shift.is_overnight
        assert shift.total_hours == pytest.approx(4.0)

    def test_invalid_time_rejected_on_construction(self):
        with pytest.raises(InvalidInputError):
            ShiftWindow("07:20", "25:00")

    def test_idle_time_equal_to_shift_leaves_no_runtime(self):
        assert ShiftWindow("07:20", "14:50", 7.5).runtime_hours == 0

    def test_repr_marks_overnight(self):
        assert "overnight" in repr(ShiftWindow("22:00", "02:00"))

import pytest

from config import Config
from utils.config import get_app_config, get_default_inputs, validate_config


def test_defaults_without_environment(default_inputs):
    assert get_default_inputs() == default_inputs


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DEFAULT_PARTS_PER_BOX", "8")
    monkeypatch.setenv("DEFAULT_START_TIME", "06:00")
    monkeypatch.setenv("DEFAULT_IDLE_TIME", "1.25")

    inputs = get_default_inputs()

    assert inputs.parts_per_box == 8
    assert inputs.start_time == "06:00"
    assert inputs.idle_time == 1.25
    assert inputs.actual_boxes == 156


def test_blank_override_is_ignored(monkeypatch):
    monkeypatch.setenv("DEFAULT_ACTUAL_BOXES", "  ")
    assert get_default_inputs().actual_boxes == 156


def test_unparseable_override(monkeypatch):
    monkeypatch.setenv("DEFAULT_IDLE_TIME", "half an hour")
    with pytest.raises(ValueError, match="DEFAULT_IDLE_TIME"):
        get_default_inputs()


def test_validate_config_clean():
    assert validate_config() == []


def test_validate_config_reports_unusable_defaults(monkeypatch):
    monkeypatch.setenv("DEFAULT_PIECE_HOT_LENGTH", "0")
    problems = validate_config()
    assert problems == ["Default inputs: Piece hot length must be greater than 0 ft"]


def test_validate_config_reports_bad_override(monkeypatch):
    monkeypatch.setenv("DEFAULT_PARTS_PER_BOX", "six")
    problems = validate_config()
    assert len(problems) == 1
    assert "DEFAULT_PARTS_PER_BOX" in problems[0]


def test_unknown_log_level(monkeypatch):
    monkeypatch.setattr(Config, "LOG_LEVEL", "LOUD")
    with pytest.raises(ValueError, match="LOG_LEVEL"):
        Config.validate()


def test_default_attributes_match_seeded_inputs(default_inputs):
    assert Config.DEFAULT_START_TIME == default_inputs.start_time
    assert Config.DEFAULT_STOP_TIME == default_inputs.stop_time
    assert int(Config.DEFAULT_ACTUAL_BOXES) == default_inputs.actual_boxes
    assert float(Config.DEFAULT_PIECE_HOT_LENGTH) == default_inputs.piece_hot_length


def test_malformed_default_time(monkeypatch):
    monkeypatch.setattr(Config, "DEFAULT_START_TIME", "7h20")
    with pytest.raises(ValueError, match="DEFAULT_START_TIME"):
        Config.validate()


def test_every_bad_setting_is_named(monkeypatch):
    monkeypatch.setattr(Config, "LOG_LEVEL", "LOUD")
    monkeypatch.setattr(Config, "DEFAULT_STOP_TIME", "25:00")
    monkeypatch.setattr(Config, "DEFAULT_PARTS_PER_BOX", "six")
    with pytest.raises(ValueError) as exc_info:
        Config.validate()
    message = str(exc_info.value)
    assert "LOG_LEVEL" in message
    assert "DEFAULT_STOP_TIME" in message
    assert "DEFAULT_PARTS_PER_BOX" in message


def test_get_app_config(default_inputs):
    app_config = get_app_config()
    assert app_config["log_level"] == Config.LOG_LEVEL
    assert app_config["dark_mode"] is Config.DEFAULT_DARK_MODE
    assert app_config["default_inputs"] == default_inputs.to_dict()


def test_get_app_config_follows_overrides(monkeypatch):
    monkeypatch.setattr(Config, "DEFAULT_DARK_MODE", True)
    monkeypatch.setenv("DEFAULT_ACTUAL_BOXES", "160")
    app_config = get_app_config()
    assert app_config["dark_mode"] is True
    assert app_config["default_inputs"]["actual_boxes"] == 160

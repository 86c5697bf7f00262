"""
Configuration Management
Loads and validates environment variables
"""
import os
from dotenv import load_dotenv

from core.exceptions import InvalidInputError
from core.time_windows.models import parse_time_string

load_dotenv()

class Config:
    """Application configuration"""

    # Application Settings
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    DEFAULT_DARK_MODE = os.getenv("DEFAULT_DARK_MODE", "false").lower() in ("1", "true", "yes", "on")

    # Default operator inputs, as read at startup.
    # utils.config.get_default_inputs re-reads them per call.
    DEFAULT_START_WEIGHT = os.getenv("DEFAULT_START_WEIGHT", "35274.0")
    DEFAULT_STOP_WEIGHT = os.getenv("DEFAULT_STOP_WEIGHT", "38322.4")
    DEFAULT_START_TIME = os.getenv("DEFAULT_START_TIME", "07:20")
    DEFAULT_STOP_TIME = os.getenv("DEFAULT_STOP_TIME", "14:50")
    DEFAULT_IDLE_TIME = os.getenv("DEFAULT_IDLE_TIME", "0.5")
    DEFAULT_PIECE_HOT_LENGTH = os.getenv("DEFAULT_PIECE_HOT_LENGTH", "4.5")
    DEFAULT_PARTS_PER_BOX = os.getenv("DEFAULT_PARTS_PER_BOX", "6")
    DEFAULT_PRODUCTION_RATE = os.getenv("DEFAULT_PRODUCTION_RATE", "120")
    DEFAULT_ACTUAL_BOXES = os.getenv("DEFAULT_ACTUAL_BOXES", "156")

    VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

    NUMERIC_DEFAULTS = {
        'DEFAULT_START_WEIGHT': float,
        'DEFAULT_STOP_WEIGHT': float,
        'DEFAULT_IDLE_TIME': float,
        'DEFAULT_PIECE_HOT_LENGTH': float,
        'DEFAULT_PARTS_PER_BOX': int,
        'DEFAULT_PRODUCTION_RATE': float,
        'DEFAULT_ACTUAL_BOXES': int,
    }

    @classmethod
    def validate(cls):
        """Validate required configuration"""
        problems = []

        if cls.LOG_LEVEL not in cls.VALID_LOG_LEVELS:
            problems.append(
                f"Invalid LOG_LEVEL: '{cls.LOG_LEVEL}'. "
                f"Must be one of: {', '.join(cls.VALID_LOG_LEVELS)}"
            )

        # Blank values fall back to the built-in defaults
        for name in ('DEFAULT_START_TIME', 'DEFAULT_STOP_TIME'):
            value = getattr(cls, name)
            if not value.strip():
                continue
            try:
                parse_time_string(value)
            except InvalidInputError as e:
                problems.append(f"Invalid {name}: '{value}'. {e}")

        for name, convert in cls.NUMERIC_DEFAULTS.items():
            value = getattr(cls, name)
            if not value.strip():
                continue
            try:
                convert(value.strip())
            except ValueError:
                problems.append(f"Invalid {name}: '{value}'. Expected {convert.__name__}")

        if problems:
            raise ValueError("; ".join(problems))

        return True

# Validate on import
Config.validate()

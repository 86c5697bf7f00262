"""
Production Calculator - Command Line Interface

Calculates shift production metrics from flags or a JSON input record
and prints them as a table or as JSON.

Usage:
    python cli.py --actual-boxes 160 --stop-time 15:10
    python cli.py --input shift.json --format json
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from config import Config
from core.calculations.efficiency import classify_efficiency
from core.calculations.production import (
    ProductionInputs,
    calculate_production_metrics,
    normalize_input_record,
)
from core.exceptions import InvalidInputError
from utils.config import load_config, get_default_inputs
from utils.formatting import metrics_to_frame, validate_production_inputs

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 2

# flag -> (input field, type, help)
INPUT_FLAGS = [
    ("--start-weight", "start_weight", float, "Scale reading at shift start (lbs)"),
    ("--stop-weight", "stop_weight", float, "Scale reading at shift stop (lbs)"),
    ("--start-time", "start_time", str, "Shift start time (HH:MM, 24-hour)"),
    ("--stop-time", "stop_time", str, "Shift stop time (HH:MM, 24-hour)"),
    ("--idle-time", "idle_time", float, "Down time during the shift (hours)"),
    ("--piece-hot-length", "piece_hot_length", float, "Piece hot length (ft)"),
    ("--parts-per-box", "parts_per_box", int, "Pieces per box"),
    ("--production-rate", "production_rate", float, "Line speed (ft/min)"),
    ("--actual-boxes", "actual_boxes", int, "Boxes actually completed"),
]


def setup_argparse() -> argparse.ArgumentParser:
    """Setup command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="production-calculator",
        description="Calculate shift production metrics (throughput, yield, efficiency, scrap time)"
    )

    parser.add_argument(
        "--input",
        type=str,
        default=None,
        help="Path to a JSON record of inputs (snake_case or camelCase keys); flags override it"
    )

    for flag, dest, value_type, help_text in INPUT_FLAGS:
        parser.add_argument(flag, dest=dest, type=value_type, default=None, help=help_text)

    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=Config.VALID_LOG_LEVELS,
        default=Config.LOG_LEVEL,
        help="Logging level"
    )

    return parser


def build_inputs(args: argparse.Namespace) -> ProductionInputs:
    """
    Merge configured defaults, the optional JSON record and explicit flags.

    Raises:
        InvalidInputError: If the JSON record cannot be read or has unknown keys
    """
    values = get_default_inputs().to_dict()

    if args.input:
        try:
            with open(args.input, "r") as f:
                record = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise InvalidInputError(f"Cannot read input record '{args.input}': {e}")

        if not isinstance(record, dict):
            raise InvalidInputError(f"Input record '{args.input}' must be a JSON object")

        values.update(normalize_input_record(record))

    for _, dest, _, _ in INPUT_FLAGS:
        flag_value = getattr(args, dest)
        if flag_value is not None:
            values[dest] = flag_value

    return ProductionInputs(**values)


def render_text(inputs: ProductionInputs, warnings: List[str]) -> str:
    """Format metrics as an aligned table followed by any warnings"""
    metrics = calculate_production_metrics(inputs)
    table = metrics_to_frame(metrics).to_string(index=False)
    lines = [table]
    lines.extend(warnings)
    return "\n".join(lines)


def render_json(inputs: ProductionInputs, warnings: List[str]) -> str:
    """Format inputs, metrics, tiers and warnings as JSON"""
    metrics = calculate_production_metrics(inputs)
    payload = {
        "inputs": inputs.to_dict(),
        "metrics": metrics.to_dict(),
        "efficiency_tiers": {
            "box": classify_efficiency(metrics.box_efficiency_percent),
            "piece": classify_efficiency(metrics.piece_efficiency_percent),
        },
        "warnings": warnings,
    }
    return json.dumps(payload, indent=2)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = setup_argparse()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    load_config()

    try:
        inputs = build_inputs(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    errors, warnings, is_valid = validate_production_inputs(inputs)
    if not is_valid:
        for error in errors:
            print(f"Error: {error}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    if args.format == "json":
        print(render_json(inputs, warnings))
    else:
        print(render_text(inputs, warnings))

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

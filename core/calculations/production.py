"""
Production Metrics Calculator

Derives shift production metrics from operator-entered readings:
- Scale weights at start and stop of the shift
- Wall-clock start/stop times and downtime
- Piece hot length, pieces per box and line speed
- Boxes actually completed

All metrics are recomputed from the inputs on every call; nothing is cached.
"""

import logging
import math
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Mapping

from core.exceptions import InvalidInputError
from core.time_windows.models import ShiftWindow, parse_time_string

logger = logging.getLogger(__name__)

MINUTES_PER_HOUR = 60

# camelCase field names accepted when loading input records
INPUT_ALIASES = {
    'startWeight': 'start_weight',
    'stopWeight': 'stop_weight',
    'startTime': 'start_time',
    'stopTime': 'stop_time',
    'idleTime': 'idle_time',
    'pieceHotLength': 'piece_hot_length',
    'partsPerBox': 'parts_per_box',
    'productionRate': 'production_rate',
    'actualBoxes': 'actual_boxes',
}

# (field, label, decimals, unit) in display order
METRIC_DISPLAY_FORMATS = [
    ('total_weight', 'Total Weight', 1, 'lbs'),
    ('total_hours', 'Total Hours', 2, 'hrs'),
    ('actual_runtime', 'Actual Runtime', 2, 'hrs'),
    ('weight_per_hour', 'Weight Per Hour', 2, 'lbs/hr'),
    ('total_feet', 'Total Feet', 0, 'ft'),
    ('possible_pieces', 'Possible Pieces', 0, 'pieces'),
    ('possible_boxes', 'Possible Boxes', 2, 'boxes'),
    ('actual_pieces', 'Actual Pieces', 0, 'pieces'),
    ('nominal_yield', 'Nominal Yield', 2, 'boxes/hr'),
    ('difference', 'Difference', 2, 'boxes'),
    ('scrap_time', 'Scrap Time', 2, 'hrs'),
    ('box_efficiency_percent', 'Box Efficiency', 2, '%'),
    ('piece_efficiency_percent', 'Piece Efficiency', 2, '%'),
]


def normalize_input_record(data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Rekey an input record to snake_case field names.

    Only the keys present in the record are returned.

    Raises:
        InvalidInputError: If the record contains unknown keys
    """
    known = set(INPUT_ALIASES.values())
    values = {}
    unknown = []
    for key, value in data.items():
        name = INPUT_ALIASES.get(key, key)
        if name in known:
            values[name] = value
        else:
            unknown.append(key)

    if unknown:
        raise InvalidInputError(f"Unknown input field(s): {', '.join(sorted(unknown))}")

    return values


@dataclass
class ProductionInputs:
    """Operator-entered shift readings"""
    start_weight: float = 35274.0      # lbs
    stop_weight: float = 38322.4       # lbs
    start_time: str = "07:20"          # HH:MM
    stop_time: str = "14:50"           # HH:MM
    idle_time: float = 0.5             # hours
    piece_hot_length: float = 4.5      # ft
    parts_per_box: int = 6
    production_rate: float = 120.0     # ft/min
    actual_boxes: int = 156

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ProductionInputs':
        """
        Build inputs from a record keyed by snake_case or camelCase names.

        Missing keys fall back to the dataclass defaults.

        Raises:
            InvalidInputError: If the record contains unknown keys
        """
        return cls(**normalize_input_record(data))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @property
    def shift(self) -> ShiftWindow:
        return ShiftWindow(self.start_time, self.stop_time, self.idle_time)


@dataclass
class ProductionMetrics:
    """Container for derived shift metrics"""
    total_weight: float             # lbs
    total_hours: float              # hrs
    actual_runtime: float           # hrs
    weight_per_hour: float          # lbs/hr
    total_feet: float               # ft
    possible_pieces: float
    possible_boxes: float
    actual_pieces: float
    nominal_yield: float            # boxes/hr
    difference: float               # boxes
    scrap_time: float               # hrs
    box_efficiency_percent: float   # 0 to 100+
    piece_efficiency_percent: float # 0 to 100+

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary for JSON output"""
        return asdict(self)

    def to_display_dict(self) -> Dict[str, str]:
        """Convert to label -> formatted string with fixed decimals and unit"""
        display = {}
        for name, label, decimals, unit in METRIC_DISPLAY_FORMATS:
            value = getattr(self, name)
            separator = "" if unit == "%" else " "
            display[label] = f"{value:.{decimals}f}{separator}{unit}"
        return display


def _is_finite_number(value: Any) -> bool:
    """True for int/float values (not bool) that fit a finite float"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # int too large to convert to float
        return False


def collect_input_errors(inputs: ProductionInputs) -> List[str]:
    """
    List every reason the inputs would produce non-finite metrics.

    Denominators are rejected when zero or negative:
    - actual runtime (weight per hour, nominal yield)
    - piece hot length (possible pieces)
    - pieces per box (possible boxes)
    - production rate (possible pieces, boxes and nominal yield all become 0)

    Args:
        inputs: ProductionInputs to check

    Returns:
        List of error messages (empty if the inputs are usable)
    """
    errors = []

    numeric_fields = [
        ('start_weight', 'Start weight'),
        ('stop_weight', 'Stop weight'),
        ('idle_time', 'Down time'),
        ('piece_hot_length', 'Piece hot length'),
        ('parts_per_box', 'Pieces per box'),
        ('production_rate', 'Production rate'),
        ('actual_boxes', 'Actual boxes'),
    ]

    finite = {}
    for name, label in numeric_fields:
        value = getattr(inputs, name)
        is_finite = _is_finite_number(value)
        if not is_finite:
            errors.append(f"{label} must be a finite number, got {value!r}")
        finite[name] = is_finite

    times_ok = True
    for name, label in [('start_time', 'Start time'), ('stop_time', 'Stop time')]:
        try:
            parse_time_string(getattr(inputs, name))
        except InvalidInputError as e:
            errors.append(f"{label}: {e}")
            times_ok = False

    if finite['piece_hot_length'] and inputs.piece_hot_length <= 0:
        errors.append("Piece hot length must be greater than 0 ft")

    if finite['parts_per_box'] and inputs.parts_per_box <= 0:
        errors.append("Pieces per box must be greater than 0")

    if finite['production_rate'] and inputs.production_rate <= 0:
        errors.append("Production rate must be greater than 0 ft/min")

    if finite['idle_time'] and inputs.idle_time < 0:
        errors.append("Down time cannot be negative")

    if finite['actual_boxes'] and inputs.actual_boxes < 0:
        errors.append("Actual boxes cannot be negative")

    if times_ok and finite['idle_time']:
        runtime = inputs.shift.runtime_hours
        if runtime <= 0:
            errors.append(
                f"Actual runtime must be greater than 0 hours "
                f"(shift {inputs.shift.total_hours:.2f} hrs, down time {inputs.idle_time:.2f} hrs)"
            )

    return errors


def _rejected(errors: List[str]) -> InvalidInputError:
    logger.warning(f"Rejected production inputs: {errors}")
    return InvalidInputError(errors)


def validate_inputs(inputs: ProductionInputs) -> None:
    """
    Raise InvalidInputError listing every problem with the inputs.
    """
    errors = collect_input_errors(inputs)
    if errors:
        raise _rejected(errors)


def calculate_production_metrics(inputs: ProductionInputs) -> ProductionMetrics:
    """
    Calculate all shift metrics from the operator inputs.

    Formulas, in dependency order:
    - Total Weight = Stop Weight - Start Weight
    - Total Hours = Stop Time - Start Time (+24 if the shift crosses midnight)
    - Actual Runtime = Total Hours - Idle Time
    - Weight Per Hour = Total Weight / Actual Runtime
    - Total Feet = Production Rate (ft/min) × 60 × Actual Runtime
    - Possible Pieces = Total Feet / Piece Hot Length
    - Possible Boxes = Possible Pieces / Pieces Per Box
    - Actual Pieces = Actual Boxes × Pieces Per Box
    - Nominal Yield = Possible Boxes / Actual Runtime
    - Difference = Possible Boxes - Actual Boxes
    - Scrap Time = Difference / Nominal Yield
    - Box Efficiency = Actual Boxes / Possible Boxes × 100%
    - Piece Efficiency = Actual Pieces / Possible Pieces × 100%

    Args:
        inputs: ProductionInputs with the shift readings

    Returns:
        ProductionMetrics with all derived values

    Raises:
        InvalidInputError: If any denominator would be zero or negative, a
                           value is not finite, or a time is malformed

    Examples:
        >>> metrics = calculate_production_metrics(ProductionInputs())
        >>> print(f"Box efficiency: {metrics.box_efficiency_percent:.2f}%")
        Box efficiency: 8.36%
    """
    validate_inputs(inputs)

    total_weight = inputs.stop_weight - inputs.start_weight

    shift = inputs.shift
    total_hours = shift.total_hours
    actual_runtime = total_hours - inputs.idle_time

    weight_per_hour = total_weight / actual_runtime

    feet_per_hour = inputs.production_rate * MINUTES_PER_HOUR
    total_feet = feet_per_hour * actual_runtime

    possible_pieces = total_feet / inputs.piece_hot_length
    possible_boxes = possible_pieces / inputs.parts_per_box
    actual_pieces = float(inputs.actual_boxes) * inputs.parts_per_box

    nominal_yield = possible_boxes / actual_runtime

    # Finite inputs can still underflow the derived denominators to zero
    zero_denominators = [
        label for label, value in [
            ("possible pieces", possible_pieces),
            ("possible boxes", possible_boxes),
            ("nominal yield", nominal_yield),
        ]
        if value == 0
    ]
    if zero_denominators:
        raise _rejected([
            f"Inputs give zero {label}; check production rate and piece hot length"
            for label in zero_denominators
        ])

    difference = possible_boxes - inputs.actual_boxes
    scrap_time = difference / nominal_yield

    box_efficiency = (inputs.actual_boxes / possible_boxes) * 100
    piece_efficiency = (actual_pieces / possible_pieces) * 100

    metrics = ProductionMetrics(
        total_weight=total_weight,
        total_hours=total_hours,
        actual_runtime=actual_runtime,
        weight_per_hour=weight_per_hour,
        total_feet=total_feet,
        possible_pieces=possible_pieces,
        possible_boxes=possible_boxes,
        actual_pieces=actual_pieces,
        nominal_yield=nominal_yield,
        difference=difference,
        scrap_time=scrap_time,
        box_efficiency_percent=box_efficiency,
        piece_efficiency_percent=piece_efficiency
    )

    non_finite = [name for name, value in metrics.to_dict().items() if not math.isfinite(value)]
    if non_finite:
        raise _rejected([
            f"Inputs are out of range: {', '.join(non_finite)} would not be finite"
        ])

    logger.debug(
        f"Calculated metrics: runtime={actual_runtime:.2f}h, "
        f"possible_boxes={possible_boxes:.2f}, box_efficiency={box_efficiency:.2f}%"
    )

    return metrics


compute = calculate_production_metrics

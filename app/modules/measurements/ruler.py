"""
Ruler inputs for height and weight.

A horizontal ruler has one tick ("mark") every RULER_ITEM_WIDTH pixels. The scroll
offset maps linearly to a mark, the mark to a value in the ruler's unit, and that
value to the canonical unit the profile stores (centimeters for height, kilograms
for weight). Switching units keeps the canonical value and moves the ruler.
"""
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

RULER_ITEM_WIDTH = 10

CM_PER_INCH = 2.54
INCHES_PER_FOOT = 12
LB_PER_KG = 2.20462

CM_MAX = 250
FT_MAX = 10
KG_MAX = 300
LB_MAX = 660

HEIGHT_UNITS = ("cm", "ft")
WEIGHT_UNITS = ("kg", "lb")


def round_half_up(value: float) -> int:
    """Round like the client does (0.5 always goes up), not banker's rounding."""
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    """Clamp into [low, high]. NaN counts as low, infinities land on the nearest bound."""
    if math.isnan(value):
        return low
    return max(low, min(high, value))


@dataclass(frozen=True)
class RulerSpec:
    unit: str
    quantity: str
    canonical_unit: str
    max_marks: int
    canonical_max: float
    # marks per canonical unit: 1 for cm/kg, inches per cm for ft, pounds per kg for lb
    marks_per_canonical: float
    major_interval: int
    medium_interval: int

    def to_canonical(self, marks: float) -> float:
        return marks / self.marks_per_canonical

    def from_canonical(self, value: float) -> float:
        return value * self.marks_per_canonical

    def mark_labels(self) -> List[float]:
        """Label per mark; the feet ruler counts inches but labels in feet."""
        if self.unit == "ft":
            return [i / INCHES_PER_FOOT for i in range(self.max_marks + 1)]
        return list(range(self.max_marks + 1))


RULERS: Dict[str, RulerSpec] = {
    "cm": RulerSpec("cm", "height", "cm", CM_MAX, CM_MAX, 1.0, 10, 5),
    "ft": RulerSpec("ft", "height", "cm", FT_MAX * INCHES_PER_FOOT, CM_MAX, 1 / CM_PER_INCH, 12, 6),
    "kg": RulerSpec("kg", "weight", "kg", KG_MAX, KG_MAX, 1.0, 10, 5),
    "lb": RulerSpec("lb", "weight", "kg", LB_MAX, KG_MAX, LB_PER_KG, 20, 10),
}


def get_ruler(unit: str) -> RulerSpec:
    try:
        return RULERS[unit]
    except KeyError:
        raise ValueError(f"Unknown unit: {unit}")


def units_for(quantity: str) -> Tuple[str, str]:
    if quantity == "height":
        return HEIGHT_UNITS
    if quantity == "weight":
        return WEIGHT_UNITS
    raise ValueError(f"Unknown quantity: {quantity}")


def offset_for_value(value: float, unit: str) -> float:
    """Scroll offset that centers the ruler on a canonical value (cm or kg)."""
    ruler = get_ruler(unit)
    return ruler.from_canonical(clamp(value, 0.0, ruler.canonical_max)) * RULER_ITEM_WIDTH


def value_for_offset(offset: float, unit: str) -> float:
    """Canonical value under a scroll offset: snap to the nearest mark, clamp to the ruler."""
    ruler = get_ruler(unit)
    marks = round_half_up(clamp(offset / RULER_ITEM_WIDTH, 0, ruler.max_marks))
    return ruler.to_canonical(marks)


def should_update(new_value: float, current_value: float) -> bool:
    """Scroll events only move the value once it changed by at least one canonical unit."""
    return abs(new_value - current_value) >= 1


def unit_to_canonical(value: float, unit: str) -> float:
    """A reading in a display unit (feet as decimal feet) to centimeters or kilograms."""
    if unit == "ft":
        return value * INCHES_PER_FOOT * CM_PER_INCH
    return get_ruler(unit).to_canonical(value)


def canonical_to_unit(value: float, unit: str) -> float:
    if unit == "ft":
        return value / CM_PER_INCH / INCHES_PER_FOOT
    return get_ruler(unit).from_canonical(value)


def convert(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a reading between the two units of the same quantity."""
    source = get_ruler(from_unit)
    target = get_ruler(to_unit)
    if source.quantity != target.quantity:
        raise ValueError(f"Cannot convert {source.quantity} to {target.quantity}")
    if from_unit == to_unit:
        return value
    return canonical_to_unit(unit_to_canonical(value, from_unit), to_unit)


def parse_input(text: str, unit: str) -> Optional[float]:
    """
    Parse typed input into a canonical value.

    Feet are typed as decimal feet (5.8), pounds as pounds. Returns None for
    anything that is not a non-negative number. Values above the ruler are clamped.
    """
    try:
        number = float(text)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or number < 0:
        return None
    return min(unit_to_canonical(number, unit), get_ruler(unit).canonical_max)


def format_input(value: float, unit: str) -> str:
    """Text shown in the input box for a canonical value."""
    if not math.isfinite(value) or value <= 0:
        return ""
    if unit in ("cm", "kg"):
        return str(round_half_up(value))
    return f"{canonical_to_unit(value, unit):.1f}"


def feet_inches(cm: float) -> Tuple[int, int]:
    total_inches = round_half_up(cm / CM_PER_INCH)
    return total_inches // INCHES_PER_FOOT, total_inches % INCHES_PER_FOOT


def display_value(value: float, unit: str) -> str:
    """Large read-out above the ruler."""
    if unit == "ft":
        feet, inches = feet_inches(value)
        return f"{feet}'{inches}\""
    if unit == "lb":
        return str(round_half_up(value * LB_PER_KG))
    return str(round_half_up(value))


@dataclass
class RulerState:
    """Live state of one ruler input: canonical value, selected unit and whether it is moving."""
    unit: str
    value: float = 0.0
    is_scrolling: bool = False
    offset: float = field(default=0.0)

    def __post_init__(self):
        get_ruler(self.unit)

    @property
    def quantity(self) -> str:
        return get_ruler(self.unit).quantity

    @property
    def is_valid(self) -> bool:
        return self.value > 0

    def load(self, value: Optional[float], unit: Optional[str]) -> None:
        """Preload a saved value; the saved unit wins when it belongs to this quantity."""
        if unit and unit in units_for(self.quantity):
            self.unit = unit
        if value:
            self.value = value
            self.offset = offset_for_value(value, self.unit)

    def scroll_to(self, offset: float) -> bool:
        """Apply a scroll event. Returns True when the value changed."""
        self.offset = offset
        new_value = value_for_offset(offset, self.unit)
        if should_update(new_value, self.value):
            self.value = new_value
            return True
        return False

    def begin_scroll(self) -> None:
        self.is_scrolling = True

    def end_scroll(self) -> None:
        self.is_scrolling = False

    def type_value(self, text: str) -> bool:
        parsed = parse_input(text, self.unit)
        if parsed is None:
            return False
        self.value = parsed
        self.offset = offset_for_value(parsed, self.unit)
        return True

    def toggle_unit(self, new_unit: str) -> bool:
        """Switch units, keeping the value. Ignored while scrolling or when nothing changes."""
        if new_unit == self.unit or self.is_scrolling:
            return False
        if new_unit not in units_for(self.quantity):
            raise ValueError(f"Unit {new_unit} is not a {self.quantity} unit")
        self.unit = new_unit
        if self.value > 0:
            self.offset = offset_for_value(self.value, new_unit)
        return True

    @property
    def input_text(self) -> str:
        return format_input(self.value, self.unit)

    @property
    def display(self) -> str:
        return display_value(self.value, self.unit)

"""
Dial Gauge - Arc Geometry
=========================

Pure functions that turn a gauge value into SVG elliptical-arc path data.
Nothing in this module keeps state; every function can be called from any
widget, test or script.

Coordinate System:
    • Fixed 1000x1000 view box, logical centre at (500, 500)
    • Angle 0 lies on the positive x-axis
    • Angles increase clockwise (screen y grows downwards)
    • Coordinates are rounded half-up to 3 decimal places

Value -> Path Pipeline:
    value ──normalize──> [0, limit]
          ──percentage──> 0..100
          ──angle_for(dial_span)──> sweep angle (degrees)
          ──path_string(start, start + sweep, flag)──> "M .. A .."

Sweep / Large-Arc Rule:
    The dial always runs the long way round between its two angles, so the
    full span is 360 - |start - end|. Sweeps above 180 degrees need the SVG
    large-arc flag set to 1, everything else uses 0.

Example:
    >>> from geometry import value_path
    >>> value_path(50, 100, 400, 135, 45)
    'M 217.157 782.843 A 400 400 0 0 1 500 100'

Author: Dyumna137
Date: 2025-11-06
Version: 2.0
"""

from __future__ import annotations
from typing import Any, NamedTuple
import math
import numbers

# ============================================================================
# === CANVAS CONSTANTS ===
# ============================================================================

VIEWBOX_SIZE = 1000
CENTER_X = 500
CENTER_Y = 500


class Point(NamedTuple):
    x: float
    y: float


class DialCoords(NamedTuple):
    start: Point
    end: Point


# ============================================================================
# === NUMERIC HELPERS ===
# ============================================================================

def to_number(value: Any):
    """
    Coerce a gauge input to a number.

    Real numbers are returned unchanged (ints stay ints), numeric strings are
    parsed as floats. Booleans and anything else are rejected.

    Raises:
        TypeError: If value is not a real number or a string
        ValueError: If a string does not parse as a number
    """
    if isinstance(value, bool):
        raise TypeError(f"expected a number, got bool {value!r}")
    if isinstance(value, numbers.Real):
        return value
    if isinstance(value, str):
        return float(value.strip())
    raise TypeError(f"expected a number, got {type(value).__name__}")


def round_half_up(value: float, digits: int = 0) -> float:
    """Round to `digits` decimals with halves rounded towards +infinity."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def format_number(value: float) -> str:
    """Format a path number: integral values are written without '.0'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# ============================================================================
# === VALUE MAPPING ===
# ============================================================================

def normalize(value: Any, limit: float):
    """
    Clamp a value to the closed range [0, limit].

    Raises:
        TypeError / ValueError: If value is not numeric or is NaN
    """
    val = to_number(value)
    if math.isnan(val):
        raise ValueError("value must not be NaN")
    if val > limit:
        return limit
    if val < 0:
        return 0
    return val


def percentage(value: float, limit: float) -> float:
    return 100 * value / limit


def angle_for(percent: float, span_angle: float) -> float:
    """Translate a percentage to an angle, e.g. 50% of a 180deg span is 90deg."""
    return percent * span_angle / 100


def dial_span(start_angle: float, end_angle: float) -> float:
    """Total angle covered by a dial running the long way from start to end."""
    return 360 - abs(start_angle - end_angle)


def sweep_angle(value: float, limit: float, start_angle: float, end_angle: float) -> float:
    return angle_for(percentage(value, limit), dial_span(start_angle, end_angle))


def large_arc_flag(sweep: float) -> int:
    return 1 if sweep > 180 else 0


# ============================================================================
# === COORDINATES AND PATHS ===
# ============================================================================

def cartesian(cx: float, cy: float, radius: float, angle: float) -> Point:
    """
    Get cartesian coordinates for a point on a circle.

    Args:
        cx: Centre x coordinate
        cy: Centre y coordinate
        radius: Circle radius
        angle: Angle in degrees (0 = +x axis, clockwise)

    Returns:
        Point rounded half-up to 3 decimal places

    Example:
        >>> cartesian(500, 500, 400, 135)
        Point(x=217.157, y=782.843)
    """
    rad = angle * math.pi / 180
    return Point(
        round_half_up(cx + radius * math.cos(rad), 3),
        round_half_up(cy + radius * math.sin(rad), 3),
    )


def dial_coords(radius: float, start_angle: float, end_angle: float) -> DialCoords:
    """Start and end points of an arc around the fixed canvas centre."""
    return DialCoords(
        start=cartesian(CENTER_X, CENTER_Y, radius, start_angle),
        end=cartesian(CENTER_X, CENTER_Y, radius, end_angle),
    )


def path_string(radius: float, start_angle: float, end_angle: float,
                large_arc: int = 1) -> str:
    """
    Build an SVG arc path command from start_angle to end_angle.

    The sweep flag is always 1 (clockwise). large_arc defaults to 1 only
    when omitted; callers drawing a real value must pass 0 or 1 explicitly.
    Equal angles give a zero-length arc, which is valid and draws nothing.
    """
    coords = dial_coords(radius, start_angle, end_angle)
    parts = [
        'M', coords.start.x, coords.start.y,
        'A', radius, radius, 0, large_arc, 1,
        coords.end.x, coords.end.y,
    ]
    return ' '.join(p if isinstance(p, str) else format_number(p) for p in parts)


def value_path(value: float, limit: float, radius: float,
               start_angle: float, end_angle: float) -> str:
    """Foreground arc path for `value` on a dial with the given limit."""
    sweep = sweep_angle(value, limit, start_angle, end_angle)
    return path_string(radius, start_angle, start_angle + sweep, large_arc_flag(sweep))


def dial_path(radius: float, start_angle: float, end_angle: float) -> str:
    """Background arc path: the full dial at 100%."""
    sweep = angle_for(100, dial_span(start_angle, end_angle))
    return path_string(radius, start_angle, end_angle, large_arc_flag(sweep))

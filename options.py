"""
Dial Gauge - Option Definitions
===============================

This module defines the configuration accepted by the dial gauge and the
records produced when a configuration has to be corrected. It is the single
source of truth for option names, defaults and validation.

Key Concepts:
    • GaugeOptions: Immutable gauge configuration (frozen dataclass)
    • Correction: Record of a silent, recoverable fix applied to options
    • ConfigurationError: Raised for input that cannot be corrected

Usage:
    From keyword arguments:
        from options import GaugeOptions
        opts = GaugeOptions(max_value=200, initial_value=20)

    From a mapping using the public option keys:
        opts = GaugeOptions.from_mapping({'max': 200, 'dialStartAngle': 180})

    Validate and normalize:
        resolved, corrections = opts.resolve()
        for c in corrections:
            print(c.message)

Notes:
    • resolve() never mutates; it returns a new instance
    • Inverted dial angles are swapped, not rejected
    • Out-of-range initial values are clamped, not rejected

Author: Dyumna137
Date: 2025-11-06
Version: 2.0
"""

from __future__ import annotations
from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Mapping, Optional, Tuple
import math

from geometry import normalize, round_half_up, to_number


# ============================================================================
# === ERRORS AND CORRECTIONS ===
# ============================================================================

class ConfigurationError(ValueError):
    """Raised when gauge options or values cannot be used to draw a gauge."""


@dataclass(frozen=True)
class Correction:
    """
    A recoverable fix applied while resolving gauge options.

    Attributes:
        field (str): Option field that was corrected (e.g. 'dial_start_angle')
        original (Any): Value supplied by the caller
        corrected (Any): Value actually used
        message (str): Human-readable notice (also printed)
    """

    field: str
    original: Any
    corrected: Any
    message: str


def default_label_renderer(value: float) -> int:
    """Render the label as the value rounded half-up to an integer."""
    return int(round_half_up(value))


# Public option key -> dataclass field
OPTION_KEYS = {
    'dialStartAngle': 'dial_start_angle',
    'dialEndAngle': 'dial_end_angle',
    'radius': 'radius',
    'max': 'max_value',
    'value': 'initial_value',
    'showValue': 'show_value',
    'label': 'label',
    'valueDialClass': 'value_dial_class',
    'valueTextClass': 'value_text_class',
    'dialClass': 'dial_class',
    'gaugeClass': 'gauge_class',
}


# ============================================================================
# === GAUGE OPTIONS ===
# ============================================================================

@dataclass(frozen=True)
class GaugeOptions:
    """
    Immutable configuration for one dial gauge.

    Angles are in degrees, 0 on the positive x-axis and increasing clockwise
    in screen space. The dial runs the long way round from
    dial_start_angle to dial_end_angle.

    Attributes:
        dial_start_angle (float): Where the dial starts (default: 135)
        dial_end_angle (float): Where the dial ends (default: 45)
        radius (float): Arc radius on the 1000x1000 canvas (default: 400)
        max_value (float): Upper limit of the value range (default: 100)
        initial_value (float): Value drawn at construction (default: 0)
        show_value (bool): Draw the centred label (default: True)
        label (Optional[Callable]): value -> displayable, None for the
                                    default integer renderer
        value_dial_class (str): Class of the foreground arc
        value_text_class (str): Class of the label text
        dial_class (str): Class of the background arc
        gauge_class (str): Class of the svg root

    Example:
        >>> opts = GaugeOptions(max_value=8000, label=lambda v: f"{v:.0f} rpm")
        >>> resolved, corrections = opts.resolve()
    """

    dial_start_angle: float = 135
    dial_end_angle: float = 45
    radius: float = 400
    max_value: float = 100
    initial_value: float = 0
    show_value: bool = True
    label: Optional[Callable[[float], Any]] = None
    value_dial_class: str = 'value'
    value_text_class: str = 'value-text'
    dial_class: str = 'dial'
    gauge_class: str = 'gauge'

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping[str, Any]]) -> "GaugeOptions":
        """
        Build options from a mapping of public option keys.

        Both the public keys ('dialStartAngle', 'max', 'value', ...) and the
        dataclass field names are accepted.

        Raises:
            ConfigurationError: If the mapping contains an unknown key
        """
        if not mapping:
            return cls()
        field_names = {f.name for f in fields(cls)}
        kwargs = {}
        unknown = []
        for key, value in mapping.items():
            name = OPTION_KEYS.get(key, key)
            if name not in field_names:
                unknown.append(key)
                continue
            kwargs[name] = value
        if unknown:
            raise ConfigurationError(f"Unknown gauge option(s): {', '.join(sorted(unknown))}")
        return cls(**kwargs)

    @property
    def label_renderer(self) -> Callable[[float], Any]:
        return self.label if self.label is not None else default_label_renderer

    def resolve(self) -> Tuple["GaugeOptions", Tuple[Correction, ...]]:
        """
        Validate the options and apply recoverable corrections.

        Returns:
            (resolved options, corrections applied)

        Raises:
            ConfigurationError: For non-numeric or non-finite numbers,
                                max_value <= 0, radius <= 0, equal dial
                                angles or a non-callable label
        """
        start = _finite('dialStartAngle', self.dial_start_angle)
        end = _finite('dialEndAngle', self.dial_end_angle)
        radius = _finite('radius', self.radius)
        limit = _finite('max', self.max_value)
        value = _finite('value', self.initial_value)

        if radius <= 0:
            raise ConfigurationError(f"radius must be greater than 0 (got {radius})")
        if limit <= 0:
            raise ConfigurationError(f"max must be greater than 0 (got {limit})")
        if start == end:
            raise ConfigurationError(f"dial start and end angles must differ (both {start})")
        if self.label is not None and not callable(self.label):
            raise ConfigurationError("label must be callable")

        corrections = []
        if start < end:
            message = "WARNING! Start angle should be greater than end angle. Swapping"
            print(f"⚠️  {message}")
            corrections.append(Correction('dial_start_angle', start, end, message))
            corrections.append(Correction('dial_end_angle', end, start, message))
            start, end = end, start

        clamped = normalize(value, limit)
        if clamped != value:
            corrections.append(Correction(
                'initial_value', value, clamped,
                f"Initial value {value} clamped to {clamped} (range 0..{limit})",
            ))

        resolved = replace(
            self,
            dial_start_angle=start,
            dial_end_angle=end,
            radius=radius,
            max_value=limit,
            initial_value=clamped,
            show_value=bool(self.show_value),
        )
        return resolved, tuple(corrections)


def _finite(key: str, value: Any) -> float:
    try:
        number = to_number(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{key} must be a number (got {value!r})") from None
    if not math.isfinite(number):
        raise ConfigurationError(f"{key} must be finite (got {value!r})")
    return number

"""
Gauge Widget - Circular SVG Dial Gauge
======================================

Builds a circular dial gauge as an SVG element tree inside a drawable
container and keeps it in sync with a numeric value.

Rendered Structure:
    <svg viewBox="0 0 1000 1000" class="gauge">
        <path class="dial" .../>          background arc (full range, static)
        <text class="value-text" .../>    centred label (only if showValue)
        <path class="value" .../>         foreground arc (current value)
    </svg>

Features:
    • Value automatically clamped to [0, max]
    • Instant updates (setValue) or eased ~60 Hz animation (setValueAnimated)
    • Custom label renderer, custom class names for external styling
    • Inverted dial angles corrected and reported (gauge.corrections)
    • Injectable frame scheduler (deterministic tests, Qt in production)

Usage Examples:
    Basic usage:
        import xml.etree.ElementTree as ET
        from widgets.gauge import create

        page = ET.Element('div')
        gauge = create(page, {'max': 200, 'value': 20})
        gauge.setValue(150)
        print(gauge.svg_string())

    Animated updates (Qt event loop running):
        gauge.setValueAnimated(80, 1.5)
        gauge.getValue()   # 80 immediately, arc catches up over 90 frames

    Displaying in a Qt window:
        see widgets.svg_view.GaugeView

Animation Policy:
    At most one animation runs per gauge. A new setValueAnimated() preempts
    the running one and restarts from the value currently on screen;
    setValue() cancels it outright.

Author: Dyumna137
Date: 2025-11-06
Version: 2.0
"""

from __future__ import annotations
from typing import Any, Callable, Mapping, Optional, Tuple, Union
import math
import xml.etree.ElementTree as ET

from animation import (
    AnimationHandle, AnimationJob, FrameScheduler, QtFrameScheduler,
    animate, ease_in_out_cubic,
)
from geometry import (
    CENTER_X, VIEWBOX_SIZE, dial_path, format_number, normalize,
    round_half_up, to_number, value_path,
)
from options import ConfigurationError, Correction, GaugeOptions

SVG_NS = 'http://www.w3.org/2000/svg'

# ============================================================================
# === SHAPE STYLE CONSTANTS ===
# ============================================================================

_DIAL_STYLE = {'fill': 'transparent', 'stroke': '#eee', 'stroke-width': '20'}
_VALUE_STYLE = {'fill': 'transparent', 'stroke': '#666', 'stroke-width': '25'}
_TEXT_STYLE = {
    'x': str(CENTER_X),
    'y': '550',
    'font-size': '400%',
    'font-family': 'sans-serif',
    'font-weight': 'bold',
    'text-anchor': 'middle',
}


def svg(name: str, attrs: Mapping[str, Any], children=()) -> ET.Element:
    """Create an SVG element with string attributes and optional children."""
    elem = ET.Element(name, {k: str(v) for k, v in attrs.items()})
    for child in children:
        elem.append(child)
    return elem


class Gauge:
    """
    Circular dial gauge bound to one drawable container.

    Attributes:
        options (GaugeOptions): Resolved, immutable configuration
        corrections (tuple): Corrections applied to the supplied options
        root (Element): The <svg> element appended to the container
        dial_element (Element): Background arc <path>
        text_element (Optional[Element]): Label <text>, None if hidden
        value_element (Element): Foreground arc <path>

    Example:
        >>> page = ET.Element('div')
        >>> g = Gauge(page)
        >>> g.setValue(50)
        >>> g.value_element.get('d')
        'M 217.157 782.843 A 400 400 0 0 1 500 100'
    """

    def __init__(self, container, options: Union[GaugeOptions, Mapping[str, Any], None] = None,
                 scheduler: Optional[FrameScheduler] = None,
                 on_redraw: Optional[Callable[["Gauge"], None]] = None):
        """
        Args:
            container: Drawable surface with an append(element) method
            options: GaugeOptions, mapping of option keys, or None
            scheduler: Frame scheduler for animations
                       (default: QtFrameScheduler, created on first use)
            on_redraw: Called with the gauge after every redraw

        Raises:
            ConfigurationError: If the options cannot be used
        """
        if not isinstance(options, GaugeOptions):
            options = GaugeOptions.from_mapping(options)
        self.options, self.corrections = options.resolve()

        self._limit = self.options.max_value
        self._value = self.options.initial_value
        self._displayed = self._value
        self._label_renderer = self.options.label_renderer
        self._scheduler = scheduler
        self._on_redraw = on_redraw
        self._animation: Optional[AnimationHandle] = None

        self._build(container)
        self._update(self._value)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def setMaxValue(self, max_value: float) -> None:
        """
        Replace the upper limit of the gauge.

        The stored value is re-clamped to the new range and any running
        animation is stopped, but the drawing is NOT refreshed; call
        setValue()/setValueAnimated() to show the new scale.

        Raises:
            ConfigurationError: If max_value is not a positive finite number
        """
        limit = self._number(max_value, 'max')
        if not math.isfinite(limit) or limit <= 0:
            raise ConfigurationError(f"max must be a positive finite number (got {max_value!r})")
        self.cancelAnimation()
        self._limit = limit
        self._value = normalize(self._value, limit)

    def getMaxValue(self) -> float:
        return self._limit

    def setValue(self, value: float) -> None:
        """Clamp, store and draw a value immediately (cancels any animation)."""
        self.cancelAnimation()
        self._value = self._normalize(value)
        self._update(self._value)

    def setValueAnimated(self, value: float, duration: float = 1,
                         easing: Callable[[float], float] = ease_in_out_cubic
                         ) -> Optional[AnimationHandle]:
        """
        Animate from the current value to a new one.

        getValue() returns the new value immediately; the drawing follows
        frame by frame from the value currently drawn. Nothing is scheduled
        when the clamped target is already both stored and drawn.

        Args:
            value: Target value (clamped to [0, max])
            duration: Seconds at 60 frames per second (default: 1)
            easing: progress -> eased progress (default: ease_in_out_cubic)

        Returns:
            The AnimationHandle, or None if no animation was needed

        Raises:
            ConfigurationError: For a non-numeric value or a negative duration
        """
        target = self._normalize(value)
        duration = self._number(duration, 'duration')
        if not math.isfinite(duration) or duration < 0:
            raise ConfigurationError(f"duration must be a non-negative number (got {duration!r})")
        if target == self._value and (self.isAnimating() or target == self._displayed):
            return None

        start = self._displayed
        self.cancelAnimation()
        self._value = target

        job = AnimationJob(start=start, end=target, duration=duration,
                           step=self._animation_step, easing=easing)
        self._animation = animate(job, self._frame_scheduler(), on_finish=self._animation_done)
        return self._animation

    def getValue(self) -> float:
        """Last value set, not the value currently shown by an animation."""
        return self._value

    def isAnimating(self) -> bool:
        return self._animation is not None and self._animation.is_active

    def cancelAnimation(self) -> None:
        """Stop the running animation, leaving the drawing where it is."""
        if self._animation is not None:
            self._animation.cancel()
            self._animation = None

    @property
    def displayed_value(self) -> float:
        """Value the drawing currently shows."""
        return self._displayed

    def svg_string(self) -> str:
        return ET.tostring(self.root, encoding='unicode')

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def _build(self, container) -> None:
        opts = self.options
        self.dial_element = svg('path', dict(
            _DIAL_STYLE,
            **{'class': opts.dial_class,
               'd': dial_path(opts.radius, opts.dial_start_angle, opts.dial_end_angle)}))
        self.text_element = None
        if opts.show_value:
            self.text_element = svg('text', dict(_TEXT_STYLE, **{'class': opts.value_text_class}))
        self.value_element = svg('path', dict(
            _VALUE_STYLE,
            **{'class': opts.value_dial_class,
               'd': value_path(0, self._limit, opts.radius,
                               opts.dial_start_angle, opts.dial_end_angle)}))

        shapes = [self.dial_element, self.text_element, self.value_element]
        self.root = svg('svg', {
            'xmlns': SVG_NS,
            'viewBox': f'0 0 {VIEWBOX_SIZE} {VIEWBOX_SIZE}',
            'class': opts.gauge_class,
        }, [s for s in shapes if s is not None])
        container.append(self.root)

    def _update(self, value: float) -> None:
        opts = self.options
        # _displayed only moves once the frame has rendered
        text = None
        if self.text_element is not None:
            text = self._label_renderer(value)
            if isinstance(text, float):
                text = format_number(text)
        d = value_path(value, self._limit, opts.radius, opts.dial_start_angle, opts.dial_end_angle)

        self._displayed = value
        if self.text_element is not None:
            self.text_element.text = str(text)
        self.value_element.set('d', d)
        if self._on_redraw is not None:
            self._on_redraw(self)

    def _animation_step(self, value: float) -> None:
        self._update(normalize(round_half_up(value, 2), self._limit))

    def _animation_done(self, handle: AnimationHandle) -> None:
        if self._animation is handle:
            self._animation = None

    def _frame_scheduler(self) -> FrameScheduler:
        if self._scheduler is None:
            self._scheduler = QtFrameScheduler()
        return self._scheduler

    def _normalize(self, value: Any) -> float:
        try:
            return normalize(value, self._limit)
        except (TypeError, ValueError):
            raise ConfigurationError(f"value must be a number (got {value!r})") from None

    @staticmethod
    def _number(value: Any, key: str) -> float:
        try:
            return to_number(value)
        except (TypeError, ValueError):
            raise ConfigurationError(f"{key} must be a number (got {value!r})") from None


def create(container, options: Union[GaugeOptions, Mapping[str, Any], None] = None,
           scheduler: Optional[FrameScheduler] = None,
           on_redraw: Optional[Callable[[Gauge], None]] = None) -> Gauge:
    """
    Create a gauge inside `container` and return its handle.

    Any corrections applied to the options are available as
    `gauge.corrections`.
    """
    return Gauge(container, options, scheduler=scheduler, on_redraw=on_redraw)


def create_with_corrections(container, options=None, scheduler=None,
                            on_redraw=None) -> Tuple[Gauge, Tuple[Correction, ...]]:
    """Like create(), returning (gauge, corrections) explicitly."""
    gauge = create(container, options, scheduler=scheduler, on_redraw=on_redraw)
    return gauge, gauge.corrections

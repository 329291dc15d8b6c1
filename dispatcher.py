"""
Dial Gauge - Event Dispatcher
=============================

This module provides a global event dispatcher using Qt's signal/slot
mechanism so that data sources can push values to gauges without holding a
reference to any widget.

Architecture Pattern: Observer/Publish-Subscribe
    • Publishers: Data sources (serial readers, file replays, timers)
    • Dispatcher: Central event hub (this module)
    • Subscribers: Gauges, attached through GaugeBinding

Signal Flow Example:
    Sensor reader → dispatch.gaugeValueUpdated.emit('rpm', 5200.0)
                 ↓
    Dispatcher (this module)
                 ↓
    GaugeBinding('rpm', view) → view.setValueAnimated(5200.0, 1.0)

Usage Examples:
    Binding a gauge:
        from dispatcher import dispatch, GaugeBinding
        binding = GaugeBinding('cpu', cpu_view, animated=True, duration=0.5)

    Emitting updates (from a data source):
        dispatch.gaugeValueUpdated.emit('cpu', 45.2)
        dispatch.gaugeMaxUpdated.emit('cpu', 200.0)

    Detaching:
        binding.disconnect()

Thread Safety:
    Qt signals are thread-safe when used with appropriate connection types:
    • Qt.ConnectionType.AutoConnection (default): Thread-aware, safe
    • Gauges must only be touched on the GUI thread; emitting from a worker
      thread queues the update onto the receiver's thread

Author: Dyumna137
Date: 2025-11-06
Version: 2.0
"""

from __future__ import annotations
from PyQt6.QtCore import QObject, pyqtSignal
from typing import Dict, Optional


class Dispatcher(QObject):
    """
    Global event dispatcher for gauge updates.

    Signals:
        gaugeValueUpdated (str, float):
            A new value for the gauge with the given id.
            Example: ('rpm', 5200.0)

        gaugeMaxUpdated (str, float):
            A new upper limit for the gauge with the given id.
            Example: ('rpm', 9000.0)

    Usage Pattern:
        # Singleton pattern: One global dispatcher instance
        from dispatcher import dispatch
        dispatch.gaugeValueUpdated.emit('rpm', 5200.0)
    """

    # Type: (gauge_id, value)
    gaugeValueUpdated = pyqtSignal(str, float)

    # Type: (gauge_id, max_value)
    gaugeMaxUpdated = pyqtSignal(str, float)

    def __init__(self) -> None:
        super().__init__()

    def get_signal_info(self) -> Dict[str, int]:
        """
        Get information about signal connection counts.

        Example:
            >>> dispatch.get_signal_info()
            {'gaugeValueUpdated': 2, 'gaugeMaxUpdated': 2}
        """
        return {
            'gaugeValueUpdated': self.receivers(self.gaugeValueUpdated),
            'gaugeMaxUpdated': self.receivers(self.gaugeMaxUpdated),
        }

    def disconnect_all(self):
        """
        Disconnect all slots from all signals.

        Warning:
            This will break all existing bindings! Typically only used
            during testing or application shutdown.
        """
        try:
            self.gaugeValueUpdated.disconnect()
        except TypeError:
            pass  # No connections to disconnect

        try:
            self.gaugeMaxUpdated.disconnect()
        except TypeError:
            pass


# ============================================================================
# === GAUGE BINDING ===
# ============================================================================

class GaugeBinding:
    """
    Routes dispatcher updates addressed to one gauge id onto a gauge.

    Any object with the gauge value API (Gauge, GaugeView) can be bound.
    A max update re-sets the current value afterwards, since setMaxValue()
    alone does not redraw.

    Args:
        gauge_id: Id the data source uses for this gauge
        gauge: Gauge or GaugeView
        animated: Use setValueAnimated (default: True)
        duration: Animation duration in seconds (default: 1.0)
        source: Dispatcher to listen on (default: global dispatch)
    """

    def __init__(self, gauge_id: str, gauge, animated: bool = True,
                 duration: float = 1.0, source: Optional[Dispatcher] = None):
        self.gauge_id = gauge_id
        self.gauge = gauge
        self.animated = animated
        self.duration = duration
        self.source = source if source is not None else dispatch
        self.source.gaugeValueUpdated.connect(self._on_value)
        self.source.gaugeMaxUpdated.connect(self._on_max)
        self._connected = True

    def disconnect(self) -> None:
        if not self._connected:
            return
        self.source.gaugeValueUpdated.disconnect(self._on_value)
        self.source.gaugeMaxUpdated.disconnect(self._on_max)
        self._connected = False

    def _on_value(self, gauge_id: str, value: float) -> None:
        if gauge_id != self.gauge_id:
            return
        if self.animated:
            self.gauge.setValueAnimated(value, self.duration)
        else:
            self.gauge.setValue(value)

    def _on_max(self, gauge_id: str, max_value: float) -> None:
        if gauge_id != self.gauge_id:
            return
        self.gauge.setMaxValue(max_value)
        self.gauge.setValue(self.gauge.getValue())


# ============================================================================
# === GLOBAL DISPATCHER INSTANCE (Singleton Pattern) ===
# ============================================================================

dispatch = Dispatcher()

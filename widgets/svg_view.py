"""
GaugeView Widget - Qt Display Surface for the Dial Gauge
========================================================

A QSvgWidget that hosts one dial gauge. The view is the gauge's drawable
container: the gauge appends its <svg> root to the view, and every redraw
(instant or animation frame) re-loads the serialized document into the
widget's SVG renderer.

Features:
    • Drop-in PyQt6 widget, works in layouts and Qt Designer promotion
    • Animations paced by QtFrameScheduler (~60 Hz on the GUI thread)
    • Same value API as the gauge (setValue, setValueAnimated, ...)
    • Compact size hint in embedded mode (GAUGE_EMBEDDED=1 or ARM host)

Usage Examples:
    Basic usage:
        view = GaugeView({'max': 8000, 'label': lambda v: f"{v:.0f}"})
        layout.addWidget(view)
        view.setValueAnimated(4500)

    Driven by the dispatcher:
        from dispatcher import dispatch, GaugeBinding
        binding = GaugeBinding('rpm', view)
        dispatch.gaugeValueUpdated.emit('rpm', 5200.0)

    Qt Designer promotion:
        Base class: QWidget
        Promoted class: GaugeView
        Header file: widgets.svg_view

Author: Dyumna137
Date: 2025-11-06
Version: 2.0
"""

from __future__ import annotations
import os
import platform
import xml.etree.ElementTree as ET

from PyQt6.QtCore import QByteArray, QSize
from PyQt6.QtSvgWidgets import QSvgWidget

from animation import QtFrameScheduler
from .gauge import Gauge

# Detect embedded/Raspberry Pi mode via env var or platform
_embedded_env = os.getenv("GAUGE_EMBEDDED", "").lower()
_is_arm = "arm" in platform.machine().lower() or "aarch" in platform.machine().lower()
_EMBEDDED_MODE = (_embedded_env in ("1", "true", "yes")) or _is_arm


class GaugeView(QSvgWidget):
    """
    Qt widget rendering a dial gauge.

    Attributes:
        gauge (Gauge): The hosted gauge (full gauge API)

    Example:
        >>> view = GaugeView({'value': 25})
        >>> view.setValue(75)
        >>> view.getValue()
        75
    """

    def __init__(self, options=None, parent=None, scheduler=None):
        """
        Args:
            options: GaugeOptions or mapping of option keys (default: None)
            parent: Parent widget (default: None)
            scheduler: Frame scheduler (default: QtFrameScheduler owned by the view)
        """
        super().__init__(parent)
        self._svg_root = None
        if scheduler is None:
            scheduler = QtFrameScheduler(parent=self)
        self.gauge = Gauge(self, options, scheduler=scheduler, on_redraw=self._refresh)

    # === Drawable container protocol ===

    def append(self, element: ET.Element) -> None:
        """Receive the gauge's <svg> root."""
        self._svg_root = element

    def svg_bytes(self) -> bytes:
        """Current SVG document as UTF-8 bytes (empty before the gauge is built)."""
        if self._svg_root is None:
            return b""
        return ET.tostring(self._svg_root, encoding='utf-8')

    def sizeHint(self) -> QSize:
        return QSize(160, 160) if _EMBEDDED_MODE else QSize(200, 200)

    # === Gauge API passthrough ===

    def setMaxValue(self, max_value: float) -> None:
        self.gauge.setMaxValue(max_value)

    def setValue(self, value: float) -> None:
        self.gauge.setValue(value)

    def setValueAnimated(self, value: float, duration: float = 1):
        return self.gauge.setValueAnimated(value, duration)

    def getValue(self) -> float:
        return self.gauge.getValue()

    def _refresh(self, gauge: Gauge) -> None:
        self.load(QByteArray(ET.tostring(gauge.root, encoding='utf-8')))

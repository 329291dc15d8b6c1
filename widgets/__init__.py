"""
Dial Gauge - Widgets Package
============================

Custom widgets for drawing circular SVG dial gauges.

Widget Classes:
    Gauge (widgets.gauge)
        • Purpose: Dial gauge drawn into any element container
        • Output: SVG element tree (xml.etree.ElementTree)
        • Use case: Generated documents, headless rendering, tests

    GaugeView (widgets.svg_view)
        • Purpose: PyQt6 widget hosting one Gauge
        • Output: QSvgWidget re-rendered on each redraw
        • Use case: Dashboards, live telemetry displays

Import Patterns:
    Package-level import (recommended):
        >>> from widgets import create, GaugeView
        >>> gauge = create(page, {'max': 200})
        >>> view = GaugeView({'max': 200})

    Individual module import:
        >>> from widgets.gauge import Gauge, create
        >>> from widgets.svg_view import GaugeView

Qt Designer Integration:
    GaugeView supports promotion:
        • Base class: QWidget
        • Promoted class: GaugeView
        • Header file: widgets.svg_view

Author: Dyumna137
Date: 2025-11-06
Version: 2.0
License: MIT
"""

from .gauge import Gauge, create, create_with_corrections   # SVG dial gauge
from .svg_view import GaugeView                             # Qt display surface

__all__ = [
    'Gauge',
    'GaugeView',
    'create',
    'create_with_corrections',
]

__version__ = '2.0.0'
__author__ = 'Dyumna137'
__license__ = 'MIT'
__description__ = 'Circular SVG dial gauge widgets'

# ============================================================================
# === WIDGET REGISTRY (For Dynamic Access) ===
# ============================================================================

WIDGET_REGISTRY = {
    'Gauge': Gauge,
    'GaugeView': GaugeView,
}

# Widget base classes (for Qt Designer promotion); None = not a QWidget
WIDGET_BASE_CLASSES = {
    'Gauge': None,
    'GaugeView': 'QWidget',
}

WIDGET_HEADERS = {
    'Gauge': 'widgets.gauge',
    'GaugeView': 'widgets.svg_view',
}


def get_widget_class(name: str):
    """
    Get widget class by name.

    Returns:
        Widget class or None if not found

    Example:
        >>> cls = get_widget_class('GaugeView')
        >>> view = cls({'max': 50})
    """
    return WIDGET_REGISTRY.get(name)


def list_widgets():
    """List all available widget names."""
    return list(WIDGET_REGISTRY.keys())


def get_widget_info(name: str) -> dict:
    """
    Get widget information for Qt Designer promotion.

    Returns:
        Dict with base_class and header keys, or None if not found

    Example:
        >>> get_widget_info('GaugeView')
        {'base_class': 'QWidget', 'header': 'widgets.svg_view'}
    """
    if name in WIDGET_REGISTRY:
        return {
            'base_class': WIDGET_BASE_CLASSES[name],
            'header': WIDGET_HEADERS[name],
        }
    return None

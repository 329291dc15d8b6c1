"""GaugeView: Qt display surface hosting a gauge."""
import xml.etree.ElementTree as ET

import pytest

import widgets
from widgets.svg_view import GaugeView


@pytest.fixture
def view(qapp, frames):
    view = GaugeView({"max": 200}, scheduler=frames)
    yield view
    view.deleteLater()


def test_view_is_the_gauge_container(view):
    doc = ET.fromstring(view.svg_bytes())
    assert doc.get("viewBox") == "0 0 1000 1000"
    assert view.renderer().isValid()


def test_view_forwards_value_api(view):
    view.setValue(100)
    assert view.getValue() == 100
    assert view.gauge.text_element.text == "100"
    view.setMaxValue(400)
    assert view.gauge.getMaxValue() == 400


def test_view_rerenders_on_animation_frames(view, frames):
    view.setValueAnimated(150, 0.1)
    assert view.getValue() == 150
    frames.run_until_idle()
    doc = ET.fromstring(view.svg_bytes())
    assert doc[1].text == "150"
    assert view.renderer().isValid()


def test_view_defaults_to_qt_scheduler(qapp):
    from animation import QtFrameScheduler

    view = GaugeView()
    try:
        assert isinstance(view.gauge._frame_scheduler(), QtFrameScheduler)
        assert view.sizeHint().width() > 0
    finally:
        view.deleteLater()


def test_widget_registry():
    assert widgets.get_widget_class("GaugeView") is GaugeView
    assert widgets.get_widget_info("GaugeView") == {"base_class": "QWidget", "header": "widgets.svg_view"}
    assert widgets.get_widget_info("Missing") is None
    assert set(widgets.list_widgets()) == {"Gauge", "GaugeView"}

"""Shared fixtures: headless Qt application and a manual frame scheduler."""
import os
import xml.etree.ElementTree as ET

# Must be set before any Qt GUI class is instantiated
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from animation import ManualFrameScheduler


@pytest.fixture(scope="session")
def qapp():
    from PyQt6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def frames():
    return ManualFrameScheduler()


@pytest.fixture
def page():
    return ET.Element("div")

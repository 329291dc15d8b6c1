"""
Manual demo for `GaugeView`.
Run this from the project root or add the project root to `PYTHONPATH`.

Three gauges are fed random values through the dispatcher every 1.5 s;
the first animates, the second jumps, the third uses a custom label and
an inverted angle configuration (corrected at construction).

Usage:
    python -m tests.manual_gauge_demo
"""
import sys
import random
from PyQt6.QtCore import QTimer
from PyQt6.QtWidgets import QApplication, QWidget, QHBoxLayout

from dispatcher import dispatch, GaugeBinding
from widgets.svg_view import GaugeView


def main():
    app = QApplication(sys.argv)

    window = QWidget()
    window.setWindowTitle("GaugeView Test")
    window.setStyleSheet("QWidget { background-color: #fff; }")
    layout = QHBoxLayout(window)

    cpu_gauge = GaugeView({'max': 100})
    rpm_gauge = GaugeView({'max': 8000, 'dialStartAngle': 180, 'dialEndAngle': 0})
    temp_gauge = GaugeView({
        'max': 150,
        'dialStartAngle': 45,
        'dialEndAngle': 135,
        'label': lambda v: f"{v:.0f}°",
    })
    for c in temp_gauge.gauge.corrections:
        print(f"  ℹ️  {c.field}: {c.original} -> {c.corrected}")

    layout.addWidget(cpu_gauge)
    layout.addWidget(rpm_gauge)
    layout.addWidget(temp_gauge)

    bindings = [
        GaugeBinding('cpu', cpu_gauge, animated=True, duration=1.0),
        GaugeBinding('rpm', rpm_gauge, animated=False),
        GaugeBinding('temp', temp_gauge, animated=True, duration=0.5),
    ]

    def update_gauges():
        dispatch.gaugeValueUpdated.emit('cpu', random.uniform(0, 100))
        dispatch.gaugeValueUpdated.emit('rpm', random.uniform(0, 8000))
        dispatch.gaugeValueUpdated.emit('temp', random.uniform(-20, 170))

    timer = QTimer()
    timer.timeout.connect(update_gauges)
    timer.start(1500)

    window.resize(700, 260)
    window.show()
    print(f"✓ Demo running with {len(bindings)} bound gauges")
    sys.exit(app.exec())


if __name__ == "__main__":
    main()

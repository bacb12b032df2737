# zfinder/gui/effects.py

import math

from PySide6.QtCore import QAbstractAnimation, QObject, QPoint, QVariantAnimation, Slot
from PySide6.QtWidgets import QWidget


def shake_offset(amount: float, shakes_per_unit: int, progress: float) -> float:
    """
    Horizontal displacement of a shaking widget.

    Args:
        amount: Peak displacement in pixels.
        shakes_per_unit: Half-oscillations over one unit of progress.
        progress: Animation progress, normally 0.0 to 1.0.

    Returns:
        The x offset in pixels. Zero at whole multiples of 1/shakes_per_unit.
    """
    return amount * math.sin(progress * math.pi * shakes_per_unit)


class ShakeAnimator(QObject):
    """Shakes a widget side to side once per `shake()` call."""

    def __init__(self, widget: QWidget, amount: float = 5.0, shakes_per_unit: int = 5,
                 duration_ms: int = 400):
        super().__init__(widget)
        self.widget = widget
        self.amount = amount
        self.shakes_per_unit = shakes_per_unit
        self._origin = QPoint()

        self.animation = QVariantAnimation(self)
        self.animation.setStartValue(0.0)
        self.animation.setEndValue(1.0)
        self.animation.setDuration(duration_ms)
        self.animation.valueChanged.connect(self._on_value_changed)
        self.animation.finished.connect(self._on_finished)

    def is_running(self) -> bool:
        return self.animation.state() == QAbstractAnimation.State.Running

    def shake(self):
        # A shake already in flight keeps its original origin.
        if self.is_running():
            return
        self._origin = self.widget.pos()
        self.animation.start()

    @Slot(object)
    def _on_value_changed(self, progress):
        dx = shake_offset(self.amount, self.shakes_per_unit, float(progress))
        self.widget.move(self._origin.x() + round(dx), self._origin.y())

    @Slot()
    def _on_finished(self):
        self.widget.move(self._origin)

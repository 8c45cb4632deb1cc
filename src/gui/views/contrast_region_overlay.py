"""Contrast region overlay for the saturation/lightness picker.

Paints the inaccessible foreground and background regions for the current
hue on top of a 2-D saturation/lightness area, using a diagonal stripe brush
colored by whether the selected cursor color passes.

Usage:
    panel = ContrastPickerPanel()
    panel.show()

The path math lives in ``gui.design.contrast_regions``; this module only
caches, scales and paints.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Dict, List, Optional, Tuple

from PyQt6.QtCore import QPointF, QSize, Qt
from PyQt6.QtGui import QBrush, QColor, QImage, QPainter, QPolygonF
from PyQt6.QtWidgets import (
    QDoubleSpinBox,
    QFormLayout,
    QLabel,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from config import settings
from gui.design.contrast_regions import (
    get_path_for_inaccessible_background_colors,
    get_path_for_inaccessible_foreground_colors,
)
from gui.design.hsl import HSLColor
from gui.design.region_path import parse_region_path, scale_region_points
from gui.design.region_preview import evaluate_cursor_color
from gui.design.selection_color import selection_color_transform

_logger = logging.getLogger(__name__)

__all__ = ["region_paths", "ContrastRegionOverlay", "ContrastPickerPanel"]

PASS_COLOR = (255, 255, 255, int(0.35 * 255))
FAIL_COLOR = (0xE5, 0x10, 0x10, int(0.5 * 255))


@lru_cache(maxsize=64)
def region_paths(hue: float, required_contrast_ratio: float) -> Tuple[str, str]:
    """Return (foreground_path, background_path) memoised on hue and ratio."""
    return (
        get_path_for_inaccessible_foreground_colors(hue, settings.WHITE, required_contrast_ratio),
        get_path_for_inaccessible_background_colors(
            hue, settings.BLACK, required_contrast_ratio, selection_color_transform
        ),
    )


class ContrastRegionOverlay(QWidget):
    """Transparent overlay painting the failing regions for one hue."""

    def __init__(self, parent=None, hue: float = 25.0, required_contrast_ratio: Optional[float] = None):
        super().__init__(parent)
        self.setObjectName("ContrastRegionOverlay")
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, True)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground, True)
        self.setStyleSheet("background: transparent;")
        self._hue = float(hue)
        self._ratio = float(
            required_contrast_ratio
            if required_contrast_ratio is not None
            else settings.DEFAULT_REQUIRED_CONTRAST_RATIO
        )
        self._cursor: Optional[HSLColor] = None

    def sizeHint(self):  # type: ignore[override]
        return QSize(192, 192)

    # --- State -----------------------------------------------------------
    def hue(self) -> float:
        return self._hue

    def required_contrast_ratio(self) -> float:
        return self._ratio

    def set_hue(self, hue: float) -> None:
        if float(hue) != self._hue:
            self._hue = float(hue)
            self.update()

    def set_required_contrast_ratio(self, ratio: float) -> None:
        if float(ratio) != self._ratio:
            self._ratio = float(ratio)
            self.update()

    def set_cursor_color(self, cursor: Optional[HSLColor]) -> None:
        self._cursor = cursor
        self.update()

    def cursor_passes(self) -> bool:
        if self._cursor is None:
            return True
        return evaluate_cursor_color(self._cursor, self._ratio).passes

    def paths(self) -> Tuple[str, str]:
        return region_paths(round(self._hue, 3), round(self._ratio, 3))

    def region_polygons(self, width: int, height: int) -> Dict[str, List[Tuple[float, float]]]:
        foreground, background = self.paths()
        return {
            "foreground": scale_region_points(parse_region_path(foreground), width, height),
            "background": scale_region_points(parse_region_path(background), width, height),
        }

    # --- Painting --------------------------------------------------------
    def paintEvent(self, event):  # type: ignore  # pragma: no cover - painting
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
            painter.setPen(Qt.PenStyle.NoPen)
            brush = QBrush(QColor(*(PASS_COLOR if self.cursor_passes() else FAIL_COLOR)))
            brush.setStyle(Qt.BrushStyle.BDiagPattern)
            painter.setBrush(brush)
            for points in self.region_polygons(self.width(), self.height()).values():
                painter.drawPolygon(QPolygonF([QPointF(x, y) for x, y in points]))
        finally:
            painter.end()


class _ColorArea(QWidget):  # pragma: no cover - painting
    """Saturation (x) / lightness (y, up) area for a fixed hue."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("ContrastColorArea")
        self.setMinimumSize(192, 192)
        self._hue = 25.0
        self._image: Optional[QImage] = None

    def set_hue(self, hue: float) -> None:
        self._hue = hue
        self._image = None
        self.update()

    def _render_image(self) -> QImage:
        size = settings.AXIS_MAX + 1
        image = QImage(size, size, QImage.Format.Format_RGB32)
        for x in range(size):
            for y in range(size):
                r, g, b = HSLColor(self._hue, x, settings.AXIS_MAX - y).to_rgb()
                image.setPixelColor(x, y, QColor(round(r), round(g), round(b)))
        return image

    def paintEvent(self, event):  # type: ignore
        if self._image is None:
            self._image = self._render_image()
        painter = QPainter(self)
        try:
            painter.drawImage(self.rect(), self._image)
        finally:
            painter.end()

    def resizeEvent(self, event):  # type: ignore
        for child in self.findChildren(ContrastRegionOverlay):
            child.setGeometry(self.rect())
        super().resizeEvent(event)


class ContrastPickerPanel(QWidget):
    """Hue / saturation / lightness sliders, ratio spin box and the overlay."""

    def __init__(self, parent=None, cursor: Optional[HSLColor] = None):
        super().__init__(parent)
        self.setObjectName("ContrastPickerPanel")
        cursor = cursor or HSLColor(25, 100, 25)

        self.area = _ColorArea(self)
        self.overlay = ContrastRegionOverlay(self.area, hue=cursor.hue)
        self.overlay.setGeometry(self.area.rect())

        self.hue_slider = self._slider(0, 359, int(cursor.hue), "contrastHueSlider")
        self.saturation_slider = self._slider(0, 100, int(cursor.saturation), "contrastSaturationSlider")
        self.lightness_slider = self._slider(0, 100, int(cursor.lightness), "contrastLightnessSlider")

        self.ratio_spin = QDoubleSpinBox(self)
        self.ratio_spin.setObjectName("contrastRatioSpin")
        self.ratio_spin.setRange(settings.MIN_CONTRAST_RATIO, settings.MAX_CONTRAST_RATIO)
        self.ratio_spin.setSingleStep(settings.CONTRAST_RATIO_STEP)
        self.ratio_spin.setDecimals(1)
        self.ratio_spin.setValue(settings.DEFAULT_REQUIRED_CONTRAST_RATIO)

        self.status_label = QLabel(self)
        self.status_label.setObjectName("contrastStatusLabel")

        form = QFormLayout()
        form.addRow("Hue", self.hue_slider)
        form.addRow("Saturation", self.saturation_slider)
        form.addRow("Lightness", self.lightness_slider)
        form.addRow("Contrast ratio", self.ratio_spin)

        layout = QVBoxLayout(self)
        layout.addWidget(self.area)
        layout.addLayout(form)
        layout.addWidget(self.status_label)

        for slider in (self.hue_slider, self.saturation_slider, self.lightness_slider):
            slider.valueChanged.connect(self._on_changed)
        self.ratio_spin.valueChanged.connect(self._on_changed)
        self._on_changed()

    def _slider(self, lo: int, hi: int, value: int, name: str) -> QSlider:
        slider = QSlider(Qt.Orientation.Horizontal, self)
        slider.setObjectName(name)
        slider.setRange(lo, hi)
        slider.setValue(value)
        return slider

    def cursor_color(self) -> HSLColor:
        return HSLColor(
            float(self.hue_slider.value()),
            float(self.saturation_slider.value()),
            float(self.lightness_slider.value()),
        )

    def _on_changed(self, *_args) -> None:
        cursor = self.cursor_color()
        ratio = self.ratio_spin.value()
        self.area.set_hue(cursor.hue)
        self.overlay.set_hue(cursor.hue)
        self.overlay.set_required_contrast_ratio(ratio)
        self.overlay.set_cursor_color(cursor)
        verdict = evaluate_cursor_color(cursor, ratio)
        state = "PASS" if verdict.passes else "FAIL"
        text = (
            f"{state}  cursor {verdict.cursor_hex} {verdict.cursor_contrast:.2f}:1 on white, "
            f"text on {verdict.selection_hex} {verdict.selection_contrast:.2f}:1"
        )
        if verdict.message:
            text += f"\n{verdict.message}"
        self.status_label.setText(text)
        _logger.debug("Picker updated: %s ratio=%s -> %s", cursor.css(), ratio, state)

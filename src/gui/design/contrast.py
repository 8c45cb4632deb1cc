"""Contrast utilities for measuring color accessibility.

Implements WCAG 2.1 contrast ratio calculations.

Public API:
- relative_luminance_rgb(rgb: RGB) -> float
- contrast_ratio_rgb(a: RGB, b: RGB) -> float

Channels are 0-255 and may be floats so unrounded HSL conversions can be
measured without quantisation.
"""

from __future__ import annotations

from typing import Sequence

RGB = Sequence[float]


def _linear_channel(c: float) -> float:
    c = c / 255.0
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance_rgb(rgb: RGB) -> float:
    r, g, b = rgb
    # Rec. 709 coefficients used by WCAG
    return 0.2126 * _linear_channel(r) + 0.7152 * _linear_channel(g) + 0.0722 * _linear_channel(b)


def contrast_ratio_rgb(a: RGB, b: RGB) -> float:
    l1 = relative_luminance_rgb(a)
    l2 = relative_luminance_rgb(b)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


__all__ = [
    "RGB",
    "contrast_ratio_rgb",
    "relative_luminance_rgb",
]

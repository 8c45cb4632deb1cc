"""Color transforms applied before background contrast is measured.

A transform maps a candidate swatch (``HSLColor``) to the RGB color that will
actually sit behind the text. The background region scan uses it to shade
colors whose *derived* color fails, e.g. the selection highlight computed from
a cursor color.

Exports:
 - ColorTransform protocol
 - identity_transform
 - SelectionColorTransform (lightness scaled by ``multiplier`` then capped)
 - selection_color_transform (default instance) / selection_color()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Tuple, runtime_checkable

from config import settings

from .hsl import HSLColor

__all__ = [
    "ColorTransform",
    "identity_transform",
    "SelectionColorTransform",
    "selection_color_transform",
    "selection_color",
]


@runtime_checkable
class ColorTransform(Protocol):
    def __call__(self, color: HSLColor) -> Tuple[float, float, float]: ...


def identity_transform(color: HSLColor) -> Tuple[float, float, float]:
    return color.to_rgb()


@dataclass(frozen=True)
class SelectionColorTransform:
    """Derive the selection color shown behind text for a given cursor color.

    Hue and saturation are preserved; lightness is multiplied and capped so
    that dark cursors still produce a readable light highlight.
    """

    multiplier: float = settings.SELECTION_LIGHTNESS_MULTIPLIER
    max_lightness: float = settings.SELECTION_MAX_LIGHTNESS

    def __post_init__(self):
        if self.multiplier < 0:
            raise ValueError(f"multiplier must be >= 0: {self.multiplier}")
        if not 0 <= self.max_lightness <= 100:
            raise ValueError(f"max_lightness must be in [0, 100]: {self.max_lightness}")

    def derive(self, color: HSLColor) -> HSLColor:
        return color.with_lightness(min(color.lightness * self.multiplier, self.max_lightness))

    def __call__(self, color: HSLColor) -> Tuple[float, float, float]:
        return self.derive(color).to_rgb()


selection_color_transform = SelectionColorTransform()


def selection_color(color: HSLColor) -> HSLColor:
    return selection_color_transform.derive(color)

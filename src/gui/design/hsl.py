"""HSL color helpers for contrast region scans.

Hue is expressed in degrees (0-360), saturation and lightness in percent
(0-100), matching the units of CSS ``hsl()`` and the picker widgets.

Approach:
1. ``hsl_to_rgb`` follows the CSS Color 3 algorithm and returns unrounded
   float channels (0-255) so contrast is measured on the exact color.
2. ``rgb_to_hsl`` is the inverse; ``parse_color`` uses it so a cursor can be
   typed as ``#rrggbb`` (the picker's hex field) as well as ``H,S,L``.
3. Validators raise ``ValueError`` naming the offending field; callers never
   get silently wrapped or clamped garbage.

Public API:
- HSLColor (frozen dataclass)
- hsl_to_rgb(hue, saturation, lightness) -> (r, g, b)
- rgb_to_hsl(rgb) -> HSLColor
- hex_to_rgb(value) / rgb_to_hex(rgb)
- parse_hsl_triplet(text) / parse_color(text) -> HSLColor
- validate_hue / validate_percentage / validate_rgb / validate_contrast_requirement
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

__all__ = [
    "HSLColor",
    "hsl_to_rgb",
    "rgb_to_hsl",
    "hex_to_rgb",
    "rgb_to_hex",
    "parse_hsl_triplet",
    "parse_color",
    "validate_hue",
    "validate_percentage",
    "validate_rgb",
    "validate_contrast_requirement",
]


def _clamp(v: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return max(lo, min(hi, v))


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_hue(hue: float) -> float:
    if not _is_number(hue) or not math.isfinite(hue):
        raise ValueError(f"hue must be a finite number: {hue!r}")
    if not 0 <= hue < 360:
        raise ValueError(f"hue must be in [0, 360): {hue}")
    return float(hue)


def validate_percentage(value: float, name: str) -> float:
    if not _is_number(value) or not math.isfinite(value):
        raise ValueError(f"{name} must be a finite number: {value!r}")
    if not 0 <= value <= 100:
        raise ValueError(f"{name} must be in [0, 100]: {value}")
    return float(value)


def validate_rgb(rgb: Sequence[int], name: str = "color") -> Tuple[int, int, int]:
    try:
        channels = tuple(rgb)
    except TypeError as exc:
        raise ValueError(f"{name} must be an (r, g, b) triple: {rgb!r}") from exc
    if len(channels) != 3:
        raise ValueError(f"{name} must be an (r, g, b) triple: {rgb!r}")
    for ch in channels:
        if not isinstance(ch, int) or isinstance(ch, bool) or not 0 <= ch <= 255:
            raise ValueError(f"{name} channels must be integers in 0-255: {rgb!r}")
    return channels  # type: ignore[return-value]


def validate_contrast_requirement(ratio: float) -> float:
    if not _is_number(ratio) or not math.isfinite(ratio):
        raise ValueError(f"required contrast ratio must be a finite number: {ratio!r}")
    if ratio < 1:
        raise ValueError(f"required contrast ratio must be >= 1: {ratio}")
    return float(ratio)


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> Tuple[float, float, float]:
    h = (hue % 360) / 360
    s = saturation / 100
    l = lightness / 100

    if s == 0:
        v = l * 255
        return v, v, v

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q

    def channel(t: float) -> float:
        if t < 0:
            t += 1
        if t > 1:
            t -= 1
        if 6 * t < 1:
            return p + (q - p) * 6 * t
        if 2 * t < 1:
            return q
        if 3 * t < 2:
            return p + (q - p) * (2 / 3 - t) * 6
        return p

    return channel(h + 1 / 3) * 255, channel(h) * 255, channel(h - 1 / 3) * 255


@dataclass(frozen=True)
class HSLColor:
    hue: float
    saturation: float
    lightness: float

    @classmethod
    def validated(cls, hue: float, saturation: float, lightness: float) -> "HSLColor":
        return cls(
            validate_hue(hue),
            validate_percentage(saturation, "saturation"),
            validate_percentage(lightness, "lightness"),
        )

    def to_rgb(self) -> Tuple[float, float, float]:
        return hsl_to_rgb(self.hue, self.saturation, self.lightness)

    def with_lightness(self, lightness: float) -> "HSLColor":
        return HSLColor(self.hue, self.saturation, lightness)

    def css(self) -> str:
        return f"hsl({self.hue:g}, {self.saturation:g}%, {self.lightness:g}%)"


def rgb_to_hsl(rgb: Sequence[float]) -> HSLColor:
    r, g, b = (c / 255.0 for c in rgb)
    mx = max(r, g, b)
    mn = min(r, g, b)
    l = (mx + mn) / 2
    if mx == mn:
        return HSLColor(0.0, 0.0, l * 100)
    d = mx - mn
    s = d / (2 - mx - mn) if l > 0.5 else d / (mx + mn)
    if mx == r:
        h = ((g - b) / d) % 6
    elif mx == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4
    return HSLColor((h * 60) % 360, s * 100, l * 100)


def hex_to_rgb(value: str) -> Tuple[int, int, int]:
    """Parse ``#rrggbb`` or ``#rgb`` into integer channels; ValueError otherwise."""
    if not isinstance(value, str):
        raise ValueError(f"Invalid hex color: {value!r}")
    digits = value.strip().lower()
    if not digits.startswith("#"):
        raise ValueError(f"Hex color must start with '#': {value}")
    digits = digits[1:]
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6 or any(ch not in "0123456789abcdef" for ch in digits):
        raise ValueError(f"Invalid hex color: {value}")
    return tuple(int(digits[i : i + 2], 16) for i in (0, 2, 4))  # type: ignore[return-value]


def rgb_to_hex(rgb: Sequence[float]) -> str:
    r, g, b = (int(_clamp(c / 255.0) * 255 + 0.5) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def parse_hsl_triplet(text: str) -> HSLColor:
    """Parse ``"H,S,L"`` (optionally wrapped in ``hsl(...)`` with ``%`` signs)."""
    body = text.strip()
    if body.lower().startswith("hsl(") and body.endswith(")"):
        body = body[4:-1]
    parts = [p.strip().rstrip("%") for p in body.split(",")]
    if len(parts) != 3:
        raise ValueError(f"Expected 'H,S,L': {text!r}")
    try:
        h, s, l = (float(p) for p in parts)
    except ValueError as exc:
        raise ValueError(f"Expected numeric 'H,S,L': {text!r}") from exc
    return HSLColor.validated(h, s, l)


def parse_color(text: str) -> HSLColor:
    """Parse a cursor color given as ``#rrggbb`` / ``#rgb`` or ``H,S,L``."""
    if text.strip().startswith("#"):
        color = rgb_to_hsl(hex_to_rgb(text))
        # Float noise in the inverse conversion must not trip range validation
        return HSLColor.validated(
            color.hue,
            min(max(color.saturation, 0.0), 100.0),
            min(max(color.lightness, 0.0), 100.0),
        )
    return parse_hsl_triplet(text)

"""Contrast region preview (headless).

Builds the pieces the picker overlay shows, without Qt:

 - CursorContrastVerdict: contrast of the cursor color on the page background
   and of the text color on the derived selection color, plus which side
   failed ("too_light" / "too_dark") and the hint shown to the user.
 - evaluate_cursor_color(cursor, required, ...)
 - render_region_preview_svg(hue, required, cursor=None, ...): a standalone
   SVG document (viewBox 0 0 100 100) with the selected regions filled by a
   diagonal stripe pattern. Stripes are white when the cursor passes and red
   when it fails.

Usage:

    svg = render_region_preview_svg(25, 4.5, cursor=HSLColor(25, 100, 25))
    Path("preview.svg").write_text(svg, encoding="utf-8")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence
from xml.sax.saxutils import quoteattr

from config import settings

from .contrast import contrast_ratio_rgb
from .contrast_regions import (
    get_path_for_inaccessible_background_colors,
    get_path_for_inaccessible_foreground_colors,
)
from .hsl import (
    HSLColor,
    rgb_to_hex,
    validate_contrast_requirement,
    validate_rgb,
)
from .selection_color import ColorTransform, selection_color_transform

__all__ = [
    "CursorContrastVerdict",
    "evaluate_cursor_color",
    "stripe_style",
    "render_region_preview_svg",
    "REGION_MODES",
    "FAILURE_MESSAGES",
]

PASS_STRIPE = ("white", 0.35)
FAIL_STRIPE = ("#E51010", 0.5)

REGION_MODES = ("foreground", "background", "both")

FAILURE_MESSAGES = {
    "too_light": "Color is too light! It may be hard to see the cursor. Please select a darker color.",
    "too_dark": "Color is too dark! It may be hard to see the text. Please select a lighter color.",
}


@dataclass(frozen=True)
class CursorContrastVerdict:
    cursor: HSLColor
    cursor_hex: str
    selection_hex: str
    cursor_contrast: float
    selection_contrast: float
    required: float

    @property
    def passes(self) -> bool:
        return self.cursor_contrast > self.required and self.selection_contrast > self.required

    @property
    def reason(self) -> Optional[str]:
        """None when passing; otherwise which side of the picker failed.

        A cursor below the requirement on white is "too_light"; any other
        failure (including a cursor exactly at the requirement) is blamed on
        the selection color being too dark for the text.
        """
        if self.passes:
            return None
        if self.cursor_contrast < self.required:
            return "too_light"
        return "too_dark"

    @property
    def message(self) -> Optional[str]:
        reason = self.reason
        return FAILURE_MESSAGES[reason] if reason else None

    def to_dict(self) -> dict:
        return {
            "cursor": self.cursor.css(),
            "cursor_hex": self.cursor_hex,
            "selection_hex": self.selection_hex,
            "cursor_contrast": round(self.cursor_contrast, 3),
            "selection_contrast": round(self.selection_contrast, 3),
            "required": self.required,
            "passes": self.passes,
            "reason": self.reason,
            "message": self.message,
        }


def evaluate_cursor_color(
    cursor: HSLColor,
    required_contrast_ratio: float = settings.DEFAULT_REQUIRED_CONTRAST_RATIO,
    *,
    background_rgb: Sequence[int] = settings.WHITE,
    text_rgb: Sequence[int] = settings.BLACK,
    transform: ColorTransform = selection_color_transform,
) -> CursorContrastVerdict:
    cursor = HSLColor.validated(cursor.hue, cursor.saturation, cursor.lightness)
    required = validate_contrast_requirement(required_contrast_ratio)
    background = validate_rgb(background_rgb, "background")
    text = validate_rgb(text_rgb, "text")
    cursor_rgb = cursor.to_rgb()
    selection_rgb = transform(cursor)
    return CursorContrastVerdict(
        cursor=cursor,
        cursor_hex=rgb_to_hex(cursor_rgb),
        selection_hex=rgb_to_hex(selection_rgb),
        cursor_contrast=contrast_ratio_rgb(cursor_rgb, background),
        selection_contrast=contrast_ratio_rgb(text, selection_rgb),
        required=required,
    )


def stripe_style(passes: bool) -> tuple[str, float]:
    return PASS_STRIPE if passes else FAIL_STRIPE


def render_region_preview_svg(
    hue: float,
    required_contrast_ratio: float = settings.DEFAULT_REQUIRED_CONTRAST_RATIO,
    cursor: Optional[HSLColor] = None,
    *,
    transform: Optional[ColorTransform] = selection_color_transform,
    mode: str = "both",
    size: int = 192,
) -> str:
    """Render the picker area with the inaccessible regions selected by ``mode``.

    ``transform`` only affects the background region; ``None`` measures the
    raw swatch. The cursor verdict always uses the selection color.
    """
    if mode not in REGION_MODES:
        raise ValueError(f"mode must be one of {REGION_MODES}: {mode!r}")
    regions = []
    if mode in ("foreground", "both"):
        regions.append(
            (
                "inaccessible-foreground",
                get_path_for_inaccessible_foreground_colors(hue, settings.WHITE, required_contrast_ratio),
            )
        )
    if mode in ("background", "both"):
        regions.append(
            (
                "inaccessible-background",
                get_path_for_inaccessible_background_colors(
                    hue, settings.BLACK, required_contrast_ratio, transform
                ),
            )
        )
    passes = True
    if cursor is not None:
        passes = evaluate_cursor_color(cursor, required_contrast_ratio).passes
    fill, opacity = stripe_style(passes)
    # Picker backdrop: saturation left->right, lightness bottom->top
    pure = rgb_to_hex(HSLColor(hue, 100, 50).to_rgb())
    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}" viewBox="0 0 100 100">',
        "  <defs>",
        '    <linearGradient id="saturation" x1="0" y1="0" x2="1" y2="0">',
        '      <stop offset="0" stop-color="#808080"/>',
        f'      <stop offset="1" stop-color="{pure}"/>',
        "    </linearGradient>",
        '    <linearGradient id="lightness" x1="0" y1="0" x2="0" y2="1">',
        '      <stop offset="0" stop-color="#ffffff" stop-opacity="1"/>',
        '      <stop offset="0.5" stop-color="#ffffff" stop-opacity="0"/>',
        '      <stop offset="0.5" stop-color="#000000" stop-opacity="0"/>',
        '      <stop offset="1" stop-color="#000000" stop-opacity="1"/>',
        "    </linearGradient>",
        '    <pattern id="diagonalStripes" patternUnits="userSpaceOnUse" width="10" height="10" patternTransform="rotate(45)">',
        f'      <rect x="0" y="0" width="5" height="10" fill="{fill}" fill-opacity="{opacity}"/>',
        "    </pattern>",
        "  </defs>",
        '  <rect x="0" y="0" width="100" height="100" fill="url(#saturation)"/>',
        '  <rect x="0" y="0" width="100" height="100" fill="url(#lightness)"/>',
    ]
    for css_class, path in regions:
        lines.append(f'  <path class="{css_class}" d={quoteattr(path)} fill="url(#diagonalStripes)"/>')
    if cursor is not None:
        cx = cursor.saturation
        cy = settings.AXIS_MAX - cursor.lightness
        lines.append(
            f'  <circle class="cursor" cx="{cx:g}" cy="{cy:g}" r="2.5" fill="{rgb_to_hex(cursor.to_rgb())}" stroke="#ffffff" stroke-width="0.8"/>'
        )
    lines.append("</svg>")
    return "\n".join(lines) + "\n"

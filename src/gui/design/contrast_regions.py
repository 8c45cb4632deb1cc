"""Inaccessible color regions for a color picker.

For a fixed hue, each saturation column (0-100) of the picker is scanned along
the lightness axis to find where contrast against a fixed reference color
crosses the required ratio. The resulting boundary points are closed into an
SVG polygon covering the failing area.

Foreground scan (text/cursor colors on a background):
    lightness 0 -> 100 ascending; the first lightness whose contrast is below
    the requirement is the boundary, 100 when every lightness passes. The
    region spans from the top edge (y=0, lightness 100) down to the boundary.

Background scan (surface colors behind text):
    lightness 100 -> 1 descending, each candidate optionally passed through a
    ``ColorTransform``; the first failing lightness is the boundary, 100 when
    every lightness passes. The region spans from the bottom edge (y=100) up
    to the boundary.

Both scans report the first crossing only. Contrast is monotonic in HSL
lightness for a fixed hue/saturation against white or black, so a single
crossing per column holds; ``find_multi_crossing_saturations`` checks this
numerically for any reference and transform.

The public path builders currently accept only a white background
(foreground scan) or a black foreground (background scan) and raise
``UnsupportedReferenceColorError`` otherwise. The point-level helpers accept
any reference color.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from time import perf_counter
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from config import settings

from .contrast import contrast_ratio_rgb
from .hsl import (
    HSLColor,
    validate_contrast_requirement,
    validate_hue,
    validate_percentage,
    validate_rgb,
)
from .region_path import format_region_path
from .selection_color import ColorTransform, identity_transform

_logger = logging.getLogger(__name__)

__all__ = [
    "BoundaryPoint",
    "UnsupportedReferenceColorError",
    "find_first_inaccessible_foreground_lightness",
    "find_first_inaccessible_background_lightness",
    "foreground_boundary_points",
    "background_boundary_points",
    "get_path_for_inaccessible_foreground_colors",
    "get_path_for_inaccessible_background_colors",
    "count_threshold_crossings",
    "find_multi_crossing_saturations",
]

RGBTriple = Tuple[int, int, int]

_FOREGROUND_LIGHTNESS = range(settings.AXIS_MIN, settings.AXIS_MAX + 1)
_BACKGROUND_LIGHTNESS = range(settings.AXIS_MAX, settings.AXIS_MIN, -1)
_FOREGROUND_SATURATION = range(settings.AXIS_MIN, settings.AXIS_MAX + 1)
_BACKGROUND_SATURATION = range(settings.AXIS_MIN, settings.AXIS_MAX)


class UnsupportedReferenceColorError(ValueError):
    """Raised when a path builder receives a fixed color it cannot handle yet."""

    def __init__(self, role: str, color: Sequence[int], supported: Sequence[int]):
        self.role = role
        self.color = tuple(color)
        self.supported = tuple(supported)
        super().__init__(
            f"Unsupported {role} color {self.color}: currently only {self.supported} is supported"
        )


@dataclass(frozen=True)
class BoundaryPoint:
    """Transition between accessible and inaccessible colors in one column.

    ``x`` is the saturation, ``y`` is ``100 - lightness`` (lightness grows
    upward in the picker).
    """

    x: int
    y: int

    @property
    def saturation(self) -> int:
        return self.x

    @property
    def lightness(self) -> int:
        return settings.AXIS_MAX - self.y

    def __iter__(self):
        yield self.x
        yield self.y


def _first_failing_lightness(
    hue: float,
    saturation: float,
    reference: RGBTriple,
    required: float,
    lightness_values: Iterable[int],
    to_rgb: Callable[[HSLColor], Sequence[float]],
    default: int,
) -> int:
    for lightness in lightness_values:
        candidate = to_rgb(HSLColor(hue, saturation, lightness))
        if contrast_ratio_rgb(candidate, reference) < required:
            return lightness
    return default


def find_first_inaccessible_foreground_lightness(
    hue: float,
    saturation: float,
    background_rgb: Sequence[int],
    required_contrast_ratio: float = settings.DEFAULT_REQUIRED_CONTRAST_RATIO,
) -> int:
    """Smallest lightness whose color fails against ``background_rgb`` (else 100)."""
    hue = validate_hue(hue)
    saturation = validate_percentage(saturation, "saturation")
    background = validate_rgb(background_rgb, "background")
    required = validate_contrast_requirement(required_contrast_ratio)
    return _first_failing_lightness(
        hue, saturation, background, required, _FOREGROUND_LIGHTNESS, identity_transform, settings.AXIS_MAX
    )


def find_first_inaccessible_background_lightness(
    hue: float,
    saturation: float,
    foreground_rgb: Sequence[int],
    required_contrast_ratio: float = settings.DEFAULT_REQUIRED_CONTRAST_RATIO,
    transform: Optional[ColorTransform] = None,
) -> int:
    """Largest lightness whose (transformed) color fails behind ``foreground_rgb``.

    Returns 100 when no lightness in 100..1 fails, the same sentinel as the
    foreground scan.
    """
    hue = validate_hue(hue)
    saturation = validate_percentage(saturation, "saturation")
    foreground = validate_rgb(foreground_rgb, "foreground")
    required = validate_contrast_requirement(required_contrast_ratio)
    return _first_failing_lightness(
        hue,
        saturation,
        foreground,
        required,
        _BACKGROUND_LIGHTNESS,
        transform or identity_transform,
        settings.AXIS_MAX,
    )


def foreground_boundary_points(
    hue: float,
    background_rgb: Sequence[int] = settings.WHITE,
    required_contrast_ratio: float = settings.DEFAULT_REQUIRED_CONTRAST_RATIO,
) -> List[BoundaryPoint]:
    hue = validate_hue(hue)
    background = validate_rgb(background_rgb, "background")
    required = validate_contrast_requirement(required_contrast_ratio)
    return [
        BoundaryPoint(
            saturation,
            settings.AXIS_MAX
            - _first_failing_lightness(
                hue,
                saturation,
                background,
                required,
                _FOREGROUND_LIGHTNESS,
                identity_transform,
                settings.AXIS_MAX,
            ),
        )
        for saturation in _FOREGROUND_SATURATION
    ]


def background_boundary_points(
    hue: float,
    foreground_rgb: Sequence[int] = settings.BLACK,
    required_contrast_ratio: float = settings.DEFAULT_REQUIRED_CONTRAST_RATIO,
    transform: Optional[ColorTransform] = None,
) -> List[BoundaryPoint]:
    hue = validate_hue(hue)
    foreground = validate_rgb(foreground_rgb, "foreground")
    required = validate_contrast_requirement(required_contrast_ratio)
    to_rgb = transform or identity_transform
    return [
        BoundaryPoint(
            saturation,
            settings.AXIS_MAX
            - _first_failing_lightness(
                hue,
                saturation,
                foreground,
                required,
                _BACKGROUND_LIGHTNESS,
                to_rgb,
                settings.AXIS_MAX,
            ),
        )
        for saturation in _BACKGROUND_SATURATION
    ]


def _log_timing(kind: str, hue: float, required: float, start: float) -> None:
    elapsed_ms = (perf_counter() - start) * 1000.0
    _logger.debug("%s region hue=%s ratio=%s built in %.1fms", kind, hue, required, elapsed_ms)
    if elapsed_ms > settings.SLOW_REGION_WARN_THRESHOLD_MS:
        _logger.warning(
            "Slow %s region computation: %.1fms (threshold %.1fms)",
            kind,
            elapsed_ms,
            settings.SLOW_REGION_WARN_THRESHOLD_MS,
        )


def get_path_for_inaccessible_foreground_colors(
    hue: float,
    background_rgb: Sequence[int] = settings.WHITE,
    required_contrast_ratio: float = settings.DEFAULT_REQUIRED_CONTRAST_RATIO,
) -> str:
    """SVG path covering foreground colors of ``hue`` that fail on ``background_rgb``.

    Parameters
    ----------
    hue: float
        Hue in degrees, [0, 360).
    background_rgb: tuple[int,int,int]
        Fixed background. Only pure white is supported.
    required_contrast_ratio: float
        Minimum acceptable contrast ratio (>= 1).
    """
    background = validate_rgb(background_rgb, "background")
    if background != settings.WHITE:
        raise UnsupportedReferenceColorError("background", background, settings.WHITE)
    start = perf_counter()
    points = foreground_boundary_points(hue, background, required_contrast_ratio)
    path = format_region_path(points, baseline=settings.AXIS_MIN)
    _log_timing("foreground", hue, required_contrast_ratio, start)
    return path


def get_path_for_inaccessible_background_colors(
    hue: float,
    foreground_rgb: Sequence[int] = settings.BLACK,
    required_contrast_ratio: float = settings.DEFAULT_REQUIRED_CONTRAST_RATIO,
    transform: Optional[ColorTransform] = None,
) -> str:
    """SVG path covering background colors of ``hue`` that fail behind ``foreground_rgb``.

    ``transform`` maps each candidate swatch to the color actually shown
    behind the text (e.g. ``selection_color_transform``) before contrast is
    measured. Only a pure black foreground is supported.
    """
    foreground = validate_rgb(foreground_rgb, "foreground")
    if foreground != settings.BLACK:
        raise UnsupportedReferenceColorError("foreground", foreground, settings.BLACK)
    start = perf_counter()
    points = background_boundary_points(hue, foreground, required_contrast_ratio, transform)
    path = format_region_path(points, baseline=settings.AXIS_MAX)
    _log_timing("background", hue, required_contrast_ratio, start)
    return path


def count_threshold_crossings(
    hue: float,
    saturation: float,
    reference_rgb: Sequence[int],
    required_contrast_ratio: float = settings.DEFAULT_REQUIRED_CONTRAST_RATIO,
    transform: Optional[ColorTransform] = None,
) -> int:
    """Number of accessible/inaccessible transitions along lightness 0..100."""
    hue = validate_hue(hue)
    saturation = validate_percentage(saturation, "saturation")
    reference = validate_rgb(reference_rgb, "reference")
    required = validate_contrast_requirement(required_contrast_ratio)
    to_rgb = transform or identity_transform
    crossings = 0
    previous: Optional[bool] = None
    for lightness in _FOREGROUND_LIGHTNESS:
        ok = contrast_ratio_rgb(to_rgb(HSLColor(hue, saturation, lightness)), reference) >= required
        if previous is not None and ok != previous:
            crossings += 1
        previous = ok
    return crossings


def find_multi_crossing_saturations(
    hue: float,
    reference_rgb: Sequence[int],
    required_contrast_ratio: float = settings.DEFAULT_REQUIRED_CONTRAST_RATIO,
    transform: Optional[ColorTransform] = None,
) -> List[int]:
    """Saturations whose column crosses the threshold more than once.

    An empty result means the first-crossing scans describe the whole column.
    """
    offenders = [
        saturation
        for saturation in _FOREGROUND_SATURATION
        if count_threshold_crossings(hue, saturation, reference_rgb, required_contrast_ratio, transform) > 1
    ]
    if offenders:
        _logger.warning(
            "Contrast threshold crossed more than once for hue=%s at saturations %s", hue, offenders
        )
    return offenders

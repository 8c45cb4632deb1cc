"""SVG path helpers for inaccessible color regions.

Regions live in a 0-100 unit square (x = saturation, y = 100 - lightness) and
are emitted with only ``M``, implicit lineto pairs and ``Z`` so the string can
be dropped straight into ``<path d=...>``.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

__all__ = [
    "Point",
    "format_region_path",
    "parse_region_path",
    "scale_region_points",
]

Point = Tuple[int, int]


def _fmt(v: float) -> str:
    return f"{v:g}"


def format_region_path(points: Iterable[Sequence[float]], baseline: int) -> str:
    """Close ``points`` into a polygon against the horizontal line ``y=baseline``.

    The polygon starts at ``(0, baseline)``, visits every point in order and
    returns through ``(100, baseline)``.
    """
    body = " ".join(f"{_fmt(x)} {_fmt(y)}" for x, y in points)
    head = f"M0 {_fmt(baseline)}"
    tail = f"100 {_fmt(baseline)} Z"
    return f"{head} {body} {tail}" if body else f"{head} {tail}"


def parse_region_path(d: str) -> List[Tuple[float, float]]:
    """Return polygon vertices of a path produced by ``format_region_path``."""
    tokens = d.replace(",", " ").split()
    if not tokens or not tokens[0].startswith("M"):
        raise ValueError(f"Region path must start with 'M': {d!r}")
    first = tokens[0][1:]
    numbers: List[float] = []
    rest = ([first] if first else []) + tokens[1:]
    closed = False
    for tok in rest:
        if tok == "Z":
            closed = True
            break
        try:
            numbers.append(float(tok))
        except ValueError as exc:
            raise ValueError(f"Unsupported path token {tok!r}") from exc
    if not closed:
        raise ValueError("Region path must be closed with 'Z'")
    if len(numbers) % 2:
        raise ValueError("Region path has an odd number of coordinates")
    return [(numbers[i], numbers[i + 1]) for i in range(0, len(numbers), 2)]


def scale_region_points(
    points: Iterable[Tuple[float, float]], width: float, height: float
) -> List[Tuple[float, float]]:
    """Map unit-square vertices onto a ``width`` x ``height`` pixel area."""
    if width < 0:
        width = 0
    if height < 0:
        height = 0
    return [(x * width / 100.0, y * height / 100.0) for x, y in points]

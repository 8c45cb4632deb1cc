"""Tests for inaccessible color region computation."""

from __future__ import annotations

import colorsys
import logging

import pytest

from config import settings
from gui.design.contrast import contrast_ratio_rgb
from gui.design.contrast_regions import (
    BoundaryPoint,
    UnsupportedReferenceColorError,
    background_boundary_points,
    count_threshold_crossings,
    find_first_inaccessible_background_lightness,
    find_first_inaccessible_foreground_lightness,
    find_multi_crossing_saturations,
    foreground_boundary_points,
    get_path_for_inaccessible_background_colors,
    get_path_for_inaccessible_foreground_colors,
)
from gui.design.hsl import HSLColor, hsl_to_rgb
from gui.design.region_path import parse_region_path
from gui.design.selection_color import identity_transform, selection_color_transform

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
SAMPLE_HUES = [0, 25, 60, 120, 210, 300, 359.5]


def _luminance(rgb):
    def lin(c):
        c = c / 255.0
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    r, g, b = rgb
    return 0.2126 * lin(r) + 0.7152 * lin(g) + 0.0722 * lin(b)


def _independent_first_failing_lightness(hue, saturation, required):
    for lightness in range(0, 101):
        r, g, b = colorsys.hls_to_rgb(hue / 360, lightness / 100, saturation / 100)
        lum = _luminance((r * 255, g * 255, b * 255))
        if 1.05 / (lum + 0.05) < required:
            return lightness
    return 100


@pytest.mark.parametrize("hue", SAMPLE_HUES)
def test_foreground_points_cover_every_saturation(hue):
    points = foreground_boundary_points(hue)
    assert len(points) == 101
    assert [p.x for p in points] == list(range(0, 101))
    for p in points[::10]:
        expected = find_first_inaccessible_foreground_lightness(hue, p.x, WHITE, 4.5)
        assert p.y == 100 - expected
        assert p.lightness == expected


def test_background_points_cover_saturation_0_to_99():
    points = background_boundary_points(210)
    assert [p.x for p in points] == list(range(0, 100))


def test_foreground_path_shape():
    vertices = parse_region_path(get_path_for_inaccessible_foreground_colors(210))
    assert vertices[0] == (0, 0)
    assert vertices[-1] == (100, 0)
    assert len(vertices) == 103
    assert [x for x, _ in vertices[1:-1]] == list(range(0, 101))


def test_background_path_shape():
    path = get_path_for_inaccessible_background_colors(210)
    assert path.startswith("M0 100 0 ")
    assert path.endswith(" 100 100 Z")
    vertices = parse_region_path(path)
    assert len(vertices) == 102


def test_concrete_boundary_hue_210_saturation_50():
    expected = _independent_first_failing_lightness(210, 50, 4.5)
    assert 0 < expected < 100
    vertices = dict(parse_region_path(get_path_for_inaccessible_foreground_colors(210, WHITE, 4.5))[1:-1])
    assert vertices[50] == 100 - expected
    # The boundary really is the first failing lightness
    fails = contrast_ratio_rgb(hsl_to_rgb(210, 50, expected), WHITE)
    passes = contrast_ratio_rgb(hsl_to_rgb(210, 50, expected - 1), WHITE)
    assert fails < 4.5 <= passes


@pytest.mark.parametrize("hue", SAMPLE_HUES)
def test_contrast_against_white_non_increasing_with_lightness(hue):
    for saturation in (0, 35, 70, 100):
        ratios = [contrast_ratio_rgb(hsl_to_rgb(hue, saturation, l), WHITE) for l in range(101)]
        assert all(a >= b - 1e-12 for a, b in zip(ratios, ratios[1:]))


@pytest.mark.parametrize("hue", [0, 120, 210, 300])
def test_single_crossing_per_column(hue):
    assert find_multi_crossing_saturations(hue, WHITE, 4.5) == []
    assert find_multi_crossing_saturations(hue, BLACK, 4.5, selection_color_transform) == []


def test_count_threshold_crossings():
    assert count_threshold_crossings(210, 50, WHITE, 4.5) == 1
    # Nothing fails at ratio 1, everything fails above 21
    assert count_threshold_crossings(210, 50, WHITE, 1.0) == 0
    assert count_threshold_crossings(210, 50, WHITE, 22.0) == 0


@pytest.mark.parametrize("background", [(254, 255, 255), (0, 0, 0), [255, 255, 0]])
def test_foreground_rejects_non_white_background(background):
    with pytest.raises(UnsupportedReferenceColorError) as info:
        get_path_for_inaccessible_foreground_colors(210, background)
    assert info.value.role == "background"
    assert isinstance(info.value, ValueError)


def test_background_rejects_non_black_foreground():
    with pytest.raises(UnsupportedReferenceColorError, match="foreground"):
        get_path_for_inaccessible_background_colors(210, (0, 0, 1))


def test_list_reference_colors_accepted():
    assert get_path_for_inaccessible_foreground_colors(210, [255, 255, 255]) == (
        get_path_for_inaccessible_foreground_colors(210, WHITE)
    )


def test_identity_transform_matches_no_transform():
    plain = get_path_for_inaccessible_background_colors(210, BLACK, 4.5)
    assert get_path_for_inaccessible_background_colors(210, BLACK, 4.5, identity_transform) == plain
    via_lambda = get_path_for_inaccessible_background_colors(
        210, BLACK, 4.5, lambda c: hsl_to_rgb(c.hue, c.saturation, c.lightness)
    )
    assert via_lambda == plain


def test_selection_transform_shrinks_background_region():
    for saturation in range(0, 100, 9):
        raw = find_first_inaccessible_background_lightness(25, saturation, BLACK, 4.5)
        derived = find_first_inaccessible_background_lightness(
            25, saturation, BLACK, 4.5, selection_color_transform
        )
        assert derived <= raw


def test_transform_receives_hsl_colors():
    seen = []

    def recording(color):
        seen.append(color)
        return color.to_rgb()

    find_first_inaccessible_background_lightness(210, 40, BLACK, 4.5, recording)
    assert seen[0] == HSLColor(210.0, 40.0, 100)
    assert all(isinstance(c, HSLColor) for c in seen)


@pytest.mark.parametrize("hue", [25, 210])
def test_paths_are_idempotent(hue):
    assert get_path_for_inaccessible_foreground_colors(hue) == get_path_for_inaccessible_foreground_colors(hue)
    assert get_path_for_inaccessible_background_colors(
        hue, BLACK, 4.5, selection_color_transform
    ) == get_path_for_inaccessible_background_colors(hue, BLACK, 4.5, selection_color_transform)


def test_unreachable_ratio_covers_whole_square():
    fg = get_path_for_inaccessible_foreground_colors(210, WHITE, 22)
    assert fg == "M0 0 " + " ".join(f"{s} 100" for s in range(101)) + " 100 0 Z"
    bg = get_path_for_inaccessible_background_colors(210, BLACK, 22)
    assert bg == "M0 100 " + " ".join(f"{s} 0" for s in range(100)) + " 100 100 Z"


def test_ratio_one_never_fails_and_uses_sentinel():
    # Nothing is below 1:1, so both scans fall back to lightness 100
    assert find_first_inaccessible_foreground_lightness(210, 50, WHITE, 1.0) == 100
    assert find_first_inaccessible_background_lightness(210, 50, BLACK, 1.0) == 100
    assert all(p.y == 0 for p in foreground_boundary_points(210, WHITE, 1.0))
    assert all(p.y == 0 for p in background_boundary_points(210, BLACK, 1.0))
    bg = get_path_for_inaccessible_background_colors(210, BLACK, 1.0)
    assert bg == "M0 100 " + " ".join(f"{s} 0" for s in range(100)) + " 100 100 Z"


def test_ratio_21_only_pure_black_and_white_pass():
    # Black on white is exactly 21:1, so only lightness 0 (foreground) and
    # lightness 100 (background) survive
    assert all(p.y == 99 for p in foreground_boundary_points(210, WHITE, 21))
    assert all(p.y == 1 for p in background_boundary_points(210, BLACK, 21))
    fg = get_path_for_inaccessible_foreground_colors(0, WHITE, 21)
    assert fg == "M0 0 " + " ".join(f"{s} 99" for s in range(101)) + " 100 0 Z"


def test_point_helpers_accept_any_reference():
    # Mid gray background: both very dark and very light text fail
    points = foreground_boundary_points(0, (128, 128, 128), 3.0)
    assert len(points) == 101
    assert all(0 <= p.y <= 100 for p in points)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"hue": 360},
        {"hue": -0.1},
        {"saturation": 101},
        {"required_contrast_ratio": 0.5},
        {"background_rgb": (256, 0, 0)},
    ],
)
def test_invalid_inputs_raise(kwargs):
    args = {"hue": 210, "saturation": 50, "background_rgb": WHITE, "required_contrast_ratio": 4.5}
    args.update(kwargs)
    with pytest.raises(ValueError):
        find_first_inaccessible_foreground_lightness(**args)


def test_path_builders_validate_hue():
    with pytest.raises(ValueError, match="hue"):
        get_path_for_inaccessible_foreground_colors(361)
    with pytest.raises(ValueError, match="hue"):
        get_path_for_inaccessible_background_colors(float("nan"))


def test_boundary_point_unpacks():
    x, y = BoundaryPoint(3, 40)
    assert (x, y) == (3, 40)
    assert BoundaryPoint(3, 40).lightness == 60


def test_slow_computation_logged(monkeypatch, caplog):
    monkeypatch.setattr(settings, "SLOW_REGION_WARN_THRESHOLD_MS", -1.0)
    with caplog.at_level(logging.WARNING, logger="gui.design.contrast_regions"):
        get_path_for_inaccessible_foreground_colors(210)
    assert any("Slow foreground region" in r.getMessage() for r in caplog.records)

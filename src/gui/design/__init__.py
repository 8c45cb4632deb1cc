"""Design package.

Contains contrast math, HSL helpers and the inaccessible color region
computation used by the picker overlay.
"""

from .contrast import contrast_ratio_rgb, relative_luminance_rgb  # noqa: F401
from .hsl import HSLColor, hsl_to_rgb, rgb_to_hsl, hex_to_rgb, rgb_to_hex, parse_color  # noqa: F401
from .selection_color import (  # noqa: F401
    ColorTransform,
    identity_transform,
    SelectionColorTransform,
    selection_color_transform,
    selection_color,
)
from .region_path import format_region_path, parse_region_path, scale_region_points  # noqa: F401
from .contrast_regions import (  # noqa: F401
    BoundaryPoint,
    UnsupportedReferenceColorError,
    find_first_inaccessible_foreground_lightness,
    find_first_inaccessible_background_lightness,
    foreground_boundary_points,
    background_boundary_points,
    get_path_for_inaccessible_foreground_colors,
    get_path_for_inaccessible_background_colors,
    count_threshold_crossings,
    find_multi_crossing_saturations,
)
from .region_preview import (  # noqa: F401
    CursorContrastVerdict,
    evaluate_cursor_color,
    render_region_preview_svg,
)

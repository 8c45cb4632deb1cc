"""Global configuration and constants for contrast region computation."""

from __future__ import annotations

import os
from typing import Final

WHITE: Final = (255, 255, 255)
BLACK: Final = (0, 0, 0)

# WCAG AA for normal text; the picker UI exposes 1..21 in 0.1 steps
DEFAULT_REQUIRED_CONTRAST_RATIO: Final = float(
    os.environ.get("CONTRAST_REGIONS_REQUIRED_RATIO", "4.5")
)
MIN_CONTRAST_RATIO: Final = 1.0
MAX_CONTRAST_RATIO: Final = 21.0
CONTRAST_RATIO_STEP: Final = 0.1

# Sampling grid of the (saturation, lightness) unit square
AXIS_MIN: Final = 0
AXIS_MAX: Final = 100

# Selection color derivation (cursor lightness scaled then capped)
SELECTION_LIGHTNESS_MULTIPLIER: Final = 5.0
SELECTION_MAX_LIGHTNESS: Final = 90.0

SLOW_REGION_WARN_THRESHOLD_MS: Final = float(os.environ.get("CONTRAST_REGIONS_SLOW_MS", "250"))

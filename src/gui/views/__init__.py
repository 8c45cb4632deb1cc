"""GUI view layer (PyQt6 widgets).

Exports:
 - ContrastRegionOverlay
 - ContrastPickerPanel
"""

from .contrast_region_overlay import ContrastRegionOverlay, ContrastPickerPanel  # noqa: F401

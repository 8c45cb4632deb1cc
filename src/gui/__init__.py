"""Contrast regions GUI public API.

Curated, intentionally small surface for external callers (CLI, tests).

Design Principles:
- Keep exports minimal & stable; prefer namespaced access (e.g. `import gui.design as design`).
- Avoid side-effect heavy imports (no Qt import, no implicit QApplication creation).
  Widgets live in `gui.views` and are imported explicitly.
"""

from __future__ import annotations

# Expose design namespace (headless contrast / region math)
from . import design  # noqa: F401  (import package so users can: from gui import design)

__all__ = ["design"]

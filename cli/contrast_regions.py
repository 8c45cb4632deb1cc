"""Contrast regions CLI.

Prints the SVG paths of inaccessible foreground / background colors for a hue
and optionally evaluates a cursor color and writes a standalone SVG preview.

Features:
 - Text or JSON (`--json`) output.
 - `--selection` measures backgrounds through the selection-color transform.
 - `--cursor H,S,L` or `--cursor #rrggbb` reports whether the cursor and its
   selection color pass, with a hint when it fails.
 - `--svg-out FILE` writes the preview document, honouring `--mode` and
   `--selection`.
 - `--demo` opens the interactive PyQt6 picker panel.
 - Exit code 0 when ok, 1 when the cursor fails, 2 on invalid input.

Example:
  contrast-regions --hue 210 --ratio 4.5 --cursor 210,50,40 --json
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict

from config import settings
from gui.design.contrast_regions import (
    get_path_for_inaccessible_background_colors,
    get_path_for_inaccessible_foreground_colors,
)
from gui.design.hsl import parse_color, validate_hue, validate_contrast_requirement
from gui.design.region_preview import evaluate_cursor_color, render_region_preview_svg
from gui.design.selection_color import selection_color_transform

_logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="contrast-regions",
        description="Compute SVG regions of colors that fail a WCAG contrast requirement",
    )
    p.add_argument("--hue", type=float, required=True, help="Hue in degrees [0, 360)")
    p.add_argument(
        "--ratio",
        type=float,
        default=settings.DEFAULT_REQUIRED_CONTRAST_RATIO,
        help=f"Required contrast ratio (default: {settings.DEFAULT_REQUIRED_CONTRAST_RATIO})",
    )
    p.add_argument(
        "--mode",
        choices=("foreground", "background", "both"),
        default="both",
        help="Which region(s) to compute",
    )
    p.add_argument(
        "--selection",
        action="store_true",
        help="Measure backgrounds through the selection-color transform",
    )
    p.add_argument("--cursor", help="Cursor color as 'H,S,L' or '#rrggbb' to evaluate")
    p.add_argument("--svg-out", help="Write a standalone SVG preview to this path")
    p.add_argument("--json", action="store_true", help="Emit JSON instead of human-readable text")
    p.add_argument("--demo", action="store_true", help="Open the interactive picker window")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def compute_regions(hue: float, ratio: float, mode: str, selection: bool) -> Dict[str, str]:
    result: Dict[str, str] = {}
    if mode in ("foreground", "both"):
        result["foreground"] = get_path_for_inaccessible_foreground_colors(hue, settings.WHITE, ratio)
    if mode in ("background", "both"):
        transform = selection_color_transform if selection else None
        result["background"] = get_path_for_inaccessible_background_colors(
            hue, settings.BLACK, ratio, transform
        )
    return result


def _run_demo(hue: float, args: argparse.Namespace) -> int:  # pragma: no cover - interactive
    from PyQt6.QtWidgets import QApplication

    from gui.design.hsl import HSLColor
    from gui.views.contrast_region_overlay import ContrastPickerPanel

    app = QApplication.instance() or QApplication(sys.argv)
    cursor = parse_color(args.cursor) if args.cursor else HSLColor(hue, 100, 25)
    panel = ContrastPickerPanel(cursor=cursor)
    panel.ratio_spin.setValue(args.ratio)
    panel.setWindowTitle("Contrast Regions")
    panel.show()
    return app.exec()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        hue = validate_hue(args.hue)
        ratio = validate_contrast_requirement(args.ratio)
        cursor = parse_color(args.cursor) if args.cursor else None
    except ValueError as exc:
        print(f"Invalid input: {exc}", file=sys.stderr)
        return 2

    if args.demo:  # pragma: no cover - interactive
        return _run_demo(hue, args)

    regions = compute_regions(hue, ratio, args.mode, args.selection)
    payload: Dict[str, Any] = {"hue": hue, "required_contrast_ratio": ratio, "regions": regions}
    exit_code = 0
    if cursor is not None:
        verdict = evaluate_cursor_color(cursor, ratio)
        payload["cursor"] = verdict.to_dict()
        if not verdict.passes:
            exit_code = 1

    if args.svg_out:
        out_dirname = os.path.dirname(os.path.abspath(args.svg_out))
        os.makedirs(out_dirname, exist_ok=True)
        svg = render_region_preview_svg(
            hue,
            ratio,
            cursor,
            transform=selection_color_transform if args.selection else None,
            mode=args.mode,
        )
        with open(args.svg_out, "w", encoding="utf-8") as fh:
            fh.write(svg)
        payload["svg_out"] = args.svg_out
        _logger.info("Wrote preview to %s", args.svg_out)

    if args.json:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(f"Hue {hue:g}, required contrast {ratio:g}:1")
        for name, path in regions.items():
            print(f"  {name}: {path}")
        if cursor is not None:
            c = payload["cursor"]
            status = "PASS" if c["passes"] else "FAIL"
            print(
                f"Cursor {c['cursor']} ({c['cursor_hex']}): {status} "
                f"(on white {c['cursor_contrast']}:1, text on selection {c['selection_hex']} "
                f"{c['selection_contrast']}:1)"
            )
            if c["message"]:
                print(f"  {c['message']}")
        if args.svg_out:
            print(f"Preview written to {args.svg_out}")
    return exit_code


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

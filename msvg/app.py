# File: msvg/app.py
# Project: MiniSvg (MSVG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Entry-point CLI: demo de colores + documento con un círculo a stdout.
# Notes: Ejemplo de uso del modelo; no forma parte de la librería.
from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from msvg.core.color import NONE_COLOR, Color, Rgb, Rgba
from msvg.core.settings import apply_project_settings, coerce_log_level, env_log_dir, env_log_level
from msvg.core.styles import parse_line_cap, parse_line_join
from msvg.core.version import APP_SHORT, APP_VERSION
from msvg.svg.document import Document
from msvg.svg.objects import Circle
from msvg.utils.errors import MsvgValueError
from msvg.utils.log import get_logger, setup_logging

log = get_logger(__name__)

DEMO_NAMED = "purple"
DEMO_RGB = Rgb(100, 200, 255)
DEMO_RGBA = Rgba(100, 200, 255, 0.5)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="msvg", description=f"{APP_SHORT} {APP_VERSION}: demo de render SVG.")
    ap.add_argument("--cx", type=float, default=1.0, help="Centro x del círculo (default: 1)")
    ap.add_argument("--cy", type=float, default=2.0, help="Centro y del círculo (default: 2)")
    ap.add_argument("--r", type=float, default=3.5, help="Radio (default: 3.5)")
    ap.add_argument("--fill", default=None, help="Color de relleno literal (default: rgba(100,200,255,0.5))")
    ap.add_argument("--stroke", default=DEMO_NAMED, help=f"Color de trazo literal (default: {DEMO_NAMED})")
    ap.add_argument("--no-fill", action="store_true", help="Sin atributo fill.")
    ap.add_argument("--no-stroke", action="store_true", help="Sin atributo stroke.")
    ap.add_argument("--stroke-width", type=float, default=None, help="Ancho de trazo (default: sin atributo)")
    ap.add_argument("--linecap", default=None, help="butt | round | square")
    ap.add_argument("--linejoin", default=None, help="arcs | bevel | miter | miter-clip | round")
    ap.add_argument("--no-colors", action="store_true", help="No imprimir la demo de colores.")
    ap.add_argument("--log-level", default=None, help="debug | info | warning | error (default: MSVG_LOG_LEVEL o info)")
    ap.add_argument("--log-dir", default=None, help="Carpeta para msvg.log (default: MSVG_LOG_DIR o solo consola)")
    return ap


def build_demo_circle(args: argparse.Namespace) -> Circle:
    c = Circle()
    c.set_radius(args.r).set_center((args.cx, args.cy))
    if not args.no_fill:
        c.set_fill_color(args.fill if args.fill is not None else DEMO_RGBA)
    if not args.no_stroke:
        c.set_stroke_color(args.stroke)
    if args.stroke_width is not None:
        c.set_stroke_width(args.stroke_width)
    if args.linecap is not None:
        c.set_stroke_line_cap(parse_line_cap(args.linecap))
    if args.linejoin is not None:
        c.set_stroke_line_join(parse_line_join(args.linejoin))
    return c


def write_color_demo(out: TextIO) -> None:
    for color in (NONE_COLOR, Color(DEMO_NAMED), Color(DEMO_RGB), Color(DEMO_RGBA)):
        out.write(f"{color}\n")


def main(argv: Optional[Sequence[str]] = None, out: Optional[TextIO] = None) -> int:
    args = build_parser().parse_args(argv)
    out = out if out is not None else sys.stdout

    apply_project_settings(logger=log, prefer_env=True)
    level = coerce_log_level(args.log_level, env_log_level())
    setup_logging(args.log_dir or env_log_dir(), level=level)

    try:
        circle = build_demo_circle(args)
    except MsvgValueError as e:
        log.error("%s", e)
        return 2

    if not args.no_colors:
        write_color_demo(out)

    doc = Document()
    doc.add(circle)
    doc.render(out)
    log.info("%s v%s: documento renderizado (%d figuras)", APP_SHORT, APP_VERSION, len(doc))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

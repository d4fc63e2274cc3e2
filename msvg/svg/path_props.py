# File: msvg/svg/path_props.py
# Project: MiniSvg (MSVG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Mixin de estilo (fill/stroke/stroke-width/linecap/linejoin) para figuras.
# Notes: No es una figura por sí solo; se compone en clases concretas (ver Circle).
from __future__ import annotations

from typing import Optional, TextIO, TypeVar

from msvg.core.color import Color, ColorValue, NONE_COLOR, as_color, fmt_num
from msvg.core.styles import StrokeLineCap, StrokeLineJoin

_Owner = TypeVar("_Owner", bound="PathProps")


class PathProps:
    """Atributos de presentación compartidos por las figuras.

    Los setters devuelven la figura dueña para encadenar:

        Circle().set_fill_color("red").set_stroke_width(2)

    Un color ausente o un opcional en None no emite nada en `render_attrs`.
    """

    def __init__(self) -> None:
        super().__init__()
        self._fill_color: Color = NONE_COLOR
        self._stroke_color: Color = NONE_COLOR
        self._stroke_width: Optional[float] = None
        self._stroke_line_cap: Optional[StrokeLineCap] = None
        self._stroke_line_join: Optional[StrokeLineJoin] = None

    def set_fill_color(self: _Owner, color: Color | ColorValue) -> _Owner:
        self._fill_color = as_color(color)
        return self

    def set_stroke_color(self: _Owner, color: Color | ColorValue) -> _Owner:
        self._stroke_color = as_color(color)
        return self

    def set_stroke_width(self: _Owner, width: float) -> _Owner:
        self._stroke_width = width
        return self

    def set_stroke_line_cap(self: _Owner, line_cap: StrokeLineCap) -> _Owner:
        self._stroke_line_cap = line_cap
        return self

    def set_stroke_line_join(self: _Owner, line_join: StrokeLineJoin) -> _Owner:
        self._stroke_line_join = line_join
        return self

    def render_attrs(self, out: TextIO) -> None:
        # Orden fijo: fill, stroke, stroke-width, stroke-linecap, stroke-linejoin.
        if not self._fill_color.is_none():
            out.write(f' fill="{self._fill_color}"')
        if not self._stroke_color.is_none():
            out.write(f' stroke="{self._stroke_color}"')
        if self._stroke_width is not None:
            out.write(f' stroke-width="{fmt_num(self._stroke_width)}"')
        if self._stroke_line_cap is not None:
            out.write(f' stroke-linecap="{str(self._stroke_line_cap)}"')
        if self._stroke_line_join is not None:
            out.write(f' stroke-linejoin="{str(self._stroke_line_join)}"')

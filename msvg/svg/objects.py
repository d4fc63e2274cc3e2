# File: msvg/svg/objects.py
# Project: MiniSvg (MSVG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Figuras: base Object (template de render) y Circle.
# Notes: Las figuras nunca escriben su propia indentación ni el salto de línea final.
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import final

from msvg.core.color import fmt_num
from msvg.core.geometry import Point, PointLike
from msvg.core.version import DEFAULT_RADIUS
from msvg.svg.context import RenderContext
from msvg.svg.path_props import PathProps


class Object(ABC):
    """Figura renderizable.

    `render` es común a todas: indentación + cuerpo + "\\n".
    Cada figura concreta solo implementa `render_object`.
    """

    @final
    def render(self, context: RenderContext) -> None:
        context.render_indent()
        self.render_object(context)
        context.out.write("\n")

    @abstractmethod
    def render_object(self, context: RenderContext) -> None:
        raise NotImplementedError


class Circle(Object, PathProps):
    """<circle>: centro + radio (sin validar; r <= 0 se escribe igual)."""

    def __init__(self) -> None:
        super().__init__()
        self._center = Point()
        self._radius: float = DEFAULT_RADIUS

    @property
    def center(self) -> Point:
        return self._center

    @property
    def radius(self) -> float:
        return self._radius

    def set_center(self, center: PointLike) -> "Circle":
        self._center = Point.of(center)
        return self

    def set_radius(self, radius: float) -> "Circle":
        self._radius = radius
        return self

    def render_object(self, context: RenderContext) -> None:
        out = context.out
        out.write(f'<circle cx="{fmt_num(self._center.x)}" cy="{fmt_num(self._center.y)}"')
        out.write(f' r="{fmt_num(self._radius)}"')
        self.render_attrs(out)
        out.write("/>")

    def __repr__(self) -> str:
        return f"Circle(center={self._center!r}, r={self._radius!r})"

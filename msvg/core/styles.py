# File: msvg/core/styles.py
# Project: MiniSvg (MSVG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Enums de estilo de trazo (stroke-linecap / stroke-linejoin).
# Notes: str(member) devuelve el valor SVG tal cual se escribe en el atributo.

from __future__ import annotations

from enum import Enum

from msvg.utils.errors import MsvgValueError


class StrokeLineCap(str, Enum):
    """Terminación de trazos abiertos (atributo stroke-linecap)."""

    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"

    def __str__(self) -> str:
        return self.value


class StrokeLineJoin(str, Enum):
    """Unión entre segmentos (atributo stroke-linejoin)."""

    ARCS = "arcs"
    BEVEL = "bevel"
    MITER = "miter"
    MITER_CLIP = "miter-clip"
    ROUND = "round"

    def __str__(self) -> str:
        return self.value


def _lookup(enum_cls: type[Enum], v: object) -> Enum | None:
    if isinstance(v, enum_cls):
        return v
    s = str(v or "").strip().lower().replace("_", "-")
    for m in enum_cls:
        if m.value == s:
            return m
    return None


def coerce_line_cap(v: object, default: StrokeLineCap | None = None) -> StrokeLineCap | None:
    m = _lookup(StrokeLineCap, v)
    return m if m is not None else default  # type: ignore[return-value]


def coerce_line_join(v: object, default: StrokeLineJoin | None = None) -> StrokeLineJoin | None:
    m = _lookup(StrokeLineJoin, v)
    return m if m is not None else default  # type: ignore[return-value]


def parse_line_cap(v: object) -> StrokeLineCap:
    """Como `coerce_line_cap`, pero falla con MsvgValueError si no matchea."""
    m = _lookup(StrokeLineCap, v)
    if m is None:
        valid = ", ".join(c.value for c in StrokeLineCap)
        raise MsvgValueError(f"stroke-linecap inválido: {v!r} (válidos: {valid})")
    return m  # type: ignore[return-value]


def parse_line_join(v: object) -> StrokeLineJoin:
    """Como `coerce_line_join`, pero falla con MsvgValueError si no matchea."""
    m = _lookup(StrokeLineJoin, v)
    if m is None:
        valid = ", ".join(j.value for j in StrokeLineJoin)
        raise MsvgValueError(f"stroke-linejoin inválido: {v!r} (válidos: {valid})")
    return m  # type: ignore[return-value]

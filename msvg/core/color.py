# File: msvg/core/color.py
# Project: MiniSvg (MSVG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Color como variante cerrada (none | nombre | rgb | rgba) + formato numérico.
# Notes: Sin validación de rangos: canales y opacidad se escriben tal cual llegan.
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from msvg.core.version import DEFAULT_OPACITY


def fmt_num(v: float) -> str:
    """Formato numérico por defecto (equivalente a un ostream de C++).

    6 dígitos significativos, sin ".0" final: 1.0 -> "1", 3.5 -> "3.5".
    """
    return format(v, "g")


@dataclass(frozen=True)
class Rgb:
    red: int = 0
    green: int = 0
    blue: int = 0

    def __str__(self) -> str:
        return f"rgb({int(self.red)},{int(self.green)},{int(self.blue)})"


@dataclass(frozen=True)
class Rgba:
    red: int = 0
    green: int = 0
    blue: int = 0
    opacity: float = DEFAULT_OPACITY

    def __str__(self) -> str:
        return f"rgba({int(self.red)},{int(self.green)},{int(self.blue)},{fmt_num(self.opacity)})"


ColorValue = Union[None, str, Rgb, Rgba]


@dataclass(frozen=True)
class Color:
    """Color de relleno/trazo.

    Exactamente una variante activa:
    - None: ausente ("none"), es el default
    - str: nombre de color, se escribe literal
    - Rgb / Rgba
    """

    value: ColorValue = None

    def __post_init__(self) -> None:
        # Permite Color(Color(...)) sin anidar variantes.
        if isinstance(self.value, Color):
            object.__setattr__(self, "value", self.value.value)

    def is_none(self) -> bool:
        return self.value is None

    def __str__(self) -> str:
        v = self.value
        if v is None:
            return "none"
        if isinstance(v, str):
            return v
        # Rgb / Rgba
        return str(v)


NONE_COLOR = Color()


def as_color(v: Color | ColorValue) -> Color:
    """Normaliza lo que aceptan los setters de color a un Color."""
    return v if isinstance(v, Color) else Color(v)

# File: msvg/core/geometry.py
# Project: MiniSvg (MSVG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Primitivas geométricas (Point).
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0

    @staticmethod
    def of(p: "PointLike") -> "Point":
        if isinstance(p, Point):
            return p
        x, y = p
        return Point(float(x), float(y))


PointLike = Union[Point, Tuple[float, float]]

# File: msvg/svg/context.py
# Project: MiniSvg (MSVG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Contexto de render: stream de salida + indentación actual/paso.
from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True)
class RenderContext:
    out: TextIO
    indent_step: int = 0
    indent: int = 0

    def indented(self) -> "RenderContext":
        """Contexto para hijos: un nivel más de indentación."""
        return RenderContext(self.out, self.indent_step, self.indent + self.indent_step)

    def render_indent(self) -> None:
        self.out.write(" " * self.indent)

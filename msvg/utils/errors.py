# File: msvg/utils/errors.py
# Project: MiniSvg (MSVG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Errores tipados del proyecto.
# Notes: El modelo de objetos no valida valores (radio, canales, opacidad).
from __future__ import annotations


class MsvgError(Exception):
    """Error base del proyecto."""


class MsvgValueError(MsvgError, ValueError):
    """Valor de entrada inválido (opciones del CLI, nombres de enums)."""


class MsvgTypeError(MsvgError, TypeError):
    """Se pasó algo que no es una figura a un contenedor."""


class MsvgConfigError(MsvgError):
    """msvg_settings.json malformado."""

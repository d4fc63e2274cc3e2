# File: msvg/core/settings.py
# Project: MiniSvg (MSVG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Settings repo-local (msvg_settings.json) aplicados vía variables de entorno.
# Notes: Tolerante a errores: un JSON roto se loggea y se ignora.
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from msvg.utils.errors import MsvgConfigError

log = logging.getLogger(__name__)


# ------------------------------
# Project settings (repo-local)
# ------------------------------
# Archivo esperado: msvg_settings.json en la raíz del proyecto (o en un padre del CWD).
PROJECT_SETTINGS_FILENAME = "msvg_settings.json"

ENV_LOG_LEVEL = "MSVG_LOG_LEVEL"
ENV_LOG_DIR = "MSVG_LOG_DIR"

VALID_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def find_project_settings_path(start: Path | None = None) -> Path | None:
    """Busca msvg_settings.json subiendo desde start (o CWD)."""
    start = (start or Path.cwd()).resolve()
    for p in (start, *start.parents):
        candidate = p / PROJECT_SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_settings_file(p: Path) -> Dict[str, Any]:
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise MsvgConfigError(f"No se pudo leer {p}: {e}") from e
    if not isinstance(data, dict):
        raise MsvgConfigError(f"{p}: la raíz no es un objeto JSON")
    return data


def load_project_settings(start: Path | None = None, *, logger: logging.Logger | None = None) -> Dict[str, Any]:
    """Carga el JSON de project settings. Devuelve {} si no existe o es inválido."""
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        return {}
    try:
        return read_settings_file(p)
    except MsvgConfigError as e:
        _log.warning("%s", e)
        return {}


def _deep_get(d: Dict[str, Any], path: str, default: Any = None) -> Any:
    cur: Any = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def apply_project_settings(
    start: Path | None = None, *, logger: logging.Logger | None = None, prefer_env: bool = True
) -> Dict[str, Any]:
    """Carga msvg_settings.json (si existe) y lo vuelca a variables de entorno.

    - Si `prefer_env=True`, una env var ya seteada NO se pisa.
    - Si `prefer_env=False`, el JSON pisa la env var.

    Devuelve un dict con los valores *aplicados desde JSON*.
    """
    _log = logger or log
    data = load_project_settings(start, logger=_log)
    if not data:
        return {}

    applied: Dict[str, Any] = {}

    def _set_env(key: str, value: Any) -> None:
        if prefer_env and os.environ.get(key):
            return
        os.environ[key] = str(value)

    level = _deep_get(data, "log.level")
    if isinstance(level, str):
        level = level.strip().lower()
        if level in VALID_LOG_LEVELS:
            applied["log.level"] = level
            _set_env(ENV_LOG_LEVEL, level)
        else:
            _log.warning("log.level inválido en settings: %r", level)

    log_dir = _deep_get(data, "log.dir")
    if isinstance(log_dir, str) and log_dir.strip():
        applied["log.dir"] = log_dir.strip()
        _set_env(ENV_LOG_DIR, log_dir.strip())

    if applied:
        _log.debug("Project settings aplicados: %s", applied)
    return applied


def coerce_log_level(v: Any, default: int = logging.INFO) -> int:
    s = str(v or "").strip().lower()
    if s in VALID_LOG_LEVELS:
        return getattr(logging, s.upper())
    return default


def env_log_level(default: int = logging.INFO) -> int:
    return coerce_log_level(os.environ.get(ENV_LOG_LEVEL), default)


def env_log_dir() -> str | None:
    v = os.environ.get(ENV_LOG_DIR, "").strip()
    return v or None

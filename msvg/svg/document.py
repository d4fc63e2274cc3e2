# File: msvg/svg/document.py
# Project: MiniSvg (MSVG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Contenedor de figuras (ObjectContainer) y Document SVG completo.
# Notes: render() es solo lectura: mismo estado -> misma salida, sin '\n' tras </svg>.
from __future__ import annotations

import copy
import io
from abc import ABC, abstractmethod
from typing import Iterator, TextIO

from msvg.core.version import INDENT_STEP, SVG_NAMESPACE, SVG_VERSION, XML_DECLARATION
from msvg.svg.context import RenderContext
from msvg.svg.objects import Object
from msvg.utils.errors import MsvgTypeError
from msvg.utils.log import get_logger

log = get_logger(__name__)


class ObjectContainer(ABC):
    """Algo que acepta figuras.

    - add(obj): guarda una copia; el handle del caller queda independiente.
    - add_ptr(obj): toma la instancia tal cual. El caller no debe volver a
      mutarla (el contenedor es el único dueño).
    """

    def add(self, obj: Object) -> None:
        _check_object(obj)
        self.add_ptr(copy.deepcopy(obj))

    @abstractmethod
    def add_ptr(self, obj: Object) -> None:
        raise NotImplementedError


class Document(ObjectContainer):

    def __init__(self) -> None:
        self._objects: list[Object] = []

    def add_ptr(self, obj: Object) -> None:
        _check_object(obj)
        self._objects.append(obj)
        log.debug("Document: agregado %r (total=%d)", obj, len(self._objects))

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[Object]:
        return iter(tuple(self._objects))

    def render(self, out: TextIO) -> None:
        """Escribe el documento completo en `out` (no lo cierra ni flushea)."""
        out.write(XML_DECLARATION + "\n")
        out.write(f'<svg xmlns="{SVG_NAMESPACE}" version="{SVG_VERSION}">\n')
        ctx = RenderContext(out, INDENT_STEP, INDENT_STEP)
        for obj in self._objects:
            obj.render(ctx)
        out.write("</svg>")
        log.debug("Document: renderizados %d objetos", len(self._objects))

    def render_string(self) -> str:
        buf = io.StringIO()
        self.render(buf)
        return buf.getvalue()


def _check_object(obj: object) -> None:
    if not isinstance(obj, Object):
        raise MsvgTypeError(f"Se esperaba una figura (Object), llegó {type(obj).__name__}")

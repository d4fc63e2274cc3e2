"""MiniSvg: modelo de objetos mínimo para figuras vectoriales y su salida SVG.

Usage::

    import sys
    from msvg import Circle, Document, Rgba

    doc = Document()
    doc.add(Circle().set_center((1.0, 2.0)).set_radius(3.5).set_fill_color(Rgba(100, 200, 255, 0.5)))
    doc.render(sys.stdout)
"""

from msvg.core.color import NONE_COLOR, Color, Rgb, Rgba, fmt_num
from msvg.core.geometry import Point
from msvg.core.styles import StrokeLineCap, StrokeLineJoin
from msvg.core.version import APP_VERSION as __version__
from msvg.svg.context import RenderContext
from msvg.svg.document import Document, ObjectContainer
from msvg.svg.objects import Circle, Object
from msvg.svg.path_props import PathProps

__all__ = [
    "NONE_COLOR",
    "Circle",
    "Color",
    "Document",
    "Object",
    "ObjectContainer",
    "PathProps",
    "Point",
    "RenderContext",
    "Rgb",
    "Rgba",
    "StrokeLineCap",
    "StrokeLineJoin",
    "fmt_num",
]

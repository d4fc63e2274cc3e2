"""MSVG - version constants.

Keep this module tiny and dependency-free. It is imported by the color,
object and document modules and must not have side effects.
"""

APP_NAME = "MiniSvg"
APP_SHORT = "MSVG"

# App semantic version (must match pyproject.toml).
APP_VERSION = "0.1.0"

# Document framing.
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" ?>'
SVG_NAMESPACE = "http://www.w3.org/2000/svg"
SVG_VERSION = "1.1"

# Every shape sits one level under <svg>: indent == step.
# NOTE: keep these stable; changing them changes every rendered document.
INDENT_STEP = 2
DEFAULT_RADIUS = 1.0
DEFAULT_OPACITY = 1.0

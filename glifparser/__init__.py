"""glifparser -- read single glyphs from .glif (Glyph Interchange Format) data."""

from glifparser.errors import ErrorKind, GlifParserError, ParseError, XMLError
from glifparser.objects import (
    Anchor,
    AngledLine,
    Color,
    GlifVersion,
    Glyph,
    Guideline,
    HorizontalLine,
    Image,
    VerticalLine,
)
from glifparser.parser import parseGlif

version = __version__ = "0.1.0"

__all__ = [
    "Anchor",
    "AngledLine",
    "Color",
    "ErrorKind",
    "GlifParserError",
    "GlifVersion",
    "Glyph",
    "Guideline",
    "HorizontalLine",
    "Image",
    "ParseError",
    "VerticalLine",
    "XMLError",
    "parseGlif",
]

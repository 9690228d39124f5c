"""Builders turning the attributes of single GLIF elements into glyph data.

Each builder takes the ``(name, value)`` attribute pairs of one element and
either returns the value to store on the glyph or raises
:class:`glifparser.errors.ParseError`. Attribute names a builder does not
know are rejected.
"""
from typing import Iterable, List, Optional, Tuple

from glifparser.constants import (
    DEFAULT_FORMAT_MINOR,
    DEFAULT_TRANSFORMATION,
    GLIF_FORMAT_VERSIONS,
    TRANSFORMATION_ATTRIBUTES,
)
from glifparser.errors import ErrorKind, ParseError
from glifparser.identifiers import IdentifierRegistry
from glifparser.objects.anchor import Anchor
from glifparser.objects.glyph import GlifVersion, Glyph
from glifparser.objects.guideline import AngledLine, Guideline, HorizontalLine, VerticalLine
from glifparser.objects.image import Image
from glifparser.objects.misc import Color
from glifparser.values import parseCodepoint, parseColor, parseInteger, parseNumber

Attributes = Iterable[Tuple[str, str]]


def _unexpectedAttribute() -> ParseError:
    return ParseError(ErrorKind.UNEXPECTED_ATTRIBUTE)


def buildGlyph(attributes: Attributes) -> Glyph:
    """Create an empty Glyph from the attributes of the <glyph> element."""
    name = ""
    formatVersion: Optional[GlifVersion] = None
    formatMinor = DEFAULT_FORMAT_MINOR

    for key, value in attributes:
        if key == "name":
            name = value
        elif key == "format":
            try:
                formatVersion = GlifVersion(GLIF_FORMAT_VERSIONS[value])
            except KeyError:
                raise ParseError(ErrorKind.UNSUPPORTED_GLIF_VERSION, value) from None
        elif key == "formatMinor":
            # formatMinor only means something from format 2 on, but
            # rejecting it in format 1 files isn't worth the trouble.
            formatMinor = parseInteger(value)
        else:
            raise _unexpectedAttribute()

    if not name or formatVersion is None:
        raise ParseError(ErrorKind.INVALID_GLYPH)
    return Glyph(name, formatVersion, formatMinor=formatMinor)


def buildAdvance(attributes: Attributes) -> Tuple[float, float]:
    """Return the (width, height) of an <advance> element."""
    width = 0.0
    height = 0.0
    for key, value in attributes:
        if key == "width":
            width = parseNumber(value)
        elif key == "height":
            height = parseNumber(value)
        else:
            raise _unexpectedAttribute()
    return width, height


def buildUnicode(attributes: Attributes) -> int:
    codepoint = None
    for key, value in attributes:
        if key == "hex":
            codepoint = parseCodepoint(value)
        else:
            raise _unexpectedAttribute()
    if codepoint is None:
        raise ParseError(ErrorKind.INVALID_UNICODE)
    return codepoint


def buildAnchor(
    attributes: Attributes,
    identifiers: IdentifierRegistry,
    formatVersion: GlifVersion,
) -> Anchor:
    x: Optional[float] = None
    y: Optional[float] = None
    name: Optional[str] = None
    color: Optional[Color] = None
    identifier: Optional[str] = None

    for key, value in attributes:
        if key == "x":
            x = parseNumber(value)
        elif key == "y":
            y = parseNumber(value)
        elif key == "name":
            name = value
        elif key == "color":
            color = parseColor(value)
        elif key == "identifier":
            identifier = identifiers.register(value, formatVersion)
        else:
            raise _unexpectedAttribute()

    if x is None or y is None:
        raise ParseError(ErrorKind.INVALID_ANCHOR)
    return Anchor(x, y, name=name, color=color, identifier=identifier)


def buildGuideline(
    attributes: Attributes,
    identifiers: IdentifierRegistry,
    formatVersion: GlifVersion,
) -> Guideline:
    """Build a Guideline; the x/y/angle combination picks the kind of line.

    Only ``x``, only ``y``, or all three of ``x``, ``y`` and ``angle`` are
    valid. The angle must lie within 0 and 360 inclusive.
    """
    x: Optional[float] = None
    y: Optional[float] = None
    angle: Optional[float] = None
    name: Optional[str] = None
    color: Optional[Color] = None
    identifier: Optional[str] = None

    for key, value in attributes:
        if key == "x":
            x = parseNumber(value)
        elif key == "y":
            y = parseNumber(value)
        elif key == "angle":
            angle = parseNumber(value)
            if not 0 <= angle <= 360:
                raise ParseError(ErrorKind.INVALID_ANGLE, value)
        elif key == "name":
            name = value
        elif key == "color":
            color = parseColor(value)
        elif key == "identifier":
            identifier = identifiers.register(value, formatVersion)
        else:
            raise _unexpectedAttribute()

    if x is not None and y is None and angle is None:
        line = VerticalLine(x)
    elif x is None and y is not None and angle is None:
        line = HorizontalLine(y)
    elif x is not None and y is not None and angle is not None:
        line = AngledLine(x, y, angle)
    else:
        raise ParseError(ErrorKind.INVALID_GUIDELINE)
    return Guideline(line, name=name, color=color, identifier=identifier)


def buildImage(attributes: Attributes) -> Image:
    """Build an Image; unset transformation values keep the identity's."""
    fileName: Optional[str] = None
    color: Optional[Color] = None
    transformation: List[float] = list(DEFAULT_TRANSFORMATION)

    for key, value in attributes:
        if key in TRANSFORMATION_ATTRIBUTES:
            transformation[TRANSFORMATION_ATTRIBUTES.index(key)] = parseNumber(value)
        elif key == "fileName":
            fileName = value
        elif key == "color":
            color = parseColor(value)
        else:
            raise _unexpectedAttribute()

    if fileName is None:
        raise ParseError(ErrorKind.INVALID_IMAGE)
    return Image(fileName, transformation=transformation, color=color)

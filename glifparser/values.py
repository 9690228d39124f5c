"""Decoding of GLIF attribute text into typed values.

All parsers are strict: the attribute text must be the literal and nothing
else, so surrounding whitespace is an error rather than being trimmed away.
Failures raise :class:`glifparser.errors.ParseError` with the offending text
and the low-level exception attached.
"""
import re

from glifparser.errors import ErrorKind, ParseError
from glifparser.objects.misc import Color

_UINT32_MAX = 0xFFFFFFFF
_MAX_CODEPOINT = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)

_integerRE = re.compile(r"[0-9]+\Z")
_hexRE = re.compile(r"[0-9A-Fa-f]+\Z")


def parseNumber(value: str) -> float:
    """
    >>> parseNumber("-12.5")
    -12.5
    >>> parseNumber("268")
    268.0
    """
    # float() would also take padding and "1_000"
    if value != value.strip() or "_" in value:
        raise ParseError(
            ErrorKind.INVALID_NUMBER, value, ValueError("invalid float literal")
        )
    try:
        return float(value)
    except ValueError as e:
        raise ParseError(ErrorKind.INVALID_NUMBER, value, e) from e


def parseInteger(value: str) -> int:
    """Parse an unsigned 32-bit decimal integer."""
    if not _integerRE.match(value):
        cause = ValueError("invalid digit found in string")
        raise ParseError(ErrorKind.INVALID_INTEGER, value, cause)
    number = int(value)
    if number > _UINT32_MAX:
        cause = OverflowError("number too large to fit in target type")
        raise ParseError(ErrorKind.INVALID_INTEGER, value, cause)
    return number


def parseCodepoint(value: str) -> int:
    """Parse a hexadecimal code point and check it is a Unicode scalar value.

    >>> hex(parseCodepoint("002E"))
    '0x2e'
    """
    if not _hexRE.match(value):
        cause = ValueError("invalid digit found in string")
        raise ParseError(ErrorKind.INVALID_CODEPOINT, value, cause)
    codepoint = int(value, 16)
    if codepoint > _MAX_CODEPOINT or codepoint in _SURROGATES:
        cause = ValueError("converted integer out of range for `char`")
        raise ParseError(ErrorKind.INVALID_CODEPOINT, value, cause)
    return codepoint


def parseColor(value: str) -> Color:
    """Parse a ``"r,g,b,a"`` color string.

    >>> parseColor("1,0,0,0.5")
    Color(red=1.0, green=0.0, blue=0.0, alpha=0.5)
    """
    components = value.split(",")
    if len(components) != 4:
        raise ParseError(ErrorKind.INVALID_COLOR, value)
    try:
        return Color(*(parseNumber(c) for c in components))
    except ParseError as e:
        raise ParseError(ErrorKind.INVALID_COLOR, value, e) from e

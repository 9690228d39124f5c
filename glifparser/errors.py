from enum import Enum
from typing import Optional


class GlifParserError(Exception):
    """Base exception for everything that makes a .glif document unreadable."""


class XMLError(GlifParserError):
    """The document is not well-formed XML.

    The underlying expat error is chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        lineno: Optional[int] = None,
        column: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.lineno = lineno
        self.column = column
        self.offset = offset


class ErrorKind(Enum):
    """Reasons a well-formed document is rejected as a glyph.

    The value of each member is the message template used by ParseError.
    """

    BAD_IDENTIFIER = "bad identifier"
    DUPLICATE_ELEMENT = "found duplicate element"
    DUPLICATE_IDENTIFIER = "duplicate identifier"
    INVALID_ANCHOR = "invalid anchor element"
    INVALID_ANGLE = "an angle must be between 0 and 360°"
    INVALID_CODEPOINT = "invalid codepoint '{text}': {cause}"
    INVALID_COLOR = "invalid color attribute"
    INVALID_GLYPH = "invalid glyph element"
    INVALID_GUIDELINE = "invalid guideline element"
    INVALID_IMAGE = "invalid image element"
    INVALID_INTEGER = "invalid integer '{text}': {cause}"
    INVALID_NUMBER = "invalid number '{text}': {cause}"
    INVALID_UNICODE = "invalid unicode element"
    LIB_MUST_BE_DICTIONARY = "the glyph lib must be a dictionary"
    PARSE_PLIST = "failed to parse glyph lib: {cause}"
    TRAILING_DATA = "expected a single 'glyph' element in the glif file"
    UNEXPECTED_ATTRIBUTE = "unexpected attribute"
    UNEXPECTED_EOF = "unexpected end of file"
    UNSUPPORTED_GLIF_VERSION = "unsupported glif version"
    WRONG_FIRST_ELEMENT = "'glyph' must be the first element in a glif file"


class ParseError(GlifParserError):
    """The document is well-formed XML but not a valid glyph.

    Attributes:
        kind: The ErrorKind reason code.
        text: The offending attribute text, for number-like values.
        cause: The low-level exception that triggered this error, if any.
        offset: Byte offset of the element being read when the error occurred.
    """

    def __init__(
        self,
        kind: ErrorKind,
        text: Optional[str] = None,
        cause: Optional[BaseException] = None,
        offset: Optional[int] = None,
    ) -> None:
        self.kind = kind
        self.text = text
        self.cause = cause
        self.offset = offset
        super().__init__(kind.value.format(text=text, cause=cause))

    def __str__(self) -> str:
        message = self.kind.value.format(text=self.text, cause=self.cause)
        if self.offset is not None:
            return f"{message} (at byte {self.offset})"
        return message

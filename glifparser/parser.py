"""Reading a Glyph from the bytes of a .glif document.

The document is read in a single pass over its XML events. The reader starts
outside any element, moves into the <glyph> element once its start tag has
been read, and is done once the matching end tag is seen; only the end of the
input may follow.
"""
import logging
from enum import Enum
from typing import Optional, Union

from glifparser.constants import XML_READ_CHUNK_SIZE
from glifparser.elements import (
    buildAdvance,
    buildAnchor,
    buildGlyph,
    buildGuideline,
    buildImage,
    buildUnicode,
)
from glifparser.errors import ErrorKind, ParseError
from glifparser.identifiers import IdentifierRegistry
from glifparser.lib import findElementContent, readLib
from glifparser.objects.glyph import Glyph
from glifparser.xmlreader import EventKind, XMLEvent, XMLEventReader

logger = logging.getLogger(__name__)

_TRANSPARENT_EVENTS = frozenset((EventKind.COMMENT, EventKind.DECL))


class _State(Enum):
    START = "start"
    GLYPH = "glyph"
    DONE = "done"


class GlifReader:
    """Single-use reader for one .glif document.

    The identifier registry and the element bookkeeping live on the reader,
    so concurrent reads of different documents don't share any state.
    """

    def __init__(self, data: bytes, chunkSize: int = XML_READ_CHUNK_SIZE) -> None:
        self._reader = XMLEventReader(data, chunkSize=chunkSize)
        self._identifiers = IdentifierRegistry()
        self._state = _State.START
        self._glyph: Optional[Glyph] = None
        self._seenAdvance = False
        self._seenLib = False
        self._used = False

    def read(self) -> Glyph:
        """Read the document and return the glyph.

        Raises:
            XMLError: if the document is not well-formed XML.
            ParseError: if the document does not describe a valid glyph.
        """
        if self._used:
            raise RuntimeError("GlifReader instances can only be read once")
        self._used = True
        logger.debug("Parsing .glif data (%d bytes)", len(self._reader.data))
        while True:
            event = self._reader.nextEvent()
            try:
                glyph = self._handleEvent(event)
            except ParseError as e:
                if e.offset is None:
                    e.offset = event.start
                raise
            if glyph is not None:
                logger.debug("Parsed glyph '%s'", glyph.name)
                return glyph

    def _handleEvent(self, event: XMLEvent) -> Optional[Glyph]:
        if event.kind in _TRANSPARENT_EVENTS:
            return None
        if self._state is _State.START:
            self._handleStart(event)
        elif self._state is _State.GLYPH:
            self._handleGlyphChild(event)
        elif event.kind is EventKind.EOF:
            return self._glyph
        else:
            raise ParseError(ErrorKind.TRAILING_DATA)
        return None

    def _handleStart(self, event: XMLEvent) -> None:
        if event.kind is EventKind.START or event.kind is EventKind.EMPTY:
            if event.name != "glyph":
                raise ParseError(ErrorKind.WRONG_FIRST_ELEMENT)
            self._glyph = buildGlyph(event.attributes)
            # A self-closing <glyph/> never sees its end tag, so it can only
            # end in UNEXPECTED_EOF or TRAILING_DATA.
            self._state = _State.GLYPH
        elif event.kind is EventKind.EOF:
            raise ParseError(ErrorKind.UNEXPECTED_EOF)

    def _handleGlyphChild(self, event: XMLEvent) -> None:
        glyph = self._glyph
        assert glyph is not None
        kind = event.kind
        if kind is EventKind.EMPTY:
            if event.name == "unicode":
                glyph.unicodes.append(buildUnicode(event.attributes))
            elif event.name == "anchor":
                glyph.anchors.append(
                    buildAnchor(event.attributes, self._identifiers, glyph.formatVersion)
                )
            elif event.name == "guideline":
                glyph.guidelines.append(
                    buildGuideline(
                        event.attributes, self._identifiers, glyph.formatVersion
                    )
                )
            elif event.name == "advance":
                if self._seenAdvance:
                    raise ParseError(ErrorKind.DUPLICATE_ELEMENT)
                self._seenAdvance = True
                glyph.width, glyph.height = buildAdvance(event.attributes)
            elif event.name == "image":
                if glyph.image is not None:
                    raise ParseError(ErrorKind.DUPLICATE_ELEMENT)
                glyph.image = buildImage(event.attributes)
            else:
                logger.debug("Skipping <%s/> element in glyph", event.name)
        elif kind is EventKind.START:
            if event.name == "note":
                if glyph.note is not None:
                    raise ParseError(ErrorKind.DUPLICATE_ELEMENT)
                glyph.note = self._readNote()
            elif event.name == "lib":
                if self._seenLib:
                    raise ParseError(ErrorKind.DUPLICATE_ELEMENT)
                self._seenLib = True
                glyph.lib = readLib(self._reader, event)
            else:
                # TODO: read <outline> into contours and components.
                span = findElementContent(self._reader, event)
                logger.debug(
                    "Skipping <%s> element in glyph (%d bytes of content)",
                    event.name,
                    span.stop - span.start,
                )
        elif kind is EventKind.END and event.name == "glyph":
            self._state = _State.DONE
        elif kind is EventKind.TRAILING:
            raise ParseError(ErrorKind.TRAILING_DATA)
        elif kind is EventKind.EOF:
            raise ParseError(ErrorKind.UNEXPECTED_EOF)

    def _readNote(self) -> str:
        parts = []
        depth = 0
        while True:
            event = self._reader.nextEvent()
            if event.kind is EventKind.START:
                depth += 1
            elif event.kind is EventKind.END:
                if depth == 0:
                    break
                depth -= 1
            elif event.kind is EventKind.TEXT and depth == 0:
                parts.append(event.text)
            elif event.kind is EventKind.EOF:
                raise ParseError(ErrorKind.UNEXPECTED_EOF)
        return "".join(parts).strip()


def parseGlif(
    data: Union[bytes, bytearray, memoryview], chunkSize: int = XML_READ_CHUNK_SIZE
) -> Glyph:
    """Parse the bytes of a .glif document into a Glyph.

    Args:
        data: The complete UTF-8 encoded document.
        chunkSize: How many bytes to hand to the XML parser at a time.

    Raises:
        TypeError: if ``data`` is not a bytes-like object.
        XMLError: if the document is not well-formed XML.
        ParseError: if the document does not describe a valid glyph.
    """
    if isinstance(data, (bytearray, memoryview)):
        data = bytes(data)
    elif not isinstance(data, bytes):
        raise TypeError(f"Expected bytes, found {type(data).__name__}")
    return GlifReader(data, chunkSize=chunkSize).read()

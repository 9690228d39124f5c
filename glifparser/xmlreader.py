"""A pull-based XML event reader on top of expat.

expat pushes callbacks at us; :class:`XMLEventReader` queues them as
:class:`XMLEvent` objects and feeds the parser one chunk at a time, so
events come out lazily and in document order. Each event records where it
sits in the original buffer, which lets callers slice raw sub-documents out
of the input without re-serializing anything.
"""
from collections import deque
from enum import Enum
from typing import Deque, List, Optional, Tuple
from xml.parsers.expat import ExpatError, ParserCreate, errors

import attr

from glifparser.constants import XML_READ_CHUNK_SIZE
from glifparser.errors import XMLError

_JUNK_AFTER_ROOT = errors.codes[errors.XML_ERROR_JUNK_AFTER_DOC_ELEMENT]
_NO_ELEMENTS = errors.codes[errors.XML_ERROR_NO_ELEMENTS]

_GT = ord(">")
_SLASH = ord("/")
_QUOTES = (ord('"'), ord("'"))


class EventKind(Enum):
    START = "start"
    EMPTY = "empty"
    END = "end"
    TEXT = "text"
    COMMENT = "comment"
    DECL = "decl"
    DOCTYPE = "doctype"
    PI = "pi"
    # Content following the end of the root element.
    TRAILING = "trailing"
    # End of the input, whether or not the root element was closed.
    EOF = "eof"


@attr.s(auto_attribs=True, slots=True, frozen=True)
class XMLEvent:
    """A single structural event of the document.

    ``start`` and ``end`` are byte offsets into the original buffer. For tags
    ``end`` points just past the closing ``>``; for other events it equals
    ``start``.
    """

    kind: EventKind
    name: Optional[str] = None
    attributes: Tuple[Tuple[str, str], ...] = ()
    text: Optional[str] = None
    start: int = 0
    end: int = 0


class XMLEventReader:
    """Reads a complete XML document held in memory, one event at a time."""

    def __init__(self, data: bytes, chunkSize: int = XML_READ_CHUNK_SIZE) -> None:
        if chunkSize <= 0:
            raise ValueError(f"chunkSize must be positive, got {chunkSize}")
        self._data = data
        self._chunkSize = chunkSize
        self._position = 0
        self._events: Deque[XMLEvent] = deque()
        self._emptyStack: List[bool] = []
        self._rootClosed = False
        self._finished = False
        self._error: Optional[XMLError] = None

        parser = ParserCreate()
        parser.ordered_attributes = True
        parser.buffer_text = True
        parser.StartElementHandler = self._startElement
        parser.EndElementHandler = self._endElement
        parser.CharacterDataHandler = self._characterData
        parser.CommentHandler = self._comment
        parser.XmlDeclHandler = self._xmlDecl
        parser.StartDoctypeDeclHandler = self._doctype
        parser.ProcessingInstructionHandler = self._processingInstruction
        self._parser = parser

    @property
    def data(self) -> bytes:
        return self._data

    def nextEvent(self) -> XMLEvent:
        """Return the next event, ending with an EOF event.

        Raises:
            XMLError: if the document is not well-formed. Events preceding
                the broken markup are returned first.
        """
        while not self._events:
            if self._error is not None:
                raise self._error
            if self._finished:
                return XMLEvent(EventKind.EOF, start=len(self._data), end=len(self._data))
            self._feed()
        return self._events.popleft()

    def __iter__(self):
        while True:
            event = self.nextEvent()
            yield event
            if event.kind is EventKind.EOF:
                return

    def _feed(self) -> None:
        chunk = self._data[self._position : self._position + self._chunkSize]
        self._position += len(chunk)
        isFinal = self._position >= len(self._data)
        try:
            self._parser.Parse(chunk, isFinal)
        except ExpatError as e:
            self._finished = True
            if e.code == _JUNK_AFTER_ROOT and self._rootClosed:
                offset = self._parser.ErrorByteIndex
                self._events.append(
                    XMLEvent(EventKind.TRAILING, start=offset, end=offset)
                )
            elif e.code == _NO_ELEMENTS and isFinal:
                # The input ended before the root element was closed, or
                # before one was opened. Callers see this as the EOF event.
                pass
            else:
                error = XMLError(
                    str(e),
                    lineno=e.lineno,
                    column=e.offset,
                    offset=self._parser.ErrorByteIndex,
                )
                error.__cause__ = e
                self._error = error
            return
        if isFinal:
            self._finished = True

    def _tagEnd(self, offset: int) -> int:
        """Return the offset just past the '>' of the tag starting at offset."""
        data = self._data
        quote = None
        i = offset
        # expat only reports a tag once all of it has been seen, and the
        # whole buffer is in memory, so this never runs off the end.
        while True:
            c = data[i]
            if quote is not None:
                if c == quote:
                    quote = None
            elif c in _QUOTES:
                quote = c
            elif c == _GT:
                return i + 1
            i += 1

    # expat handlers

    def _startElement(self, name: str, attributes: List[str]) -> None:
        start = self._parser.CurrentByteIndex
        end = self._tagEnd(start)
        isEmpty = self._data[end - 2] == _SLASH
        self._emptyStack.append(isEmpty)
        pairs = tuple(zip(attributes[::2], attributes[1::2]))
        kind = EventKind.EMPTY if isEmpty else EventKind.START
        self._events.append(
            XMLEvent(kind, name=name, attributes=pairs, start=start, end=end)
        )

    def _endElement(self, name: str) -> None:
        isEmpty = self._emptyStack.pop()
        if not self._emptyStack:
            self._rootClosed = True
        if isEmpty:
            return
        start = self._parser.CurrentByteIndex
        end = self._tagEnd(start)
        self._events.append(XMLEvent(EventKind.END, name=name, start=start, end=end))

    def _characterData(self, text: str) -> None:
        offset = self._parser.CurrentByteIndex
        self._events.append(
            XMLEvent(EventKind.TEXT, text=text, start=offset, end=offset)
        )

    def _comment(self, text: str) -> None:
        offset = self._parser.CurrentByteIndex
        self._events.append(
            XMLEvent(EventKind.COMMENT, text=text, start=offset, end=offset)
        )

    def _xmlDecl(self, version, encoding, standalone) -> None:
        offset = self._parser.CurrentByteIndex
        self._events.append(XMLEvent(EventKind.DECL, start=offset, end=offset))

    def _doctype(self, doctypeName, systemId, publicId, hasInternalSubset) -> None:
        offset = self._parser.CurrentByteIndex
        self._events.append(
            XMLEvent(EventKind.DOCTYPE, name=doctypeName, start=offset, end=offset)
        )

    def _processingInstruction(self, target: str, data: str) -> None:
        offset = self._parser.CurrentByteIndex
        self._events.append(
            XMLEvent(EventKind.PI, name=target, text=data, start=offset, end=offset)
        )

"""Reading the glyph <lib> element.

The lib holds a property list fragment. Rather than rebuilding it from the
outer document's events, the raw bytes between ``<lib>`` and ``</lib>`` are
cut out of the input and handed to fontTools' plist parser as they are.
"""
import logging
from typing import Any, Dict

from fontTools.misc import plistlib

from glifparser.errors import ErrorKind, ParseError
from glifparser.xmlreader import EventKind, XMLEvent, XMLEventReader

logger = logging.getLogger(__name__)


def findElementContent(reader: XMLEventReader, startEvent: XMLEvent) -> slice:
    """Consume events up to the end tag matching ``startEvent``.

    Returns the slice of the input between the start tag and its end tag.
    """
    depth = 0
    while True:
        event = reader.nextEvent()
        if event.kind is EventKind.START:
            depth += 1
        elif event.kind is EventKind.END:
            if depth == 0:
                return slice(startEvent.end, event.start)
            depth -= 1
        elif event.kind is EventKind.EOF:
            raise ParseError(ErrorKind.UNEXPECTED_EOF)


def parseLibData(data: bytes) -> Dict[str, Any]:
    """Parse a property list fragment that must hold a dictionary."""
    try:
        lib = plistlib.loads(data)
    except Exception as e:
        raise ParseError(ErrorKind.PARSE_PLIST, cause=e) from e
    if not isinstance(lib, dict):
        raise ParseError(ErrorKind.LIB_MUST_BE_DICTIONARY)
    return lib


def readLib(reader: XMLEventReader, startEvent: XMLEvent) -> Dict[str, Any]:
    """Read the lib whose start tag was just returned by ``reader``."""
    span = findElementContent(reader, startEvent)
    logger.debug("Parsing glyph lib from bytes %d to %d", span.start, span.stop)
    return parseLibData(reader.data[span])

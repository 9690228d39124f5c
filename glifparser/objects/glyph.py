from enum import IntEnum
from typing import Any, Dict, List, Optional

import attr

from glifparser.constants import DEFAULT_FORMAT_MINOR
from glifparser.objects.anchor import Anchor
from glifparser.objects.guideline import Guideline
from glifparser.objects.image import Image


class GlifVersion(IntEnum):
    """The major GLIF format version a glyph was read from."""

    V1 = 1
    V2 = 2


@attr.s(auto_attribs=True, slots=True)
class Glyph:
    """Represents a glyph as read from a .glif document.

    See http://unifiedfontobject.org/versions/ufo3/glyphs/glif/.

    Note:
        Outlines (contours, components and points) are not modeled; an
        ``<outline>`` element is accepted and skipped by the parser.
    """

    name: str
    """The name of the glyph."""

    formatVersion: GlifVersion
    """The major format version of the .glif document."""

    formatMinor: int = DEFAULT_FORMAT_MINOR
    """The minor format version of the .glif document."""

    width: float = 0.0
    """The advance width of the glyph."""

    height: float = 0.0
    """The advance height of the glyph."""

    unicodes: List[int] = attr.ib(factory=list)
    """The Unicode code points assigned to the glyph, in document order."""

    anchors: List[Anchor] = attr.ib(factory=list)
    """The anchors of the glyph."""

    guidelines: List[Guideline] = attr.ib(factory=list)
    """The guidelines of the glyph."""

    image: Optional[Image] = None
    """The background image reference of the glyph."""

    note: Optional[str] = None
    """A free form text note about the glyph."""

    lib: Optional[Dict[str, Any]] = None
    """The glyph's lib for mapping string keys to arbitrary data."""

    @property
    def unicode(self) -> Optional[int]:
        """The first assigned Unicode code point or None."""
        if self.unicodes:
            return self.unicodes[0]
        return None

from typing import Optional

import attr

from glifparser.objects.misc import Color


@attr.s(auto_attribs=True, slots=True)
class Anchor:
    """Represents a single anchor.

    See http://unifiedfontobject.org/versions/ufo3/glyphs/glif/#anchor.
    """

    x: float
    """The x coordinate of the anchor."""

    y: float
    """The y coordinate of the anchor."""

    name: Optional[str] = None
    """The name of the anchor."""

    color: Optional[Color] = None
    """The color of the anchor."""

    identifier: Optional[str] = None
    """The globally unique identifier of the anchor."""

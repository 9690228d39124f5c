from typing import Optional, Union

import attr

from glifparser.objects.misc import Color


@attr.s(auto_attribs=True, frozen=True, slots=True)
class VerticalLine:
    """A vertical line through ``x``."""

    x: float


@attr.s(auto_attribs=True, frozen=True, slots=True)
class HorizontalLine:
    """A horizontal line through ``y``."""

    y: float


@attr.s(auto_attribs=True, frozen=True, slots=True)
class AngledLine:
    """A line through (``x``, ``y``), rotated counter-clockwise by ``degrees``."""

    x: float
    y: float
    degrees: float


Line = Union[VerticalLine, HorizontalLine, AngledLine]


@attr.s(auto_attribs=True, slots=True)
class Guideline:
    """Represents a single guideline.

    See http://unifiedfontobject.org/versions/ufo3/glyphs/glif/#guideline.
    Which of ``x``, ``y`` and ``angle`` are set in the file decides the kind of
    :attr:`line`; the properties below read the coordinates back out of it.
    """

    line: Line
    """The line descriptor of the guideline."""

    name: Optional[str] = None
    """The name of the guideline."""

    color: Optional[Color] = None
    """The color of the guideline."""

    identifier: Optional[str] = None
    """The globally unique identifier of the guideline."""

    @property
    def x(self) -> Optional[float]:
        """The origin x coordinate, None for horizontal guidelines."""
        if isinstance(self.line, HorizontalLine):
            return None
        return self.line.x

    @property
    def y(self) -> Optional[float]:
        """The origin y coordinate, None for vertical guidelines."""
        if isinstance(self.line, VerticalLine):
            return None
        return self.line.y

    @property
    def angle(self) -> Optional[float]:
        """The angle in degrees, only set for angled guidelines."""
        if isinstance(self.line, AngledLine):
            return self.line.degrees
        return None

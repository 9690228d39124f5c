from typing import Optional, Sequence, Union

import attr
from fontTools.misc.transform import Identity, Transform

from glifparser.objects.misc import Color


def _convert_transform(t: Union[Transform, Sequence[float]]) -> Transform:
    """Return a passed-in Transform as is, otherwise convert a sequence of
    numbers to a Transform if need be."""
    return t if isinstance(t, Transform) else Transform(*t)


@attr.s(auto_attribs=True, slots=True)
class Image:
    """Represents a background image reference.

    See http://unifiedfontobject.org/versions/ufo3/images/ and
    http://unifiedfontobject.org/versions/ufo3/glyphs/glif/#image.
    """

    fileName: str
    """The file name of the image, relative to the images directory."""

    transformation: Transform = attr.ib(default=Identity, converter=_convert_transform)
    """The affine transformation applied to the image."""

    color: Optional[Color] = None
    """The color applied to the image."""

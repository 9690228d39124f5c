from typing import NamedTuple


class Color(NamedTuple):
    """Represents an RGBA color as a tuple of (red, green, blue, alpha).

    Components are kept as read; values outside 0..1 are not clamped.
    See http://unifiedfontobject.org/versions/ufo3/conventions/#colors.
    """

    red: float
    green: float
    blue: float
    alpha: float

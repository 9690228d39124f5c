from glifparser.objects.anchor import Anchor
from glifparser.objects.glyph import GlifVersion, Glyph
from glifparser.objects.guideline import AngledLine, Guideline, HorizontalLine, VerticalLine
from glifparser.objects.image import Image
from glifparser.objects.misc import Color

__all__ = [
    "Anchor",
    "AngledLine",
    "Color",
    "GlifVersion",
    "Glyph",
    "Guideline",
    "HorizontalLine",
    "Image",
    "VerticalLine",
]

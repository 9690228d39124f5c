from typing import Set

from fontTools.ufoLib.validators import identifierValidator

from glifparser.errors import ErrorKind, ParseError
from glifparser.objects.glyph import GlifVersion


class IdentifierRegistry:
    """Collects the identifiers seen while reading one .glif document.

    A registry belongs to a single parse; identifiers must be unique across
    every element of the document, whichever element type carries them.
    """

    __slots__ = ("_seen",)

    def __init__(self) -> None:
        self._seen: Set[str] = set()

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._seen

    def __len__(self) -> int:
        return len(self._seen)

    def register(self, candidate: str, formatVersion: GlifVersion) -> str:
        """Validate ``candidate`` and record it as used.

        Raises:
            ParseError: UNEXPECTED_ATTRIBUTE for any identifier in a format 1
                document, BAD_IDENTIFIER if the syntax is invalid or
                DUPLICATE_IDENTIFIER if it was already registered.
        """
        if formatVersion == GlifVersion.V1:
            raise ParseError(ErrorKind.UNEXPECTED_ATTRIBUTE)
        if not identifierValidator(candidate):
            raise ParseError(ErrorKind.BAD_IDENTIFIER)
        if candidate in self._seen:
            raise ParseError(ErrorKind.DUPLICATE_IDENTIFIER)
        self._seen.add(candidate)
        return candidate

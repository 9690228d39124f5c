import unittest

from glifparser.errors import ErrorKind, ParseError
from glifparser.identifiers import IdentifierRegistry
from glifparser.objects.glyph import GlifVersion


class IdentifierRegistryTest(unittest.TestCase):

    def setUp(self):
        self.registry = IdentifierRegistry()

    def assertRegisterError(self, candidate, formatVersion, kind):
        with self.assertRaises(ParseError) as cm:
            self.registry.register(candidate, formatVersion)
        self.assertIs(cm.exception.kind, kind)

    def test_register(self):
        self.assertEqual(len(self.registry), 0)
        self.assertEqual(self.registry.register("a1", GlifVersion.V2), "a1")
        self.assertIn("a1", self.registry)
        self.assertEqual(self.registry.register("a2", GlifVersion.V2), "a2")
        self.assertEqual(len(self.registry), 2)

    def test_duplicate(self):
        self.registry.register("a1", GlifVersion.V2)
        self.assertRegisterError("a1", GlifVersion.V2, ErrorKind.DUPLICATE_IDENTIFIER)
        self.assertEqual(len(self.registry), 1)

    def test_format_1(self):
        self.assertRegisterError("a1", GlifVersion.V1, ErrorKind.UNEXPECTED_ATTRIBUTE)
        self.assertNotIn("a1", self.registry)

    def test_format_checked_first(self):
        self.assertRegisterError("", GlifVersion.V1, ErrorKind.UNEXPECTED_ATTRIBUTE)

    def test_bad_identifier(self):
        self.assertRegisterError("", GlifVersion.V2, ErrorKind.BAD_IDENTIFIER)
        self.assertRegisterError("x" * 101, GlifVersion.V2, ErrorKind.BAD_IDENTIFIER)
        self.assertEqual(len(self.registry), 0)

    def test_identifier_syntax(self):
        for candidate in ("a1", "vMlVuTQd4d", " ~", "a" * 100):
            self.assertEqual(self.registry.register(candidate, GlifVersion.V2), candidate)
        for candidate in ("tab\there", "\u00e4", "\x7f"):
            self.assertRegisterError(candidate, GlifVersion.V2, ErrorKind.BAD_IDENTIFIER)
        self.assertEqual(len(self.registry), 4)

    def test_registries_independent(self):
        self.registry.register("a1", GlifVersion.V2)
        other = IdentifierRegistry()
        self.assertEqual(other.register("a1", GlifVersion.V2), "a1")


if __name__ == "__main__":
    unittest.main()

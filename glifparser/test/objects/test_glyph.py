import unittest

from glifparser.objects.glyph import GlifVersion, Glyph


class GlyphTest(unittest.TestCase):

    def test_defaults(self):
        glyph = Glyph("a", GlifVersion.V2)
        self.assertEqual(glyph.formatMinor, 0)
        self.assertEqual((glyph.width, glyph.height), (0, 0))
        self.assertEqual(glyph.unicodes, [])
        self.assertEqual(glyph.anchors, [])
        self.assertEqual(glyph.guidelines, [])
        self.assertIsNone(glyph.image)
        self.assertIsNone(glyph.note)
        self.assertIsNone(glyph.lib)

    def test_unicode(self):
        glyph = Glyph("a", GlifVersion.V2)
        self.assertIsNone(glyph.unicode)
        glyph.unicodes.extend([0x61, 0x41])
        self.assertEqual(glyph.unicode, 0x61)

    def test_lists_not_shared(self):
        a = Glyph("a", GlifVersion.V1)
        b = Glyph("b", GlifVersion.V1)
        a.unicodes.append(0x61)
        self.assertEqual(b.unicodes, [])

    def test_version(self):
        self.assertEqual(GlifVersion(1), GlifVersion.V1)
        self.assertEqual(int(GlifVersion.V2), 2)


if __name__ == "__main__":
    unittest.main()

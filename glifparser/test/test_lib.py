import logging
import unittest

from glifparser.errors import ErrorKind, ParseError
from glifparser.lib import findElementContent, parseLibData, readLib
from glifparser.xmlreader import EventKind, XMLEventReader


class FindElementContentTest(unittest.TestCase):

    def test_nested(self):
        data = b"<lib><dict><key>a</key><dict/></dict></lib>"
        reader = XMLEventReader(data)
        start = reader.nextEvent()
        span = findElementContent(reader, start)
        self.assertEqual(data[span], b"<dict><key>a</key><dict/></dict>")
        self.assertIs(reader.nextEvent().kind, EventKind.EOF)

    def test_same_name_nested(self):
        data = b"<x><x>inner</x>tail</x>"
        reader = XMLEventReader(data)
        span = findElementContent(reader, reader.nextEvent())
        self.assertEqual(data[span], b"<x>inner</x>tail")

    def test_unexpected_eof(self):
        reader = XMLEventReader(b"<lib><dict><key>a</key>")
        start = reader.nextEvent()
        with self.assertRaises(ParseError) as cm:
            findElementContent(reader, start)
        self.assertIs(cm.exception.kind, ErrorKind.UNEXPECTED_EOF)


class ParseLibDataTest(unittest.TestCase):

    def test_dict(self):
        lib = parseLibData(
            b"<dict><key>public.markColor</key><string>1,0,0,0.5</string></dict>"
        )
        self.assertEqual(lib, {"public.markColor": "1,0,0,0.5"})

    def test_not_a_dict(self):
        with self.assertRaises(ParseError) as cm:
            parseLibData(b"<string>hello</string>")
        self.assertIs(cm.exception.kind, ErrorKind.LIB_MUST_BE_DICTIONARY)

    def test_malformed(self):
        with self.assertRaises(ParseError) as cm:
            parseLibData(b"<dict><key>a</key>")
        self.assertIs(cm.exception.kind, ErrorKind.PARSE_PLIST)
        self.assertIsNotNone(cm.exception.cause)


class ReadLibTest(unittest.TestCase):

    def test_read_lib(self):
        data = b"<lib>\n  <dict><key>a</key><integer>1</integer></dict>\n</lib>"
        reader = XMLEventReader(data)
        start = reader.nextEvent()
        with self.assertLogs("glifparser.lib", level=logging.DEBUG):
            lib = readLib(reader, start)
        self.assertEqual(lib, {"a": 1})


if __name__ == "__main__":
    unittest.main()

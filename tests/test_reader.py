import os, tempfile, unittest

from texmetrics import reader


class ReadUintTests(unittest.TestCase):
    """ Test big endian reads of unsigned integers """

    def test_byte_order(self):
        r = reader.bytesreader(b"\x12\x34\x56\x78\x9a")
        self.assertEqual(r.readuint(2), 0x1234)
        self.assertEqual(r.readuint(1), 0x56)
        self.assertEqual(r.tell(), 3)

    def test_full_word(self):
        r = reader.bytesreader(b"\xff\x00\x00\x01")
        self.assertEqual(r.readuint(4), 0xff000001)

    def test_zero_bytes(self):
        r = reader.bytesreader(b"\x12")
        self.assertEqual(r.readuint(0), 0)
        self.assertEqual(r.tell(), 0)

    def test_short_read_fills_zero(self):
        r = reader.bytesreader(b"\x12\x34")
        self.assertEqual(r.readuint(4), 0x12340000)
        self.assertEqual(r.tell(), 2)
        self.assertEqual(r.readuint(2), 0)

    def test_invalid_size(self):
        r = reader.bytesreader(b"\x00" * 8)
        with self.assertRaises(ValueError):
            r.readuint(5)
        with self.assertRaises(ValueError):
            r.readuint(-1)


class ReadWordsTests(unittest.TestCase):

    def test_words(self):
        r = reader.bytesreader(b"\x00\x00\x00\x01\x00\x10\x00\x00")
        self.assertEqual(r.readwords(2), [1, 0x00100000])

    def test_no_words(self):
        r = reader.bytesreader(b"\x00\x00\x00\x01")
        self.assertEqual(r.readwords(0), [])
        self.assertEqual(r.readwords(-3), [])
        self.assertEqual(r.tell(), 0)

    def test_results_are_not_shared(self):
        r = reader.bytesreader(b"\x00\x00\x00\x01\x00\x00\x00\x02")
        first = r.readwords(1)
        second = r.readwords(1)
        self.assertEqual(first, [1])
        self.assertEqual(second, [2])


class ReaderTests(unittest.TestCase):

    def test_seek_and_size(self):
        r = reader.bytesreader(b"abcdef")
        self.assertEqual(r.size(), 6)
        r.seek(4)
        self.assertEqual(r.read(2), b"ef")
        r.seek(-3, os.SEEK_END)
        self.assertEqual(r.tell(), 3)
        self.assertEqual(r.size(), 6)

    def test_readstring(self):
        r = reader.bytesreader(b"\x05TeXXYgarbage")
        self.assertEqual(r.readstring(8), ("TeXXY", False))
        self.assertEqual(r.tell(), 8)

    def test_readstring_clamps_length(self):
        r = reader.bytesreader(b"\x09abcd")
        self.assertEqual(r.readstring(4), ("abc", True))

    def test_file_reader(self):
        with tempfile.TemporaryDirectory() as dir:
            filename = os.path.join(dir, "data.bin")
            with open(filename, "wb") as f:
                f.write(b"\x01\x02\x03")
            with reader.reader(filename) as r:
                self.assertEqual(r.size(), 3)
                self.assertEqual(r.readuint(2), 0x0102)
                self.assertEqual(r.tell(), 2)
                self.assertEqual(r.readuint(2), 0x0300)

"""Builders for synthetic TFM data used by the tests."""

import io, struct

from texmetrics import config


def charinfo(width_index=0, height_index=0, depth_index=0, italic_index=0, tag=0, remainder=0):
    return (width_index << 24 | height_index << 20 | depth_index << 16 |
            italic_index << 10 | tag << 8 | remainder)


def bcpl(s, size):
    data = bytes([len(s)]) + s.encode("ascii")
    return data + b"\0" * (size - len(data))


def maketfm(bc=0, ec=0, char_info=None, width=(0,), height=(0,), depth=(0,), italic=(0,),
            checksum=0, designsize=0x00A00000, header=b"", lf=None):
    """return the bytes of a TFM file without lig/kern, extensible and parameter tables

    header holds the header words following checksum and design size."""
    assert len(header) % 4 == 0
    if char_info is None:
        char_info = [0] * max(ec-bc+1, 0)
    lh = 2 + len(header) // 4
    if lf is None:
        lf = 6 + lh + len(char_info) + len(width) + len(height) + len(depth) + len(italic)
    words = [checksum, designsize] + list(char_info) + list(width) + list(height) + list(depth) + list(italic)
    return (struct.pack(">12H", lf, lh, bc, ec, len(width), len(height), len(depth), len(italic), 0, 0, 0, 0) +
            struct.pack(">2L", checksum, designsize) + header +
            struct.pack(">%dL" % (len(words) - 2), *words[2:]))


class locator:
    """file locator serving in-memory files"""

    def __init__(self, files):
        self.files = files
        self.requests = []

    def open(self, filename, formats):
        self.requests.append((filename, [format.name for format in formats]))
        if filename not in self.files:
            raise config.FileLocatorError("Could not locate the file '%s'." % filename)
        return io.BytesIO(self.files[filename])

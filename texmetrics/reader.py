# -*- encoding: utf-8 -*-
#
#
# Copyright (C) 2007-2011 Jörg Lehmann <joerg@pyx-project.org>
# Copyright (C) 2007-2011 André Wobst <wobsta@pyx-project.org>
#
# This file is part of texmetrics, derived from PyX (https://pyx-project.org/).
#
# texmetrics is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
#
# texmetrics is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with texmetrics; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301, USA


import io, os


class reader:

    def __init__(self, filename):
        self.file = open(filename, "rb")

    def tell(self):
        return self.file.tell()

    def seek(self, offset, whence=os.SEEK_SET):
        return self.file.seek(offset, whence)

    def size(self):
        pos = self.file.tell()
        size = self.file.seek(0, os.SEEK_END)
        self.file.seek(pos)
        return size

    def read(self, bytes):
        return self.file.read(bytes)

    def readuint(self, bytes=4):
        """read an unsigned big endian integer of up to four bytes

        When the data ends before all bytes could be read, the missing
        low-order bytes count as zero and the cursor only advances by the
        bytes actually read."""
        if not 0 <= bytes <= 4:
            raise ValueError("cannot read an unsigned integer of %d bytes" % bytes)
        data = self.file.read(bytes)
        result = 0
        for i, value in enumerate(data):
            result |= value << (8*(bytes-1-i))
        return result

    def readwords(self, count):
        """read count unsigned 4 byte words into a new list"""
        return [self.readuint(4) for i in range(count)]

    def readstring(self, bytes):
        """read a BCPL string (length byte plus data) stored in a field of the given size

        Returns the decoded string and a flag telling whether the length byte
        had to be clamped to the field size."""
        l = self.readuint(1)
        clamped = l > bytes-1
        if clamped:
            l = bytes-1
        return self.file.read(bytes-1)[:l].decode("ascii", errors="replace"), clamped

    def close(self):
        self.file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        return self.file.__exit__(exc_type, exc_value, traceback)


class bytesreader(reader):

    def __init__(self, b):
        self.file = io.BytesIO(b)

    def size(self):
        with self.file.getbuffer() as view:
            return view.nbytes

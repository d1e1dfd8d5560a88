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

"""TeX font metric (TFM) files

A TFM file starts with a preamble of twelve 16 bit counts (24 bytes),
followed by lh header words, the char_info table, and the width, height,
depth and italic correction tables. The ligature/kern, kern, extensible
and parameter tables at the end of the file are not decoded.
"""

import logging

from . import config, reader

logger = logging.getLogger("texmetrics")

_PREAMBLE_SIZE = 24


class TFMError(Exception): pass

class TFMTruncatedError(TFMError): pass


def fix2float(fix):
    """convert a fix_word (signed, 20 fractional bits) to a float

    Unsigned 32 bit words with the sign bit set are taken as two's
    complement values."""
    if fix >= 0x80000000:
        fix -= 0x100000000
    return fix / 1048576 # 1 << 20


# the char info word for each character consists of 4 bytes holding the following information:
# width index w, height index (h), depth index (d), italic correction index (it),
# tag (tg) and a remainder:
#
# byte 1   | byte 2    | byte 3    | byte 4
# xxxxxxxx | xxxx xxxx | xxxxxx xx | xxxxxxxx
# w        | h    d    | it     tg | remainder

class char_info_word:

    __slots__ = ("width_index", "height_index", "depth_index", "italic_index", "tag", "remainder")

    def __init__(self, word):
        self.width_index  = (word >> 24) & 0xFF
        self.height_index = (word >> 20) & 0x0F
        self.depth_index  = (word >> 16) & 0x0F
        self.italic_index = (word >> 10) & 0x3F
        self.tag          = (word >> 8) & 0x03
        self.remainder    = word & 0xFF

    def __eq__(self, other):
        return isinstance(other, char_info_word) and all(getattr(self, name) == getattr(other, name) for name in self.__slots__)

    def __repr__(self):
        return "char_info_word(%s)" % ", ".join("%s=%d" % (name, getattr(self, name)) for name in self.__slots__)


def _face(facechar):
    # decode ugly face specification into the Knuth suggested string
    if facechar >= 18:
        return None
    if facechar >= 12:
        face = "E"
        facechar -= 12
    elif facechar >= 6:
        face = "C"
        facechar -= 6
    else:
        face = "R"

    if facechar >= 4:
        face = "L" + face
        facechar -= 4
    elif facechar >= 2:
        face = "B" + face
        facechar -= 2
    else:
        face = "M" + face

    if facechar == 1:
        return face[0] + "I" + face[1]
    return face[0] + "R" + face[1]


class TFMfile:

    def __init__(self, file):
        # all offsets are measured from the start of the file
        file.seek(0)
        with reader.bytesreader(file.read()) as file:
            if file.size() < _PREAMBLE_SIZE:
                raise TFMTruncatedError("TFM data ends within the %d byte preamble" % _PREAMBLE_SIZE)

            #
            # read pre header
            #

            self.lf = file.readuint(2)  # length of the file in 4 byte words
            self.lh = file.readuint(2)  # length of the header in 4 byte words
            self.bc = file.readuint(2)  # smallest character code
            self.ec = file.readuint(2)  # largest character code
            self.nw = file.readuint(2)  # words in the width table
            self.nh = file.readuint(2)  # words in the height table
            self.nd = file.readuint(2)  # words in the depth table
            self.ni = file.readuint(2)  # words in the italic correction table
            # counts of the tables not decoded here
            self.nl = file.readuint(2)  # lig/kern table
            self.nk = file.readuint(2)  # kern table
            self.ne = file.readuint(2)  # extensible character table
            self.np = file.readuint(2)  # font parameters

            if not (self.bc-1 <= self.ec <= 255 and
                    self.lf == 6+self.lh+(self.ec-self.bc+1)+self.nw+self.nh+self.nd
                    +self.ni+self.nl+self.nk+self.ne+self.np):
                logger.warning("inconsistent TFM pre-header (lf=%d, lh=%d, bc=%d, ec=%d)" %
                               (self.lf, self.lh, self.bc, self.ec))

            #
            # read header
            #

            file.seek(_PREAMBLE_SIZE)
            self.checksum = file.readuint(4)
            self.designsize = file.readuint(4)
            if not 0 < self.designsize < 0x80000000:
                logger.warning("invalid TFM design size %d" % self.designsize)

            self.charcoding = self._readheaderstring(file, 2, 10)
            self.fontfamily = self._readheaderstring(file, 12, 5)
            if self.lh >= 18:
                file.seek(_PREAMBLE_SIZE + 17*4)
                self.sevenbitsafe = file.readuint(1)
                # ignore the following two bytes
                file.readuint(2)
                self.face = _face(file.readuint(1))
            else:
                self.sevenbitsafe = self.face = None

            if file.size() < _PREAMBLE_SIZE + 4*self.lh:
                raise TFMTruncatedError("TFM data ends within the header of %d words" % self.lh)
            # the header may be longer than the part read above
            file.seek(_PREAMBLE_SIZE + 4*self.lh)

            #
            # read char_info and the metric tables
            #

            self.char_info = tuple(char_info_word(word)
                                   for word in self._readtable(file, self.ec-self.bc+1, "char_info"))
            self.width = self._readtable(file, self.nw, "width")
            self.height = self._readtable(file, self.nh, "height")
            self.depth = self._readtable(file, self.nd, "depth")
            self.italic = self._readtable(file, self.ni, "italic correction")

    def _readheaderstring(self, file, word, words):
        if self.lh < word + words:
            return None
        file.seek(_PREAMBLE_SIZE + 4*word)
        s, clamped = file.readstring(4*words)
        if clamped:
            logger.warning("inconsistency in TFM file: string in header word %d too long" % word)
        return s

    def _readtable(self, file, count, name):
        count = max(count, 0)
        if file.size() - file.tell() < 4*count:
            raise TFMTruncatedError("TFM data ends within the %s table of %d words" % (name, count))
        return tuple(file.readwords(count))

    def __str__(self):
        return "TFM font %s designed at %g TeX pts" % (self.fontfamily or "(unnamed)", self.getdesignsize())

    def getdesignsize(self):
        """return the design size in TeX points"""
        return fix2float(self.designsize)

    def getcharinfo(self, charcode):
        """return the char_info_word of charcode or None when outside the character range"""
        if charcode < self.bc or charcode > self.ec:
            return None
        index = charcode - self.bc
        if index >= len(self.char_info):
            return None
        return self.char_info[index]

    def hascharacter(self, charcode):
        charinfo = self.getcharinfo(charcode)
        return charinfo is not None and charinfo.width_index != 0

    def _getmetric(self, table, index):
        if index >= len(table):
            return 0.0
        return fix2float(table[index]) * fix2float(self.designsize)

    # routines returning lengths as floats in TeX points; 0.0 is returned
    # for character codes outside of the font and for broken table indices

    def getwidth(self, charcode):
        charinfo = self.getcharinfo(charcode)
        if charinfo is None:
            return 0.0
        return self._getmetric(self.width, charinfo.width_index)

    def getheight(self, charcode):
        charinfo = self.getcharinfo(charcode)
        if charinfo is None:
            return 0.0
        return self._getmetric(self.height, charinfo.height_index)

    def getdepth(self, charcode):
        charinfo = self.getcharinfo(charcode)
        if charinfo is None:
            return 0.0
        return self._getmetric(self.depth, charinfo.depth_index)

    def getitalic(self, charcode):
        charinfo = self.getcharinfo(charcode)
        if charinfo is None:
            return 0.0
        return self._getmetric(self.italic, charinfo.italic_index)


def fromfile(file):
    """read a TFMfile from an open binary file"""
    return TFMfile(file)


def fromname(name, locator=None):
    """read the TFMfile of the font name located by locator

    Without a locator, the one configured by the texmetricsrc files is
    used. A config.FileLocatorError is raised when the font is not found."""
    if locator is None:
        locator = config.getlocator()
    with locator.open(name, [config.format.tfm]) as file:
        logger.info("loading TFM file for font '%s'" % name)
        return TFMfile(file)

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


from . import tfmfile

class TeXFontError(Exception): pass

# conversion factor from TeX points to PostScript points
_TEXPT_TO_PT = 72/72.27

class TeXfont:

    def __init__(self, name, c=0, q=None, d=None, locator=None):
        self.name = name
        self.TFMfile = tfmfile.fromname(name, locator)
        if d is None:
            d = self.TFMfile.designsize
        if q is None:
            q = d
        self.q = q                  # desired size of font (fix_word) in TeX points
        self.d = d                  # design size of font (fix_word) in TeX points

        # We only check for equality of font checksums if none of them
        # is zero. The case c == 0 happend in some VF files and
        # according to the VFtoVP documentation, paragraph 40, a check
        # is only performed if TFMfile.checksum > 0.
        if self.TFMfile.checksum != c and self.TFMfile.checksum > 0 and c > 0:
            raise TeXFontError("check sums do not agree: %d vs. %d" %
                               (self.TFMfile.checksum, c))

        # dvi files round design sizes, so allow for a small deviation
        if abs(self.TFMfile.designsize - d) > 4:
            raise TeXFontError("design sizes do not agree: %d vs. %d" % (self.TFMfile.designsize, d))
        if d <= 0 or d > 134217728:
            raise TeXFontError("font '%s' not loaded: bad design size" % self.name)

    def __str__(self):
        return "font %s designed at %g TeX pts used at %g TeX pts" % (self.name,
                                                                      tfmfile.fix2float(self.d),
                                                                      tfmfile.fix2float(self.q))

    def getsize_pt(self):
        """ return size of font in (PS) points """
        return _TEXPT_TO_PT * tfmfile.fix2float(self.q)

    def _convert_tfm_to_pt(self, length):
        # length is in TeX points at the design size
        designsize = self.TFMfile.getdesignsize()
        if not designsize:
            return 0.0
        return _TEXPT_TO_PT * length * tfmfile.fix2float(self.q) / designsize

    # routines returning lengths as floats in PostScript points

    def getwidth_pt(self, charcode):
        return self._convert_tfm_to_pt(self.TFMfile.getwidth(charcode))

    def getheight_pt(self, charcode):
        return self._convert_tfm_to_pt(self.TFMfile.getheight(charcode))

    def getdepth_pt(self, charcode):
        return self._convert_tfm_to_pt(self.TFMfile.getdepth(charcode))

    def getitalic_pt(self, charcode):
        return self._convert_tfm_to_pt(self.TFMfile.getitalic(charcode))

    def measure_pt(self, charcodes):
        """return width, height and depth of a sequence of charcodes set next to each other"""
        charcodes = list(charcodes)
        width_pt = sum([self.getwidth_pt(charcode) for charcode in charcodes], 0.0)
        height_pt = max([self.getheight_pt(charcode) for charcode in charcodes], default=0.0)
        depth_pt = max([self.getdepth_pt(charcode) for charcode in charcodes], default=0.0)
        return width_pt, height_pt, depth_pt

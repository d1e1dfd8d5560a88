# -*- encoding: utf-8 -*-
#
#
# Copyright (C) 2002-2005 Jörg Lehmann <joerg@pyx-project.org>
# Copyright (C) 2002-2006 André Wobst <wobsta@pyx-project.org>
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

"""TeX font metric reader

texmetrics decodes the width, height, depth and italic correction of the
characters of a font from its TeX font metric (TFM) file. Files are either
passed in directly or searched by name with a configurable file locator.
"""

from . import version
__version__ = version.version

__all__ = ["config", "reader", "tfmfile", "texfont"]

import importlib

# automatically import main modules into texmetrics namespace
for module in __all__:
    importlib.import_module('.' + module, package='texmetrics')

def texmetricsinfo():
    """Make texmetrics a little verbose (for information or debugging)

    This function enables info level on the ``"texmetrics"`` logger. It also
    adds some general information about the Python interpreter, the
    texmetrics installation, and the file locator configuration to the logger.

    """
    import logging, os, sys
    from . import config
    logging.lastResort.setLevel(logging.INFO)
    logger = logging.getLogger("texmetrics")
    logger.setLevel(logging.INFO)
    logger.info("Platform name is: {}".format(os.name))
    logger.info("Python executable: {}".format(sys.executable))
    logger.info("Python version: %s", sys.version)
    logger.info("texmetrics comes from: %s", __file__)
    logger.info("texmetrics version: %s", __version__)
    logger.info("texmetricsrc %s %s %s", "is" if os.path.isfile(config.user_texmetricsrc) else "would be", "loaded from:", config.user_texmetricsrc)
    logger.info("file locators in use: %s", ", ".join(method.__class__.__name__ for method in config.getlocator().methods))

__all__.append("__version__")
__all__.append("texmetricsinfo")

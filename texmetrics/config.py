# -*- encoding: utf-8 -*-
#
#
# Copyright (C) 2003-2011 Jörg Lehmann <joerg@pyx-project.org>
# Copyright (C) 2003-2011 André Wobst <wobsta@pyx-project.org>
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

import configparser, io, logging, os, pkgutil, subprocess, shutil

logger = logging.getLogger("texmetrics")
logger_execute = logging.getLogger("texmetrics.execute")
logger_filelocator = logging.getLogger("texmetrics.filelocator")

builtinopen = open


class FileLocatorError(IOError): pass


# Locators implement an openers method which returns a list of functions
# by searching for a file according to a specific rule. Each of the functions
# returned can be called (multiple times) and return an open file. The
# opening of the file might fail with a IOError which indicates, that the
# file could not be found at the given location.
# formats is a list of kpsewhich formats to be used for searching.

class format:
    def __init__(self, name, extensions):
        self.name = name
        self.extensions = extensions

format.tfm = format("tfm", [".tfm"])

locator_classes = {}

def full_filenames(filename, formats):
    # If filename ends with one of the extensions, return the filename.
    for format in formats:
        for extension in format.extensions:
            if filename.endswith(extension):
                yield filename
                return

    # Otherwise return all possible combinations of filename and extensions.
    # When no extention is defined, the unchanged filename is included.
    for format in formats:
        if format.extensions:
            for extension in format.extensions:
                yield filename+extension
        else:
            yield filename


class local:
    """locates files in the current directory"""

    def openers(self, filename, formats):
        return [lambda full_filename=full_filename: builtinopen(full_filename, "rb")
                for full_filename in full_filenames(filename, formats)]

locator_classes["local"] = local


class recursivedir:
    """locates files by searching recursively in a list of directories"""

    def __init__(self, dirs=None):
        if dirs is None:
            dirs = getlist("filelocator", "recursivedir", [])
        self.dirs = list(dirs)
        self.path_cache = {}

    def openers(self, filename, formats):
        filenames = list(full_filenames(filename, formats))
        for filename in filenames:
            if filename in self.path_cache:
                return [lambda full_filename=self.path_cache[filename]: builtinopen(full_filename, "rb")]
        found = None
        while self.dirs:
            dir = self.dirs.pop(0)
            try:
                items = sorted(os.listdir(dir))
            except OSError:
                logger_filelocator.warning("skipping unreadable directory '%s'" % dir)
                continue
            for item in items:
                full_item = os.path.join(dir, item)
                if os.path.isdir(full_item):
                    self.dirs.insert(0, full_item)
                else:
                    self.path_cache.setdefault(item, full_item)
                    if found is None and item in filenames:
                        found = item
            if found:
                return [lambda full_filename=self.path_cache[found]: builtinopen(full_filename, "rb")]
        return []

locator_classes["recursivedir"] = recursivedir


class ls_R:
    """locates files by searching a list of ls-R files"""

    def __init__(self, lsRs=None):
        if lsRs is None:
            lsRs = getlist("filelocator", "ls-R", [])
        self.lsRs = list(lsRs)
        self.path_cache = {}

    def openers(self, filename, formats):
        if not self.path_cache:
            for lsr in self.lsRs:
                base_dir = os.path.dirname(lsr)
                dir = base_dir
                first = True
                with builtinopen(lsr, "r", encoding="ascii", errors="surrogateescape") as lsrfile:
                    for line in lsrfile:
                        line = line.rstrip()
                        if first and line.startswith("%"):
                            continue
                        first = False
                        if line.endswith(":"):
                            dir = os.path.join(base_dir, line[:-1])
                        elif line and line not in self.path_cache:
                            self.path_cache[line] = os.path.join(dir, line)
        for filename in full_filenames(filename, formats):
            if filename in self.path_cache:
                return [lambda full_filename=self.path_cache[filename]: builtinopen(full_filename, "rb")]
        return []

locator_classes["ls-R"] = ls_R


def Popen(cmd, *args, **kwargs):
    if isinstance(cmd, str):
        raise ValueError("texmetrics.config.Popen must not be used with a string cmd")
    info = "texmetrics executes {} with args {}".format(cmd[0], cmd[1:])
    info += " located at {}".format(shutil.which(cmd[0]))
    logger_execute.info(info)
    return subprocess.Popen(cmd, *args, **kwargs)


def fix_cygwin(full_filename):
    # detect cygwin result on windows python
    if os.name == "nt" and full_filename.startswith("/"):
        with Popen(['cygpath', '-w', full_filename], stdout=subprocess.PIPE).stdout as output:
            return io.TextIOWrapper(output, encoding="ascii", errors="surrogateescape").readline().rstrip()
    return full_filename


class kpsewhich:
    """locate files using the kpsewhich executable"""

    def __init__(self, executable=None):
        if executable is None:
            executable = get("filelocator", "kpsewhich", "kpsewhich")
        self.kpsewhich = executable

    def openers(self, filename, formats):
        full_filename = None
        for format in formats:
            try:
                with Popen([self.kpsewhich, '--format', format.name, filename], stdout=subprocess.PIPE) as process:
                    with io.TextIOWrapper(process.stdout, encoding="ascii", errors="surrogateescape") as text_output:
                        full_filename = text_output.readline().rstrip()
            except OSError:
                return []
            if full_filename:
                break
        else:
            return []

        full_filename = fix_cygwin(full_filename)

        def _opener():
            try:
                return builtinopen(full_filename, "rb")
            except IOError:
                logger.warning("'%s' should be available at '%s' according to kpsewhich, "
                            "but the file is not available at this location; "
                            "update your kpsewhich database" % (filename, full_filename))
        return [_opener]

locator_classes["kpsewhich"] = kpsewhich



class _marker: pass

config = configparser.ConfigParser()
config.read_string(pkgutil.get_data("texmetrics", "data/texmetricsrc").decode("utf-8"), source="(internal texmetricsrc)")
if os.name == "nt":
    user_texmetricsrc = os.path.join(os.environ.get('APPDATA', ''), "texmetricsrc")
else:
    user_texmetricsrc = os.path.expanduser("~/.texmetricsrc")
config.read(user_texmetricsrc, encoding="utf-8")
if os.environ.get('TEXMETRICSRC'):
    config.read(os.environ['TEXMETRICSRC'], encoding="utf-8")

def get(section, option, default=_marker):
    if default is _marker:
        return config.get(section, option)
    else:
        try:
            return config.get(section, option)
        except configparser.Error:
            return default

def getint(section, option, default=_marker):
    if default is _marker:
        return config.getint(section, option)
    else:
        try:
            return config.getint(section, option)
        except configparser.Error:
            return default

def getfloat(section, option, default=_marker):
    if default is _marker:
        return config.getfloat(section, option)
    else:
        try:
            return config.getfloat(section, option)
        except configparser.Error:
            return default

def getboolean(section, option, default=_marker):
    if default is _marker:
        return config.getboolean(section, option)
    else:
        try:
            return config.getboolean(section, option)
        except configparser.Error:
            return default

def getlist(section, option, default=_marker):
    if default is _marker:
        l = config.get(section, option).split()
    else:
        try:
            l = config.get(section, option).split()
        except configparser.Error:
            return default
    if space:
        l = [item.replace(space, " ") for item in l]
    return l


space = get("general", "space", "SPACE")


class filelocator:
    """searches files by trying a list of locator methods in turn"""

    def __init__(self, methods=None):
        if methods is None:
            methods = [locator_classes[method]()
                       for method in getlist("filelocator", "methods", ["local", "recursivedir", "ls-R", "kpsewhich"])]
        self.methods = methods
        self.opener_cache = {}

    def open(self, filename, formats):
        """returns an open binary file searched according the list of formats"""

        names = tuple([format.name for format in formats])
        if (filename, names) in self.opener_cache:
            return self.opener_cache[(filename, names)]()
        for method in self.methods:
            for opener in method.openers(filename, formats):
                try:
                    file = opener()
                except EnvironmentError:
                    file = None
                if file:
                    info = "texmetrics filelocator found {} by method {}".format(filename, method.__class__.__name__)
                    if hasattr(file, "name"):
                        info += " at {}".format(file.name)
                    logger_filelocator.info(info)
                    self.opener_cache[(filename, names)] = opener
                    return file
        logger_filelocator.info("texmetrics filelocator failed to find {} of formats {}".format(filename, names))
        raise FileLocatorError("Could not locate the file '%s'." % filename)


_locator = None

def getlocator():
    """returns the file locator configured by the texmetricsrc files"""
    global _locator
    if _locator is None:
        _locator = filelocator()
    return _locator

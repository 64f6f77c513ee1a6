#!/usr/bin/env python3

"""
Host I/O Functionality

Handles loading program binaries and the base system font for later writing
into RAM.  Programs are raw opcodes and data, with no header of any kind.
"""

__copyright__ = "Copyright (C) 2024 Chippy Authors"
__license__ = "GNU Affero General Public License v3.0"

from os import path
from .constants import FONT_SIZE
from .errors import ProgramLoadError


class Loader:
    def load_binary(self, filename):
        with open(filename, "rb") as f:
            return f.read()

    def load_program(self, filename):
        try:
            data = self.load_binary(filename)
        except OSError as err:
            raise ProgramLoadError("Cannot read program '{}': {}".format(filename, err.strerror)) from err

        if not data:
            raise ProgramLoadError("Program '{}' is empty".format(filename))

        return data

    def load_system_font(self, filename="font"):
        font = self.load_binary(path.join(path.abspath(path.dirname(__file__)), "systemfonts", filename))

        if len(font) != FONT_SIZE:
            raise ProgramLoadError("System font is {} bytes long, not {}".format(len(font), FONT_SIZE))

        return font

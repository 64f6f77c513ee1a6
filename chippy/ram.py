#!/usr/bin/env python3

"""
RAM Emulator

Supports reading and writing of blocks of memory or individual bytes, and
zeroing of memory blocks.

Every access is bounds-checked.  Reading or writing past the end of RAM is
reported as a fault rather than being silently wrapped, as no well-behaved
program should ever do it.

The bottom of RAM can be marked read-only.  This is used to keep the
interpreter's font glyphs intact, which programs may read but never change.
"""

__copyright__ = "Copyright (C) 2024 Chippy Authors"
__license__ = "GNU Affero General Public License v3.0"

from .errors import AddressOutOfRange, ProgramLoadError


class RAM:
    def __init__(self):
        self.resize(0)

    def resize(self, mem_size):
        self.mem = memoryview(bytearray(b"\x00" * mem_size))
        self.mem_top = mem_size - 1
        self.mem_size = mem_size
        self.protected_top = -1  # Nothing is read-only until asked

    def protect(self, size):
        # Lock the first 'size' bytes against instruction writes
        self.protected_top = size - 1

    def read(self, location):
        self.check_range(location)
        return self.mem[location]

    def read_block(self, location, size=1):
        self.check_range(location, size)
        return self.mem[location:location + size]

    def write(self, location, byte):
        self.check_writable(location)
        self.mem[location] = byte

    def write_block(self, location, block):
        block_size = len(block)
        self.check_writable(location, block_size)
        self.mem[location:location + block_size] = block

    def check_range(self, location, size=1):
        if location < 0 or location + size - 1 > self.mem_top:
            raise AddressOutOfRange(
                "Memory access out of range: 0x{:04x}-0x{:04x}".format(location, location + size - 1)
            )

    def check_writable(self, location, size=1):
        self.check_range(location, size)

        if location <= self.protected_top:
            raise AddressOutOfRange("Write into read-only memory at 0x{:04x}".format(location))

    def load_image(self, location, image):
        # Used once at startup, before the protected area is locked, so program data is checked separately
        if location < 0 or location > self.mem_top:
            raise ProgramLoadError("Load address 0x{:x} is outside memory".format(location))

        if location <= self.protected_top:
            raise ProgramLoadError("Load address 0x{:03x} overlaps reserved memory".format(location))

        if location + len(image) > self.mem_size:
            raise ProgramLoadError(
                "Program is too large: {} bytes do not fit in the {} bytes above 0x{:03x}".format(
                    len(image), self.mem_size - location, location
                )
            )

        self.mem[location:location + len(image)] = image

    def zero_block(self, offset, size):
        self.check_range(offset, size)

        for i in range(offset, offset + size):
            self.mem[i] = 0x00

    def clear(self):
        # We could reallocate the entire array instead
        self.zero_block(0, self.mem_size)

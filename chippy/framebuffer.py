#!/usr/bin/env python3

"""
Framebuffer Emulator

Pixels are written here, and are only drawn to the actual display (the host
rendering system) when the CPU asks for a refresh, once per frame.  Keeping
our own copy means rendering frameworks never need to be asked what is on the
screen, and it gives the presentation layer something to read between frames.

Programs for this system cannot write directly into video RAM.  Instead,
sprites are drawn to the screen using an XOR method, one bit per pixel, with
coordinates wrapping around at the screen edges.  Each pixel is held as one
byte of a RAM bank (0x00 = off, 0xFF = on).

Collisions (where a lit pixel was turned off by an XOR) are reported back to
the caller, which decides what to do with them.
"""

__copyright__ = "Copyright (C) 2024 Chippy Authors"
__license__ = "GNU Affero General Public License v3.0"

from .constants import APP_NAME, DISPLAY_WIDTH, DISPLAY_HEIGHT
from .errors import AddressOutOfRange
from .ram import RAM

RGBA_LIT = b"\xFF\xFF\xFF\xFF"
RGBA_UNLIT = b"\x00\x00\x00\x00"


class Framebuffer:
    def __init__(self, renderer, vid_width=DISPLAY_WIDTH, vid_height=DISPLAY_HEIGHT):
        self.renderer = renderer
        self.vram = RAM()
        self.resize_vid(vid_width, vid_height)
        self.report_perf()

    def resize_vid(self, vid_width, vid_height):
        self.vid_width = vid_width
        self.vid_height = vid_height
        self.vid_size = self.vid_width * self.vid_height
        self.vram.resize(self.vid_size)  # Fresh RAM is blank
        self.renderer.set_resolution(vid_width, vid_height)  # Update screen resolution

    def clear(self):
        self.vram.clear()

        for y in range(self.vid_height):
            for x in range(self.vid_width):
                self.renderer.set_pixel(x, y, False)

    def get_vid_size(self):
        return self.vid_width, self.vid_height

    def get_pixel(self, x, y):
        if not (0 <= x < self.vid_width and 0 <= y < self.vid_height):
            raise AddressOutOfRange("Pixel ({}, {}) is outside the {}x{} display".format(
                x, y, self.vid_width, self.vid_height
            ))

        return self.vram.read(y * self.vid_width + x) != 0

    def xor_pixel(self, x, y):
        # Returns True if a lit pixel was switched off
        x %= self.vid_width
        y %= self.vid_height
        vram_loc = y * self.vid_width + x
        pixel = self.vram.read(vram_loc)
        new_pixel = pixel ^ 0xFF
        self.vram.write(vram_loc, new_pixel)
        self.renderer.set_pixel(x, y, new_pixel != 0)
        return pixel != 0

    def draw_sprite(self, x_pos, y_pos, sprite_rows):
        # Each row is one byte, most-significant bit on the left.  Drawing never stops early on collision.
        collided = False

        for row_num, row in enumerate(sprite_rows):
            for col_num in range(8):
                if row & (0x80 >> col_num) and self.xor_pixel(x_pos + col_num, y_pos + row_num):
                    collided = True

        return collided

    def lit_count(self):
        return sum(1 for pixel in self.vram.mem if pixel)

    def to_rgba(self):
        # 4 bytes per logical pixel, row by row, for hosts that blit an RGBA texture
        return b"".join(RGBA_LIT if pixel else RGBA_UNLIT for pixel in self.vram.mem)

    def refresh_display(self):
        self.renderer.refresh_display()

    def report_perf(self, fps=0, ops=0):
        title = "{} - {} FPS, {} OPS".format(APP_NAME, fps, ops)
        self.renderer.set_title(title)

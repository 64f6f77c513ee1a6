#!/usr/bin/env python3

"""
PyGame Renderer Plugin

Used by a Framebuffer object to draw the screen.  This draws graphics onto an
SDL window surface via PyGame.  The surface is allocated at the emulated
resolution (64x32), and then the contents are stretched (using 'Nearest
Neighbour' scaling) to fit the window itself.  This means we don't have to
draw the same pixel multiple times.

Lit pixels are drawn in a pale grey on a dark background.  Only pixels that
changed are written into the RGB buffer, and the window is only updated on a
refresh, which the CPU requests once per frame.
"""

__copyright__ = "Copyright (C) 2024 Chippy Authors"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .r_null import Renderer as RendererBase
from ..constants import APP_NAME

COLOUR_OFF = (0x22, 0x22, 0x22)
COLOUR_ON = (0xDD, 0xDD, 0xDD)


class Renderer(RendererBase):
    def __init__(self, scale=None, **kwargs):
        if scale is None:
            scale = 640  # Default window width if not supplied, or set to default

        pygame.display.init()
        self.set_title(APP_NAME)
        self.rgb_buffer = None
        self.content_changed = False
        self.scaled_size = (scale, scale // 2)
        self.display_surface = pygame.display.set_mode(self.scaled_size)
        self.rgb_map = [memoryview(bytearray(COLOUR_OFF)), memoryview(bytearray(COLOUR_ON))]
        super().__init__(scale)

    def set_resolution(self, width, height):
        total_pixels = width * height
        self.rgb_buffer = memoryview(bytearray(COLOUR_OFF * total_pixels))  # 24-bit

        # Call superclass method so display size is known on the next refresh
        super().set_resolution(width, height)
        self.content_changed = True

    def set_pixel(self, x, y, lit):
        # Update RGB buffer in-place to minimise allocations and PyGame calls
        rgb_location = (y * self.width + x) * 3
        self.rgb_buffer[rgb_location:rgb_location + 3] = self.rgb_map[int(bool(lit))]
        self.content_changed = True
        super().set_pixel(x, y, lit)

    def refresh_display(self):
        if self.content_changed and self.width:
            # Blit the bytearray straight to the surface.  Much faster than very frequent PixelArray updates
            render_surface = pygame.image.frombuffer(self.rgb_buffer, (self.width, self.height), "RGB")
            scaled_win = pygame.transform.scale(render_surface, self.scaled_size)
            self.display_surface.blit(scaled_win, (0, 0))
            pygame.display.flip()
            self.content_changed = False

        super().refresh_display()

    def set_title(self, title):
        pygame.display.set_caption(title)
        self.title = title

    def shutdown(self):
        # PyGame can segfault if display.quit is called via __del__
        pygame.display.quit()
        super().shutdown()

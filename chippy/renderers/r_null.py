#!/usr/bin/env python3

"""
Null Renderer Plugin

This serves as a base class for other rendering plugins.

This module can be used on its own as a Renderer plugin if you only want to see
debug output, or want to drive the machine headlessly.  It keeps count of the
pixel updates and refreshes it receives, which is enough for tests to see that
the Framebuffer is talking to it.
"""

__copyright__ = "Copyright (C) 2024 Chippy Authors"
__license__ = "GNU Affero General Public License v3.0"


class Renderer:
    def __init__(self, scale=None, **kwargs):  # pylint: disable=unused-argument
        self.scale = 1 if scale is None else scale
        self.pixel_updates = 0
        self.refreshes = 0
        self.title = ""
        self.set_resolution(0, 0)

    def set_resolution(self, width, height):
        self.width = width
        self.height = height

    def set_pixel(self, x, y, lit):  # pylint: disable=unused-argument
        self.pixel_updates += 1

    def refresh_display(self):
        self.refreshes += 1

    def set_title(self, title):
        self.title = title

    def shutdown(self):
        pass

#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2024 Chippy Authors"
__license__ = "GNU Affero General Public License v3.0"

# App identification
APP_NAME = "Chippy"
APP_VERSION = "0.3.0"
APP_COPYRIGHT = "Copyright (C) 2024 Chippy Authors, licensed under GNU Affero General Public License v3.0"
APP_INTRO = "{} V{} -- ".format(APP_NAME, APP_VERSION)

# Memory layout
MEM_SIZE = 0x1000      # 4K of addressable RAM
FONT_LOCATION = 0x000  # Interpreter-resident glyphs live at the very bottom of RAM
FONT_SIZE = 80         # 16 glyphs of 5 bytes each
GLYPH_SIZE = 5
DEFAULT_START = 0x200  # Programs are normally loaded here

# CPU
NUM_REGISTERS = 0x10
STACK_DEPTH = 48
INDEX_BITMASK = 0xFFFF  # I is a 16-bit register
DEFAULT_CYCLES_PER_FRAME = 20

# Display
DISPLAY_WIDTH = 64
DISPLAY_HEIGHT = 32
DISPLAY_FREQ = 60.0  # 60Hz emulated display refresh, which also paces the timers

# Default mappings for keys 0-F.  These are PyGame keyscan codes, and also the lowercase ASCII characters, for
# X, 1, 2, 3, Q, W, E, A, S, D, Z, C, 4, R, F, V on a QWERTY keyboard
DEFAULT_KEYMAP = "120,49,50,51,113,119,101,97,115,100,122,99,52,114,102,118"

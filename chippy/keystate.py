#!/usr/bin/env python3

"""
Key-Input State

Holds the hex key (if any) the interpreter currently considers to be pressed.
It is never pushed to from outside: an instruction that needs it calls
'refresh' first, which takes a fresh sample from the Inputs plugin.  Only one
key is tracked at a time.
"""

__copyright__ = "Copyright (C) 2024 Chippy Authors"
__license__ = "GNU Affero General Public License v3.0"


class KeyState:
    def __init__(self, inputs):
        self.inputs = inputs
        self.key = 0
        self.asserted = False

    def refresh(self):
        key = self.inputs.sample_key()
        self.asserted = key is not None

        # The last key seen is kept when nothing is held, so traces still show it
        if self.asserted:
            self.key = key

        return self.asserted

    def is_pressed(self, key):
        return self.asserted and self.key == key

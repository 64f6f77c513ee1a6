#!/usr/bin/env python3

"""
Null Input Plugin

Serves as a base class for other Input plugins.  Can be used on its own if zero
input functionality is required.  Keys can still be held programmatically by
setting entries in 'key_down', which is how headless hosts and tests drive the
keypad.
"""

__copyright__ = "Copyright (C) 2024 Chippy Authors"
__license__ = "GNU Affero General Public License v3.0"


class InputsError(Exception):
    pass


def parse_keymap(keymap):
    # Map a comma-separated list of 16 host key codes onto hex keys 0-F
    keymap_dict = {}
    keymap_split = keymap.split(",")

    if len(keymap_split) != 0x10:
        raise InputsError("Incorrect number of keys defined -- 16 required.  Use commas to split numbers")

    for key_num, key_defined in enumerate(keymap_split):
        try:
            key_defined_ord = int(key_defined)
        except ValueError:
            raise InputsError("Defined keys are not all integer values") from None

        if key_defined_ord in keymap_dict:
            raise InputsError("Duplicate keys defined")

        keymap_dict[key_defined_ord] = key_num

    return keymap_dict


class Inputs:
    def __init__(self, keymap, renderer):
        self.keymap_dict = parse_keymap(keymap)
        self.renderer = renderer
        self.key_down = [False] * 0x10

    def process_messages(self):
        return False  # Don't exit the program

    def sample_key(self):
        # Lowest held hex key wins if several are down
        for key_num, down in enumerate(self.key_down):
            if down:
                return key_num

        return None

    def host_key_down(self, host_key):
        hex_key = self.keymap_dict.get(host_key)

        if hex_key is not None:
            self.key_down[hex_key] = True

    def host_key_up(self, host_key):
        hex_key = self.keymap_dict.get(host_key)

        if hex_key is not None:
            self.key_down[hex_key] = False

    def shutdown(self):
        pass

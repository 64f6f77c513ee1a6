#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2024 Chippy Authors"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from chippy.constants import DEFAULT_KEYMAP
from chippy.inputs.i_null import Inputs, InputsError, parse_keymap
from chippy.keystate import KeyState
from chippy.renderers.r_null import Renderer


class TestKeyState(unittest.TestCase):
    def setUp(self):
        self.inputs = Inputs(DEFAULT_KEYMAP, Renderer())
        self.keystate = KeyState(self.inputs)

    def test_keystate_nothing_held(self):
        self.assertFalse(self.keystate.refresh())
        self.assertFalse(self.keystate.asserted)
        self.assertFalse(self.keystate.is_pressed(0x0))

    def test_keystate_refresh(self):
        self.inputs.key_down[0xA] = True
        self.assertTrue(self.keystate.refresh())
        self.assertEqual(0xA, self.keystate.key)
        self.assertTrue(self.keystate.is_pressed(0xA))
        self.assertFalse(self.keystate.is_pressed(0xB))

    def test_keystate_only_changes_on_refresh(self):
        self.inputs.key_down[0x3] = True
        self.keystate.refresh()
        self.inputs.key_down[0x3] = False
        self.assertTrue(self.keystate.is_pressed(0x3))
        self.keystate.refresh()
        self.assertFalse(self.keystate.is_pressed(0x3))

    def test_keystate_lowest_key_wins(self):
        self.inputs.key_down[0xC] = True
        self.inputs.key_down[0x5] = True
        self.keystate.refresh()
        self.assertEqual(0x5, self.keystate.key)

    def test_keystate_host_keys(self):
        self.inputs.host_key_down(ord("x"))
        self.assertEqual(0x0, self.inputs.sample_key())
        self.inputs.host_key_up(ord("x"))
        self.inputs.host_key_down(ord("v"))
        self.assertEqual(0xF, self.inputs.sample_key())
        self.inputs.host_key_down(ord("p"))  # Not mapped
        self.assertEqual(0xF, self.inputs.sample_key())


class TestKeymap(unittest.TestCase):
    def test_keymap_default(self):
        keymap_dict = parse_keymap(DEFAULT_KEYMAP)
        self.assertEqual(0x10, len(keymap_dict))
        self.assertEqual(0x1, keymap_dict[ord("1")])
        self.assertEqual(0xC, keymap_dict[ord("4")])
        self.assertEqual(0xD, keymap_dict[ord("r")])

    def test_keymap_invalid(self):
        self.assertRaises(InputsError, parse_keymap, "1,2,3")
        self.assertRaises(InputsError, parse_keymap, ",".join(["1"] * 16))
        self.assertRaises(InputsError, parse_keymap, ",".join(["a"] * 16))

#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2024 Chippy Authors"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from chippy8 import parse_args


class TestArgs(unittest.TestCase):
    def test_args_defaults(self):
        args = vars(parse_args(["game.ch8"]))
        self.assertEqual("game.ch8", args["filename"])
        self.assertEqual(0x200, args["start"])
        self.assertEqual(20, args["cycles"])
        self.assertEqual("pygame", args["renderer"])
        self.assertIsNone(args["timer_reload"])
        self.assertFalse(args["debug"])

    def test_args_start_address(self):
        self.assertEqual(0x600, parse_args(["game.ch8", "--start", "0x600"]).start)
        self.assertEqual(768, parse_args(["game.ch8", "-s", "768"]).start)

    def test_args_invalid(self):
        with self.assertRaises(SystemExit):
            parse_args(["game.ch8", "--start", "zzz"])

        with self.assertRaises(SystemExit):
            parse_args(["game.ch8", "--renderer", "curses"])

    def test_args_timer_reload(self):
        self.assertEqual(60, parse_args(["game.ch8", "--timer_reload", "60"]).timer_reload)
        self.assertEqual(0, parse_args(["game.ch8", "-t", "0"]).timer_reload)
        self.assertEqual(255, parse_args(["game.ch8", "-t", "255"]).timer_reload)

        # Out of range values are rejected rather than cut down to 8 bits
        for value in "256", "300", "-1", "sixty":
            with self.assertRaises(SystemExit):
                parse_args(["game.ch8", "--timer_reload", value])

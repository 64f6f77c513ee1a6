#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2024 Chippy Authors"
__license__ = "GNU Affero General Public License v3.0"

import os
import tempfile
import unittest
from hashlib import sha256
from chippy.errors import ProgramLoadError
from chippy.hostio import Loader


class TestLoader(unittest.TestCase):
    def setUp(self):
        self.loader = Loader()

    def test_loader_system_font(self):
        # Test the loader works, and verify the system font is okay
        font = self.loader.load_system_font()
        self.assertEqual(80, len(font))
        self.assertEqual(b"\xF0\x90\x90\x90\xF0", font[:5])     # 0
        self.assertEqual(b"\xF0\x80\xF0\x80\x80", font[75:])    # F
        self.assertEqual(
            "7badf921f6c9315be982d08307b796c0e8f6841141afb475aa2ee5a5e074cdec",
            sha256(font).hexdigest()
        )

    def test_loader_load_file_missing(self):
        self.assertRaises(FileNotFoundError, self.loader.load_binary, "NoFile.ch8")
        self.assertRaises(ProgramLoadError, self.loader.load_program, "NoFile.ch8")

    def test_loader_load_program(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            filename = os.path.join(tmp_dir, "prog.ch8")

            with open(filename, "wb") as f:
                f.write(b"\x6A\x02\x7A\x05")

            self.assertEqual(b"\x6A\x02\x7A\x05", self.loader.load_program(filename))

            with open(filename, "wb") as f:
                pass

            self.assertRaises(ProgramLoadError, self.loader.load_program, filename)

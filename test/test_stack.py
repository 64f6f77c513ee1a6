#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2024 Chippy Authors"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from chippy.errors import StackError, StackOverflow, StackUnderflow
from chippy.stack import Stack


class TestStack(unittest.TestCase):
    def setUp(self):
        self.stack = Stack(3)

    def _populate_stack(self):
        self.stack.push(0x0)
        self.stack.push(0x1)
        self.stack.push(0xFFF)

    def test_stack_push_pop(self):
        self._populate_stack()
        self.assertEqual(0xFFF, self.stack.pop())
        self.assertEqual(0x1, self.stack.pop())
        self.assertEqual(0x0, self.stack.pop())

    def test_stack_pointer(self):
        self.assertEqual(0, self.stack.sp)
        self.stack.push(0x202)
        self.assertEqual(1, self.stack.sp)
        self.stack.pop()
        self.assertEqual(0, self.stack.sp)

    def test_stack_overflow(self):
        self._populate_stack()
        self.assertRaises(StackOverflow, self.stack.push, 0x1)
        self.assertEqual([0x0, 0x1, 0xFFF], self.stack.get_items())
        self.assertEqual(3, self.stack.sp)

    def test_stack_underflow(self):
        self.assertRaises(StackUnderflow, self.stack.pop)
        self.assertEqual(0, self.stack.sp)

    def test_stack_errors_share_base(self):
        self.assertRaises(StackError, self.stack.pop)

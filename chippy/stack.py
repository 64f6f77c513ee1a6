#!/usr/bin/env python3

"""
Stack Emulator

The call stack does not live in system RAM.  There is no specified location
for it, and programs cannot reach it except through CALL and RET, so a wrapped
list emulates it fully.

The stack pointer (SP) is simply the number of items held, and can never go
below 0 or above the configured depth.  Failed pushes and pops leave the stack
untouched.
"""

__copyright__ = "Copyright (C) 2024 Chippy Authors"
__license__ = "GNU Affero General Public License v3.0"

from .errors import StackOverflow, StackUnderflow


class Stack:
    def __init__(self, size):
        self.items = []
        self.size = size

    @property
    def sp(self):
        return len(self.items)

    def push(self, item):
        # Fetching the stack size with 'len' should be immediate, so no slow loop
        if len(self.items) >= self.size:
            raise StackOverflow("Stack overflow: all {} levels in use".format(self.size))

        self.items.append(item)

    def pop(self):
        try:
            return self.items.pop()
        except IndexError:
            raise StackUnderflow("Stack underflow: return with no matching call") from None

    def get_items(self):
        # For debugging
        return self.items

#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from chip8emu.stack import Stack, StackError, StackOverflowError, StackUnderflowError


class TestStack(unittest.TestCase):
    def setUp(self):
        self.stack = Stack()

    def _populate_stack(self):
        self.stack.push(0x0)
        self.stack.push(0x1)
        self.stack.push(0xFFF)

    def test_stack_push_pop(self):
        self._populate_stack()
        self.assertEqual(3, self.stack.sp)
        self.assertEqual(0xFFF, self.stack.pop())
        self.assertEqual(0x1, self.stack.pop())
        self.assertEqual(0x0, self.stack.pop())
        self.assertEqual(0, self.stack.sp)

    def test_stack_slots(self):
        # Return addresses go in at stack[SP], before SP moves on
        self._populate_stack()
        self.assertEqual([0x0, 0x1, 0xFFF], self.stack.items[:3])
        self.assertEqual([0x0, 0x1, 0xFFF], self.stack.get_items())

    def test_stack_overflow(self):
        for addr in range(15):
            self.stack.push(addr)

        self.assertRaises(StackOverflowError, self.stack.push, 0x1)
        self.assertEqual(15, self.stack.sp)
        self.assertEqual(14, self.stack.pop())

    def test_stack_underflow(self):
        self.assertRaises(StackUnderflowError, self.stack.pop)
        self.assertEqual(0, self.stack.sp)

    def test_stack_errors_share_base(self):
        self.assertTrue(issubclass(StackOverflowError, StackError))
        self.assertTrue(issubclass(StackUnderflowError, StackError))

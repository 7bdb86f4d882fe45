#!/usr/bin/env python3

"""
Stack Emulator

The call stack is not part of system RAM.  There is no specified location for
it, and programs have no way of reading it, so it is kept as a fixed array of
return addresses with an explicit stack pointer (SP).

CALL stores the return address at stack[SP] and then increments SP.  RET
decrements SP and then reads stack[SP].  SP starts at 0, so an empty stack is
SP == 0.  SP is only allowed to reach 15: a push that would take it to 16 is
an overflow, and is refused before anything is changed.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import STACK_SIZE


class StackError(Exception):
    pass


class StackOverflowError(StackError):
    pass


class StackUnderflowError(StackError):
    pass


class Stack:
    def __init__(self, size=STACK_SIZE):
        self.items = [0] * size
        self.size = size
        self.sp = 0

    def push(self, addr):
        if self.sp + 1 >= self.size:
            raise StackOverflowError("Stack overflow")

        self.items[self.sp] = addr & 0xFFF
        self.sp += 1

    def pop(self):
        if self.sp == 0:
            raise StackUnderflowError("Stack underflow")

        self.sp -= 1
        return self.items[self.sp]

    def get_items(self):
        # For debugging.  Only the live part of the stack, oldest first.
        return self.items[:self.sp]

#!/usr/bin/env python3

"""
Keypad Emulator

Holds the up/down state of the 16 hexadecimal keys.  Host input plugins know
nothing about this; they only produce key down/up events, which the
interpreter feeds in here once per frame.

Fx0A (wait for key) registers the destination V register with begin_wait().
The wait is satisfied by the next key *press* only.  Releasing a key never
satisfies it, and only one wait can be outstanding at a time.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import NUM_KEYS


class KeypadError(Exception):
    pass


class Keypad:
    def __init__(self):
        self.keys = [False] * NUM_KEYS
        self.wait_register = None

    def press(self, key):
        self.keys[key & 0xF] = True

    def release(self, key):
        self.keys[key & 0xF] = False

    def is_pressed(self, key):
        return self.keys[key & 0xF]

    def begin_wait(self, register):
        if self.wait_register is not None:
            raise KeypadError("Already waiting for a keypress into V{:01x}".format(self.wait_register))

        self.wait_register = register & 0xF

    def is_waiting(self):
        return self.wait_register is not None

    def resolve_wait(self):
        # Returns the register the pressed key should be written to, and ends the wait
        register = self.wait_register
        self.wait_register = None
        return register

#!/usr/bin/env python3

"""
Host Events

Input plugins translate whatever their host library reports into this small
set of events.  Keys are always hexadecimal keypad indices (0x0 - 0xF), never
host key codes.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from collections import namedtuple

QUIT = "quit"
KEY_DOWN = "key_down"
KEY_UP = "key_up"

Event = namedtuple("Event", ["kind", "key"])


def quit_event():
    return Event(QUIT, None)


def key_down(key):
    return Event(KEY_DOWN, key)


def key_up(key):
    return Event(KEY_UP, key)

#!/usr/bin/env python3

"""
Null Input Plugin

Serves as a base class for other Input plugins.  Can be used on its own if zero
input functionality is required, in which case the program can only be stopped
from outside (or by crashing).

The keymap is a comma-separated string of 16 host key codes, one for each of
the keypad's keys 0-F, in order.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from ..constants import NUM_KEYS


class InputsError(Exception):
    pass


def parse_keymap(keymap, force_lowercase=False):
    # Returns a dictionary of host key code -> keypad key
    codes = keymap.split(",")

    if len(codes) != NUM_KEYS:
        raise InputsError(
            "Keymap has {} keys, but {} are required.  Use commas to split numbers".format(len(codes), NUM_KEYS)
        )

    keymap_dict = {}

    for hex_key, code_str in enumerate(codes):
        try:
            code = int(code_str)
        except ValueError:
            raise InputsError("Keymap entry for key {:X} is not an integer: '{}'".format(hex_key, code_str)) from None

        if force_lowercase:
            # Terminals give characters rather than keyscan codes, so 'A' and 'a' are the same key
            code = ord(chr(code).lower())

        if code in keymap_dict:
            raise InputsError(
                "Keys {:X} and {:X} are both mapped to code {}".format(keymap_dict[code], hex_key, code)
            )

        keymap_dict[code] = hex_key

    return keymap_dict


class Inputs:
    def __init__(self, keymap, renderer, force_lowercase=False):
        self.keymap_dict = parse_keymap(keymap, force_lowercase)
        self.renderer = renderer

    def poll_events(self):
        return []  # Nothing pressed, and never quit

    def shutdown(self):
        pass

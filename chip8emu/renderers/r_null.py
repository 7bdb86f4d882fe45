#!/usr/bin/env python3

"""
Null Renderer Plugin

This serves as a base class for other rendering plugins.

This module can be used on its own as a Renderer plugin if you only want to see
debug output.  Without a renderer, performance data will also not be shown.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from ..constants import SCREEN_WIDTH, SCREEN_HEIGHT


class RendererError(Exception):
    pass


class Renderer:
    def __init__(self, scale=None, **kwargs):  # pylint: disable=unused-argument
        self.scale = 1 if scale is None else scale

        if self.scale < 1:
            raise RendererError("Scale must be at least 1")

        self.width = SCREEN_WIDTH
        self.height = SCREEN_HEIGHT
        self.frames_presented = 0

    def present(self, frame):  # pylint: disable=unused-argument
        self.frames_presented += 1

    def set_title(self, title):
        pass

    def shutdown(self):
        pass


def parse_colour(colour):
    # 6 hex digits, with no leading '#' or '0x'
    if len(colour) != 6:
        raise RendererError("Colours must all be 6 hex digits long.")

    try:
        value = int(colour, 16)
    except ValueError:
        raise RendererError("Invalid colour defined: {}".format(colour)) from None

    return value >> 16, (value >> 8) & 0xFF, value & 0xFF

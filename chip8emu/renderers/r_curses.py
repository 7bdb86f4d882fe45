#!/usr/bin/env python3

"""
Curses Renderer Plugin

Draws graphics in a standard Linux-style TTY Terminal, the Windows Command
Prompt, or PowerShell.  Each lit pixel is an inverted run of spaces, 'scale'
characters wide, to make up for terminal characters being taller than they are
wide.

The top line of the pad is kept for the title bar, which shows performance
figures.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import curses
import _curses
from .r_null import RendererError, Renderer as RendererBase


class Renderer(RendererBase):
    def __init__(self, scale=None, **kwargs):
        if scale is None:
            scale = 2  # Default horizontal stretch if not supplied, or set to default

        super().__init__(scale)
        self.pixel_char = " " * self.scale
        self.last_screen_height = -1
        self.last_screen_width = -1
        self.last_frame = None

        try:
            self.screen = curses.initscr()
        except _curses.error as e:
            raise RendererError("Unable to start Curses: {}".format(e)) from e

        curses.noecho()
        curses.cbreak()

        try:
            curses.curs_set(0)
        except _curses.error:
            pass  # Some terminals can't hide the cursor

        # We have to allow one extra character, presumably for the cursor, otherwise we can't write the furthest
        # bottom-right pixel.
        self.pad = curses.newpad(self.height + 2, self.width * self.scale + 1)

    def present(self, frame):
        pad = self.pad
        pixel_char = self.pixel_char
        scale = self.scale
        last_frame = self.last_frame

        # Only touch rows that changed since the last frame
        for y, row in enumerate(frame):
            if last_frame is not None and last_frame[y] == row:
                continue

            for x, pixel in enumerate(row):
                pad.addstr(y + 1, x * scale, pixel_char, curses.A_REVERSE if pixel else curses.A_NORMAL)

        self.last_frame = frame
        self._refresh_pad()
        super().present(frame)

    def _refresh_pad(self):
        screen_height, screen_width = self.screen.getmaxyx()  # This doesn't seem to ever change/work on Windows?!

        if screen_height != self.last_screen_height or screen_width != self.last_screen_width:
            # Screen resolution changed, redraw everything
            self.screen.clear()

            if hasattr(curses, "resizeterm"):
                # This doesn't work on Windows
                curses.resizeterm(screen_height, screen_width)

            self.screen.refresh()
            self.last_screen_height = screen_height
            self.last_screen_width = screen_width

        self.pad.refresh(0, 0, 0, 0, screen_height - 1, screen_width - 1)

    def set_title(self, title):
        pad_width = self.width * self.scale
        self.pad.addstr(0, 0, title[:pad_width].ljust(pad_width), curses.A_REVERSE)
        self._refresh_pad()

    def shutdown(self):
        curses.nocbreak()
        curses.echo()

        try:
            curses.curs_set(1)
        except _curses.error:
            pass

        curses.endwin()
        super().shutdown()

    # No Superclass for this Curses-specific method

    def get_curses_screen(self):
        return self.screen

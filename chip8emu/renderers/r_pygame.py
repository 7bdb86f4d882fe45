#!/usr/bin/env python3

"""
PyGame Renderer Plugin

Draws graphics onto an SDL window surface via PyGame.  The frame is first
written into a small offscreen RGB buffer at the native 64x32 resolution, and
then the contents are stretched (using 'Nearest Neighbour' translation) to fit
the window itself.  This means we don't have to draw the same pixel multiple
times.

This renderer owns the window, and PyGame's display subsystem, so it must be
the last plugin shut down.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .r_null import RendererError, Renderer as RendererBase, parse_colour
from ..constants import APP_NAME, DEFAULT_FG_COLOUR, DEFAULT_BG_COLOUR


class Renderer(RendererBase):
    def __init__(self, scale=None, fg_colour=None, bg_colour=None, **kwargs):
        if scale is None:
            scale = 10  # Default pixel size if not supplied, or set to default

        super().__init__(scale)

        # Split compound RGB values for faster byte-based lookup later
        self.rgb_map = [
            bytes(parse_colour(DEFAULT_BG_COLOUR if bg_colour is None else bg_colour)),
            bytes(parse_colour(DEFAULT_FG_COLOUR if fg_colour is None else fg_colour))
        ]

        self.scaled_size = (self.width * self.scale, self.height * self.scale)

        try:
            pygame.display.init()
            self.set_title(APP_NAME)
            self.display_surface = pygame.display.set_mode(self.scaled_size)
        except pygame.error as e:
            pygame.display.quit()
            raise RendererError("Unable to open a PyGame window: {}".format(e)) from e

        self.rgb_buffer = memoryview(bytearray(self.width * self.height * 3))  # 24-bit

        # Fill the offscreen RGB buffer with the background colour, and show it straight away
        self.present(((False,) * self.width,) * self.height)

    def present(self, frame):
        # Update RGB buffer in-place to minimise allocations and PyGame calls
        rgb_buffer = self.rgb_buffer
        rgb_map = self.rgb_map
        rgb_location = 0

        for row in frame:
            for pixel in row:
                rgb_buffer[rgb_location:rgb_location + 3] = rgb_map[pixel]
                rgb_location += 3

        # Blit the bytearray straight to the surface, which is much faster than per-pixel updates
        render_surface = pygame.image.frombuffer(self.rgb_buffer, (self.width, self.height), "RGB")
        scaled_win = pygame.transform.scale(render_surface, self.scaled_size)
        self.display_surface.blit(scaled_win, (0, 0))
        pygame.display.flip()
        super().present(frame)

    def set_title(self, title):
        pygame.display.set_caption(title)

    def shutdown(self):
        # PyGame currently segfaults if display.quit is called via __del__
        pygame.display.quit()
        pygame.quit()
        super().shutdown()

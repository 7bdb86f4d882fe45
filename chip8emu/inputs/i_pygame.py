#!/usr/bin/env python3

"""
PyGame Input Plugin

Scans the keyboard and properly detects key 'press' and 'release' events.  The
queue is only drained once per frame, as constantly checking it is time
consuming.

Closing the window or releasing ESC quits.  Repeated KEYDOWNs for a key that
is already held are dropped, so a held key is only ever one press.

If the application is quit, then PyGame is shut down by the renderer, not
here, so this must not call into PyGame after shutdown() is called.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .i_null import Inputs as InputsBase
from ..constants import NUM_KEYS
from ..events import quit_event, key_down, key_up


class Inputs(InputsBase):
    def __init__(self, keymap, renderer):
        self.key_down = [False] * NUM_KEYS

        self.pygame_methods = {
            pygame.QUIT:    self._pygame_quit,
            pygame.KEYDOWN: self._pygame_keydown,
            pygame.KEYUP:   self._pygame_keyup
        }

        super().__init__(keymap, renderer)

    def poll_events(self):
        # Call PyGame method based on fast dictionary lookup of event
        events = []

        for event in pygame.event.get():
            pygame_method = self.pygame_methods.get(event.type)

            if pygame_method:
                translated = pygame_method(event)

                if translated is not None:
                    events.append(translated)  # Keep going, even if planning to quit

        return events

    def _pygame_quit(self, _):
        return quit_event()

    def _pygame_keydown(self, event):
        hex_key = self.keymap_dict.get(event.key)

        if hex_key is None or self.key_down[hex_key]:
            return None

        self.key_down[hex_key] = True
        return key_down(hex_key)

    def _pygame_keyup(self, event):
        if event.key == pygame.K_ESCAPE:
            return quit_event()

        hex_key = self.keymap_dict.get(event.key)

        if hex_key is None or not self.key_down[hex_key]:
            return None

        self.key_down[hex_key] = False
        return key_up(hex_key)

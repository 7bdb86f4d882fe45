#!/usr/bin/env python3

"""
PyGame Audio Plugin

Plays the buzzer through PyGame / SDL.

The buzzer is simply 'on' or 'off', and sounds a fixed square wave tone.  The
tone is described as a 1-bit pattern played at a fixed bit rate, which is
stretched lengthways and has its offset moved to fit in a modern 8-bit PyGame /
SDL buffer, retaining the shape of a square wave.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .a_null import AudioError, Audio as AudioBase

PLAYBACK_FREQUENCY = 44100.0
PATTERN_FREQUENCY = 4000.0  # Bits per second.  With the pattern below, this gives a 250Hz tone
BUZZER_PATTERN = b"\x00\xFF" * 8
DEFAULT_VOLUME = 0.1


class Audio(AudioBase):
    def __init__(self):
        super().__init__()
        pygame.mixer.pre_init(int(PLAYBACK_FREQUENCY), size=8, channels=1, buffer=512, allowedchanges=0)

        try:
            pygame.mixer.init()
        except pygame.error as e:
            raise AudioError("Unable to start PyGame audio: {}. Try muting with -m 1".format(e)) from e

        # Setting PyGame's playback rate is very slow, so resample the pattern once up front instead
        sample_multiplier = PLAYBACK_FREQUENCY / PATTERN_FREQUENCY
        resampled_buffer_size = int(len(BUZZER_PATTERN) * 8 * sample_multiplier)
        resampled_buffer = bytearray(resampled_buffer_size)

        for resampled_buffer_pos in range(resampled_buffer_size):
            buffer_bit_pos = resampled_buffer_pos / sample_multiplier
            byte = int(buffer_bit_pos / 8.0)
            bit = 7 - int(buffer_bit_pos % 8.0)
            resampled_buffer[resampled_buffer_pos] = ((BUZZER_PATTERN[byte] >> bit) & 1) * 0xFF

        self.sound = pygame.mixer.Sound(buffer=bytes(resampled_buffer))
        self.sound.set_volume(DEFAULT_VOLUME)

    def enable_buzzer(self, enabled):
        # Play or stop looping the tone.  If it is already playing, it won't be restarted.
        if enabled:
            if not self.buzzer_enabled:
                self.sound.play(-1)
        elif self.buzzer_enabled:
            self.sound.stop()

        super().enable_buzzer(enabled)

    def shutdown(self):
        self.sound.stop()
        pygame.mixer.quit()
        super().shutdown()

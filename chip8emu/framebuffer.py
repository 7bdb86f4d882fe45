#!/usr/bin/env python3

"""
Framebuffer Emulator

Pixels are written here, and are only drawn to the actual display (the host
rendering system) once per frame, and only if something has changed since the
last time.  Calling PyGame/Curses for every single pixel can lower speed
substantially, so the host is handed a whole frame at a time instead.

Programs cannot write directly into video RAM.  Sprites are drawn using XOR,
so drawing the same sprite twice in the same place erases it again.  The only
other way to change pixels is to clear the whole screen.

Sprite start coordinates wrap around the screen, but the sprite itself does
not: anything running off the right or bottom edge is clipped.

A collision is reported if any pixel that was set got unset by the XOR.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import SCREEN_WIDTH, SCREEN_HEIGHT, MAX_SPRITE_ROWS


class FramebufferError(Exception):
    pass


class Framebuffer:
    def __init__(self, width=SCREEN_WIDTH, height=SCREEN_HEIGHT):
        self.vid_width = width
        self.vid_height = height
        self.vid_size = width * height
        self.vram = memoryview(bytearray(self.vid_size))
        self.dirty = True  # Make sure the first frame gets presented

    def clear(self):
        self.vram[:] = bytes(self.vid_size)
        self.dirty = True

    def xor_sprite(self, x0, y0, rows):
        if len(rows) > MAX_SPRITE_ROWS:
            raise FramebufferError("Sprites can be no more than {} rows high".format(MAX_SPRITE_ROWS))

        vid_width = self.vid_width
        vram = self.vram
        x0 %= vid_width
        y0 %= self.vid_height
        visible_rows = min(len(rows), self.vid_height - y0)
        visible_cols = min(8, vid_width - x0)
        collided = False

        for row in range(visible_rows):
            spr_data = rows[row]

            if not spr_data:
                continue

            vram_loc = (y0 + row) * vid_width + x0

            for col in range(visible_cols):
                if spr_data & (0x80 >> col):
                    # Check each pixel as it is flipped, not the row as a whole
                    if vram[vram_loc + col]:
                        collided = True

                    vram[vram_loc + col] ^= 1

        if visible_rows:
            self.dirty = True

        return collided

    def get_pixel(self, x, y):
        return bool(self.vram[y * self.vid_width + x])

    def count_lit(self):
        return sum(self.vram)

    def snapshot(self):
        # Read-only copy of the screen, one tuple of booleans per row
        vid_width = self.vid_width
        vram = self.vram
        return tuple(
            tuple(bool(pixel) for pixel in vram[y * vid_width:(y + 1) * vid_width])
            for y in range(self.vid_height)
        )

    def get_vid_size(self):
        return self.vid_width, self.vid_height

    def is_dirty(self):
        return self.dirty

    def mark_clean(self):
        self.dirty = False

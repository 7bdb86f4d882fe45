#!/usr/bin/env python3

"""
Memory Emulator

A flat 4K block of byte-addressable RAM.  Every single-byte access is masked
to 12 bits, so addresses wrap around the top of memory rather than failing.
Instructions are 16 bits wide and stored big-endian.

Bulk writes (used for loading fonts and ROMs) are the only operations that are
bounds-checked, because a block that does not fit is a loading mistake rather
than something a running program can cause.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import MEMORY_SIZE, ADDR_MASK


class MemoryRangeError(Exception):
    pass


class Memory:
    def __init__(self):
        self.mem = memoryview(bytearray(MEMORY_SIZE))

    def read8(self, addr):
        return self.mem[addr & ADDR_MASK]

    def read16(self, addr):
        return (self.mem[addr & ADDR_MASK] << 8) | self.mem[(addr + 1) & ADDR_MASK]

    def read_block(self, addr, size):
        # For debugging and tests.  Wraps like the single byte reads.
        return bytes(self.mem[(addr + offset) & ADDR_MASK] for offset in range(size))

    def write8(self, addr, byte):
        self.mem[addr & ADDR_MASK] = byte & 0xFF

    def write_bytes(self, src, offset):
        block_top = offset + len(src)

        if offset < 0 or block_top > MEMORY_SIZE:
            raise MemoryRangeError(
                "Block of {} bytes at 0x{:03x} does not fit in memory".format(len(src), max(offset, 0))
            )

        self.mem[offset:block_top] = src

    def clear(self):
        self.mem[:] = bytes(MEMORY_SIZE)

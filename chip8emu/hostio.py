#!/usr/bin/env python3

"""
Host I/O Functionality

Handles loading ROM binaries for later writing into RAM.  ROMs are raw byte
streams with no header, copied verbatim to 0x200.  Anything that cannot fit
between there and the top of memory is rejected before it gets near RAM.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import MAX_ROM_SIZE


class LoaderError(Exception):
    pass


class RomTooLargeError(LoaderError):
    pass


class Loader:
    def load_binary(self, filename):
        try:
            with open(filename, "rb") as f:
                return f.read()
        except OSError as e:
            raise LoaderError("Unable to read '{}': {}".format(filename, e.strerror or e)) from e

    def load_rom(self, filename):
        data = self.load_binary(filename)

        if len(data) > MAX_ROM_SIZE:
            raise RomTooLargeError(
                "ROM '{}' is {} bytes, but no more than {} bytes will fit in memory".format(
                    filename, len(data), MAX_ROM_SIZE
                )
            )

        return data

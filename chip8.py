#!/usr/bin/env python3

__author__ = "Gregory Maynard-Hoare"
__copyright__ = "Copyright (C) 2024 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"
__version__ = "1.0.0"

import sys
from argparse import ArgumentParser
from chip8emu import main, FATAL_ERRORS
from chip8emu.constants import DEFAULT_CYCLES_PER_FRAME, DEFAULT_KEYMAP, DEFAULT_FG_COLOUR, DEFAULT_BG_COLOUR


def parse_args(argv=None):
    parser = ArgumentParser(prog="chip8")
    parser.add_argument("filename", help="ROM to execute (normally ending in .ch8 or .c8)")
    parser.add_argument(
        "-c", "--cycles", type=int, default=DEFAULT_CYCLES_PER_FRAME,
        help="instructions executed per 60Hz frame (default {})".format(DEFAULT_CYCLES_PER_FRAME)
    )
    parser.add_argument(
        "-r", "--renderer", choices=["pygame", "curses", "null"],
        help="set the rendering, input, and audio systems (pygame by default if available, otherwise curses)"
    )
    parser.add_argument(
        "-s", "--scale", type=int,
        help="set the pixel size in PyGame mode (default 10), and horizontal stretch in Curses mode (default 2)"
    )
    parser.add_argument(
        "-m", "--mute", type=int, choices=[0, 1],
        help="mute the emulated audio.  0 = unmuted (default for PyGame), 1 = muted (default for Curses)"
    )
    parser.add_argument(
        "-k", "--keymap", default=DEFAULT_KEYMAP,
        help="redefine the 16 keyscan codes (PyGame) or character numbers (Curses).  Separate each decimal with a comma"
    )
    parser.add_argument(
        "--seed", type=int,
        help="seed the random number generator, for repeatable runs (default: seeded from the clock)"
    )
    parser.add_argument(
        "--fg_colour", default=DEFAULT_FG_COLOUR,
        help="foreground colour for the PyGame renderer in hex, e.g. {}".format(DEFAULT_FG_COLOUR)
    )
    parser.add_argument(
        "--bg_colour", default=DEFAULT_BG_COLOUR,
        help="background colour for the PyGame renderer in hex, e.g. {}".format(DEFAULT_BG_COLOUR)
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", default=False,
        help="print every instruction as it is executed.  Slows CPU execution"
    )
    return parser.parse_args(argv)  # Can call sys.exit(2) if args are incorrect


def run(argv=None):
    args = vars(parse_args(argv))

    try:
        # It is possible to start the interpreter from a GUI by calling main with a dictionary
        return main(args)
    except FATAL_ERRORS as e:
        print(e, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(run())

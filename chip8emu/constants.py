#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

# App identification
APP_NAME = "Chip8 Interpreter"
APP_VERSION = "1.0.0"
APP_COPYRIGHT = "Copyright (C) 2022 Gregory Maynard-Hoare, licensed under GNU Affero General Public License v3.0"
APP_INTRO = "{} V{} -- ".format(APP_NAME, APP_VERSION)

# Memory layout
MEMORY_SIZE = 0x1000
ADDR_MASK = 0xFFF
FONT_LOCATION = 0x050
PROGRAM_START = 0x200
MAX_ROM_SIZE = MEMORY_SIZE - PROGRAM_START  # 3584 bytes

# Display
SCREEN_WIDTH = 64
SCREEN_HEIGHT = 32
MAX_SPRITE_ROWS = 15

# Stack depth and register count
STACK_SIZE = 16
NUM_REGISTERS = 16
NUM_KEYS = 16

# Timing.  Timers and the display both run at 60Hz, and instructions are executed in batches between frames.
FRAME_FREQ = 60.0
FRAME_INTERVAL = 1.0 / FRAME_FREQ
DEFAULT_CYCLES_PER_FRAME = 10

# Default mappings for keys 0-F, later populated into a dictionary.  The keyscans (on a UK QWERTY keyboard) and ASCII
# characters for these are the same code.  This is the usual 1234/QWER/ASDF/ZXCV block laid over the COSMAC VIP pad.
DEFAULT_KEYMAP = "120,49,50,51,113,119,101,97,115,100,122,99,52,114,102,118"

# Hex digit sprites, 5 rows each, loaded into RAM at FONT_LOCATION
SYSTEM_FONT = bytes((
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80   # F
))
FONT_CHAR_SIZE = 5

# Default colours for the PyGame renderer
DEFAULT_FG_COLOUR = "FFFFFF"
DEFAULT_BG_COLOUR = "000000"

#!/usr/bin/env python3

"""
Main Startup Module

Simply call main(args) to start the interpreter, replacing args with a
dictionary of options.  This can be done via the Terminal or GUI.

All options must be supplied.  Defaults can be specified with a 'None'.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from random import Random
from .constants import APP_INTRO, APP_COPYRIGHT, DEFAULT_KEYMAP, FONT_LOCATION, PROGRAM_START, SYSTEM_FONT
from .cpu import CPU, CPUError
from .debugger import Debugger
from .framebuffer import Framebuffer, FramebufferError
from .host import Host
from .hostio import Loader, LoaderError
from .inputs.i_null import InputsError
from .interpreter import Interpreter, InterpreterError
from .keypad import Keypad, KeypadError
from .memory import Memory, MemoryRangeError
from .renderers.r_null import RendererError
from .audio.a_null import AudioError
from .stack import Stack, StackError


class StartupError(Exception):
    pass


# Everything that should end the session with an error message rather than a traceback
FATAL_ERRORS = (
    StartupError, LoaderError, CPUError, StackError, MemoryRangeError, FramebufferError, KeypadError,
    InterpreterError, InputsError, RendererError, AudioError
)


def select_plugins(opt_renderer, mute_audio):
    # Returns the Inputs, Renderer and Audio classes for the requested host library
    auto_select_renderer = opt_renderer is None  # If necessary, try PyGame first, then Curses.

    # flake8: noqa: F401
    if auto_select_renderer or opt_renderer == "pygame":
        # pylint: disable=unused-import, import-outside-toplevel, raise-missing-from
        try:
            import pygame
        except ImportError:
            if not auto_select_renderer:
                raise StartupError("PyGame does not appear to be installed.")

            opt_renderer = "curses"
        else:
            from .inputs.i_pygame import Inputs
            from .renderers.r_pygame import Renderer

            if mute_audio:
                from .audio.a_null import Audio
            else:
                from .audio.a_pygame import Audio

            return Inputs, Renderer, Audio

    if opt_renderer == "curses":
        # pylint: disable=unused-import, import-outside-toplevel, raise-missing-from
        try:
            import curses
        except ImportError:
            if auto_select_renderer:
                raise StartupError(
                    "Neither PyGame nor Curses (or Windows-Curses) appear to be installed."
                )

            raise StartupError(
                "Curses (or Windows-Curses) does not appear to be installed."
            )

        from .inputs.i_curses import Inputs
        from .renderers.r_curses import Renderer

        # Terminals can handle fixed-length beeps, but not sampled sound
        if mute_audio or mute_audio is None:
            from .audio.a_null import Audio
        else:
            from .audio.a_curses import Audio

        return Inputs, Renderer, Audio

    if opt_renderer == "null":
        # pylint: disable=import-outside-toplevel
        from .inputs.i_null import Inputs
        from .renderers.r_null import Renderer
        from .audio.a_null import Audio

        return Inputs, Renderer, Audio

    raise StartupError("Unknown renderer: {}".format(opt_renderer))


def build_machine(rom, debugger=None, seed=None):
    # Returns a CPU with the system font and the ROM already in memory, ready to run from 0x200
    memory = Memory()
    memory.write_bytes(SYSTEM_FONT, FONT_LOCATION)
    memory.write_bytes(rom, PROGRAM_START)

    return CPU(
        memory, Stack(), Framebuffer(), Keypad(), Debugger() if debugger is None else debugger,
        rng=Random(seed) if seed is not None else None
    )


def main(args):
    print("".join((APP_INTRO, APP_COPYRIGHT)))

    # Read the ROM binary first, so a bad filename doesn't leave a window flashing up
    rom = Loader().load_rom(args["filename"])

    Inputs, Renderer, Audio = select_plugins(args["renderer"], args["mute"])

    # Set up debugger and live output if necessary
    debugger = Debugger()
    debugger.set_live(args["debug"])
    cpu = build_machine(rom, debugger, seed=args["seed"])

    # Set up a new rendering system, then host inputs (which may need the renderer), then audio
    renderer = Renderer(scale=args["scale"], fg_colour=args["fg_colour"], bg_colour=args["bg_colour"])

    try:
        inputs = Inputs(args["keymap"] or DEFAULT_KEYMAP, renderer)
    except BaseException:
        renderer.shutdown()
        raise

    try:
        audio = Audio()
    except BaseException:
        inputs.shutdown()
        renderer.shutdown()
        raise

    host = Host(inputs, renderer, audio)

    try:
        Interpreter(cpu, host, cycles_per_frame=args["cycles"]).run()
    finally:
        # The interpreter has quit, so shut down the host framework.  __del__ cannot be relied upon when using PyPy
        host.shutdown()

    return 0

#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import contextlib
import io
import os
import tempfile
import unittest
from unittest import mock
import chip8
from chip8emu import StartupError, build_machine, select_plugins
from chip8emu.audio import a_null
from chip8emu.events import quit_event
from chip8emu.inputs import i_null
from chip8emu.renderers import r_null
from chip8emu.constants import DEFAULT_CYCLES_PER_FRAME, DEFAULT_KEYMAP, SYSTEM_FONT


class TestLauncher(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.temp_dir.cleanup()

    def _run_quietly(self, argv):
        with contextlib.redirect_stdout(io.StringIO()), contextlib.redirect_stderr(io.StringIO()) as err:
            result = chip8.run(argv)

        return result, err.getvalue()

    def test_launcher_defaults(self):
        args = vars(chip8.parse_args(["game.ch8"]))
        self.assertEqual("game.ch8", args["filename"])
        self.assertEqual(DEFAULT_CYCLES_PER_FRAME, args["cycles"])
        self.assertEqual(DEFAULT_KEYMAP, args["keymap"])
        self.assertIsNone(args["renderer"])
        self.assertIsNone(args["seed"])
        self.assertFalse(args["debug"])

    def test_launcher_missing_filename(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as context:
                chip8.parse_args([])

        self.assertEqual(2, context.exception.code)

    def test_launcher_missing_rom(self):
        result, err = self._run_quietly([os.path.join(self.temp_dir.name, "NoFile.ch8"), "-r", "null"])
        self.assertEqual(1, result)
        self.assertIn("NoFile.ch8", err)

    def test_launcher_illegal_instruction(self):
        # An empty ROM leaves 0x0000 at 0x200
        filename = os.path.join(self.temp_dir.name, "empty.ch8")
        open(filename, "wb").close()
        result, err = self._run_quietly([filename, "-r", "null"])
        self.assertEqual(1, result)
        self.assertIn("Opcode 0x0000 at address 0x200", err)

    def test_launcher_bad_cycles(self):
        filename = os.path.join(self.temp_dir.name, "loop.ch8")

        with open(filename, "wb") as f:
            f.write(b"\x12\x00")

        result, _ = self._run_quietly([filename, "-r", "null", "-c", "0"])
        self.assertEqual(1, result)

    def test_launcher_clean_quit(self):
        filename = os.path.join(self.temp_dir.name, "loop.ch8")

        with open(filename, "wb") as f:
            f.write(b"\x12\x00")

        shutdown_order = []

        with mock.patch.object(i_null.Inputs, "poll_events", return_value=[quit_event()]), \
                mock.patch.object(a_null.Audio, "shutdown", lambda self: shutdown_order.append("audio")), \
                mock.patch.object(i_null.Inputs, "shutdown", lambda self: shutdown_order.append("inputs")), \
                mock.patch.object(r_null.Renderer, "shutdown", lambda self: shutdown_order.append("renderer")):
            result, err = self._run_quietly([filename, "-r", "null"])

        self.assertEqual(0, result)
        self.assertEqual("", err)
        self.assertEqual(["audio", "inputs", "renderer"], shutdown_order)

    def test_select_null_plugins(self):
        Inputs, Renderer, Audio = select_plugins("null", None)
        self.assertEqual("chip8emu.inputs.i_null", Inputs.__module__)
        self.assertEqual("chip8emu.renderers.r_null", Renderer.__module__)
        self.assertEqual("chip8emu.audio.a_null", Audio.__module__)

    def test_select_unknown_plugins(self):
        self.assertRaises(StartupError, select_plugins, "vga", None)

    def test_build_machine(self):
        cpu = build_machine(b"\x12\x00")
        self.assertEqual(SYSTEM_FONT, bytes(cpu.memory.mem[0x50:0xA0]))
        self.assertEqual(b"\x12\x00", bytes(cpu.memory.mem[0x200:0x202]))
        self.assertEqual(0x200, cpu.pc)

#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from time import perf_counter
from chip8emu.audio.a_null import Audio
from chip8emu.constants import DEFAULT_KEYMAP
from chip8emu.host import Host
from chip8emu.inputs.i_null import Inputs, InputsError, parse_keymap
from chip8emu.renderers.r_null import Renderer, RendererError, parse_colour


class TestHost(unittest.TestCase):
    def setUp(self):
        self.renderer = Renderer()
        self.inputs = Inputs(DEFAULT_KEYMAP, self.renderer)
        self.audio = Audio()
        self.host = Host(self.inputs, self.renderer, self.audio, frame_interval=0.01)

    def test_host_poll_events(self):
        self.assertEqual([], self.host.poll_events())

    def test_host_present(self):
        frame = ((False,) * 64,) * 32
        self.host.present(frame)
        self.host.present(frame)
        self.assertEqual(2, self.renderer.frames_presented)

    def test_host_buzzer(self):
        self.assertFalse(self.audio.buzzer_enabled)
        self.host.set_buzzer(True)
        self.assertTrue(self.audio.buzzer_enabled)
        self.host.set_buzzer(False)
        self.assertFalse(self.audio.buzzer_enabled)

    def test_host_report_perf(self):
        # Only checks it runs, as the null renderer has no title
        self.host.report_perf(60, 600)

    def test_host_wait_until_next_tick(self):
        start_time = perf_counter()
        self.host.wait_until_next_tick()  # Starts the clock
        self.host.wait_until_next_tick()
        self.host.wait_until_next_tick()
        self.assertGreaterEqual(perf_counter() - start_time, 0.015)

    def test_host_shutdown(self):
        self.host.shutdown()


class TestNullPlugins(unittest.TestCase):
    def setUp(self):
        self.renderer = Renderer()

    def test_inputs_keymap(self):
        inputs = Inputs(DEFAULT_KEYMAP, self.renderer)
        self.assertEqual(16, len(inputs.keymap_dict))
        self.assertEqual(0x0, inputs.keymap_dict[ord("x")])
        self.assertEqual(0x1, inputs.keymap_dict[ord("1")])
        self.assertEqual(0xF, inputs.keymap_dict[ord("v")])

    def test_inputs_keymap_lowercase(self):
        keymap = ",".join(str(ord(char)) for char in "X123QWEASDZC4RFV")
        inputs = Inputs(keymap, self.renderer, force_lowercase=True)
        self.assertEqual(0x0, inputs.keymap_dict[ord("x")])

    def test_inputs_keymap_errors(self):
        self.assertRaises(InputsError, Inputs, "1,2,3", self.renderer)
        self.assertRaises(InputsError, Inputs, ",".join(["a"] * 16), self.renderer)
        self.assertRaises(InputsError, Inputs, ",".join(["1"] * 16), self.renderer)

    def test_renderer_scale(self):
        self.assertEqual(1, self.renderer.scale)
        self.assertEqual(3, Renderer(scale=3).scale)
        self.assertRaises(RendererError, Renderer, scale=0)

    def test_parse_colour(self):
        self.assertEqual((0x12, 0x34, 0xAB), parse_colour("1234AB"))
        self.assertRaises(RendererError, parse_colour, "12345")
        self.assertRaises(RendererError, parse_colour, "GGGGGG")

    def test_parse_keymap(self):
        keymap_dict = parse_keymap(",".join(str(code) for code in range(100, 116)))
        self.assertEqual(0x0, keymap_dict[100])
        self.assertEqual(0xF, keymap_dict[115])

        with self.assertRaises(InputsError) as context:
            parse_keymap(",".join(["5"] * 16))

        self.assertIn("Keys 0 and 1", str(context.exception))

#!/usr/bin/env python3

"""
Host Adapter

The interpreter only ever talks to the host through this object:
    * poll_events()          - quit and key up/down events since the last call
    * present(frame)         - draw a complete 64x32 frame
    * wait_until_next_tick() - sleep until the next 60Hz frame is due

It also passes on the buzzer state (on whenever the sound timer is running)
and the performance figures shown in the window title.

Behind it sit three separate plugins, chosen at startup: one for inputs, one
for rendering, and one for audio.  Any of them can be the 'null' version, so
the interpreter can run headless.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from time import perf_counter, sleep
from .constants import APP_NAME, FRAME_INTERVAL


class Host:
    def __init__(self, inputs, renderer, audio, frame_interval=FRAME_INTERVAL):
        self.inputs = inputs
        self.renderer = renderer
        self.audio = audio
        self.frame_interval = frame_interval
        self.next_tick_time = None
        self.buzzer_enabled = False

    def poll_events(self):
        return self.inputs.poll_events()

    def present(self, frame):
        self.renderer.present(frame)

    def wait_until_next_tick(self):
        this_time = perf_counter()

        if self.next_tick_time is None or this_time - self.next_tick_time > self.frame_interval:
            # First frame, or we have fallen more than a frame behind.  Don't try to catch up.
            self.next_tick_time = this_time + self.frame_interval
            return

        if self.next_tick_time > this_time:
            sleep(self.next_tick_time - this_time)

        self.next_tick_time += self.frame_interval

    def set_buzzer(self, enabled):
        # Only bother the audio plugin when the state actually changes
        if enabled != self.buzzer_enabled:
            self.audio.enable_buzzer(enabled)
            self.buzzer_enabled = enabled

    def report_perf(self, fps=0, ops=0):
        self.renderer.set_title("{} - {} FPS, {} OPS".format(APP_NAME, fps, ops))

    def shutdown(self):
        # The renderer goes last, as it owns the window and the host library itself
        self.audio.shutdown()
        self.inputs.shutdown()
        self.renderer.shutdown()

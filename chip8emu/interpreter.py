#!/usr/bin/env python3

"""
Interpreter Loop

Drives the CPU one 60Hz frame at a time.  Each frame:

    1. Drain the host's events.  Key presses and releases go to the keypad,
       and a quit request stops the interpreter.
    2. If Fx0A is waiting and a key was pressed this frame, store the key in
       the waiting register and carry on running.
    3. If running, execute a fixed batch of instructions (10 by default).  The
       batch is cut short if an instruction starts waiting for a key.
    4. Decrement the delay and sound timers.
    5. If the framebuffer has changed, hand it to the host to present.
    6. Sleep until the next frame is due.

Everything happens on one thread, and events are only looked at between
batches, so an instruction is never interrupted part way through.

Status only ever moves between RUNNING and WAITING_FOR_KEY, until the host
asks to quit.  Once STOPPED, the interpreter never runs again.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from enum import Enum
from time import perf_counter
from .constants import DEFAULT_CYCLES_PER_FRAME
from .events import QUIT, KEY_DOWN, KEY_UP


class Status(Enum):
    RUNNING = "running"
    WAITING_FOR_KEY = "waiting_for_key"
    STOPPED = "stopped"


class InterpreterError(Exception):
    pass


class Interpreter:
    def __init__(self, cpu, host, cycles_per_frame=None):
        if cycles_per_frame is None:
            cycles_per_frame = DEFAULT_CYCLES_PER_FRAME

        if cycles_per_frame < 1:
            raise InterpreterError("At least one instruction must be executed per frame")

        self.cpu = cpu
        self.host = host
        self.cycles_per_frame = cycles_per_frame
        self.status = Status.RUNNING

        # Performance-related vars
        self.perf_counter_fps = 0
        self.perf_counter_ops = 0
        self.next_perf_report_time = 0

    def run(self):
        # Runs until the host asks to quit.  Fatal CPU errors are left to propagate.
        while self.status != Status.STOPPED:
            this_time = perf_counter()

            # Performance counters
            if this_time >= self.next_perf_report_time:
                self.next_perf_report_time = int(this_time) + 1.0
                self.host.report_perf(self.perf_counter_fps, self.perf_counter_ops)
                self.perf_counter_ops = 0
                self.perf_counter_fps = 0

            self.run_frame()
            self.host.wait_until_next_tick()

    def run_frame(self):
        pressed_key = self.process_events()

        if pressed_key is not None and self.status == Status.WAITING_FOR_KEY:
            self.cpu.v[self.cpu.keypad.resolve_wait()] = pressed_key
            self.status = Status.RUNNING

        if self.status == Status.RUNNING:
            self.execute_batch()

        self.cpu.tick_timers()
        self.host.set_buzzer(self.cpu.st > 0)
        self.refresh_framebuffer()
        self.perf_counter_fps += 1

    def process_events(self):
        # Returns the first key pressed during this frame, if any
        keypad = self.cpu.keypad
        pressed_key = None

        for event in self.host.poll_events():
            if event.kind == QUIT:
                self.stop()  # Process the rest of the events anyway
            elif event.kind == KEY_DOWN:
                keypad.press(event.key)

                if pressed_key is None:
                    pressed_key = event.key & 0xF
            elif event.kind == KEY_UP:
                keypad.release(event.key)

        return pressed_key

    def execute_batch(self):
        cpu = self.cpu
        keypad = cpu.keypad

        for _ in range(self.cycles_per_frame):
            cpu.step()
            self.perf_counter_ops += 1

            if keypad.is_waiting():
                self.status = Status.WAITING_FOR_KEY
                break

    def refresh_framebuffer(self):
        framebuffer = self.cpu.framebuffer

        if framebuffer.is_dirty():
            self.host.present(framebuffer.snapshot())
            framebuffer.mark_clean()

    def stop(self):
        self.status = Status.STOPPED

#!/usr/bin/env python3

"""
CPU Emulator (CHIP-8)

Like a real computer, this is where most of the processing happens.  Each call
to step() fetches one instruction, moves the program counter past it, decodes
it, and then executes it through a single lookup table keyed by the decoded
operation.

The program counter is always advanced *before* the instruction runs, so CALL
pushes the address of the following instruction, and skips simply add another
2 on top.

Register widths are enforced on every write:
    * V registers are 8 bits
    * PC is 12 bits, so jumps past the top of memory wrap to 0x000
    * I is held in 16 bits, but RAM only ever sees its lowest 12 bits

Timers are not decremented here.  The interpreter calls tick_timers() once per
60Hz frame.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from random import Random
from .constants import APP_INTRO, FONT_LOCATION, FONT_CHAR_SIZE, NUM_REGISTERS, PROGRAM_START
from .decoder import Op, decode


class CPUError(Exception):
    pass


class IllegalInstructionError(CPUError):
    def __init__(self, message, word, pc):
        super().__init__(message)
        self.word = word
        self.pc = pc


class CPU:
    def __init__(self, memory, stack, framebuffer, keypad, debugger, rng=None):
        self.memory = memory
        self.stack = stack
        self.framebuffer = framebuffer
        self.keypad = keypad
        self.debugger = debugger
        self.live_debug = self.debugger.is_live()
        # Seeded from the wall clock unless the caller wants repeatable runs
        self.rng = Random() if rng is None else rng

        self.instructions = {
            Op.CLS:       self._00E0,
            Op.RET:       self._00EE,
            Op.JP:        self._1nnn,
            Op.CALL:      self._2nnn,
            Op.SE_I:      self._3xkk,
            Op.SNE_I:     self._4xkk,
            Op.SE_R:      self._5xy0,
            Op.LD_I:      self._6xkk,
            Op.ADD_I:     self._7xkk,
            Op.LD_R:      self._8xy0,
            Op.OR:        self._8xy1,
            Op.AND:       self._8xy2,
            Op.XOR:       self._8xy3,
            Op.ADD_R:     self._8xy4,
            Op.SUB:       self._8xy5,
            Op.SHR:       self._8xy6,
            Op.SUBN:      self._8xy7,
            Op.SHL:       self._8xyE,
            Op.SNE_R:     self._9xy0,
            Op.LD_I_ADDR: self._Annn,
            Op.JP_V0:     self._Bnnn,
            Op.RND:       self._Cxkk,
            Op.DRW:       self._Dxyn,
            Op.SKP:       self._Ex9E,
            Op.SKNP:      self._ExA1,
            Op.LD_DT_R:   self._Fx07,
            Op.LD_K:      self._Fx0A,
            Op.LD_R_DT:   self._Fx15,
            Op.LD_R_ST:   self._Fx18,
            Op.ADD_I_R:   self._Fx1E,
            Op.LD_F:      self._Fx29,
            Op.LD_BCD:    self._Fx33,
            Op.ST_REGS:   self._Fx55,
            Op.LD_REGS:   self._Fx65,
            Op.INVALID:   self._opcode_unsupported
        }

        # Initialise registers
        self.v = memoryview(bytearray(NUM_REGISTERS))  # Writing a value over 0xFF raises, so always mask first
        self.i = 0  # Index register

        # Initialise timers
        self.dt = 0  # Delay timer
        self.st = 0  # Sound timer

        # Initialise program counter
        self.pc = PROGRAM_START
        self.debug_pc = PROGRAM_START  # Address of the instruction currently being executed

    def fetch(self):
        return self.memory.read16(self.pc)

    def inc_pc(self):
        self.pc = (self.pc + 2) & 0xFFF

    def step(self):
        # Keep track of the program counter before altering it, in case there is a crash
        self.debug_pc = self.pc
        word = self.fetch()
        self.inc_pc()
        instruction = decode(word)
        self.execute(instruction)
        return instruction

    def execute(self, instruction):
        if self.live_debug:
            self.debugger.output(self, instruction)

        self.instructions[instruction.op](instruction)

    def tick_timers(self):
        if self.dt > 0:
            self.dt -= 1

        if self.st > 0:
            self.st -= 1

    def _opcode_unsupported(self, instruction):
        raise IllegalInstructionError(
            (
                "Emulation halted.\n\n" +
                "{}Debug info:\n" +
                "{}\n\nOpcode 0x{:04x} at address 0x{:03x} is not a CHIP-8 instruction."
            ).format(
                APP_INTRO, self.debugger.debug(self, instruction, verbose=True), instruction.word, self.debug_pc
            ),
            instruction.word,
            self.debug_pc
        )

    def _00E0(self, ins):  # CLS
        self.framebuffer.clear()

    def _00EE(self, ins):  # RET
        self.pc = self.stack.pop()

    def _1nnn(self, ins):  # JP addr
        self.pc = ins.nnn

    def _2nnn(self, ins):  # CALL addr
        self.stack.push(self.pc)
        self.pc = ins.nnn

    def _3xkk(self, ins):  # SE Vx, byte
        if self.v[ins.x] == ins.kk:
            self.inc_pc()

    def _4xkk(self, ins):  # SNE Vx, byte
        if self.v[ins.x] != ins.kk:
            self.inc_pc()

    def _5xy0(self, ins):  # SE Vx, Vy
        if self.v[ins.x] == self.v[ins.y]:
            self.inc_pc()

    def _6xkk(self, ins):  # LD Vx, byte
        self.v[ins.x] = ins.kk

    def _7xkk(self, ins):  # ADD Vx, byte
        # No carry flag for this one
        self.v[ins.x] = (self.v[ins.x] + ins.kk) & 0xFF

    def _8xy0(self, ins):  # LD Vx, Vy
        self.v[ins.x] = self.v[ins.y]

    def _8xy1(self, ins):  # OR Vx, Vy
        self.v[ins.x] |= self.v[ins.y]

    def _8xy2(self, ins):  # AND Vx, Vy
        self.v[ins.x] &= self.v[ins.y]

    def _8xy3(self, ins):  # XOR Vx, Vy
        self.v[ins.x] ^= self.v[ins.y]

    # For the arithmetic instructions, Vf must be written AFTER Vx, as Vf can be specified in the parameters.  The flag
    # has to win in that case.

    def _8xy4(self, ins):  # ADD Vx, Vy
        val = self.v[ins.x] + self.v[ins.y]
        self.v[ins.x] = val & 0xFF
        self.v[0xF] = int(val > 0xFF)  # Vf is set when carrying

    def _post_8xy5_8xy7(self, ins, val):  # Post-SUB/SUBN
        self.v[ins.x] = val & 0xFF
        # Vf is set when NOT borrowing.  Equal operands count as a borrow.
        self.v[0xF] = int(val > 0)

    def _8xy5(self, ins):  # SUB Vx, Vy
        self._post_8xy5_8xy7(ins, self.v[ins.x] - self.v[ins.y])

    def _8xy6(self, ins):  # SHR Vx
        # Vy is ignored
        val = self.v[ins.x]
        self.v[ins.x] = val >> 1
        self.v[0xF] = val & 1

    def _8xy7(self, ins):  # SUBN Vx, Vy
        self._post_8xy5_8xy7(ins, self.v[ins.y] - self.v[ins.x])

    def _8xyE(self, ins):  # SHL Vx
        # Vy is ignored
        val = self.v[ins.x]
        self.v[ins.x] = (val << 1) & 0xFF
        self.v[0xF] = val >> 7

    def _9xy0(self, ins):  # SNE Vx, Vy
        if self.v[ins.x] != self.v[ins.y]:
            self.inc_pc()

    def _Annn(self, ins):  # LD I, addr
        self.i = ins.nnn

    def _Bnnn(self, ins):  # JP V0, addr
        self.pc = (self.v[0] + ins.nnn) & 0xFFF

    def _Cxkk(self, ins):  # RND Vx, byte
        # The ANDing here is intentional.  This is not a random number between 0 and 'byte' inclusive.
        self.v[ins.x] = self.rng.randint(0, 0xFF) & ins.kk

    def _Dxyn(self, ins):  # DRW Vx, Vy, nibble
        # The framebuffer handles wrapping the start position and clipping the rest
        rows = self.memory.read_block(self.i, ins.n)
        self.v[0xF] = int(self.framebuffer.xor_sprite(self.v[ins.x], self.v[ins.y], rows))

    def _Ex9E(self, ins):  # SKP Vx
        if self.keypad.is_pressed(self.v[ins.x]):
            self.inc_pc()

    def _ExA1(self, ins):  # SKNP Vx
        if not self.keypad.is_pressed(self.v[ins.x]):
            self.inc_pc()

    def _Fx07(self, ins):  # LD Vx, DT
        self.v[ins.x] = self.dt

    def _Fx0A(self, ins):  # LD Vx, K
        # The key is written into Vx later, by the interpreter, when a key press is seen.  Timers and the display keep
        # running in the meantime.
        self.keypad.begin_wait(ins.x)

    def _Fx15(self, ins):  # LD DT, Vx
        self.dt = self.v[ins.x]

    def _Fx18(self, ins):  # LD ST, Vx
        self.st = self.v[ins.x]

    def _Fx1E(self, ins):  # ADD I, Vx
        # No overflow flag.  RAM accesses mask I down to 12 bits anyway.
        self.i = (self.i + self.v[ins.x]) & 0xFFFF

    def _Fx29(self, ins):  # LD F, Vx
        # Only the lowest nibble selects a digit
        self.i = FONT_LOCATION + FONT_CHAR_SIZE * (self.v[ins.x] & 0xF)

    def _Fx33(self, ins):  # LD B, Vx
        val = self.v[ins.x]
        i = self.i
        self.memory.write8(i, val // 100)             # Most-significant digit
        self.memory.write8(i + 1, (val // 10) % 10)   # Middle digit
        self.memory.write8(i + 2, val % 10)           # Least-significant digit

    def _Fx55(self, ins):  # LD [I], Vx
        # I is left unchanged
        i = self.i

        for reg in range(ins.x + 1):
            self.memory.write8(i + reg, self.v[reg])

    def _Fx65(self, ins):  # LD Vx, [I]
        # I is left unchanged
        i = self.i

        for reg in range(ins.x + 1):
            self.v[reg] = self.memory.read8(i + reg)

#!/usr/bin/env python3

"""
CPU Debugger

If enabled, this will output information before each instruction executed:
    * All 16 of the [V] registers, starting with most significant (Vf) and
      reducing to least significant (V0)
    * I  - Index register
    * DT - Delay timer
    * ST - Sound timer
    * PC - Program counter (address the instruction was fetched from)
    * OP - OpCode number
    * IN - Decoded instruction

If a crash occurs, all of the above will be outputted, with the addition of
the stack contents.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .decoder import Op

# Assembly-style mnemonics, filled in from the decoded instruction's fields
MNEMONICS = {
    Op.CLS:       "CLS",
    Op.RET:       "RET",
    Op.JP:        "JP 0x{nnn:03x}",
    Op.CALL:      "CALL 0x{nnn:03x}",
    Op.SE_I:      "SE V{x:01x}, 0x{kk:02x}",
    Op.SNE_I:     "SNE V{x:01x}, 0x{kk:02x}",
    Op.SE_R:      "SE V{x:01x}, V{y:01x}",
    Op.LD_I:      "LD V{x:01x}, 0x{kk:02x}",
    Op.ADD_I:     "ADD V{x:01x}, 0x{kk:02x}",
    Op.LD_R:      "LD V{x:01x}, V{y:01x}",
    Op.OR:        "OR V{x:01x}, V{y:01x}",
    Op.AND:       "AND V{x:01x}, V{y:01x}",
    Op.XOR:       "XOR V{x:01x}, V{y:01x}",
    Op.ADD_R:     "ADD V{x:01x}, V{y:01x}",
    Op.SUB:       "SUB V{x:01x}, V{y:01x}",
    Op.SHR:       "SHR V{x:01x}",
    Op.SUBN:      "SUBN V{x:01x}, V{y:01x}",
    Op.SHL:       "SHL V{x:01x}",
    Op.SNE_R:     "SNE V{x:01x}, V{y:01x}",
    Op.LD_I_ADDR: "LD I, 0x{nnn:03x}",
    Op.JP_V0:     "JP V0, 0x{nnn:03x}",
    Op.RND:       "RND V{x:01x}, 0x{kk:02x}",
    Op.DRW:       "DRW V{x:01x}, V{y:01x}, 0x{n:01x}",
    Op.SKP:       "SKP V{x:01x}",
    Op.SKNP:      "SKNP V{x:01x}",
    Op.LD_DT_R:   "LD V{x:01x}, DT",
    Op.LD_K:      "LD V{x:01x}, K",
    Op.LD_R_DT:   "LD DT, V{x:01x}",
    Op.LD_R_ST:   "LD ST, V{x:01x}",
    Op.ADD_I_R:   "ADD I, V{x:01x}",
    Op.LD_F:      "LD F, V{x:01x}",
    Op.LD_BCD:    "LD B, V{x:01x}",
    Op.ST_REGS:   "LD [I], V{x:01x}",
    Op.LD_REGS:   "LD V{x:01x}, [I]",
    Op.INVALID:   "???"
}


def describe(instruction):
    return MNEMONICS[instruction.op].format(**instruction._asdict())


class Debugger:
    def __init__(self):
        self.live = False

    def debug(self, cpu, instruction, verbose=False):
        debug_str = (
            "V: 0x" + ("{:02x}" * 16) + " I: 0x{:04x} DT: 0x{:02x} ST: 0x{:02x} PC: 0x{:03x} OP: 0x{:04x} IN: {}"
        ).format(
            *[cpu.v[reg_num] for reg_num in range(15, -1, -1)] +
            [cpu.i, cpu.dt, cpu.st, cpu.debug_pc, instruction.word, describe(instruction)]
        )

        if verbose:
            stack_items = cpu.stack.get_items()
            stack_str = (" 0x{:03x}" * len(stack_items)).format(*stack_items)
            debug_str += ("\nStack:{}").format(stack_str or " (Empty)")

        return debug_str

    def set_live(self, enabled):
        self.live = enabled

    def is_live(self):
        return self.live

    def output(self, cpu, instruction):
        print(self.debug(cpu, instruction))

#!/usr/bin/env python3

"""
Instruction Decoder

Turns a 16-bit instruction word into an Instruction: an operation tag plus
every operand field the word could carry.  Decoding has no side effects and
never looks at CPU state, so it can be tested (and cached) on its own.

Operand fields are always in the same nibble positions:
    nnn = address (lowest 12 bits)
    kk  = byte (lowest 8 bits)
    n   = nibble (lowest 4 bits)
    x/y = register (second and third nibbles)

Instructions are matched through lookup tables, first by leading nibble, then
by an exact bitmask where the leading nibble is shared by several
instructions.  Anything that is not matched is INVALID.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from collections import namedtuple
from enum import Enum


class Op(Enum):
    CLS = "CLS"
    RET = "RET"
    JP = "JP"
    CALL = "CALL"
    SE_I = "SE_I"
    SNE_I = "SNE_I"
    SE_R = "SE_R"
    LD_I = "LD_I"
    ADD_I = "ADD_I"
    LD_R = "LD_R"
    OR = "OR"
    AND = "AND"
    XOR = "XOR"
    ADD_R = "ADD_R"
    SUB = "SUB"
    SHR = "SHR"
    SUBN = "SUBN"
    SHL = "SHL"
    SNE_R = "SNE_R"
    LD_I_ADDR = "LD_I_ADDR"
    JP_V0 = "JP_V0"
    RND = "RND"
    DRW = "DRW"
    SKP = "SKP"
    SKNP = "SKNP"
    LD_DT_R = "LD_DT_R"
    LD_K = "LD_K"
    LD_R_DT = "LD_R_DT"
    LD_R_ST = "LD_R_ST"
    ADD_I_R = "ADD_I_R"
    LD_F = "LD_F"
    LD_BCD = "LD_BCD"
    ST_REGS = "ST_REGS"
    LD_REGS = "LD_REGS"
    INVALID = "INVALID"


Instruction = namedtuple("Instruction", ["op", "x", "y", "n", "kk", "nnn", "word"])


# Nibble helpers


def opcode_group(word):
    return (word & 0xF000) >> 12


def nibble_x(word):
    return (word & 0xF00) >> 8


def nibble_y(word):
    return (word & 0xF0) >> 4


def nibble_n(word):
    return word & 0xF


def byte_kk(word):
    return word & 0xFF


def addr_nnn(word):
    return word & 0xFFF


# Instructions identified by their leading nibble alone
GROUP_OPS = {
    0x1: Op.JP,
    0x2: Op.CALL,
    0x3: Op.SE_I,
    0x4: Op.SNE_I,
    0x6: Op.LD_I,
    0x7: Op.ADD_I,
    0xA: Op.LD_I_ADDR,
    0xB: Op.JP_V0,
    0xC: Op.RND,
    0xD: Op.DRW
}

# Leading nibble 0x0, bitmask 0xFFFF (i.e., exact match)
SYSTEM_OPS = {
    0x00E0: Op.CLS,
    0x00EE: Op.RET
}

# Leading nibble 0x5/0x8/0x9, bitmask 0xF00F
REGISTER_OPS = {
    0x5000: Op.SE_R,
    0x8000: Op.LD_R,
    0x8001: Op.OR,
    0x8002: Op.AND,
    0x8003: Op.XOR,
    0x8004: Op.ADD_R,
    0x8005: Op.SUB,
    0x8006: Op.SHR,
    0x8007: Op.SUBN,
    0x800E: Op.SHL,
    0x9000: Op.SNE_R
}

# Leading nibble 0xE/0xF, bitmask 0xF0FF
MISC_OPS = {
    0xE09E: Op.SKP,
    0xE0A1: Op.SKNP,
    0xF007: Op.LD_DT_R,
    0xF00A: Op.LD_K,
    0xF015: Op.LD_R_DT,
    0xF018: Op.LD_R_ST,
    0xF01E: Op.ADD_I_R,
    0xF029: Op.LD_F,
    0xF033: Op.LD_BCD,
    0xF055: Op.ST_REGS,
    0xF065: Op.LD_REGS
}


def lookup_op(word):
    group = opcode_group(word)

    if group == 0x0:
        return SYSTEM_OPS.get(word, Op.INVALID)

    if group in (0x5, 0x8, 0x9):
        return REGISTER_OPS.get(word & 0xF00F, Op.INVALID)

    if group in (0xE, 0xF):
        return MISC_OPS.get(word & 0xF0FF, Op.INVALID)

    return GROUP_OPS[group]


def decode(word):
    word &= 0xFFFF
    return Instruction(
        lookup_op(word), nibble_x(word), nibble_y(word), nibble_n(word), byte_kk(word), addr_nnn(word), word
    )

#!/usr/bin/env python3

"""
Instruction Decoder

Turns a 16-bit opcode into an Instruction: which of the 35 operations it is,
plus every operand field already sliced out.  Decoding is pure, so it can be
used for disassembly without touching a running machine.

Operand fields are always in the same place in an opcode:
    nnn = address (lowest 12 bits)
    x   = register (second nibble)
    y   = register (third nibble)
    n   = nibble (lowest 4 bits)
    kk  = byte (lowest 8 bits)

The first nibble picks the operation, except where several operations share
it.  In that case, the opcode is masked down to the bits that tell them apart
(0xF0FF for 0xE/0xF, 0xF00F for 0x5/0x8/0x9, and an exact match for 0x0), and
the result is looked up.  Anything left over is unimplemented.
"""

__copyright__ = "Copyright (C) 2024 Chippy Authors"
__license__ = "GNU Affero General Public License v3.0"

from collections import namedtuple
from enum import IntEnum
from .errors import UnimplementedInstruction


class Op(IntEnum):
    # Each value is the opcode with all operand bits masked off
    SYS = 0x0000
    CLS = 0x00E0
    RET = 0x00EE
    JP = 0x1000
    CALL = 0x2000
    SE_BYTE = 0x3000
    SNE_BYTE = 0x4000
    SE_REG = 0x5000
    LD_BYTE = 0x6000
    ADD_BYTE = 0x7000
    LD_REG = 0x8000
    OR = 0x8001
    AND = 0x8002
    XOR = 0x8003
    ADD_REG = 0x8004
    SUB = 0x8005
    SHR = 0x8006
    SUBN = 0x8007
    SHL = 0x800E
    SNE_REG = 0x9000
    LD_I = 0xA000
    JP_V0 = 0xB000
    RND = 0xC000
    DRW = 0xD000
    SKP = 0xE09E
    SKNP = 0xE0A1
    LD_VX_DT = 0xF007
    LD_VX_K = 0xF00A
    LD_DT_VX = 0xF015
    LD_ST_VX = 0xF018
    ADD_I = 0xF01E
    LD_F = 0xF029
    LD_B = 0xF033
    LD_MEM_VX = 0xF055
    LD_VX_MEM = 0xF065


Instruction = namedtuple("Instruction", ["op", "opcode", "nnn", "x", "y", "n", "kk"])

# Masks for first nibbles shared by more than one operation.  Everything else only needs the first nibble.
SHARED_NIBBLE_MASKS = {
    0x0: 0xFFFF,
    0x8: 0xF00F,
    0xE: 0xF0FF,
    0xF: 0xF0FF
}

PATTERNS = {op.value: op for op in Op}

MNEMONICS = {
    Op.SYS:       "SYS 0x{nnn:03x}",
    Op.CLS:       "CLS",
    Op.RET:       "RET",
    Op.JP:        "JP 0x{nnn:03x}",
    Op.CALL:      "CALL 0x{nnn:03x}",
    Op.SE_BYTE:   "SE V{x:01x}, 0x{kk:02x}",
    Op.SNE_BYTE:  "SNE V{x:01x}, 0x{kk:02x}",
    Op.SE_REG:    "SE V{x:01x}, V{y:01x}",
    Op.LD_BYTE:   "LD V{x:01x}, 0x{kk:02x}",
    Op.ADD_BYTE:  "ADD V{x:01x}, 0x{kk:02x}",
    Op.LD_REG:    "LD V{x:01x}, V{y:01x}",
    Op.OR:        "OR V{x:01x}, V{y:01x}",
    Op.AND:       "AND V{x:01x}, V{y:01x}",
    Op.XOR:       "XOR V{x:01x}, V{y:01x}",
    Op.ADD_REG:   "ADD V{x:01x}, V{y:01x}",
    Op.SUB:       "SUB V{x:01x}, V{y:01x}",
    Op.SHR:       "SHR V{x:01x}",
    Op.SUBN:      "SUBN V{x:01x}, V{y:01x}",
    Op.SHL:       "SHL V{x:01x}",
    Op.SNE_REG:   "SNE V{x:01x}, V{y:01x}",
    Op.LD_I:      "LD I, 0x{nnn:03x}",
    Op.JP_V0:     "JP V0, 0x{nnn:03x}",
    Op.RND:       "RND V{x:01x}, 0x{kk:02x}",
    Op.DRW:       "DRW V{x:01x}, V{y:01x}, 0x{n:01x}",
    Op.SKP:       "SKP V{x:01x}",
    Op.SKNP:      "SKNP V{x:01x}",
    Op.LD_VX_DT:  "LD V{x:01x}, DT",
    Op.LD_VX_K:   "LD V{x:01x}, K",
    Op.LD_DT_VX:  "LD DT, V{x:01x}",
    Op.LD_ST_VX:  "LD ST, V{x:01x}",
    Op.ADD_I:     "ADD I, V{x:01x}",
    Op.LD_F:      "LD F, V{x:01x}",
    Op.LD_B:      "LD B, V{x:01x}",
    Op.LD_MEM_VX: "LD [I], V{x:01x}",
    Op.LD_VX_MEM: "LD V{x:01x}, [I]"
}


def decode(opcode):
    first_nibble = opcode >> 12
    op = PATTERNS.get(opcode & SHARED_NIBBLE_MASKS.get(first_nibble, 0xF000))

    if op is None:
        if first_nibble != 0x0:
            raise UnimplementedInstruction("Opcode 0x{:04x} is not a CHIP-8 instruction".format(opcode))

        # Any 0nnn that isn't CLS or RET is a call to a native machine code routine
        op = Op.SYS

    return Instruction(
        op=op,
        opcode=opcode,
        nnn=opcode & 0xFFF,
        x=(opcode & 0xF00) >> 8,
        y=(opcode & 0xF0) >> 4,
        n=opcode & 0xF,
        kk=opcode & 0xFF
    )


def disassemble(instruction):
    return MNEMONICS[instruction.op].format(**instruction._asdict())

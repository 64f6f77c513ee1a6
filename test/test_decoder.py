#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2024 Chippy Authors"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from chippy.decoder import MNEMONICS, Op, decode, disassemble
from chippy.errors import UnimplementedInstruction


class TestDecoder(unittest.TestCase):
    def test_decoder_op_count(self):
        self.assertEqual(35, len(Op))
        self.assertEqual(set(Op), set(MNEMONICS))

    def test_decoder_fields(self):
        instruction = decode(0xD4A7)
        self.assertEqual(Op.DRW, instruction.op)
        self.assertEqual(0xD4A7, instruction.opcode)
        self.assertEqual(0x4A7, instruction.nnn)
        self.assertEqual(0x4, instruction.x)
        self.assertEqual(0xA, instruction.y)
        self.assertEqual(0x7, instruction.n)
        self.assertEqual(0xA7, instruction.kk)

    def test_decoder_every_op(self):
        samples = {
            0x0123: Op.SYS, 0x00E0: Op.CLS, 0x00EE: Op.RET, 0x1ABC: Op.JP, 0x2ABC: Op.CALL,
            0x3A12: Op.SE_BYTE, 0x4A12: Op.SNE_BYTE, 0x5AB0: Op.SE_REG, 0x6A12: Op.LD_BYTE, 0x7A12: Op.ADD_BYTE,
            0x8AB0: Op.LD_REG, 0x8AB1: Op.OR, 0x8AB2: Op.AND, 0x8AB3: Op.XOR, 0x8AB4: Op.ADD_REG,
            0x8AB5: Op.SUB, 0x8AB6: Op.SHR, 0x8AB7: Op.SUBN, 0x8ABE: Op.SHL, 0x9AB0: Op.SNE_REG,
            0xAABC: Op.LD_I, 0xBABC: Op.JP_V0, 0xCA12: Op.RND, 0xDAB5: Op.DRW, 0xEA9E: Op.SKP,
            0xEAA1: Op.SKNP, 0xFA07: Op.LD_VX_DT, 0xFA0A: Op.LD_VX_K, 0xFA15: Op.LD_DT_VX, 0xFA18: Op.LD_ST_VX,
            0xFA1E: Op.ADD_I, 0xFA29: Op.LD_F, 0xFA33: Op.LD_B, 0xFA55: Op.LD_MEM_VX, 0xFA65: Op.LD_VX_MEM
        }

        for opcode, op in samples.items():
            self.assertEqual(op, decode(opcode).op, hex(opcode))

        self.assertEqual(set(Op), set(samples.values()))

    def test_decoder_zero_page(self):
        # Everything starting with 0x0 other than CLS and RET is a machine code call
        for opcode in 0x0000, 0x00E1, 0x00EF, 0x0FFF:
            self.assertEqual(Op.SYS, decode(opcode).op)

    def test_decoder_5xyn_9xyn(self):
        # The low nibble is not checked for register comparisons
        for opcode in 0x5121, 0x5AB8, 0x512F:
            self.assertEqual(Op.SE_REG, decode(opcode).op)

        for opcode in 0x9121, 0x9AB8, 0x912F:
            self.assertEqual(Op.SNE_REG, decode(opcode).op)

    def test_decoder_unimplemented(self):
        for opcode in 0x8008, 0x800F, 0xE09F, 0xE0A2, 0xF000, 0xF100, 0xFFFF:
            with self.assertRaises(UnimplementedInstruction) as context:
                decode(opcode)

            self.assertIn("0x{:04x}".format(opcode), str(context.exception))

    def test_disassemble(self):
        self.assertEqual("LD Va, 0x02", disassemble(decode(0x6A02)))
        self.assertEqual("ADD Va, 0x05", disassemble(decode(0x7A05)))
        self.assertEqual("DRW V1, V2, 0x5", disassemble(decode(0xD125)))
        self.assertEqual("JP V0, 0x3ff", disassemble(decode(0xB3FF)))
        self.assertEqual("LD [I], Vf", disassemble(decode(0xFF55)))
        self.assertEqual("CLS", disassemble(decode(0x00E0)))

#!/usr/bin/env python3

"""
CPU Emulator (CHIP-8)

Like a real computer, this is where most of the processing happens.  The CPU
owns every other part of the machine (RAM, stack, framebuffer, timers and key
state), and nothing else changes them while a program is running.

Execution is driven by frames.  For every display refresh, a fixed batch of
instructions is run, and then the delay and sound timers count down once.
Each instruction either completes fully or raises a MachineFault.  A fault
stops the batch immediately, halts the CPU, and leaves everything as it was at
the point of failure, so it can be examined with the debugger.

Waiting for a key (Fx0A) doesn't block.  If no key is held, the program counter
is wound back so the same instruction runs again, and 'awaiting_key' is set.
The frame driver ends the batch early while the flag is set, and the wait is
retried at the start of the next frame.
"""

__copyright__ = "Copyright (C) 2024 Chippy Authors"
__license__ = "GNU Affero General Public License v3.0"

from time import perf_counter
from random import Random
from .constants import (
    APP_INTRO, DEFAULT_CYCLES_PER_FRAME, DISPLAY_FREQ, FONT_LOCATION, GLYPH_SIZE, INDEX_BITMASK, NUM_REGISTERS
)
from .decoder import Op, decode, disassemble
from .errors import MachineFault, UnimplementedInstruction

CPU_ENDIAN = "big"  # CHIP-8 is big-endian
PC_BITMASK = 0xFFFF
FRAME_INTERVAL = 1.0 / DISPLAY_FREQ


class CPU:
    def __init__(self, ram, stack, framebuffer, timers, keystate, debugger, cycles_per_frame=None, rng=None):
        self.ram = ram
        self.stack = stack
        self.framebuffer = framebuffer
        self.timers = timers
        self.keystate = keystate
        self.debugger = debugger
        self.live_debug = self.debugger.is_live()
        self.cycles_per_frame = DEFAULT_CYCLES_PER_FRAME if cycles_per_frame is None else cycles_per_frame
        self.rng = Random() if rng is None else rng

        # One handler for each decoded operation.  Checked for completeness in the tests.
        self.instructions = {
            Op.SYS:       self._0nnn,
            Op.CLS:       self._00E0,
            Op.RET:       self._00EE,
            Op.JP:        self._1nnn,
            Op.CALL:      self._2nnn,
            Op.SE_BYTE:   self._3xkk,
            Op.SNE_BYTE:  self._4xkk,
            Op.SE_REG:    self._5xy0,
            Op.LD_BYTE:   self._6xkk,
            Op.ADD_BYTE:  self._7xkk,
            Op.LD_REG:    self._8xy0,
            Op.OR:        self._8xy1,
            Op.AND:       self._8xy2,
            Op.XOR:       self._8xy3,
            Op.ADD_REG:   self._8xy4,
            Op.SUB:       self._8xy5,
            Op.SHR:       self._8xy6,
            Op.SUBN:      self._8xy7,
            Op.SHL:       self._8xyE,
            Op.SNE_REG:   self._9xy0,
            Op.LD_I:      self._Annn,
            Op.JP_V0:     self._Bnnn,
            Op.RND:       self._Cxkk,
            Op.DRW:       self._Dxyn,
            Op.SKP:       self._Ex9E,
            Op.SKNP:      self._ExA1,
            Op.LD_VX_DT:  self._Fx07,
            Op.LD_VX_K:   self._Fx0A,
            Op.LD_DT_VX:  self._Fx15,
            Op.LD_ST_VX:  self._Fx18,
            Op.ADD_I:     self._Fx1E,
            Op.LD_F:      self._Fx29,
            Op.LD_B:      self._Fx33,
            Op.LD_MEM_VX: self._Fx55,
            Op.LD_VX_MEM: self._Fx65
        }

        # Initialise registers
        self.v = memoryview(bytearray(NUM_REGISTERS))  # Bytearrays are mutable, so register updates are fast
        self.i = 0  # Index register

        # Initialise program counter and current instruction
        self.pc = 0
        self.debug_pc = 0
        self.opcode = None
        self.instruction = None

        # Execution state
        self.awaiting_key = False
        self.fault = None
        self.ops_executed = 0

    def reset(self, start_location):
        self.pc = start_location
        self.awaiting_key = False
        self.fault = None

    def run(self):
        # Host loop.  Runs until the Inputs plugin reports a quit, or a fault is raised.
        inputs = self.keystate.inputs
        next_perf_report_time = 0
        perf_counter_fps = 0
        perf_counter_ops = self.ops_executed

        while True:
            this_time = perf_counter()  # Do this first for maximum precision

            # Performance counters
            if this_time >= next_perf_report_time:
                next_perf_report_time = int(this_time) + 1.0
                self.framebuffer.report_perf(perf_counter_fps, self.ops_executed - perf_counter_ops)
                perf_counter_ops = self.ops_executed
                perf_counter_fps = 0

            if inputs.process_messages():
                return

            try:
                self.run_frame()
            finally:
                # Show the screen as it was at the point of any crash, too
                self.framebuffer.refresh_display()

            perf_counter_fps += 1
            next_time = this_time + FRAME_INTERVAL

            while perf_counter() < next_time:  # Unfortunately we have to do this to get the timing right
                pass

    def run_frame(self):
        # Frame tick entry point: a batch of instructions, then the timers
        if self.fault is not None:
            raise self.fault

        for _ in range(self.cycles_per_frame):
            self.execute_one()

            if self.awaiting_key:
                # Nothing will change until the host samples the keyboard again
                break

        self.timers.tick()

    def execute_one(self):
        if self.fault is not None:
            raise self.fault

        # Keep track of the program counter before altering it in any way for debugging purposes
        self.debug_pc = self.pc
        self.opcode = None

        try:
            self.opcode = self.fetch()
            self.inc_pc()  # Program counter updates after fetch, but before execute
            self.decode_exec()
        except MachineFault as fault:
            # The halted CPU points at the instruction that faulted
            self.pc = self.debug_pc
            self.fault = fault.attach(self.debug_pc, self.opcode)
            raise

        self.ops_executed += 1

    def fetch(self):
        return int.from_bytes(self.ram.read_block(self.pc, 2), CPU_ENDIAN, signed=False)

    def decode_exec(self):
        try:
            self.instruction = decode(self.opcode)
        except UnimplementedInstruction:
            self._opcode_unsupported("is not a CHIP-8 instruction")

        if self.live_debug:
            self.debugger.output(self, disassemble(self.instruction))

        self.instructions[self.instruction.op]()

    def inc_pc(self):
        self.pc = (self.pc + 2) & PC_BITMASK

    def dec_pc(self):
        # Only used to re-run instructions (i.e. waiting for a keypress)
        self.pc = (self.pc - 2) & PC_BITMASK

    # Operand fields for the instruction being executed.  Sliced out once by the decoder.
    @property
    def vx(self):
        return self.instruction.x

    @property
    def vy(self):
        return self.instruction.y

    @property
    def addr(self):
        return self.instruction.nnn

    @property
    def byte(self):
        return self.instruction.kk

    @property
    def nibble(self):
        return self.instruction.n

    def _opcode_unsupported(self, reason):
        raise UnimplementedInstruction(
            (
                "Emulation halted.\n\n" +
                "{}Debug info:\n" +
                "{}\n\nOpcode 0x{:04x} at address 0x{:03x} {}."
            ).format(
                APP_INTRO, self.debugger.debug(self, "???", verbose=True), self.opcode, self.debug_pc, reason
            ),
            address=self.debug_pc,
            opcode=self.opcode
        ) from None

    def _0nnn(self):  # SYS addr
        self._opcode_unsupported("calls a machine code routine, which cannot be emulated")

    def _00E0(self):  # CLS
        self.framebuffer.clear()

    def _00EE(self):  # RET
        self.pc = self.stack.pop()

    def _1nnn(self):  # JP addr
        self.pc = self.addr

    def _2nnn(self):  # CALL addr
        # The return address is the instruction after this one, as the PC has already moved on
        self.stack.push(self.pc)
        self.pc = self.addr

    def _3xkk(self):  # SE Vx, byte
        if self.v[self.vx] == self.byte:
            self.inc_pc()

    def _4xkk(self):  # SNE Vx, byte
        if self.v[self.vx] != self.byte:
            self.inc_pc()

    def _5xy0(self):  # SE Vx, Vy
        if self.v[self.vx] == self.v[self.vy]:
            self.inc_pc()

    def _6xkk(self):  # LD Vx, byte
        self.v[self.vx] = self.byte

    def _7xkk(self):  # ADD Vx, byte
        # No carry flag for this one
        vx = self.vx
        self.v[vx] = (self.v[vx] + self.byte) & 0xFF

    def _8xy0(self):  # LD Vx, Vy
        self.v[self.vx] = self.v[self.vy]

    def _8xy1(self):  # OR Vx, Vy
        self.v[self.vx] |= self.v[self.vy]

    def _8xy2(self):  # AND Vx, Vy
        self.v[self.vx] &= self.v[self.vy]

    def _8xy3(self):  # XOR Vx, Vy
        self.v[self.vx] ^= self.v[self.vy]

    def _8xy4(self):  # ADD Vx, Vy
        val = self.v[self.vx] + self.v[self.vy]
        self.v[self.vx] = val & 0xFF
        self.v[0xF] = int(val > 0xFF)  # Vf is set when carrying

    def _post_8xy5_8xy7(self, val):  # Post-SUB/SUBN
        self.v[self.vx] = val & 0xFF
        # Vf is set when NOT borrowing, and this should happen AFTER Vx is set, as sometimes Vf is specified in the
        # parameters
        self.v[0xF] = int(val >= 0)

    def _8xy5(self):  # SUB Vx, Vy
        self._post_8xy5_8xy7(self.v[self.vx] - self.v[self.vy])

    def _8xy6(self):  # SHR Vx
        # Vy is ignored
        val = self.v[self.vx]
        self.v[self.vx] = val >> 1
        self.v[0xF] = val & 1

    def _8xy7(self):  # SUBN Vx, Vy
        self._post_8xy5_8xy7(self.v[self.vy] - self.v[self.vx])

    def _8xyE(self):  # SHL Vx
        # Vy is ignored
        val = self.v[self.vx]
        self.v[self.vx] = (val << 1) & 0xFF
        self.v[0xF] = val >> 7

    def _9xy0(self):  # SNE Vx, Vy
        if self.v[self.vx] != self.v[self.vy]:
            self.inc_pc()

    def _Annn(self):  # LD I, addr
        self.i = self.addr

    def _Bnnn(self):  # JP V0, addr
        # Not masked.  A jump past the top of RAM faults on the next fetch.
        self.pc = self.addr + self.v[0x0]

    def _Cxkk(self):  # RND Vx, byte
        # The ANDing here is intentional.  This is not a random number between 0 and 'byte' inclusive.
        self.v[self.vx] = self.rng.randint(0, 0xFF) & self.byte

    def _Dxyn(self):  # DRW Vx, Vy, nibble
        # Sprite data is fetched first, so a bad address faults before anything is drawn
        sprite_rows = self.ram.read_block(self.i, self.nibble)
        vx_pos = self.v[self.vx]
        vy_pos = self.v[self.vy]
        # Positions are read before Vf is touched, in case Vf holds one of them
        self.v[0xF] = int(self.framebuffer.draw_sprite(vx_pos, vy_pos, sprite_rows))

    def _Ex9E(self):  # SKP Vx
        self.keystate.refresh()

        if self.keystate.is_pressed(self.v[self.vx]):
            self.inc_pc()

    def _ExA1(self):  # SKNP Vx
        self.keystate.refresh()

        if not self.keystate.is_pressed(self.v[self.vx]):
            self.inc_pc()

    def _Fx07(self):  # LD Vx, DT
        self.v[self.vx] = self.timers.delay

    def _Fx0A(self):  # LD Vx, K
        if self.keystate.refresh():
            self.v[self.vx] = self.keystate.key
            self.awaiting_key = False
        else:
            # We need to come back here, because no key is pressed
            self.dec_pc()
            self.awaiting_key = True

    def _Fx15(self):  # LD DT, Vx
        self.timers.delay = self.v[self.vx]

    def _Fx18(self):  # LD ST, Vx
        self.timers.sound = self.v[self.vx]

    def _Fx1E(self):  # ADD I, Vx
        self.i = (self.i + self.v[self.vx]) & INDEX_BITMASK

    def _Fx29(self):  # LD F, Vx
        # Only the low nibble picks a glyph
        self.i = FONT_LOCATION + GLYPH_SIZE * (self.v[self.vx] & 0xF)

    def _Fx33(self):  # LD B, Vx
        val = self.v[self.vx]
        # Hundreds, tens, ones.  Written as one block so nothing is stored if it doesn't all fit.
        self.ram.write_block(self.i, bytes((val // 100, (val // 10) % 10, val % 10)))

    def _Fx55(self):  # LD [I], Vx
        # Ensure with +1s that the final register is copied.  I is left alone.
        self.ram.write_block(self.i, self.v[:self.vx + 1])

    def _Fx65(self):  # LD Vx, [I]
        vx = self.vx
        self.v[:vx + 1] = self.ram.read_block(self.i, vx + 1)

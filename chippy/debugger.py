#!/usr/bin/env python3

"""
CPU Debugger

If enabled, this will output information before each instruction executed:
    * All 16 of the [V] registers, starting with most significant (Vf) and
      reducing to least significant (V0)
    * I  - Index register
    * DT - Delay timer
    * ST - Sound timer
    * PC - Program counter
    * OP - OpCode number
    * IN - Decoded instruction

If a crash occurs, all of the above will be outputted, with the addition of:
    * SP    - Stack pointer
    * Stack - Stack contents
    * Key   - Key-input state, and whether the CPU is waiting for a key
"""

__copyright__ = "Copyright (C) 2024 Chippy Authors"
__license__ = "GNU Affero General Public License v3.0"


class Debugger:
    def __init__(self):
        self.live = False

    def debug(self, cpu, instruction, verbose=False):
        opcode_str = "----" if cpu.opcode is None else "{:04x}".format(cpu.opcode)
        debug_str = (
            "V: 0x" + ("{:02x}" * 16) + " I: 0x{:04x} DT: 0x{:02x} ST: 0x{:02x} PC: 0x{:03x} OP: 0x{} IN: {}"
        ).format(
            *[cpu.v[reg_num] for reg_num in range(15, -1, -1)] +
            [cpu.i, cpu.timers.delay, cpu.timers.sound, cpu.debug_pc, opcode_str, instruction]
        )

        if verbose:
            stack_items = cpu.stack.get_items()
            stack_str = (" 0x{:03x}" * len(stack_items)).format(*stack_items)
            debug_str += "\nSP: {}".format(cpu.stack.sp)
            debug_str += "\nStack:{}".format(stack_str or " (Empty)")
            keystate = cpu.keystate
            debug_str += "\nKey: {}{}".format(
                "0x{:01x}".format(keystate.key) if keystate.asserted else "(None)",
                " (Waiting)" if cpu.awaiting_key else ""
            )

        return debug_str

    def set_live(self, enabled):
        self.live = enabled

    def is_live(self):
        return self.live

    def output(self, cpu, instruction):
        print(self.debug(cpu, instruction))

#!/usr/bin/env python3

"""
Machine Faults

Anything raised while an instruction is executing derives from MachineFault.
The CPU stops on the first fault, and the state of every component is left
exactly as it was when the fault occurred, so it can be inspected.

Errors raised while setting the machine up (loading a program, picking a
renderer) are not faults, as no instruction has run yet.
"""

__copyright__ = "Copyright (C) 2024 Chippy Authors"
__license__ = "GNU Affero General Public License v3.0"


class MachineFault(Exception):
    def __init__(self, message, address=None, opcode=None):
        super().__init__(message)
        self.message = message
        self.address = address  # Address of the faulting instruction, if known
        self.opcode = opcode    # None if the fault happened while fetching it

    def attach(self, address, opcode):
        # Components don't know which instruction touched them, so the CPU fills this in afterwards
        if self.address is None:
            self.address = address
            self.opcode = opcode

        return self

    def __str__(self):
        if self.address is None:
            return self.message

        if self.opcode is None:
            return "{} (fetching from address 0x{:03x})".format(self.message, self.address)

        return "{} (opcode 0x{:04x} at address 0x{:03x})".format(self.message, self.opcode, self.address)


class RAMError(MachineFault):
    pass


class AddressOutOfRange(RAMError):
    pass


class StackError(MachineFault):
    pass


class StackOverflow(StackError):
    pass


class StackUnderflow(StackError):
    pass


class CPUError(MachineFault):
    pass


class UnimplementedInstruction(CPUError):
    pass


class ProgramLoadError(Exception):
    pass

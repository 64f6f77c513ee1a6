#!/usr/bin/env python3

"""
Main Startup Module

Simply call main(args) to start the emulator, replacing args with a dictionary
of options.  This can be done via the Terminal or GUI.

All options must be supplied.  Defaults can be specified with a 'None'.

To build a machine without any host loop (e.g. for tests or another front
end), call create_cpu() with a program image and plugins of your choice.
"""

__copyright__ = "Copyright (C) 2024 Chippy Authors"
__license__ = "GNU Affero General Public License v3.0"

from .constants import APP_INTRO, APP_COPYRIGHT, DEFAULT_START, FONT_LOCATION, FONT_SIZE, MEM_SIZE, STACK_DEPTH
from .cpu import CPU
from .debugger import Debugger
from .framebuffer import Framebuffer
from .hostio import Loader
from .keystate import KeyState
from .ram import RAM
from .stack import Stack
from .timers import Timers


class StartupError(Exception):
    pass


def create_cpu(program, inputs, renderer, start_address=None, cycles_per_frame=None, timer_reload=None,
               debugger=None, rng=None):
    start_address = DEFAULT_START if start_address is None else start_address
    loader = Loader()

    # Allocate memory and write the system font into the bottom of it, where programs can't overwrite it
    ram = RAM()
    ram.resize(MEM_SIZE)
    ram.write_block(FONT_LOCATION, loader.load_system_font())
    ram.protect(FONT_LOCATION + FONT_SIZE)

    # Write the program into RAM.  Raises ProgramLoadError if it doesn't fit.
    ram.load_image(start_address, program)

    if debugger is None:
        debugger = Debugger()

    cpu = CPU(
        ram,
        Stack(STACK_DEPTH),  # Non-shared CPU stack in host memory
        Framebuffer(renderer),
        Timers(timer_reload),
        KeyState(inputs),
        debugger,
        cycles_per_frame=cycles_per_frame,
        rng=rng
    )

    cpu.reset(start_address)
    return cpu


def main(args):
    print("".join((APP_INTRO, APP_COPYRIGHT)))
    opt_renderer = args["renderer"]

    if opt_renderer is None or opt_renderer == "pygame":
        # pylint: disable=unused-import, import-outside-toplevel, raise-missing-from
        try:
            import pygame  # noqa: F401
        except ImportError:
            raise StartupError(
                "PyGame does not appear to be installed.  Install it, or use the null renderer."
            )
        else:
            from .inputs.i_pygame import Inputs
            from .renderers.r_pygame import Renderer
    elif opt_renderer == "null":
        # pylint: disable=import-outside-toplevel
        from .inputs.i_null import Inputs
        from .renderers.r_null import Renderer
    else:
        raise StartupError("Unknown renderer '{}'".format(opt_renderer))

    # Read the program before any window is opened, so a bad file fails quietly
    program = Loader().load_program(args["filename"])

    renderer = Renderer(scale=args["scale"])

    try:
        inputs = Inputs(args["keymap"], renderer)

        try:
            # Set up debugger and live output if necessary
            debugger = Debugger()
            debugger.set_live(args["debug"])

            cpu = create_cpu(
                program, inputs, renderer,
                start_address=args["start"],
                cycles_per_frame=args["cycles"],
                timer_reload=args["timer_reload"],
                debugger=debugger
            )
            cpu.run()
        finally:
            inputs.shutdown()
    finally:
        # The CPU has quit, so shut down the rendering framework.  __del__ cannot be relied upon when using PyPy
        renderer.shutdown()

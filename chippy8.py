#!/usr/bin/env python3

__author__ = "Chippy Authors"
__copyright__ = "Copyright (C) 2024 Chippy Authors"
__license__ = "GNU Affero General Public License v3.0"
__version__ = "0.3.0"

from argparse import ArgumentParser, ArgumentTypeError
from chippy import main
from chippy.constants import DEFAULT_CYCLES_PER_FRAME, DEFAULT_KEYMAP, DEFAULT_START


def timer_value(value):
    reload_value = int(value)

    if not 0 <= reload_value <= 0xFF:
        raise ArgumentTypeError("timer reload must be between 0 and 255, got {}".format(reload_value))

    return reload_value


def parse_args(argv=None):
    parser = ArgumentParser()
    parser.add_argument("filename", help="program to execute (normally ending in .ch8 or .c8)")
    parser.add_argument(
        "-s", "--start", type=lambda value: int(value, 0), default=DEFAULT_START,
        help="load and start the program at this address, in decimal or 0x-prefixed hex (default 0x200)"
    )
    parser.add_argument(
        "-c", "--cycles", type=int, default=DEFAULT_CYCLES_PER_FRAME,
        help="set the number of instructions executed per 60Hz frame (default {})".format(DEFAULT_CYCLES_PER_FRAME)
    )
    parser.add_argument(
        "-r", "--renderer", choices=["pygame", "null"], default="pygame",
        help="set the rendering and input systems (pygame by default)"
    )
    parser.add_argument(
        "--scale", type=int,
        help="set the window width in PyGame mode (default 640)"
    )
    parser.add_argument(
        "-k", "--keymap", default=DEFAULT_KEYMAP,
        help="redefine the 16 keyscan codes for keys 0-F.  Separate each decimal with a comma"
    )
    parser.add_argument(
        "-t", "--timer_reload", type=timer_value,
        help="reload the delay and sound timers with this value (0-255) once they reach zero (by default they stay at zero)"
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", default=False,
        help="enable live debug output.  Slows CPU execution"
    )
    return parser.parse_args(argv)  # Can call sys.exit(2) if args are incorrect


if __name__ == "__main__":
    args = vars(parse_args())
    # It is possible to start the emulator from a GUI by calling this with a dictionary
    main(args)

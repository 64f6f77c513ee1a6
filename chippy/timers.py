#!/usr/bin/env python3

"""
Delay and Sound Timers

Both timers are 8-bit counters which count down by one every frame, i.e. at
60Hz.  The CPU ticks them once after each batch of instructions, rather than
after every instruction, so the number of instructions per frame decides how
much work a program can do between ticks.

The sound timer only decays here.  Nothing is played while it is non-zero.

By default, a timer which reaches zero stays at zero until it is written
again.  Some interpreters instead reload a timer once it is found at zero;
passing 'reload_value' (e.g. 60) enables this.  The same value is then also
used to start both timers at power-on.
"""

__copyright__ = "Copyright (C) 2024 Chippy Authors"
__license__ = "GNU Affero General Public License v3.0"


class Timers:
    def __init__(self, reload_value=None):
        if reload_value is not None and not 0 <= reload_value <= 0xFF:
            raise ValueError("Timer reload value {} does not fit in 8 bits".format(reload_value))

        self.reload_value = reload_value
        start_value = 0 if reload_value is None else reload_value
        self.delay = start_value
        self.sound = start_value

    def tick(self):
        self.delay = self._decay(self.delay)
        self.sound = self._decay(self.sound)

    def _decay(self, value):
        if value > 0:
            return value - 1

        if self.reload_value is None:
            return 0

        return self.reload_value

    def is_sounding(self):
        return self.sound > 0

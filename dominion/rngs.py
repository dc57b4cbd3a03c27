"""Multi-stream Lehmer random number generator."""

from __future__ import annotations

import time
from typing import Callable, Optional

MODULUS = 2147483647
MULTIPLIER = 48271
CHECK = 399268537
STREAMS = 256
A256 = 22925
DEFAULT = 123456789


def _lehmer_step(value: int, multiplier: int) -> int:
    q, r = divmod(MODULUS, multiplier)
    t = multiplier * (value % q) - r * (value // q)
    return t if t > 0 else t + MODULUS


class RandomStreams:
    """256 independent streams of uniform numbers in (0, 1)."""

    def __init__(self, ask: Optional[Callable[[str], str]] = None) -> None:
        self._seeds = [DEFAULT] + [0] * (STREAMS - 1)
        self._stream = 0
        self._initialized = False
        self._ask = ask if ask is not None else input

    @property
    def stream(self) -> int:
        """Index of the current stream."""
        return self._stream

    def random(self) -> float:
        """Advance the current stream and return a number in (0, 1)."""
        value = _lehmer_step(self._seeds[self._stream], MULTIPLIER)
        self._seeds[self._stream] = value
        return value / MODULUS

    def plant_seeds(self, x: int) -> None:
        """Seed stream 0 with x and derive every other stream from it."""
        self._initialized = True
        current = self._stream
        self.select_stream(0)
        self.put_seed(x)
        self._stream = current
        for j in range(1, STREAMS):
            self._seeds[j] = _lehmer_step(self._seeds[j - 1], A256)

    def put_seed(self, x: int) -> None:
        """Set the current stream's state.

        A positive x is reduced modulo the modulus, a negative one is
        replaced by the clock, and zero asks for a seed interactively.
        """
        if x > 0:
            x %= MODULUS
        if x < 0:
            x = int(time.time()) % MODULUS
        while not 0 < x < MODULUS:
            reply = self._ask("\nEnter a positive integer seed (9 digits or less) >> ")
            try:
                x = int(reply.strip())
            except ValueError:
                x = 0
            if not 0 < x < MODULUS:
                print("\nInput out of range ... try again")
        self._seeds[self._stream] = x

    def get_seed(self) -> int:
        """Return the current stream's state."""
        return self._seeds[self._stream]

    def select_stream(self, index: int) -> None:
        """Make stream ``index`` (taken modulo 256) the current one."""
        self._stream = index % STREAMS
        if not self._initialized and self._stream != 0:
            self.plant_seeds(DEFAULT)

    def self_test(self) -> bool:
        """Check the generator against its known reference values."""
        self.select_stream(0)
        self.put_seed(1)
        for _ in range(10000):
            self.random()
        ok = self.get_seed() == CHECK
        self.select_stream(1)
        self.plant_seeds(1)
        return ok and self.get_seed() == A256
"""Search a seeded stream for a given nine-digit draw."""

from __future__ import annotations

import re
import sys
from typing import Optional, Sequence

from dominion.rngs import MODULUS, RandomStreams

SCALE = 1_000_000_000


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def find_target(seed: int, target: int) -> int:
    """Return how many draws stream 1, seeded with ``seed``, needs to hit ``target``.

    Each draw is ``floor(random() * 10**9)``.  Raises ValueError if the
    target can never appear.
    """
    if not 0 <= target < SCALE:
        raise ValueError(f"target {target} is outside 0..{SCALE - 1}")
    rng = RandomStreams()
    rng.select_stream(1)
    rng.put_seed(seed)
    for draws in range(1, MODULUS):
        if int(rng.random() * SCALE) == target:
            return draws
    raise ValueError(f"target {target} never occurs for seed {seed}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: ``seedsearch SEED TARGET``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("Not enough inputs:  seed target")
        return 1
    try:
        find_target(_atoi(args[0]), _atoi(args[1]))
    except ValueError as exc:
        print(exc)
        return 1
    print("Found the bug!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
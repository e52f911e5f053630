"""Injected randomness for combat resolution.

Every draw the engine makes is a uniform float in [0, 1). Anything with a
``random()`` method satisfies :class:`RandomSource`, which includes
``numpy.random.Generator``. Production wiring builds a numpy generator once
per match; tests pass a scripted source.
"""

from typing import Optional, Protocol

import numpy as np


class RandomSource(Protocol):
    """Sequential source of uniform floats in [0, 1)."""

    def random(self) -> float: ...


def create_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the match random source.

    Args:
        seed: Fixed seed for reproducible matches, or None to seed from OS entropy

    Returns:
        A numpy Generator (PCG64)
    """
    return np.random.default_rng(seed)


def draw_offset(rng: RandomSource, spread: int) -> int:
    """Draw an integer uniformly from [-spread, +spread] using one float."""
    width = 2 * spread + 1
    # Guard against sources that return exactly 1.0
    step = min(int(rng.random() * width), width - 1)
    return step - spread

"""Small numeric helpers."""

from __future__ import annotations

import random
from typing import Optional


def random_float(
    minimum: float, maximum: float, rng: Optional[random.Random] = None
) -> float:
    """Return a uniformly distributed float between minimum and maximum."""
    source = rng if rng is not None else random
    return minimum + (maximum - minimum) * source.random()
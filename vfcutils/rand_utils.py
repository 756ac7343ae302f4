"""Random number helpers backed by a lazily seeded generator."""

from __future__ import annotations

import random
import time

_rng = random.Random()
_seeded = False


def seed() -> None:
    """Seed the generator from the current time."""
    global _seeded
    _seeded = True
    _rng.seed(int(time.time()))


def _ensure_seeded() -> None:
    if not _seeded:
        seed()


def rand_int(min_value: int, max_value: int) -> int:
    """Return a random integer in [min_value, max_value].

    When max_value is not greater than min_value, min_value is returned.
    """
    _ensure_seeded()
    if max_value <= min_value:
        return min_value
    return _rng.randint(min_value, max_value)


def rand_float(min_value: float, max_value: float) -> float:
    """Return a random float between min_value and max_value.

    When max_value is not greater than min_value, min_value is returned.
    """
    _ensure_seeded()
    if max_value <= min_value:
        return min_value
    return min_value + _rng.random() * (max_value - min_value)
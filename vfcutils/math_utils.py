"""Small numeric helpers and a two-dimensional vector."""

from __future__ import annotations

from dataclasses import dataclass


def clampf(number: float, min_value: float, max_value: float) -> float:
    """Clamp number into [min_value, max_value]."""
    if number < min_value:
        return min_value
    if number > max_value:
        return max_value
    return number


def clamp(number: int, min_value: int, max_value: int) -> float:
    """Clamp integer arguments (truncated toward zero) and return a float."""
    return float(clampf(int(number), int(min_value), int(max_value)))


def maximum(f1: float, f2: float) -> float:
    """Return the larger of two values, the second when they are equal."""
    return f1 if f1 > f2 else f2


def minimum(f1: float, f2: float) -> float:
    """Return the smaller of two values, the second when they are equal."""
    return f1 if f1 < f2 else f2


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def scale(self, factor: float) -> Vec2:
        """Return this vector multiplied by factor."""
        return Vec2(self.x * factor, self.y * factor)
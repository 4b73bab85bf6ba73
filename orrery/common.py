"""Shared constants, numeric helpers and small value types."""

from __future__ import annotations

from dataclasses import dataclass

AU = 150_000_000
"""Kilometres in one astronomical unit."""

PI = 3.14159265359
EPSILON = 1.0e-6


def round_up(alfa: float) -> float:
    """Return ``alfa``, or exactly zero when it is within EPSILON of zero."""
    if abs(alfa) < EPSILON:
        return 0.0
    return alfa


def deg_to_rad(alfa: float) -> float:
    """Convert degrees to radians."""
    return alfa * PI / 180


def double_to_string(value: float, sign: bool, before_point: int, after_point: int) -> str:
    """Format ``value`` as fixed-point text.

    The integer part is right-aligned in a field of ``before_point`` digits,
    preceded by a sign character ('-', '+' when ``sign`` is set, otherwise a
    space). The fraction is truncated, not rounded, to ``after_point`` digits.
    """
    if value < 0:
        sign_char = "-"
        value = -value
    elif sign:
        sign_char = "+"
    else:
        sign_char = " "

    int_part = int(value)
    int_digits = str(int_part)
    padding = " " * max(0, before_point - len(int_digits))

    fract_part = value - float(int_part)
    fract_digits = []
    for _ in range(after_point):
        fract_part *= 10
        digit = int(fract_part)
        fract_part -= float(digit)
        fract_digits.append(str(digit))

    return f"{padding}{sign_char}{int_digits}.{''.join(fract_digits)}"


@dataclass(frozen=True)
class Position:
    """A point on the orbital plane, in astronomical units."""

    x: float
    y: float

    def __str__(self) -> str:
        return (
            "{"
            + double_to_string(self.x, False, 2, 4)
            + ", "
            + double_to_string(self.y, False, 2, 4)
            + " }"
        )


@dataclass(frozen=True)
class Distance:
    """A distance held in astronomical units."""

    au: float = 0.0

    @classmethod
    def from_km(cls, distance: float) -> Distance:
        """Build a distance from a length in kilometres."""
        return cls(distance / AU)
"""Celestial bodies: fixed stars and bodies on circular orbits."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from orrery.common import Distance, Position, deg_to_rad
from orrery.date import Date, difference


class Direction(Enum):
    """Sense of revolution around the parent body."""

    FORWARD = "forward"
    REVERSE = "reverse"


class Body(ABC):
    """A named body whose position depends on the date."""

    name: str
    radius: int
    parent: Body | None
    distance: Distance

    @abstractmethod
    def time(self, date: Date) -> int:
        """Return the days elapsed since the body's reference date."""

    @abstractmethod
    def position(self, date: Date) -> Position:
        """Return the body's position on ``date``."""


@dataclass(eq=False)
class Star(Body):
    """A body that stays at a fixed position and has no parent."""

    name: str
    radius: int = 0
    pos: Position = Position(0.0, 0.0)
    parent: None = field(default=None, init=False)
    distance: Distance = field(default=Distance(0.0), init=False)

    def time(self, date: Date) -> int:
        """A star has no orbit, so no time passes for it."""
        return 0

    def position(self, date: Date) -> Position:
        """Return the fixed position of the star."""
        return self.pos


@dataclass(eq=False)
class Planet(Body):
    """A body moving on a circular orbit around its parent.

    ``equinox`` is the date on which the body lies on the positive x axis
    relative to its parent; it may be given as ``day.month.year`` text.
    """

    name: str
    parent: Body | None = None
    radius: int = 0
    distance: Distance = Distance()
    siderial: float = 0.0
    equinox: Date = Date(1, 1, 2000)
    direction: Direction = Direction.FORWARD

    def __post_init__(self) -> None:
        if isinstance(self.equinox, str):
            self.equinox = Date.parse(self.equinox)

    def time(self, date: Date) -> int:
        """Return the days from the equinox to ``date``."""
        return int(difference(date, self.equinox))

    def position(self, date: Date) -> Position:
        """Return the position on ``date``, offset by the parent's position."""
        if self.parent is None:
            raise ValueError(f"{self.name} has no parent body")
        alfa = self.time(date) * 360 / self.siderial
        rad = deg_to_rad(alfa)
        x = self.distance.au * math.cos(rad)
        y = self.distance.au * math.sin(rad)
        if self.direction is Direction.REVERSE:
            y = -y
        origin = self.parent.position(date)
        return Position(x + origin.x, y + origin.y)
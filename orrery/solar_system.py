"""The Sun, its eight planets and the Moon."""

from __future__ import annotations

from typing import NamedTuple

from orrery.bodies import Direction, Planet, Star
from orrery.common import Distance, Position
from orrery.system import System


class _Orbit(NamedTuple):
    name: str
    parent: str
    radius: int
    distance: float
    siderial: float
    equinox: str
    direction: Direction = Direction.FORWARD


_PLANETS = (
    _Orbit("Jupiter", "Sun", 69911, 5.2042, 4332.589, "15.8.2022"),
    _Orbit("Mercury", "Sun", 2440, 0.387, 87.969, "20.12.2022"),
    _Orbit("Venus", "Sun", 6052, 0.723, 224.701, "26.1.2023"),
    _Orbit("Earth", "Sun", 6370, 1, 365.256, "23.9.2022"),
    _Orbit("Mars", "Sun", 3396, 1.5235, 686.98, "13.7.2022"),
    _Orbit("Saturn", "Sun", 60268, 9.582, 10759.22, "23.10.2025"),
    _Orbit("Uranus", "Sun", 25559, 19.229, 30685.4, "22.1.2012"),
    _Orbit("Neptune", "Sun", 24764, 30.104, 60190, "4.10.2025"),
)

_MOONS = (_Orbit("Moon", "Earth", 1738, 0.00257, 27.3217, "2.12.2022"),)


def create_solar_system() -> System:
    """Build the solar system, planets first and then moons."""
    system = System()
    system.add(Star("Sun", radius=695500, pos=Position(0.0, 0.0)))
    for orbit in (*_PLANETS, *_MOONS):
        system.add(
            Planet(
                orbit.name,
                parent=system.find(orbit.parent),
                radius=orbit.radius,
                distance=Distance(orbit.distance),
                siderial=orbit.siderial,
                equinox=orbit.equinox,
                direction=orbit.direction,
            )
        )
    return system
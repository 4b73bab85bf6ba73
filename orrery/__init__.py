"""Circular-orbit model of the solar system: dates, bodies, systems and a text command."""

__version__ = "0.1.0"
"""Stepping through dates and listing body positions, with a text front end."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from orrery.date import Date, DateError
from orrery.solar_system import create_solar_system
from orrery.system import System


class SolarSystemView:
    """A system together with a current date that can be stepped."""

    def __init__(self, system: System | None = None, date: Date | None = None) -> None:
        self.system = system if system is not None else create_solar_system()
        self.date = date if date is not None else Date.today()
        self._listeners: list[Callable[[], None]] = []

    def on_date_changed(self, callback: Callable[[], None]) -> None:
        """Register ``callback`` to be called whenever the date changes."""
        self._listeners.append(callback)

    def _changed(self) -> None:
        for callback in self._listeners:
            callback()

    def objects(self, date: Date | None = None) -> list[dict[str, float | str]]:
        """Return name and coordinates of every body on ``date`` (default: current)."""
        when = self.date if date is None else date
        result: list[dict[str, float | str]] = []
        for body in self.system.objects():
            pos = body.position(when)
            result.append({"name": body.name, "x": pos.x, "y": pos.y})
        return result

    def next_date(self) -> Date:
        """Advance one day and return the new date."""
        self.date = self.date.next_day()
        self._changed()
        return self.date

    def prev_date(self) -> Date:
        """Go back one day and return the new date."""
        self.date = self.date.previous_day()
        self._changed()
        return self.date

    def date_string(self) -> str:
        """Return the current date as ``DD.MM.YYYY``."""
        return f"{self.date.day:02d}.{self.date.month:02d}.{self.date.year}"


def _date_argument(text: str) -> Date:
    try:
        return Date.parse(text)
    except DateError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def main(argv: Sequence[str] | None = None) -> int:
    """Print the positions of the solar system's bodies for one or more days."""
    parser = argparse.ArgumentParser(
        prog="orrery", description="Show positions of the solar system's bodies."
    )
    parser.add_argument(
        "--date", type=_date_argument, default=None, help="start date as day.month.year"
    )
    parser.add_argument("--steps", type=int, default=1, help="number of days to show")
    parser.add_argument("--reverse", action="store_true", help="step backwards in time")
    args = parser.parse_args(argv)
    if args.steps < 1:
        parser.error("--steps must be at least 1")

    view = SolarSystemView(date=args.date)
    for step in range(args.steps):
        if step:
            if args.reverse:
                view.prev_date()
            else:
                view.next_date()
        print(view.date_string())
        print(view.system.report(view.date), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
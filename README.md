# orrery

A small model of the solar system. The Sun sits at the origin. Each planet
moves on a circular orbit around its parent, and the Moon moves around the
Earth. Positions are given in astronomical units for any calendar date.

A body's angle comes from two things: the number of days since its reference
equinox, and its sidereal period.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
orrery
```

This prints today's date as `DD.MM.YYYY`, followed by one line per body:

```
Earth	{x,y} = { 0.1234,  -0.9923 }
```

The coordinates are truncated to four decimal places.

Options:

- `--date D.M.YYYY` sets the start date instead of today. An invalid date is
  rejected with an error.
- `--steps N` shows N consecutive days. The default is 1, and N must be at
  least 1.
- `--reverse` steps backwards in time instead of forwards.

Example:

```
orrery --date 23.9.2022 --steps 3
```

The command only prints text. There is no graphical or interactive display of
the orbits. To step through dates from your own code, use `SolarSystemView`,
described below.

## Library use

```python
from orrery.date import Date
from orrery.solar_system import create_solar_system

system = create_solar_system()
print(system.report(Date.parse("23.9.2022")), end="")

for body in system.objects():
    print(body.name, body.position(Date(1, 1, 2024)))
```

`create_solar_system()` returns a `System` holding:

- the Sun;
- Mercury, Venus, Earth, Mars, Jupiter, Saturn, Uranus and Neptune;
- the Moon, which orbits the Earth.

### Systems

`orrery.system.System` holds bodies keyed by name.

- `add(body)` stores a body. If the body has a parent, it is also registered
  as a child of that parent.
- `find(name)` returns the body with that name, or `None`.
- `objects()` returns the bodies in tree order. Each root body (one with no
  parent) comes first. Its descendants follow. Children are sorted by distance
  from their parent, nearest first, and each child is followed by its own
  children. Iterating over a `System` gives the same order.
- `children(name)` returns the direct children of a body.
- `all_children(name)` returns every descendant of a body.
- `report(date)` returns one text line per body with its position.
- `len(system)` is the number of bodies.

### Bodies

`orrery.bodies` provides `Star` and `Planet`. Both are subclasses of the
abstract `Body`, and both offer `time(date)` and `position(date)`.

- `Star(name, radius=0, pos=Position(0.0, 0.0))` stays at `pos` and has no
  parent.
- `Planet` takes the following fields:
  - `name`;
  - `parent`;
  - `radius`;
  - `distance`, a `Distance` in AU;
  - `siderial`, the sidereal period in days;
  - `equinox`, a `Date` or `"d.m.yyyy"` text;
  - `direction`, either `Direction.FORWARD` or `Direction.REVERSE`.

  On the equinox date the planet lies on the positive x axis relative to its
  parent. Its position is offset by the position of its parent. Asking for
  the position of a planet with no parent raises `ValueError`.

```python
from orrery.bodies import Direction, Planet, Star
from orrery.common import Distance, Position
from orrery.date import Date
from orrery.system import System

system = System()
star = Star("Star", pos=Position(0.0, 0.0))
system.add(star)
system.add(Planet("World", parent=star, distance=Distance(2.0),
                  siderial=500.0, equinox="1.1.2024",
                  direction=Direction.REVERSE))
print(system.report(Date(1, 6, 2024)), end="")
```

### Dates

`orrery.date.Date` is an immutable day/month/year date with Gregorian leap
years.

- Build a date with `Date(day, month, year)`, `Date.parse("d.m.yyyy")` or
  `Date.today()`. A malformed or nonexistent date raises `DateError`, which
  is a subclass of `ValueError`.
- `next_day()` and `previous_day()` return new dates one day later or
  earlier.
- Dates compare in calendar order.
- `str(date)` gives `d.m.yyyy`.
- `days()` counts the days from the start of year zero.
- `difference(lhs, rhs)` gives the number of days from `rhs` to `lhs`.
- `is_leap_year(year)` tests for a leap year.

### Helpers

`orrery.common` provides:

- `Position(x, y)`;
- `Distance(au)`, with `Distance.from_km(km)` to build one from kilometres,
  using 1 AU = 150,000,000 km;
- `deg_to_rad`;
- `round_up`, which returns zero for values within 1e-6 of zero;
- `double_to_string(value, sign, before_point, after_point)`, which formats a
  number in fixed point and truncates the fraction.

### Stepping through time

`orrery.app.SolarSystemView(system=None, date=None)` holds a system and a
current date. By default the system is the built-in solar system and the
date is today.

- `next_date()` and `prev_date()` move the current date by one day and
  return it.
- `objects(date=None)` returns a list of `{"name", "x", "y"}` dicts, one per
  body, for the given date or for the current date.
- `date_string()` gives the current date as `DD.MM.YYYY`.
- `on_date_changed(callback)` registers a function that is called after every
  date change.
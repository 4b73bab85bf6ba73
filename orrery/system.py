"""A collection of bodies arranged by parent and orbital distance."""

from __future__ import annotations

from collections.abc import Iterator

from orrery.bodies import Body
from orrery.date import Date


class System:
    """Bodies keyed by name, listed root first with children by distance."""

    def __init__(self) -> None:
        self._bodies: dict[str, Body] = {}
        self._children: dict[str, list[Body]] = {}
        self._ordered: list[Body] | None = None

    def add(self, body: Body) -> None:
        """Add a body, registering it as a child of its parent if it has one."""
        self._bodies[body.name] = body
        if body.parent is not None:
            self._children.setdefault(body.parent.name, []).append(body)
        self._ordered = None

    def find(self, name: str) -> Body | None:
        """Return the body called ``name``, or None."""
        return self._bodies.get(name)

    def objects(self) -> list[Body]:
        """Return each root body followed by all its descendants."""
        if self._ordered is None:
            ordered: list[Body] = []
            for name, body in self._bodies.items():
                if body.parent is None:
                    ordered.append(body)
                    ordered.extend(self.all_children(name))
            self._ordered = ordered
        return list(self._ordered)

    def children(self, name: str) -> list[Body]:
        """Return the direct children of ``name``, nearest first."""
        kids = self._children.get(name)
        if not kids:
            return []
        kids.sort(key=lambda body: body.distance.au)
        return list(kids)

    def all_children(self, name: str) -> list[Body]:
        """Return all descendants of ``name``, each followed by its own."""
        result: list[Body] = []
        for child in self.children(name):
            result.append(child)
            result.extend(self.all_children(child.name))
        return result

    def report(self, date: Date) -> str:
        """Return one line per body giving its position on ``date``."""
        return "".join(
            f"{body.name}\t{{x,y}} = {body.position(date)}\n" for body in self.objects()
        )

    def __iter__(self) -> Iterator[Body]:
        return iter(self.objects())

    def __len__(self) -> int:
        return len(self._bodies)
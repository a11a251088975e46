"""A royal family tree that yields the order of succession."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(eq=False)
class _Person:
    name: str
    alive: bool = True
    children: list[_Person] = field(default_factory=list)


class Monarchy:
    """A family tree rooted at the king; succession goes eldest line first."""

    def __init__(self, king: str) -> None:
        self._king = _Person(king)
        self._people: dict[str, _Person] = {king: self._king}

    def birth(self, child: str, parent: str) -> None:
        """Add ``child`` as the youngest child of ``parent``; unknown parents are ignored."""
        parent_person = self._people.get(parent)
        if parent_person is None:
            return
        newborn = _Person(child)
        self._people[child] = newborn
        parent_person.children.append(newborn)

    def death(self, name: str) -> None:
        """Mark ``name`` as dead; unknown names are ignored."""
        person = self._people.get(name)
        if person is not None:
            person.alive = False

    def order_of_succession(self) -> list[str]:
        """Return the living members in order of succession."""
        return [person.name for person in _walk(self._king) if person.alive]


def _walk(person: _Person) -> Iterator[_Person]:
    yield person
    for child in person.children:
        yield from _walk(child)
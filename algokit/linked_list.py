"""Singly linked list nodes and helpers for building and comparing them."""

from __future__ import annotations

import re
from dataclasses import dataclass
from itertools import zip_longest
from typing import Any, Iterable, Iterator, Optional

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list, compared by identity."""

    val: Any = None
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from this node to the end of the list."""
        return _values(self)

    def signature(self) -> str:
        """Return the values joined by commas."""
        return ",".join(str(value) for value in self)

    def tail(self) -> ListNode:
        """Return the last node of the list."""
        node = self
        while node.next is not None:
            node = node.next
        return node


def _values(node: Optional[ListNode]) -> Iterator[Any]:
    while node is not None:
        yield node.val
        node = node.next


def _to_int(text: str) -> int:
    return int(text) if _INTEGER.fullmatch(text) else 0


def create_linked_list(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a list holding ``values`` in order; ``None`` when there are none."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def create_linked_list_from_string(text: str) -> Optional[ListNode]:
    """Build a list of strings from comma-separated text."""
    return create_linked_list(text.split(","))


def create_int_linked_list_from_string(text: str) -> Optional[ListNode]:
    """Build a list of integers from comma-separated text; bad items become 0."""
    return create_linked_list(_to_int(item) for item in text.split(","))


def reversed_copy(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return a new list holding the values of ``head`` in reverse order."""
    reversed_head: Optional[ListNode] = None
    for value in _values(head):
        reversed_head = ListNode(value, reversed_head)
    return reversed_head


def lists_equal(first: Optional[ListNode], second: Optional[ListNode]) -> bool:
    """Tell whether two lists hold equal values in the same order."""
    missing = object()
    return all(
        a == b
        for a, b in zip_longest(_values(first), _values(second), fillvalue=missing)
    )
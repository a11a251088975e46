"""Linked list problems: reversal, flattening, cycles, merging and reordering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

from algokit.linked_list import ListNode


@dataclass(eq=False, repr=False)
class MultilevelNode:
    """A doubly linked list node that may hold a child list."""

    val: int
    prev: Optional[MultilevelNode] = None
    next: Optional[MultilevelNode] = None
    child: Optional[MultilevelNode] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[MultilevelNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"MultilevelNode(val={self.val!r})"

    def signature(self) -> str:
        """Return the values along ``next`` joined by commas."""
        return ",".join(str(value) for value in self)


def create_multilevel_list(values: Iterable[Any]) -> Optional[MultilevelNode]:
    """Build a multilevel list from its level-by-level serialisation.

    Integers extend the current level. A run of ``None`` entries moves a
    pointer along the current level from its head; the next integer then
    starts a new level as the child of the node pointed at.
    """
    head: Optional[MultilevelNode] = None
    level_head: Optional[MultilevelNode] = None
    current: Optional[MultilevelNode] = None
    pointer: Optional[MultilevelNode] = None
    for value in values:
        if value is None:
            pointer = level_head if pointer is None else pointer.next
            if pointer is None:
                raise ValueError("child marker points past the end of a level")
            continue
        node = MultilevelNode(value)
        if pointer is not None:
            pointer.child = node
            level_head = current = node
            pointer = None
        elif head is None:
            head = level_head = current = node
        else:
            node.prev = current
            current.next = node
            current = node
    return head


def _tail(node: MultilevelNode) -> MultilevelNode:
    while node.next is not None:
        node = node.next
    return node


def flatten(head: Optional[MultilevelNode]) -> Optional[MultilevelNode]:
    """Splice every child list in after its parent, in place, and return the head."""
    if head is None:
        return None
    node = head
    following = node.next
    while node.next is not None or node.child is not None:
        if node.child is not None:
            child = flatten(node.child)
            child.prev = node
            node.child = None
            node.next = child
            last = _tail(child)
            if following is not None:
                following.prev = last
                last.next = following
        if following is None:
            return head
        node = following
        following = following.next
    return head


def reverse_between(
    head: Optional[ListNode], left: int, right: int
) -> Optional[ListNode]:
    """Reverse the nodes at 1-based positions ``left`` to ``right`` and return the head."""
    length = 0 if head is None else sum(1 for _ in head)
    if not 1 <= left <= right <= length:
        raise ValueError(f"positions {left}..{right} are not within 1..{length}")
    dummy = ListNode(None, head)
    before = dummy
    for _ in range(left - 1):
        before = before.next
    first = before.next
    previous: Optional[ListNode] = None
    current = first
    for _ in range(right - left + 1):
        current.next, previous, current = previous, current, current.next
    before.next = previous
    first.next = current
    return dummy.next


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following ``next`` ever returns to a visited node."""
    seen: set[ListNode] = set()
    while head is not None and head.next is not None:
        if head in seen:
            return True
        seen.add(head)
        head = head.next
    return False


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where a cycle starts, found by tortoise and hare, or ``None``."""
    if head is None:
        return None
    tortoise = hare = head
    while True:
        if hare.next is None or hare.next.next is None:
            return None
        hare = hare.next.next
        tortoise = tortoise.next
        if hare is tortoise:
            tortoise = head
            while hare is not tortoise:
                hare = hare.next
                tortoise = tortoise.next
            return hare


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return the new head."""
    reversed_head: Optional[ListNode] = None
    while head is not None:
        head.next, reversed_head, head = reversed_head, head, head.next
    return reversed_head


def reverse_list_recursive(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place recursively and return the new head."""
    if head is None:
        return None

    def walk(node: ListNode) -> tuple[ListNode, ListNode]:
        if node.next is None:
            return node, node
        new_head, last = walk(node.next)
        last.next = node
        return new_head, node

    new_head, last = walk(head)
    last.next = None
    return new_head


def reverse_list_iterative(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place, stopping at the last node, and return it."""
    if head is None:
        return None
    previous: Optional[ListNode] = None
    current = head
    while current.next is not None:
        following = current.next
        current.next = previous
        previous = current
        current = following
    current.next = previous
    return current


def delete_middle(head: ListNode) -> Optional[ListNode]:
    """Remove the middle node (the later one for even lengths) and return the head."""
    if head is None:
        raise ValueError("cannot delete the middle of an empty list")
    if head.next is None:
        return None
    slow, fast = head, head.next
    while fast.next is not None and fast.next.next is not None:
        fast = fast.next.next
        slow = slow.next
    slow.next = slow.next.next
    return head


def merge_two_lists(
    first: Optional[ListNode], second: Optional[ListNode]
) -> Optional[ListNode]:
    """Merge two sorted lists by relinking their nodes; ties take from ``second``."""
    dummy = ListNode()
    tail = dummy
    while first is not None and second is not None:
        if first.val < second.val:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return dummy.next


def pair_sum(head: Optional[ListNode]) -> int:
    """Return the largest sum of a node and its twin from the other end, at least 0.

    The second half of the list is reversed in place.
    """
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
    back = reverse_list(slow)
    best = 0
    while back is not None:
        best = max(best, head.val + back.val)
        back = back.next
        head = head.next
    return best


def odd_even_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Relink the nodes at odd positions before those at even positions."""
    if head is None or head.next is None or head.next.next is None:
        return head
    odd = head
    even_head = even = head.next
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head
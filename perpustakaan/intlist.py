"""Singly linked list of integers built from explicit nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

EMPTY_TEXT = "List Kosong .... \a\n"


@dataclass(eq=False)
class Node:
    """One element of an IntList; nodes compare by identity."""

    value: int
    next: Node | None = field(default=None, repr=False)


def _check_int(value: object) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"expected int, got {type(value).__name__}")
    return value


class IntList:
    """A list of integers whose nodes can be addressed directly."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Node | None = None
        for value in values:
            self.insert_last(value)

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _last_node(self) -> Node | None:
        last = None
        for last in self._nodes():
            pass
        return last

    def _append_node(self, node: Node) -> None:
        last = self._last_node()
        if last is None:
            self._head = node
        else:
            last.next = node

    @property
    def first(self) -> Node | None:
        """The first node, or None when the list is empty."""
        return self._head

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __repr__(self) -> str:
        return f"IntList({list(self)!r})"

    def is_empty(self) -> bool:
        """Return True when the list holds no nodes."""
        return self._head is None

    def search(self, value: int) -> Node | None:
        """Return the first node holding value, or None."""
        return next((node for node in self._nodes() if node.value == value), None)

    def contains_node(self, node: Node) -> bool:
        """Return True if this exact node is part of the list."""
        return any(candidate is node for candidate in self._nodes())

    def search_prec(self, value: int) -> Node | None:
        """Return the node just before the first node holding value.

        Returns None when value is absent or sits in the first node.
        """
        prev = None
        for node in self._nodes():
            if node.value == value:
                return prev
            prev = node
        return None

    def insert_first(self, value: int) -> Node:
        """Add a new node holding value at the front and return it."""
        node = Node(_check_int(value), self._head)
        self._head = node
        return node

    def insert_last(self, value: int) -> Node:
        """Add a new node holding value at the end and return it."""
        node = Node(_check_int(value))
        self._append_node(node)
        return node

    def insert_node_after(self, node: Node, prec: Node) -> None:
        """Link node into the list directly after prec, which must belong to it."""
        node.next = prec.next
        prec.next = node

    def pop_first(self) -> int:
        """Remove the first node and return its value."""
        if self._head is None:
            raise IndexError("pop from empty list")
        node = self._head
        self._head = node.next
        node.next = None
        return node.value

    def pop_last(self) -> int:
        """Remove the last node and return its value."""
        if self._head is None:
            raise IndexError("pop from empty list")
        prev = None
        node = self._head
        while node.next is not None:
            prev = node
            node = node.next
        if prev is None:
            self._head = None
        else:
            prev.next = None
        return node.value

    def remove(self, value: int) -> bool:
        """Unlink the first node holding value; return whether one was found."""
        prev = None
        for node in self._nodes():
            if node.value == value:
                if prev is None:
                    self._head = node.next
                else:
                    prev.next = node.next
                node.next = None
                return True
            prev = node
        return False

    def delete_after(self, prec: Node) -> Node | None:
        """Unlink and return the node following prec, or None if prec is last."""
        removed = prec.next
        if removed is not None:
            prec.next = removed.next
            removed.next = None
        return removed

    def format(self) -> str:
        """Render the values the way they are shown to the user."""
        if self._head is None:
            return EMPTY_TEXT
        return "".join(f"{value} " for value in self) + "\n"

    def max(self) -> int:
        """Return the largest value; raise ValueError when empty."""
        if self._head is None:
            raise ValueError("max of empty list")
        return max(self)

    def min(self) -> int:
        """Return the smallest value; raise ValueError when empty."""
        if self._head is None:
            raise ValueError("min of empty list")
        return min(self)

    def max_node(self) -> Node | None:
        """Return the first node holding the largest value, or None when empty."""
        if self._head is None:
            return None
        return self.search(self.max())

    def min_node(self) -> Node | None:
        """Return the first node holding the smallest value, or None when empty."""
        if self._head is None:
            return None
        return self.search(self.min())

    def average(self) -> int:
        """Return the mean truncated toward zero, or 0 for an empty list."""
        values = list(self)
        if not values:
            return 0
        total = sum(values)
        quotient = abs(total) // len(values)
        return -quotient if total < 0 else quotient

    def clear(self) -> None:
        """Remove every node."""
        node = self._head
        self._head = None
        while node is not None:
            node.next, node = None, node.next

    def reverse(self) -> None:
        """Reverse the list in place by relinking its nodes."""
        prev = None
        node = self._head
        while node is not None:
            following = node.next
            node.next = prev
            prev = node
            node = following
        self._head = prev

    def reversed_copy(self) -> IntList:
        """Return a new list with fresh nodes in reverse order."""
        result = IntList()
        for value in self:
            result.insert_first(value)
        return result

    def share(self) -> IntList:
        """Return a list that points at the same nodes as this one."""
        result = IntList()
        result._head = self._head
        return result

    def copy(self) -> IntList:
        """Return an independent list with fresh nodes."""
        return IntList(self)

    def concat(self, other: IntList) -> IntList:
        """Return a new list holding copies of this list's values, then other's."""
        result = self.copy()
        for value in list(other):
            result.insert_last(value)
        return result

    def concat_move(self, other: IntList) -> IntList:
        """Move the nodes of this list and then other into a new list.

        Both this list and other are left empty; no nodes are created.
        """
        if other is self:
            raise ValueError("cannot concatenate a list with itself by moving")
        result = IntList()
        result._head = self._head
        self._head = None
        if other._head is not None:
            result._append_node(other._head)
            other._head = None
        return result

    def split(self) -> tuple[IntList, IntList]:
        """Return copies of the first half (len // 2 values) and the rest."""
        values = list(self)
        half = len(values) // 2
        return IntList(values[:half]), IntList(values[half:])
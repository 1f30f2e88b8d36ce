"""Singly linked list holding either integers or strings."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator

EMPTY_TEXT = "List Kosong"


class DataType(enum.Enum):
    """Kind of value a list holds."""

    INT = "int"
    STRING = "string"


class LinkedList:
    """An ordered list of values that are all ints or all strings."""

    def __init__(self, data_type: DataType, values: Iterable[int | str] = ()) -> None:
        self.data_type = DataType(data_type)
        self._items: list[int | str] = []
        for value in values:
            self.append(value)

    def _check(self, value: object) -> int | str:
        if self.data_type is DataType.INT:
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"expected int, got {type(value).__name__}")
        elif not isinstance(value, str):
            raise TypeError(f"expected str, got {type(value).__name__}")
        return value

    def _index(self, value: object) -> int | None:
        for index, item in enumerate(self._items):
            if item == value:
                return index
        return None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int | str]:
        return iter(list(self._items))

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"LinkedList({self.data_type}, {self._items!r})"

    def is_empty(self) -> bool:
        """Return True when the list holds no values."""
        return not self._items

    def prepend(self, value: int | str) -> None:
        """Insert a value at the front."""
        self._items.insert(0, self._check(value))

    def append(self, value: int | str) -> None:
        """Insert a value at the end."""
        self._items.append(self._check(value))

    def insert_after(self, target: int | str, value: int | str) -> bool:
        """Insert a value after the first node equal to target.

        Returns False, leaving the list unchanged, when target is absent.
        """
        self._check(value)
        index = self._index(target)
        if index is None:
            return False
        self._items.insert(index + 1, value)
        return True

    def insert_before(self, target: int | str, value: int | str) -> bool:
        """Insert a value before the first node equal to target.

        Returns False, leaving the list unchanged, when target is absent.
        """
        self._check(value)
        index = self._index(target)
        if index is None:
            return False
        self._items.insert(index, value)
        return True

    def pop_first(self) -> int | str:
        """Remove and return the first value."""
        if not self._items:
            raise IndexError("pop from empty list")
        return self._items.pop(0)

    def pop_last(self) -> int | str:
        """Remove and return the last value."""
        if not self._items:
            raise IndexError("pop from empty list")
        return self._items.pop()

    def remove(self, value: int | str) -> bool:
        """Remove the first node equal to value; return whether one was found."""
        index = self._index(value)
        if index is None:
            return False
        del self._items[index]
        return True

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    def contains(self, value: int | str) -> bool:
        """Return True if a value of this list's type equal to value is present."""
        try:
            self._check(value)
        except TypeError:
            return False
        return self._index(value) is not None

    def predecessor(self, value: int) -> int | None:
        """Return the value just before the first occurrence of value.

        Returns None for string lists, when value is absent, or when it is first.
        """
        if self.data_type is not DataType.INT:
            return None
        index = self._index(value)
        if not index:
            return None
        return self._items[index - 1]

    def reversed_copy(self) -> LinkedList:
        """Return a new list with the values in reverse order."""
        return LinkedList(self.data_type, reversed(self._items))

    def reverse(self) -> None:
        """Reverse the list in place."""
        self._items.reverse()

    def copy(self) -> LinkedList:
        """Return an independent copy."""
        return LinkedList(self.data_type, self._items)

    def front(self) -> int | str | None:
        """Return the first value, or 0 (int lists) / None (string lists) if empty."""
        if not self._items:
            return 0 if self.data_type is DataType.INT else None
        return self._items[0]

    def tail(self) -> int | str | None:
        """Return the last value, or 0 (int lists) / None (string lists) if empty."""
        if not self._items:
            return 0 if self.data_type is DataType.INT else None
        return self._items[-1]

    def format(self) -> str:
        """Render the list the way it is shown to the user, with line endings."""
        if not self._items:
            return EMPTY_TEXT + "\n"
        body = ", ".join(str(item) for item in self._items)
        if self.data_type is DataType.INT:
            return body + "\n"
        return body + "\n\n"
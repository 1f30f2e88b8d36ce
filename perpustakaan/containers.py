"""FIFO queue and LIFO stack of ints or strings, backed by LinkedList."""

from __future__ import annotations

from collections.abc import Iterator

from perpustakaan.linked import DataType, LinkedList


class Queue:
    """First-in, first-out collection whose values are all ints or all strings."""

    def __init__(self, data_type: DataType) -> None:
        self._list = LinkedList(data_type)

    @property
    def data_type(self) -> DataType:
        """The kind of value this queue holds."""
        return self._list.data_type

    def __len__(self) -> int:
        return len(self._list)

    def __iter__(self) -> Iterator[int | str]:
        """Iterate from front to rear."""
        return iter(self._list)

    def __repr__(self) -> str:
        return f"Queue({self.data_type}, {list(self._list)!r})"

    def is_empty(self) -> bool:
        """Return True when the queue holds no values."""
        return self._list.is_empty()

    def enqueue(self, value: int | str) -> None:
        """Add a value at the rear."""
        self._list.append(value)

    def dequeue(self) -> int | str:
        """Remove and return the value at the front; raise IndexError if empty."""
        if self._list.is_empty():
            raise IndexError("dequeue from empty queue")
        return self._list.pop_first()

    def front(self) -> int | str | None:
        """Return the front value without removing it, or None when empty."""
        if self._list.is_empty():
            return None
        return self._list.front()

    def rear(self) -> int | str | None:
        """Return the rear value without removing it, or None when empty."""
        if self._list.is_empty():
            return None
        return self._list.tail()

    def clear(self) -> None:
        """Remove every value."""
        self._list.clear()

    def format(self) -> str:
        """Render the queue front to rear the way it is shown to the user."""
        return self._list.format()


class Stack:
    """Last-in, first-out collection whose values are all ints or all strings."""

    def __init__(self, data_type: DataType) -> None:
        self._list = LinkedList(data_type)

    @property
    def data_type(self) -> DataType:
        """The kind of value this stack holds."""
        return self._list.data_type

    def __len__(self) -> int:
        return len(self._list)

    def __iter__(self) -> Iterator[int | str]:
        """Iterate from top to bottom."""
        return iter(self._list)

    def __repr__(self) -> str:
        return f"Stack({self.data_type}, {list(self._list)!r})"

    def is_empty(self) -> bool:
        """Return True when the stack holds no values."""
        return self._list.is_empty()

    def push(self, value: int | str) -> None:
        """Put a value on top."""
        self._list.prepend(value)

    def pop(self) -> int | str:
        """Remove and return the top value; raise IndexError if empty."""
        if self._list.is_empty():
            raise IndexError("pop from empty stack")
        return self._list.pop_first()

    def top(self) -> int | str | None:
        """Return the top value without removing it, or None when empty."""
        if self._list.is_empty():
            return None
        return self._list.front()

    def clear(self) -> None:
        """Remove every value."""
        self._list.clear()

    def format(self) -> str:
        """Render the stack top to bottom the way it is shown to the user."""
        return self._list.format()
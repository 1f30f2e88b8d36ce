"""Books, borrower queues by priority, loans and an undo history."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from perpustakaan.containers import Queue
from perpustakaan.linked import DataType

MAX_BOOKS = 100


class Priority(enum.IntEnum):
    """Borrower priority; a lower value is served first."""

    DOSEN = 0
    MAHASISWA = 1
    MASYARAKAT = 2


def _new_queues() -> tuple[Queue, ...]:
    return tuple(Queue(DataType.STRING) for _ in Priority)


@dataclass
class Book:
    """A title with its stock and one waiting queue per priority."""

    title: str
    stock: int
    queues: tuple[Queue, ...] = field(default_factory=_new_queues, repr=False)


class LibraryFullError(Exception):
    """Raised when a book is added to a library that already holds the maximum."""


class _Action(enum.Enum):
    ADD = "tambah"
    LOAN = "pinjam"
    RETURN = "kembali"


@dataclass(frozen=True)
class _UndoRecord:
    action: _Action
    name: str
    title: str
    priority: Priority | None


class Library:
    """A catalogue of books with borrower queues and undoable transactions."""

    def __init__(self) -> None:
        self._books: list[Book] = []
        self._history: list[_UndoRecord] = []

    def __repr__(self) -> str:
        return f"Library({self._books!r})"

    def add_book(self, title: str, stock: int) -> Book:
        """Register a new book and return it."""
        if len(self._books) >= MAX_BOOKS:
            raise LibraryFullError(f"a library holds at most {MAX_BOOKS} books")
        book = Book(title, stock)
        self._books.append(book)
        return book

    def find_book(self, title: str) -> Book | None:
        """Return the first book with this exact title, or None."""
        return next((book for book in self._books if book.title == title), None)

    def add_borrower(self, name: str, title: str, priority: int) -> bool:
        """Queue a borrower for a book; return False if the book is unknown."""
        level = Priority(priority)
        book = self.find_book(title)
        if book is None:
            return False
        book.queues[level].enqueue(name)
        self._history.append(_UndoRecord(_Action.ADD, name, title, level))
        return True

    def process_loan(self, title: str) -> str | None:
        """Lend the book to the first borrower of the highest priority waiting.

        Returns the borrower's name, or None when the book is unknown,
        out of stock, or nobody is waiting.
        """
        book = self.find_book(title)
        if book is None or book.stock <= 0:
            return None
        for level in Priority:
            queue = book.queues[level]
            if not queue.is_empty():
                name = queue.dequeue()
                book.stock -= 1
                self._history.append(_UndoRecord(_Action.LOAN, name, title, level))
                return name
        return None

    def return_book(self, title: str) -> bool:
        """Put one copy back in stock; return False if the book is unknown."""
        book = self.find_book(title)
        if book is None:
            return False
        book.stock += 1
        self._history.append(_UndoRecord(_Action.RETURN, "", title, None))
        return True

    def queue_lines(self, title: str) -> list[str]:
        """Return one display line per priority queue, or [] if the book is unknown."""
        book = self.find_book(title)
        if book is None:
            return []
        return [f"Prioritas {level.value}: {book.queues[level].format()}" for level in Priority]

    def undo(self) -> bool:
        """Revert the most recent transaction; return False if there is none."""
        if not self._history:
            return False
        record = self._history.pop()
        book = self.find_book(record.title)
        if book is None:
            return False
        if record.action is _Action.LOAN:
            book.stock += 1
            book.queues[record.priority].enqueue(record.name)
        elif record.action is _Action.ADD:
            queue = book.queues[record.priority]
            remaining = [name for name in queue if name != record.name]
            queue.clear()
            for name in remaining:
                queue.enqueue(name)
        else:
            book.stock -= 1
        return True
# perpustakaan

A small console program for a library desk. It records each book and the number
of copies on the shelf. Each book also has a waiting queue, split by priority:
lecturers (`Priority.DOSEN`, 0) come first, then students
(`Priority.MAHASISWA`, 1), then the public (`Priority.MASYARAKAT`, 2). You can
undo the most recent action, and then the one before it, and so on.

## Install

    pip install .

## Running the menu

    perpustakaan

The menu reads from standard input and writes to standard output. It offers:

1. Tambah Buku: add a book with a title and a stock count
2. Tambah Peminjam: put a borrower in a book's queue at priority 0, 1 or 2
3. Proses Peminjaman: if a copy is in stock, lend the book to the first waiting borrower of the highest priority and print `<name> meminjam buku '<title>'`
4. Kembalikan Buku: put a copy back on the shelf
5. Tampilkan Antrean: show the three queues of a book, one line per priority
6. Undo: reverse the most recent action
0. Keluar: quit

The menu also stops when input runs out. A choice that is not a number, or is
not in the list, prints `Pilihan tidak valid.` The same message appears when a
stock count is not a number, or when a priority is not 0, 1 or 2. Books and
borrowers that do not exist are ignored without a message. The library holds at
most 100 books. If you try to add another, the menu prints
`Perpustakaan penuh.`

## Using it from Python

```python
from perpustakaan.library import Library, Priority

lib = Library()
lib.add_book("Algoritma", 1)
lib.add_borrower("Budi", "Algoritma", Priority.MAHASISWA)
lib.add_borrower("Sari", "Algoritma", Priority.DOSEN)

print(lib.process_loan("Algoritma"))   # Sari: the highest priority waiting
for line in lib.queue_lines("Algoritma"):
    print(line, end="")

lib.undo()                             # stock goes back up, Sari rejoins her queue
```

`Library` has these methods:

- `add_book(title, stock)` returns the new `Book`. It raises `LibraryFullError` when 100 books are already registered.
- `find_book(title)` returns the first book with that exact title, or `None`.
- `add_borrower(name, title, priority)` queues a borrower. It returns `False` if the book is unknown, and raises `ValueError` for a priority outside 0–2.
- `process_loan(title)` returns the borrower's name. It returns `None` if the book is unknown, out of stock, or has nobody waiting.
- `return_book(title)` adds one copy to the stock. It returns `False` if the book is unknown.
- `queue_lines(title)` returns the display lines `Prioritas N: ...`.
- `undo()` reverts the last recorded action. It returns `False` when there is nothing to undo.

The menu can also run on any text streams, which is useful for scripting:

```python
import io
from perpustakaan.library import Library
from perpustakaan.menu import run_menu

out = io.StringIO()
run_menu(Library(), io.StringIO("1\nAlgoritma\n2\n0\n"), out)
```

## Data structures

The package also ships the containers the program is built on:

- `perpustakaan.linked.LinkedList` is a list of ints or strings, typed by `DataType.INT` or `DataType.STRING`. It supports front and back insertion, insertion before or after a value, popping, removal, reversal, copying, and a display format.
- `perpustakaan.intlist.IntList` is an integer list of linked `Node` objects. It supports node search, `max`, `min`, `average` (truncated toward zero), `concat`, `concat_move` and `split`.
- `perpustakaan.containers.Queue` is a FIFO queue built on `LinkedList`.
- `perpustakaan.containers.Stack` is a LIFO stack built on `LinkedList`.

## What it does not do

Everything is kept in memory. Nothing is saved when the program exits, and
nothing is loaded when it starts. The undo history is lost on exit too.

## Tests

    pip install .[test]
    pytest
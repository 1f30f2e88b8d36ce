"""Interactive text menu for the library."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from perpustakaan.library import Library, LibraryFullError

MENU_TEXT = (
    "\n=== MENU PERPUSTAKAAN ===\n"
    "1. Tambah Buku\n"
    "2. Tambah Peminjam\n"
    "3. Proses Peminjaman\n"
    "4. Kembalikan Buku\n"
    "5. Tampilkan Antrean\n"
    "6. Undo\n"
    "0. Keluar\n"
    "Pilih: "
)
INVALID_TEXT = "Pilihan tidak valid.\n"
FULL_TEXT = "Perpustakaan penuh.\n"


class _EndOfInput(Exception):
    pass


def _ask(stdin: TextIO, stdout: TextIO, prompt: str) -> str:
    stdout.write(prompt)
    stdout.flush()
    line = stdin.readline()
    if not line:
        raise _EndOfInput
    return line.rstrip("\n").rstrip("\r")


def _ask_int(stdin: TextIO, stdout: TextIO, prompt: str) -> int | None:
    text = _ask(stdin, stdout, prompt)
    try:
        return int(text.strip())
    except ValueError:
        return None


def _handle(choice: int | None, library: Library, stdin: TextIO, stdout: TextIO) -> bool:
    """Carry out one menu choice; return False when the menu should close."""
    if choice == 0:
        return False
    if choice == 1:
        title = _ask(stdin, stdout, "Judul buku: ")
        stock = _ask_int(stdin, stdout, "Jumlah stok: ")
        if stock is None:
            stdout.write(INVALID_TEXT)
        else:
            try:
                library.add_book(title, stock)
            except LibraryFullError:
                stdout.write(FULL_TEXT)
    elif choice == 2:
        name = _ask(stdin, stdout, "Nama: ")
        title = _ask(stdin, stdout, "Judul buku: ")
        priority = _ask_int(stdin, stdout, "Prioritas (0=dosen,1=mahasiswa,2=masyarakat): ")
        try:
            if priority is None:
                raise ValueError(priority)
            library.add_borrower(name, title, priority)
        except ValueError:
            stdout.write(INVALID_TEXT)
    elif choice == 3:
        title = _ask(stdin, stdout, "Judul buku: ")
        borrower = library.process_loan(title)
        if borrower is not None:
            stdout.write(f"{borrower} meminjam buku '{title}'\n")
    elif choice == 4:
        library.return_book(_ask(stdin, stdout, "Judul buku: "))
    elif choice == 5:
        title = _ask(stdin, stdout, "Judul buku: ")
        stdout.write("".join(library.queue_lines(title)))
    elif choice == 6:
        library.undo()
    else:
        stdout.write(INVALID_TEXT)
    return True


def run_menu(library: Library, stdin: TextIO, stdout: TextIO) -> None:
    """Show the menu and serve choices until 0 is chosen or input ends."""
    try:
        while True:
            choice = _ask_int(stdin, stdout, MENU_TEXT)
            if not _handle(choice, library, stdin, stdout):
                return
    except _EndOfInput:
        return


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive library menu on standard input and output."""
    parser = argparse.ArgumentParser(prog="perpustakaan", description="Library loan queue manager.")
    parser.parse_args(argv)
    run_menu(Library(), sys.stdin, sys.stdout)
    return 0
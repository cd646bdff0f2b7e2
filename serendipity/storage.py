"""Fixed-size binary record file holding one book per record."""

from __future__ import annotations

import os
import struct
from collections.abc import Iterator
from pathlib import Path

from .book import (
    AUTHOR_LIMIT,
    DATE_LIMIT,
    ISBN_LIMIT,
    PUBLISHER_LIMIT,
    TITLE_LIMIT,
    Book,
)

# Text fields are NUL-terminated buffers one byte longer than their limit;
# then quantity, record index, wholesale and retail, laid out with padding.
_LAYOUT = struct.Struct(
    f"<{TITLE_LIMIT + 1}s{ISBN_LIMIT + 1}s{AUTHOR_LIMIT + 1}s"
    f"{PUBLISHER_LIMIT + 1}s{DATE_LIMIT + 1}s2xii4xdd"
)
RECORD_SIZE = _LAYOUT.size

_TEXT_FIELDS = (
    ("title", TITLE_LIMIT),
    ("isbn", ISBN_LIMIT),
    ("author", AUTHOR_LIMIT),
    ("publisher", PUBLISHER_LIMIT),
    ("date_added", DATE_LIMIT),
)


class StorageError(Exception):
    """Raised when a record cannot be encoded or decoded."""


def _text_bytes(name: str, value: str, limit: int) -> bytes:
    data = value.encode("utf-8")
    if len(data) > limit or b"\0" in data:
        raise StorageError(f"{name} does not fit in {limit} bytes: {value!r}")
    return data


def _encode(book: Book, index: int) -> bytes:
    texts = [_text_bytes(name, getattr(book, name), limit) for name, limit in _TEXT_FIELDS]
    try:
        return _LAYOUT.pack(
            *texts, int(book.quantity), index, float(book.wholesale), float(book.retail)
        )
    except struct.error as exc:
        raise StorageError(str(exc)) from exc


def encode_book(book: Book) -> bytes:
    """Return the fixed-size record for ``book``."""
    return _encode(book, -1)


def decode_book(data: bytes) -> Book:
    """Build a book from one record."""
    if len(data) != RECORD_SIZE:
        raise StorageError(f"record must be {RECORD_SIZE} bytes, got {len(data)}")
    *texts, quantity, _index, wholesale, retail = _LAYOUT.unpack(data)
    try:
        fields = {
            name: raw.split(b"\0", 1)[0].decode("utf-8")
            for (name, _limit), raw in zip(_TEXT_FIELDS, texts)
        }
    except UnicodeDecodeError as exc:
        raise StorageError("record holds text that is not UTF-8") from exc
    return Book(quantity=quantity, wholesale=wholesale, retail=retail, **fields)


class RecordFile:
    """Random-access file of book records, created if it does not exist."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        if not self.path.exists():
            self.path.touch()
        self._file = open(self.path, "r+b")

    def __len__(self) -> int:
        self._file.seek(0, os.SEEK_END)
        return self._file.tell() // RECORD_SIZE

    def _check_index(self, index: int, upper: int) -> None:
        if not 0 <= index < upper:
            raise IndexError(f"record index {index} out of range")

    def read(self, index: int) -> Book:
        """Return the book stored at ``index``."""
        self._check_index(index, len(self))
        self._file.seek(index * RECORD_SIZE)
        return decode_book(self._file.read(RECORD_SIZE))

    def write(self, book: Book, index: int) -> int:
        """Store ``book`` at ``index``; the index may be one past the end."""
        self._check_index(index, len(self) + 1)
        record = _encode(book, index)
        self._file.seek(index * RECORD_SIZE)
        self._file.write(record)
        self._file.flush()
        return index

    def append(self, book: Book) -> int:
        """Store ``book`` after the last record and return its index."""
        return self.write(book, len(self))

    def __iter__(self) -> Iterator[Book]:
        for index in range(len(self)):
            yield self.read(index)

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> RecordFile:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
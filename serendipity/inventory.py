"""The shop's inventory: a fixed number of book slots."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .book import TITLE_LIMIT, Book, normalize_text

DEFAULT_CAPACITY = 20


class InventoryFullError(Exception):
    """Raised when a book is added but every slot is taken."""


class BookNotFoundError(LookupError):
    """Raised when no book in the inventory matches a lookup."""


class Inventory:
    """A fixed-capacity sequence of book slots; empty slots have no title."""

    def __init__(
        self, books: Iterable[Book] | None = None, capacity: int = DEFAULT_CAPACITY
    ) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        slots = list(books) if books is not None else []
        if len(slots) > capacity:
            raise ValueError(
                f"{len(slots)} books do not fit in an inventory of {capacity}"
            )
        slots.extend(Book() for _ in range(capacity - len(slots)))
        self._slots = slots

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def find_isbn(self, isbn: str) -> int:
        """Return the slot index of the stocked book with ``isbn``."""
        for index, book in self.stocked():
            if book.isbn == isbn:
                return index
        raise BookNotFoundError(f"ISBN not found: {isbn}")

    def search_titles(self, text: str) -> list[int]:
        """Return the slot indexes whose title contains ``text``, case-insensitively."""
        needle = normalize_text(text, TITLE_LIMIT)
        return [index for index, book in enumerate(self._slots) if needle in book.title]

    def first_free_slot(self) -> int | None:
        """Return the index of the first empty slot, or None when full."""
        return next(
            (index for index, book in enumerate(self._slots) if book.is_empty()), None
        )

    def add(self, book: Book) -> int:
        """Place ``book`` in the first free slot and return its index."""
        index = self.first_free_slot()
        if index is None:
            raise InventoryFullError("Inventory full...")
        self._slots[index] = book
        return index

    def remove(self, index: int) -> None:
        """Free the slot at ``index``."""
        self._slots[index].remove()

    def __getitem__(self, index: int) -> Book:
        return self._slots[index]

    def __setitem__(self, index: int, book: Book) -> None:
        self._slots[index] = book

    def __iter__(self) -> Iterator[Book]:
        return iter(self._slots)

    def __len__(self) -> int:
        return len(self._slots)

    def stocked(self) -> Iterator[tuple[int, Book]]:
        """Yield ``(index, book)`` for every slot that holds a book."""
        for index, book in enumerate(self._slots):
            if not book.is_empty():
                yield index, book


def default_inventory() -> Inventory:
    """Return the inventory the shop starts with."""
    books = [
        Book("HARRY POTTER HOGWARTZ", "ASDF-1234", "JKJK", "DIDNEY", "05-05-2020", 2, 1.01, 0.51),
        Book("JAMES", "FDSA-1234", "DOE", "HOLLY", "05-06-2021", 0, 2.02, 1.51),
        Book("LORD OF THE RING", "QWER-5433", "YAAAA", "PIXAR", "05-06-2019", 6, 9.99, 4.55),
        Book("BACK TO THE PAST", "PSAT-2424", "MCQING", "DIDNEY", "05-05-2020", 7, 3.04, 3.04),
        Book(
            "HARRY POTTER SORCEROR STONE", "QPQP-2341", "JKJK", "DIDNEY",
            "07-21-2019", 2, 1.01, 0.51,
        ),
    ]
    return Inventory(books)
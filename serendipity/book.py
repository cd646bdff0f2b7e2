"""Book records and their on-screen presentation."""

from __future__ import annotations

from dataclasses import dataclass

STORE_NAME = "Serendipity Booksellers"

# Longest text each field holds, in characters.
TITLE_LIMIT = 50
ISBN_LIMIT = 13
AUTHOR_LIMIT = 30
PUBLISHER_LIMIT = 30
DATE_LIMIT = 10


@dataclass
class Book:
    """One inventory slot; a slot with no title is free."""

    title: str = ""
    isbn: str = ""
    author: str = ""
    publisher: str = ""
    date_added: str = ""
    quantity: int = 0
    wholesale: float = 0.0
    retail: float = 0.0

    def is_empty(self) -> bool:
        """Return True when the slot holds no book."""
        return self.title == ""

    def remove(self) -> None:
        """Free the slot by clearing the title."""
        self.title = ""


def normalize_text(value: str, limit: int, upper: bool = True) -> str:
    """Cut ``value`` to at most ``limit`` characters, upper-casing it if asked."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    text = value[:limit]
    return text.upper() if upper else text


def format_book_info(book: Book) -> str:
    """Return the book information screen for ``book``."""
    lines = [
        STORE_NAME,
        "Book Information",
        "",
        f"ISBN: {book.isbn}",
        f"Title: {book.title}",
        f"Author: {book.author}",
        f"Publisher: {book.publisher}",
        f"Date Added: {book.date_added}",
        f"Quantity-On-Hand: {book.quantity}",
        f"Wholesale Cost: {book.wholesale:.2f}",
        f"Retail Price: {book.retail:.2f}",
    ]
    return "\n".join(lines) + "\n"
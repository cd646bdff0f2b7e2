import pytest

from serendipity.book import Book
from serendipity.inventory import (
    BookNotFoundError,
    Inventory,
    InventoryFullError,
    default_inventory,
)


def test_default_inventory_contents():
    inv = default_inventory()
    assert len(inv) == 20
    assert [b.title for _, b in inv.stocked()] == [
        "HARRY POTTER HOGWARTZ",
        "JAMES",
        "LORD OF THE RING",
        "BACK TO THE PAST",
        "HARRY POTTER SORCEROR STONE",
    ]
    assert inv[2].isbn == "QWER-5433"
    assert inv[2].quantity == 6


def test_find_isbn():
    inv = default_inventory()
    assert inv.find_isbn("PSAT-2424") == 3
    assert inv[inv.find_isbn("QPQP-2341")].title == "HARRY POTTER SORCEROR STONE"


def test_find_isbn_missing():
    with pytest.raises(BookNotFoundError):
        default_inventory().find_isbn("NOPE-0000")


def test_find_isbn_skips_removed_book():
    inv = default_inventory()
    inv.remove(1)
    with pytest.raises(BookNotFoundError):
        inv.find_isbn("FDSA-1234")


def test_search_titles_is_case_insensitive():
    inv = default_inventory()
    assert inv.search_titles("harry potter") == [0, 4]
    assert inv.search_titles("ring") == [2]
    assert inv.search_titles("zzz") == []


def test_first_free_slot_and_add():
    inv = default_inventory()
    assert inv.first_free_slot() == 5
    book = Book(title="NEW", isbn="N-1")
    assert inv.add(book) == 5
    assert inv[5] is book
    assert inv.first_free_slot() == 6


def test_add_reuses_freed_slot():
    inv = default_inventory()
    inv.remove(1)
    assert inv[1].is_empty()
    assert inv.add(Book(title="AGAIN")) == 1


def test_add_when_full():
    inv = Inventory([Book(title="A")], capacity=1)
    assert inv.first_free_slot() is None
    with pytest.raises(InventoryFullError):
        inv.add(Book(title="B"))


def test_too_many_books_rejected():
    with pytest.raises(ValueError):
        Inventory([Book(title="A"), Book(title="B")], capacity=1)


def test_setitem_and_iter():
    inv = Inventory(capacity=3)
    inv[1] = Book(title="MID")
    assert [b.title for b in inv] == ["", "MID", ""]
    assert list(i for i, _ in inv.stocked()) == [1]
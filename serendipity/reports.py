"""Inventory reports: listings, value totals and sorted listings."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime
from enum import IntEnum
from typing import Any

from .book import STORE_NAME, Book
from .inventory import Inventory

REPORTS_MENU = (
    f"{STORE_NAME}\n"
    "Reports\n"
    "1. Inventory Listing\n"
    "2. Inventory Wholesale Value\n"
    "3. Inventory Retail Value\n"
    "4. Listing by Quantity\n"
    "5. Listing by Cost\n"
    "6. Listing by Age\n"
    "7. Return to Main Menu\n"
    "\n"
    "Enter Your Choice: "
)

_RULE = "====="


class ReportKind(IntEnum):
    """The reports on offer, numbered as on the reports menu."""

    LISTING = 1
    WHOLESALE = 2
    RETAIL = 3
    QUANTITY = 4
    COST = 5
    AGE = 6


_SELECTED = {
    ReportKind.LISTING: "You selected Inventory Listing.",
    ReportKind.WHOLESALE: "You selected Inventory Wholesale Value.",
    ReportKind.RETAIL: "You selected Inventory Retail Value.",
    ReportKind.QUANTITY: "You selected Listing By Quantity",
    ReportKind.COST: "You selected Listing By Cost",
    ReportKind.AGE: "You selected Listing By Age.",
}

_HEADINGS = {
    ReportKind.LISTING: "Entire Inventory ",
    ReportKind.WHOLESALE: "Entire Inventory Wholesale Prices ",
    ReportKind.RETAIL: "Entire Inventory Retail Prices ",
    ReportKind.QUANTITY: "Entire Inventory Book Quantities ",
    ReportKind.COST: "Entire Inventory Book Costs ",
    ReportKind.AGE: "Entire Inventory Date Added ",
}


def _selection_order(values: Sequence[Any], pick: Callable[..., int]) -> list[int]:
    """Order indexes by selection sort, choosing each place with ``pick``."""
    order = list(range(len(values)))
    for place in range(len(order)):
        chosen = pick(range(place, len(order)), key=lambda j: values[order[j]])
        order[place], order[chosen] = order[chosen], order[place]
    return order


def descending_order(values: Sequence[Any]) -> list[int]:
    """Return the indexes of ``values`` ordered from largest to smallest value.

    Selection sort is used, so equal values keep the order that swapping
    leaves them in rather than their original order.
    """
    return _selection_order(values, max)


def date_sort_key(date: str) -> str:
    """Turn an ``MM-DD-YYYY`` date into a ``YYYYMMDD`` string for comparison."""
    if date == "":
        return ""
    if len(date) < 6:
        raise ValueError(f"date is not in MM-DD-YYYY form: {date!r}")
    return date[6:10] + date[0:2] + date[3:5]


def wholesale_total(inventory: Inventory) -> float:
    """Return the wholesale value of all stock on hand."""
    return sum(book.wholesale * book.quantity for _, book in inventory.stocked())


def retail_total(inventory: Inventory) -> float:
    """Return the retail value of all stock on hand."""
    return sum(book.retail * book.quantity for _, book in inventory.stocked())


def _stocked_in(inventory: Inventory, order: list[int]) -> list[tuple[int, Book]]:
    return [(index, inventory[index]) for index in order if not inventory[index].is_empty()]


def by_quantity(inventory: Inventory) -> list[tuple[int, Book]]:
    """Return stocked books, most copies on hand first."""
    return _stocked_in(inventory, descending_order([book.quantity for book in inventory]))


def by_cost(inventory: Inventory) -> list[tuple[int, Book]]:
    """Return stocked books, highest wholesale cost first."""
    return _stocked_in(inventory, descending_order([book.wholesale for book in inventory]))


def by_age(inventory: Inventory) -> list[tuple[int, Book]]:
    """Return stocked books, earliest date added first."""
    keys = [date_sort_key(book.date_added) for book in inventory]
    return _stocked_in(inventory, _selection_order(keys, min))


def _fields(kind: ReportKind, book: Book) -> list[tuple[str, str]]:
    title = ("Title", book.title)
    isbn = ("ISBN #", book.isbn)
    quantity = ("Quantity on Hand", str(book.quantity))
    wholesale = ("Wholesale Cost", f"{book.wholesale:.2f}")
    retail = ("Retail Price", f"{book.retail:.2f}")
    date = ("Date Added (MM-DD-YYYY)", book.date_added)
    if kind is ReportKind.LISTING:
        return [
            title,
            isbn,
            ("Author", book.author),
            ("Publisher", book.publisher),
            date,
            quantity,
            wholesale,
            retail,
        ]
    if kind is ReportKind.WHOLESALE:
        return [title, isbn, quantity, wholesale]
    if kind is ReportKind.RETAIL:
        return [title, isbn, quantity, retail]
    if kind is ReportKind.QUANTITY:
        return [title, isbn, quantity]
    if kind is ReportKind.COST:
        return [title, isbn, quantity, wholesale]
    return [title, isbn, quantity, date]


def _entries(kind: ReportKind, inventory: Inventory) -> list[tuple[int, Book]]:
    if kind is ReportKind.QUANTITY:
        return by_quantity(inventory)
    if kind is ReportKind.COST:
        return by_cost(inventory)
    if kind is ReportKind.AGE:
        return by_age(inventory)
    return list(inventory.stocked())


def render_report(kind: ReportKind | int, inventory: Inventory, when: datetime) -> str:
    """Return the text of report ``kind`` for ``inventory``, dated ``when``."""
    kind = ReportKind(kind)
    pad = "=" * 9 + " "
    out = [
        _SELECTED[kind],
        "",
        f"{pad}{_HEADINGS[kind]}{pad}",
        f"Date: {when.ctime()}",
        "",
    ]
    for number, (_, book) in enumerate(_entries(kind, inventory), start=1):
        out.extend(["", "", f"Book #{number}", _RULE])
        out.extend(f"{label}: {value}" for label, value in _fields(kind, book))
        out.append(_RULE)
    if kind is ReportKind.WHOLESALE:
        out.append(f"Total wholesale value of inventory: {wholesale_total(inventory):.2f}")
    elif kind is ReportKind.RETAIL:
        out.append(f"Total retail value of inventory: {retail_total(inventory):.2f}")
    return "\n".join(out) + "\n"
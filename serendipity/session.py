"""Cashier and reports sessions, and keeping the inventory in a record file."""

from __future__ import annotations

import os
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from .book import STORE_NAME
from .cashier import Cart, OutOfStockError, Receipt, build_receipt, format_receipt
from .inventory import DEFAULT_CAPACITY, BookNotFoundError, Inventory
from .invmenu import Console, confirm
from .reports import REPORTS_MENU, ReportKind, render_report
from .storage import RecordFile

Clock = Callable[[], datetime]


def current_time(clock: Clock | None = None) -> datetime:
    """Return the time given by ``clock``, or the local time when there is none."""
    return clock() if clock is not None else datetime.now()


def _ask_quantity(console: Console) -> int:
    while True:
        try:
            quantity = console.ask_int("How many books would you like to purchase? : ")
        except ValueError:
            console.write("Invalid number\n")
            continue
        if quantity < 0:
            console.write("Invalid number\n")
            continue
        return quantity


def cashier_session(
    inventory: Inventory, console: Console, clock: Clock | None = None
) -> list[Receipt]:
    """Ring up sales until the user stops; return the receipts printed."""
    cart = Cart(inventory)
    receipts: list[Receipt] = []
    while True:
        console.write(f"{STORE_NAME}\nCashier Module\n\n")
        isbn = console.ask("ISBN: ").strip()
        console.write("\n")

        try:
            index = inventory.find_isbn(isbn)
        except BookNotFoundError:
            if confirm(console, "ISBN not found!\nWould you like to try again? (y/N) "):
                continue
            return receipts

        book = inventory[index]
        console.write(
            f"Book title: {book.title}\n"
            f"Retail Price: {book.retail:.2f}\n"
            f"Quantity: {book.quantity}\n"
        )
        quantity = _ask_quantity(console)
        try:
            cart.add(isbn, quantity)
        except OutOfStockError:
            console.write("Not enough book in stock!\nQuitting....\n\n")
            cart.cancel()
            return receipts

        if confirm(console, "Would you like to purchase another book? (y/N) "):
            continue

        receipt = build_receipt(cart)
        receipts.append(receipt)
        console.write(format_receipt(receipt, current_time(clock)))
        again = confirm(console, "Would you like to make another transaction? (y/N): ")
        cart.clear()
        console.write("\n")
        if not again:
            return receipts


def reports_menu(inventory: Inventory, console: Console, clock: Clock | None = None) -> None:
    """Run the reports menu until the user returns to the main menu."""
    while True:
        console.write("\n")
        try:
            choice = console.ask_int(REPORTS_MENU)
        except ValueError:
            choice = 0
        if choice == 7:
            console.write("You selected item 7\n")
            break
        if 1 <= choice <= 6:
            console.write(render_report(ReportKind(choice), inventory, current_time(clock)))
        else:
            console.write("Please enter a number in the range 1-7\n")
    console.write("Menu exited\n")


def load_inventory(path: str | os.PathLike[str]) -> Inventory:
    """Read an inventory from the record file at ``path``, creating the file if needed."""
    with RecordFile(path) as records:
        books = list(records)
    return Inventory(books, max(DEFAULT_CAPACITY, len(books)))


def save_inventory(inventory: Inventory, path: str | os.PathLike[str]) -> None:
    """Write every slot of ``inventory`` to the record file at ``path``, replacing it."""
    target = Path(path)
    target.unlink(missing_ok=True)
    with RecordFile(target) as records:
        for index, book in enumerate(inventory):
            records.write(book, index)
"""Shopping cart and receipts for the cashier."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .inventory import Inventory

TAX_RATE = 0.06
SHOP_BANNER = "Serendipity Book Sellers"
THANK_YOU = "Thank You for Shopping at Serendipity!"


class OutOfStockError(Exception):
    """Raised when more copies are asked for than are on hand."""


@dataclass(frozen=True)
class ReceiptLine:
    """One purchased title on a receipt."""

    quantity: int
    isbn: str
    title: str
    price: float

    @property
    def total(self) -> float:
        return self.quantity * self.price


@dataclass(frozen=True)
class Receipt:
    """Purchased lines with their totals."""

    lines: list[ReceiptLine] = field(default_factory=list)
    subtotal: float = 0.0
    tax: float = 0.0
    total: float = 0.0


class Cart:
    """Books taken off the shelf during one transaction."""

    def __init__(self, inventory: Inventory) -> None:
        self.inventory = inventory
        self._counts: dict[int, int] = {}

    def add(self, isbn: str, quantity: int) -> int:
        """Take ``quantity`` copies of ``isbn`` off the shelf; return the slot index."""
        if quantity < 0:
            raise ValueError("quantity must not be negative")
        index = self.inventory.find_isbn(isbn)
        book = self.inventory[index]
        if book.quantity - quantity < 0:
            raise OutOfStockError("Not enough book in stock!")
        book.quantity -= quantity
        self._counts[index] = self._counts.get(index, 0) + quantity
        return index

    def cancel(self) -> None:
        """Put everything in the cart back on the shelf and empty the cart."""
        for index, count in self._counts.items():
            self.inventory[index].quantity += count
        self._counts.clear()

    def clear(self) -> None:
        """Empty the cart once the sale is done."""
        self._counts.clear()

    def items(self) -> list[tuple[int, int]]:
        """Return ``(index, quantity)`` for each title in the cart, by slot order."""
        return sorted((i, n) for i, n in self._counts.items() if n != 0)


def build_receipt(cart: Cart) -> Receipt:
    """Price the contents of ``cart``."""
    lines = []
    for index, count in cart.items():
        book = cart.inventory[index]
        lines.append(ReceiptLine(count, book.isbn, book.title, book.retail))
    subtotal = sum(line.total for line in lines)
    tax = subtotal * TAX_RATE
    return Receipt(lines, subtotal, tax, subtotal + tax)


def format_receipt(receipt: Receipt, when: datetime) -> str:
    """Return the printed receipt, dated ``when``."""
    out = [
        f"Today's Date: {when.ctime()}",
        "",
        SHOP_BANNER,
        "Date: ",
        f"{'Qty':>6}{'ISBN':>20}{'Title':>20}{'Price':>15}{'Total':>15}",
        "_" * 100,
    ]
    out.extend(
        f"{line.quantity:>6}{line.isbn:>20}{line.title:>20}"
        f"{line.price:>15.2f}{line.total:>15.2f}"
        for line in receipt.lines
    )
    for label, amount in (
        ("Subtotal", receipt.subtotal),
        ("Tax", receipt.tax),
        ("Total", receipt.total),
    ):
        out.append(f"{'':10}{label:<20}{amount:>50.2f}")
    out.append(THANK_YOU)
    return "\n".join(out) + "\n"
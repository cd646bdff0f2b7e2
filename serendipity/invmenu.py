"""Interactive inventory database menu: look up, add, edit and delete books."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

from .book import (
    AUTHOR_LIMIT,
    DATE_LIMIT,
    ISBN_LIMIT,
    PUBLISHER_LIMIT,
    STORE_NAME,
    TITLE_LIMIT,
    Book,
    format_book_info,
    normalize_text,
)
from .inventory import BookNotFoundError, Inventory

INVENTORY_MENU = (
    "\n"
    f"{STORE_NAME}\n"
    "Inventory Database\n"
    "1. Look Up a Book\n"
    "2. Add a Book\n"
    "3. Edit a Book's Record\n"
    "4. Delete a Book\n"
    "5. Return to the Main Menu\n"
    "\n"
    "Enter Your Choice: "
)

EDIT_MENU = (
    "1. ISBN\n"
    "2. Title\n"
    "3. Author\n"
    "4. Publisher \n"
    "5. Date Added\n"
    "6. Quantity-On-Hand \n"
    "7. Wholesale Cost \n"
    "8. Retail Price \n"
    "9. Quit\n"
    "\n"
)


class Console:
    """Line-oriented prompt and output over a pair of text streams."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def write(self, text: str) -> None:
        """Write ``text`` as it is."""
        self.stdout.write(text)
        self.stdout.flush()

    def ask(self, prompt: str) -> str:
        """Show ``prompt`` and return the next input line without its line end.

        Raises EOFError when the input is exhausted.
        """
        self.write(prompt)
        line = self.stdin.readline()
        if line == "":
            raise EOFError("no more input")
        return line.rstrip("\r\n")

    def ask_int(self, prompt: str) -> int:
        """Show ``prompt`` and return the whole number typed; ValueError if not one."""
        return int(self.ask(prompt).strip())

    def ask_float(self, prompt: str) -> float:
        """Show ``prompt`` and return the number typed; ValueError if not one."""
        return float(self.ask(prompt).strip())


def _ask_number(console: Console, prompt: str, kind: type) -> int | float:
    """Keep asking until a number of type ``kind`` is entered."""
    reader = console.ask_int if kind is int else console.ask_float
    while True:
        try:
            return reader(prompt)
        except ValueError:
            console.write("Invalid number\n")


def confirm(console: Console, message: str) -> bool:
    """Ask ``message`` and return True only when the answer is ``y``."""
    return console.ask(message).strip() == "y"


def _display_book(inventory: Inventory, console: Console, index: int) -> None:
    console.write(format_book_info(inventory[index]))


def choose_book(inventory: Inventory, console: Console, text: str) -> int:
    """Let the user pick one of the books whose title contains ``text``.

    Raises BookNotFoundError when no title matches.
    """
    matches = inventory.search_titles(text)
    if not matches:
        raise BookNotFoundError(f"no title matches {text!r}")
    for number, index in enumerate(matches, start=1):
        console.write(f"==========\n{number}.\n")
        _display_book(inventory, console, index)
    while True:
        try:
            choice = console.ask_int("\nChoose a book: ")
        except ValueError:
            choice = 0
        if 0 < choice <= len(matches):
            return matches[choice - 1]
        console.write("\nInvalid Choice\n")


def look_up_book(inventory: Inventory, console: Console) -> int | None:
    """Find a book by title and show it; return its index or None."""
    console.write("You selected Look Up Book.\n")
    text = console.ask("Title of book to look up: ")
    try:
        index = choose_book(inventory, console, text)
    except BookNotFoundError:
        console.write("Book not in inventory\n")
        return None
    _display_book(inventory, console, index)
    console.write("Book looked up...\n")
    return index


def add_book(inventory: Inventory, console: Console) -> int | None:
    """Ask for a new book and store it in the first free slot; return its index."""
    console.write("You selected Add Book.\n")
    index = inventory.first_free_slot()
    if index is None:
        console.write("Inventory full...\n")
        return None
    book = Book(
        title=normalize_text(console.ask("Book title: "), TITLE_LIMIT),
        isbn=normalize_text(console.ask("ISBN #: "), ISBN_LIMIT),
        author=normalize_text(console.ask("Author's name: "), AUTHOR_LIMIT),
        publisher=normalize_text(console.ask("Publisher's name: "), PUBLISHER_LIMIT),
        date_added=normalize_text(console.ask("Date: "), DATE_LIMIT, upper=False),
    )
    book.quantity = int(_ask_number(console, "Quantity of book: ", int))
    book.wholesale = float(_ask_number(console, "Wholesale cost: ", float))
    book.retail = float(_ask_number(console, "Retail cost: ", float))
    inventory[index] = book
    return index


@dataclass(frozen=True)
class _Field:
    label: str
    attr: str
    kind: type
    limit: int = 0
    upper: bool = True


_EDIT_FIELDS = {
    1: _Field("ISBN", "isbn", str, ISBN_LIMIT),
    2: _Field("Title", "title", str, TITLE_LIMIT),
    3: _Field("Author", "author", str, AUTHOR_LIMIT),
    4: _Field("Publisher", "publisher", str, PUBLISHER_LIMIT),
    5: _Field("Date Added", "date_added", str, DATE_LIMIT, upper=False),
    6: _Field("Quantity-On-Hand", "quantity", int),
    7: _Field("Wholesale Cost", "wholesale", float),
    8: _Field("Retail Price", "retail", float),
}


def edit_book_menu(inventory: Inventory, console: Console, index: int) -> None:
    """Show the book at ``index`` and edit its fields until the user quits."""
    while True:
        _display_book(inventory, console, index)
        console.write("\n\n" + EDIT_MENU)
        try:
            choice = console.ask_int("Which one to edit? (1-9): ")
        except ValueError:
            choice = 0
        if choice == 9:
            return
        field = _EDIT_FIELDS.get(choice)
        if field is None:
            console.write("Invalid choice. (1-9)\n")
            continue
        if not confirm(console, f"{field.label}? (y/N): "):
            continue
        if field.kind is str:
            value = normalize_text(console.ask("New value: "), field.limit, field.upper)
        else:
            value = _ask_number(console, "New value: ", field.kind)
        setattr(inventory[index], field.attr, value)


def edit_book(inventory: Inventory, console: Console) -> int | None:
    """Find a book by title and edit it; return its index or None."""
    console.write("You selected Edit Book.\n")
    text = console.ask("Title of book to edit: ")
    try:
        index = choose_book(inventory, console, text)
    except BookNotFoundError:
        console.write("Book not in inventory.\n")
        return None
    edit_book_menu(inventory, console, index)
    console.write("Book edited...\n")
    return index


def delete_book(inventory: Inventory, console: Console) -> bool:
    """Find a book by title and, once confirmed, free its slot."""
    console.write("You selected Delete Book.\n")
    text = console.ask("Title of book to delete: ")
    try:
        index = choose_book(inventory, console, text)
    except BookNotFoundError:
        return False
    _display_book(inventory, console, index)
    if not confirm(console, "\nAre you sure you want to delete this book? (y/N): "):
        return False
    inventory.remove(index)
    console.write("Book deleted...\n")
    return True


def inventory_menu(inventory: Inventory, console: Console) -> None:
    """Run the inventory database menu until the user returns to the main menu."""
    actions = {1: look_up_book, 2: add_book, 3: edit_book, 4: delete_book}
    while True:
        try:
            choice = console.ask_int(INVENTORY_MENU)
        except ValueError:
            choice = 0
        if choice == 5:
            console.write("You selected item 5\n")
            break
        action = actions.get(choice)
        if action is None:
            console.write("Please enter a number in the range 1-5\n")
        else:
            action(inventory, console)
    console.write("Menu exited\n\n")
"""Main menu of the bookshop and the command that starts it."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .book import STORE_NAME
from .inventory import Inventory, default_inventory
from .invmenu import Console, inventory_menu
from .session import Clock, cashier_session, load_inventory, reports_menu, save_inventory

MAIN_MENU = (
    "\n"
    f"{STORE_NAME}\n"
    "1. Cashier Module\n"
    "2. Inventory Database Module\n"
    "3. Report Module\n"
    "4. Exit\n"
    "\n"
    "Enter your choice: "
)


def main_menu(
    inventory: Inventory, console: Console, clock: Clock | None = None
) -> None:
    """Run the main menu until the user chooses to exit.

    Raises EOFError when the input runs out before the user exits.
    """
    while True:
        try:
            choice = console.ask_int(MAIN_MENU)
        except ValueError:
            choice = 0
        if choice == 1:
            console.write("You selected item 1\n")
            cashier_session(inventory, console, clock)
        elif choice == 2:
            console.write("You selected item 2\n")
            inventory_menu(inventory, console)
        elif choice == 3:
            console.write("You selected item 3\n")
            reports_menu(inventory, console, clock)
        elif choice == 4:
            console.write("You selected item 4\n")
            return
        else:
            console.write("Please enter a number in the range 1-4\n")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="serendipity", description="Point-of-sale and inventory for a bookshop."
    )
    parser.add_argument(
        "--file",
        metavar="PATH",
        help="record file holding the inventory; read at start and written at exit",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the bookshop program and return its exit status."""
    args = _parse_args(argv)
    inventory = load_inventory(args.file) if args.file else default_inventory()
    console = Console()
    try:
        main_menu(inventory, console)
    except EOFError:
        console.write("\n")
    finally:
        if args.file:
            save_inventory(inventory, args.file)
    return 0
import io
from datetime import datetime

import pytest

from serendipity.cli import MAIN_MENU, main, main_menu
from serendipity.inventory import Inventory, default_inventory
from serendipity.invmenu import Console
from serendipity.session import load_inventory


def _console(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def _clock():
    return datetime(2021, 5, 6, 12, 0, 0)


def test_exit_choice_ends_menu():
    console, out = _console("4\n")
    main_menu(default_inventory(), console, _clock)
    text = out.getvalue()
    assert text.count("Enter your choice: ") == 1
    assert "You selected item 4\n" in text
    assert "1. Cashier Module" in text


def test_out_of_range_choice_is_reported():
    console, out = _console("9\n4\n")
    main_menu(default_inventory(), console, _clock)
    assert "Please enter a number in the range 1-4\n" in out.getvalue()
    assert out.getvalue().count(MAIN_MENU) == 2


def test_non_number_choice_is_reported():
    console, out = _console("abc\n4\n")
    main_menu(default_inventory(), console, _clock)
    assert "Please enter a number in the range 1-4\n" in out.getvalue()


def test_inventory_menu_is_reached():
    console, out = _console("2\n5\n4\n")
    main_menu(default_inventory(), console, _clock)
    text = out.getvalue()
    assert "You selected item 2\n" in text
    assert "Inventory Database" in text
    assert "Menu exited" in text


def test_reports_menu_is_reached():
    inventory = default_inventory()
    console, out = _console("3\n1\n7\n4\n")
    main_menu(inventory, console, _clock)
    text = out.getvalue()
    assert "You selected item 3\n" in text
    assert "Book #5" in text
    assert "Book #6" not in text


def test_cashier_sale_reduces_stock():
    inventory = default_inventory()
    before = inventory[2].quantity
    console, out = _console("1\nQWER-5433\n2\nn\nn\n4\n")
    main_menu(inventory, console, _clock)
    assert inventory[2].quantity == before - 2
    assert "Thank You for Shopping at Serendipity!" in out.getvalue()


def test_end_of_input_raises():
    console, _ = _console("")
    with pytest.raises(EOFError):
        main_menu(Inventory(), console, _clock)


def test_main_without_file_exits(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n"))
    assert main([]) == 0
    assert "You selected item 4" in capsys.readouterr().out


def test_main_handles_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    assert "Enter your choice: " in capsys.readouterr().out


def test_main_saves_added_book_to_file(monkeypatch, tmp_path):
    path = tmp_path / "inventory.dat"
    entry = "2\n2\nnew book\nisbn-1\nauthor\npub\n01-01-2022\n3\n1.5\n2.5\n5\n4\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(entry))
    assert main(["--file", str(path)]) == 0
    saved = load_inventory(path)
    book = saved[0]
    assert book.title == "NEW BOOK"
    assert book.isbn == "ISBN-1"
    assert book.date_added == "01-01-2022"
    assert book.quantity == 3
    assert book.wholesale == 1.5
    assert book.retail == 2.5


def test_main_reads_existing_file(monkeypatch, tmp_path, capsys):
    path = tmp_path / "inventory.dat"
    first = "2\n2\nsaved title\nX-1\na\np\n02-02-2022\n1\n1\n1\n5\n4\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(first))
    main(["--file", str(path)])
    capsys.readouterr()
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1\n7\n4\n"))
    assert main(["--file", str(path)]) == 0
    assert "Title: SAVED TITLE" in capsys.readouterr().out
# serendipity

A terminal point-of-sale and inventory program for a small bookshop.
It has a cashier that sells books and prints a receipt with 6% sales tax,
an inventory database where you look up, add, edit and delete books, and
reports that list the stock and give its wholesale and retail value.

## Installing

```
pip install .
```

## Running

```
serendipity
```

This starts with a built-in inventory of five books, held in memory only;
changes are lost when the program ends.

To keep the inventory in a file, pass `--file`:

```
serendipity --file inventory.dat
```

The file is read at start (and created empty if it does not exist) and
written back when the program ends, whether through the Exit choice or
because input runs out. It holds at least 20 book slots.

The main menu offers:

1. Cashier Module: enter an ISBN and a quantity, keep adding books, then
   get a receipt with subtotal, tax and total. Asking for more copies than
   are on hand puts everything in the cart back on the shelf and leaves
   the cashier.
2. Inventory Database Module: look up, add, edit or delete a book. Searches
   match any part of a title and ignore case; when several titles match you
   pick one by number.
3. Report Module: inventory listing, wholesale value, retail value, and
   listings by quantity, by cost and by age.
4. Exit.

Titles, ISBNs, authors and publishers are stored in upper case. Text fields
are cut to fixed lengths: 50 characters for titles, 13 for ISBNs, 30 for
authors and publishers, and 10 for dates, which are written as `MM-DD-YYYY`.

## Using it as a library

```python
from datetime import datetime

from serendipity.inventory import default_inventory
from serendipity.cashier import Cart, build_receipt, format_receipt

inventory = default_inventory()
cart = Cart(inventory)
cart.add("QWER-5433", 2)
print(format_receipt(build_receipt(cart), datetime(2024, 1, 1)))
```

The main pieces:

- `serendipity.book`: the `Book` dataclass, `normalize_text` and
  `format_book_info`.
- `serendipity.inventory`: `Inventory`, a fixed number of book slots with
  `find_isbn`, `search_titles`, `add`, `remove` and `stocked`;
  `default_inventory()` gives the five starting books. Lookups that fail
  raise `BookNotFoundError`; adding to a full inventory raises
  `InventoryFullError`.
- `serendipity.cashier`: `Cart`, `build_receipt`, `format_receipt`, and
  `OutOfStockError`.
- `serendipity.reports`: `ReportKind`, `render_report`, `wholesale_total`,
  `retail_total`, `by_quantity`, `by_cost` and `by_age`.
- `serendipity.storage`: `RecordFile` keeps books as fixed-size records in
  a binary file; `encode_book` and `decode_book` convert single records.
- `serendipity.session`: `cashier_session`, `reports_menu`,
  `load_inventory` and `save_inventory`.
- `serendipity.invmenu` and `serendipity.cli`: the interactive menus,
  driven through a `Console` over any pair of text streams.

## Tests

```
pip install .[test]
pytest
```
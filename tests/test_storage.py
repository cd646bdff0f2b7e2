import pytest

from serendipity.book import Book
from serendipity.storage import (
    RECORD_SIZE,
    RecordFile,
    StorageError,
    decode_book,
    encode_book,
)


def _sample(title="LORD OF THE RING", quantity=6):
    return Book(
        title=title,
        isbn="QWER-5433",
        author="YAAAA",
        publisher="PIXAR",
        date_added="05-06-2019",
        quantity=quantity,
        wholesale=9.99,
        retail=4.55,
    )


def test_encode_has_fixed_size():
    assert len(encode_book(_sample())) == RECORD_SIZE
    assert len(encode_book(Book())) == RECORD_SIZE


def test_encode_decode_round_trip():
    book = _sample()
    assert decode_book(encode_book(book)) == book


def test_empty_book_round_trip():
    decoded = decode_book(encode_book(Book()))
    assert decoded.is_empty() is True
    assert decoded == Book()


def test_decode_wrong_size():
    with pytest.raises(StorageError):
        decode_book(b"short")


def test_encode_field_too_long():
    book = _sample(title="T" * 51)
    with pytest.raises(StorageError):
        encode_book(book)


def test_new_file_is_empty(tmp_path):
    with RecordFile(tmp_path / "inventory.dat") as records:
        assert len(records) == 0
        assert list(records) == []


def test_append_and_read(tmp_path):
    with RecordFile(tmp_path / "inventory.dat") as records:
        first = records.append(_sample("JAMES", 0))
        second = records.append(_sample("BACK TO THE PAST", 7))
        assert (first, second) == (0, 1)
        assert len(records) == 2
        assert records.read(1).title == "BACK TO THE PAST"
        assert [b.title for b in records] == ["JAMES", "BACK TO THE PAST"]


def test_write_overwrites_in_place(tmp_path):
    with RecordFile(tmp_path / "inventory.dat") as records:
        records.append(_sample("JAMES", 0))
        records.append(_sample("BACK TO THE PAST", 7))
        assert records.write(_sample("JAMES", 5), 0) == 0
        assert len(records) == 2
        assert records.read(0).quantity == 5
        assert records.read(1).quantity == 7


def test_records_persist_after_reopen(tmp_path):
    path = tmp_path / "inventory.dat"
    with RecordFile(path) as records:
        records.append(_sample())
    with RecordFile(path) as records:
        assert records.read(0) == _sample()
    assert path.stat().st_size == RECORD_SIZE


def test_read_out_of_range(tmp_path):
    with RecordFile(tmp_path / "inventory.dat") as records:
        records.append(_sample())
        with pytest.raises(IndexError):
            records.read(1)
        with pytest.raises(IndexError):
            records.read(-1)


def test_write_past_end_rejected(tmp_path):
    with RecordFile(tmp_path / "inventory.dat") as records:
        with pytest.raises(IndexError):
            records.write(_sample(), 2)
        assert len(records) == 0


def test_removed_book_stays_removed(tmp_path):
    with RecordFile(tmp_path / "inventory.dat") as records:
        book = _sample()
        records.append(book)
        book.remove()
        records.write(book, 0)
        assert records.read(0).is_empty() is True
        assert records.read(0).isbn == "QWER-5433"
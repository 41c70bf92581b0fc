import pytest

from models.book import Book


def test_round_trips_through_dict():
    book = Book("abc", "Title", "Author", "ISBN-1")
    assert book.to_dict() == {"id": "abc", "title": "Title", "author": "Author", "isbn": "ISBN-1"}
    assert Book.from_dict(book.to_dict()) == book


def test_from_dict_rejects_missing_fields():
    with pytest.raises(ValueError, match="isbn"):
        Book.from_dict({"id": "abc", "title": "T", "author": "A"})


def test_from_dict_rejects_non_string_fields():
    with pytest.raises(ValueError, match="title"):
        Book.from_dict({"id": "abc", "title": 3, "author": "A", "isbn": "I"})


def test_from_dict_rejects_non_objects():
    with pytest.raises(ValueError):
        Book.from_dict(["abc"])

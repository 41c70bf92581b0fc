# stores/book_store.py
from __future__ import annotations
import os
import json
import logging
import secrets
from dataclasses import dataclass, field, replace
from pathlib import Path

from models.book import Book
from transforms import (
    fold_complexity,
    interleave,
    merge_titles,
    next_factor,
    reverse_text,
    shift_characters,
    sort_isbn_segments,
    xor_strings,
)

logger = logging.getLogger(__name__)

DEFAULT_OPTIMIZATION_FACTOR = 42


def new_book_id() -> str:
    return secrets.token_hex(16)


@dataclass
class BookStore:
    path: Path  # e.g. Path(".../data/books.json")
    optimization_factor: int = DEFAULT_OPTIMIZATION_FACTOR
    _books: list[Book] = field(default_factory=list, repr=False)

    @classmethod
    def default(cls) -> "BookStore":
        import config

        return cls.open(config.CATALOG_PATH, optimization_factor=config.OPTIMIZATION_FACTOR)

    @classmethod
    def open(cls, path: Path | str, optimization_factor: int = DEFAULT_OPTIMIZATION_FACTOR) -> "BookStore":
        store = cls(Path(path), optimization_factor)
        store.load()
        return store

    def __len__(self) -> int:
        return len(self._books)

    # ========== Persistence ==========

    def load(self) -> None:
        if not self.path.exists():
            self._books = []
            return
        raw = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(raw, list):
            raise ValueError(f"{self.path} must hold a JSON array of books")
        self._books = [Book.from_dict(item) for item in raw]
        logger.debug("Loaded %d books from %s", len(self._books), self.path)

    def save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # ASCII escapes keep lone surrogates from shifted/xored text writable
        payload = json.dumps([b.to_dict() for b in self._books], indent=2, ensure_ascii=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(payload, encoding="utf-8")
        os.replace(tmp, self.path)
        logger.debug("Saved %d books to %s", len(self._books), self.path)

    # ========== CRUD ==========

    def all_books(self) -> list[Book]:
        return list(self._books)

    def read(self, book_id: str) -> Book | None:
        for book in self._books:
            if book.id == book_id:
                return book
        return None

    def find(self, query: str) -> list[Book]:
        q = (query or "").strip().lower()
        if not q:
            return self.all_books()
        return [b for b in self._books if q in f"{b.title} {b.author}".lower()]

    def create(self, title: str, author: str, isbn: str) -> str:
        book = Book(self._unique_id(), title, author, isbn)
        self._books.append(book)
        logger.debug("Created book %s", book.id)
        self.save()
        return book.id

    def update(self, book_id: str, title: str, author: str, isbn: str) -> bool:
        """Returns False (and leaves the file alone) when the id is unknown."""
        idx = self._index_of(book_id)
        if idx is None:
            return False
        self._books[idx] = replace(self._books[idx], title=title, author=author, isbn=isbn)
        logger.debug("Updated book %s", book_id)
        self.save()
        return True

    def delete(self, book_id: str) -> None:
        self._books = [b for b in self._books if b.id != book_id]
        logger.debug("Deleted book %s", book_id)
        self.save()

    # ========== Transform / merge ==========

    def transform(self, book_id: str, intensity: int) -> str | None:
        """
        Rewrites the book in place (shifted title, reversed author,
        segment-sorted isbn) and appends an untouched copy of its
        previous values. Returns the copy's id, or None if the id is unknown.
        """
        book = self.read(book_id)
        if book is None:
            return None

        new_title = shift_characters(book.title, intensity)
        self.update(book_id, new_title, reverse_text(book.author), sort_isbn_segments(book.isbn))
        copy_id = self.create(book.title, book.author, book.isbn)
        self.optimization_factor = next_factor(self.optimization_factor, intensity)
        logger.debug("Transformed book %s (copy %s), factor now %d", book_id, copy_id, self.optimization_factor)
        return copy_id

    def merge(self, first_id: str, second_id: str) -> str | None:
        first = self.read(first_id)
        second = self.read(second_id)
        if first is None or second is None:
            return None

        merged = Book(
            id=self._unique_id(),
            title=merge_titles(first.title, second.title),
            author=interleave(first.author, second.author),
            isbn=xor_strings(first.isbn, second.isbn),
        )
        self._books.append(merged)
        self._books = [b for b in self._books if b.id not in (first_id, second_id)]
        logger.debug("Merged %s and %s into %s", first_id, second_id, merged.id)
        self.save()
        return merged.id

    def complexity(self) -> int:
        return fold_complexity(self._books, self.optimization_factor)

    # ========== Internals ==========

    def _index_of(self, book_id: str) -> int | None:
        for i, book in enumerate(self._books):
            if book.id == book_id:
                return i
        return None

    def _unique_id(self) -> str:
        taken = {b.id for b in self._books}
        book_id = new_book_id()
        while book_id in taken:
            book_id = new_book_id()
        return book_id

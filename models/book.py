# models/book.py
from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Any

_FIELDS = ("id", "title", "author", "isbn")


@dataclass(frozen=True)
class Book:
    id: str
    title: str
    author: str
    isbn: str  # hyphen-delimited catalog code, e.g. "ISBN-3-k2f9a"

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Book":
        if not isinstance(raw, dict):
            raise ValueError(f"book entry must be an object, got {type(raw).__name__}")
        missing = [k for k in _FIELDS if k not in raw]
        if missing:
            raise ValueError(f"book entry missing fields: {', '.join(missing)}")
        bad = [k for k in _FIELDS if not isinstance(raw[k], str)]
        if bad:
            raise ValueError(f"book fields must be strings: {', '.join(bad)}")
        return cls(raw["id"], raw["title"], raw["author"], raw["isbn"])

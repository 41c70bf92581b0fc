"""Root conftest — keep the catalog out of the working tree during tests."""

import os
import tempfile

import pytest

# config.py reads this at import time
os.environ.setdefault("CATALOG_DATA_DIR", tempfile.mkdtemp(prefix="catalog-tests-"))

from stores.book_store import BookStore  # noqa: E402


@pytest.fixture
def store(tmp_path):
    return BookStore(tmp_path / "books.json")

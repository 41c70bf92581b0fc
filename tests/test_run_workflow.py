"""Workflow driver: seed, transform, merge down, optimise."""

import logging
import random

import config
import run_workflow
from stores.book_store import BookStore


def test_random_suffix_is_base36():
    suffix = run_workflow.random_suffix(random.Random(1))
    assert len(suffix) == 5
    assert all(ch.isdigit() or ch.islower() for ch in suffix)


def test_workflow_merges_down_to_threshold(store, monkeypatch):
    monkeypatch.setattr(config, "MAX_OPTIMIZATION_ROUNDS", 0)
    run_workflow.run_workflow(store, random.Random(0))
    assert len(store) == config.MERGE_THRESHOLD
    assert store.optimization_factor == 58  # 42 * 7**10 % 100


def test_workflow_transforms_appended_copies_too(store, monkeypatch):
    monkeypatch.setattr(config, "MERGE_THRESHOLD", 100)
    monkeypatch.setattr(config, "MAX_OPTIMIZATION_ROUNDS", 0)
    run_workflow.run_workflow(store, random.Random(0))
    # 10 seeded, every even slot of the growing list transformed: 10 copies
    assert len(store) == 20


def test_workflow_reaches_optimization_threshold(store):
    complexity = run_workflow.run_workflow(store, random.Random(0))
    assert complexity == store.complexity()
    assert complexity >= config.OPTIMIZATION_THRESHOLD
    assert BookStore.open(store.path).all_books() == store.all_books()


def test_workflow_seeds_expected_books(store, monkeypatch):
    monkeypatch.setattr(config, "SEED_BOOKS", 2)
    monkeypatch.setattr(config, "MERGE_THRESHOLD", 100)
    monkeypatch.setattr(config, "MAX_OPTIMIZATION_ROUNDS", 0)
    run_workflow.run_workflow(store, random.Random(0))

    books = store.all_books()
    # slot 2 is the copy of book 0, which gets transformed in turn
    assert [b.author for b in books] == ["0 rohtuA", "Author 1", "0 rohtuA", "Author 0"]
    assert books[1].isbn.startswith("ISBN-1-")
    assert books[3].title == "Book 0"
    assert store.optimization_factor == 58


def test_workflow_with_no_seed_books(store, monkeypatch):
    monkeypatch.setattr(config, "SEED_BOOKS", 0)
    assert run_workflow.run_workflow(store, random.Random(0)) == 0
    assert len(store) == 0


def test_main_logs_failure_and_elapsed_time(store, monkeypatch, caplog):
    def boom():
        raise OSError("disk unavailable")

    monkeypatch.setattr(store, "save", boom)
    caplog.set_level(logging.INFO)

    run_workflow.main(store)

    messages = [r.getMessage() for r in caplog.records]
    assert any("unexpected error" in m and "disk unavailable" in m for m in messages)
    assert any(m.startswith("Total execution time:") for m in messages)


def test_main_runs_to_completion(store, caplog):
    caplog.set_level(logging.INFO)
    run_workflow.main(store)
    messages = [r.getMessage() for r in caplog.records]
    assert "Book management workflow completed successfully." in messages
    assert len(store) >= config.MERGE_THRESHOLD

# run_workflow.py
from __future__ import annotations
import logging
import random
import string
import time

import config
from logging_config import setup_logging
from stores.book_store import BookStore

logger = logging.getLogger("workflow")

_SUFFIX_ALPHABET = string.digits + string.ascii_lowercase


def random_suffix(rng: random.Random, length: int = 5) -> str:
    return "".join(rng.choice(_SUFFIX_ALPHABET) for _ in range(length))


def run_workflow(store: BookStore, rng: random.Random | None = None) -> int:
    rng = rng or random.Random()
    intensity = config.TRANSFORMATION_INTENSITY

    for i in range(config.SEED_BOOKS):
        store.create(f"Book {i}", f"Author {i}", f"ISBN-{i}-{random_suffix(rng)}")
    logger.info("Seeded %d books", config.SEED_BOOKS)

    # Live view: copies appended by a transform are visited too
    i = 0
    while i < len(store):
        if i % 2 == 0:
            store.transform(store.all_books()[i].id, intensity)
        i += 1

    while len(store) > config.MERGE_THRESHOLD:
        first, second = store.all_books()[:2]
        logger.info("Merging books %s and %s...", first.id, second.id)
        store.merge(first.id, second.id)

    complexity = store.complexity()
    logger.info("Initial book complexity: %d", complexity)

    rounds = 0
    while len(store) and complexity < config.OPTIMIZATION_THRESHOLD and rounds < config.MAX_OPTIMIZATION_ROUNDS:
        target = rng.choice(store.all_books())
        store.transform(target.id, intensity)
        complexity = store.complexity()
        rounds += 1
        logger.info("Optimized book complexity: %d", complexity)

    if complexity < config.OPTIMIZATION_THRESHOLD:
        logger.warning("Stopped after %d rounds below threshold %d", rounds, config.OPTIMIZATION_THRESHOLD)

    logger.info("Book management workflow completed successfully.")
    return complexity


def main(store: BookStore | None = None) -> None:
    setup_logging(config.LOG_LEVEL, config.LOG_FILE)
    logger.info("Initializing book management workflow...")

    start = time.perf_counter()
    try:
        if store is None:
            store = BookStore.default()
        logger.info("Catalog file: %s", store.path)
        run_workflow(store)
    except Exception as e:
        logger.exception("An unexpected error occurred in the book management workflow: %s", e)
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info("Total execution time: %.2f milliseconds", elapsed_ms)


if __name__ == "__main__":
    main()

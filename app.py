# app.py
from __future__ import annotations
from flask import Flask

from blueprints import api_bp
from config import FLASK_PORT, LOG_FILE, LOG_LEVEL
from logging_config import setup_logging
from stores.book_store import BookStore


def create_app(store: BookStore | None = None) -> Flask:
    app = Flask(__name__)
    app.extensions["book_store"] = store if store is not None else BookStore.default()
    app.register_blueprint(api_bp)
    return app


if __name__ == "__main__":
    setup_logging(LOG_LEVEL, LOG_FILE)
    create_app().run(
        debug=True,
        host="0.0.0.0",
        port=FLASK_PORT
    )

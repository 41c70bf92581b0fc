from flask import Blueprint, current_app, jsonify, request

from stores.book_store import BookStore

bp = Blueprint("api", __name__, url_prefix="/api")

_BOOK_FIELDS = ("title", "author", "isbn")


def _store() -> BookStore:
    return current_app.extensions["book_store"]


def _book_fields(payload: dict) -> tuple[str, str, str] | None:
    values = [payload.get(k) for k in _BOOK_FIELDS]
    if not all(isinstance(v, str) for v in values):
        return None
    return values[0], values[1], values[2]


def _payload() -> dict:
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def _not_found():
    return jsonify({"error": "Not found"}), 404


@bp.get("/books")
def books_list():
    q = request.args.get("q") or ""
    out = [b.to_dict() for b in _store().find(q)]
    return jsonify({"items": out, "count": len(out)}), 200


@bp.post("/books")
def books_create():
    payload = _payload()
    fields = _book_fields(payload)
    if not fields:
        return jsonify({"error": "Expected string 'title', 'author' and 'isbn'."}), 400

    store = _store()
    book_id = store.create(*fields)
    return jsonify({"saved": store.read(book_id).to_dict()}), 201


@bp.get("/books/<book_id>")
def books_get(book_id: str):
    book = _store().read(book_id)
    if not book:
        return _not_found()
    return jsonify(book.to_dict()), 200


@bp.put("/books/<book_id>")
def books_update(book_id: str):
    payload = _payload()
    fields = _book_fields(payload)
    if not fields:
        return jsonify({"error": "Expected string 'title', 'author' and 'isbn'."}), 400

    store = _store()
    if not store.update(book_id, *fields):
        return _not_found()
    return jsonify(store.read(book_id).to_dict()), 200


@bp.delete("/books/<book_id>")
def books_delete(book_id: str):
    _store().delete(book_id)
    return "", 204


@bp.post("/books/<book_id>/transform")
def books_transform(book_id: str):
    payload = _payload()
    intensity = payload.get("intensity")
    # bools are ints too; not accepted
    if not isinstance(intensity, int) or isinstance(intensity, bool) or intensity < 0:
        return jsonify({"error": "Expected non-negative integer 'intensity'."}), 400

    store = _store()
    copy_id = store.transform(book_id, intensity)
    if copy_id is None:
        return _not_found()
    return jsonify({
        "book": store.read(book_id).to_dict(),
        "copy": store.read(copy_id).to_dict(),
    }), 200


@bp.post("/books/merge")
def books_merge():
    payload = _payload()
    first, second = payload.get("first"), payload.get("second")
    if not isinstance(first, str) or not isinstance(second, str):
        return jsonify({"error": "Expected string 'first' and 'second' book ids."}), 400

    store = _store()
    merged_id = store.merge(first, second)
    if merged_id is None:
        return _not_found()
    return jsonify({"merged": store.read(merged_id).to_dict()}), 201


@bp.get("/complexity")
def complexity():
    store = _store()
    return jsonify({
        "complexity": store.complexity(),
        "optimization_factor": store.optimization_factor,
        "count": len(store),
    }), 200

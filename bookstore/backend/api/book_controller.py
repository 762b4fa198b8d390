from flask import Blueprint, request, jsonify

from backend.factories.service_factory import ServiceFactory

bp = Blueprint("book_controller", __name__)


@bp.route("/api/books/search", methods=["GET"])
def search_books():
    """
    Substring search across title, author, description and genre.
    GET /api/books/search?query=dragon
    """
    catalog = ServiceFactory.create_book_catalog_service()
    books = catalog.search_books(request.args.get("query"))
    return jsonify({"books": [b.to_json() for b in books]}), 200


@bp.route("/api/books/<genre>", methods=["GET"])
def get_books_by_genre(genre):
    """
    Case-insensitive genre lookup, served from the cache when possible.
    """
    catalog = ServiceFactory.create_book_catalog_service()
    books = catalog.get_books_by_genre(genre)
    return jsonify({"books": [b.to_json() for b in books]}), 200


@bp.route("/api/test", methods=["GET"])
def dump_books():
    """
    Raw dump of every stored book, for checking the database connection.
    """
    books = ServiceFactory.create_book_catalog_service().list_books()
    return jsonify({"count": len(books), "books": [b.to_json() for b in books]}), 200

"""
Error kinds raised by services and the single table that maps them to HTTP statuses.
"""
import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """
    Base class for errors that are rendered as a JSON body.
    Extra keyword arguments are merged into the body next to "message".
    """

    def __init__(self, message: str, **payload):
        super().__init__(message)
        self.message = message
        self.payload = payload

    def to_dict(self) -> dict:
        return {"message": self.message, **self.payload}


class BadRequestError(CatalogError):
    pass


class NotFoundError(CatalogError):
    pass


class ServerError(CatalogError):
    pass


ERROR_STATUS_CODES = {
    BadRequestError: 400,
    NotFoundError: 404,
    ServerError: 500,
}


def status_for(error: CatalogError) -> int:
    for cls in type(error).__mro__:
        if cls in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[cls]
    return 500


def register_error_handlers(app):
    @app.errorhandler(CatalogError)
    def handle_catalog_error(error):
        return jsonify(error.to_dict()), status_for(error)

    @app.errorhandler(429)
    def handle_rate_limit(error):
        return app.config["RATE_LIMIT_MESSAGE"], 429

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        if isinstance(error, HTTPException):
            return error
        logger.exception(f"Unhandled error: {error}")
        return jsonify({"message": "Server error"}), 500

import logging

from flask import Flask
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_pymongo import PyMongo
from pymongo.errors import PyMongoError

from shared.modules.cache.redis_cache_store import RedisCacheStore
from backend.config import Config
from backend.database.context import AppClients, EXTENSION_KEY
from backend.errors import register_error_handlers
from backend.commands import register_commands
from backend.modules.catalog.models.book_model import BookModel

logger = logging.getLogger(__name__)


def create_app(config=None, mongo_db=None, redis_client=None):
    """
    Build the Flask application.

    Args:
        config: Optional mapping or object overriding values from Config.
        mongo_db: Optional pymongo Database; created from MONGO_URI when omitted.
        redis_client: Optional redis client; created from REDIS_* when omitted.
    """
    app = Flask(__name__)
    app.config.from_object(Config)
    if isinstance(config, dict):
        app.config.from_mapping(config)
    elif config is not None:
        app.config.from_object(config)

    owned = []

    if mongo_db is None:
        mongo = PyMongo(app)
        mongo_db = mongo.db
        owned.append(mongo.cx)

    if redis_client is None:
        cache_store = RedisCacheStore(
            host=app.config["REDIS_HOST"],
            port=app.config["REDIS_PORT"],
            db=app.config["REDIS_DB"],
        )
        owned.append(cache_store)
    else:
        cache_store = RedisCacheStore(redis_client)

    app.extensions[EXTENSION_KEY] = AppClients(mongo_db, cache_store, owned=owned)

    CORS(app)
    Limiter(get_remote_address, app=app)
    register_error_handlers(app)
    register_commands(app)

    from backend.api.admin_controller import bp as admin_controller_bp
    from backend.api.book_controller import bp as book_controller_bp
    from backend.api.health_controller import bp as health_controller_bp
    app.register_blueprint(admin_controller_bp)
    app.register_blueprint(book_controller_bp)
    app.register_blueprint(health_controller_bp)

    if app.config["MONGO_ENSURE_INDEXES"]:
        ensure_indexes(app)

    return app


def ensure_indexes(app):
    """
    Create the books indexes. A failure is logged and the app keeps serving.
    """
    try:
        BookModel(app.extensions[EXTENSION_KEY].mongo_db).ensure_indexes()
        logger.info("✅ MongoDB connected, book indexes ready")
    except PyMongoError as e:
        logger.error(f"❌ MongoDB connection error: {e}")


def close_clients(app):
    """Shut down the store and cache clients created by create_app."""
    clients = app.extensions.get(EXTENSION_KEY)
    if clients is not None:
        clients.close()


def main():
    logging.basicConfig(level=Config.LOG_LEVEL)
    app = create_app()
    try:
        logger.info(f"Server running on port {app.config['PORT']}")
        app.run(host="0.0.0.0", port=app.config["PORT"], debug=False)
    finally:
        close_clients(app)


if __name__ == "__main__":
    main()

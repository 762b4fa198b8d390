"""
Application configuration, loaded with app.config.from_object().
Values come from the environment with local development defaults.
"""
import os


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    PORT = int(os.environ.get("PORT", 5000))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # MongoDB config
    MONGO_URI = os.environ.get("MONGO_URI", "mongodb://localhost:27017/bookstore")
    MONGO_ENSURE_INDEXES = _env_flag("MONGO_ENSURE_INDEXES", True)

    # Redis config
    REDIS_HOST = os.environ.get("REDIS_HOST", "localhost")
    REDIS_PORT = int(os.environ.get("REDIS_PORT", 6379))
    REDIS_DB = int(os.environ.get("REDIS_DB", 0))
    GENRE_CACHE_TTL = int(os.environ.get("GENRE_CACHE_TTL", 3600))

    # Flask-Limiter reads the RATELIMIT_* keys
    RATELIMIT_ENABLED = _env_flag("RATELIMIT_ENABLED", True)
    RATELIMIT_DEFAULT = os.environ.get("RATELIMIT_DEFAULT", "100 per 15 minutes")
    RATELIMIT_STORAGE_URI = os.environ.get("RATELIMIT_STORAGE_URI", "memory://")
    RATELIMIT_HEADERS_ENABLED = True
    RATELIMIT_HEADER_LIMIT = "RateLimit-Limit"
    RATELIMIT_HEADER_REMAINING = "RateLimit-Remaining"
    RATELIMIT_HEADER_RESET = "RateLimit-Reset"
    RATE_LIMIT_MESSAGE = "⚠️ Too many requests from this IP. Please try again after 15 minutes."


class TestingConfig(Config):
    TESTING = True
    MONGO_ENSURE_INDEXES = False
    RATELIMIT_ENABLED = False

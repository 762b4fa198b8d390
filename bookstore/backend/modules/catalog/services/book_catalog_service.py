import logging
from typing import List, Optional

from pymongo.errors import PyMongoError
from redis.exceptions import RedisError

from shared.modules.cache.cache_key_generator import CacheKeyGenerator
from shared.modules.cache.cache_store import CacheStore
from shared.modules.catalog.models.book import Book
from backend.errors import BadRequestError, NotFoundError, ServerError
from backend.modules.catalog.models.book_model import BookModel

DEFAULT_GENRE_CACHE_TTL = 3600


class BookCatalogService:
    """
    Read side of the catalog: genre lookups served cache-aside, and free-text search.

    Genre results are cached under the lowercased genre for a fixed TTL. Empty
    results are never cached. A cache failure is reported as a server error and
    does not fall back to the store.
    """

    def __init__(self, book_model: BookModel, cache_store: CacheStore,
                 cache_ttl: int = DEFAULT_GENRE_CACHE_TTL, logger=None):
        self.book_model = book_model
        self.cache_store = cache_store
        self.cache_ttl = cache_ttl
        self.logger = logger or logging.getLogger(self.__class__.__name__)

    def get_books_by_genre(self, genre: Optional[str]) -> List[Book]:
        genre = (genre or "").strip()
        cache_key = CacheKeyGenerator.for_genre(genre)

        try:
            cached = self.cache_store.get(cache_key)
            if cached:
                self.logger.info(f"Served genre '{cache_key}' from cache")
                return [Book(**doc) for doc in cached]

            books = self.book_model.find_by_genre(genre)
            if not books:
                raise NotFoundError("No books found", books=[])

            self.cache_store.set(cache_key, [b.to_json() for b in books], self.cache_ttl)
            return books
        except (RedisError, PyMongoError) as e:
            self.logger.exception(f"Genre lookup for '{genre}' failed: {e}")
            raise ServerError("Server error") from e

    def search_books(self, query: Optional[str]) -> List[Book]:
        if not query:
            raise BadRequestError("Query is required")

        try:
            return self.book_model.search(query)
        except PyMongoError as e:
            self.logger.exception(f"Search for '{query}' failed: {e}")
            raise ServerError("Server error") from e

    def list_books(self) -> List[Book]:
        try:
            return self.book_model.all()
        except PyMongoError as e:
            self.logger.exception(f"Listing books failed: {e}")
            raise ServerError("Test failed", error=str(e)) from e

    def import_books(self, books: List[Book]) -> List[Book]:
        """
        Insert books and drop the cached entries of every genre they belong to.
        """
        inserted = self.book_model.insert_many(books)
        stale_keys = sorted({
            CacheKeyGenerator.for_genre(book.genre) for book in inserted if book.genre
        })
        if stale_keys:
            self.cache_store.delete(*stale_keys)
            self.logger.info(f"Invalidated cached genres: {', '.join(stale_keys)}")
        return inserted

    def ensure_indexes(self) -> List[str]:
        return self.book_model.ensure_indexes()

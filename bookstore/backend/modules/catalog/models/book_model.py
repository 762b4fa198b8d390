import re
from typing import Any, Dict, List

from pymongo import ASCENDING, TEXT

from shared.modules.catalog.models.book import Book
from backend.models.base_nosql_model import BaseNoSqlModel

SEARCH_FIELDS = ("title", "author", "description", "genre")


class BookModel(BaseNoSqlModel):
    """
    MongoDB persistence wrapper for Book objects.
    """

    collection_name = "books"

    @classmethod
    def _from_doc(cls, doc: Dict[str, Any]) -> Book:
        return Book(**doc)

    def ensure_indexes(self) -> List[str]:
        """
        Create the genre, title text and genre+author indexes.
        """
        return [
            self.collection.create_index([("genre", ASCENDING)]),
            self.collection.create_index([("title", TEXT)]),
            self.collection.create_index([("genre", ASCENDING), ("author", ASCENDING)]),
        ]

    def find_by_genre(self, genre: str) -> List[Book]:
        """
        Case-insensitive exact match on genre.
        """
        return self.find({"genre": {"$regex": f"^{re.escape(genre)}$", "$options": "i"}})

    def search(self, query: str) -> List[Book]:
        """
        Case-insensitive substring match on any of title, author, description or genre.
        """
        pattern = re.escape(query)
        return self.find({
            "$or": [
                {field: {"$regex": pattern, "$options": "i"}}
                for field in SEARCH_FIELDS
            ]
        })

"""
Base model class for MongoDB collections.
The database handle is passed in by the caller rather than looked up globally.
"""
from typing import Optional, Any, Dict, List

from pymongo.collection import Collection
from pydantic import BaseModel


class BaseNoSqlModel:
    """
    Base class for MongoDB models with the common insert and query operations.
    Subclasses set collection_name and implement _from_doc.
    """

    collection_name: Optional[str] = None

    def __init__(self, db):
        self.db = db

    @property
    def collection(self) -> Collection:
        """
        Get the MongoDB collection for this model.
        """
        if not self.collection_name:
            raise NotImplementedError("Subclasses must set collection_name")
        return self.db[self.collection_name]

    # -------------------------------------------------------------------------
    # Common operations
    # -------------------------------------------------------------------------

    def create(self, model_instance: BaseModel) -> Any:
        """
        Insert a document built from a domain model and return the stored record
        including the identifier assigned by MongoDB.
        """
        doc = model_instance.to_document()
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return self._from_doc(doc)

    def insert_many(self, model_instances: List[BaseModel]) -> List[Any]:
        docs = [m.to_document() for m in model_instances]
        if not docs:
            return []
        result = self.collection.insert_many(docs)
        for doc, inserted_id in zip(docs, result.inserted_ids):
            doc["_id"] = inserted_id
        return [self._from_doc(doc) for doc in docs]

    def find(self, query: Optional[Dict[str, Any]] = None) -> List[Any]:
        """
        Run a query and convert every matching document to a model instance.
        """
        return [self._from_doc(doc) for doc in self.collection.find(query or {})]

    def all(self) -> List[Any]:
        return self.find({})

    @classmethod
    def _from_doc(cls, doc: Dict[str, Any]) -> Any:
        """
        Convert MongoDB document to model instance.
        Override in subclasses to provide proper model instantiation.
        """
        raise NotImplementedError("Subclasses must implement _from_doc method")

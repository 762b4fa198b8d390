from typing import Optional, Dict, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Book(BaseModel):
    """
    A catalog entry. Shared between the store, the genre cache and the API layer.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[str] = Field(default=None, alias="_id")
    title: Optional[str] = None
    author: Optional[str] = None
    description: Optional[str] = None
    genre: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_object_id(cls, value):
        # Mongo hands back ObjectId instances
        return str(value) if value is not None else None

    def to_json(self) -> Dict[str, Any]:
        """Serialized form used for HTTP responses and cache entries."""
        return self.model_dump(by_alias=True, mode="json")

    def to_document(self) -> Dict[str, Any]:
        """Document to insert; the store assigns the identifier."""
        return self.model_dump(exclude={"id"}, exclude_none=True)

from typing import Optional, Union, Dict, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Admin(BaseModel):
    """
    Administrator record.

    The password is stored and returned in plaintext; no hashing is applied.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

    id: Optional[str] = Field(default=None, alias="_id")
    name: Optional[str] = None
    phone: Optional[Union[int, float]] = None
    email: Optional[str] = None
    password: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_object_id(cls, value):
        return str(value) if value is not None else None

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(exclude={"id"}, exclude_none=True)

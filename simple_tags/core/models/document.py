from __future__ import annotations

from typing import Any
from uuid import uuid4

from pydantic import Field

from .base import AppBaseModel


class Document(AppBaseModel):
    """A stored record: its collection, identifier and field values."""

    id: str = Field(default_factory=lambda: str(uuid4()), description="Unique document identifier")
    collection: str = Field(min_length=1, description="Collection (record type) the document belongs to")
    data: dict[str, Any] = Field(default_factory=dict, description="Field values, including the tag field")

    def get(self, name: str, default: Any = None) -> Any:
        return self.data.get(name, default)

    def set(self, name: str, value: Any) -> None:
        self.data[name] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return (self.collection, self.id) == (other.collection, other.id)

    def __hash__(self) -> int:
        return hash((self.collection, self.id))

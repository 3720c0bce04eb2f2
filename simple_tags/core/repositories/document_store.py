from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from simple_tags.core.models.document import Document
    from simple_tags.core.queries.predicates import TagPredicate


class DocumentStore(ABC):
    """Abstract document store interface.

    Contract used by the tagging services. Implementations perform the actual
    I/O and own durability and concurrent-write handling; errors raised by the
    backend propagate to callers unchanged.
    """

    @abstractmethod
    def find(
        self,
        collection: str,
        *,
        scope: Mapping[str, Any] | None = None,
        predicate: TagPredicate | None = None,
        fields: Sequence[str] | None = None,
    ) -> list[Document]:  # pragma: no cover - interface only
        """Return documents matching every scope field exactly and the tag predicate.

        Args:
            collection: Collection (record type) to read from
            scope: Optional exact-match filter on arbitrary fields
            predicate: Optional tag predicate
            fields: Optional projection; only these fields are returned
        """

    @abstractmethod
    def get(self, collection: str, document_id: str) -> Document | None:  # pragma: no cover
        """Fetch a document by id or return None if not found."""

    @abstractmethod
    def create(self, collection: str, fields: Mapping[str, Any]) -> Document:  # pragma: no cover
        """Persist a new document and return the stored entity."""

    @abstractmethod
    def save(self, document: Document) -> Document:  # pragma: no cover
        """Insert or replace a document by id and return the stored entity."""

    @abstractmethod
    def delete(self, collection: str, document_id: str) -> bool:  # pragma: no cover
        """Delete a document by id. Return True if a document was removed, False otherwise."""

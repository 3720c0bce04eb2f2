from __future__ import annotations

import copy
import threading
from typing import TYPE_CHECKING, Any

from simple_tags.core.models.document import Document
from simple_tags.core.repositories.document_store import DocumentStore
from simple_tags.utils.logging import get_logger

logger = get_logger(__name__)

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from simple_tags.core.queries.predicates import TagPredicate


class InMemoryDocumentStore(DocumentStore):
    """Process-local document store.

    Collections are dicts keyed by document id, so reads follow insertion order.
    Documents are copied on the way in and out; callers never share state with
    the store until they save.
    """

    def __init__(self) -> None:
        self._collections: dict[str, dict[str, dict[str, Any]]] = {}
        self._lock = threading.Lock()

    def find(
        self,
        collection: str,
        *,
        scope: Mapping[str, Any] | None = None,
        predicate: TagPredicate | None = None,
        fields: Sequence[str] | None = None,
    ) -> list[Document]:
        with self._lock:
            rows = list(self._collections.get(collection, {}).items())

        results: list[Document] = []
        for doc_id, data in rows:
            if scope and any(data.get(key) != value for key, value in scope.items()):
                continue
            if predicate is not None and not predicate.matches(data.get(predicate.field)):
                continue
            results.append(self._to_document(collection, doc_id, data, fields))

        logger.debug("find %s scope=%s predicate=%s -> %d", collection, scope, predicate, len(results))
        return results

    def get(self, collection: str, document_id: str) -> Document | None:
        with self._lock:
            data = self._collections.get(collection, {}).get(document_id)
        if data is None:
            return None
        return self._to_document(collection, document_id, data)

    def create(self, collection: str, fields: Mapping[str, Any]) -> Document:
        return self.save(Document(collection=collection, data=dict(fields)))

    def save(self, document: Document) -> Document:
        with self._lock:
            self._collections.setdefault(document.collection, {})[document.id] = copy.deepcopy(document.data)
        return self._to_document(document.collection, document.id, document.data)

    def delete(self, collection: str, document_id: str) -> bool:
        with self._lock:
            return self._collections.get(collection, {}).pop(document_id, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._collections.clear()

    @staticmethod
    def _to_document(
        collection: str,
        doc_id: str,
        data: Mapping[str, Any],
        fields: Sequence[str] | None = None,
    ) -> Document:
        if fields is not None:
            data = {k: v for k, v in data.items() if k in fields}
        return Document(id=doc_id, collection=collection, data=copy.deepcopy(dict(data)))

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Any

from simple_tags.config import settings
from simple_tags.core.schemas.tags import TagFrequencyEntry
from simple_tags.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping

    from simple_tags.core.repositories.document_store import DocumentStore


logger = get_logger(__name__)


class TagAggregator:
    """Frequency tables of tags over a collection."""

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    def count(
        self,
        collection: str,
        *,
        field: str | None = None,
        scope: Mapping[str, Any] | None = None,
    ) -> list[TagFrequencyEntry]:
        """Count the records carrying each tag, restricted to ``scope``.

        A tag repeated inside one record counts once for that record. Entries are
        sorted by tag name.
        """
        tag_field = field or settings.tag_field
        documents = self._store.find(collection, scope=scope, fields=[tag_field])

        counts: Counter[str] = Counter()
        for document in documents:
            tags = document.get(tag_field) or []
            counts.update({t for t in tags if isinstance(t, str) and t})

        logger.debug("Aggregated %d tags over %d %s records", len(counts), len(documents), collection)
        return [TagFrequencyEntry(name=name, count=counts[name]) for name in sorted(counts)]

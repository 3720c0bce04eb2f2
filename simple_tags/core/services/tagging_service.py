from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Any

from simple_tags.config import settings
from simple_tags.core.models.document import Document
from simple_tags.core.models.taggable import TaggableRecord
from simple_tags.core.queries.predicates import TagQueryBuilder
from simple_tags.core.services.tag_aggregation_service import TagAggregator
from simple_tags.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping

    from simple_tags.core.models.tags import TagInput
    from simple_tags.core.queries.predicates import TagPredicate
    from simple_tags.core.repositories.document_store import DocumentStore
    from simple_tags.core.schemas.tags import TagFrequencyEntry


logger = get_logger(__name__)


class TaggingService:
    """Collection-wide tag operations for one record type.

    Every query accepts an optional ``scope``, an exact-match filter on other
    fields of the record (for example a parent id), applied on top of the tag
    match.
    """

    def __init__(self, store: DocumentStore, collection: str, *, tag_field: str | None = None) -> None:
        self._store = store
        self._collection = collection
        self._field = tag_field or settings.tag_field
        self._queries = TagQueryBuilder(self._field)
        self._aggregator = TagAggregator(store)

    @property
    def collection(self) -> str:
        return self._collection

    @property
    def tag_field(self) -> str:
        return self._field

    def new(
        self,
        fields: Mapping[str, Any] | None = None,
        *,
        tags: TagInput = None,
        tag_list: TagInput = None,
    ) -> TaggableRecord:
        """Build an unsaved record with normalized tags."""
        data = dict(fields or {})
        record = TaggableRecord(Document(collection=self._collection, data=data), field=self._field)
        # tag_list wins over tags
        if tag_list is not None:
            record.tag_list = tag_list
        elif tags is not None:
            record.tags = tags
        else:
            record.tags = data.get(self._field)
        return record

    def create(
        self,
        fields: Mapping[str, Any] | None = None,
        *,
        tags: TagInput = None,
        tag_list: TagInput = None,
    ) -> TaggableRecord:
        """Persist a new record and return it as stored."""
        record = self.new(fields, tags=tags, tag_list=tag_list)
        stored = self._store.create(self._collection, record.document.data)
        return TaggableRecord(stored, field=self._field)

    def save(self, record: TaggableRecord) -> TaggableRecord:
        if record.document.collection != self._collection:
            raise ValueError(
                f"Record belongs to {record.document.collection!r}, not {self._collection!r}"
            )
        # The tag field may have been written around the facet
        record.tags = record.document.get(self._field)
        stored = self._store.save(record.document)
        return TaggableRecord(stored, field=self._field)

    def find(self, scope: Mapping[str, Any] | None = None) -> list[TaggableRecord]:
        return self._find(scope=scope)

    def tagged_with(self, tags: TagInput, scope: Mapping[str, Any] | None = None) -> list[TaggableRecord]:
        """Records carrying any of ``tags``."""
        return self._find(scope=scope, predicate=self._queries.any_of(tags))

    def tagged_with_all(self, tags: TagInput, scope: Mapping[str, Any] | None = None) -> list[TaggableRecord]:
        """Records carrying every one of ``tags``; no tags matches no record."""
        return self._find(scope=scope, predicate=self._queries.all_of(tags))

    def tagged_without(self, tags: TagInput, scope: Mapping[str, Any] | None = None) -> list[TaggableRecord]:
        """Records carrying none of ``tags``."""
        return self._find(scope=scope, predicate=self._queries.none_of(tags))

    def all_tags(self, scope: Mapping[str, Any] | None = None) -> list[TagFrequencyEntry]:
        """Tag frequencies across the collection, sorted by tag name."""
        return self._aggregator.count(self._collection, field=self._field, scope=scope)

    def scoped_tags(self, scope: Mapping[str, Any] | None = None) -> list[TagFrequencyEntry]:
        """Deprecated alias of :meth:`all_tags`."""
        warnings.warn(
            "scoped_tags() is deprecated, use all_tags(scope) instead",
            DeprecationWarning,
            stacklevel=2,
        )
        logger.warning("scoped_tags() called on %s; use all_tags(scope)", self._collection)
        return self.all_tags(scope)

    def tag_list(self, scope: Mapping[str, Any] | None = None) -> list[str]:
        """Every distinct tag used in the collection, sorted by name."""
        return [entry.name for entry in self.all_tags(scope)]

    def _find(
        self,
        *,
        scope: Mapping[str, Any] | None = None,
        predicate: TagPredicate | None = None,
    ) -> list[TaggableRecord]:
        if predicate is not None and predicate.matches_nothing:
            logger.debug("Predicate on %s matches nothing; skipping store", self._collection)
            return []
        documents = self._store.find(self._collection, scope=scope, predicate=predicate)
        return [TaggableRecord(d, field=self._field) for d in documents]

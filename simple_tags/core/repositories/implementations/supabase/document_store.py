from __future__ import annotations

from typing import TYPE_CHECKING, Any

from simple_tags.config import settings
from simple_tags.core.models.document import Document
from simple_tags.core.queries.predicates import TagMatch
from simple_tags.core.repositories.document_store import DocumentStore
from simple_tags.db.base import get_supabase_client
from simple_tags.utils.logging import get_logger

logger = get_logger(__name__)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from supabase import Client

    from simple_tags.core.queries.predicates import TagPredicate


class SupabaseDocumentStore(DocumentStore):
    """Supabase implementation of the DocumentStore.

    Uses Supabase's PostgREST client, by default the cached one built from
    settings. Assumes one table per collection with a text `id` primary key and
    the tag field stored as a `text[]` column. Tag predicates map onto PostgREST
    array operators: ANY -> `ov`, ALL -> `cs`, NONE -> `is.null` or `not.ov`, so
    rows with a NULL tag column count as untagged.
    """

    def __init__(self, client: Client | None = None, *, page_size: int | None = None) -> None:
        self._client: Client = client if client is not None else get_supabase_client()
        self._page_size = page_size or settings.page_size

    @property
    def client(self) -> Client:
        return self._client

    def find(
        self,
        collection: str,
        *,
        scope: Mapping[str, Any] | None = None,
        predicate: TagPredicate | None = None,
        fields: Sequence[str] | None = None,
    ) -> list[Document]:
        columns = "*" if fields is None else ",".join(dict.fromkeys(["id", *fields]))

        def _query(start: int, size: int):
            q = self._client.table(collection).select(columns)
            for key, value in (scope or {}).items():
                q = q.is_(key, "null") if value is None else q.eq(key, self._filter_value(value))
            if predicate is not None:
                q = self._apply_predicate(q, predicate)
            return q.order("id").range(start, start + size - 1)

        documents: list[Document] = []
        offset = 0
        while True:
            resp = self._execute(_query(offset, self._page_size), "find", collection)
            rows: list[dict[str, Any]] = resp.data or []
            documents.extend(self._row_to_document(collection, r) for r in rows)
            if len(rows) < self._page_size:
                break
            offset += self._page_size

        logger.debug("find %s scope=%s predicate=%s -> %d", collection, scope, predicate, len(documents))
        return documents

    def get(self, collection: str, document_id: str) -> Document | None:
        resp = self._execute(
            self._client.table(collection)
            .select("*")
            .eq("id", document_id)
            .limit(1),
            "get",
            collection,
        )
        items = resp.data or []
        if not items:
            return None
        return self._row_to_document(collection, items[0])

    def create(self, collection: str, fields: Mapping[str, Any]) -> Document:
        document = Document(collection=collection, data=dict(fields))
        resp = self._execute(
            self._client.table(collection).insert(self._document_to_row(document)),
            "create",
            collection,
        )
        return self._row_to_document(collection, self._first(resp.data) or self._document_to_row(document))

    def save(self, document: Document) -> Document:
        resp = self._execute(
            self._client.table(document.collection).upsert(self._document_to_row(document)),
            "save",
            document.collection,
        )
        return self._row_to_document(document.collection, self._first(resp.data) or self._document_to_row(document))

    def delete(self, collection: str, document_id: str) -> bool:
        resp = self._execute(
            self._client.table(collection)
            .delete()
            .eq("id", document_id),
            "delete",
            collection,
        )
        items = resp.data or []
        return len(items) > 0

    @staticmethod
    def _execute(query: Any, action: str, collection: str) -> Any:
        try:
            return query.execute()
        except Exception as err:
            logger.error("Supabase %s on %s failed: %s", action, collection, err)
            raise

    @classmethod
    def _apply_predicate(cls, query: Any, predicate: TagPredicate) -> Any:
        literal = cls._array_literal(predicate.tags)
        if predicate.match is TagMatch.ANY:
            return query.filter(predicate.field, "ov", literal)
        if predicate.match is TagMatch.ALL:
            return query.filter(predicate.field, "cs", literal)
        return query.or_(f"{predicate.field}.is.null,{predicate.field}.not.ov.{literal}")

    @staticmethod
    def _array_literal(tags: Iterable[str]) -> str:
        """Render tags as a Postgres array literal with every element quoted."""
        quoted = []
        for tag in tags:
            escaped = tag.replace("\\", "\\\\").replace('"', '\\"')
            quoted.append(f'"{escaped}"')
        return "{" + ",".join(quoted) + "}"

    @staticmethod
    def _filter_value(value: Any) -> Any:
        # PostgREST filters take text; keep bools lowercase
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    @staticmethod
    def _first(data: Any) -> dict[str, Any]:
        if isinstance(data, list) and data:
            return data[0]
        if isinstance(data, dict):
            return data
        return {}

    @staticmethod
    def _row_to_document(collection: str, row: dict[str, Any]) -> Document:
        normalized = dict(row)
        doc_id = str(normalized.pop("id"))
        return Document(id=doc_id, collection=collection, data=normalized)

    @staticmethod
    def _document_to_row(document: Document) -> dict[str, Any]:
        data = dict(document.data)
        data["id"] = document.id
        return data

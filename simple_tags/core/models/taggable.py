from __future__ import annotations

from typing import TYPE_CHECKING, Any

from simple_tags.config import settings

from .tags import join_tags, normalize_tags

if TYPE_CHECKING:
    from .document import Document
    from .tags import TagInput


class TaggableRecord:
    """Tag facet over a stored document.

    Wraps the document rather than extending it: the tag set lives in one field
    of the document and is always written in normalized form, whether it comes
    in as a sequence (``tags``) or as a delimited string (``tag_list``).
    """

    def __init__(self, document: Document, *, field: str | None = None) -> None:
        self._document = document
        self._field = field or settings.tag_field

    @property
    def document(self) -> Document:
        return self._document

    @property
    def id(self) -> str:
        return self._document.id

    @property
    def field(self) -> str:
        return self._field

    @property
    def tags(self) -> list[str]:
        # Storage may hold None for records written outside this facet
        stored = self._document.get(self._field)
        return list(stored) if stored else []

    @tags.setter
    def tags(self, value: TagInput) -> None:
        self._document.set(self._field, normalize_tags(value))

    @property
    def tag_list(self) -> str:
        return join_tags(self.tags)

    @tag_list.setter
    def tag_list(self, value: TagInput) -> None:
        self.tags = value

    def __getitem__(self, name: str) -> Any:
        return self._document.data[name]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TaggableRecord):
            return self._document == other._document
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._document)

    def __repr__(self) -> str:
        return f"TaggableRecord(collection={self._document.collection!r}, id={self.id!r}, tags={self.tags!r})"

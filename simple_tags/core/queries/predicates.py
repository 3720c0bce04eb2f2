"""Store-agnostic tag predicates.

Services build predicates with :class:`TagQueryBuilder`; store adapters either
evaluate them with :meth:`TagPredicate.matches` or translate them into their
own filter syntax.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from pydantic import ConfigDict, Field

from simple_tags.config import settings
from simple_tags.core.models.base import AppBaseModel
from simple_tags.core.models.tags import TagInput, normalize_tags


class TagMatch(str, Enum):
    """Matching semantics between a record's tags and the requested tags."""

    ANY = "any"
    ALL = "all"
    NONE = "none"


class TagPredicate(AppBaseModel):
    """Filter on one tag field."""

    model_config = ConfigDict(frozen=True)

    field: str
    match: TagMatch
    tags: tuple[str, ...] = Field(default_factory=tuple)

    @property
    def matches_nothing(self) -> bool:
        """True when no record can satisfy the predicate.

        Requiring all of an empty tag set is treated as matching nothing.
        """
        return self.match is TagMatch.ALL and not self.tags

    def matches(self, values: Iterable[str] | None) -> bool:
        """Evaluate the predicate against one record's stored tags."""
        if self.matches_nothing:
            return False
        present = set(values or ())
        wanted = set(self.tags)
        if self.match is TagMatch.ANY:
            return bool(present & wanted)
        if self.match is TagMatch.ALL:
            return wanted <= present
        return not (present & wanted)


class TagQueryBuilder:
    """Build predicates for the three matching semantics on one tag field."""

    def __init__(self, field: str | None = None) -> None:
        self._field = field or settings.tag_field

    @property
    def field(self) -> str:
        return self._field

    def any_of(self, tags: TagInput) -> TagPredicate:
        return self._build(TagMatch.ANY, tags)

    def all_of(self, tags: TagInput) -> TagPredicate:
        return self._build(TagMatch.ALL, tags)

    def none_of(self, tags: TagInput) -> TagPredicate:
        return self._build(TagMatch.NONE, tags)

    def _build(self, match: TagMatch, tags: TagInput) -> TagPredicate:
        # A bare string is one tag, never a delimited list
        if isinstance(tags, str):
            tags = [tags]
        # Deduplicated, first occurrence wins
        values = tuple(dict.fromkeys(normalize_tags(tags)))
        return TagPredicate(field=self._field, match=match, tags=values)

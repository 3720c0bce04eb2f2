from __future__ import annotations

from pydantic import Field

from simple_tags.core.models.base import AppBaseModel


class TagFrequencyEntry(AppBaseModel):
    """Number of records in a collection (or scope) carrying one tag.

    - name: the tag value
    - count: records carrying it, at most one per record
    """

    name: str
    count: int = Field(ge=0)

    def as_dict(self) -> dict[str, str | int]:
        return {"name": self.name, "count": self.count}

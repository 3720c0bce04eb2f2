"""
Unit tests for the TaggableRecord facet.
"""

import pytest

from simple_tags.core.models.document import Document
from simple_tags.core.models.taggable import TaggableRecord


@pytest.fixture
def user() -> TaggableRecord:
    return TaggableRecord(Document(collection="users", data={"name": "Tuquito"}))


class TestTags:
    """Tests for the tags property."""

    @pytest.mark.unit
    def test_missing_field_reads_as_empty(self, user: TaggableRecord) -> None:
        assert user.tags == []

    @pytest.mark.unit
    def test_stored_none_reads_as_empty(self) -> None:
        record = TaggableRecord(Document(collection="users", data={"tags": None}))
        assert record.tags is not None
        assert record.tags == []

    @pytest.mark.unit
    def test_set_none(self, user: TaggableRecord) -> None:
        user.tags = None
        assert user.tags is not None
        assert user.tags == []

    @pytest.mark.unit
    def test_set_sequence_normalizes(self, user: TaggableRecord) -> None:
        user.tags = [" linux", "", "tucuman "]
        assert user.tags == ["linux", "tucuman"]
        assert user.document.data["tags"] == ["linux", "tucuman"]

    @pytest.mark.unit
    def test_set_string_normalizes(self, user: TaggableRecord) -> None:
        user.tags = "linux, tucuman"
        assert user.tags == ["linux", "tucuman"]

    @pytest.mark.unit
    def test_repeated_reads_are_equal(self, user: TaggableRecord) -> None:
        user.tags = ["linux", "foo"]
        assert user.tags == user.tags

    @pytest.mark.unit
    def test_read_returns_copy(self, user: TaggableRecord) -> None:
        user.tags = ["linux"]
        user.tags.append("foo")
        assert user.tags == ["linux"]

    @pytest.mark.unit
    def test_custom_field(self) -> None:
        record = TaggableRecord(Document(collection="posts"), field="labels")
        record.tags = "a, b"
        assert record.document.data == {"labels": ["a", "b"]}


class TestTagList:
    """Tests for the delimited tag_list view."""

    @pytest.mark.unit
    def test_update_tag_list(self, user: TaggableRecord) -> None:
        tag_list = "linux, tucuman, free software"
        user.tag_list = tag_list
        assert user.tags == [t.strip() for t in tag_list.split(",")]

    @pytest.mark.unit
    def test_tag_list_none(self, user: TaggableRecord) -> None:
        user.tag_list = None
        assert user.tags is not None
        assert user.tags == []

    @pytest.mark.unit
    def test_tag_list_reads_joined(self, user: TaggableRecord) -> None:
        user.tags = ["linux", "free software"]
        assert user.tag_list == "linux, free software"

    @pytest.mark.unit
    def test_tag_list_empty(self, user: TaggableRecord) -> None:
        assert user.tag_list == ""

    @pytest.mark.unit
    def test_tag_list_accepts_sequence(self, user: TaggableRecord) -> None:
        """Both setters share one normalization path."""
        user.tag_list = ["linux ", " "]
        assert user.tags == ["linux"]


class TestIdentity:
    """Tests for equality and field access."""

    @pytest.mark.unit
    def test_equal_by_document(self) -> None:
        document = Document(collection="users", data={"name": "a"})
        assert TaggableRecord(document) == TaggableRecord(document.model_copy(deep=True))

    @pytest.mark.unit
    def test_different_documents_differ(self) -> None:
        assert TaggableRecord(Document(collection="users")) != TaggableRecord(Document(collection="users"))

    @pytest.mark.unit
    def test_field_access(self, user: TaggableRecord) -> None:
        assert user["name"] == "Tuquito"
        assert user.id == user.document.id

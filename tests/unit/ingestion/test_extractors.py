"""Tests for default ingestion extractors."""

import pytest

from chronicle.audit.models import Action, hidden_value, plain_value
from chronicle.ingestion import (
    DEFAULT_AUTHOR,
    attr_extractor,
    default_action_extractor,
    default_author_extractor,
    default_payload_extractor,
)


class TestAttrExtractor:
    """Tests for attr_extractor."""

    def test_found(self) -> None:
        """Should return the attribute as a string."""
        extract = attr_extractor("entity")
        assert extract({"entity": "user:123", "other": "x"}) == "user:123"

    def test_non_string_value(self) -> None:
        """Should stringify non-string keys."""
        assert attr_extractor("id")({"id": 42}) == "42"

    def test_missing(self) -> None:
        """Should return None when the attribute is absent."""
        assert attr_extractor("entity")({"other": "x"}) is None


class TestDefaultActionExtractor:
    """Tests for default_action_extractor."""

    @pytest.mark.parametrize(
        "attrs,expected",
        [
            ({"action": "create"}, Action.CREATE),
            ({"action": "update"}, Action.UPDATE),
            ({"action": "delete"}, Action.DELETE),
            ({"action": Action.DELETE}, Action.DELETE),
            ({"action": "archive"}, Action.CREATE),
            ({"action": None}, Action.CREATE),
            ({}, Action.CREATE),
        ],
    )
    def test_actions(self, attrs: dict, expected: Action) -> None:
        """Should map known actions and default the rest to create."""
        assert default_action_extractor(attrs) == expected


class TestDefaultAuthorExtractor:
    """Tests for default_author_extractor."""

    def test_author(self) -> None:
        assert default_author_extractor({"author": "admin"}) == "admin"

    def test_user(self) -> None:
        """Should accept the user attribute as the author."""
        assert default_author_extractor({"user": "john.doe"}) == "john.doe"

    def test_author_wins_over_user(self) -> None:
        assert default_author_extractor({"user": "u", "author": "a"}) == "a"

    def test_default(self) -> None:
        """Should fall back to system."""
        assert default_author_extractor({}) == DEFAULT_AUTHOR == "system"

    def test_custom_default(self) -> None:
        """Should use the supplied fallback author."""
        assert default_author_extractor({}, default="ingest-bot") == "ingest-bot"
        assert default_author_extractor({"user": "u"}, default="ingest-bot") == "u"


class TestDefaultPayloadExtractor:
    """Tests for default_payload_extractor."""

    def test_excludes_reserved(self) -> None:
        """Should drop entity/action/author/user and keep the rest."""
        payload = default_payload_extractor({
            "entity": "user:1",
            "action": "update",
            "author": "admin",
            "user": "john",
            "email": "a@b.com",
            "age": 30,
        })
        assert payload == {"email": plain_value("a@b.com"), "age": plain_value(30)}

    def test_custom_reserved(self) -> None:
        """Should honour a custom reserved set."""
        payload = default_payload_extractor({"id": "1", "name": "x"}, reserved={"id"})
        assert payload == {"name": plain_value("x")}

    def test_empty(self) -> None:
        assert default_payload_extractor({"entity": "k"}) == {}

    def test_sensitive_attributes_hidden(self) -> None:
        """Should record secret-looking attributes as hidden values."""
        payload = default_payload_extractor({
            "password": "hunter2",
            "API_KEY": "k-123",
            "name": "John",
        })
        assert payload == {
            "password": hidden_value(),
            "API_KEY": hidden_value(),
            "name": plain_value("John"),
        }

    def test_custom_hidden_set(self) -> None:
        """Should honour a custom hidden set."""
        payload = default_payload_extractor({"pin": "1234", "password": "x"}, hidden={"pin"})
        assert payload == {"pin": hidden_value(), "password": plain_value("x")}

"""Tests for reply documents."""

import pytest
from pydantic import ValidationError

from radbot.embeds import DEFAULT_EMBED_COLOR, DocumentField, build_document


def test_build_document_accepts_tuples_and_fields():
    doc = build_document(
        "Title",
        [("a", "1"), ("b", "2", False), DocumentField(name="c", value="3")],
    )
    assert doc.title == "Title"
    assert [(f.name, f.value, f.inline) for f in doc.fields] == [
        ("a", "1", True),
        ("b", "2", False),
        ("c", "3", True),
    ]
    assert doc.color == DEFAULT_EMBED_COLOR


def test_field_lookup():
    doc = build_document("T", [("a", "1")])
    assert doc.field("a").value == "1"
    assert doc.field("missing") is None


def test_documents_are_immutable():
    doc = build_document("T")
    with pytest.raises(ValidationError):
        doc.title = "changed"


def test_build_document_has_no_shared_state():
    first = build_document("T", [("a", "1")])
    second = build_document("T")
    assert first.fields != second.fields
    assert second.fields == []

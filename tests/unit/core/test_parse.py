"""Unit tests for core/parse.py and the paragraph models"""

import json

import pytest

from artpub.core.errors import InputUnreadable, MalformedInput
from artpub.core.models import Kind, Layout
from artpub.core.parse import parse_article, read_article


def _para(**fields):
    record = {"text": "hello", "type": "P", "markups": []}
    record.update(fields)
    return record


def test_parse_article_minimal():
    """A single paragraph record parses into a Paragraph with defaults."""
    [p] = parse_article(json.dumps([_para()]))
    assert p.text == "hello"
    assert p.type is Kind.P
    assert p.markups == []
    assert p.layout is None
    assert p.metadata is None


def test_parse_article_all_fields():
    """Layout, metadata (__ref), and markup href are all read."""
    raw = json.dumps([_para(
        type="IMG",
        layout="INSET_CENTER",
        metadata={"__ref": "ImageMetadata:abc123"},
        markups=[{"start": 0, "end": 5, "type": "A", "href": "https://x.test"}],
    )])
    [p] = parse_article(raw)
    assert p.type is Kind.IMG
    assert p.layout is Layout.INSET_CENTER
    assert p.metadata.image_ref == "ImageMetadata:abc123"
    assert p.markups[0].href == "https://x.test"
    assert p.markups[0].type is Kind.A


def test_parse_article_ignores_unknown_fields():
    """Extra keys on a record are ignored."""
    [p] = parse_article(json.dumps([_para(name="abcd", __typename="Paragraph")]))
    assert p.text == "hello"


@pytest.mark.parametrize("token", [k.value for k in Kind])
def test_parse_article_accepts_every_token(token):
    """All nine type tokens parse, including ones only valid in some positions."""
    [p] = parse_article(json.dumps([_para(type=token)]))
    assert p.type.value == token


@pytest.mark.parametrize("raw", [
    "not json",
    json.dumps({"text": "x"}),
    json.dumps([_para(type="H1")]),
    json.dumps([{"text": "x", "type": "P"}]),
    json.dumps([_para(text=5)]),
    json.dumps([_para(layout="FULL_WIDTH")]),
    json.dumps([_para(metadata={})]),
    json.dumps([_para(markups=[{"start": "0", "end": 1, "type": "CODE"}])]),
    json.dumps([_para(markups=[{"start": -1, "end": 1, "type": "CODE"}])]),
    json.dumps([_para(markups=[{"start": 3, "end": 1, "type": "CODE"}])]),
    json.dumps([_para(markups=[{"start": 0, "end": 6, "type": "CODE"}])]),
])
def test_parse_article_malformed(raw):
    """Shape errors, unknown tokens, and out-of-range offsets raise MalformedInput."""
    with pytest.raises(MalformedInput):
        parse_article(raw)


def test_markup_range_counts_codepoints():
    """The end offset bound is the codepoint length, not the byte length."""
    raw = json.dumps([_para(text="héé", markups=[{"start": 0, "end": 3, "type": "CODE"}])])
    [p] = parse_article(raw)
    assert p.markups[0].end == 3

    raw = json.dumps([_para(text="héé", markups=[{"start": 0, "end": 4, "type": "CODE"}])])
    with pytest.raises(MalformedInput):
        parse_article(raw)


def test_malformed_input_is_value_error():
    """MalformedInput can be caught as a ValueError."""
    with pytest.raises(ValueError):
        parse_article("[{]")


def test_read_article(write_article):
    """read_article reads and parses a file on disk."""
    path = write_article([_para(), _para(type="ULI", text="item")])
    paragraphs = read_article(path)
    assert [p.type for p in paragraphs] == [Kind.P, Kind.ULI]


def test_read_article_missing_file(tmp_path):
    """A nonexistent path raises InputUnreadable."""
    with pytest.raises(InputUnreadable, match="error reading file"):
        read_article(tmp_path / "missing.json")


def test_read_article_directory(tmp_path):
    """A directory path cannot be read and raises InputUnreadable."""
    with pytest.raises(InputUnreadable):
        read_article(tmp_path)

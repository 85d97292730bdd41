"""Unit tests for core/metadata.py"""

import pytest

from blogpub.core.errors import MalformedMetadata, OrphanListItem
from blogpub.core.metadata import extract, parse_metadata


@pytest.mark.parametrize("text", [
    "Hello\n\nworld  \n",
    "  # Title\n\nBody\n",
    "",
    "-- not a delimiter\nbody",
])
def test_extract_without_delimiter_is_identity(text):
    """Documents without a leading '---' have empty metadata and a trimmed body."""
    meta, body = extract(text)
    assert meta.is_empty()
    assert body == text.strip()


def test_extract_scalars_and_lists():
    """Scalar and list keys are parsed and the body follows the closing delimiter."""
    meta, body = extract("---\ntitle: Hi\nauthors:\n- ann\n- bob\n---\n\nBody text\n")
    assert meta.scalar("title") == "Hi"
    assert meta.list("authors") == ["ann", "bob"]
    assert body == "Body text"


def test_extract_keys_case_insensitive():
    """Keys are stored lowercase and looked up case-insensitively."""
    meta, _ = extract("---\nTitle: Hi\nTAGS:\n- a\n---\n")
    assert meta.scalars == {"title": "Hi"}
    assert meta.scalar("TITLE") == "Hi"
    assert meta.list("Tags") == ["a"]


def test_extract_strips_bom():
    """A leading byte-order marker does not hide the opening delimiter."""
    meta, body = extract("\ufeff---\ntitle: X\n---\nB")
    assert meta.scalar("title") == "X"
    assert body == "B"


def test_extract_crlf_lines():
    """Windows line endings are tolerated around delimiters and values."""
    meta, body = extract("---\r\ntitle: Hi\r\n---\r\nBody\r\n")
    assert meta.scalar("title") == "Hi"
    assert body == "Body"


def test_extract_closing_delimiter_with_whitespace():
    """The closing delimiter matches once surrounding whitespace is trimmed."""
    meta, body = extract("---\ntitle: T\n   ---  \nbody")
    assert meta.scalar("title") == "T"
    assert body == "body"


def test_extract_missing_closing_delimiter():
    """An opening delimiter with no closing one raises MalformedMetadata."""
    with pytest.raises(MalformedMetadata):
        extract("---\ntitle: Never closed\n\nBody\n")


def test_extract_delimiter_only():
    """A lone '---' line is still an unclosed block."""
    with pytest.raises(MalformedMetadata):
        extract("---")


def test_orphan_list_item():
    """A list item before any list key raises OrphanListItem."""
    with pytest.raises(OrphanListItem):
        extract("---\n- orphan\n---\n")


def test_scalar_ends_active_list_key():
    """A key: value line ends the pending list, so later items are orphans."""
    with pytest.raises(OrphanListItem):
        parse_metadata(["tags:", "- a", "title: T", "- b"])


def test_scalar_overwrites_previous_value():
    meta = parse_metadata(["title: A", "title: B"])
    assert meta.scalar("title") == "B"


def test_key_is_scalar_or_list_never_both():
    """Redeclaring a key switches it between scalar and list storage."""
    meta = parse_metadata(["tags: x", "tags:", "- a"])
    assert "tags" not in meta.scalars
    assert meta.list("tags") == ["a"]

    meta = parse_metadata(["tags:", "- a", "tags: x"])
    assert "tags" not in meta.lists
    assert meta.scalar("tags") == "x"


def test_unknown_keys_preserved():
    meta = parse_metadata(["layout: wide", "extras:", "- one"])
    assert meta.scalar("layout") == "wide"
    assert meta.list("extras") == ["one"]


def test_blank_and_colonless_lines_ignored():
    """Blank lines are skipped and lines without ':' carry no data."""
    meta = parse_metadata(["", "just words", "  ", "title:  Spaced  "])
    assert meta.scalars == {"title": "Spaced"}


def test_value_with_colon_kept_whole():
    """Only the first ':' separates key from value."""
    meta = parse_metadata(["link: https://example.com"])
    assert meta.scalar("link") == "https://example.com"


def test_list_item_values_trimmed():
    meta = parse_metadata(["authors:", "-    ann  ", "  - bob"])
    assert meta.list("authors") == ["ann", "bob"]


def test_missing_keys_default_empty():
    meta, _ = extract("no metadata")
    assert meta.scalar("title") == ""
    assert meta.list("tags") == []


def test_errors_are_value_errors():
    """Metadata errors subclass ValueError like other input errors."""
    assert issubclass(MalformedMetadata, ValueError)
    assert issubclass(OrphanListItem, ValueError)

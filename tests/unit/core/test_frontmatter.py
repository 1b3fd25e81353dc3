"""Unit tests for core/frontmatter.py"""

import pytest

from mdposts.core.frontmatter import parse_metadata, split_frontmatter


# --- split_frontmatter ---

def test_split_frontmatter_with_block():
    """split_frontmatter extracts the metadata block and returns the body after it."""
    text = "---\ntitle: Hello\n---\n# Body\n"
    meta, body = split_frontmatter(text)
    assert meta == {"title": "Hello"}
    assert body == "# Body\n"


@pytest.mark.parametrize("text", [
    "# No frontmatter\n",
    "",
    "---\ntitle: never closed\n",
    " ---\ntitle: x\n---\n",
    "intro\n---\ntitle: x\n---\n",
    "---\ntitle: x\n----\nbody\n",
])
def test_split_frontmatter_passthrough(text):
    """Text without a closed leading block yields empty metadata and the body unchanged."""
    meta, body = split_frontmatter(text)
    assert meta == {}
    assert body == text


def test_split_frontmatter_empty_block():
    """Adjacent delimiters produce empty metadata and strip the block."""
    assert split_frontmatter("---\n---\nbody") == ({}, "body")


def test_split_frontmatter_closing_at_eof():
    """A closing delimiter on the last line leaves an empty body."""
    assert split_frontmatter("---\ntitle: x\n---") == ({"title": "x"}, "")


def test_split_frontmatter_crlf():
    """CRLF delimiters are recognised."""
    meta, body = split_frontmatter("---\r\ntitle: x\r\n---\r\nbody")
    assert meta == {"title": "x"}
    assert body == "body"


def test_split_frontmatter_body_keeps_later_rules():
    """Only the first closing delimiter ends the block; later --- lines stay in the body."""
    meta, body = split_frontmatter("---\ntitle: x\n---\nabove\n\n---\n\nbelow\n")
    assert meta == {"title": "x"}
    assert body == "above\n\n---\n\nbelow\n"


# --- arrays ---

def test_block_and_flow_arrays_agree():
    """A flow array and a block array with the same items parse identically."""
    flow = parse_metadata('tags: ["a", "b"]')
    block = parse_metadata("tags:\n  - a\n  - b")
    assert flow == block == {"tags": ["a", "b"]}


@pytest.mark.parametrize("value,expected", [
    ("['a', 'b']", ["a", "b"]),
    ("[x, y]", ["x", "y"]),
    ('["it\'s", b]', ["it's", "b"]),
    ("[1, 2]", ["1", "2"]),
    ("[]", []),
])
def test_flow_array_variants(value, expected):
    """Flow arrays accept JSON, single-quoted, and bare items; items stay strings."""
    assert parse_metadata(f"tags: {value}") == {"tags": expected}


def test_flow_array_malformed_raises():
    """A malformed flow array raises ValueError naming the key."""
    with pytest.raises(ValueError, match="tags"):
        parse_metadata("tags: [unparseable")


def test_block_array_strips_matching_quotes():
    """Block array items lose one layer of matching quotes."""
    meta = parse_metadata("tags:\n  - \"a\"\n  - 'b'\n  - \"c'")
    assert meta == {"tags": ["a", "b", "\"c'"]}


def test_block_array_ends_at_next_key():
    """Consumption stops at the first non-item line, which is scanned as a key."""
    meta = parse_metadata("tags:\n  - a\ntitle: T\n  - stray")
    assert meta == {"tags": ["a"], "title": "T"}


def test_block_array_ends_at_blank_line():
    """A blank line ends the array; later indented items are skipped."""
    assert parse_metadata("tags:\n  - a\n\n  - b") == {"tags": ["a"]}


def test_empty_value_without_items_is_empty_list():
    assert parse_metadata("tags:\ntitle: x") == {"tags": [], "title": "x"}


# --- scalars ---

@pytest.mark.parametrize("line,expected", [
    ("draft: true", True),
    ("draft: false", False),
    ("draft: True", "True"),
    ("draft: yes", "yes"),
    ("draft: \"true\"", "true"),
])
def test_booleans_are_exact_literals(line, expected):
    """Only the bare literals true/false become booleans."""
    assert parse_metadata(line)["draft"] == expected


@pytest.mark.parametrize("line,expected", [
    ("date: 2024-01-01", "2024-01-01"),
    ("date: \"2024-01-01\"", "2024-01-01"),
    ("date: 2024-01-01T10:00", "2024-01-01T10:00"),
])
def test_dates_stay_strings(line, expected):
    assert parse_metadata(line)["date"] == expected


@pytest.mark.parametrize("line,expected", [
    ('title: "Hello"', "Hello"),
    ("title: 'Hi there'", "Hi there"),
    ('title: ""', ""),
    ("title: \"unmatched'", "\"unmatched'"),
    ('title: "open', '"open'),
    ('title: say "hi"', 'say "hi"'),
    ("title: A: B", "A: B"),
    ("title:   padded   ", "padded"),
])
def test_string_quote_handling(line, expected):
    """Strings lose one layer of matching quotes only; other quotes are kept."""
    assert parse_metadata(line)["title"] == expected


def test_unrecognised_lines_are_skipped():
    """Comments, blank lines, and free text are ignored without error."""
    meta = parse_metadata("# a comment\n\nnot a key line\ntitle: x")
    assert meta == {"title": "x"}


def test_nested_mapping_degrades_silently():
    """A nested mapping becomes an empty block array; its indented keys are skipped."""
    assert parse_metadata("author:\n  name: Ann\ntitle: x") == {"author": [], "title": "x"}


def test_hyphenated_keys_and_last_wins():
    meta = parse_metadata("cover-image: a.png\ntitle: first\ntitle: second")
    assert meta == {"cover-image": "a.png", "title": "second"}

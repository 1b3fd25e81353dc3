"""Front-matter extraction: a restricted, line-oriented metadata scanner"""

import re
from typing import Any

import yaml


FRONTMATTER_RE = re.compile(r'^---\r?\n(?:(.*?)\r?\n)??---(?:\r?\n|\Z)(.*)\Z', re.DOTALL)
KEY_RE = re.compile(r'^(\w[\w-]*):\s*(.*)')
ITEM_RE = re.compile(r'^\s+-\s+(.*)')
DATE_RE = re.compile(r'\d{4}-\d{2}-\d{2}')

QUOTES = ('"', "'")


def _unquote(value: str) -> str:
    """Strip one layer of matching surrounding quotes; leave anything else as-is."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in QUOTES:
        return value[1:-1]
    return value


def _parse_flow_array(key: str, value: str) -> list:
    """Parse an inline `[a, "b", 'c']` literal, keeping every element as a string."""
    try:
        items = yaml.load(value, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid flow array for '{key}': {e}") from e
    if not isinstance(items, list):
        raise ValueError(f"Invalid flow array for '{key}': expected a list, got {value!r}")
    return items


def _parse_value(key: str, value: str) -> Any:
    """Interpret a non-empty scalar value: flow array, boolean, date, or string."""
    if value.startswith('['):
        return _parse_flow_array(key, value)
    if value == 'true':
        return True
    if value == 'false':
        return False
    if DATE_RE.fullmatch(value):
        return value
    return _unquote(value)


def parse_metadata(block: str) -> dict[str, Any]:
    """Scan a front-matter block line by line into a metadata dict.

    Two states: scanning for `key: value` lines, and consuming the indented
    `- item` lines of a block array (entered when a key has an empty value).
    Lines that match neither are skipped.
    """
    data: dict[str, Any] = {}
    array_key = None

    for line in block.splitlines():
        if array_key is not None:
            m = ITEM_RE.match(line)
            if m:
                data[array_key].append(_unquote(m.group(1).strip()))
                continue
            array_key = None

        m = KEY_RE.match(line)
        if not m:
            continue
        key, value = m.group(1), m.group(2).strip()
        if value:
            data[key] = _parse_value(key, value)
        else:
            data[key] = []
            array_key = key

    return data


def split_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (metadata, body). Text without a closed `---` block is returned unchanged."""
    m = FRONTMATTER_RE.match(text)
    if not m:
        return {}, text
    return parse_metadata(m.group(1) or ''), m.group(2)

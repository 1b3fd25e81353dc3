"""Markdown to HTML conversion via an ordered chain of regex substitutions"""

import re
from typing import Callable, Union

from mdposts.core.utils.html import escape_html


Replacement = Union[str, Callable[[re.Match], str]]


def _fenced_code(m: re.Match) -> str:
    lang, code = m.group(1), m.group(2)
    attr = f' class="language-{lang}"' if lang else ''
    return f'<pre><code{attr}>{escape_html(code.strip())}</code></pre>'


def _inline_code(m: re.Match) -> str:
    return f'<code>{escape_html(m.group(1))}</code>'


FENCE_RE = re.compile(r'```(\w*)\n(.*?)```', re.DOTALL)
HELD_RE = re.compile(r'\x00(\d+)\x00')

# Applied top to bottom, each over the full output of the previous rule.
# Headings run h4 -> h1 and emphasis runs longest marker first.
RULES: list[tuple[re.Pattern, Replacement]] = [
    (re.compile(r'`([^`]+)`'),                      _inline_code),
    (re.compile(r'^#{4}\s+(.+)$', re.MULTILINE),    r'<h4>\1</h4>'),
    (re.compile(r'^#{3}\s+(.+)$', re.MULTILINE),    r'<h3>\1</h3>'),
    (re.compile(r'^#{2}\s+(.+)$', re.MULTILINE),    r'<h2>\1</h2>'),
    (re.compile(r'^#{1}\s+(.+)$', re.MULTILINE),    r'<h1>\1</h1>'),
    (re.compile(r'\*\*\*(.+?)\*\*\*'),              r'<strong><em>\1</em></strong>'),
    (re.compile(r'\*\*(.+?)\*\*'),                  r'<strong>\1</strong>'),
    (re.compile(r'\*(.+?)\*'),                      r'<em>\1</em>'),
    (re.compile(r'^[-*]\s+(.+)$', re.MULTILINE),    r'<li>\1</li>'),
    (re.compile(r'^---$', re.MULTILINE),            '<hr>'),
    (re.compile(r'\[([^\]]+)\]\(([^)]+)\)'),        r'<a href="\2">\1</a>'),
]

LIST_RUN_RE = re.compile(r'(?:<li>.*</li>\n?)+')
BLOCK_SPLIT_RE = re.compile(r'\n{2,}')
BLOCK_TAG_RE = re.compile(r'^<(h[1-6]|ul|ol|li|pre|hr|blockquote)')


def _wrap_lists(html: str) -> str:
    """Wrap each run of consecutive <li> lines in a single <ul>."""
    return LIST_RUN_RE.sub(lambda m: f'<ul>{m.group(0)}</ul>', html)


def _wrap_paragraphs(html: str) -> str:
    """Wrap blank-line separated blocks in <p> unless they open with a block-level tag."""
    blocks = []
    for block in BLOCK_SPLIT_RE.split(html):
        block = block.strip()
        if not block:
            continue
        if BLOCK_TAG_RE.match(block):
            blocks.append(block)
        else:
            text = block.replace('\n', ' ')
            blocks.append(f'<p>{text}</p>')
    return '\n'.join(blocks)


def render_markdown(text: str) -> str:
    """Convert a markdown body to HTML. Not idempotent: run once per document.

    Fenced code is rendered first and held out of the inline rules as
    placeholders, so its escaped content is never rewritten or escaped again.
    """
    fenced: list[str] = []

    def _hold(m: re.Match) -> str:
        fenced.append(_fenced_code(m))
        return f'\x00{len(fenced) - 1}\x00'

    html = FENCE_RE.sub(_hold, text.replace('\x00', ''))
    for pattern, replacement in RULES:
        html = pattern.sub(replacement, html)
    html = HELD_RE.sub(lambda m: fenced[int(m.group(1))], html)
    return _wrap_paragraphs(_wrap_lists(html))

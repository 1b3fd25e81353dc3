"""Pipeline step functions: discover, parse, render, and write the posts bundle"""

import json
import logging
from pathlib import Path
from typing import Any

from mdposts.core.frontmatter import split_frontmatter
from mdposts.core.models import ParsedDoc, Post
from mdposts.core.render import render_markdown


MD_EXTENSIONS = {'.md'}
STATUSES = ('processed', 'draft', 'failed')

logger = logging.getLogger(__name__)


def _text(value: Any, default: str) -> str:
    """Return value if it is a non-empty string, else default."""
    return value if isinstance(value, str) and value else default


def discover_files(input_dir: Path) -> list[Path]:
    """Return sorted .md files directly inside input_dir (not recursive)."""
    return sorted(p for p in input_dir.iterdir() if p.is_file() and p.suffix in MD_EXTENSIONS)


def parse_file(path: Path) -> ParsedDoc:
    """Read a markdown file and split off its front matter. Undecodable bytes become U+FFFD."""
    raw = path.read_text(encoding='utf-8', errors='replace')
    metadata, body = split_frontmatter(raw)
    return ParsedDoc(path=path, metadata=metadata, body=body)


def is_draft(metadata: dict[str, Any]) -> bool:
    return metadata.get('draft') is True


def build_post(parsed: ParsedDoc) -> Post:
    """Apply field defaults to the metadata and render the body to HTML."""
    meta = parsed.metadata
    tags = meta.get('tags')
    return Post(
        title=_text(meta.get('title'), ''),
        slug=_text(meta.get('slug'), parsed.path.stem),
        date=_text(meta.get('date'), ''),
        summary=_text(meta.get('summary'), ''),
        tags=[str(t) for t in tags] if isinstance(tags, list) else [],
        featured=meta.get('featured') is True,
        content=render_markdown(parsed.body),
    )


def render_file(path: Path) -> Post:
    """Parse and render a single file, regardless of its draft flag."""
    return build_post(parse_file(path))


def sort_posts(posts: list[Post]) -> list[Post]:
    """Newest first by plain string comparison of date; undated posts sort last."""
    return sorted(posts, key=lambda p: p.date, reverse=True)


def collect_posts(
    input_dir: Path,
    include_drafts: bool = False,
    skip_invalid: bool = False,
    ) -> tuple[list[Post], list[tuple[str, str]]]:
    """Build a Post for every non-draft document in input_dir.

    Returns (posts, changes) where changes is a list of (status, name) in
    discovery order; status is one of 'processed', 'draft', or 'failed'.
    A document that fails to parse aborts the run with a RuntimeError naming
    the file, unless skip_invalid is set, in which case it is logged and skipped.
    """
    if not input_dir.is_dir():
        raise FileNotFoundError(f"Posts directory not found: {input_dir}")

    posts = []
    changes = []
    for p in discover_files(input_dir):
        try:
            parsed = parse_file(p)
            if is_draft(parsed.metadata) and not include_drafts:
                logger.debug("Skipping draft %s", p)
                changes.append(('draft', p.name))
                continue
            post = build_post(parsed)
        except Exception as e:
            if not skip_invalid:
                raise RuntimeError(f"Failed to process {p}: {e}") from e
            logger.warning("Skipping %s: %s", p, e)
            changes.append(('failed', p.name))
            continue
        logger.debug("Rendered %s as '%s'", p, post.slug)
        posts.append(post)
        changes.append(('processed', post.slug))
    return posts, changes


def write_posts(posts: list[Post], output_file: Path, indent: int = 2) -> Path:
    """Write posts as a pretty-printed JSON array, creating parent directories."""
    output_file.parent.mkdir(parents=True, exist_ok=True)
    data = [p.model_dump() for p in posts]
    output_file.write_text(json.dumps(data, indent=indent, ensure_ascii=False), encoding='utf-8')
    return output_file


def run_build(
    input_dir: Path,
    output_file: Path,
    indent: int = 2,
    include_drafts: bool = False,
    skip_invalid: bool = False,
    ) -> tuple[dict[str, int], list[tuple[str, str]]]:
    """Collect, sort, and write posts. Returns (counts, changes) keyed by status."""
    posts, changes = collect_posts(input_dir, include_drafts, skip_invalid)
    write_posts(sort_posts(posts), output_file, indent)
    counts = dict.fromkeys(STATUSES, 0)
    for status, _ in changes:
        counts[status] += 1
    return counts, changes

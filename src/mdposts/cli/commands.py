"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdposts.config import Settings, load_config
from mdposts.core.pipeline import render_file, run_build


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _echo_build(counts: dict, changes: list, output_file: Path) -> None:
    """Print per-doc build status and a summary line."""
    for status, name in changes:
        typer.echo(f"  {status}: {name}")
    typer.echo(
        f"Generated {output_file} - "
        f"{counts['processed']} post(s), "
        f"{counts['draft']} draft(s) skipped, "
        f"{counts['failed']} failed"
    )


def build_cmd(
    input_dir: Annotated[Optional[str], typer.Option("--input-dir", "-i", help="Directory of .md posts")] = None,
    output: Annotated[Optional[str], typer.Option("--output", "-o", help="Output JSON file")] = None,
    indent: Annotated[Optional[int], typer.Option("--indent", help="JSON indentation width")] = None,
    include_drafts: Annotated[bool, typer.Option("--include-drafts", help="Keep draft: true documents")] = False,
    skip_invalid: Annotated[bool, typer.Option("--skip-invalid", help="Skip documents that fail to parse")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log per-document detail")] = False,
    ):
    """Render every post in the input directory into one JSON array, newest first."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    settings = _settings(overrides={
        "input_dir": input_dir, "output_file": output, "indent": indent,
        # flags can only switch these on; off falls through to config/env
        "include_drafts": include_drafts or None, "skip_invalid": skip_invalid or None,
    })
    src = Path(settings.input_dir)
    output_file = Path(settings.output_file)

    typer.echo(f"Reading posts from: {src}")
    try:
        counts, changes = run_build(
            src, output_file, settings.indent, settings.include_drafts, settings.skip_invalid,
        )
    except FileNotFoundError as e:
        _fail(str(e))
    except RuntimeError as e:
        _fail("Build failed", e)
    except OSError as e:
        _fail(f"Could not write {output_file}", e)
    _echo_build(counts, changes, output_file)


def render_cmd(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True, help="Markdown file to render")],
    html: Annotated[bool, typer.Option("--html", help="Print only the rendered HTML")] = False,
    ):
    """Render a single file (drafts included) and print the post JSON."""
    try:
        post = render_file(path)
    except ValueError as e:
        _fail(f"Failed to render {path}", e)
    typer.echo(post.content if html else post.model_dump_json(indent=2))

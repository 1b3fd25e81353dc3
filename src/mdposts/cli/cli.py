"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdposts.cli.commands import build_cmd, render_cmd


app = typer.Typer(name="mdposts", no_args_is_help=True, help="Markdown posts to a single JSON bundle")

app.command(name="build")(build_cmd)
app.command(name="render")(render_cmd)

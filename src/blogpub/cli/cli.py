"""CLI entrypoint: Typer app definition and command registration"""

import typer

from blogpub.cli.commands import build_cmd, list_cmd


app = typer.Typer(name="blogpub", no_args_is_help=True, help="Plain-text documents to a static HTML blog")

app.command(name="build")(build_cmd)
app.command(name="list")(list_cmd)

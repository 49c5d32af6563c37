"""CLI entrypoint: Typer app definition and command registration"""

import typer

from docnav.cli.commands import build_cmd, show_cmd


app = typer.Typer(name="docnav", no_args_is_help=True, help="Navigation and TOC synthesis for rendered documentation")

app.command(name="build")(build_cmd)
app.command(name="show")(show_cmd)

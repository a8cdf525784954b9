"""CLI entrypoint: Typer app definition and command registration"""

import typer

from artpub.cli.commands import check_cmd, render_cmd


app = typer.Typer(name="artpub", no_args_is_help=True, help="Article JSON to single-page HTML renderer")

app.command(name="render")(render_cmd)
app.command(name="check")(check_cmd)

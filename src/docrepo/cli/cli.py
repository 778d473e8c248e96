"""CLI entrypoint: Typer app definition and command registration"""

import typer

from docrepo.cli.commands import get_cmd, list_cmd, search_cmd


app = typer.Typer(name="docrepo", no_args_is_help=True, help="In-memory document repository")

app.command(name="search")(search_cmd)
app.command(name="get")(get_cmd)
app.command(name="list")(list_cmd)

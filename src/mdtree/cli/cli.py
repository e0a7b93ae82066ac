"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdtree.cli.commands import convert_cmd, html_cmd, tree_cmd


app = typer.Typer(name="mdtree", no_args_is_help=True, help="Markdown to rich-text document tree converter")

app.command(name="convert")(convert_cmd)
app.command(name="tree")(tree_cmd)
app.command(name="html")(html_cmd)

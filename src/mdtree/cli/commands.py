"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdtree.config import Settings, load_config
from mdtree.core.convert import markdown_to_tiptap_dict
from mdtree.core.parse import parse_file
from mdtree.core.pipeline import run_convert
from mdtree.core.render import markdown_to_html
from mdtree.exceptions import RendererUnavailable
from mdtree.logging_config import configure_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config and set up logging with standard CLI error handling."""
    try:
        settings = load_config(overrides=overrides)
        configure_logging(settings.log_level)
    except ValueError as e:
        _fail(str(e))
    return settings


def _read_body(path: str) -> str:
    """Return the markdown body of a single file with frontmatter removed."""
    try:
        return parse_file(Path(path)).markdown
    except (OSError, ValueError) as e:
        _fail(f"Cannot read {path}", e)


def convert_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to convert")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    fmt: Annotated[Optional[str], typer.Option("--format", help="json or html")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    no_breaks: Annotated[bool, typer.Option("--no-breaks", help="Keep soft line breaks as plain newlines")] = False,
    ):
    """Convert markdown files to editor JSON trees or HTML."""
    settings = _settings(overrides={
        "output_dir": out, "output_format": fmt, "parser_config": parser,
        "breaks": False if no_breaks else None,
    })
    output_dir = Path(settings.output_dir)
    try:
        results = run_convert(path, settings, output_dir)
    except (RendererUnavailable, RuntimeError) as e:
        _fail(str(e))
    for src, out_file in results:
        typer.echo(f"  {src} -> {out_file}")
    typer.echo(f"Converted {len(results)} document(s) to {output_dir}/")


def tree_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to convert")],
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    ):
    """Print the editor JSON tree for one markdown file."""
    settings = _settings(overrides={"parser_config": parser})
    body = _read_body(path)
    try:
        doc = markdown_to_tiptap_dict(body, settings.parser_config, settings.breaks)
    except RendererUnavailable as e:
        _fail(str(e))
    typer.echo(json.dumps(doc, indent=settings.indent or None, ensure_ascii=False))


def html_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to render")],
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    ):
    """Print the flat HTML rendering of one markdown file."""
    settings = _settings(overrides={"parser_config": parser})
    body = _read_body(path)
    try:
        html = markdown_to_html(body, settings.parser_config, settings.breaks)
    except RendererUnavailable as e:
        _fail(str(e))
    typer.echo(html, nl=False)

"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from artpub.config import Settings, load_config
from artpub.core.errors import ArtpubError
from artpub.core.parse import read_article
from artpub.core.pipeline import run_body, run_render


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


def render_cmd(
    path: Annotated[Path, typer.Argument(help="Article JSON file")],
    out: Annotated[Optional[Path], typer.Option("--out", "-o", help="Write the page here instead of stdout")] = None,
    title: Annotated[Optional[str], typer.Option("--title", help="Page title")] = None,
    strict: Annotated[Optional[bool], typer.Option("--strict/--no-strict", help="Reject markups that would not nest")] = None,
    body_only: Annotated[bool, typer.Option("--body-only", help="Print only the rendered body lines")] = False,
    ):
    """Render an article JSON file to a self-contained HTML page."""
    settings = _settings(overrides={"title": title, "strict_nesting": strict})
    try:
        html = run_render(path, settings, body_only=body_only)
    except ArtpubError as e:
        _fail(str(e))

    if out is None:
        typer.echo(html)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(html + "\n", encoding="utf-8")
    typer.echo(f"Wrote {out}", err=True)


def check_cmd(
    path: Annotated[Path, typer.Argument(help="Article JSON file")],
    strict: Annotated[Optional[bool], typer.Option("--strict/--no-strict", help="Reject markups that would not nest")] = None,
    ):
    """Parse and render without writing output."""
    settings = _settings(overrides={"strict_nesting": strict})
    try:
        paragraphs = read_article(path)
        run_body(paragraphs, settings)
    except ArtpubError as e:
        _fail(str(e))
    typer.echo(f"OK: {len(paragraphs)} paragraph(s)")

"""CLI command implementations"""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from nbmd.config import Settings, load_config
from nbmd.core.export import run_render
from nbmd.core.models import ParsedResult
from nbmd.core.parse import discover_files, parse_file


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _parse_path(path: str, settings: Settings) -> list[tuple[Path, list[ParsedResult]]]:
    """Parse every file under path, exiting with an error if none are found or one fails."""
    files = discover_files(Path(path))
    if not files:
        _fail(f"No markdown or notebook files found at {path}")
    parsed = []
    for p in files:
        try:
            parsed.append((p, parse_file(p, settings.parse_options())))
        except (OSError, ValueError) as e:
            _fail(f"Could not read {p}", e)
    return parsed


def render_cmd(
    path: Annotated[str, typer.Argument(help="Markdown/notebook file or directory to render")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    prefix: Annotated[Optional[str], typer.Option("--class-prefix", help="CSS class prefix")] = None,
    sanitize: Annotated[Optional[bool], typer.Option("--sanitize/--no-sanitize", help="Sanitize HTML output")] = None,
    gfm: Annotated[Optional[bool], typer.Option("--gfm/--no-gfm", help="Enable pipe tables")] = None,
    new_tab: Annotated[Optional[bool], typer.Option("--new-tab/--same-tab", help="Open links in a new tab")] = None,
    unique_ids: Annotated[Optional[bool], typer.Option("--unique-ids/--no-unique-ids", help="Disambiguate heading ids")] = None,
    ):
    """Render markdown cells to HTML with a JSON metadata sidecar per file."""
    settings = _settings(overrides={
        "output_dir": out, "class_prefix": prefix, "sanitize": sanitize,
        "gfm": gfm, "links_in_new_tab": new_tab, "unique_ids": unique_ids,
    })
    output_dir = Path(settings.output_dir)

    try:
        results = run_render(path, settings.parse_options(), output_dir)
    except RuntimeError as e:
        _fail(str(e))
    if not results:
        _fail(f"No markdown or notebook files found at {path}")
    for src, html_path in results:
        typer.echo(f"  {src} -> {html_path}")
    typer.echo(f"Rendered {len(results)} file(s) to {output_dir}/")


def toc_cmd(
    path: Annotated[str, typer.Argument(help="Markdown/notebook file or directory")],
    ):
    """Print the table of contents, indented by heading level."""
    settings = _settings()
    for p, cells in _parse_path(path, settings):
        typer.echo(str(p))
        for cell in cells:
            for h in cell.metadata.headings:
                typer.echo(f"{'  ' * h.level}{h.text} (#{h.id})")


def meta_cmd(
    path: Annotated[str, typer.Argument(help="Markdown/notebook file or directory")],
    ):
    """Print extracted metadata for every cell as JSON."""
    settings = _settings()
    payload = {
        str(p): [cell.metadata.model_dump() for cell in cells]
        for p, cells in _parse_path(path, settings)
    }
    typer.echo(json.dumps(payload, indent=2))

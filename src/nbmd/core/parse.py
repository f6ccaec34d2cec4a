"""Public parse API, notebook cell entry point, and markdown file discovery"""

import json
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from nbmd.core.models import (
    DEFAULT_OPTIONS,
    CodeBlock,
    Heading,
    Image,
    Link,
    ParsedResult,
    ParseOptions,
)
from nbmd.core.pipeline import run_pipeline


MD_EXTENSIONS = {'.md', '.markdown'}
NOTEBOOK_EXTENSIONS = {'.ipynb'}

OptionsLike = Union[ParseOptions, Mapping[str, Any], None]


def resolve_options(options: OptionsLike = None) -> ParseOptions:
    """Merge caller options over the defaults; caller values win.

    Raises pydantic.ValidationError (a ValueError) for unknown keys or invalid values.
    """
    if options is None:
        return DEFAULT_OPTIONS
    if isinstance(options, ParseOptions):
        return options
    return ParseOptions(**options)


def parse_markdown(markdown: str, options: OptionsLike = None) -> ParsedResult:
    """Render markdown to HTML and collect headings, links, images and code blocks.

    Never raises for any input string; malformed syntax renders as text.
    """
    return run_pipeline(markdown, resolve_options(options))


def join_source(source: Union[list[str], str]) -> str:
    """Join cell source lines with newlines; each line may carry its own trailing newline."""
    if isinstance(source, str):
        return source
    return "\n".join(line.rstrip("\n") for line in source)


def markdown_to_html(markdown: str, options: OptionsLike = None) -> str:
    return parse_markdown(markdown, options).html


def parse_cell(source: Union[list[str], str], options: OptionsLike = None) -> ParsedResult:
    """Parse a notebook cell source given as a string or a list of lines."""
    return parse_markdown(join_source(source), options)


def extract_table_of_contents(markdown: str) -> list[Heading]:
    return parse_markdown(markdown, {"sanitize": False}).metadata.headings


def extract_links(markdown: str) -> list[Link]:
    return parse_markdown(markdown, {"sanitize": False}).metadata.links


def extract_images(markdown: str) -> list[Image]:
    return parse_markdown(markdown, {"sanitize": False}).metadata.images


def extract_code_blocks(markdown: str) -> list[CodeBlock]:
    return parse_markdown(markdown, {"sanitize": False}).metadata.code_blocks


def discover_files(path: Path) -> list[Path]:
    """Return sorted markdown and notebook files under path, or [path] if a single file."""
    suffixes = MD_EXTENSIONS | NOTEBOOK_EXTENSIONS
    if path.is_file():
        return [path] if path.suffix in suffixes else []
    return sorted(p for p in path.rglob('*') if p.suffix in suffixes)


def _notebook_cells(raw: str) -> list[str]:
    """Return the markdown cell sources of an .ipynb document, in order."""
    try:
        notebook = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid notebook JSON: {e}") from e
    if not isinstance(notebook, dict) or not isinstance(notebook.get("cells"), list):
        raise ValueError("Invalid notebook JSON: expected an object with a 'cells' list")

    sources = []
    for cell in notebook["cells"]:
        if not isinstance(cell, dict) or cell.get("cell_type") != "markdown":
            continue
        source = cell.get("source", "")
        lines = [source] if isinstance(source, str) else source
        if not isinstance(lines, list) or not all(isinstance(line, str) for line in lines):
            raise ValueError(f"Invalid notebook JSON: cell source must be text, got {source!r}")
        sources.append(join_source(source))
    return sources


def read_cells(path: Path) -> list[str]:
    """Read markdown sources from path: one cell for .md files, each markdown cell for .ipynb."""
    raw = path.read_text(encoding='utf-8')
    if path.suffix in NOTEBOOK_EXTENSIONS:
        return _notebook_cells(raw)
    return [raw]


def parse_file(path: Path, options: Optional[ParseOptions] = None) -> list[ParsedResult]:
    """Parse every markdown cell of a file."""
    return [parse_markdown(source, options) for source in read_cells(path)]

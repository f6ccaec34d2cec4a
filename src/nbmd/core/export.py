"""Export: build HTML documents and sidecar JSON, write output files"""

import json
from pathlib import Path
from typing import Optional

from nbmd.core.models import ParsedResult, ParseOptions
from nbmd.core.parse import discover_files, parse_file
from nbmd.core.utils.escape import escape_html
from nbmd.core.utils.slug import generate_id


def build_html(cells: list[ParsedResult], title: str) -> str:
    """Wrap each rendered cell in a markdown-cell container inside a minimal HTML page."""
    body = "\n".join(
        f'<div class="nb-cell nb-markdown-cell">\n'
        f'<div class="nb-markdown-content">\n{cell.html}\n</div>\n'
        f'</div>'
        for cell in cells
    )
    return (
        "<!DOCTYPE html>\n<html>\n<head>\n<meta charset=\"utf-8\">\n"
        f"<title>{escape_html(title)}</title>\n</head>\n<body>\n{body}\n</body>\n</html>\n"
    )


def build_sidecar(path: Path, slug: str, cells: list[ParsedResult]) -> dict:
    """Build the sidecar JSON dict: slug, path, aggregated toc, per-cell metadata."""
    return {
        "slug": slug,
        "path": str(path),
        "toc": [h.model_dump() for cell in cells for h in cell.metadata.headings],
        "cells": [cell.metadata.model_dump() for cell in cells],
    }


def write_doc(
    path: Path,
    cells: list[ParsedResult],
    output_dir: Path,
    root: Optional[Path] = None,
    ) -> tuple[Path, Path]:
    """Write <slug>.html + <slug>.json for one source file.

    Output path mirrors the source directory structure below root:
      output_dir / path.parent.relative_to(root) / <slug>.{html|json}

    Without a root, files are written directly into output_dir.
    Returns (html_path, json_path).
    """
    dest_dir = output_dir / path.parent.relative_to(root) if root is not None else output_dir
    dest_dir.mkdir(parents=True, exist_ok=True)
    slug = generate_id(path.stem) or "doc"
    html_path = dest_dir / f"{slug}.html"
    json_path = dest_dir / f"{slug}.json"

    html_path.write_text(build_html(cells, path.stem), encoding='utf-8')
    json_path.write_text(json.dumps(build_sidecar(path, slug, cells), indent=2), encoding='utf-8')
    return html_path, json_path


def run_render(path: str, options: ParseOptions, output_dir: Path) -> list[tuple[Path, Path]]:
    """Render every file under path into output_dir, mirroring its subdirectories.

    Returns (source_path, html_path) pairs.
    """
    root = Path(path)
    if root.is_file():
        root = root.parent
    results = []
    for p in discover_files(Path(path)):
        try:
            cells = parse_file(p, options)
            html_path, _ = write_doc(p, cells, output_dir, root)
            results.append((p, html_path))
        except Exception as e:
            raise RuntimeError(f"Failed to render {p}: {e}") from e
    return results

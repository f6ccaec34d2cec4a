"""GFM pipe table builder"""

import re

from nbmd.core.models import RenderContext, StageResult


SEPARATOR_CELL_RE = re.compile(r'^:?-+:?$')
CELL_SPLIT_RE = re.compile(r'(?<!\\)\|')


def split_row(line: str) -> list[str]:
    """Split a pipe row into trimmed cells, ignoring the optional outer pipes."""
    row = line.strip()
    if row.startswith("|"):
        row = row[1:]
    if row.endswith("|") and not row.endswith("\\|"):
        row = row[:-1]
    return [cell.strip().replace("\\|", "|") for cell in CELL_SPLIT_RE.split(row)]


def parse_alignments(line: str) -> list[str] | None:
    """Return per-column alignment for a separator row, or None if line is not one."""
    if "-" not in line:
        return None
    cells = split_row(line)
    if not cells or not all(SEPARATOR_CELL_RE.match(c) for c in cells):
        return None
    alignments = []
    for cell in cells:
        if cell.startswith(":") and cell.endswith(":"):
            alignments.append("center")
        elif cell.endswith(":"):
            alignments.append("right")
        else:
            alignments.append("left")
    return alignments


def _cells(tag: str, cells: list[str], alignments: list[str], css: str, prefix: str) -> str:
    html = []
    for index, cell in enumerate(cells):
        align = alignments[index] if index < len(alignments) else "left"
        align_class = f" {prefix}-align-{align}" if align != "left" else ""
        html.append(f'<{tag} class="{prefix}-{css}{align_class}">{cell}</{tag}>')
    return "".join(html)


def render_tables(text: str, ctx: RenderContext) -> StageResult:
    """Build <table> from a '|' header row followed by a separator row.

    Body rows are every following line containing '|'; their cell count need
    not match the header. Alignment is applied as a class, left is the default
    and gets none. A no-op unless options.gfm is set.
    """
    if not ctx.options.gfm:
        return StageResult(text=text)

    prefix = ctx.options.class_prefix
    lines = text.split("\n")
    result: list[str] = []
    i = 0

    while i < len(lines):
        line = lines[i]
        alignments = parse_alignments(lines[i + 1]) if "|" in line and i + 1 < len(lines) else None
        if alignments is None:
            result.append(line)
            i += 1
            continue

        header = split_row(line)
        html = [
            f'<table class="{prefix}-table">',
            f'<thead class="{prefix}-table-head"><tr class="{prefix}-table-row">',
            _cells("th", header, alignments, "table-header", prefix),
            f'</tr></thead><tbody class="{prefix}-table-body">',
        ]
        i += 2

        while i < len(lines) and "|" in lines[i]:
            cells = split_row(lines[i])
            if any(cells):
                html.append(f'<tr class="{prefix}-table-row">')
                html.append(_cells("td", cells, alignments, "table-cell", prefix))
                html.append("</tr>")
            i += 1

        html.append("</tbody></table>")
        result.extend(["", "".join(html), ""])

    return StageResult(text="\n".join(result))

"""Line-oriented block builders: horizontal rules, blockquotes, flat lists"""

import re

from nbmd.core.models import RenderContext, StageResult


HR_RE = re.compile(r'^[ \t]*([-*_])(?:[ \t]*\1){2,}[ \t]*$', re.MULTILINE)
UNORDERED_ITEM_RE = re.compile(r'^\s*[-*+]\s+(.*)$')
ORDERED_ITEM_RE = re.compile(r'^\s*(\d+)\.\s+(.*)$')


def _block(html: str) -> list[str]:
    """Surround a block fragment with blank lines so it stands alone as a paragraph block."""
    return ["", html, ""]


def render_rules(text: str, ctx: RenderContext) -> StageResult:
    """Turn lines of 3+ '-', '*' or '_' (spaces allowed between) into <hr>."""
    hr = f'\n\n<hr class="{ctx.options.class_prefix}-hr">\n\n'
    return StageResult(text=HR_RE.sub(lambda m: hr, text))


def render_blockquotes(text: str, ctx: RenderContext) -> StageResult:
    """Collect runs of '>' lines into one <blockquote>.

    Blank lines continue the run; only a line that is neither blank nor quoted
    ends it. Quote content keeps its line structure as <br>.
    """
    prefix = ctx.options.class_prefix
    lines = text.split("\n")
    result: list[str] = []
    i = 0

    while i < len(lines):
        if not lines[i].startswith(">"):
            result.append(lines[i])
            i += 1
            continue

        quoted: list[str] = []
        while i < len(lines) and (lines[i].startswith(">") or not lines[i].strip()):
            quoted.append(lines[i][1:].strip() if lines[i].startswith(">") else "")
            i += 1

        content = "\n".join(quoted).strip().replace("\n", "<br>")
        result.extend(_block(f'<blockquote class="{prefix}-blockquote">{content}</blockquote>'))

    return StageResult(text="\n".join(result))


def _list_html(kind: str, items: list[str], prefix: str, start: int = 1) -> str:
    start_attr = f' start="{start}"' if kind == "ol" and start != 1 else ""
    family = "unordered" if kind == "ul" else "ordered"
    body = "".join(f'<li class="{prefix}-list-item">{item}</li>' for item in items)
    return f'<{kind} class="{prefix}-list {prefix}-{family}-list"{start_attr}>{body}</{kind}>'


def render_lists(text: str, ctx: RenderContext) -> StageResult:
    """Group consecutive '-', '*', '+' or 'N.' lines into flat <ul>/<ol> runs.

    A change of marker family closes the current list and opens a new one.
    Markers with no item text are dropped.
    Item text is left for the inline stages.
    """
    prefix = ctx.options.class_prefix
    lines = text.split("\n")
    result: list[str] = []
    i = 0

    while i < len(lines):
        line = lines[i]

        if UNORDERED_ITEM_RE.match(line):
            items = []
            while i < len(lines) and (m := UNORDERED_ITEM_RE.match(lines[i])):
                if item := m.group(1).strip():
                    items.append(item)
                i += 1
            result.extend(_block(_list_html("ul", items, prefix)))
            continue

        if m := ORDERED_ITEM_RE.match(line):
            start = int(m.group(1))
            items = []
            while i < len(lines) and (m := ORDERED_ITEM_RE.match(lines[i])):
                if item := m.group(2).strip():
                    items.append(item)
                i += 1
            result.extend(_block(_list_html("ol", items, prefix, start)))
            continue

        result.append(line)
        i += 1

    return StageResult(text="\n".join(result))

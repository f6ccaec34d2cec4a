"""Inline emphasis: strikethrough, bold-italic, bold, italic"""

import re

from nbmd.core.models import RenderContext, StageResult


TAG_RE = re.compile(r'(</?[A-Za-z][^<>]*>)')

# a span body never crosses its own closing marker, so each opener scans only
# as far as the next candidate closer
STRIKE_RE = re.compile(r'~~(?!\s)((?:[^~\n]|~(?!~))*?[^\s~])~~')
BOLD_ITALIC_RES = (
    re.compile(r'\*\*\*(?!\s)((?:[^*\n]|\*{1,2}(?!\*))*?[^\s*])\*\*\*'),
    re.compile(r'(?<!\w)___(?!\s)((?:[^_\n]|_{1,2}(?!_))*?[^\s_])___(?!\w)'),
)
BOLD_RES = (
    re.compile(r'\*\*(?!\s)((?:[^*\n]|\*(?!\*))*?[^\s*])\*\*'),
    re.compile(r'(?<!\w)__(?!\s)((?:[^_\n]|_(?!_))*?[^\s_])__(?!\w)'),
)
ITALIC_RES = (
    re.compile(r'\*(?!\s)([^*\n]*?[^\s*])\*'),
    # only underscores between letters or digits may sit inside an italic span
    re.compile(r'(?<!\w)_(?!\s)((?:[^_\n]|(?<=[^\W_])_(?=[^\W_]))*?[^\s_])_(?!\w)'),
)


def emphasize(segment: str, prefix: str) -> str:
    """Apply emphasis rules, most specific first, to text containing no tags."""
    bold = f'<strong class="{prefix}-bold">'
    italic = f'<em class="{prefix}-italic">'
    segment = STRIKE_RE.sub(rf'<del class="{prefix}-strikethrough">\1</del>', segment)
    for pattern in BOLD_ITALIC_RES:
        segment = pattern.sub(rf'{bold}{italic}\1</em></strong>', segment)
    for pattern in BOLD_RES:
        segment = pattern.sub(rf'{bold}\1</strong>', segment)
    for pattern in ITALIC_RES:
        segment = pattern.sub(rf'{italic}\1</em>', segment)
    return segment


def render_emphasis(text: str, ctx: RenderContext) -> StageResult:
    """Apply emphasis to the text between tags, leaving tag markup untouched."""
    parts = TAG_RE.split(text)
    # split with one capture group: even indexes are text, odd are tags
    for index in range(0, len(parts), 2):
        parts[index] = emphasize(parts[index], ctx.options.class_prefix)
    return StageResult(text="".join(parts))

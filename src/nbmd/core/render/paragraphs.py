"""Paragraph wrapping and line breaks, the last stage"""

import re

from nbmd.core.models import RenderContext, StageResult


BLOCK_SPLIT_RE = re.compile(r'\n\s*\n')
BLOCK_TAG_RE = re.compile(r'^<(?:h[1-6]|ul|ol|table|blockquote|pre|hr|div)\b')


def render_paragraphs(text: str, ctx: RenderContext) -> StageResult:
    """Wrap blank-line separated blocks in <p>, single newlines become <br>.

    Blocks that already start with a block-level tag pass through as-is.
    """
    blocks = []
    for block in BLOCK_SPLIT_RE.split(text):
        block = block.strip()
        if not block:
            continue
        if BLOCK_TAG_RE.match(block):
            blocks.append(block)
        else:
            content = block.replace("\n", "<br>")
            blocks.append(f'<p class="{ctx.options.class_prefix}-paragraph">{content}</p>')
    return StageResult(text="\n\n".join(blocks))

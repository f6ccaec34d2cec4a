"""Fenced code block and inline code span extraction"""

import re

from nbmd.core.models import CodeBlock, RenderContext, StageResult
from nbmd.core.utils.escape import escape_html


FENCE_RE = re.compile(
    r'^[ \t]*```[ \t]*([\w+#.-]+)?[^\n`]*\n(.*?)```[ \t]*',
    re.MULTILINE | re.DOTALL,
)
INLINE_CODE_RE = re.compile(r'(?<!`)(`+)(?!`)(.+?)(?<!`)\1(?!`)')
LEADING_BLANK_LINES_RE = re.compile(r'^\s*\n')


def _clean_code(body: str) -> str:
    """Drop leading blank lines and trailing whitespace, keep first-line indent."""
    return LEADING_BLANK_LINES_RE.sub('', body).rstrip()


def _span_content(raw: str) -> str:
    """Trim one space from each end when both ends have one (`` ` a ` `` -> ` a `)."""
    if len(raw) > 2 and raw[0] == ' ' and raw[-1] == ' ' and raw.strip():
        return raw[1:-1]
    return raw


def extract_code(text: str, ctx: RenderContext) -> StageResult:
    """Replace fenced blocks and inline spans with escaped, stashed code."""
    prefix = ctx.options.class_prefix
    code_blocks: list[CodeBlock] = []

    def _fence(m: re.Match) -> str:
        language, code = m.group(1) or None, _clean_code(m.group(2))
        code_blocks.append(CodeBlock(language=language, code=code))
        lang_class = f" language-{escape_html(language)}" if language else ""
        body = ctx.stash.store(escape_html(code), code)
        return (
            f'\n\n<pre class="{prefix}-code-block">'
            f'<code class="{prefix}-code{lang_class}">{body}</code></pre>\n\n'
        )

    def _inline(m: re.Match) -> str:
        content = _span_content(m.group(2))
        return ctx.stash.store(
            f'<code class="{prefix}-inline-code">{escape_html(content)}</code>',
            m.group(0),
        )

    text = FENCE_RE.sub(_fence, text)
    text = INLINE_CODE_RE.sub(_inline, text)
    return StageResult(text=text, metadata={"code_blocks": code_blocks})

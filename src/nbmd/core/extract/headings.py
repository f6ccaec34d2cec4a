"""ATX heading extraction with slug ids"""

import re

from nbmd.core.models import Heading, RenderContext, StageResult
from nbmd.core.utils.slug import generate_id


HEADING_RE = re.compile(r'^(#{1,6})[ \t]+(.+?)(?:[ \t]+#+)?[ \t]*$', re.MULTILINE)


def extract_headings(text: str, ctx: RenderContext) -> StageResult:
    """Turn `# text` lines into <hN id=slug> and record each heading in order.

    Repeated heading text yields repeated ids unless options.unique_ids is set,
    in which case later repeats get -1, -2, ... suffixes.
    """
    prefix = ctx.options.class_prefix
    headings: list[Heading] = []
    seen: dict[str, int] = {}

    def _heading(m: re.Match) -> str:
        content = m.group(2).strip()
        if not content:
            return m.group(0)
        level = len(m.group(1))
        source = ctx.stash.source(content)
        slug = generate_id(source)
        if ctx.options.unique_ids:
            count = seen.get(slug, 0)
            seen[slug] = count + 1
            if count:
                slug = f"{slug}-{count}"
        headings.append(Heading(level=level, text=source, id=slug))
        return f'\n\n<h{level} id="{slug}" class="{prefix}-h{level}">{content}</h{level}>\n\n'

    text = HEADING_RE.sub(_heading, text)
    return StageResult(text=text, metadata={"headings": headings})

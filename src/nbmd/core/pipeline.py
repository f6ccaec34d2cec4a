"""Stage ordering and the single-call parse pipeline"""

import logging

from nbmd.core.extract.code import extract_code
from nbmd.core.extract.headings import extract_headings
from nbmd.core.extract.links import extract_images_and_links
from nbmd.core.models import (
    ExtractedMetadata,
    ParseOptions,
    ParsedResult,
    RenderContext,
    Stage,
)
from nbmd.core.render.blocks import render_blockquotes, render_lists, render_rules
from nbmd.core.render.inline import render_emphasis
from nbmd.core.render.paragraphs import render_paragraphs
from nbmd.core.render.tables import render_tables
from nbmd.core.sanitize import sanitize_html
from nbmd.core.utils.stash import strip_markers


logger = logging.getLogger(__name__)

# Order matters: code is fenced off before anything can read '#', '*', '|' or '>'
# inside it, images precede links, and paragraphs wrap whatever is left.
STAGES: list[Stage] = [
    extract_code,
    extract_headings,
    render_rules,
    render_tables,
    render_blockquotes,
    render_lists,
    extract_images_and_links,
    render_emphasis,
    render_paragraphs,
]


def _normalize(markdown: str) -> str:
    """Unify line endings and drop characters reserved for placeholders."""
    return strip_markers(markdown.replace("\r\n", "\n").replace("\r", "\n"))


def run_pipeline(markdown: str, options: ParseOptions) -> ParsedResult:
    """Run every stage over markdown, folding stage metadata into one result."""
    if options.math:
        logger.debug("math option set; math expressions are left as text")

    ctx = RenderContext(options=options)
    metadata = ExtractedMetadata()
    text = _normalize(markdown)

    for stage in STAGES:
        result = stage(text, ctx)
        text = result.text
        for key, items in result.metadata.items():
            getattr(metadata, key).extend(items)

    html = ctx.stash.restore(text)
    if options.sanitize:
        html = sanitize_html(html)

    logger.debug(
        "Parsed %d chars: %d headings, %d links, %d images, %d code blocks",
        len(markdown), len(metadata.headings), len(metadata.links),
        len(metadata.images), len(metadata.code_blocks),
    )
    return ParsedResult(html=html, metadata=metadata)

"""Image and link extraction"""

import re

from nbmd.core.models import Image, Link, RenderContext, StageResult
from nbmd.core.utils.escape import escape_html


# images share the bracket/paren grammar with links, so they are matched first
IMAGE_RE = re.compile(r'!\[([^\]]*)\]\(([^)]+?)(?:\s+"([^"]+)")?\)')
LINK_RE = re.compile(r'\[([^\]]+)\]\(([^)]+?)(?:\s+"([^"]+)")?\)')

NEW_TAB_ATTRS = ' target="_blank" rel="noopener noreferrer"'


def _title_attr(title: str | None) -> str:
    return f' title="{escape_html(title)}"' if title else ""


def extract_images_and_links(text: str, ctx: RenderContext) -> StageResult:
    """Render ![alt](src "title") as <img> and [text](url "title") as <a>.

    Image tags are stashed whole so a link wrapping an image records the image
    markdown as its text. Link text stays in the buffer for emphasis.
    """
    prefix = ctx.options.class_prefix
    target = NEW_TAB_ATTRS if ctx.options.links_in_new_tab else ""
    images: list[Image] = []
    links: list[Link] = []

    def _image(m: re.Match) -> str:
        alt, src, title = m.group(1), m.group(2).strip(), m.group(3)
        images.append(Image(alt=ctx.stash.source(alt), src=ctx.stash.source(src), title=title))
        html = (
            f'<img src="{escape_html(ctx.stash.source(src))}" alt="{escape_html(ctx.stash.source(alt))}"'
            f' class="{prefix}-image"{_title_attr(title)}>'
        )
        return ctx.stash.store(html, m.group(0))

    def _link(m: re.Match) -> str:
        label, url, title = m.group(1), m.group(2).strip(), m.group(3)
        href = ctx.stash.source(url)
        links.append(Link(text=ctx.stash.source(label), url=href, title=title))
        return (
            f'<a href="{escape_html(href)}" class="{prefix}-link"'
            f'{_title_attr(title)}{target}>{label}</a>'
        )

    text = IMAGE_RE.sub(_image, text)
    text = LINK_RE.sub(_link, text)
    return StageResult(text=text, metadata={"images": images, "links": links})

"""Allow-list HTML sanitization for parser output"""

import logging
from functools import lru_cache

import bleach

from nbmd.core.utils.escape import escape_html


logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _get_bleach_config():
    """Tags and attributes the parser emits, plus plain text containers."""
    allowed_tags = {
        # text
        "p",
        "br",
        "div",
        "span",
        "strong",
        "em",
        "del",
        # headings
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        # blocks
        "hr",
        "blockquote",
        "ul",
        "ol",
        "li",
        "pre",
        "code",
        # tables
        "table",
        "thead",
        "tbody",
        "tr",
        "th",
        "td",
        # links and media
        "a",
        "img",
    }

    allowed_attrs = {
        "*": ["class", "id", "title"],
        "a": ["href", "title", "target", "rel"],
        "img": ["src", "alt", "title"],
        "ol": ["start"],
    }

    allowed_protocols = ["http", "https", "mailto", "tel"]

    return frozenset(allowed_tags), allowed_attrs, allowed_protocols


def sanitize_html(html: str) -> str:
    """Clean html against the allow-list; disallowed tags are escaped, not dropped."""
    allowed_tags, allowed_attrs, allowed_protocols = _get_bleach_config()
    try:
        return bleach.clean(
            html,
            tags=allowed_tags,
            attributes=allowed_attrs,
            protocols=allowed_protocols,
            strip=False,
        )
    except Exception as e:
        logger.error(f"Sanitization failed, escaping output: {e}", exc_info=True)
        return escape_html(html)

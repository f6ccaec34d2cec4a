"""HTML escaping for text and attribute values"""

import re


HTML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}

_ESCAPE_RE = re.compile(r"[&<>\"']")


def escape_html(text: str) -> str:
    """Escape & < > " ' for safe use in element text and quoted attributes.

    Not idempotent: escaping an already-escaped string escapes its ampersands again.
    """
    return _ESCAPE_RE.sub(lambda m: HTML_ESCAPES[m.group(0)], text)

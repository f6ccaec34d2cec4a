"""Placeholder stash for fragments that later stages must not rewrite"""

import re


STX = "\u0002"
ETX = "\u0003"
PLACEHOLDER = STX + "nbmd:%d" + ETX
PLACEHOLDER_RE = re.compile(STX + r"nbmd:(\d+)" + ETX)


class Stash:
    """Rendered fragments pulled out of the text buffer, keyed by placeholder.

    Each entry keeps both the rendered HTML and the markdown it came from, so
    metadata can be reported in source form while the buffer carries HTML.
    A fragment may itself contain placeholders of earlier entries.
    """

    def __init__(self):
        self._html: list[str] = []
        self._source: list[str] = []

    def __len__(self) -> int:
        return len(self._html)

    def store(self, html: str, source: str = "") -> str:
        """Stash a fragment and return the placeholder that stands in for it."""
        self._html.append(html)
        self._source.append(source)
        return PLACEHOLDER % (len(self._html) - 1)

    def restore(self, text: str) -> str:
        """Replace placeholders in text with their rendered HTML."""
        return self._substitute(text, self._html)

    def source(self, text: str) -> str:
        """Replace placeholders in text with the markdown they were built from."""
        return self._substitute(text, self._source)

    def _substitute(self, text: str, fragments: list[str]) -> str:
        def _replace(m: re.Match) -> str:
            index = int(m.group(1))
            if index >= len(fragments):
                return m.group(0)
            # entries only reference earlier entries, so recursion terminates
            return self._substitute(fragments[index], fragments)

        return PLACEHOLDER_RE.sub(_replace, text)


def strip_markers(text: str) -> str:
    """Remove placeholder delimiters from untrusted input."""
    return text.replace(STX, "").replace(ETX, "")

"""Unit tests for core/utils/escape.py"""

from nbmd.core.utils.escape import escape_html


def test_escape_html_all_special_chars():
    """Each of & < > " ' maps to its entity."""
    assert escape_html("&<>\"'") == "&amp;&lt;&gt;&quot;&#39;"


def test_escape_html_plain_text_unchanged():
    """Text with no special characters is returned as-is."""
    assert escape_html("plain text 123") == "plain text 123"


def test_escape_html_is_not_idempotent():
    """Escaping twice escapes the ampersands of the first pass."""
    once = escape_html("<b>")
    assert once == "&lt;b&gt;"
    assert escape_html(once) == "&amp;lt;b&amp;gt;"
    assert escape_html(once) != once

"""Unit tests for core/utils/stash.py"""

from nbmd.core.utils.stash import ETX, STX, Stash, strip_markers


def test_store_returns_distinct_placeholders():
    """Each stored fragment gets its own placeholder."""
    stash = Stash()
    a = stash.store("<b>a</b>", "a")
    b = stash.store("<b>b</b>", "b")
    assert a != b
    assert len(stash) == 2
    assert a.startswith(STX) and a.endswith(ETX)


def test_restore_and_source():
    """restore yields the HTML, source yields the original markdown."""
    stash = Stash()
    text = f"x {stash.store('<code>y</code>', '`y`')} z"
    assert stash.restore(text) == "x <code>y</code> z"
    assert stash.source(text) == "x `y` z"


def test_restore_nested_fragments():
    """A fragment containing an earlier placeholder is restored fully."""
    stash = Stash()
    inner = stash.store("<code>c</code>", "`c`")
    outer = stash.store(f'<img alt="{inner}">', f"![{inner}](i.png)")
    assert stash.restore(outer) == '<img alt="<code>c</code>">'
    assert stash.source(outer) == "![`c`](i.png)"


def test_unknown_placeholder_left_alone():
    """A placeholder index the stash never issued is not replaced."""
    stash = Stash()
    text = f"{STX}nbmd:7{ETX}"
    assert stash.restore(text) == text


def test_strip_markers():
    """strip_markers removes placeholder delimiters from input."""
    assert strip_markers(f"a{STX}nbmd:0{ETX}b") == "anbmd:0b"

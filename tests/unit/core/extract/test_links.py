"""Unit tests for core/extract/links.py"""

from nbmd.core.extract.code import extract_code
from nbmd.core.extract.links import extract_images_and_links
from nbmd.core.models import ParseOptions, RenderContext


def test_image_not_recorded_as_link(raw_ctx):
    """Image syntax populates images only."""
    result = extract_images_and_links("![alt](img.png)", raw_ctx)
    assert len(result.metadata["images"]) == 1
    assert result.metadata["links"] == []
    image = result.metadata["images"][0]
    assert (image.alt, image.src, image.title) == ("alt", "img.png", None)


def test_image_tag_is_stashed(raw_ctx):
    """The <img> tag lives in the stash until restored."""
    result = extract_images_and_links('![A "cat"](cat.png "Cute")', raw_ctx)
    assert "<img" not in result.text
    html = raw_ctx.stash.restore(result.text)
    assert html == (
        '<img src="cat.png" alt="A &quot;cat&quot;" class="nb-md-image" title="Cute">'
    )
    assert result.metadata["images"][0].title == "Cute"


def test_link_with_title_new_tab(raw_ctx):
    """Links render with title and new-tab attributes by default."""
    result = extract_images_and_links('[Docs](https://x.io "The docs")', raw_ctx)
    assert result.text == (
        '<a href="https://x.io" class="nb-md-link" title="The docs"'
        ' target="_blank" rel="noopener noreferrer">Docs</a>'
    )
    link = result.metadata["links"][0]
    assert (link.text, link.url, link.title) == ("Docs", "https://x.io", "The docs")


def test_link_same_tab():
    """links_in_new_tab=False omits target and rel."""
    ctx = RenderContext(ParseOptions(links_in_new_tab=False))
    result = extract_images_and_links("[a](b)", ctx)
    assert result.text == '<a href="b" class="nb-md-link">a</a>'


def test_link_href_escaped(raw_ctx):
    """Quotes in the url are escaped in the href attribute."""
    result = extract_images_and_links('[a](x"onmouseover=y)', raw_ctx)
    assert 'href="x&quot;onmouseover=y"' in result.text


def test_links_in_order(raw_ctx):
    """Links are recorded in document order."""
    result = extract_images_and_links("[one](1) and [two](2)", raw_ctx)
    assert [l.text for l in result.metadata["links"]] == ["one", "two"]


def test_link_wrapping_image(raw_ctx):
    """A linked image records both; the link text is the image markdown."""
    result = extract_images_and_links("[![logo](l.png)](https://x.io)", raw_ctx)
    assert len(result.metadata["images"]) == 1
    assert result.metadata["links"][0].text == "![logo](l.png)"
    assert '<a href="https://x.io"' in raw_ctx.stash.restore(result.text)


def test_link_text_with_inline_code(raw_ctx):
    """Link text metadata shows inline code in source form."""
    text = extract_code("[`run()`](api.html)", raw_ctx).text
    link = extract_images_and_links(text, raw_ctx).metadata["links"][0]
    assert link.text == "`run()`"


def test_unmatched_bracket_left_alone(raw_ctx):
    """An unclosed link is plain text."""
    result = extract_images_and_links("[broken](nope", raw_ctx)
    assert result.text == "[broken](nope"
    assert result.metadata["links"] == []

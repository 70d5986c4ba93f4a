import mistune
import pytest

from mdbook_toc.core.events import parse_events
from mdbook_toc.core.injector import TocInjector, add_toc, release_unterminated_marker, splice_toc
from mdbook_toc.core.errors import SerializationError, TocError


def test_adds_toc(chapter_content, expected_toc):
    result = add_toc(chapter_content)

    assert result.startswith("# Chapter\n\n" + expected_toc)
    assert "<!-- toc -->" not in result
    assert "### Header 2.2.1" in result
    assert "header-221" not in result
    for title in ("# Header 1\n", "## Header 1.1\n", "# Header 2\n", "## Header 2.2\n"):
        assert title in result


def test_toc_is_stable_after_first_application(chapter_content):
    once = add_toc(chapter_content)
    twice = add_toc(once)
    thrice = add_toc(twice)
    assert twice == thrice
    assert twice.count("](#header-1)") == 1


def test_no_marker_is_idempotent():
    content = "# Title\n\nSome *text* here.\n\n## Section\n\n* item one\n* item two\n"
    once = add_toc(content)
    assert add_toc(once) == once
    assert "](#" not in once


def test_marker_without_headings_is_removed():
    result = add_toc("# Title\n\n<!-- toc -->\n\nText.\n")
    assert result == "# Title\n\nText.\n"


def test_deep_headings_are_not_listed():
    content = "<!-- toc -->\n\n# Top\n\n### Deep A\n\n#### Deeper\n\n### Deep B\n\n## Sub\n"
    result = add_toc(content)
    assert "* [Top](#top)\n  * [Sub](#sub)\n" in result
    assert "(#deep-a)" not in result
    assert "(#deeper)" not in result
    assert "(#deep-b)" not in result
    assert "### Deep A" in result


def test_duplicate_headings_share_a_slug():
    result = add_toc("<!-- toc -->\n\n# Setup\n\n# Setup\n")
    assert result.count("* [Setup](#setup)") == 2


def test_every_marker_is_replaced():
    result = add_toc("<!-- toc -->\n\n# One\n\n<!-- toc -->\n\n# Two\n")
    assert "<!-- toc -->" not in result
    assert result.count("* [One](#one)") == 2
    assert result.count("* [Two](#two)") == 2


def test_marker_inside_block_quote_is_replaced():
    result = add_toc("> <!-- toc -->\n\n# Quoted\n")
    assert "<!-- toc -->" not in result
    assert "> * [Quoted](#quoted)" in result


def test_splice_toc_passes_other_events_through():
    events, _ = parse_events("# A\n\n<!-- toc -->\n\ntext\n")
    toc_events, _ = parse_events("* [A](#a)\n")
    spliced = list(splice_toc(events, toc_events))

    index = next(i for i, e in enumerate(events) if e.is_marker())
    end = index + len(toc_events)
    assert spliced[:index] == events[:index]
    assert spliced[index:end] == toc_events
    assert spliced[end:] == events[index + 1 :]


def test_custom_marker():
    injector = TocInjector(marker="<!-- contents -->\n")
    result = injector.add_toc("<!-- contents -->\n\n# After\n")
    assert "* [After](#after)" in result
    assert "<!-- contents -->" not in result


def test_serialization_failure_is_wrapped():
    injector = TocInjector(plugins=["strikethrough"])
    with pytest.raises(SerializationError) as exc_info:
        injector.add_toc("<!-- toc -->\n\n# Title\n\n~~gone~~\n")

    assert str(exc_info.value).startswith("Markdown serialization failed:")
    assert isinstance(exc_info.value, TocError)
    assert exc_info.value.__cause__ is not None


def test_marker_at_end_without_newline_is_kept():
    result = add_toc("# A\n\n<!-- toc -->")
    assert result == "# A\n\n<!-- toc -->\n"


def test_marker_at_end_with_newline_is_replaced():
    assert add_toc("# A\n\n<!-- toc -->\n") == "# A\n"


def test_release_unterminated_marker_only_touches_last_marker():
    events, _ = parse_events("<!-- toc -->\n\n# A\n")
    assert release_unterminated_marker(events, "<!-- toc -->\n\n# A\n") is events

    content = "<!-- toc -->\n\n# A\n\n> <!-- toc -->"
    events, _ = parse_events(content)
    released = release_unterminated_marker(events, content)
    markers = [e for e in released if e.is_marker()]
    assert len(markers) == 1
    assert released[0].is_marker()
    assert sum(1 for e in events if e.is_marker()) == 2


def test_non_ascii_slug_is_written_verbatim():
    result = add_toc("<!-- toc -->\n\n# Über uns\n")
    assert result.startswith("* [Über uns](#Über-uns)\n")
    assert "%C3" not in result


BODY_CORPUS = [
    "\\[not a link\\](x)\n",
    "a \\<b\\> c\n",
    "a <b>bold</b> c\n",
    "See [the docs][docs].\n\n[docs]: https://example.com/docs\n",
    "Visit <https://example.com/a_b>.\n",
    "Mail <user@example.com>.\n",
    "*em* and **strong** and `code`\n",
    "Tom &amp; Jerry\n",
    "AT\\&amp;T\n",
    "snake_case and 2 * 3\n",
    "\\*not emphasis\\*\n",
    "C:\\\\path\\\\to\n",
    "\\![not an image](x.png)\n",
    "![alt](img.png)\n",
    "\\# not a heading\n",
    '[link](https://example.com "Title \\"q\\"")\n',
    "[Über](#Über-uns)\n",
    "[same](same)\n",
    "* item with \\[brackets\\]\n* `tick` and \\`\n",
]


def render_html(content):
    return mistune.create_markdown(escape=False)(content)


@pytest.mark.parametrize("body", BODY_CORPUS)
def test_body_without_marker_renders_the_same(body):
    assert render_html(add_toc(body)) == render_html(body)


@pytest.mark.parametrize("body", BODY_CORPUS)
def test_body_after_marker_renders_the_same(body):
    content = "<!-- toc -->\n\n# Title\n\n" + body
    expected = "* [Title](#title)\n\n# Title\n\n" + body
    assert render_html(add_toc(content)) == render_html(expected)

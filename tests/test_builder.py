from mdbook_toc.core.builder import build_toc
from mdbook_toc.models.heading import HeadingEntry


def test_build_toc_empty():
    assert build_toc([]) == ""


def test_build_toc_indents_by_level():
    entries = [
        HeadingEntry(level=1, label="Intro"),
        HeadingEntry(level=2, label="Getting Started"),
    ]
    assert build_toc(entries) == (
        "* [Intro](#intro)\n"
        "  * [Getting Started](#getting-started)\n"
    )


def test_build_toc_indent_law():
    entries = [HeadingEntry(level=level, label=f"L{level}") for level in (1, 2, 1, 2)]
    for entry, line in zip(entries, build_toc(entries).splitlines()):
        indent = len(line) - len(line.lstrip(" "))
        assert indent == 2 * (entry.level - 1)


def test_build_toc_does_not_deduplicate_slugs():
    entries = [HeadingEntry(level=1, label="Setup"), HeadingEntry(level=1, label="Setup")]
    assert build_toc(entries) == "* [Setup](#setup)\n* [Setup](#setup)\n"


def test_build_toc_custom_normalizer():
    entries = [HeadingEntry(level=1, label="Title")]
    assert build_toc(entries, normalize=lambda s: "x") == "* [Title](#x)\n"


def test_build_toc_is_deterministic(expected_toc):
    entries = [
        HeadingEntry(1, "Header 1"),
        HeadingEntry(2, "Header 1.1"),
        HeadingEntry(1, "Header 2"),
        HeadingEntry(2, "Header 2.1"),
        HeadingEntry(2, "Header 2.2"),
    ]
    assert build_toc(entries) == build_toc(list(entries)) == expected_toc

import pytest

from mdbook_toc.models.book import Book, Chapter, PartTitle, Separator, item_from_dict


def chapter_dict(name, content="", sub_items=None, **extra):
    data = {
        "name": name,
        "content": content,
        "number": [1],
        "sub_items": sub_items or [],
        "path": f"{name}.md",
        "source_path": f"{name}.md",
        "parent_names": [],
    }
    data.update(extra)
    return data


def test_book_from_dict_reads_all_item_kinds():
    book = Book.from_dict(
        {
            "sections": [
                {"Chapter": chapter_dict("intro")},
                "Separator",
                {"PartTitle": "Part I"},
            ],
            "__non_exhaustive": None,
        }
    )

    intro, separator, part = book.sections
    assert isinstance(intro, Chapter) and intro.name == "intro"
    assert isinstance(separator, Separator)
    assert part == PartTitle(title="Part I")


def test_book_to_dict_keeps_unknown_fields():
    data = {
        "sections": [{"Chapter": chapter_dict("intro", custom="kept")}, "Separator"],
        "__non_exhaustive": None,
    }
    assert Book.from_dict(data).to_dict() == data


def test_unknown_item_is_rejected():
    with pytest.raises(ValueError):
        item_from_dict({"Draft": {}})


def test_iter_chapters_visits_sub_items_before_parent():
    book = Book.from_dict(
        {
            "sections": [
                {"Chapter": chapter_dict("a", sub_items=[{"Chapter": chapter_dict("a1")}])},
                "Separator",
                {"Chapter": chapter_dict("b")},
            ]
        }
    )
    assert [c.name for c in book.iter_chapters()] == ["a1", "a", "b"]


def test_empty_book():
    assert list(Book().iter_chapters()) == []
    assert Book().to_dict() == {"sections": [], "__non_exhaustive": None}

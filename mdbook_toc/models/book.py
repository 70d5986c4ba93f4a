"""Book and chapter related data models (mdBook JSON shape)."""

from typing import List, Dict, Any, Optional, Iterator, Union
from dataclasses import dataclass, field

CHAPTER_KEYS = (
    "name",
    "content",
    "number",
    "sub_items",
    "path",
    "source_path",
    "parent_names",
)


@dataclass
class Chapter:
    """책의 챕터를 나타내는 데이터 클래스"""

    name: str
    content: str = ""
    number: Optional[List[int]] = None
    sub_items: List["BookItem"] = field(default_factory=list)
    path: Optional[str] = None
    source_path: Optional[str] = None
    parent_names: List[str] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Chapter":
        return cls(
            name=data.get("name", ""),
            content=data.get("content", ""),
            number=data.get("number"),
            sub_items=[item_from_dict(item) for item in data.get("sub_items", [])],
            path=data.get("path"),
            source_path=data.get("source_path"),
            parent_names=list(data.get("parent_names", [])),
            extra={k: v for k, v in data.items() if k not in CHAPTER_KEYS},
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "name": self.name,
            "content": self.content,
            "number": self.number,
            "sub_items": [item_to_dict(item) for item in self.sub_items],
            "path": self.path,
            "source_path": self.source_path,
            "parent_names": list(self.parent_names),
        }
        data.update(self.extra)
        return data


@dataclass
class Separator:
    """챕터 사이의 구분선"""


@dataclass
class PartTitle:
    """여러 챕터를 묶는 파트 제목"""

    title: str


BookItem = Union[Chapter, Separator, PartTitle]


def item_from_dict(data: Union[str, Dict[str, Any]]) -> BookItem:
    """
    mdBook JSON 항목을 BookItem으로 변환합니다.

    Args:
        data: ``{"Chapter": {...}}``, ``"Separator"`` 또는 ``{"PartTitle": "..."}``

    Returns:
        변환된 BookItem

    Raises:
        ValueError: 알 수 없는 항목 형식인 경우
    """
    if data == "Separator":
        return Separator()

    if isinstance(data, dict):
        if "Chapter" in data:
            return Chapter.from_dict(data["Chapter"])
        if "PartTitle" in data:
            return PartTitle(title=data["PartTitle"])

    raise ValueError(f"알 수 없는 책 항목입니다: {data!r}")


def item_to_dict(item: BookItem) -> Union[str, Dict[str, Any]]:
    if isinstance(item, Chapter):
        return {"Chapter": item.to_dict()}
    if isinstance(item, PartTitle):
        return {"PartTitle": item.title}
    return "Separator"


@dataclass
class Book:
    """mdBook 전처리기에 전달되는 책 구조"""

    sections: List[BookItem] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=lambda: {"__non_exhaustive": None})

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Book":
        return cls(
            sections=[item_from_dict(item) for item in data.get("sections", [])],
            extra={k: v for k, v in data.items() if k != "sections"},
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {"sections": [item_to_dict(item) for item in self.sections]}
        data.update(self.extra)
        return data

    def iter_chapters(self) -> Iterator[Chapter]:
        """
        책의 모든 챕터를 깊이 우선으로 순회합니다.

        mdBook과 같은 순서로, 하위 챕터(sub_items)를 상위 챕터보다 먼저 방문합니다.

        Returns:
            챕터 이터레이터
        """
        return _iter_chapters(self.sections)


def _iter_chapters(items: List[BookItem]) -> Iterator[Chapter]:
    for item in items:
        if isinstance(item, Chapter):
            yield from _iter_chapters(item.sub_items)
            yield item

"""
마크다운 이벤트 스트림 어댑터
mistune AST 토큰 트리를 시작/끝 이벤트의 평탄한 시퀀스로 펼치고,
이벤트 시퀀스를 다시 토큰 트리로 조립하여 마크다운 텍스트로 직렬화합니다.
"""

import re
import logging
from typing import List, Dict, Any, Optional, Iterable, Iterator, Tuple
from enum import Enum
from dataclasses import dataclass
from urllib.parse import unquote_to_bytes

import mistune
from mistune import BlockState
from mistune.renderers.markdown import MarkdownRenderer

# 로깅 설정
logger = logging.getLogger(__name__)

# 목차 삽입 위치를 나타내는 마커 (원시 HTML 블록 그대로의 내용)
MARKER = "<!-- toc -->\n"

# 일반 텍스트로 다시 쓸 때 백슬래시로 이스케이프해야 하는 문자
_TEXT_SPECIAL_RE = re.compile(r"([\\`*_\[\]<])")

# 퍼센트 인코딩된 비 ASCII 바이트 연속 구간
_ENCODED_NON_ASCII_RE = re.compile(r"(?:%[89A-Fa-f][0-9A-Fa-f])+")

# <...> 형태로 쓸 수 있는 자동 링크 주소 (스킴 필수)
_AUTOLINK_URL_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]{1,31}:[^\s<>]*$")


class EventType(Enum):
    """이벤트 유형 열거형"""

    START = "start"
    END = "end"
    TEXT = "text"
    HTML = "html"
    LEAF = "leaf"


@dataclass
class Event:
    """마크다운 구조 이벤트를 나타내는 데이터 클래스"""

    type: EventType
    token: Dict[str, Any]

    @property
    def kind(self) -> str:
        """원본 토큰 유형 (heading, paragraph, text, ...)"""
        return self.token["type"]

    @property
    def raw(self) -> Optional[str]:
        return self.token.get("raw")

    @property
    def heading_level(self) -> Optional[int]:
        if self.kind != "heading":
            return None
        return self.token.get("attrs", {}).get("level")

    def is_marker(self, marker: str = MARKER) -> bool:
        return self.type is EventType.HTML and self.raw == marker


def create_parser(plugins: Optional[Iterable[str]] = None) -> mistune.Markdown:
    """
    AST 모드의 mistune 파서를 생성합니다.

    Args:
        plugins: 사용할 mistune 플러그인 이름 목록 (예: ["table"])

    Returns:
        토큰 리스트를 반환하는 Markdown 인스턴스
    """
    plugins = list(plugins or [])
    if plugins:
        logger.debug(f"mistune 플러그인 사용: {', '.join(plugins)}")
    return mistune.create_markdown(renderer=None, plugins=plugins or None)


def parse_events(
    content: str, markdown: Optional[mistune.Markdown] = None
) -> Tuple[List[Event], BlockState]:
    """
    마크다운 텍스트를 파싱하여 이벤트 리스트로 만듭니다.

    Args:
        content: 마크다운 텍스트
        markdown: 사용할 파서 (없으면 기본 CommonMark 파서)

    Returns:
        (이벤트 리스트, 파서 상태) 튜플. 파서 상태는 참조 링크 정의를 담고 있어
        직렬화할 때 다시 필요합니다.
    """
    if markdown is None:
        markdown = create_parser()

    tokens, state = markdown.parse(content)
    return list(iter_events(tokens)), state


def iter_events(tokens: Iterable[Dict[str, Any]]) -> Iterator[Event]:
    """토큰 트리를 문서 순서대로 이벤트로 펼칩니다."""
    for token in tokens:
        if "children" in token:
            head = {k: v for k, v in token.items() if k != "children"}
            yield Event(EventType.START, head)
            yield from iter_events(token["children"])
            yield Event(EventType.END, head)
        elif token["type"] == "text":
            yield Event(EventType.TEXT, token)
        elif token["type"] == "block_html":
            yield Event(EventType.HTML, token)
        else:
            yield Event(EventType.LEAF, token)


def build_tokens(events: Iterable[Event]) -> List[Dict[str, Any]]:
    """
    이벤트 시퀀스를 mistune 토큰 트리로 다시 조립합니다.

    Args:
        events: 이벤트 시퀀스

    Returns:
        최상위 토큰 리스트

    Raises:
        ValueError: START/END 이벤트의 짝이 맞지 않는 경우
    """
    root: List[Dict[str, Any]] = []
    children = root
    stack: List[Tuple[Dict[str, Any], List[Dict[str, Any]]]] = []

    for event in events:
        if event.type is EventType.START:
            node = dict(event.token)
            node["children"] = []
            children.append(node)
            stack.append((node, children))
            children = node["children"]
        elif event.type is EventType.END:
            if not stack:
                raise ValueError(f"여는 이벤트 없이 닫는 이벤트가 나왔습니다: {event.kind}")
            node, children = stack.pop()
            if node["type"] != event.kind:
                raise ValueError(
                    f"이벤트 짝이 맞지 않습니다: {node['type']} != {event.kind}"
                )
        else:
            children.append(dict(event.token))

    if stack:
        unclosed = ", ".join(node["type"] for node, _ in stack)
        raise ValueError(f"닫히지 않은 이벤트가 있습니다: {unclosed}")

    return root


def _decode_non_ascii(url: str) -> str:
    """퍼센트 인코딩된 UTF-8 문자를 원래 문자로 되돌립니다 (ASCII 인코딩은 유지)."""

    def decode(match: "re.Match[str]") -> str:
        try:
            text = unquote_to_bytes(match.group(0)).decode("utf-8")
        except UnicodeDecodeError:
            return match.group(0)
        if any(c.isspace() for c in text):
            return match.group(0)
        return text

    return _ENCODED_NON_ASCII_RE.sub(decode, url)


class TocMarkdownRenderer(MarkdownRenderer):
    """
    원본 문서의 구조를 잃지 않도록 mistune 마크다운 렌더러를 보완한 렌더러

    파서가 벗겨 낸 백슬래시 이스케이프를 텍스트에 다시 붙이고, 링크 주소의
    비 ASCII 문자는 퍼센트 인코딩 없이 그대로 씁니다.
    """

    def text(self, token: Dict[str, Any], state: BlockState) -> str:
        text = _TEXT_SPECIAL_RE.sub(r"\\\1", token["raw"])
        # 끝의 "!"와 "&"는 뒤따르는 링크나 텍스트와 합쳐져 이미지, 문자 참조가 될 수 있음
        if text.endswith(("!", "&")):
            text = text[:-1] + "\\" + text[-1]
        return text

    def link(self, token: Dict[str, Any], state: BlockState) -> str:
        attrs = token.get("attrs", {})
        children = token.get("children", [])
        label = token.get("label")
        title = attrs.get("title")
        url = attrs.get("url", "")

        # 자동 링크 (<https://...>, <user@example.com>)
        if not label and not title and len(children) == 1 and children[0]["type"] == "text":
            raw = children[0]["raw"]
            if url in (raw, "mailto:" + raw) and _AUTOLINK_URL_RE.match(url):
                return "<" + raw + ">"

        out = "[" + self.render_children(token, state) + "]"
        if label:
            return out + "[" + label + "]"

        url = _decode_non_ascii(url)
        if "(" in url or ")" in url or not url:
            out += "(<" + url + ">"
        else:
            out += "(" + url
        if title:
            out += ' "' + title.replace("\\", "\\\\").replace('"', '\\"') + '"'
        return out + ")"


def serialize(events: Iterable[Event], state: BlockState) -> str:
    """
    이벤트 시퀀스를 정규화된 마크다운 텍스트로 직렬화합니다.

    Args:
        events: 이벤트 시퀀스
        state: 원본 문서를 파싱할 때의 파서 상태

    Returns:
        마크다운 텍스트
    """
    tokens = build_tokens(events)
    return TocMarkdownRenderer()(tokens, state)

"""
목차 삽입기
문서에서 마커를 찾아 그 뒤의 제목들로 목차를 만들고, 마커 자리에 목차를 끼워 넣은 뒤
다시 마크다운 텍스트로 직렬화합니다.
"""

import logging
from typing import List, Optional, Iterable, Iterator

from .events import Event, EventType, MARKER, create_parser, parse_events, serialize
from .scanner import collect_headings
from .builder import build_toc
from .errors import SerializationError

# 로깅 설정
logger = logging.getLogger(__name__)


def splice_toc(
    events: Iterable[Event], toc_events: List[Event], marker: str = MARKER
) -> Iterator[Event]:
    """
    마커 이벤트를 목차 이벤트 전체로 치환한 새 이벤트 시퀀스를 만듭니다.

    Args:
        events: 원본 문서 이벤트
        toc_events: 목차 텍스트를 파싱한 이벤트
        marker: 목차 마커 문자열

    Returns:
        치환된 이벤트 이터레이터 (마커 외의 이벤트는 순서 그대로)
    """
    for event in events:
        if event.is_marker(marker):
            yield from toc_events
        else:
            yield event


def release_unterminated_marker(
    events: List[Event], content: str, marker: str = MARKER
) -> List[Event]:
    """
    문서 끝의 줄바꿈 없는 마커를 일반 HTML 블록으로 되돌립니다.

    파서는 줄바꿈으로 끝나지 않는 문서에 줄바꿈을 붙여 파싱하므로, 파일 끝의
    ``<!-- toc -->``도 마커와 같은 원시 텍스트를 갖게 됩니다. 마커는 줄바꿈까지
    포함해야 하므로 이 경우에는 마커로 보지 않습니다.

    Args:
        events: 원본 문서 이벤트
        content: 원본 마크다운 텍스트
        marker: 목차 마커 문자열

    Returns:
        이벤트 리스트 (필요하면 마지막 마커 이벤트만 바뀐 사본)
    """
    if not marker.endswith("\n") or content.endswith(("\n", "\r")):
        return events

    for index in range(len(events) - 1, -1, -1):
        event = events[index]
        if event.type is EventType.END:
            continue
        if not event.is_marker(marker):
            return events
        logger.debug("문서 끝의 줄바꿈 없는 마커는 목차로 바꾸지 않습니다.")
        token = dict(event.token, raw=event.raw[:-1])
        return events[:index] + [Event(event.type, token)] + events[index + 1 :]

    return events


class TocInjector:
    """챕터 마크다운에 목차를 삽입하는 클래스"""

    def __init__(self, plugins: Optional[Iterable[str]] = None, marker: str = MARKER):
        """
        목차 삽입기를 초기화합니다.

        Args:
            plugins: mistune 파서 플러그인 이름 목록
            marker: 목차 마커 문자열
        """
        self.marker = marker
        self.markdown = create_parser(plugins)

    def add_toc(self, content: str) -> str:
        """
        마커 자리에 목차를 삽입한 마크다운을 반환합니다.

        마커가 없으면 원본을 정규화된 형태로 다시 직렬화한 결과를 반환합니다.

        Args:
            content: 원본 마크다운 텍스트

        Returns:
            목차가 삽입된 마크다운 텍스트

        Raises:
            SerializationError: 직렬화에 실패한 경우
        """
        events, state = parse_events(content, self.markdown)
        events = release_unterminated_marker(events, content, self.marker)

        headings = collect_headings(events, self.marker)
        toc_text = build_toc(headings)
        toc_events, _ = parse_events(toc_text, self.markdown) if toc_text else ([], None)
        logger.debug(f"{len(headings)}개의 목차 항목을 생성했습니다.")

        try:
            return serialize(splice_toc(events, toc_events, self.marker), state)
        except Exception as e:
            raise SerializationError(f"Markdown serialization failed: {e}") from e


def add_toc(content: str) -> str:
    """기본 설정의 TocInjector로 목차를 삽입합니다."""
    return TocInjector().add_toc(content)

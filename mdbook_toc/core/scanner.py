"""
목차 마커 탐지 및 제목 수집
이벤트 스트림을 한 번 순회하면서 마커 이후의 1~2단계 제목을 모읍니다.
"""

import logging
from typing import List, Optional, Iterable, Tuple
from enum import Enum
from dataclasses import dataclass

from ..models.heading import HeadingEntry
from .events import Event, EventType, MARKER

# 로깅 설정
logger = logging.getLogger(__name__)

# 이 단계 미만의 제목만 목차에 들어갑니다
MAX_LEVEL = 3


class ScanPhase(Enum):
    """스캐너 단계 열거형"""

    BEFORE_MARKER = "before_marker"
    AFTER_MARKER = "after_marker"
    IN_HEADING = "in_heading"


@dataclass(frozen=True)
class ScanState:
    """스캐너 상태 (단계와 현재 제목 수준)"""

    phase: ScanPhase = ScanPhase.BEFORE_MARKER
    level: Optional[int] = None


AFTER_MARKER = ScanState(ScanPhase.AFTER_MARKER)


def advance(
    state: ScanState, event: Event, marker: str = MARKER
) -> Tuple[ScanState, Optional[HeadingEntry]]:
    """
    이벤트 하나를 받아 다음 상태와 (있다면) 수집된 제목을 반환합니다.

    Args:
        state: 현재 상태
        event: 처리할 이벤트
        marker: 목차 마커 문자열

    Returns:
        (다음 상태, 제목 항목 또는 None) 튜플
    """
    if event.is_marker(marker):
        return AFTER_MARKER, None

    if state.phase is ScanPhase.BEFORE_MARKER:
        return state, None

    if event.kind == "heading":
        if event.type is EventType.END:
            return AFTER_MARKER, None
        level = event.heading_level
        if event.type is EventType.START and level is not None and level < MAX_LEVEL:
            return ScanState(ScanPhase.IN_HEADING, level), None
        return state, None

    # 제목의 첫 번째 텍스트 조각만 레이블로 사용합니다
    if state.phase is ScanPhase.IN_HEADING and event.type is EventType.TEXT:
        return AFTER_MARKER, HeadingEntry(level=state.level, label=event.raw)

    return state, None


def collect_headings(events: Iterable[Event], marker: str = MARKER) -> List[HeadingEntry]:
    """
    마커 이후에 나오는 1~2단계 제목들을 문서 순서대로 수집합니다.

    Args:
        events: 문서 이벤트 시퀀스
        marker: 목차 마커 문자열

    Returns:
        제목 항목 리스트 (마커가 없으면 빈 리스트)
    """
    state = ScanState()
    entries = []

    for event in events:
        state, entry = advance(state, event, marker)
        if entry is not None:
            logger.debug(f"목차 항목 추가: {entry.label} (레벨 {entry.level})")
            entries.append(entry)

    if state.phase is ScanPhase.BEFORE_MARKER:
        logger.debug("목차 마커가 없습니다.")

    return entries

"""
제목 목록으로부터 목차 마크다운 텍스트를 생성합니다.
"""

from typing import Callable, List

from ..models.heading import HeadingEntry
from .slug import normalize_id


def build_toc(
    entries: List[HeadingEntry], normalize: Callable[[str], str] = normalize_id
) -> str:
    """
    제목 항목들을 중첩 목록 형태의 마크다운으로 렌더링합니다.

    Args:
        entries: 문서 순서대로 정렬된 제목 항목들
        normalize: 제목을 앵커 ID로 바꾸는 함수

    Returns:
        목차 마크다운 (항목이 없으면 빈 문자열)
    """
    lines = []
    for entry in entries:
        indent = " " * (2 * (entry.level - 1))
        lines.append(f"{indent}* [{entry.label}](#{normalize(entry.label)})\n")
    return "".join(lines)

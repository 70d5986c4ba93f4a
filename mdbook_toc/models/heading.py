"""Heading entry related data models."""

from dataclasses import dataclass


@dataclass
class HeadingEntry:
    """목차에 들어갈 제목 항목을 나타내는 데이터 클래스"""

    level: int
    label: str

"""
환경 설정 및 구성 관리
"""

import os
from typing import List

from dotenv import load_dotenv

# 환경 변수 로드
load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# mistune이 제공하는 파서 플러그인 이름
KNOWN_PLUGINS = (
    "strikethrough",
    "mark",
    "insert",
    "superscript",
    "subscript",
    "footnotes",
    "table",
    "url",
    "abbr",
    "def_list",
    "math",
    "ruby",
    "task_lists",
    "spoiler",
)


def _split_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Config:
    """애플리케이션 설정 클래스"""

    # 로깅 설정
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # 파서 설정
    PLUGINS = _split_list(os.getenv("MDBOOK_TOC_PLUGINS", ""))

    # 진행률 표시 설정
    SHOW_PROGRESS = os.getenv("MDBOOK_TOC_PROGRESS", "true").lower() in ("1", "true", "yes")

    @property
    def log_level(self):
        """로그 레벨"""
        return self.LOG_LEVEL.upper()

    @property
    def plugins(self):
        """mistune 파서 플러그인 목록"""
        return list(self.PLUGINS)

    @property
    def show_progress(self):
        """진행률 표시 여부"""
        return self.SHOW_PROGRESS

    @classmethod
    def validate(cls):
        """설정 유효성 검사"""
        errors = []

        if cls.LOG_LEVEL.upper() not in LOG_LEVELS:
            errors.append(
                f"LOG_LEVEL은 {', '.join(LOG_LEVELS)} 중 하나여야 합니다: {cls.LOG_LEVEL}"
            )

        for plugin in cls.PLUGINS:
            if plugin not in KNOWN_PLUGINS:
                errors.append(f"알 수 없는 mistune 플러그인입니다: {plugin}")

        return errors

    @classmethod
    def print_config(cls):
        """현재 설정을 출력합니다."""
        print("현재 설정:")
        print(f"  로그 레벨: {cls.LOG_LEVEL}")
        print(f"  파서 플러그인: {', '.join(cls.PLUGINS) or '없음'}")
        print(f"  진행률 표시: {'예' if cls.SHOW_PROGRESS else '아니오'}")


def validate_config(config: Config) -> None:
    """
    설정 유효성 검사 함수

    Args:
        config: Config 인스턴스

    Raises:
        ValueError: 설정이 유효하지 않은 경우
    """
    errors = config.validate()
    if errors:
        error_message = "설정 오류가 발견되었습니다:\n" + "\n".join(
            f"  - {error}" for error in errors
        )
        raise ValueError(error_message)

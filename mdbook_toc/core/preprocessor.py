"""
mdBook 전처리기
책의 모든 챕터에 목차 삽입기를 적용하고, mdBook의 JSON 입출력 규약을 처리합니다.
"""

import json
import logging
from typing import Dict, Any, Optional, Iterable, TextIO

from tqdm import tqdm

from ..models.book import Book
from .injector import TocInjector
from .errors import TocError

# 로깅 설정
logger = logging.getLogger(__name__)


class TocPreprocessor:
    """챕터마다 목차를 삽입하는 mdBook 전처리기"""

    NAME = "toc"

    def __init__(self, plugins: Optional[Iterable[str]] = None, show_progress: bool = False):
        """
        전처리기를 초기화합니다.

        Args:
            plugins: mistune 파서 플러그인 이름 목록
            show_progress: 챕터 처리 진행률 표시 여부
        """
        self.injector = TocInjector(plugins=plugins)
        self.show_progress = show_progress

    @property
    def name(self) -> str:
        """mdBook 전처리기 등록 이름"""
        return self.NAME

    def supports_renderer(self, renderer: str) -> bool:
        return renderer != "not-supported"

    def run(self, context: Dict[str, Any], book: Book) -> Book:
        """
        책의 모든 챕터 콘텐츠에 목차를 삽입합니다.

        첫 번째 오류가 발생하면 남은 챕터는 처리하지 않고 오류를 그대로 전달합니다.

        Args:
            context: mdBook 전처리기 컨텍스트 (사용하지 않음)
            book: 처리할 책

        Returns:
            챕터 콘텐츠가 갱신된 책

        Raises:
            TocError: 챕터 처리에 실패한 경우
        """
        chapters = list(book.iter_chapters())
        logger.info(f"{len(chapters)}개 챕터에 목차를 삽입하는 중...")

        for chapter in tqdm(chapters, desc="목차 삽입", disable=not self.show_progress):
            logger.debug(f"챕터 처리 중: {chapter.name}")
            try:
                chapter.content = self.injector.add_toc(chapter.content)
            except TocError as e:
                logger.error(f"챕터 '{chapter.name}' 처리 중 오류 발생: {e}")
                raise

        logger.info("목차 삽입이 완료되었습니다.")
        return book

    def handle_preprocessing(self, stdin: TextIO, stdout: TextIO) -> None:
        """
        mdBook이 전달한 ``[context, book]`` JSON을 읽어 처리한 뒤 책 JSON을 출력합니다.

        Args:
            stdin: 입력 스트림
            stdout: 출력 스트림

        Raises:
            ValueError: 입력 JSON 형식이 올바르지 않은 경우
        """
        try:
            data = json.load(stdin)
        except (TypeError, ValueError) as e:
            raise ValueError(f"전처리기 입력을 해석할 수 없습니다: {e}") from e

        if not isinstance(data, list) or len(data) != 2:
            raise ValueError("전처리기 입력은 [context, book] 형태의 JSON 배열이어야 합니다")
        context, book_data = data
        if not isinstance(context, dict) or not isinstance(book_data, dict):
            raise ValueError("전처리기 입력의 context와 book은 JSON 객체여야 합니다")

        renderer = context.get("renderer")
        if renderer:
            logger.debug(f"렌더러: {renderer}")

        book = self.run(context, Book.from_dict(book_data))
        json.dump(book.to_dict(), stdout, ensure_ascii=False)

"""
목차 전처리기 예외 정의
"""


class TocError(Exception):
    """mdbook_toc 패키지의 기본 예외"""


class SerializationError(TocError):
    """이벤트 스트림을 마크다운 텍스트로 되돌리지 못한 경우"""

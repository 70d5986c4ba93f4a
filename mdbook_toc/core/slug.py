"""
제목 텍스트를 앵커 ID로 변환하는 모듈
mdBook이 HTML 렌더링 시 제목에 부여하는 ID 규칙과 동일하게 동작해야 합니다.
"""


def normalize_id(content: str) -> str:
    """
    제목 텍스트를 URL 조각(fragment) 식별자로 정규화합니다.

    영숫자, ``_``, ``-``는 유지하고(ASCII 대문자는 소문자로), 공백은 ``-``로
    바꾸며 나머지 문자는 제거합니다. 중복 제거는 하지 않습니다.

    Args:
        content: 제목 텍스트

    Returns:
        앵커 ID (예: "Header 1.1" -> "header-11")
    """
    chars = []
    for ch in content:
        if ch.isalnum() or ch in "_-":
            chars.append(ch.lower() if ch.isascii() else ch)
        elif ch.isspace():
            chars.append("-")
    return "".join(chars)

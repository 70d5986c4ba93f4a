#!/usr/bin/env python3
"""
mdbook-toc 패키지 기본 사용 예제

이 예제는 mdbook-toc를 Python 라이브러리로 사용하는 방법을 보여줍니다.
"""

# mdbook_toc 패키지 import
from mdbook_toc import (
    TocInjector,
    TocPreprocessor,
    Book,
    Chapter,
    Config,
    validate_config,
    collect_headings,
    build_toc,
)
from mdbook_toc.core.events import parse_events

CHAPTER = """# Chapter

<!-- toc -->

# Header 1

## Header 1.1

# Header 2

## Header 2.1

## Header 2.2

### Header 2.2.1
"""


def main():
    """기본 사용 예제"""
    print("📚 mdbook-toc 패키지 기본 사용 예제")
    print("=" * 50)

    # 1. 설정 로드
    try:
        config = Config()
        validate_config(config)
        print("✅ 설정 로드 완료")
    except Exception as e:
        print(f"❌ 설정 오류: {e}")
        return

    # 2. 제목 수집과 목차 생성 단계를 따로 실행
    events, _ = parse_events(CHAPTER)
    headings = collect_headings(events)
    print(f"\n🔎 수집된 제목 {len(headings)}개:")
    for heading in headings:
        print(f"   - 레벨 {heading.level}: {heading.label}")

    print("\n📝 생성된 목차:")
    print(build_toc(headings))

    # 3. 한 챕터에 목차 삽입
    injector = TocInjector(plugins=config.plugins)
    print("📄 목차가 삽입된 챕터:")
    print("-" * 50)
    print(injector.add_toc(CHAPTER))
    print("-" * 50)

    # 4. 책 전체 처리
    book = Book(
        sections=[
            Chapter(name="Intro", content=CHAPTER, number=[1]),
            Chapter(name="No marker", content="# Plain\n\nNothing to do.\n", number=[2]),
        ]
    )
    preprocessor = TocPreprocessor(plugins=config.plugins)
    book = preprocessor.run({}, book)
    for chapter in book.iter_chapters():
        status = "목차 있음" if "* [" in chapter.content else "목차 없음"
        print(f"📖 {chapter.name}: {status}")

    print("\n✨ 예제 완료!")


if __name__ == "__main__":
    main()

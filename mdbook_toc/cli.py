#!/usr/bin/env python3
"""
mdbook-toc 명령행 실행 스크립트
"""

import sys
import argparse
import logging
from pathlib import Path

from tqdm import tqdm

from .core.config import Config, validate_config
from .core.injector import TocInjector
from .core.preprocessor import TocPreprocessor
from .core.errors import TocError

logger = logging.getLogger(__name__)


def setup_logging(config: Config) -> None:
    # stdout은 mdBook에 책 JSON을 돌려주는 용도이므로 로그는 stderr로 보냅니다
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def preprocess_command(args, config: Config):
    """mdBook 전처리 명령 (stdin -> stdout)"""
    preprocessor = TocPreprocessor(
        plugins=config.plugins, show_progress=config.show_progress
    )
    try:
        preprocessor.handle_preprocessing(sys.stdin, sys.stdout)
    except (TocError, ValueError) as e:
        logger.error(f"전처리 중 오류 발생: {e}")
        return 1
    return 0


def supports_command(args, config: Config):
    """렌더러 지원 여부 확인 명령"""
    preprocessor = TocPreprocessor(plugins=config.plugins)
    return 0 if preprocessor.supports_renderer(args.renderer) else 1


def inject_command(args, config: Config):
    """마크다운 파일 목차 삽입 명령"""
    files = [Path(f) for f in args.files]
    missing = [f for f in files if not f.exists()]
    if missing:
        for f in missing:
            print(f"❌ 파일을 찾을 수 없습니다: {f}", file=sys.stderr)
        return 1

    if len(files) > 1 and not (args.in_place or args.output_dir):
        print("❌ 여러 파일을 처리하려면 --in-place 또는 --output-dir이 필요합니다.", file=sys.stderr)
        return 1

    injector = TocInjector(plugins=config.plugins)
    output_dir = Path(args.output_dir) if args.output_dir else None
    if output_dir:
        output_dir.mkdir(parents=True, exist_ok=True)

    for path in tqdm(files, desc="목차 삽입", disable=not config.show_progress or len(files) < 2):
        try:
            result = injector.add_toc(path.read_text(encoding="utf-8"))
        except TocError as e:
            logger.error(f"{path} 처리 중 오류 발생: {e}")
            return 1

        if args.in_place:
            path.write_text(result, encoding="utf-8")
        elif output_dir:
            (output_dir / path.name).write_text(result, encoding="utf-8")
        else:
            sys.stdout.write(result)

    if args.in_place or output_dir:
        print(f"✅ {len(files)}개 파일에 목차를 삽입했습니다.", file=sys.stderr)
    return 0


def config_command(args, config: Config):
    """설정 출력 명령"""
    config.print_config()
    return 0


def create_parser():
    """명령행 인수 파서 생성"""
    parser = argparse.ArgumentParser(
        prog="mdbook-toc",
        description="마크다운 챕터에 목차를 삽입하는 mdBook 전처리기",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
예제:
  # mdBook 전처리기로 실행 (book.toml)
  [preprocessor.toc]
  command = "mdbook-toc"

  # 렌더러 지원 여부 확인
  mdbook-toc supports html

  # 마크다운 파일에 직접 목차 삽입
  mdbook-toc inject chapter.md --in-place
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="사용 가능한 명령어")

    # supports 명령
    supports_parser = subparsers.add_parser("supports", help="렌더러 지원 여부 확인")
    supports_parser.add_argument("renderer", help="렌더러 이름 (예: html)")

    # inject 명령
    inject_parser = subparsers.add_parser("inject", help="마크다운 파일에 목차 삽입")
    inject_parser.add_argument("files", nargs="+", help="처리할 마크다운 파일 경로")
    inject_group = inject_parser.add_mutually_exclusive_group()
    inject_group.add_argument(
        "--in-place", action="store_true", help="원본 파일을 덮어쓰기"
    )
    inject_group.add_argument("--output-dir", type=str, help="결과 파일을 저장할 디렉토리")

    # config 명령
    subparsers.add_parser("config", help="현재 설정 출력")

    return parser


def main(argv=None):
    """메인 함수"""
    parser = create_parser()
    args = parser.parse_args(argv)

    config = Config()
    try:
        validate_config(config)
    except ValueError as e:
        print(f"⚠️ {e}", file=sys.stderr)
        return 1

    setup_logging(config)

    # 명령 실행
    if not args.command:
        return preprocess_command(args, config)
    elif args.command == "supports":
        return supports_command(args, config)
    elif args.command == "inject":
        return inject_command(args, config)
    elif args.command == "config":
        return config_command(args, config)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())

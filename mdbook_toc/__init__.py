"""
mdbook-toc - 챕터 목차 자동 생성 전처리기

마크다운 챕터의 ``<!-- toc -->`` 마커 자리에 그 뒤에 나오는 제목들로 만든
중첩 링크 목록을 삽입하는 mdBook 전처리기 패키지입니다.
"""

__version__ = "0.1.0"
__author__ = "mdbook-toc Team"
__email__ = "mdbook-toc@example.com"

# Core classes and functions
from .core.injector import TocInjector, add_toc
from .core.preprocessor import TocPreprocessor
from .core.builder import build_toc
from .core.scanner import collect_headings
from .core.slug import normalize_id
from .core.events import MARKER
from .core.errors import TocError, SerializationError
from .core.config import Config, validate_config

# Data models
from .models.heading import HeadingEntry
from .models.book import Book, Chapter, PartTitle, Separator

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__email__",
    # Core classes
    "TocInjector",
    "TocPreprocessor",
    "Config",
    # Functions
    "add_toc",
    "build_toc",
    "collect_headings",
    "normalize_id",
    "validate_config",
    "MARKER",
    # Errors
    "TocError",
    "SerializationError",
    # Data models
    "HeadingEntry",
    "Book",
    "Chapter",
    "PartTitle",
    "Separator",
]

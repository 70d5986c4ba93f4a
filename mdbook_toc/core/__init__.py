"""Core functionality for mdbook_toc package."""

from .events import (
    MARKER,
    Event,
    EventType,
    TocMarkdownRenderer,
    create_parser,
    parse_events,
    serialize,
)
from .scanner import ScanPhase, ScanState, advance, collect_headings
from .builder import build_toc
from .injector import TocInjector, add_toc, release_unterminated_marker, splice_toc
from .preprocessor import TocPreprocessor
from .slug import normalize_id
from .errors import TocError, SerializationError
from .config import Config, validate_config

__all__ = [
    "MARKER",
    "Event",
    "EventType",
    "create_parser",
    "parse_events",
    "serialize",
    "TocMarkdownRenderer",
    "ScanPhase",
    "ScanState",
    "advance",
    "collect_headings",
    "build_toc",
    "TocInjector",
    "add_toc",
    "splice_toc",
    "release_unterminated_marker",
    "TocPreprocessor",
    "normalize_id",
    "TocError",
    "SerializationError",
    "Config",
    "validate_config",
]

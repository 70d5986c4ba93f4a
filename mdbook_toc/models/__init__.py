"""Data models for mdbook_toc package."""

from .heading import HeadingEntry
from .book import Book, BookItem, Chapter, PartTitle, Separator

__all__ = ["HeadingEntry", "Book", "BookItem", "Chapter", "PartTitle", "Separator"]

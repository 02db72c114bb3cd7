#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Book tree model and wire format for the mdbook preprocessor protocol."""

from mdbook_frontmatter.book.nodes import Book, BookItem, Chapter, PartTitle, PreprocessorContext, Separator
from mdbook_frontmatter.book.serialization import book_to_dict, book_to_json, dict_to_book, parse_input

__all__ = [
    "Book",
    "BookItem",
    "Chapter",
    "PartTitle",
    "PreprocessorContext",
    "Separator",
    "book_to_dict",
    "book_to_json",
    "dict_to_book",
    "parse_input",
]

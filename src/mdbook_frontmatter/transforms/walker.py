#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdbook_frontmatter/transforms/walker.py
"""Traversal of the book tree.

Chapters are visited pre-order, depth-first: a chapter before its
sub-items, sub-items in summary order. Separators and part titles carry no
frontmatter and are skipped.
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator

from mdbook_frontmatter.book.nodes import Book, BookItem, Chapter, PartTitle, Separator

ChapterVisitor = Callable[[Chapter], None]


def _walk_items(items: Iterable[BookItem], visit: ChapterVisitor) -> None:
    for item in items:
        if isinstance(item, Chapter):
            visit(item)
            _walk_items(item.sub_items, visit)
        elif isinstance(item, (Separator, PartTitle)):
            continue
        else:
            raise TypeError(f"Unknown book item type: {type(item).__name__}")


def walk(book: Book, visit: ChapterVisitor) -> Book:
    """Apply ``visit`` to every chapter of ``book``, in place.

    Parameters
    ----------
    book : Book
        Book to walk
    visit : callable
        Called once per chapter; may mutate the chapter's frontmatter

    Returns
    -------
    Book
        The same book object, for chaining

    Raises
    ------
    Exception
        Whatever ``visit`` raises. The walk stops at the first failure, so
        the book may be partially modified and must not be serialized.

    """
    _walk_items(book.sections, visit)
    return book


def iter_chapters(items: Iterable[BookItem]) -> Iterator[Chapter]:
    """Yield every chapter in ``items`` in the order :func:`walk` visits them."""
    for item in items:
        if isinstance(item, Chapter):
            yield item
            yield from iter_chapters(item.sub_items)


__all__ = ["ChapterVisitor", "iter_chapters", "walk"]

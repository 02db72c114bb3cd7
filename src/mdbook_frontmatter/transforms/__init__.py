#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdbook_frontmatter/transforms/__init__.py
"""Frontmatter transforms and the chapter walker that applies them.

Examples
--------
Transform every chapter of a book:

    >>> from mdbook_frontmatter.transforms import FrontmatterTransform, walk
    >>> walk(book, FrontmatterTransform())

Transform a single mapping:

    >>> from mdbook_frontmatter.transforms import transform_frontmatter
    >>> transform_frontmatter({"date": "2024-08-02"})
    {'date': '08-02-2024'}

"""

from mdbook_frontmatter.transforms.frontmatter import (
    DEFAULT_FIELD_OVERRIDES,
    FieldOverride,
    FrontmatterTransform,
    date_overrides,
    reformat_date,
    transform_frontmatter,
)
from mdbook_frontmatter.transforms.walker import ChapterVisitor, iter_chapters, walk

__all__ = [
    "ChapterVisitor",
    "DEFAULT_FIELD_OVERRIDES",
    "FieldOverride",
    "FrontmatterTransform",
    "date_overrides",
    "iter_chapters",
    "reformat_date",
    "transform_frontmatter",
    "walk",
]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdbook_frontmatter/book/nodes.py
"""Node classes for the book tree mdbook hands to preprocessors.

This module mirrors the data mdbook serializes on a preprocessor's stdin:
a :class:`PreprocessorContext` describing the build and a :class:`Book`
holding an ordered list of items.

Item Variants
-------------
The set of book items is closed. Every item is exactly one of:

    - Chapter: a unit of content carrying frontmatter and nested sub-items
    - Separator: a structural divider with no payload
    - PartTitle: a structural heading that groups the chapters after it

Only chapters carry frontmatter, so only chapters are ever transformed.
Code that dispatches on items should handle all three explicitly rather than
relying on attribute checks.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Union


@dataclass(frozen=True)
class PreprocessorContext:
    """Description of the build that invoked the preprocessor.

    Parameters
    ----------
    root : str
        Root directory of the book on disk
    config : dict
        Parsed book.toml. Opaque to the preprocessor apart from its own
        ``[preprocessor.frontmatter]`` table
    renderer : str
        Name of the renderer the book is being built for (e.g. ``"html"``)
    mdbook_version : str
        Version of mdbook that sent the payload
    extra : dict, default = empty dict
        Any further keys mdbook sent, kept for round-tripping

    """

    root: str
    config: dict[str, Any]
    renderer: str
    mdbook_version: str
    extra: dict[str, Any] = field(default_factory=dict)

    def preprocessor_config(self, section: str) -> dict[str, Any]:
        """Return the ``[preprocessor.<section>]`` table, or an empty dict.

        Parameters
        ----------
        section : str
            Preprocessor table name in book.toml

        Returns
        -------
        dict
            The table contents; empty when the table is absent

        """
        preprocessors = self.config.get("preprocessor")
        if not isinstance(preprocessors, dict):
            return {}
        table = preprocessors.get(section)
        return table if isinstance(table, dict) else {}


@dataclass
class Chapter:
    """A chapter of the book.

    Parameters
    ----------
    name : str
        Chapter title as shown in the summary
    content : str, default = ""
        Markdown body of the chapter
    number : list of int or None, default = None
        Section number path (``[1, 2]`` for "1.2."); None for prefix,
        suffix and draft chapters
    sub_items : list of BookItem, default = empty list
        Nested items, in summary order
    path : str or None, default = None
        Location of the chapter relative to the book's source directory;
        None for draft chapters
    source_path : str or None, default = None
        Location of the chapter's source file, if it has one
    parent_names : list of str, default = empty list
        Names of the enclosing chapters, outermost first
    frontmatter : dict of str to str, default = empty dict
        Key/value metadata parsed from the chapter's header

    """

    name: str
    content: str = ""
    number: Optional[list[int]] = None
    sub_items: list[BookItem] = field(default_factory=list)
    path: Optional[str] = None
    source_path: Optional[str] = None
    parent_names: list[str] = field(default_factory=list)
    frontmatter: dict[str, str] = field(default_factory=dict)


@dataclass
class Separator:
    """A structural divider between chapters."""


@dataclass
class PartTitle:
    """A part heading that groups the chapters following it.

    Parameters
    ----------
    title : str
        Text of the part heading

    """

    title: str


BookItem = Union[Chapter, Separator, PartTitle]


@dataclass
class Book:
    """The book tree passed through the preprocessor.

    Parameters
    ----------
    sections : list of BookItem, default = empty list
        Top-level items, in summary order
    extra : dict, default = empty dict
        Top-level keys other than ``sections`` (mdbook sends
        ``__non_exhaustive``); echoed back unchanged

    """

    sections: list[BookItem] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)


__all__ = [
    "Book",
    "BookItem",
    "Chapter",
    "PartTitle",
    "PreprocessorContext",
    "Separator",
]

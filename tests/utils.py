"""Test utilities for the mdbook-frontmatter test suite.

This module builds preprocessor payloads in the JSON shape mdbook sends, so
tests can describe books compactly.
"""

import json
from typing import Any, Optional

DEFAULT_CONFIG = {
    "book": {
        "authors": ["AUTHOR"],
        "language": "en",
        "multilingual": False,
        "src": "src",
        "title": "TITLE",
    },
    "preprocessor": {"nop": {}},
}


def make_context(
    mdbook_version: str = "0.4.40",
    renderer: str = "html",
    config: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    """Build a preprocessor context dictionary."""
    return {
        "root": "/path/to/book",
        "config": DEFAULT_CONFIG if config is None else config,
        "renderer": renderer,
        "mdbook_version": mdbook_version,
    }


def make_chapter(
    name: str,
    frontmatter: Optional[dict[str, str]] = None,
    sub_items: Optional[list[Any]] = None,
    number: Optional[list[int]] = None,
    parent_names: Optional[list[str]] = None,
) -> dict[str, Any]:
    """Build a tagged Chapter item dictionary."""
    filename = name.lower().replace(" ", "_") + ".md"
    return {
        "Chapter": {
            "name": name,
            "content": f"# {name}\n",
            "number": number,
            "sub_items": sub_items or [],
            "path": filename,
            "source_path": filename,
            "parent_names": parent_names or [],
            "frontmatter": frontmatter or {},
        }
    }


def make_book(*sections: Any) -> dict[str, Any]:
    """Build a book dictionary from tagged items."""
    return {"sections": list(sections), "__non_exhaustive": None}


def make_payload(book: dict[str, Any], context: Optional[dict[str, Any]] = None) -> str:
    """Serialize a ``[context, book]`` payload to JSON, keeping non-ASCII text unescaped as mdbook does."""
    return json.dumps([context or make_context(), book], ensure_ascii=False)


FRONTMATTER_PAYLOAD = r"""[
    {
        "root": "/path/to/book",
        "config": {
            "book": {
                "authors": ["AUTHOR"],
                "language": "en",
                "multilingual": false,
                "src": "src",
                "title": "TITLE"
            },
            "preprocessor": {
                "nop": {}
            }
        },
        "renderer": "html",
        "mdbook_version": "0.4.21"
    },
    {
        "sections": [
            {
                "Chapter": {
                    "name": "Chapter 1",
                    "content": "# Chapter 1\n",
                    "number": [1],
                    "sub_items": [],
                    "path": "chapter_1.md",
                    "source_path": "chapter_1.md",
                    "parent_names": [],
                    "frontmatter": {
                        "author": "grant (@grantkee)",
                        "date": "2024-08-02"
                    }
                }
            }
        ],
        "__non_exhaustive": null
    }
]"""

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdbook_frontmatter/book/serialization.py
"""JSON serialization and deserialization for the mdbook preprocessor protocol.

mdbook writes a two-element JSON array to the preprocessor's stdin:

    [context, book]

and expects the (possibly modified) book object alone on stdout. Book items
use externally tagged variants:

    {"Chapter": {"name": ..., "sub_items": [...], "frontmatter": {...}, ...}}
    "Separator"
    {"PartTitle": "Part One"}

Examples
--------
Read the payload mdbook sent:

    >>> import sys
    >>> from mdbook_frontmatter.book.serialization import parse_input
    >>> ctx, book = parse_input(sys.stdin.buffer)

Write the book back:

    >>> from mdbook_frontmatter.book.serialization import book_to_json
    >>> sys.stdout.buffer.write(book_to_json(book).encode("utf-8"))

"""

from __future__ import annotations

import json
import logging
from typing import IO, Any, Callable

from mdbook_frontmatter.book.nodes import Book, BookItem, Chapter, PartTitle, PreprocessorContext, Separator
from mdbook_frontmatter.exceptions import InputError, OutputError

logger = logging.getLogger(__name__)

_CONTEXT_FIELDS = ("root", "config", "renderer", "mdbook_version")


# Helper functions for serialization
def _serialize_chapter(item: Chapter) -> dict[str, Any]:
    """Serialize a Chapter item."""
    return {
        "Chapter": {
            "name": item.name,
            "content": item.content,
            "number": list(item.number) if item.number is not None else None,
            "sub_items": [item_to_dict(child) for child in item.sub_items],
            "path": item.path,
            "source_path": item.source_path,
            "parent_names": list(item.parent_names),
            "frontmatter": dict(item.frontmatter),
        }
    }


def _serialize_part_title(item: PartTitle) -> dict[str, Any]:
    """Serialize a PartTitle item."""
    return {"PartTitle": item.title}


_SERIALIZATION_DISPATCH: dict[type, Callable[[Any], Any]] = {
    Chapter: _serialize_chapter,
    Separator: lambda _item: "Separator",
    PartTitle: _serialize_part_title,
}


def item_to_dict(item: BookItem) -> Any:
    """Convert a book item to its wire representation.

    Parameters
    ----------
    item : BookItem
        Chapter, Separator or PartTitle

    Returns
    -------
    dict or str
        Tagged dictionary, or the bare string ``"Separator"``

    Raises
    ------
    OutputError
        If the item is not one of the known variants

    """
    serializer = _SERIALIZATION_DISPATCH.get(type(item))
    if serializer is None:
        raise OutputError(f"Unknown book item type for serialization: {type(item).__name__}")
    return serializer(item)


def book_to_dict(book: Book) -> dict[str, Any]:
    """Convert a book to a JSON-compatible dictionary.

    ``sections`` comes first, followed by any unknown top-level keys captured
    during deserialization.
    """
    result: dict[str, Any] = {"sections": [item_to_dict(item) for item in book.sections]}
    for key, value in book.extra.items():
        result.setdefault(key, value)
    return result


def book_to_json(book: Book) -> str:
    """Serialize a book to the JSON string mdbook reads back from stdout.

    Parameters
    ----------
    book : Book
        Processed book

    Returns
    -------
    str
        Compact JSON; non-ASCII characters are kept unescaped

    Raises
    ------
    OutputError
        If the book contains values that cannot be encoded

    """
    try:
        return json.dumps(book_to_dict(book), ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise OutputError(f"Failed to serialize book: {e}", original_error=e) from e


# Helper functions for deserialization
def _require_type(value: Any, expected: type | tuple[type, ...], field_name: str) -> Any:
    if not isinstance(value, expected) or isinstance(value, bool) and expected is not bool:
        names = expected.__name__ if isinstance(expected, type) else " or ".join(t.__name__ for t in expected)
        raise InputError(
            f"Field '{field_name}' must be {names}, got {type(value).__name__}",
            field_name=field_name,
        )
    return value


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    return _require_type(value, str, key)


def _deserialize_number(value: Any) -> list[int] | None:
    if value is None:
        return None
    _require_type(value, list, "number")
    return [_require_type(part, int, "number") for part in value]


def _deserialize_frontmatter(value: Any) -> dict[str, str]:
    if value is None:
        return {}
    _require_type(value, dict, "frontmatter")
    frontmatter: dict[str, str] = {}
    for key, item in value.items():
        frontmatter[key] = _require_type(item, str, f"frontmatter.{key}")
    return frontmatter


def _deserialize_chapter(data: Any) -> Chapter:
    """Deserialize a Chapter item."""
    _require_type(data, dict, "Chapter")
    if "name" not in data:
        raise InputError("Chapter is missing required field 'name'", field_name="name")

    return Chapter(
        name=_require_type(data["name"], str, "name"),
        content=_require_type(data.get("content", ""), str, "content"),
        number=_deserialize_number(data.get("number")),
        sub_items=_deserialize_items(_require_type(data.get("sub_items") or [], list, "sub_items")),
        path=_optional_str(data, "path"),
        source_path=_optional_str(data, "source_path"),
        parent_names=[
            _require_type(name, str, "parent_names")
            for name in _require_type(data.get("parent_names") or [], list, "parent_names")
        ],
        frontmatter=_deserialize_frontmatter(data.get("frontmatter")),
    )


def _deserialize_part_title(data: Any) -> PartTitle:
    """Deserialize a PartTitle item."""
    return PartTitle(title=_require_type(data, str, "PartTitle"))


_DESERIALIZATION_DISPATCH: dict[str, Callable[[Any], BookItem]] = {
    "Chapter": _deserialize_chapter,
    "PartTitle": _deserialize_part_title,
}


def dict_to_item(data: Any) -> BookItem:
    """Convert the wire representation of a book item back to a node.

    Parameters
    ----------
    data : dict or str
        ``"Separator"`` or a single-key dictionary naming the variant

    Returns
    -------
    BookItem
        Reconstructed item

    Raises
    ------
    InputError
        If the variant tag is missing or unknown

    """
    if data == "Separator":
        return Separator()

    if not isinstance(data, dict) or len(data) != 1:
        raise InputError(f"Book item must be 'Separator' or a single-key object, got {data!r:.80}")

    tag, payload = next(iter(data.items()))
    if tag == "Separator":
        return Separator()

    deserializer = _DESERIALIZATION_DISPATCH.get(tag)
    if deserializer is None:
        raise InputError(f"Unknown book item type: {tag}")

    return deserializer(payload)


def _deserialize_items(items_data: list[Any]) -> list[BookItem]:
    """Recursively deserialize a list of book items."""
    return [dict_to_item(item) for item in items_data]


def dict_to_book(data: Any) -> Book:
    """Convert a book dictionary to a :class:`Book`.

    Raises
    ------
    InputError
        If ``sections`` is missing or malformed

    """
    _require_type(data, dict, "book")
    if "sections" not in data:
        raise InputError("Book is missing required field 'sections'", field_name="sections")

    sections = _deserialize_items(_require_type(data["sections"], list, "sections"))
    extra = {key: value for key, value in data.items() if key != "sections"}
    return Book(sections=sections, extra=extra)


def dict_to_context(data: Any) -> PreprocessorContext:
    """Convert a context dictionary to a :class:`PreprocessorContext`.

    Raises
    ------
    InputError
        If a required field is missing or has the wrong type

    """
    _require_type(data, dict, "context")
    missing = [name for name in _CONTEXT_FIELDS if name not in data]
    if missing:
        raise InputError(f"Preprocessor context is missing required field(s): {', '.join(missing)}")

    return PreprocessorContext(
        root=_require_type(data["root"], str, "root"),
        config=_require_type(data["config"], dict, "config"),
        renderer=_require_type(data["renderer"], str, "renderer"),
        mdbook_version=_require_type(data["mdbook_version"], str, "mdbook_version"),
        extra={key: value for key, value in data.items() if key not in _CONTEXT_FIELDS},
    )


def parse_input(stream: IO[bytes] | IO[str]) -> tuple[PreprocessorContext, Book]:
    """Read and deserialize the ``[context, book]`` payload from a stream.

    Parameters
    ----------
    stream : IO[bytes] or IO[str]
        Stream holding the payload, normally ``sys.stdin.buffer``. Bytes are
        decoded as UTF-8 whatever the locale says

    Returns
    -------
    tuple of (PreprocessorContext, Book)
        The build context and the book tree

    Raises
    ------
    InputError
        If the stream does not contain valid JSON of the expected shape

    """
    try:
        data = json.loads(stream.read())
    except ValueError as e:
        raise InputError(f"Unable to parse the input: {e}", original_error=e) from e

    if not isinstance(data, list) or len(data) != 2:
        raise InputError("Input must be a JSON array of exactly two elements: [context, book]")

    ctx = dict_to_context(data[0])
    book = dict_to_book(data[1])
    logger.debug("Parsed book with %d top-level item(s) for renderer '%s'", len(book.sections), ctx.renderer)
    return ctx, book


__all__ = [
    "book_to_dict",
    "book_to_json",
    "dict_to_book",
    "dict_to_context",
    "dict_to_item",
    "item_to_dict",
    "parse_input",
]

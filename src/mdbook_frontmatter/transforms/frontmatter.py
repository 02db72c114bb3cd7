#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdbook_frontmatter/transforms/frontmatter.py
"""Frontmatter transformation rules.

A chapter's frontmatter is transformed in two steps:

1. A uniform rule applied to every value (uppercasing).
2. Field overrides, keyed by field name, applied to the uppercased value.

The only built-in override reformats the ``date`` field from ``YYYY-MM-DD``
to ``MM-DD-YYYY``. Additional policies are added by passing a different
override table rather than by special-casing keys inside the loop.

Examples
--------
    >>> transform_frontmatter({"author": "grant (@grantkee)", "date": "2024-08-02"})
    {'author': 'GRANT (@GRANTKEE)', 'date': '08-02-2024'}

Use a different field for the date:

    >>> transform_frontmatter({"published": "2024-08-02"}, date_overrides("published"))
    {'published': '08-02-2024'}

"""

from __future__ import annotations

import logging
from functools import partial
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from mdbook_frontmatter.book.nodes import Chapter
from mdbook_frontmatter.constants import DATE_SEGMENT_LENGTHS, DATE_SEPARATOR, DEFAULT_DATE_KEY
from mdbook_frontmatter.exceptions import InvalidDateFormatError

logger = logging.getLogger(__name__)

FieldOverride = Callable[[str], str]


def reformat_date(value: str, field_name: str = DEFAULT_DATE_KEY) -> str:
    """Rewrite a ``YYYY-MM-DD`` date as ``MM-DD-YYYY``.

    The check is purely syntactic: three hyphen-separated segments of width
    4, 2 and 2. Values such as ``2024-13-99`` are accepted.

    Parameters
    ----------
    value : str
        Date string to reformat
    field_name : str, default "date"
        Frontmatter key holding the value, used in the error

    Returns
    -------
    str
        The reformatted date

    Raises
    ------
    InvalidDateFormatError
        If the value does not have the ``YYYY-MM-DD`` layout

    """
    parts = value.split(DATE_SEPARATOR)
    if len(parts) != len(DATE_SEGMENT_LENGTHS):
        raise InvalidDateFormatError(value, field_name=field_name)
    if tuple(len(part) for part in parts) != DATE_SEGMENT_LENGTHS:
        raise InvalidDateFormatError(value, field_name=field_name)

    year, month, day = parts
    return DATE_SEPARATOR.join((month, day, year))


def date_overrides(date_key: str = DEFAULT_DATE_KEY) -> Mapping[str, FieldOverride]:
    """Build an override table that reformats dates stored under ``date_key``."""
    return MappingProxyType({date_key: partial(reformat_date, field_name=date_key)})


DEFAULT_FIELD_OVERRIDES: Mapping[str, FieldOverride] = date_overrides()


def transform_frontmatter(
    frontmatter: Mapping[str, str],
    overrides: Optional[Mapping[str, FieldOverride]] = None,
) -> dict[str, str]:
    """Return a transformed copy of a frontmatter mapping.

    Every value is uppercased, then passed through the override registered
    for its key, if any. The key set of the result equals the key set of the
    input. The input mapping is left untouched.

    Parameters
    ----------
    frontmatter : Mapping[str, str]
        Chapter frontmatter
    overrides : Mapping[str, FieldOverride], optional
        Field-specific rules applied after uppercasing. Defaults to
        :data:`DEFAULT_FIELD_OVERRIDES`

    Returns
    -------
    dict[str, str]
        New mapping with transformed values

    Raises
    ------
    InvalidDateFormatError
        If a date field is not laid out as ``YYYY-MM-DD``. No partial
        mapping is returned.

    """
    if overrides is None:
        overrides = DEFAULT_FIELD_OVERRIDES

    result: dict[str, str] = {}
    for key, value in frontmatter.items():
        new_value = value.upper()
        override = overrides.get(key)
        if override is not None:
            new_value = override(new_value)
        result[key] = new_value
    return result


class FrontmatterTransform:
    """Callable chapter visitor that applies :func:`transform_frontmatter`.

    Parameters
    ----------
    overrides : Mapping[str, FieldOverride], optional
        Field-specific rules; defaults to reformatting ``date``

    Examples
    --------
        >>> from mdbook_frontmatter.transforms.walker import walk
        >>> walk(book, FrontmatterTransform())

    """

    def __init__(self, overrides: Optional[Mapping[str, FieldOverride]] = None) -> None:
        self.overrides = DEFAULT_FIELD_OVERRIDES if overrides is None else overrides
        self.chapters_transformed = 0

    def __call__(self, chapter: Chapter) -> None:
        """Replace the chapter's frontmatter with its transformed copy."""
        logger.debug("before: %s: %r", chapter.name, chapter.frontmatter)
        chapter.frontmatter = transform_frontmatter(chapter.frontmatter, self.overrides)
        self.chapters_transformed += 1
        logger.debug("after: %s: %r", chapter.name, chapter.frontmatter)


__all__ = [
    "DEFAULT_FIELD_OVERRIDES",
    "FieldOverride",
    "FrontmatterTransform",
    "date_overrides",
    "reformat_date",
    "transform_frontmatter",
]

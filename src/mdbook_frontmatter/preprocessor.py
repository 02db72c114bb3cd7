#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdbook_frontmatter/preprocessor.py
"""Preprocessor interface and the frontmatter preprocessor.

mdbook calls a preprocessor twice per build:

1. ``<command> supports <renderer>`` to ask whether it should run at all,
   answered through the exit code.
2. ``<command>`` with ``[context, book]`` on stdin, expecting the processed
   book on stdout.

:class:`Preprocessor` describes what a preprocessor provides;
:func:`handle_preprocessing` drives the second call.

Examples
--------
    >>> import sys
    >>> preprocessor = FrontmatterPreprocessor()
    >>> preprocessor.supports_renderer("html")
    True
    >>> handle_preprocessing(preprocessor, sys.stdin.buffer, sys.stdout.buffer)

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import IO

from mdbook_frontmatter.book.nodes import Book, PreprocessorContext
from mdbook_frontmatter.book.serialization import book_to_json, parse_input
from mdbook_frontmatter.compat import check_compatibility
from mdbook_frontmatter.constants import MDBOOK_VERSION, PREPROCESSOR_NAME, UNSUPPORTED_RENDERER
from mdbook_frontmatter.exceptions import OutputError
from mdbook_frontmatter.options import FrontmatterOptions
from mdbook_frontmatter.transforms.frontmatter import FrontmatterTransform, date_overrides
from mdbook_frontmatter.transforms.walker import walk

logger = logging.getLogger(__name__)


class Preprocessor(ABC):
    """Base class for mdbook preprocessors."""

    name: str

    @abstractmethod
    def run(self, ctx: PreprocessorContext, book: Book) -> Book:
        """Process the book and return it.

        Parameters
        ----------
        ctx : PreprocessorContext
            Build context sent by mdbook
        book : Book
            Book to process; implementations may modify it in place

        Returns
        -------
        Book
            The processed book

        """

    def supports_renderer(self, renderer: str) -> bool:
        """Return whether the preprocessor should run for ``renderer``."""
        return True


class FrontmatterPreprocessor(Preprocessor):
    """Uppercase chapter frontmatter and reformat its date field.

    Every frontmatter value of every chapter is uppercased and the date field
    (``date`` unless ``date-key`` is set in book.toml) is rewritten from
    ``YYYY-MM-DD`` to ``MM-DD-YYYY``. The first malformed date aborts the run.
    """

    name = PREPROCESSOR_NAME

    def run(self, ctx: PreprocessorContext, book: Book) -> Book:
        """Transform the frontmatter of every chapter in ``book``."""
        options = FrontmatterOptions.from_context(ctx)
        transform = FrontmatterTransform(date_overrides(options.date_key))
        walk(book, transform)
        logger.info("Transformed frontmatter of %d chapter(s)", transform.chapters_transformed)
        return book

    def supports_renderer(self, renderer: str) -> bool:
        """Return False only for the renderer this preprocessor refuses."""
        return renderer != UNSUPPORTED_RENDERER


def handle_preprocessing(
    preprocessor: Preprocessor,
    stdin: IO[bytes],
    stdout: IO[bytes],
    expected_version: str = MDBOOK_VERSION,
) -> Book:
    """Read the payload, process the book and write it back.

    Parameters
    ----------
    preprocessor : Preprocessor
        Preprocessor to run
    stdin : IO[bytes]
        Binary stream holding the ``[context, book]`` JSON payload
    stdout : IO[bytes]
        Binary stream receiving the processed book as UTF-8 JSON
    expected_version : str, default MDBOOK_VERSION
        mdbook version requirement the preprocessor was built against

    Returns
    -------
    Book
        The processed book, as written to ``stdout``

    Raises
    ------
    FrontmatterError
        On malformed input, unparsable versions, transform failures or
        write failures. Nothing is written to ``stdout`` in that case.

    """
    ctx, book = parse_input(stdin)

    compatibility = check_compatibility(ctx.mdbook_version, expected_version)
    if not compatibility.compatible:
        logger.warning(
            "The %s plugin was built against version %s of mdbook, but we're being called from version %s",
            preprocessor.name,
            expected_version,
            ctx.mdbook_version,
        )

    processed_book = preprocessor.run(ctx, book)
    payload = book_to_json(processed_book).encode("utf-8")

    try:
        stdout.write(payload)
        stdout.flush()
    except (OSError, UnicodeEncodeError) as e:
        raise OutputError(f"Failed to write processed book: {e}", original_error=e) from e

    return processed_book


__all__ = ["FrontmatterPreprocessor", "Preprocessor", "handle_preprocessing"]

"""mdbook-frontmatter - an mdbook preprocessor for chapter frontmatter.

mdbook hands every preprocessor the book as JSON on stdin. This package reads
that payload, uppercases each chapter's frontmatter values, rewrites the
``date`` field from ``YYYY-MM-DD`` to ``MM-DD-YYYY`` and writes the book back
on stdout.

Key Features
------------
- Typed model of the mdbook book tree (chapters, separators, part titles)
- Round-trip of the preprocessor JSON protocol
- Warning, not failure, when the calling mdbook version is outside the
  supported range
- Configurable date field via ``[preprocessor.frontmatter]`` in book.toml

Requirements
------------
- Python 3.10+
- packaging

Examples
--------
Configure the preprocessor in book.toml:

    [preprocessor.frontmatter]
    command = "mdbook-frontmatter"

Transform a mapping directly:

    >>> from mdbook_frontmatter import transform_frontmatter
    >>> transform_frontmatter({"author": "grant (@grantkee)", "date": "2024-08-02"})
    {'author': 'GRANT (@GRANTKEE)', 'date': '08-02-2024'}

"""

__version__ = "0.1.0"

from mdbook_frontmatter.book import Book, BookItem, Chapter, PartTitle, PreprocessorContext, Separator
from mdbook_frontmatter.compat import CompatibilityResult, check_compatibility
from mdbook_frontmatter.exceptions import (
    FrontmatterError,
    InputError,
    InvalidDateFormatError,
    OutputError,
    TransformError,
    VersionParseError,
)
from mdbook_frontmatter.preprocessor import FrontmatterPreprocessor, Preprocessor, handle_preprocessing
from mdbook_frontmatter.transforms import reformat_date, transform_frontmatter, walk

__all__ = [
    "__version__",
    "Book",
    "BookItem",
    "Chapter",
    "CompatibilityResult",
    "FrontmatterError",
    "FrontmatterPreprocessor",
    "InputError",
    "InvalidDateFormatError",
    "OutputError",
    "PartTitle",
    "Preprocessor",
    "PreprocessorContext",
    "Separator",
    "TransformError",
    "VersionParseError",
    "check_compatibility",
    "handle_preprocessing",
    "reformat_date",
    "transform_frontmatter",
    "walk",
]

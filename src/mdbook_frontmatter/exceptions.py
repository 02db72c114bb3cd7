#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the mdbook-frontmatter preprocessor.

This module defines the exception classes raised while reading, transforming
and writing a book. Every fatal condition is one of these; the CLI is the only
place that turns them into an exit code.

Exception Hierarchy
-------------------
- FrontmatterError (base exception)

  - InputError (malformed or incompatible stdin payload)

  - VersionParseError (unparsable mdbook version or version requirement)

  - TransformError (frontmatter transformation failures)
    - InvalidDateFormatError (date value not in YYYY-MM-DD layout)

  - OutputError (serialization or stdout write failures)

A version *mismatch* is not an exception; it is reported as a warning.

"""

from __future__ import annotations


class FrontmatterError(Exception):
    """Base exception class for all preprocessor errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class InputError(FrontmatterError):
    """Exception raised when the stdin payload cannot be deserialized.

    Covers invalid JSON as well as well-formed JSON that does not have the
    ``[context, book]`` shape mdbook sends.

    Parameters
    ----------
    message : str
        Description of what was wrong with the payload
    field_name : str, optional
        Name of the offending field, if one can be singled out
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, field_name: str | None = None, original_error: Exception | None = None):
        """Initialize the input error."""
        super().__init__(message, original_error=original_error)
        self.field_name = field_name


class VersionParseError(FrontmatterError):
    """Exception raised for a malformed version or version requirement string.

    Parameters
    ----------
    version_string : str
        The string that failed to parse
    kind : str, default "version"
        Either ``"version"`` or ``"requirement"``
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, version_string: str, kind: str = "version", original_error: Exception | None = None):
        """Initialize the version parse error."""
        super().__init__(f"Invalid {kind} string: {version_string!r}", original_error=original_error)
        self.version_string = version_string
        self.kind = kind


class TransformError(FrontmatterError):
    """Exception raised when a chapter's frontmatter cannot be transformed.

    Parameters
    ----------
    message : str
        Description of the transformation error
    field_name : str, optional
        Frontmatter key being transformed when the error occurred
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, field_name: str | None = None, original_error: Exception | None = None):
        """Initialize the transform error."""
        super().__init__(message, original_error=original_error)
        self.field_name = field_name


class InvalidDateFormatError(TransformError):
    """Exception raised when a date value is not laid out as ``YYYY-MM-DD``.

    Parameters
    ----------
    value : str
        The offending date value
    field_name : str, default "date"
        Frontmatter key holding the value

    """

    def __init__(self, value: str, field_name: str = "date"):
        """Initialize the invalid date error."""
        super().__init__(
            f"date format incorrect. expected YYYY-MM-DD, received {value}",
            field_name=field_name,
        )
        self.value = value


class OutputError(FrontmatterError):
    """Exception raised when the processed book cannot be serialized or written."""


__all__ = [
    "FrontmatterError",
    "InputError",
    "VersionParseError",
    "TransformError",
    "InvalidDateFormatError",
    "OutputError",
]

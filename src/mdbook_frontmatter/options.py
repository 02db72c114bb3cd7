#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdbook_frontmatter/options.py
"""Preprocessor options read from book.toml.

mdbook passes the whole parsed book.toml in the preprocessor context. The
preprocessor's own settings live in its table::

    [preprocessor.frontmatter]
    command = "mdbook-frontmatter"
    date-key = "published"

Keys mdbook itself interprets (``command``, ``renderers``, ``before``,
``after``, ``optional``) and unknown keys are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any

from mdbook_frontmatter.book.nodes import PreprocessorContext
from mdbook_frontmatter.constants import CONFIG_SECTION, DEFAULT_DATE_KEY
from mdbook_frontmatter.exceptions import InputError


@dataclass(frozen=True)
class FrontmatterOptions:
    """Options controlling the frontmatter transform.

    Parameters
    ----------
    date_key : str, default "date"
        Frontmatter field whose value is reformatted from ``YYYY-MM-DD``
        to ``MM-DD-YYYY``

    """

    date_key: str = field(
        default=DEFAULT_DATE_KEY,
        metadata={"help": "Frontmatter field holding a YYYY-MM-DD date to reformat", "toml_key": "date-key"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If ``date_key`` is empty.

        """
        if not self.date_key:
            raise ValueError("date_key must be a non-empty string")

    @classmethod
    def from_dict(cls, table: dict[str, Any]) -> FrontmatterOptions:
        """Build options from a ``[preprocessor.frontmatter]`` table.

        Parameters
        ----------
        table : dict
            Table contents; keys use book.toml's kebab-case spelling

        Returns
        -------
        FrontmatterOptions
            Options with defaults for absent keys

        Raises
        ------
        InputError
            If a recognized key has a value of the wrong type or range

        """
        values: dict[str, Any] = {}
        for option in fields(cls):
            toml_key = option.metadata.get("toml_key", option.name)
            if toml_key not in table:
                continue
            value = table[toml_key]
            if not isinstance(value, str):
                raise InputError(
                    f"preprocessor.{CONFIG_SECTION}.{toml_key} must be a string, got {type(value).__name__}",
                    field_name=toml_key,
                )
            values[option.name] = value

        try:
            return replace(cls(), **values)
        except ValueError as e:
            raise InputError(f"Invalid preprocessor.{CONFIG_SECTION} option: {e}", original_error=e) from e

    @classmethod
    def from_context(cls, ctx: PreprocessorContext) -> FrontmatterOptions:
        """Build options from the preprocessor context's book.toml."""
        return cls.from_dict(ctx.preprocessor_config(CONFIG_SECTION))


__all__ = ["FrontmatterOptions"]

"""Pytest configuration and shared fixtures for the mdbook-frontmatter test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
from typing import Generator

import pytest
from utils import make_book, make_chapter, make_context

from mdbook_frontmatter.book import Book, Chapter, PartTitle, PreprocessorContext, Separator
from mdbook_frontmatter.book.serialization import dict_to_context
from mdbook_frontmatter.logging_utils import HANDLER_NAME

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    # Register custom Hypothesis profiles
    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    # Load profile from environment or use default
    import os

    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture(autouse=True)
def restore_root_logging() -> Generator[None, None, None]:
    """Remove the handlers ``configure_logging`` installs and restore the root level."""
    root_logger = logging.getLogger()
    level = root_logger.level
    try:
        yield
    finally:
        for handler in list(root_logger.handlers):
            if handler.get_name() == HANDLER_NAME:
                root_logger.removeHandler(handler)
                handler.close()
        root_logger.setLevel(level)


@pytest.fixture
def context() -> PreprocessorContext:
    """Provide a preprocessor context for mdbook 0.4.40 and the html renderer."""
    return dict_to_context(make_context())


@pytest.fixture
def nested_book() -> Book:
    """Provide a book with nesting, a separator and a part title.

    Layout::

        Intro
        ---
        # Part One
        1. Chapter 1
           1.1. Section 1.1
                1.1.1. Deep
           1.2. Section 1.2
        ---
        2. Chapter 2

    """
    deep = Chapter(name="Deep", number=[1, 1, 1], frontmatter={"tag": "deep"}, parent_names=["Chapter 1", "Section 1.1"])
    section_1_1 = Chapter(
        name="Section 1.1",
        number=[1, 1],
        sub_items=[deep],
        frontmatter={"date": "2024-01-15"},
        parent_names=["Chapter 1"],
    )
    section_1_2 = Chapter(name="Section 1.2", number=[1, 2], parent_names=["Chapter 1"])
    chapter_1 = Chapter(
        name="Chapter 1",
        number=[1],
        sub_items=[section_1_1, section_1_2],
        frontmatter={"author": "ada", "date": "2023-12-31"},
    )
    return Book(
        sections=[
            Chapter(name="Intro", frontmatter={"title": "welcome"}),
            Separator(),
            PartTitle(title="Part One"),
            chapter_1,
            Separator(),
            Chapter(name="Chapter 2", number=[2], frontmatter={"status": "draft"}),
        ]
    )


@pytest.fixture
def nested_book_dict() -> dict:
    """Provide the wire form of a small nested book."""
    return make_book(
        make_chapter(
            "Chapter 1",
            frontmatter={"author": "grant (@grantkee)", "date": "2024-08-02"},
            number=[1],
            sub_items=[
                make_chapter("Section 1.1", frontmatter={"date": "2024-09-10"}, number=[1, 1], parent_names=["Chapter 1"])
            ],
        ),
        "Separator",
        {"PartTitle": "Appendix"},
        make_chapter("Glossary", frontmatter={"kind": "reference"}),
    )

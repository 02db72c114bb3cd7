#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for mdbook-frontmatter.

This module centralizes the fixed names, version requirements and exit codes
shared by the preprocessor, the compatibility check and the CLI.

Constants are organized by category:
1. Preprocessor Identity - Names used in diagnostics and book.toml
2. Host Compatibility - The mdbook version range the wire format targets
3. Frontmatter Rules - Reserved keys and date layout
4. CLI - Commands, environment variables and exit codes
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Preprocessor Identity
# =============================================================================

PREPROCESSOR_NAME = "frontmatter-preprocessor"

# Table name under ``[preprocessor.<name>]`` in book.toml
CONFIG_SECTION = "frontmatter"

# Renderer name this preprocessor refuses to run for
UNSUPPORTED_RENDERER = "not-supported"

# =============================================================================
# Host Compatibility
# =============================================================================

# Version of mdbook whose JSON shape this preprocessor was built against.
# Interpreted as a caret requirement, i.e. ">=0.4.40,<0.5.0".
MDBOOK_VERSION = "0.4.40"

# =============================================================================
# Frontmatter Rules
# =============================================================================

DEFAULT_DATE_KEY = "date"
DATE_SEPARATOR = "-"

# Segment widths of the accepted YYYY-MM-DD layout
DATE_SEGMENT_LENGTHS = (4, 2, 2)

# =============================================================================
# CLI
# =============================================================================

SUPPORTS_COMMAND = "supports"

LOG_LEVEL_ENV_VAR = "MDBOOK_FRONTMATTER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

EXIT_SUCCESS = 0
EXIT_ERROR = 1

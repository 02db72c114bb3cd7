#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for the mdbook frontmatter preprocessor.

mdbook runs the preprocessor as an external command configured in book.toml::

    [preprocessor.frontmatter]
    command = "mdbook-frontmatter"

Environment Variable Support
----------------------------
MDBOOK_FRONTMATTER_LOG_LEVEL sets the log level when no logging flag is
given on the command line.

Examples
--------
Renderer support check (exit code 0 = supported, 1 = not supported)::

    $ mdbook-frontmatter supports html

Process a book by hand::

    $ mdbook-frontmatter < payload.json > book.json

Debug output on stderr::

    $ MDBOOK_FRONTMATTER_LOG_LEVEL=debug mdbook build

"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import IO, NoReturn, Optional

from mdbook_frontmatter import __version__
from mdbook_frontmatter.constants import (
    DEFAULT_LOG_LEVEL,
    EXIT_ERROR,
    EXIT_SUCCESS,
    LOG_LEVEL_ENV_VAR,
    PREPROCESSOR_NAME,
    SUPPORTS_COMMAND,
)
from mdbook_frontmatter.exceptions import FrontmatterError
from mdbook_frontmatter.logging_utils import configure_logging, resolve_log_level
from mdbook_frontmatter.preprocessor import FrontmatterPreprocessor, Preprocessor, handle_preprocessing

logger = logging.getLogger(__name__)

__all__ = ["PreprocessorArgumentParser", "create_parser", "handle_supports", "main"]


class PreprocessorArgumentParser(argparse.ArgumentParser):
    """Argument parser whose usage errors exit with EXIT_ERROR.

    argparse exits with 2 on a bad flag. mdbook only distinguishes zero from
    non-zero, and every failure of this command exits with 1.
    """

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_ERROR, f"{self.prog}: error: {message}\n")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Returns
    -------
    argparse.ArgumentParser
        Parser accepting optional ``supports <renderer>`` positionals and
        logging flags

    """
    parser = PreprocessorArgumentParser(
        prog="mdbook-frontmatter",
        description="mdbook preprocessor that uppercases chapter frontmatter and reformats its date.",
        epilog=f"Run '%(prog)s {SUPPORTS_COMMAND} <renderer>' to check renderer support.",
    )
    parser.add_argument(
        "command",
        nargs="*",
        metavar="ARG",
        help=f"'{SUPPORTS_COMMAND} <renderer>' to query renderer support; omit to process stdin",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        default=None,
        help=f"Logging level (default: ${LOG_LEVEL_ENV_VAR} or {DEFAULT_LOG_LEVEL})",
    )
    parser.add_argument("--log-file", default=None, help="Also write log messages to this file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable informational logging")
    parser.add_argument("--trace", action="store_true", help="Enable debug logging with logger names and line numbers")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging from command-line arguments and the environment."""
    log_level = resolve_log_level(
        parsed_args.log_level,
        verbose=parsed_args.verbose,
        trace=parsed_args.trace,
        env_level=os.environ.get(LOG_LEVEL_ENV_VAR),
        default=DEFAULT_LOG_LEVEL,
    )
    configure_logging(log_level, log_file=parsed_args.log_file, trace=parsed_args.trace)


def handle_supports(preprocessor: Preprocessor, renderer: str) -> int:
    """Answer mdbook's renderer support query.

    Parameters
    ----------
    preprocessor : Preprocessor
        Preprocessor being queried
    renderer : str
        Renderer name mdbook asked about

    Returns
    -------
    int
        EXIT_SUCCESS if supported, EXIT_ERROR otherwise

    """
    supported = preprocessor.supports_renderer(renderer)
    logger.debug("Renderer '%s' supported: %s", renderer, supported)
    return EXIT_SUCCESS if supported else EXIT_ERROR


def main(
    args: Optional[list[str]] = None,
    stdin: Optional[IO[bytes]] = None,
    stdout: Optional[IO[bytes]] = None,
) -> int:
    """Main CLI entry point.

    ``supports <renderer>`` is matched on the raw arguments before argparse
    sees them, so renderer names that look like flags are answered too. Any
    flags after the renderer name still configure logging.

    Parameters
    ----------
    args : list of str, optional
        Command-line arguments; defaults to ``sys.argv[1:]``
    stdin : IO[bytes], optional
        Binary input stream; defaults to ``sys.stdin.buffer``
    stdout : IO[bytes], optional
        Binary output stream; defaults to ``sys.stdout.buffer``

    Returns
    -------
    int
        Process exit code

    Raises
    ------
    SystemExit
        With EXIT_ERROR on a usage error, or EXIT_SUCCESS after ``--help``
        and ``--version``

    """
    argv = sys.argv[1:] if args is None else list(args)
    parser = create_parser()
    preprocessor = FrontmatterPreprocessor()

    if len(argv) >= 2 and argv[0] == SUPPORTS_COMMAND:
        _setup_logging_level(parser.parse_args(argv[2:]))
        return handle_supports(preprocessor, argv[1])

    parsed_args = parser.parse_args(argv)
    _setup_logging_level(parsed_args)

    positionals = parsed_args.command
    if len(positionals) >= 2 and positionals[0] == SUPPORTS_COMMAND:
        return handle_supports(preprocessor, positionals[1])

    try:
        handle_preprocessing(
            preprocessor,
            stdin if stdin is not None else sys.stdin.buffer,
            stdout if stdout is not None else sys.stdout.buffer,
        )
    except FrontmatterError as e:
        logger.error("Error processing frontmatter: %s", e.message)
        logger.debug("Failure details", exc_info=True)
        return EXIT_ERROR
    except Exception as e:
        logger.error("Error processing frontmatter: unexpected %s: %s", type(e).__name__, e)
        logger.debug("Failure details", exc_info=True)
        return EXIT_ERROR

    logger.debug("%s finished", PREPROCESSOR_NAME)
    return EXIT_SUCCESS

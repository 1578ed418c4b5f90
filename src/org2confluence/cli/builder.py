#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Argument parser and exit codes for the org2confluence CLI."""

import argparse

from org2confluence.constants import CONFIG_ENV_VAR
from org2confluence.exceptions import OutputWriteError, ParsingError, RenderingError, ValidationError

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

OUTPUT_DIALECTS = ("confluence", "plaintext")


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (ValidationError, ValueError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, (OutputWriteError, OSError)):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR


def parse_language_alias(value: str) -> tuple[str, str]:
    """Parse a ``SRC=DST`` language alias argument.

    Raises
    ------
    argparse.ArgumentTypeError
        If the value is not of the form ``SRC=DST``

    """
    source, sep, target = value.partition("=")
    if not sep or not source.strip() or not target.strip():
        raise argparse.ArgumentTypeError(f"Language alias must look like SRC=DST, got {value!r}")
    return source.strip(), target.strip()


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``org2confluence`` command."""
    parser = argparse.ArgumentParser(
        prog="org2confluence",
        description="Render an Org-style document tree (JSON) as Confluence wiki markup.",
        epilog=f"Configuration files are discovered automatically; {CONFIG_ENV_VAR} names one explicitly.",
    )

    parser.add_argument("input", help="Document tree as JSON, or '-' to read from stdin")
    parser.add_argument("-o", "--out", dest="out", help="Output file (default: stdout)")
    parser.add_argument(
        "--to",
        choices=OUTPUT_DIALECTS,
        default="confluence",
        help="Output dialect (default: confluence)",
    )

    config_group = parser.add_argument_group("configuration")
    config_group.add_argument("--config", help="Configuration file (TOML, YAML or JSON)")
    config_group.add_argument("--no-config", action="store_true", help="Ignore configuration files")

    render_group = parser.add_argument_group("rendering")
    render_group.add_argument("--no-toc", action="store_true", help="Do not emit the {toc} macro")
    render_group.add_argument("--no-todo-keywords", action="store_true", help="Hide headline TODO keywords")
    render_group.add_argument("--with-tags", action="store_true", help="Append headline tags after the title")
    render_group.add_argument(
        "--body-only", action="store_true", help="Render only the body, without table of contents or footnotes"
    )
    render_group.add_argument(
        "--lang-alias",
        dest="lang_alias",
        action="append",
        type=parse_language_alias,
        default=[],
        metavar="SRC=DST",
        help="Map a source block language to a Confluence language (repeatable)",
    )
    render_group.add_argument("--line-length", type=int, help="Fill paragraphs to this width")
    render_group.add_argument(
        "--fail-on-unresolved-links",
        action="store_true",
        help="Fail instead of rendering an empty target for unresolved internal links",
    )

    output_group = parser.add_argument_group("output")
    output_group.add_argument("--rich", action="store_true", help="Display the result with rich formatting")

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    logging_group.add_argument("--log-file", help="Also write log messages to this file")
    logging_group.add_argument("--trace", action="store_true", help="Trace mode: debug logging with timestamps")
    logging_group.add_argument("-v", "--verbose", action="store_true", help="Shortcut for --log-level DEBUG")

    return parser

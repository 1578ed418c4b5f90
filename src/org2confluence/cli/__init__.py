"""Command-line interface for org2confluence.

The CLI reads a document tree serialized as JSON, renders it with the
Confluence dialect (or the plain-text base dialect) and writes the result to
stdout or a file. It is a thin shell over :func:`org2confluence.to_confluence`.

Examples
--------
Render a tree to stdout::

    $ org2confluence notes.json

Write to a file without the table of contents::

    $ org2confluence notes.json --no-toc -o notes.confluence

Read from stdin and alias languages::

    $ cat notes.json | org2confluence - --lang-alias elisp=lisp --lang-alias py=python

Use a specific configuration file::

    $ ORG2CONFLUENCE_CONFIG=~/wiki.toml org2confluence notes.json

"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any

from org2confluence.ast.serialization import json_to_ast
from org2confluence.cli.builder import (
    EXIT_FILE_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
    get_exit_code_for_exception,
)
from org2confluence.cli.config import load_config_with_priority, merge_configs
from org2confluence.constants import CONFIG_ENV_VAR
from org2confluence.exceptions import Org2ConfluenceError
from org2confluence.logging_utils import configure_logging
from org2confluence.options import BaseRendererOptions, ConfluenceRendererOptions, PlainTextOptions
from org2confluence.renderers import BaseRenderer, ConfluenceRenderer, PlainTextRenderer

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser", "build_options"]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace, use_rich=parsed_args.rich)


def _cli_overrides(parsed_args: argparse.Namespace) -> dict[str, Any]:
    """Collect option values given explicitly on the command line."""
    overrides: dict[str, Any] = {}
    if parsed_args.no_toc:
        overrides["with_toc"] = False
    if parsed_args.body_only:
        overrides["body_only"] = True
    if parsed_args.line_length is not None:
        overrides["line_length"] = parsed_args.line_length
    if parsed_args.no_todo_keywords:
        overrides["with_todo_keywords"] = False
    if parsed_args.with_tags:
        overrides["with_tags"] = True
    if parsed_args.fail_on_unresolved_links:
        overrides["fail_on_unresolved_links"] = True
    if parsed_args.lang_alias:
        overrides["language_aliases"] = dict(parsed_args.lang_alias)
    return overrides


def build_options(parsed_args: argparse.Namespace, config: dict[str, Any]) -> BaseRendererOptions:
    """Build renderer options from configuration and command-line flags.

    Command-line flags override configuration values; language aliases from
    both sources are merged on top of the defaults.

    Raises
    ------
    ValueError
        If the combined values are invalid

    """
    options_class = PlainTextOptions if parsed_args.to == "plaintext" else ConfluenceRendererOptions
    normalized = {str(key).replace("-", "_"): value for key, value in config.items()}

    if options_class is ConfluenceRendererOptions:
        defaults: dict[str, Any] = {"language_aliases": ConfluenceRendererOptions().language_aliases}
        normalized = merge_configs(defaults, normalized)

    merged = merge_configs(normalized, _cli_overrides(parsed_args))
    return options_class.from_mapping(merged)


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _display_rich(text: str) -> None:
    """Print rendered markup to the terminal with rich."""
    from rich.console import Console
    from rich.panel import Panel
    from rich.syntax import Syntax

    console = Console()
    console.print(Panel(Syntax(text, "text", theme="monokai", word_wrap=True), title="Confluence wiki markup"))


def main(args: list[str] | None = None) -> int:
    """Execute the org2confluence command and return its exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    config: dict[str, Any] = {}
    if not parsed_args.no_config:
        try:
            config = load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))
        except argparse.ArgumentTypeError as e:
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_VALIDATION_ERROR

    try:
        options = build_options(parsed_args, config)
    except (TypeError, ValueError) as e:
        print(f"Error: Invalid options: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        source = _read_input(parsed_args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Could not read {parsed_args.input}: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    renderer: BaseRenderer
    if isinstance(options, ConfluenceRendererOptions):
        renderer = ConfluenceRenderer(options)
    else:
        renderer = PlainTextRenderer(options)

    try:
        doc = json_to_ast(source)
        if parsed_args.out:
            renderer.render(doc, parsed_args.out)
            logger.info("Wrote %s", parsed_args.out)
        else:
            rendered = renderer.render_to_string(doc)
            if parsed_args.rich:
                _display_rich(rendered)
            else:
                sys.stdout.write(rendered)
    except Org2ConfluenceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())

"""Command-line interface for the plaintify library.

Converts Markdown to plain text from a file or standard input.

Examples
--------
Basic conversion:
    $ plaintify README.md

Write to a file:
    $ plaintify README.md --out README.txt

Read from stdin:
    $ cat notes.md | plaintify -

Use environment variables for defaults:
    $ export PLAINTIFY_LOG_LEVEL=DEBUG
    $ plaintify README.md
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from plaintify import __version__
from plaintify.constants import DEFAULT_LOG_LEVEL, ENV_PREFIX, EXIT_ERROR, EXIT_SUCCESS
from plaintify.exceptions import PlaintifyError
from plaintify.logging_utils import configure_logging
from plaintify.options import MarkdownParserOptions
from plaintify.parsers.markdown import MarkdownToNodeConverter
from plaintify.renderers.plaintext import PlainTextRenderer

logger = logging.getLogger(__name__)


def get_env_var_value(key: str) -> Optional[str]:
    """Get environment variable with PLAINTIFY_ prefix.

    Parameters
    ----------
    key : str
        The parameter name (e.g., 'log_level')

    Returns
    -------
    Optional[str]
        Environment variable value or None if not set
    """
    env_key = f"{ENV_PREFIX}{key.upper().replace('-', '_')}"
    return os.environ.get(env_key)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the command line tool."""
    parser = argparse.ArgumentParser(
        prog="plaintify",
        description="Convert Markdown to plain text.",
    )
    parser.add_argument("input", nargs="?", default="-", help="Markdown file to convert, or '-' for stdin")
    parser.add_argument("--out", "-o", help="Write plain text to this file instead of stdout")
    parser.add_argument(
        "--no-tables", dest="parse_tables", action="store_false", help="Do not recognize GFM tables"
    )
    parser.add_argument(
        "--no-strikethrough",
        dest="parse_strikethrough",
        action="store_false",
        help="Do not recognize ~~strikethrough~~",
    )
    parser.add_argument(
        "--no-task-lists", dest="parse_task_lists", action="store_false", help="Do not recognize task list items"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        default=get_env_var_value("log_level") or DEFAULT_LOG_LEVEL,
        help="Logging level (default: %(default)s, env: PLAINTIFY_LOG_LEVEL)",
    )
    parser.add_argument("--log-file", default=get_env_var_value("log_file"), help="Also write logs to this file (env: PLAINTIFY_LOG_FILE)")
    parser.add_argument("--trace", action="store_true", help="Verbose log format with timestamps and logger names")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _read_input(source: str) -> bytes:
    if source == "-":
        return sys.stdin.buffer.read()
    return Path(source).read_bytes()


def main(args: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args)

    parser_options = MarkdownParserOptions(
        parse_tables=parsed_args.parse_tables,
        parse_strikethrough=parsed_args.parse_strikethrough,
        parse_task_lists=parsed_args.parse_task_lists,
    )

    try:
        source = _read_input(parsed_args.input)
    except OSError as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        nodes = MarkdownToNodeConverter(parser_options).parse(source)
        renderer = PlainTextRenderer()
        if parsed_args.out:
            output_path = Path(parsed_args.out)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            renderer.render(nodes, output_path)
            logger.info("Converted %s -> %s", parsed_args.input, output_path)
        else:
            sys.stdout.write(renderer.render_to_string(nodes))
    except PlaintifyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_SUCCESS

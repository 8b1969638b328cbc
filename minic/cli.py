"""
Command-line interface for minic.

Provides the main entry point for the minic lexer with subcommands for
tokenizing source files and printing version information.
"""

import argparse
import logging
import sys
from typing import Optional

from .core import Compiler
from .utils.settings import Settings

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        argparse.ArgumentParser: The configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="minic",
        description="minic: lexer for a minimal C subset",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m minic lex program.c
  python -m minic lex program.c --compact --quiet
  python -m minic lex
        """
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Lex command
    lex_parser = subparsers.add_parser(
        "lex",
        help="Tokenize a source file and print the tokens as JSON"
    )
    lex_parser.add_argument(
        "input",
        nargs="?",
        type=str,
        help="Input source file (default: a built-in example program)"
    )
    lex_parser.add_argument(
        "--compact",
        action="store_true",
        help="Print JSON on a single line"
    )
    lex_parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Do not echo the source code to stderr"
    )
    lex_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output"
    )

    # Version command
    subparsers.add_parser(
        "version",
        help="Show version information"
    )

    return parser


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; DEBUG level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S"
    )


def handle_lex(args: argparse.Namespace) -> int:
    """Handle the lex command.

    Args:
        args: Parsed command-line arguments

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    settings = Settings(
        json_indent=None if args.compact else 2,
        echo_source=not args.quiet,
    )
    compiler = Compiler(settings=settings)

    if args.input is None:
        print("No source file provided. Use default example code.", file=sys.stderr)
        result = compiler.lex_default()
    else:
        logger.debug(f"Input: {args.input}")
        result = compiler.lex_file(args.input)

    if result.source is None:
        print(f"[minic] Error: {result.error_message}", file=sys.stderr)
        return result.exit_code

    if settings.echo_source:
        source = result.source
        if isinstance(source, bytes):
            source = source.decode("utf-8", "replace")
        print("--- Source Code ---", file=sys.stderr)
        print(source, file=sys.stderr)
        print("-------------------", file=sys.stderr)

    print(result.to_json(indent=settings.json_indent))

    if not result.success:
        line, col = result.location()
        print(f"[minic] Line {line}, col {col}: {result.error}", file=sys.stderr)
    return result.exit_code


def handle_version(args: argparse.Namespace) -> int:
    """Handle the version command.

    Args:
        args: Parsed command-line arguments

    Returns:
        int: Exit code (always 0 for version)
    """
    from . import __version__, __author__
    print(f"minic version {__version__}")
    print(f"Author: {__author__}")
    return 0


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        int: Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(getattr(args, "verbose", False))

    if args.command == "lex":
        return handle_lex(args)
    elif args.command == "version":
        return handle_version(args)
    else:
        parser.print_help()
        return 2


if __name__ == "__main__":
    sys.exit(main())

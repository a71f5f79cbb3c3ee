"""Command-line entry point: grep, func and link subcommands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from termcolor import colored

from terrier.func import func_identification
from terrier.grep import search_file_for_keyword
from terrier.link import CodeLinkAnalyzer
from terrier.utils import UnsupportedFileTypeError, get_extension_from_filename


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its subcommands."""
    parser = argparse.ArgumentParser(prog="terrier")
    commands = parser.add_subparsers(dest="command", required=True)

    grep = commands.add_parser("grep", help="fuzzy-search a file for a keyword")
    grep.add_argument("-p", "--paths", type=Path, required=True)
    grep.add_argument("-k", "--keyword", required=True)

    func = commands.add_parser("func", help="summarise functions in a file")
    func.add_argument("-p", "--paths", type=Path, required=True)

    link = commands.add_parser("link", help="show where functions are referenced")
    link.add_argument("-p", "--paths", type=Path, required=True)
    return parser


def _label(text: str) -> str:
    return colored(text, "green")


def _run(args: argparse.Namespace) -> None:
    if args.command == "grep":
        print(f'{_label("Searching file")}: "{args.paths}"')
        print(f'{_label("Searching for")}: "{args.keyword}"')
        get_extension_from_filename(args.paths)
        print(search_file_for_keyword(args.keyword, args.paths).render())
    elif args.command == "func":
        print(f'{_label("Finding functions in")}: "{args.paths}"')
        summary = func_identification(args.paths)
        if summary is not None:
            print(_label(f"Parsing {summary.language} file..."))
            print(summary.render())
    else:
        analyzer = CodeLinkAnalyzer()
        analyzer.file_content_extractor(args.paths)
        analyzer.function_extractor()
        analyzer.overlaps()
        print(analyzer.link_builder())


def main(argv=None) -> int:
    """Run the command line and return an exit status."""
    args = build_parser().parse_args(argv)
    try:
        _run(args)
    except (UnsupportedFileTypeError, OSError, UnicodeDecodeError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
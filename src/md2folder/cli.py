"""Command line entry point for md2folder."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from md2folder.config import MD2FOLDER_LEADING_CONTENT
from md2folder.exceptions import Md2folderError
from md2folder.expansion import ExpansionOptions, expand_to_folder
from md2folder.output_formatter import format_expansion


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="md2folder",
        description="Split a Markdown file into a folder with one file per top-level heading.",
    )
    parser.add_argument("source", type=Path, help="Markdown file to expand")
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        help="Directory that receives the new folder (default: next to the source)",
    )
    parser.add_argument(
        "--reject-leading",
        action="store_true",
        help="Fail if content appears before the first top-level heading instead of dropping it",
    )
    parser.add_argument("--exist-ok", action="store_true", help="Reuse the folder if it exists")
    parser.add_argument("--overwrite", action="store_true", help="Replace existing files")
    parser.add_argument("--dry-run", action="store_true", help="Show what would be written")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = ExpansionOptions(
            leading_content="reject" if args.reject_leading else MD2FOLDER_LEADING_CONTENT,
            exist_ok=args.exist_ok,
            overwrite=args.overwrite,
            dry_run=args.dry_run,
        )
        result = asyncio.run(
            expand_to_folder(args.source, output_dir=args.output_dir, options=options)
        )
    except Md2folderError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        print(format_expansion(result))
    return 0

"""Markdown to HTML conversion with video embeds and captioned figures."""

import argparse
import logging
from pathlib import Path
from typing import Optional

from markdown_utilities.convert import convert_files
from markdown_utilities.core.markdown_ast import render_markdown_to_html

logger = logging.getLogger(__name__)

render_markdown = render_markdown_to_html


def main(argv: Optional[list[str]] = None) -> int:
    """
    main entry point for markdown-utilities CLI.

    Args:
        argv: command line arguments (defaults to sys.argv[1:])

    Returns:
        exit code (0 success, 1 partial failure, 2 fatal error)
    """
    parser = argparse.ArgumentParser(description="Convert markdown files to HTML")
    parser.add_argument(
        "source",
        help="markdown file or directory of markdown files",
    )
    parser.add_argument(
        "destination",
        nargs="?",
        default=".",
        help="output directory for HTML files (default: current directory)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="process files but don't write HTML",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="replace existing HTML files",
    )
    parser.add_argument(
        "--wrap-html",
        action="store_true",
        help="wrap output in a full HTML page instead of a fragment",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="show progress bar",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="suppress non-error output",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="enable debug logging",
    )

    args = parser.parse_args(argv)

    # configures logging
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(message)s",
    )

    # validates source path exists
    source_path = Path(args.source)
    if not source_path.exists():
        logger.error("Source not found: %s", args.source)
        return 2

    try:
        return convert_files(
            source=source_path,
            destination=Path(args.destination),
            dry_run=args.dry_run,
            overwrite=args.overwrite,
            wrap_html=args.wrap_html,
            quiet=args.quiet,
            progress=args.progress,
        )
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.error("Fatal error: %s", e)
        return 2


__all__ = ["main", "render_markdown", "render_markdown_to_html"]

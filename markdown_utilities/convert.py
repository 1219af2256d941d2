"""Batch conversion of markdown files to HTML."""

import logging
from collections import Counter
from pathlib import Path
from typing import Literal

from markdown_utilities.core.models import MarkdownDocument
from markdown_utilities.exporters.html import HTMLExporter
from markdown_utilities.progress import ProgressHandler

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIXES = (".md", ".markdown")

ConvertStatus = Literal["converted", "skipped", "failed"]


def discover_files(source: Path) -> list[Path]:
    """
    discovers markdown files from source path.

    Args:
        source: path to a markdown file or a directory

    Returns:
        list of paths to markdown files (directories are not searched recursively)

    Raises:
        FileNotFoundError: if source doesn't exist
    """
    if not source.exists():
        raise FileNotFoundError(f"Source not found: {source}")

    if source.is_file():
        if source.suffix.lower() in MARKDOWN_SUFFIXES:
            return [source]
        return []

    if source.is_dir():
        return sorted(
            p
            for p in source.iterdir()
            if p.is_file() and p.suffix.lower() in MARKDOWN_SUFFIXES
        )

    return []


def convert_files(
    source: Path,
    destination: Path,
    dry_run: bool = False,
    overwrite: bool = False,
    wrap_html: bool = False,
    quiet: bool = False,
    progress: bool = False,
) -> int:
    """
    converts markdown files from source into HTML files under destination.

    Args:
        source: markdown file or directory of markdown files
        destination: output directory for HTML files
        dry_run: if True, don't write any files
        overwrite: if True, replace existing HTML files
        wrap_html: if True, wrap output in a full HTML page
        quiet: if True, suppress non-error output
        progress: if True, show progress bar

    Returns:
        exit code (0 success, 1 partial failure)
    """
    with ProgressHandler(quiet=quiet, show_progress=progress) as handler:
        handler.start_discovery()

        files = discover_files(source)
        if not files:
            handler.log_info(f"No markdown files found in {source}")
            return 0

        logger.debug("Discovered %d markdown file(s) in %s", len(files), source)
        handler.log_info(f"Found {len(files)} markdown file(s) to convert")
        handler.set_total(len(files))

        exporter = HTMLExporter(wrap_html=wrap_html)

        counts: Counter[ConvertStatus] = Counter()
        for file_path in files:
            status = _convert_file(
                file_path, exporter, destination, dry_run, overwrite, handler
            )
            counts[status] += 1

        handler.finish(
            converted=counts["converted"],
            failed=counts["failed"],
            skipped=counts["skipped"],
            dry_run=dry_run,
        )

        if counts["failed"] > 0:
            return 1
        return 0


def _convert_file(
    file_path: Path,
    exporter: HTMLExporter,
    destination: Path,
    dry_run: bool,
    overwrite: bool,
    handler: ProgressHandler,
) -> ConvertStatus:
    """
    converts a single markdown file.

    Returns:
        "converted" when written (or would be, in a dry run), "skipped" when an
        existing file was kept, "failed" if reading or rendering raised
    """
    try:
        document = MarkdownDocument.from_path(file_path)
        written = exporter.export(
            document=document,
            destination=str(destination),
            dry_run=dry_run,
            overwrite=overwrite,
        )
    except Exception as e:  # pylint: disable=broad-exception-caught
        handler.log_error(f"Failed: {file_path.name}: {e}")
        handler.update(file_path.name)
        return "failed"

    handler.update(file_path.name)
    if written is None and not dry_run:
        handler.log_info(f"Skipped existing output for {file_path.name}")
        return "skipped"
    return "converted"

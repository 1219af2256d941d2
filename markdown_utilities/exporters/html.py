"""HTML file exporter."""

import logging
from pathlib import Path
from typing import Optional

from markdown_utilities.core.markdown_ast import render_markdown_to_html
from markdown_utilities.core.models import MarkdownDocument
from markdown_utilities.exporters.base import Exporter
from markdown_utilities.renderers.utils.escaping import escape_html

logger = logging.getLogger(__name__)


class HTMLExporter(Exporter):  # pylint: disable=too-few-public-methods
    """exports markdown documents to HTML files."""

    def __init__(self, wrap_html: bool = False) -> None:
        self.wrap_html = wrap_html

    def output_path(self, document: MarkdownDocument, destination: str) -> Path:
        """returns the HTML path for a document: <destination>/<stem>.html."""
        return Path(destination) / f"{document.path.stem}.html"

    def export(
        self,
        document: MarkdownDocument,
        destination: str,
        dry_run: bool = False,
        overwrite: bool = False,
    ) -> Optional[Path]:
        """exports document to an HTML file, returning the path written if any."""
        output_path = self.output_path(document, destination)

        if dry_run:
            logger.info("Would write to: %s", output_path)
            return None

        if output_path.exists() and not overwrite:
            logger.info("Skipping existing file: %s", output_path)
            return None

        html_content = self._generate_html(document)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html_content, encoding="utf-8")
        logger.debug("Wrote %s", output_path)
        return output_path

    def _generate_html(self, document: MarkdownDocument) -> str:
        """generates HTML content for document."""
        body = render_markdown_to_html(document.text)
        if not self.wrap_html:
            return body

        title_escaped = escape_html(document.title)
        return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>{title_escaped}</title>
</head>
<body>
{body}
</body>
</html>"""

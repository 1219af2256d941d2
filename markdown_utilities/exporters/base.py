"""base exporter interface."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from markdown_utilities.core.models import MarkdownDocument


class Exporter(ABC):  # pylint: disable=too-few-public-methods
    """abstract base class for document exporters."""

    @abstractmethod
    def export(
        self,
        document: MarkdownDocument,
        destination: str,
        dry_run: bool = False,
        overwrite: bool = False,
    ) -> Optional[Path]:
        """
        Export a document under the destination directory.

        Returns:
            path of the written file, or None when nothing was written
            (dry run, or an existing file kept because overwrite is off)
        """

"""Data models for Markdown source documents."""

import re
from dataclasses import dataclass
from pathlib import Path

ATX_HEADING_PATTERN = re.compile(r"^ {0,3}#{1,6}[ \t]+(.+?)[ \t#]*$", re.MULTILINE)


@dataclass
class MarkdownDocument:
    """Markdown source read from a file."""

    path: Path
    text: str

    @classmethod
    def from_path(cls, path: Path) -> "MarkdownDocument":
        """reads a UTF-8 markdown file."""
        return cls(path=path, text=path.read_text(encoding="utf-8"))

    @property
    def title(self) -> str:
        """first ATX heading text, falling back to the file stem."""
        match = ATX_HEADING_PATTERN.search(self.text)
        if match:
            return match.group(1).strip()
        return self.path.stem

"""tests for markdown document model."""

from pathlib import Path

from markdown_utilities.core.models import MarkdownDocument


def test_from_path_reads_utf8(tmp_path: Path) -> None:
    """reads file content as UTF-8."""
    path = tmp_path / "note.md"
    path.write_text("# Café\n", encoding="utf-8")

    document = MarkdownDocument.from_path(path)

    assert document.path == path
    assert document.text == "# Café\n"


def test_title_from_first_heading() -> None:
    """title is the first ATX heading."""
    document = MarkdownDocument(
        path=Path("post.md"), text="intro\n\n## First ##\n\n# Second\n"
    )
    assert document.title == "First"


def test_title_falls_back_to_stem() -> None:
    """title is the file stem when there is no heading."""
    document = MarkdownDocument(path=Path("docs/post.md"), text="no heading here")
    assert document.title == "post"

"""Markdown to HTML renderer with full control over output format."""

from markdown_utilities.core.parser import parse_markdown
from markdown_utilities.renderers import render
from markdown_utilities.renderers.utils.video import rewrite_videos


def render_markdown_to_html(markdown: str) -> str:
    """
    Render markdown to an HTML fragment.

    Video shorthands are rewritten to raw HTML first, then the text is parsed
    with markdown-it-py and the resulting document tree is rendered node by node.

    Args:
        markdown: Input markdown text

    Returns:
        HTML string without any document wrapper
    """
    return render(parse_markdown(rewrite_videos(markdown)))

"""utility modules for node renderers."""

from markdown_utilities.renderers.utils.caption import Caption, split_caption
from markdown_utilities.renderers.utils.escaping import escape_attribute, escape_html
from markdown_utilities.renderers.utils.video import rewrite_videos

__all__ = [
    "Caption",
    "split_caption",
    "escape_attribute",
    "escape_html",
    "rewrite_videos",
]

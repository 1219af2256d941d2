"""video shorthand rewriting applied to markdown before parsing."""

import logging
import re

from markdown_utilities.renderers.utils.caption import split_caption

logger = logging.getLogger(__name__)

# @[Description | Attribution](/videos/file.mp4)
VIDEO_PATTERN = re.compile(r"@\[([^\]]+)\]\(([^)]+)\)")

VIDEO_FIGURE_CLASS = "media-center"
VIDEO_MIME_TYPE = "video/mp4"


def build_video_html(caption: str, url: str) -> str:
    """
    builds the figure HTML for one video shorthand.

    caption and url are inserted as-is: the shorthand is authored markdown and
    the fragment is passed through by the renderer as a raw HTML block.

    Args:
        caption: caption text from inside the brackets
        url: video URL from inside the parentheses

    Returns:
        single-line figure HTML fragment
    """
    parts = split_caption(caption)
    if parts.attribution is not None:
        figcaption = f"{parts.description}<br><i>{parts.attribution}</i>"
    else:
        figcaption = caption

    return (
        f'<figure class="{VIDEO_FIGURE_CLASS}">'
        f"<video controls>"
        f'<source src="{url}" type="{VIDEO_MIME_TYPE}">'
        f"</video>"
        f"<figcaption>{figcaption}</figcaption>"
        f"</figure>"
    )


def rewrite_videos(text: str) -> str:
    """
    replaces every video shorthand in markdown text with figure HTML.

    Args:
        text: raw markdown text

    Returns:
        markdown text with shorthands rewritten (unchanged if none match)
    """
    count = 0

    def replacer(match: re.Match[str]) -> str:
        nonlocal count
        count += 1
        return build_video_html(match.group(1), match.group(2))

    result = VIDEO_PATTERN.sub(replacer, text)
    if count:
        logger.debug("Rewrote %d video shorthand(s)", count)
    return result

"""image node renderer."""

from markdown_utilities.core.nodes import Image
from markdown_utilities.renderers import renders
from markdown_utilities.renderers.utils.caption import split_caption
from markdown_utilities.renderers.utils.escaping import escape_attribute, escape_html

IMAGE_FIGURE_CLASS = "article-image"


@renders(Image)
def render_image(node: Image) -> str:
    """
    renders an image as a figure with an optional caption.

    alt text "Description | Attribution" becomes the img alt (description only)
    and a figcaption with the attribution on its own italic line.

    Args:
        node: image node

    Returns:
        figure HTML
    """
    caption = split_caption(node.alt)

    parts = [
        f'<figure class="{IMAGE_FIGURE_CLASS}">',
        f'<img src="{escape_attribute(node.source or "")}" ',
    ]
    if caption.description:
        parts.append(f'alt="{escape_attribute(caption.description)}" ')
    parts.append("/>")

    if caption.description or caption.attribution is not None:
        parts.append("<figcaption>")
        if caption.description:
            parts.append(escape_html(caption.description))
        if caption.attribution is not None:
            parts.append(f"<br><i>{escape_html(caption.attribution)}</i>")
        parts.append("</figcaption>")

    parts.append("</figure>")
    return "".join(parts)

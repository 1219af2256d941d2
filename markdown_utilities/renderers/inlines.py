"""inline node renderers."""

from markdown_utilities.core.nodes import (
    Emphasis,
    InlineCode,
    InlineHTML,
    LineBreak,
    Link,
    SoftBreak,
    Strong,
    Text,
)
from markdown_utilities.renderers import render_children, renders
from markdown_utilities.renderers.utils.escaping import escape_attribute, escape_html


@renders(Text)
def render_text(node: Text) -> str:
    return escape_html(node.content)


@renders(Strong)
def render_strong(node: Strong) -> str:
    return f"<strong>{render_children(node.children)}</strong>"


@renders(Emphasis)
def render_emphasis(node: Emphasis) -> str:
    return f"<em>{render_children(node.children)}</em>"


@renders(Link)
def render_link(node: Link) -> str:
    """renders a link; a missing destination becomes an empty href."""
    href = escape_attribute(node.destination or "")
    return f'<a href="{href}">{render_children(node.children)}</a>'


@renders(InlineCode)
def render_inline_code(node: InlineCode) -> str:
    return f"<code>{escape_html(node.code)}</code>"


@renders(LineBreak)
def render_line_break(_node: LineBreak) -> str:
    return "<br>"


@renders(SoftBreak)
def render_soft_break(_node: SoftBreak) -> str:
    return " "


@renders(InlineHTML)
def render_inline_html(node: InlineHTML) -> str:
    return node.raw_html

"""block-level node renderers."""

from markdown_utilities.core.nodes import (
    BlockQuote,
    CodeBlock,
    Document,
    Heading,
    HTMLBlock,
    ListItem,
    OrderedList,
    Paragraph,
    ThematicBreak,
    UnorderedList,
)
from markdown_utilities.renderers import render_children, renders
from markdown_utilities.renderers.utils.escaping import escape_attribute, escape_html

DEFAULT_CODE_LANGUAGE = "plaintext"


@renders(Document)
def render_document(node: Document) -> str:
    return render_children(node.children)


@renders(Heading)
def render_heading(node: Heading) -> str:
    return f"<h{node.level}>{render_children(node.children)}</h{node.level}>"


@renders(Paragraph)
def render_paragraph(node: Paragraph) -> str:
    return f"<p>{render_children(node.children)}</p>"


@renders(CodeBlock)
def render_code_block(node: CodeBlock) -> str:
    """renders code with a language-* class, plaintext when unspecified."""
    language = escape_attribute(node.language or DEFAULT_CODE_LANGUAGE)
    return (
        f'<pre><code class="language-{language}">'
        f"{escape_html(node.code)}</code></pre>"
    )


@renders(UnorderedList)
def render_unordered_list(node: UnorderedList) -> str:
    return f"<ul>{render_children(node.children)}</ul>"


@renders(OrderedList)
def render_ordered_list(node: OrderedList) -> str:
    return f"<ol>{render_children(node.children)}</ol>"


@renders(ListItem)
def render_list_item(node: ListItem) -> str:
    return f"<li>{render_children(node.children)}</li>"


@renders(BlockQuote)
def render_block_quote(node: BlockQuote) -> str:
    return f"<blockquote>{render_children(node.children)}</blockquote>"


@renders(ThematicBreak)
def render_thematic_break(_node: ThematicBreak) -> str:
    return "<hr>"


@renders(HTMLBlock)
def render_html_block(node: HTMLBlock) -> str:
    """passes raw HTML through unescaped."""
    return node.raw_html

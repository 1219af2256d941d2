"""Parser for Markdown source into the document tree model."""

import logging
from typing import Any, Callable, Optional

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from markdown_utilities.core.nodes import (
    BlockQuote,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    HTMLBlock,
    Image,
    InlineCode,
    InlineHTML,
    LineBreak,
    Link,
    ListItem,
    Node,
    OrderedList,
    Paragraph,
    SoftBreak,
    Strong,
    Text,
    ThematicBreak,
    UnorderedList,
)

logger = logging.getLogger(__name__)


def parse_markdown(markdown: str, md: Optional[MarkdownIt] = None) -> Document:
    """
    Parse Markdown text into a Document tree.

    Uses markdown-it-py with the CommonMark preset for tokenizing, then maps
    its syntax tree onto our own node types.

    Args:
        markdown: Input markdown text
        md: parser to use instead of a fresh CommonMark instance

    Returns:
        Document root node
    """
    if md is None:
        md = MarkdownIt("commonmark")
    root = SyntaxTreeNode(md.parse(markdown))
    return Document(children=_convert_children(root))


def _convert_children(node: SyntaxTreeNode) -> tuple[Node, ...]:
    """Convert child syntax nodes, splicing transparent containers in place."""
    converted: list[Node] = []

    for child in node.children:
        # markdown-it leaves empty text tokens around emphasis delimiters
        if child.type in ("text", "text_special") and not child.content:
            continue

        builder = _BUILDERS.get(child.type)
        if builder is not None:
            converted.append(builder(child))
            continue

        # inline containers and unknown plugin nodes contribute only their children
        if child.type != "inline":
            logger.debug("Splicing children of unsupported node: %s", child.type)
        converted.extend(_convert_children(child))

    return tuple(converted)


def _plain_text(node: SyntaxTreeNode) -> str:
    """flattens inline children to plain text (used for image alt)."""
    parts = []
    for child in node.children:
        if child.type in ("text", "text_special", "code_inline"):
            parts.append(child.content)
        elif child.type in ("softbreak", "hardbreak"):
            parts.append("\n")
        else:
            parts.append(_plain_text(child))
    return "".join(parts)


def _attr(node: SyntaxTreeNode, name: str) -> Any:
    return node.attrs.get(name)


def _heading(node: SyntaxTreeNode) -> Node:
    # tag is "h1".."h6"
    return Heading(level=int(node.tag[1:]), children=_convert_children(node))


def _fence(node: SyntaxTreeNode) -> Node:
    info = node.info.strip()
    language = info.split()[0] if info else None
    return CodeBlock(code=node.content, language=language)


def _ordered_list(node: SyntaxTreeNode) -> Node:
    start = _attr(node, "start")
    return OrderedList(
        children=_convert_children(node),
        start=int(start) if start is not None else 1,
    )


_BUILDERS: dict[str, Callable[[SyntaxTreeNode], Node]] = {
    "heading": _heading,
    "paragraph": lambda n: Paragraph(children=_convert_children(n)),
    "text": lambda n: Text(content=n.content),
    "text_special": lambda n: Text(content=n.content),
    "strong": lambda n: Strong(children=_convert_children(n)),
    "em": lambda n: Emphasis(children=_convert_children(n)),
    "link": lambda n: Link(
        destination=_attr(n, "href"), children=_convert_children(n)
    ),
    "image": lambda n: Image(source=_attr(n, "src"), alt=_plain_text(n)),
    "fence": _fence,
    "code_block": lambda n: CodeBlock(code=n.content),
    "code_inline": lambda n: InlineCode(code=n.content),
    "bullet_list": lambda n: UnorderedList(children=_convert_children(n)),
    "ordered_list": _ordered_list,
    "list_item": lambda n: ListItem(children=_convert_children(n)),
    "blockquote": lambda n: BlockQuote(children=_convert_children(n)),
    "hardbreak": lambda _n: LineBreak(),
    "softbreak": lambda _n: SoftBreak(),
    "hr": lambda _n: ThematicBreak(),
    "html_block": lambda n: HTMLBlock(raw_html=n.content),
    "html_inline": lambda n: InlineHTML(raw_html=n.content),
}

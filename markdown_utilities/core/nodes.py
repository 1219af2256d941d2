"""Document tree model produced from parsed Markdown."""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Document:
    """Root of a parsed document."""

    children: tuple["Node", ...] = ()


@dataclass(frozen=True)
class Heading:
    """ATX or setext heading."""

    level: int  # 1-6
    children: tuple["Node", ...] = ()


@dataclass(frozen=True)
class Paragraph:
    children: tuple["Node", ...] = ()


@dataclass(frozen=True)
class Text:
    content: str


@dataclass(frozen=True)
class Strong:
    children: tuple["Node", ...] = ()


@dataclass(frozen=True)
class Emphasis:
    children: tuple["Node", ...] = ()


@dataclass(frozen=True)
class Link:
    """Inline link; destination is None when the parser gave none."""

    destination: Optional[str]
    children: tuple["Node", ...] = ()


@dataclass(frozen=True)
class Image:
    """Image with its alt text flattened to plain text."""

    source: Optional[str]
    alt: str = ""


@dataclass(frozen=True)
class CodeBlock:
    """Fenced or indented code block."""

    code: str
    language: Optional[str] = None


@dataclass(frozen=True)
class InlineCode:
    code: str


@dataclass(frozen=True)
class UnorderedList:
    children: tuple["Node", ...] = ()


@dataclass(frozen=True)
class OrderedList:
    children: tuple["Node", ...] = ()
    start: int = 1


@dataclass(frozen=True)
class ListItem:
    children: tuple["Node", ...] = ()


@dataclass(frozen=True)
class BlockQuote:
    children: tuple["Node", ...] = ()


@dataclass(frozen=True)
class LineBreak:
    """Hard line break."""


@dataclass(frozen=True)
class SoftBreak:
    """Soft line break inside a paragraph."""


@dataclass(frozen=True)
class ThematicBreak:
    pass


@dataclass(frozen=True)
class HTMLBlock:
    """Raw HTML block, passed through untouched."""

    raw_html: str


@dataclass(frozen=True)
class InlineHTML:
    """Raw inline HTML, passed through untouched."""

    raw_html: str


Node = Union[
    Document,
    Heading,
    Paragraph,
    Text,
    Strong,
    Emphasis,
    Link,
    Image,
    CodeBlock,
    InlineCode,
    UnorderedList,
    OrderedList,
    ListItem,
    BlockQuote,
    LineBreak,
    SoftBreak,
    ThematicBreak,
    HTMLBlock,
    InlineHTML,
]

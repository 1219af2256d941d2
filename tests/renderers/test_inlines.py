"""tests for inline node renderers."""

from markdown_utilities.core.nodes import (
    Emphasis,
    InlineCode,
    InlineHTML,
    LineBreak,
    Link,
    ListItem,
    SoftBreak,
    Strong,
    Text,
)
from markdown_utilities.renderers import render


def test_text_is_escaped() -> None:
    """escapes special characters in text."""
    assert render(Text("5 > 3 & 'a' < \"b\"")) == (
        "5 &gt; 3 &amp; &#39;a&#39; &lt; &quot;b&quot;"
    )


def test_strong_and_emphasis() -> None:
    """renders strong and em tags."""
    assert render(Strong(children=(Text("b"),))) == "<strong>b</strong>"
    assert render(Emphasis(children=(Text("i"),))) == "<em>i</em>"


def test_link_escapes_destination() -> None:
    """href uses attribute escaping."""
    node = Link(destination='/a?b=1&c="2"', children=(Text("x"),))
    assert render(node) == '<a href="/a?b=1&amp;c=&quot;2&quot;">x</a>'


def test_link_without_destination() -> None:
    """missing destination renders an empty href."""
    assert render(Link(destination=None, children=(Text("x"),))) == '<a href="">x</a>'


def test_inline_code_is_escaped() -> None:
    """escapes code content."""
    assert render(InlineCode("<br>")) == "<code>&lt;br&gt;</code>"


def test_breaks() -> None:
    """hard break is <br>, soft break is a space."""
    assert render(LineBreak()) == "<br>"
    assert render(SoftBreak()) == " "


def test_inline_html_is_verbatim() -> None:
    """raw inline HTML is not escaped."""
    assert render(InlineHTML("<span class='x'>")) == "<span class='x'>"


def test_nested_inline_formatting() -> None:
    """emphasis inside a link inside a list item nests in order."""
    node = ListItem(
        children=(
            Link(
                destination="/x",
                children=(Text("see "), Emphasis(children=(Text("this"),))),
            ),
        )
    )
    assert render(node) == '<li><a href="/x">see <em>this</em></a></li>'

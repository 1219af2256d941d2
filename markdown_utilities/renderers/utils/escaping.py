"""HTML escaping for text content and attribute values."""


def escape_html(text: str) -> str:
    """
    escapes text for use as HTML element content.

    Args:
        text: raw text

    Returns:
        text with & < > " ' replaced by entities
    """
    # & must go first so inserted entities aren't escaped again
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )


def escape_attribute(value: str) -> str:
    """
    escapes a value for use inside a double-quoted HTML attribute.

    Args:
        value: raw attribute value

    Returns:
        value with & " ' replaced by entities (angle brackets kept)
    """
    return value.replace("&", "&amp;").replace('"', "&quot;").replace("'", "&#39;")

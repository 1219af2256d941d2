"""caption splitting for image alt text and video captions."""

from dataclasses import dataclass
from typing import Optional

CAPTION_SEPARATOR = "|"

# spaces and tabs only; newlines from soft breaks in alt text are kept
_TRIMMED = " \t"


@dataclass(frozen=True)
class Caption:
    """caption split into a description and an optional attribution."""

    description: str
    attribution: Optional[str] = None


def split_caption(text: str) -> Caption:
    """
    splits caption text on the first "|" into description and attribution.

    Empty pieces are dropped before splitting: leading separators are skipped
    and an empty tail means there is no attribution. Both sides are trimmed,
    and any further "|" stays in the attribution.

    Args:
        text: caption or alt text, e.g. "A lighthouse | Coastal Authority"

    Returns:
        Caption with attribution None when the text has only one piece; text made
        only of separators is returned untouched as the description
    """
    remainder = text.lstrip(CAPTION_SEPARATOR)
    if not remainder:
        return Caption(description=text)

    description, _, attribution = remainder.partition(CAPTION_SEPARATOR)
    if not attribution:
        return Caption(description=description.strip(_TRIMMED))

    return Caption(
        description=description.strip(_TRIMMED),
        attribution=attribution.strip(_TRIMMED),
    )

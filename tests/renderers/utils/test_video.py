"""tests for video shorthand rewriting."""

from markdown_utilities.renderers.utils.video import build_video_html, rewrite_videos


def test_rewrites_shorthand_with_attribution() -> None:
    """rewrites @[...](...) into a figure with a split caption."""
    result = rewrite_videos("@[Sunset over the bay | Photo: J. Doe](/videos/clip.mp4)")
    assert result.startswith('<figure class="media-center">')
    assert (
        '<video controls><source src="/videos/clip.mp4" type="video/mp4">' in result
    )
    assert (
        "<figcaption>Sunset over the bay<br><i>Photo: J. Doe</i></figcaption>"
        in result
    )
    assert result.endswith("</figure>")


def test_caption_without_separator() -> None:
    """uses the caption unchanged when it has no |."""
    result = rewrite_videos("@[Just a caption](/v.mp4)")
    assert "<figcaption>Just a caption</figcaption>" in result
    assert "<br>" not in result


def test_multiple_separators_keep_rest_in_attribution() -> None:
    """only the first | splits the caption."""
    result = rewrite_videos("@[A | B | C](/v.mp4)")
    assert "<figcaption>A<br><i>B | C</i></figcaption>" in result


def test_empty_piece_keeps_raw_caption() -> None:
    """a caption that doesn't split into two pieces is used unchanged."""
    assert "<figcaption>Desc|</figcaption>" in rewrite_videos("@[Desc|](/v.mp4)")
    assert "<figcaption>|Credit</figcaption>" in rewrite_videos("@[|Credit](/v.mp4)")


def test_no_match_returns_input_unchanged() -> None:
    """text without shorthands is returned as-is."""
    text = "Plain *markdown* with [a link](/x) and ![img](/i.png)"
    assert rewrite_videos(text) == text


def test_malformed_shorthand_is_untouched() -> None:
    """unbalanced brackets or parens never match."""
    for text in ("@[caption(/v.mp4)", "@[caption](/v.mp4", "@[](/v.mp4)", "@[c]()"):
        assert rewrite_videos(text) == text


def test_multiple_shorthands_each_target_their_url() -> None:
    """each shorthand becomes its own fragment in document order."""
    text = "@[First](/one.mp4)\n\nbetween\n\n@[Second | Credit](/two.mp4)"
    result = rewrite_videos(text)

    first = result.index('src="/one.mp4"')
    second = result.index('src="/two.mp4"')
    assert first < result.index("between") < second
    assert "<figcaption>First</figcaption>" in result
    assert "<figcaption>Second<br><i>Credit</i></figcaption>" in result
    assert result.count("<figure") == 2


def test_adjacent_shorthands() -> None:
    """back-to-back shorthands are both rewritten."""
    result = rewrite_videos("@[A](/a.mp4)@[B](/b.mp4)")
    assert result == build_video_html("A", "/a.mp4") + build_video_html("B", "/b.mp4")


def test_surrounding_text_is_preserved() -> None:
    """text around a shorthand is kept verbatim."""
    result = rewrite_videos("before @[Clip](/c.mp4) after")
    assert result == f"before {build_video_html('Clip', '/c.mp4')} after"


def test_caption_is_not_escaped() -> None:
    """caption text is inserted as literal HTML."""
    result = rewrite_videos("@[<b>Bold</b> & co](/v.mp4)")
    assert "<figcaption><b>Bold</b> & co</figcaption>" in result

"""
Tests for rich text rendering and annotation composition.
"""

import pytest
from builders import rich_text
from notion_blocks_markdown.api.models import Annotations, parse_rich_text
from notion_blocks_markdown.render.rich_text import (
    apply_annotations,
    link_target,
    render_rich_texts,
    resolve_mention,
)


def render(*spans):
    return render_rich_texts(parse_rich_text(list(spans)))


def test_bold_wraps_inside_italic():
    annotations = Annotations(bold=True, italic=True)
    assert apply_annotations(annotations, "x") == "_**x**_"


def test_all_annotations_nest_in_fixed_order():
    annotations = Annotations(
        bold=True,
        italic=True,
        strikethrough=True,
        underline=True,
        code=True,
        color="red",
    )
    assert (
        apply_annotations(annotations, "x")
        == "<span data-color='red'>`<u>~~_**x**_~~</u>`</span>"
    )


@pytest.mark.parametrize(
    "flags, expected",
    [
        ({}, "x"),
        ({"strikethrough": True}, "~~x~~"),
        ({"underline": True, "code": True}, "`<u>x</u>`"),
        ({"bold": True, "color": "blue_background"}, "<span data-color='blue_background'>**x**</span>"),
        ({"color": "default"}, "x"),
    ],
)
def test_single_and_mixed_annotations(flags, expected):
    assert apply_annotations(Annotations(**flags), "x") == expected


def test_text_with_link_object():
    span = rich_text("docs", link={"url": "https://example.com"}, bold=True)
    assert render(span) == "[**docs**](https://example.com)"


def test_text_with_bare_url_link_matches_object_link():
    with_object = rich_text("docs", link={"url": "https://example.com"})
    with_string = rich_text("docs", link="https://example.com")
    assert render(with_object) == render(with_string) == "[docs](https://example.com)"


def test_link_target_without_link():
    assert link_target(None) is None


def test_mention_renders_annotated_plain_text():
    mention = {
        "type": "mention",
        "mention": {"type": "user", "user": {"id": "u1"}},
        "annotations": {"italic": True},
        "plain_text": "@Ada",
    }
    assert render(mention) == "_@Ada_"


@pytest.mark.parametrize("kind", ["user", "page", "database", "date"])
def test_every_mention_kind_uses_plain_text(kind):
    mention = parse_rich_text(
        [{"type": "mention", "mention": {"type": kind}, "plain_text": "ref"}]
    )[0]
    assert resolve_mention(mention) == "ref"


def test_equation_is_wrapped_in_dollars_before_annotations():
    equation = {
        "type": "equation",
        "equation": {"expression": "E=mc^2"},
        "annotations": {"code": True},
        "plain_text": "E=mc^2",
    }
    assert render(equation) == "`$E=mc^2$`"


def test_rendering_preserves_span_order():
    first = rich_text("Hello ", bold=True)
    second = rich_text("world", italic=True)
    assert render(first, second) == render(first) + render(second)
    assert render(first, second) == "**Hello **_world_"


def test_raw_content_is_not_escaped():
    assert render(rich_text("<b>*x*</b>")) == "<b>*x*</b>"


def test_empty_sequence_renders_empty_string():
    assert render_rich_texts([]) == ""


def test_unknown_span_kinds_are_skipped():
    spans = [
        rich_text("a"),
        {"type": "sticker", "plain_text": "?", "sticker": {"id": "s1"}},
        rich_text("b"),
    ]
    assert render(*spans) == "ab"

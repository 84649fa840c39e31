from typing import List, Optional, Sequence, Union
from notion_blocks_markdown.api.models import (
    Annotations,
    Link,
    RichText,
    RichTextEquation,
    RichTextMention,
    RichTextText,
)

# Wrapping order is part of the output format: bold is innermost, color outermost
ANNOTATION_ORDER = ("bold", "italic", "strikethrough", "underline", "code", "color")


def _annotate_modifier(modifier: str, content: str, color: str = "default") -> str:
    if modifier == "bold":
        return f"**{content}**"
    if modifier == "italic":
        return f"_{content}_"
    if modifier == "strikethrough":
        return f"~~{content}~~"
    if modifier == "underline":
        return f"<u>{content}</u>"
    if modifier == "code":
        return f"`{content}`"
    if modifier == "color" and color != "default":
        return f"<span data-color='{color}'>{content}</span>"
    return content


def apply_annotations(annotations: Annotations, content: str) -> str:
    """Wrap content in the markdown/HTML for every active annotation."""
    annotated = content
    for modifier in ANNOTATION_ORDER:
        value = getattr(annotations, modifier)
        if value:
            annotated = _annotate_modifier(modifier, annotated, annotations.color)
    return annotated


def link_target(link: Optional[Union[Link, str]]) -> Optional[str]:
    """Resolve a text link given either as {"url": ...} or as a bare URL."""
    if isinstance(link, Link):
        return link.url or None
    return link or None


def render_text(rich_text: RichTextText) -> str:
    content = apply_annotations(rich_text.annotations, rich_text.text.content)

    target = link_target(rich_text.text.link)
    if target:
        return f"[{content}]({target})"
    return content


def resolve_mention(mention: RichTextMention) -> str:
    """Text shown for a mention.

    Users, pages, databases and dates all fall back to the plain text the
    API already computed; this is the place to format them differently.
    """
    return mention.plain_text


def render_mention(mention: RichTextMention) -> str:
    return apply_annotations(mention.annotations, resolve_mention(mention))


def render_equation(equation: RichTextEquation) -> str:
    return apply_annotations(
        equation.annotations, f"${equation.equation.expression}$"
    )


def render_rich_texts(rich_texts: Sequence[RichText]) -> str:
    """Render rich text spans left to right into one string."""
    parts: List[str] = []
    for rich_text in rich_texts:
        match rich_text.type:
            case "text":
                parts.append(render_text(rich_text))
            case "mention":
                parts.append(render_mention(rich_text))
            case "equation":
                parts.append(render_equation(rich_text))
            case _:
                pass
    return "".join(parts)

from typing import Any, NamedTuple, Optional
from notion_blocks_markdown.api.models import (
    AudioBlock,
    BulletedListItemBlock,
    CalloutBlock,
    CalloutIcon,
    CodeBlock,
    EmbedBlock,
    FileBlock,
    FileObject,
    HeadingBlock,
    ImageBlock,
    NumberedListItemBlock,
    ParagraphBlock,
    PdfBlock,
    QuoteBlock,
    ToDoBlock,
    ToggleBlock,
    VideoBlock,
)
from .errors import ConfigurationError, ValidationError
from .options import RendererOptions
from .rich_text import render_rich_texts

EOL_MD = "\n"

# Four spaces keep continuation lines inside the list item
LIST_CONTINUATION_INDENT = "    "


class ResolvedFile(NamedTuple):
    url: str
    caption: str


class ToggleTemplate(NamedTuple):
    """A toggle wrapper with a single hole for its already rendered children."""

    head: str
    tail: str

    def fill(self, children: str) -> str:
        return f"{self.head}{children}{self.tail}"


def resolve_file(file: FileObject) -> ResolvedFile:
    """Extract the URL of a file reference and its caption (URL when uncaptioned)."""
    url = file.url
    caption = render_rich_texts(file.caption) if file.caption is not None else url
    return ResolvedFile(url=url, caption=caption)


def _unsupported_media(file: ResolvedFile) -> str:
    return f"To be supported: {file.url} with {file.caption}" + EOL_MD


def _dimension(result: Any, name: str) -> Optional[int]:
    if isinstance(result, dict):
        return result.get(name)
    return getattr(result, name, None)


def render_callout_icon(icon: Optional[CalloutIcon]) -> str:
    if icon is None:
        return ""

    match icon.type:
        case "emoji":
            return f"<span notion-callout-emoji>{icon.emoji}</span>"
        case "external":
            url = icon.external.url if icon.external else ""
            return (
                f"<img notion-callout-external src='{url}' "
                "alt='notion-callout-external-link'/>"
            )
        case "file":
            # Notion-hosted callout icons are not rendered yet
            return "notion-callout-file"
        case _:
            return ""


class BlockRenderers:
    """One rendering rule per block type."""

    def __init__(self, options: Optional[RendererOptions] = None):
        self.options = options or RendererOptions()

    def paragraph(self, block: ParagraphBlock) -> str:
        rich_text = block.paragraph.rich_text
        if self.options.empty_paragraph_to_non_breaking_space and not rich_text:
            text = "&nbsp;"
        else:
            text = render_rich_texts(rich_text)
        return EOL_MD + text + EOL_MD

    def heading(self, block: HeadingBlock) -> str:
        text = render_rich_texts(block.payload.rich_text)
        return EOL_MD + "#" * block.level + " " + text + EOL_MD

    def bulleted_list_item(self, block: BulletedListItemBlock) -> str:
        # https://www.markdownguide.org/basic-syntax/#adding-elements-in-lists
        text = render_rich_texts(block.bulleted_list_item.rich_text)
        return "* " + text.replace("\n", "\n" + LIST_CONTINUATION_INDENT) + EOL_MD

    def numbered_list_item(self, block: NumberedListItemBlock) -> str:
        # Always "1."; markdown engines number consecutive items themselves
        text = render_rich_texts(block.numbered_list_item.rich_text)
        return "1. " + text.replace("\n", "\n" + LIST_CONTINUATION_INDENT) + EOL_MD

    def to_do(self, block: ToDoBlock) -> str:
        mark = "x" if block.to_do.checked else " "
        return f"- [{mark}] " + render_rich_texts(block.to_do.rich_text) + EOL_MD

    def quote(self, block: QuoteBlock) -> str:
        text = render_rich_texts(block.quote.rich_text)
        return EOL_MD + "> " + text.replace("\n", "\n> ") + EOL_MD

    def callout(self, block: CalloutBlock) -> str:
        callout = (
            "<div notion-callout>\n"
            f"  {render_callout_icon(block.callout.icon)}\n"
            "  <span notion-callout-text>\n"
            f"    {render_rich_texts(block.callout.rich_text)}\n"
            "  </span>\n"
            "</div>"
        )
        return EOL_MD + callout + EOL_MD

    def code(self, block: CodeBlock) -> str:
        language = (block.code.language or "").lower()

        # Only the first run is used, and its raw content without annotations
        content = ""
        if block.code.rich_text:
            first = block.code.rich_text[0]
            content = first.text.content if first.type == "text" else first.plain_text

        return f"```{language}\n{content}\n```" + EOL_MD

    def toggle(self, block: ToggleBlock) -> ToggleTemplate:
        summary = render_rich_texts(block.toggle.rich_text)
        return ToggleTemplate(
            head=f"<details><summary>{summary}</summary>", tail="</details>"
        )

    async def image(self, block: ImageBlock) -> str:
        url, caption = resolve_file(block.image)

        if self.options.image_as_figure:
            return (
                "\n<figure notion-figure>\n"
                f"  <img src='{url}' alt='{caption}'>\n"
                f"  <figcaption notion-figcaption>{caption}</figcaption>\n"
                "</figure>\n"
            ) + EOL_MD

        if self.options.add_image_size_to_alt_text:
            if self.options.get_image_size is None:
                raise ConfigurationError(
                    "get_image_size is required if add_image_size_to_alt_text is true"
                )

            result = await self.options.get_image_size(url)
            width = _dimension(result, "width")
            height = _dimension(result, "height")
            if not width or not height:
                raise ValidationError(f"Could not find width/height for image {url}")

            return f"![{caption}|{width}x{height}]({url})" + EOL_MD

        return f"![{caption}]({url})" + EOL_MD

    def audio(self, block: AudioBlock) -> str:
        url, caption = resolve_file(block.audio)
        return f"![{caption}]({url})"

    def video(self, block: VideoBlock) -> str:
        file = resolve_file(block.video)
        handled, iframe_or_url = self.options.resolve_video_embed(file.url)
        if handled:
            return EOL_MD + iframe_or_url + EOL_MD
        return _unsupported_media(file)

    def file(self, block: FileBlock) -> str:
        return _unsupported_media(resolve_file(block.file))

    def pdf(self, block: PdfBlock) -> str:
        url, caption = resolve_file(block.pdf)
        return (
            "\n<figure>\n"
            f"  <object data='{url}' type='application/pdf'></object>\n"
            f"  <figcaption>{caption}</figcaption>\n"
            "</figure>\n"
        ) + EOL_MD

    def embed(self, block: EmbedBlock) -> str:
        embedded = f"<iframe src='{block.embed.url}'></iframe>"

        if block.embed.caption is not None:
            return (
                "\n<figure>\n"
                f"  {embedded}\n"
                f"  <figcaption>{render_rich_texts(block.embed.caption)}</figcaption>\n"
                "</figure>"
            ) + EOL_MD

        return embedded + EOL_MD

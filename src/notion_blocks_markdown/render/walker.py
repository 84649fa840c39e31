from typing import Any, List, Optional, Sequence
from notion_blocks_markdown.api.models import Block, parse_blocks
from .blocks import EOL_MD, BlockRenderers
from .options import RendererOptions

UNSUPPORTED_TEXT = "NotionAPI Unsupported"


class MarkdownRenderer:
    """Renders a tree of Notion blocks into markdown with embedded HTML."""

    def __init__(self, options: Optional[RendererOptions] = None):
        self.options = options or RendererOptions()
        self.blocks = BlockRenderers(self.options)

    async def render(self, blocks: Sequence[Block], depth: int = 0) -> str:
        """Render blocks in document order; children are indented by two spaces per level.

        Awaits the image size lookup (when configured) one image at a time, in
        document order. Any failure aborts the whole render.
        """
        parts: List[str] = []

        for block in blocks:
            children = ""
            if block.children:
                children = await self.render(block.children, depth + 2)

            prefix = " " * depth

            match block.type:
                case "paragraph":
                    parts.append(prefix + self.blocks.paragraph(block) + children)
                case "heading_1" | "heading_2" | "heading_3":
                    parts.append(prefix + self.blocks.heading(block) + children)
                case "bulleted_list_item":
                    parts.append(
                        prefix + self.blocks.bulleted_list_item(block) + children
                    )
                case "numbered_list_item":
                    parts.append(
                        prefix + self.blocks.numbered_list_item(block) + children
                    )
                case "to_do":
                    parts.append(prefix + self.blocks.to_do(block) + children)
                case "quote":
                    parts.append(prefix + self.blocks.quote(block) + children)
                case "callout":
                    parts.append(prefix + self.blocks.callout(block) + children)
                case "code":
                    parts.append(prefix + self.blocks.code(block) + children)
                case "toggle":
                    parts.append(prefix + self.blocks.toggle(block).fill(children))
                case "image":
                    parts.append(prefix + await self.blocks.image(block) + children)
                case "audio":
                    parts.append(prefix + self.blocks.audio(block) + children)
                case "video":
                    parts.append(prefix + self.blocks.video(block) + children)
                case "file":
                    parts.append(prefix + self.blocks.file(block) + children)
                case "pdf":
                    parts.append(prefix + self.blocks.pdf(block) + children)
                case "embed":
                    parts.append(prefix + self.blocks.embed(block) + children)
                case "divider":
                    parts.append(prefix + EOL_MD + "---" + EOL_MD + children)
                case "unsupported":
                    parts.append(prefix + UNSUPPORTED_TEXT + EOL_MD * 2 + children)
                case _:
                    pass

        return "".join(parts) + EOL_MD


async def render_blocks(
    blocks: Sequence[Any], options: Optional[RendererOptions] = None
) -> str:
    """Render raw Notion API block dictionaries (or block models) to markdown."""
    return await MarkdownRenderer(options).render(parse_blocks(list(blocks)))

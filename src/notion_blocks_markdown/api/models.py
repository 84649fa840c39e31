from typing import Annotated, Any, List, Literal, Optional, Union
from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
    model_validator,
)


class Annotations(BaseModel):
    model_config = ConfigDict(frozen=True)

    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    underline: bool = False
    code: bool = False
    color: str = "default"


class Link(BaseModel):
    url: str


class TextContent(BaseModel):
    content: str = ""
    # The API sends {"url": ...}; hand-built documents often pass the URL directly
    link: Optional[Union[Link, str]] = None


class MentionContent(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: str


class EquationContent(BaseModel):
    expression: str


class _RichTextBase(BaseModel):
    annotations: Annotations = Field(default_factory=Annotations)
    plain_text: str = ""
    href: Optional[str] = None


class RichTextText(_RichTextBase):
    type: Literal["text"] = "text"
    text: TextContent


class RichTextMention(_RichTextBase):
    type: Literal["mention"] = "mention"
    mention: MentionContent


class RichTextEquation(_RichTextBase):
    type: Literal["equation"] = "equation"
    equation: EquationContent


class UnknownRichText(_RichTextBase):
    """A span of a kind the renderer does not know; parsed, then skipped."""

    model_config = ConfigDict(extra="allow")

    type: str


_RICH_TEXT_TYPES = {"text", "mention", "equation"}


def _rich_text_tag(value: Any) -> str:
    if isinstance(value, dict):
        rich_text_type = value.get("type")
    else:
        rich_text_type = getattr(value, "type", None)
    return rich_text_type if rich_text_type in _RICH_TEXT_TYPES else "unknown"


RichText = Annotated[
    Union[
        Annotated[RichTextText, Tag("text")],
        Annotated[RichTextMention, Tag("mention")],
        Annotated[RichTextEquation, Tag("equation")],
        Annotated[UnknownRichText, Tag("unknown")],
    ],
    Discriminator(_rich_text_tag),
]


class ExternalFile(BaseModel):
    url: str


class HostedFile(BaseModel):
    url: str
    expiry_time: Optional[str] = None


class BlockPayload(BaseModel):
    """Type-specific body of a block. Children hang off the payload."""

    children: Optional[List["AnyBlock"]] = None


class RichTextPayload(BlockPayload):
    rich_text: List[RichText] = Field(default_factory=list)
    color: Optional[str] = None


class HeadingPayload(RichTextPayload):
    is_toggleable: bool = False


class ToDoPayload(RichTextPayload):
    checked: bool = False


class CalloutIcon(BaseModel):
    type: str
    emoji: Optional[str] = None
    external: Optional[ExternalFile] = None
    file: Optional[HostedFile] = None


class CalloutPayload(RichTextPayload):
    icon: Optional[CalloutIcon] = None


class CodePayload(BlockPayload):
    rich_text: List[RichText] = Field(default_factory=list)
    language: Optional[str] = None
    caption: List[RichText] = Field(default_factory=list)


class FileObject(BlockPayload):
    """File reference shared by image, audio, video, file and pdf blocks."""

    type: str
    external: Optional[ExternalFile] = None
    file: Optional[HostedFile] = None
    caption: Optional[List[RichText]] = None
    name: Optional[str] = None

    @property
    def url(self) -> str:
        if self.type == "external" and self.external:
            return self.external.url
        if self.type == "file" and self.file:
            return self.file.url
        return ""


class EmbedPayload(BlockPayload):
    url: str
    caption: Optional[List[RichText]] = None


class UnsupportedPayload(BlockPayload):
    model_config = ConfigDict(extra="allow")


class Block(BaseModel):
    id: Optional[str] = None
    type: str
    has_children: bool = False

    @property
    def payload(self) -> Optional[BlockPayload]:
        value = getattr(self, self.type, None)
        return value if isinstance(value, BlockPayload) else None

    @property
    def children(self) -> List["Block"]:
        payload = self.payload
        if self.has_children and payload is not None and payload.children:
            return payload.children
        return []


class ParagraphBlock(Block):
    type: Literal["paragraph"] = "paragraph"
    paragraph: RichTextPayload = Field(default_factory=RichTextPayload)


class HeadingBlock(Block):
    @property
    def level(self) -> int:
        return int(self.type.split("_")[1])


class Heading1Block(HeadingBlock):
    type: Literal["heading_1"] = "heading_1"
    heading_1: HeadingPayload = Field(default_factory=HeadingPayload)


class Heading2Block(HeadingBlock):
    type: Literal["heading_2"] = "heading_2"
    heading_2: HeadingPayload = Field(default_factory=HeadingPayload)


class Heading3Block(HeadingBlock):
    type: Literal["heading_3"] = "heading_3"
    heading_3: HeadingPayload = Field(default_factory=HeadingPayload)


class BulletedListItemBlock(Block):
    type: Literal["bulleted_list_item"] = "bulleted_list_item"
    bulleted_list_item: RichTextPayload = Field(default_factory=RichTextPayload)


class NumberedListItemBlock(Block):
    type: Literal["numbered_list_item"] = "numbered_list_item"
    numbered_list_item: RichTextPayload = Field(default_factory=RichTextPayload)


class ToDoBlock(Block):
    type: Literal["to_do"] = "to_do"
    to_do: ToDoPayload = Field(default_factory=ToDoPayload)


class ToggleBlock(Block):
    type: Literal["toggle"] = "toggle"
    toggle: RichTextPayload = Field(default_factory=RichTextPayload)


class QuoteBlock(Block):
    type: Literal["quote"] = "quote"
    quote: RichTextPayload = Field(default_factory=RichTextPayload)


class CalloutBlock(Block):
    type: Literal["callout"] = "callout"
    callout: CalloutPayload = Field(default_factory=CalloutPayload)


class CodeBlock(Block):
    type: Literal["code"] = "code"
    code: CodePayload = Field(default_factory=CodePayload)


class ImageBlock(Block):
    type: Literal["image"] = "image"
    image: FileObject


class AudioBlock(Block):
    type: Literal["audio"] = "audio"
    audio: FileObject


class VideoBlock(Block):
    type: Literal["video"] = "video"
    video: FileObject


class FileBlock(Block):
    type: Literal["file"] = "file"
    file: FileObject


class PdfBlock(Block):
    type: Literal["pdf"] = "pdf"
    pdf: FileObject


class EmbedBlock(Block):
    type: Literal["embed"] = "embed"
    embed: EmbedPayload


class DividerBlock(Block):
    type: Literal["divider"] = "divider"
    divider: BlockPayload = Field(default_factory=BlockPayload)


class UnsupportedBlock(Block):
    type: Literal["unsupported"] = "unsupported"
    unsupported: UnsupportedPayload = Field(default_factory=UnsupportedPayload)


class UnknownBlock(Block):
    """Any block type the renderer has no rule for (tables, bookmarks, ...)."""

    model_config = ConfigDict(extra="allow")

    @model_validator(mode="after")
    def _parse_payload(self) -> "UnknownBlock":
        # Columns and other containers still carry children the walker must visit
        extra = self.__pydantic_extra__ or {}
        value = extra.get(self.type)
        if isinstance(value, dict):
            extra[self.type] = UnsupportedPayload.model_validate(value)
        return self


_BLOCK_TYPES = {
    "paragraph": ParagraphBlock,
    "heading_1": Heading1Block,
    "heading_2": Heading2Block,
    "heading_3": Heading3Block,
    "bulleted_list_item": BulletedListItemBlock,
    "numbered_list_item": NumberedListItemBlock,
    "to_do": ToDoBlock,
    "toggle": ToggleBlock,
    "quote": QuoteBlock,
    "callout": CalloutBlock,
    "code": CodeBlock,
    "image": ImageBlock,
    "audio": AudioBlock,
    "video": VideoBlock,
    "file": FileBlock,
    "pdf": PdfBlock,
    "embed": EmbedBlock,
    "divider": DividerBlock,
    "unsupported": UnsupportedBlock,
}


def _block_tag(value: Any) -> str:
    if isinstance(value, dict):
        block_type = value.get("type")
    else:
        block_type = getattr(value, "type", None)
    return block_type if block_type in _BLOCK_TYPES else "unknown"


AnyBlock = Annotated[
    Union[
        Annotated[ParagraphBlock, Tag("paragraph")],
        Annotated[Heading1Block, Tag("heading_1")],
        Annotated[Heading2Block, Tag("heading_2")],
        Annotated[Heading3Block, Tag("heading_3")],
        Annotated[BulletedListItemBlock, Tag("bulleted_list_item")],
        Annotated[NumberedListItemBlock, Tag("numbered_list_item")],
        Annotated[ToDoBlock, Tag("to_do")],
        Annotated[ToggleBlock, Tag("toggle")],
        Annotated[QuoteBlock, Tag("quote")],
        Annotated[CalloutBlock, Tag("callout")],
        Annotated[CodeBlock, Tag("code")],
        Annotated[ImageBlock, Tag("image")],
        Annotated[AudioBlock, Tag("audio")],
        Annotated[VideoBlock, Tag("video")],
        Annotated[FileBlock, Tag("file")],
        Annotated[PdfBlock, Tag("pdf")],
        Annotated[EmbedBlock, Tag("embed")],
        Annotated[DividerBlock, Tag("divider")],
        Annotated[UnsupportedBlock, Tag("unsupported")],
        Annotated[UnknownBlock, Tag("unknown")],
    ],
    Discriminator(_block_tag),
]

for _model in (
    BlockPayload,
    RichTextPayload,
    HeadingPayload,
    ToDoPayload,
    CalloutPayload,
    CodePayload,
    FileObject,
    EmbedPayload,
    UnsupportedPayload,
    *_BLOCK_TYPES.values(),
):
    _model.model_rebuild()


class PageContent(BaseModel):
    title: str
    blocks: List[AnyBlock]


_blocks_adapter = TypeAdapter(List[AnyBlock])
_rich_text_adapter = TypeAdapter(List[RichText])


def parse_blocks(raw_blocks: List[Any]) -> List[Block]:
    """Validate raw Notion API block objects (or models) into block models."""
    return _blocks_adapter.validate_python(raw_blocks)


def parse_rich_text(raw_rich_text: List[Any]) -> List[RichText]:
    """Validate a raw Notion API rich text array."""
    return _rich_text_adapter.validate_python(raw_rich_text)

import os
from typing import Any, Awaitable, Callable, Optional, Tuple
from dotenv import load_dotenv
from pydantic import BaseModel
from .image_size import get_image_size
from .video import resolve_video_embed

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUE_VALUES


class RendererOptions(BaseModel):
    # Use <figure> and <figcaption> for images
    image_as_figure: bool = True

    # Append "|WIDTHxHEIGHT" to image alt text, needs get_image_size
    add_image_size_to_alt_text: bool = False

    get_image_size: Optional[Callable[[str], Awaitable[Any]]] = None

    # Render &nbsp; for paragraphs without any rich text
    empty_paragraph_to_non_breaking_space: bool = False

    resolve_video_embed: Callable[[str], Tuple[bool, str]] = resolve_video_embed

    @classmethod
    def from_env(cls) -> "RendererOptions":
        """Build options from NOTION_MD_* environment variables (.env supported)."""
        load_dotenv()
        add_image_size = _env_flag("NOTION_MD_ADD_IMAGE_SIZE_TO_ALT_TEXT", False)

        return cls(
            image_as_figure=_env_flag("NOTION_MD_IMAGE_AS_FIGURE", True),
            add_image_size_to_alt_text=add_image_size,
            get_image_size=get_image_size if add_image_size else None,
            empty_paragraph_to_non_breaking_space=_env_flag(
                "NOTION_MD_EMPTY_PARAGRAPH_TO_NBSP", False
            ),
        )

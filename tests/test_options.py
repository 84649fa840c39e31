"""
Tests for renderer configuration.
"""

import pytest
from unittest.mock import patch
from notion_blocks_markdown.render.image_size import get_image_size
from notion_blocks_markdown.render.options import RendererOptions
from notion_blocks_markdown.render.video import resolve_video_embed


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "NOTION_MD_IMAGE_AS_FIGURE",
        "NOTION_MD_ADD_IMAGE_SIZE_TO_ALT_TEXT",
        "NOTION_MD_EMPTY_PARAGRAPH_TO_NBSP",
    ):
        monkeypatch.delenv(name, raising=False)
    with patch("notion_blocks_markdown.render.options.load_dotenv"):
        yield monkeypatch


def test_defaults():
    options = RendererOptions()
    assert options.image_as_figure is True
    assert options.add_image_size_to_alt_text is False
    assert options.get_image_size is None
    assert options.empty_paragraph_to_non_breaking_space is False
    assert options.resolve_video_embed is resolve_video_embed


def test_from_env_defaults(clean_env):
    options = RendererOptions.from_env()
    assert options.image_as_figure is True
    assert options.get_image_size is None


def test_from_env_flags(clean_env):
    clean_env.setenv("NOTION_MD_IMAGE_AS_FIGURE", "false")
    clean_env.setenv("NOTION_MD_ADD_IMAGE_SIZE_TO_ALT_TEXT", "yes")
    clean_env.setenv("NOTION_MD_EMPTY_PARAGRAPH_TO_NBSP", "1")

    options = RendererOptions.from_env()

    assert options.image_as_figure is False
    assert options.add_image_size_to_alt_text is True
    assert options.get_image_size is get_image_size
    assert options.empty_paragraph_to_non_breaking_space is True

"""
Common test fixtures for the notion blocks markdown project.
"""

import pytest
from unittest.mock import MagicMock, patch
from notion_blocks_markdown.api.client import NotionClient
from notion_blocks_markdown.render.blocks import BlockRenderers
from notion_blocks_markdown.render.image_size import ImageSize
from notion_blocks_markdown.render.options import RendererOptions
from notion_blocks_markdown.render.walker import MarkdownRenderer


class RecordingImageSizeLookup:
    """Async image size lookup that remembers the order of requested URLs."""

    def __init__(self, sizes=None, default=(10, 20)):
        self.sizes = sizes or {}
        self.default = default
        self.calls = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def __call__(self, url):
        self.calls.append(url)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            width, height = self.sizes.get(url, self.default)
            return ImageSize(width=width, height=height)
        finally:
            self.in_flight -= 1


class MockNotionSDK:
    """Stands in for notion_client.Client with a tiny in-memory workspace."""

    def __init__(self):
        self.children = {}
        self.page_size = 2
        self.search_results = {
            "page": [
                {
                    "id": "test-page-id",
                    "url": "https://notion.so/test-page",
                    "properties": {
                        "Name": {
                            "type": "title",
                            "title": [{"plain_text": "Test Page"}],
                        }
                    },
                }
            ],
            "database": [
                {
                    "id": "test-database-id",
                    "url": "https://notion.so/test-database",
                    "title": [{"plain_text": "Test Database"}],
                }
            ],
        }
        self.blocks = MagicMock()
        self.blocks.children.list.side_effect = self._list_children
        self.pages = MagicMock()
        self.pages.retrieve.side_effect = lambda page_id: self.search_results["page"][0]

    def search(self, filter):
        return {"results": self.search_results[filter["value"]]}

    def _list_children(self, block_id, start_cursor=None):
        results = self.children.get(block_id, [])
        start = int(start_cursor or 0)
        end = start + self.page_size
        has_more = end < len(results)
        return {
            "results": [dict(block) for block in results[start:end]],
            "has_more": has_more,
            "next_cursor": str(end) if has_more else None,
        }


@pytest.fixture
def renderer():
    """Fixture providing a renderer with default options."""
    return MarkdownRenderer()


@pytest.fixture
def block_renderers():
    """Fixture providing block renderers with default options."""
    return BlockRenderers()


@pytest.fixture
def image_size_lookup():
    return RecordingImageSizeLookup()


@pytest.fixture
def sized_renderer(image_size_lookup):
    """Renderer that embeds image sizes in alt text instead of using figures."""
    options = RendererOptions(
        image_as_figure=False,
        add_image_size_to_alt_text=True,
        get_image_size=image_size_lookup,
    )
    return MarkdownRenderer(options)


@pytest.fixture
def mock_sdk():
    return MockNotionSDK()


@pytest.fixture
def notion_client(mock_sdk):
    """Fixture providing a NotionClient backed by the in-memory SDK mock."""
    with patch("notion_blocks_markdown.api.client.Client", return_value=mock_sdk):
        return NotionClient(token="test-token")

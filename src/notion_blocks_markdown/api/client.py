from typing import List, Dict, Any, Optional
from notion_client import Client
from pydantic import BaseModel
from dotenv import load_dotenv
import os
from .models import Block, PageContent, parse_blocks


class NotionPage(BaseModel):
    id: str
    title: str
    url: str
    type: str


def _title_from_rich_text(rich_text: List[Dict]) -> str:
    if not rich_text:
        return "Untitled"
    return "".join(item.get("plain_text", "") for item in rich_text) or "Untitled"


def _page_title(page: Dict) -> str:
    """Find the title property of a page, whatever it is named."""
    for prop in page.get("properties", {}).values():
        if prop.get("type") == "title":
            return _title_from_rich_text(prop.get("title", []))
    return "Untitled"


class NotionClient:
    def __init__(self, token: Optional[str] = None):
        load_dotenv()
        self.token = token or os.getenv("NOTION_TOKEN")
        if not self.token:
            raise ValueError("NOTION_TOKEN not found in environment variables")
        self.client = Client(auth=self.token)

    def list_shared_pages(self) -> List[NotionPage]:
        """List all pages shared with the integration."""
        try:
            response = self.client.search(
                filter={"property": "object", "value": "page"}
            )

            return [
                NotionPage(
                    id=page["id"],
                    title=_page_title(page),
                    url=page.get("url", ""),
                    type="page",
                )
                for page in response.get("results", [])
            ]
        except Exception as e:
            print(f"Error listing pages: {e}")
            return []

    def list_shared_databases(self) -> List[NotionPage]:
        """List all databases shared with the integration."""
        try:
            response = self.client.search(
                filter={"property": "object", "value": "database"}
            )

            return [
                NotionPage(
                    id=database["id"],
                    title=_title_from_rich_text(database.get("title", [])),
                    url=database.get("url", ""),
                    type="database",
                )
                for database in response.get("results", [])
            ]
        except Exception as e:
            print(f"Error listing databases: {e}")
            return []

    def get_block_children(self, block_id: str) -> List[Dict[str, Any]]:
        """Recursively fetch raw child blocks.

        Children of a block are stored under ``block[block["type"]]["children"]``,
        the shape the renderer models expect. API errors propagate.
        """
        blocks = []
        has_more = True
        start_cursor = None

        while has_more:
            kwargs = {"block_id": block_id}
            if start_cursor:
                kwargs["start_cursor"] = start_cursor
            response = self.client.blocks.children.list(**kwargs)

            for block in response.get("results", []):
                if block.get("has_children", False):
                    block_type = block.get("type", "")
                    payload = block.setdefault(block_type, {})
                    payload["children"] = self.get_block_children(block["id"])
                blocks.append(block)

            has_more = response.get("has_more", False)
            start_cursor = response.get("next_cursor")

        return blocks

    def get_page_blocks(self, page_id: str) -> List[Block]:
        """Fetch every block of a page as renderer models."""
        return parse_blocks(self.get_block_children(page_id))

    def get_page_content(self, page_id: str) -> PageContent:
        """Retrieve the title and the full block tree of a page."""
        page = self.client.pages.retrieve(page_id=page_id)
        return PageContent(
            title=_page_title(page), blocks=self.get_page_blocks(page_id)
        )

import asyncio
import os
from typing import Any, Dict, List, Optional
import pydantic
import uvicorn
from dotenv import load_dotenv
from fastapi import Body, Depends, FastAPI, HTTPException, Query
from fastapi.responses import PlainTextResponse
from notion_client import APIResponseError
from notion_blocks_markdown.api.client import NotionClient
from notion_blocks_markdown.api.models import parse_blocks
from notion_blocks_markdown.render.errors import RenderError
from notion_blocks_markdown.render.options import RendererOptions
from notion_blocks_markdown.render.walker import MarkdownRenderer

app = FastAPI(title="notion-blocks-markdown")


def get_notion_client() -> NotionClient:
    try:
        return NotionClient()
    except ValueError as e:
        raise HTTPException(status_code=503, detail=str(e))


def get_renderer_options() -> RendererOptions:
    return RendererOptions.from_env()


async def _render(blocks, options: RendererOptions) -> PlainTextResponse:
    try:
        markdown = await MarkdownRenderer(options).render(blocks)
    except RenderError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return PlainTextResponse(markdown, media_type="text/markdown")


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/pages/{page_id}/markdown", response_class=PlainTextResponse)
async def page_markdown(
    page_id: str,
    client: NotionClient = Depends(get_notion_client),
    options: RendererOptions = Depends(get_renderer_options),
):
    """Fetch a page's blocks from Notion and render them."""
    try:
        blocks = await asyncio.to_thread(client.get_page_blocks, page_id)
    except APIResponseError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return await _render(blocks, options)


@app.post("/render", response_class=PlainTextResponse)
async def render(
    blocks: List[Dict[str, Any]] = Body(...),
    image_as_figure: Optional[bool] = Query(None),
    empty_paragraph_to_non_breaking_space: Optional[bool] = Query(None),
    options: RendererOptions = Depends(get_renderer_options),
):
    """Render raw Notion block objects posted as a JSON array."""
    overrides = {
        "image_as_figure": image_as_figure,
        "empty_paragraph_to_non_breaking_space": empty_paragraph_to_non_breaking_space,
    }
    options = options.model_copy(
        update={key: value for key, value in overrides.items() if value is not None}
    )

    try:
        parsed = parse_blocks(blocks)
    except pydantic.ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return await _render(parsed, options)


def run():
    load_dotenv()
    uvicorn.run(
        app,
        host=os.getenv("NOTION_MD_HOST", "127.0.0.1"),
        port=int(os.getenv("NOTION_MD_PORT", "8000")),
    )


if __name__ == "__main__":
    run()

import asyncio
from io import BytesIO
import requests
from PIL import Image
from pydantic import BaseModel


class ImageSize(BaseModel):
    width: int = 0
    height: int = 0


def _fetch_image_size(url: str) -> ImageSize:
    """Download an image and read its pixel dimensions."""
    response = requests.get(url)
    response.raise_for_status()

    with Image.open(BytesIO(response.content)) as image:
        width, height = image.size
    return ImageSize(width=width, height=height)


async def get_image_size(url: str) -> ImageSize:
    """Default image size lookup. Runs the blocking download off the event loop."""
    return await asyncio.to_thread(_fetch_image_size, url)

import re
from typing import Tuple

_YOUTUBE_URL = re.compile(
    r"^(?:https?://)?(?:www\.|m\.)?"
    r"(?:youtube\.com/(?:watch\?(?:.*&)?v=|embed/|shorts/)|youtu\.be/)"
    r"([\w-]{11})"
)
_VIMEO_URL = re.compile(r"^(?:https?://)?(?:www\.|player\.)?vimeo\.com/(?:video/)?(\d+)")


def resolve_video_embed(url: str) -> Tuple[bool, str]:
    """Turn a hosted video URL into an embeddable iframe.

    Returns ``(True, iframe)`` for YouTube and Vimeo links and
    ``(False, url)`` for anything else.
    """
    match = _YOUTUBE_URL.match(url)
    if match:
        return True, (
            f"<iframe src='https://www.youtube.com/embed/{match.group(1)}' "
            "frameborder='0' allowfullscreen></iframe>"
        )

    match = _VIMEO_URL.match(url)
    if match:
        return True, (
            f"<iframe src='https://player.vimeo.com/video/{match.group(1)}' "
            "frameborder='0' allowfullscreen></iframe>"
        )

    return False, url

"""
YouTube URL helpers for TranscriptKit.

Extracts video IDs from the URL shapes YouTube hands out and builds the
upstream URLs used by the rest of the package.
"""

import re
from typing import Optional

from ..exceptions import InvalidVideoURL

YOUTUBE_BASE_URL = "https://www.youtube.com"
THUMBNAIL_URL_TEMPLATE = "https://i.ytimg.com/vi/{video_id}/hqdefault.jpg"

# Tried in order; group 1 is always the 11-character video ID
_VIDEO_ID_PATTERNS = [
    re.compile(
        r'(?:youtube\.com/watch\?(?:[^#\s]*?&)??v=|youtu\.be/|youtube\.com/embed/|youtube\.com/v/)'
        r'([a-zA-Z0-9_-]{11})'
    ),
    re.compile(r'^([a-zA-Z0-9_-]{11})$'),
]

# Lightweight check used to decide whether input is worth submitting at all
_PLAUSIBLE_URL_PATTERN = re.compile(r'(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)')


def is_youtube_url(text: str) -> bool:
    """
    Check whether text looks like a YouTube video URL.

    This does not extract or validate the video ID; use
    :func:`extract_video_id` for that.

    Example:
        >>> is_youtube_url("https://youtu.be/dQw4w9WgXcQ")
        True
        >>> is_youtube_url("dQw4w9WgXcQ")
        False
    """
    return bool(_PLAUSIBLE_URL_PATTERN.search(text.strip()))


def extract_video_id(text: str) -> Optional[str]:
    """
    Extract a YouTube video ID from a URL or a bare ID.

    Accepts watch URLs (with extra query parameters), youtu.be short links,
    embed URLs, /v/ URLs and bare 11-character IDs. Surrounding whitespace is
    ignored.

    Args:
        text: User input

    Returns:
        The 11-character video ID, or None if nothing matched

    Example:
        >>> extract_video_id("https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=42s")
        'dQw4w9WgXcQ'
        >>> extract_video_id("not a url") is None
        True
    """
    candidate = text.strip()
    for pattern in _VIDEO_ID_PATTERNS:
        match = pattern.search(candidate)
        if match:
            return match.group(1)
    return None


def require_video_id(text: str) -> str:
    """Like :func:`extract_video_id`, but raise InvalidVideoURL on no match."""
    video_id = extract_video_id(text)
    if video_id is None:
        raise InvalidVideoURL(text)
    return video_id


def watch_url(video_id: str) -> str:
    return f"{YOUTUBE_BASE_URL}/watch?v={video_id}"


def thumbnail_url(video_id: str) -> str:
    return THUMBNAIL_URL_TEMPLATE.format(video_id=video_id)

"""
Video metadata lookup for TranscriptKit.

Fetches a display title through YouTube's public oEmbed endpoint. The lookup
is best effort: any failure degrades to a placeholder title, and the
thumbnail URL is always derived from the video ID alone.
"""

import logging
from typing import Optional

import requests

from ..models import FetchConfig, VideoMeta
from ..utils import dig
from .urls import YOUTUBE_BASE_URL, thumbnail_url, watch_url

logger = logging.getLogger(__name__)

OEMBED_URL = f"{YOUTUBE_BASE_URL}/oembed"
DEFAULT_TITLE = "YouTube Video"


def fallback_video_meta(video_id: str) -> VideoMeta:
    """Metadata used when the oEmbed lookup fails."""
    return VideoMeta(title=DEFAULT_TITLE, thumbnail=thumbnail_url(video_id))


def fetch_video_meta(
    video_id: str,
    session: Optional[requests.Session] = None,
    config: Optional[FetchConfig] = None,
) -> VideoMeta:
    """
    Look up the title of a video via oEmbed.

    Never raises for upstream problems: network errors, non-success
    responses, malformed JSON and a missing title all return
    :func:`fallback_video_meta`.

    Args:
        video_id: YouTube video ID
        session: Optional requests session to issue the call on
        config: Optional fetch configuration (timeout)

    Returns:
        VideoMeta with the upstream title or the placeholder
    """
    config = config or FetchConfig()
    http = session or requests

    try:
        response = http.get(
            OEMBED_URL,
            params={"url": watch_url(video_id), "format": "json"},
            timeout=config.timeout,
        )
        if not response.ok:
            logger.warning(f"oEmbed lookup for {video_id} returned HTTP {response.status_code}")
            return fallback_video_meta(video_id)
        data = response.json()
    except (requests.RequestException, ValueError) as e:
        logger.warning(f"oEmbed lookup failed for {video_id}: {str(e)}")
        return fallback_video_meta(video_id)

    title = dig(data, "title")
    if not isinstance(title, str) or not title:
        logger.debug(f"oEmbed response for {video_id} has no title")
        return fallback_video_meta(video_id)

    return VideoMeta(title=title, thumbnail=thumbnail_url(video_id))

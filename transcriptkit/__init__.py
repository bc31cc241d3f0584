"""
TranscriptKit - YouTube Transcript Retrieval Toolkit

Fetches the captions of a YouTube video and returns them as timestamped,
copyable lines. Caption tracks are located through several upstream access
paths tried in order, so one blocked path does not stop retrieval.

Features:
- Extract video IDs from watch, short-link, embed and bare-ID input
- Locate caption tracks via the Android client API, the watch page, the
  web client API and yt-dlp
- Prefer English tracks, normalize json3 timed text into lines
- Serve a small web page and JSON endpoint with Flask

Example usage:
    >>> from transcriptkit import YouTubeClient
    >>>
    >>> client = YouTubeClient()
    >>> result = client.get_transcript("https://youtu.be/dQw4w9WgXcQ")
    >>> print(result.meta.title)
    >>> print(result.to_text())
"""

import logging

__version__ = "0.1.0"
__author__ = "TranscriptKit Contributors"
__license__ = "MIT"

# Add NullHandler to prevent "No handler found" warnings
# Users should configure logging in their application if they want to see logs
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Core utility functions
from .utils import dig, format_timestamp, format_transcript_line, format_transcript_text

# Timed-text handling
from .timedtext import parse_timed_text, select_track, timedtext_url

# Errors
from .exceptions import TranscriptKitError, InvalidVideoURL, NoTranscriptAvailable, StrategyError

# Data models
from .models import CaptionTrack, TranscriptLine, VideoMeta, TranscriptResult, FetchConfig

# YouTube utilities
from .youtube import (
    is_youtube_url,
    extract_video_id,
    require_video_id,
    fetch_video_meta,
    CaptionStrategy,
    AndroidClientStrategy,
    WatchPageStrategy,
    WebClientStrategy,
    YtDlpStrategy,
    YouTubeClient,
    get_transcript,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",

    # Utility functions
    "dig",
    "format_timestamp",
    "format_transcript_line",
    "format_transcript_text",

    # Timed text
    "parse_timed_text",
    "select_track",
    "timedtext_url",

    # Errors
    "TranscriptKitError",
    "InvalidVideoURL",
    "NoTranscriptAvailable",
    "StrategyError",

    # Models
    "CaptionTrack",
    "TranscriptLine",
    "VideoMeta",
    "TranscriptResult",
    "FetchConfig",

    # YouTube
    "is_youtube_url",
    "extract_video_id",
    "require_video_id",
    "fetch_video_meta",
    "CaptionStrategy",
    "AndroidClientStrategy",
    "WatchPageStrategy",
    "WebClientStrategy",
    "YtDlpStrategy",
    "YouTubeClient",
    "get_transcript",
]

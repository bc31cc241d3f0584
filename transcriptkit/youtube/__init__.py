"""
YouTube module for TranscriptKit.

Provides video ID extraction, metadata lookup, the caption strategies and the
client that chains them.
"""

from .urls import (
    is_youtube_url,
    extract_video_id,
    require_video_id,
    watch_url,
    thumbnail_url,
)

from .metadata import fetch_video_meta, fallback_video_meta

from .strategies import (
    CaptionStrategy,
    AndroidClientStrategy,
    WatchPageStrategy,
    WebClientStrategy,
    YtDlpStrategy,
    build_strategies,
    tracks_from_player_response,
)

from .client import YouTubeClient, get_transcript

__all__ = [
    'is_youtube_url',
    'extract_video_id',
    'require_video_id',
    'watch_url',
    'thumbnail_url',
    'fetch_video_meta',
    'fallback_video_meta',
    'CaptionStrategy',
    'AndroidClientStrategy',
    'WatchPageStrategy',
    'WebClientStrategy',
    'YtDlpStrategy',
    'build_strategies',
    'tracks_from_player_response',
    'YouTubeClient',
    'get_transcript',
]

"""
YouTube client for TranscriptKit.

Ties the pieces together: runs the caption strategies in order until one
yields tracks, downloads and normalizes the selected track, and fetches
metadata alongside so a request produces a complete TranscriptResult.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

import requests

from ..exceptions import NoTranscriptAvailable
from ..models import CaptionTrack, FetchConfig, TranscriptLine, TranscriptResult, VideoMeta
from ..timedtext import parse_timed_text, select_track, timedtext_url
from .metadata import fetch_video_meta
from .strategies import CaptionStrategy, build_strategies
from .urls import require_video_id

logger = logging.getLogger(__name__)


class YouTubeClient:
    """
    Client for retrieving YouTube transcripts.

    Holds one requests session and an ordered list of caption strategies.
    Nothing is cached between calls; every call starts from scratch.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        config: Optional[FetchConfig] = None,
        strategies: Optional[Sequence[CaptionStrategy]] = None,
    ):
        """
        Initialize YouTube client.

        Args:
            session: Optional requests session (a new one is created if omitted)
            config: Optional fetch configuration
            strategies: Optional explicit strategy chain; defaults to the
                strategies named in ``config.strategies``
        """
        self.config = config or FetchConfig()
        self._owns_session = session is None
        self.session = session or requests.Session()
        if strategies is None:
            strategies = build_strategies(self.session, self.config)
        self.strategies = list(strategies)

    def close(self):
        """Close the session if this client created it; injected sessions are left open."""
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False

    def list_caption_tracks(self, video_id: str) -> List[CaptionTrack]:
        """
        Run the strategy chain and return the first non-empty track list.

        Strategies run strictly one after another. A strategy that finds
        nothing or raises is logged and skipped; its error never reaches
        the caller.

        Args:
            video_id: YouTube video ID

        Returns:
            Non-empty list of CaptionTrack

        Raises:
            NoTranscriptAvailable: If every strategy came up empty
        """
        for strategy in self.strategies:
            try:
                tracks = strategy.fetch_tracks(video_id)
            except Exception as e:
                logger.warning(f"Caption strategy '{strategy.name}' failed for {video_id}: {str(e)}")
                continue

            if tracks:
                logger.info(f"Caption strategy '{strategy.name}' found {len(tracks)} tracks for {video_id}")
                return tracks

            logger.info(f"Caption strategy '{strategy.name}' found no tracks for {video_id}")

        logger.warning(f"All caption strategies exhausted for {video_id}")
        raise NoTranscriptAvailable(video_id)

    def download_track(self, track: CaptionTrack, video_id: Optional[str] = None) -> List[TranscriptLine]:
        """
        Download a caption track in json3 format and normalize it.

        Args:
            track: Caption track to download
            video_id: Video ID, used for logging and error reporting

        Returns:
            List of TranscriptLine

        Raises:
            NoTranscriptAvailable: If the payload is not JSON or has no events
            requests.RequestException: If the download itself fails
        """
        logger.debug(f"Downloading '{track.language_code}' caption track for {video_id}")
        response = self.session.get(timedtext_url(track.base_url), timeout=self.config.timeout)
        response.raise_for_status()

        try:
            payload = response.json()
        except ValueError:
            raise NoTranscriptAvailable(video_id, reason="timed-text response is not JSON")

        return parse_timed_text(payload, video_id)

    def fetch_transcript(self, video_id: str) -> List[TranscriptLine]:
        """
        Retrieve the transcript lines for a video.

        Raises:
            NoTranscriptAvailable: If no caption data could be obtained
        """
        tracks = self.list_caption_tracks(video_id)
        track = select_track(tracks, self.config.language)
        lines = self.download_track(track, video_id)
        logger.info(f"Fetched {len(lines)} transcript lines for {video_id} ('{track.language_code}')")
        return lines

    def fetch_video_meta(self, video_id: str) -> VideoMeta:
        """Best-effort metadata lookup; never raises for upstream failures."""
        return fetch_video_meta(video_id, session=self.session, config=self.config)

    def get_transcript(self, url: str) -> TranscriptResult:
        """
        Fetch transcript and metadata for a YouTube URL or video ID.

        Metadata lookup and transcript retrieval run concurrently; the
        result is built once both are done.

        Args:
            url: YouTube URL in any supported shape, or a bare video ID

        Returns:
            TranscriptResult

        Raises:
            InvalidVideoURL: If no video ID can be extracted
            NoTranscriptAvailable: If no caption data could be obtained
        """
        video_id = require_video_id(url)

        with ThreadPoolExecutor(max_workers=2) as executor:
            meta_future = executor.submit(self.fetch_video_meta, video_id)
            lines_future = executor.submit(self.fetch_transcript, video_id)
            meta = meta_future.result()
            lines = lines_future.result()

        return TranscriptResult(meta=meta, video_id=video_id, lines=tuple(lines))


# Convenience function wrapping YouTubeClient
def get_transcript(url: str, config: Optional[FetchConfig] = None) -> TranscriptResult:
    """Fetch a transcript for a URL. Convenience function wrapping YouTubeClient."""
    with YouTubeClient(config=config) as client:
        return client.get_transcript(url)

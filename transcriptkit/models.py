"""
Data models for TranscriptKit.

Defines the core data structures used throughout the package.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional, Tuple

from .utils import format_transcript_text


DEFAULT_STRATEGIES = ("android", "watch_page", "web", "yt_dlp")


@dataclass(frozen=True)
class CaptionTrack:
    """Descriptor for one caption track, before download."""
    language_code: str
    base_url: str
    name: Optional[str] = None
    kind: Optional[str] = None  # "asr" for auto-generated tracks


@dataclass(frozen=True)
class TranscriptLine:
    """Represents one timestamped line of a transcript."""
    time: float  # seconds
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"time": self.time, "text": self.text}


@dataclass(frozen=True)
class VideoMeta:
    """Display metadata for a video (best effort)."""
    title: str
    thumbnail: str


@dataclass(frozen=True)
class TranscriptResult:
    """Complete transcript with metadata, as returned to callers."""
    meta: VideoMeta
    video_id: str
    lines: Tuple[TranscriptLine, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the JSON body returned by the HTTP boundary."""
        return {
            "title": self.meta.title,
            "thumbnail": self.meta.thumbnail,
            "videoId": self.video_id,
            "transcript": [line.to_dict() for line in self.lines],
        }

    def to_text(self) -> str:
        """Whole transcript as copyable text, one ``[m:ss] text`` line per entry."""
        return format_transcript_text((line.time, line.text) for line in self.lines)


@dataclass
class FetchConfig:
    """Configuration for transcript retrieval."""
    timeout: int = 30
    language: str = "en"
    accept_language: str = "en-US,en;q=0.9"
    browser_user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    )
    strategies: Tuple[str, ...] = DEFAULT_STRATEGIES
    cookies_path: Optional[str] = None  # only consulted by the yt-dlp strategy
    extra_headers: Dict[str, str] = field(default_factory=dict)

    def browser_headers(self) -> Dict[str, str]:
        headers = {
            "User-Agent": self.browser_user_agent,
            "Accept-Language": self.accept_language,
        }
        headers.update(self.extra_headers)
        return headers

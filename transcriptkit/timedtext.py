"""
Timed-text handling for TranscriptKit.

Converts YouTube's json3 timed-text payloads into ordered transcript lines and
picks which caption track to download. Each json3 event carries a start offset
in milliseconds and a ``segs`` array of text fragments; the fragments of one
event are concatenated to form a single line.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from .exceptions import NoTranscriptAvailable
from .models import CaptionTrack, TranscriptLine
from .utils import dig

logger = logging.getLogger(__name__)

# Constants
JSON3_FORMAT_PARAM = "fmt=json3"
PREFERRED_LANGUAGE = "en"


def timedtext_url(base_url: str) -> str:
    """
    Append the json3 format parameter to a caption track URL.

    Args:
        base_url: The track's ``baseUrl`` as returned upstream

    Returns:
        URL requesting the structured JSON timing format

    Example:
        >>> timedtext_url("https://www.youtube.com/api/timedtext?v=abc&lang=en")
        'https://www.youtube.com/api/timedtext?v=abc&lang=en&fmt=json3'
    """
    separator = "&" if "?" in base_url else "?"
    return f"{base_url}{separator}{JSON3_FORMAT_PARAM}"


def select_track(
    tracks: Sequence[CaptionTrack],
    language: str = PREFERRED_LANGUAGE,
) -> CaptionTrack:
    """
    Choose the caption track to download.

    A track whose language code equals ``language`` exactly wins; otherwise
    the first track in upstream order is used. No other ranking is applied.

    Args:
        tracks: Non-empty list of caption track descriptors
        language: Preferred language code (default: "en")

    Returns:
        The selected CaptionTrack

    Raises:
        NoTranscriptAvailable: If ``tracks`` is empty
    """
    if not tracks:
        raise NoTranscriptAvailable(reason="no caption tracks")

    for track in tracks:
        if track.language_code == language:
            logger.debug(f"Selected preferred '{language}' caption track")
            return track

    logger.debug(
        f"No '{language}' track among {len(tracks)}, using first track "
        f"'{tracks[0].language_code}'"
    )
    return tracks[0]


def parse_timed_text(payload: Any, video_id: Optional[str] = None) -> List[TranscriptLine]:
    """
    Normalize a json3 timed-text payload into transcript lines.

    Events without a ``segs`` array are skipped. Each remaining event becomes
    a line at ``tStartMs / 1000`` seconds whose text is the in-order
    concatenation of its fragments. Lines that are blank after trimming are
    dropped; the text of kept lines is not altered.

    Args:
        payload: Parsed JSON response of the timed-text endpoint
        video_id: Video ID, used only for error reporting

    Returns:
        List of TranscriptLine in upstream order

    Raises:
        NoTranscriptAvailable: If the payload has no ``events`` collection

    Example:
        >>> parse_timed_text({"events": [{"tStartMs": 1000, "segs": [{"utf8": "Hi"}]}]})
        [TranscriptLine(time=1.0, text='Hi')]
    """
    events = dig(payload, "events")
    if not isinstance(events, list):
        raise NoTranscriptAvailable(video_id, reason="timed-text payload has no events")

    lines: List[TranscriptLine] = []
    for event in events:
        segments = dig(event, "segs")
        if not isinstance(segments, list):
            continue

        text = "".join(_segment_text(segment) for segment in segments)
        if not text.strip():
            continue

        start_ms = dig(event, "tStartMs", default=0)
        lines.append(TranscriptLine(time=float(start_ms) / 1000, text=text))

    logger.debug(f"Normalized {len(lines)} lines from {len(events)} timed-text events")
    return lines


def _segment_text(segment: Dict[str, Any]) -> str:
    text = dig(segment, "utf8", default="")
    return text if isinstance(text, str) else ""

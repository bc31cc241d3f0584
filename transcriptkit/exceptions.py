"""Exception types raised by TranscriptKit."""

from typing import Optional


class TranscriptKitError(Exception):
    """Base class for all TranscriptKit errors."""


class InvalidVideoURL(TranscriptKitError, ValueError):
    """Input is not a recognized YouTube URL or video ID."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid YouTube URL: {value}")


class NoTranscriptAvailable(TranscriptKitError):
    """No caption track could be found or downloaded for a video."""

    USER_MESSAGE = "No transcript available for this video. It may not have captions enabled."

    def __init__(self, video_id: Optional[str] = None, reason: Optional[str] = None):
        self.video_id = video_id
        self.reason = reason
        message = self.USER_MESSAGE
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class StrategyError(TranscriptKitError):
    """A caption strategy hit an unusable upstream response."""

"""Flask web front end for TranscriptKit."""

from .app import create_app

__all__ = ["create_app"]

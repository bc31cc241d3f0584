"""
Shared utility functions for TranscriptKit.

Provides safe lookups into loosely-shaped upstream JSON and the timestamp
formatting used for copyable transcript text.
"""

from typing import Any, Iterable, List, Tuple, Union

PathKey = Union[str, int]


def dig(data: Any, *path: PathKey, default: Any = None) -> Any:
    """
    Walk a nested structure of dicts and lists without raising.

    String keys index into dicts, integer keys index into lists. Any
    missing key, out-of-range index or unexpected type along the way
    resolves to ``default``.

    Args:
        data: Parsed JSON value to start from
        *path: Sequence of dict keys and list indexes
        default: Value returned when the path cannot be followed

    Returns:
        The value found at the end of the path, or ``default``

    Example:
        >>> dig({"a": [{"b": 1}]}, "a", 0, "b")
        1
        >>> dig({"a": None}, "a", "b") is None
        True
    """
    current = data
    for key in path:
        if isinstance(key, int) and not isinstance(key, bool):
            if not isinstance(current, list) or not -len(current) <= key < len(current):
                return default
            current = current[key]
        else:
            if not isinstance(current, dict) or key not in current:
                return default
            current = current[key]
        if current is None:
            return default
    return current


def format_timestamp(seconds: float) -> str:
    """
    Format seconds as ``m:ss`` for display.

    Minutes are not wrapped into hours, so an hour-long video shows ``75:03``.

    Example:
        >>> format_timestamp(63.9)
        '1:03'
    """
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes}:{secs:02d}"


def format_transcript_line(time: float, text: str) -> str:
    """Format one transcript line as ``[m:ss] text``."""
    return f"[{format_timestamp(time)}] {text}"


def format_transcript_text(lines: Iterable[Tuple[float, str]]) -> str:
    """
    Join (time, text) pairs into the whole-transcript copy format.

    Args:
        lines: Iterable of (seconds, text) pairs

    Returns:
        Newline-separated ``[m:ss] text`` lines
    """
    formatted: List[str] = [format_transcript_line(time, text) for time, text in lines]
    return "\n".join(formatted)

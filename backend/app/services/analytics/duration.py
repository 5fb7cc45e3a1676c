"""
Duration codec for the voice agent's "MM:SS" workout times.
"""
from typing import Optional


def parse_duration(text: Optional[str]) -> Optional[int]:
    """
    Convert "MM:SS" into seconds.

    Minutes may exceed 59 ("90:00") and seconds are not bounds-checked.
    Anything that is not exactly two non-negative integers separated by
    a colon returns None rather than raising.

    Args:
        text: Duration text reported by the voice agent

    Returns:
        Total seconds, or None when absent or malformed
    """
    if not text:
        return None

    parts = text.strip().split(":")
    if len(parts) != 2:
        return None

    minutes, seconds = (p.strip() for p in parts)
    if not (minutes.isdecimal() and seconds.isdecimal()):
        return None

    return int(minutes) * 60 + int(seconds)


def format_duration(seconds: int) -> str:
    """Format seconds as "1h 5m" (an hour or more) or "5m"."""
    seconds = max(int(seconds or 0), 0)
    hours = seconds // 3600
    mins = (seconds % 3600) // 60
    if hours > 0:
        return f"{hours}h {mins}m"
    return f"{mins}m"

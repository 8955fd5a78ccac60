"""Display helpers for video recommendation fields."""

from __future__ import annotations

import re

PLACEHOLDER_THUMBNAIL = "/placeholder-video.jpg"
_ISO_DURATION = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?")


def format_duration(duration: str | None) -> str:
    """Format an ISO 8601 duration: "PT15M30S" -> "15m 30s".

    Seconds are dropped once the video runs an hour or more.
    """
    if not duration:
        return "Unknown"
    match = _ISO_DURATION.match(duration)
    if not match:
        return "Unknown"

    hours, minutes, seconds = (int(g) if g else 0 for g in match.groups())
    formatted = ""
    if hours > 0:
        formatted += f"{hours}h "
    if minutes > 0:
        formatted += f"{minutes}m"
    if seconds > 0 and hours == 0:
        formatted += f" {seconds}s"
    return formatted.strip() or "Unknown"


def format_view_count(view_count: str | int | None) -> str:
    """Format a view count: 1234567 -> "1.2M views"."""
    if not view_count:
        return "0 views"
    try:
        count = int(view_count)
    except (TypeError, ValueError):
        return "0 views"
    if count >= 1_000_000:
        return f"{count / 1_000_000:.1f}M views"
    if count >= 1_000:
        return f"{count / 1_000:.1f}K views"
    return f"{count} views"


def thumbnail_url(thumbnails: dict | str | None, quality: str = "medium") -> str:
    """Pick a thumbnail URL, preferring ``quality`` then high/medium/default.

    Entries may be plain URL strings (as the backend sends them) or
    YouTube-style ``{"url": ...}`` objects.
    """
    if not thumbnails:
        return PLACEHOLDER_THUMBNAIL
    if isinstance(thumbnails, str):
        return thumbnails
    for key in (quality, "high", "medium", "default"):
        entry = thumbnails.get(key)
        url = entry.get("url") if isinstance(entry, dict) else entry
        if url:
            return url
    return PLACEHOLDER_THUMBNAIL


def watch_url(video_id: str) -> str:
    return f"https://www.youtube.com/watch?v={video_id}"


def embed_url(video_id: str) -> str:
    return f"https://www.youtube.com/embed/{video_id}"

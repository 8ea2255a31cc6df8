"""Listing of the encodings offered for a source video and best-format choice."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from yt_dlp import YoutubeDL

from nugget.config import Config
from nugget.domain import FormatListing, VideoFormat
from nugget.errors import CollaboratorFailure
from nugget.utils.logger import get_logger

logger: logging.Logger = get_logger(__name__)


def to_video_format(entry: Mapping[str, Any]) -> VideoFormat:
    """Builds a ``VideoFormat`` from one yt-dlp format entry."""
    width = entry.get("width")
    height = entry.get("height")
    acodec = entry.get("acodec")
    vcodec = entry.get("vcodec")
    resolution = entry.get("resolution") or (
        f"{width}x{height}" if width else "audio only"
    )
    if vcodec is not None:
        has_video = vcodec != "none"
    else:
        has_video = resolution != "audio only"
    return VideoFormat(
        format_id=str(entry.get("format_id")),
        extension=str(entry.get("ext")),
        width=width,
        height=height,
        has_video=has_video,
        audio_codec=acodec if acodec and acodec != "none" else None,
        resolution=resolution,
    )


def select_best_format(formats: Sequence[VideoFormat]) -> VideoFormat | None:
    """Prefers a wide mp4 with audio, otherwise the widest format with audio."""
    preferred_extension = Config.FORMAT_CONFIG["preferred_extension"]
    min_width = Config.FORMAT_CONFIG["min_width"]
    for video_format in formats:
        if (
            video_format.extension == preferred_extension
            and (video_format.width or 0) >= min_width
            and video_format.has_audio
        ):
            return video_format

    with_audio = [video_format for video_format in formats if video_format.has_audio]
    if not with_audio:
        return None
    return max(with_audio, key=lambda video_format: video_format.width or 0)


def list_formats(url: str) -> FormatListing:
    """
    Lists the encodings of ``url`` sorted by width and picks the best one.

    Raises:
        CollaboratorFailure: When the video information cannot be retrieved.
    """
    try:
        with YoutubeDL({"quiet": True, "no_warnings": True}) as downloader:
            info = downloader.extract_info(url, download=False)
    except Exception as err:
        logger.error(msg=f"Failed to read video formats: {err}", exc_info=True)
        raise CollaboratorFailure("metadata", str(err)) from err

    formats = [to_video_format(entry) for entry in (info or {}).get("formats") or []]
    best = select_best_format(formats)
    logger.info(
        "Found %d formats for %s, best: %s",
        len(formats),
        url,
        best.format_id if best else None,
    )
    return FormatListing(
        formats=sorted(formats, key=lambda video_format: video_format.width or 0),
        best=best,
    )

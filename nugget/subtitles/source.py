"""
Caption retrieval for the source video.

Automatic captions are downloaded with yt-dlp, converted to SRT with ffmpeg
and parsed with pysubs2 into raw cues. Retrieval never aborts a run: missing
captions and pipeline errors both yield an empty cue list, but are reported
differently so the two cases can be told apart in the logs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum

import ffmpeg
import pysubs2
from yt_dlp import YoutubeDL

from nugget.config import Config
from nugget.domain import Cue
from nugget.utils.logger import get_logger
from nugget.utils.tempfiles import discard, tmp_path, unique_name

logger: logging.Logger = get_logger(__name__)


class SubtitleStatus(StrEnum):
    """Outcome of one caption retrieval."""

    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"
    FAILED = "failed"


@dataclass(frozen=True)
class SubtitleFetch:
    """Raw cues plus the reason they may be missing."""

    status: SubtitleStatus
    cues: list[Cue] = field(default_factory=list)
    error: str | None = None


def ms_to_timecode(milliseconds: int) -> str:
    """Formats milliseconds as an SRT ``HH:MM:SS,mmm`` timecode."""
    milliseconds = max(0, int(milliseconds))
    hours, remainder = divmod(milliseconds, 3_600_000)
    minutes, remainder = divmod(remainder, 60_000)
    seconds, millis = divmod(remainder, 1000)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d},{millis:03d}"


def download_captions(url: str, language: str) -> str | None:
    """Downloads automatic captions and returns their path, or None if absent."""
    options = {
        "skip_download": True,
        "writeautomaticsub": True,
        "subtitleslangs": [language],
        "outtmpl": tmp_path(unique_name(".%(ext)s")),
        "quiet": True,
        "no_warnings": True,
    }
    with YoutubeDL(options) as downloader:
        info = downloader.extract_info(url, download=True)
    requested = (info or {}).get("requested_subtitles") or {}
    caption = requested.get(language)
    if not caption:
        return None
    return caption.get("filepath")


def convert_captions(source_file: str, target_file: str) -> str:
    """Re-encodes a caption file into the format implied by ``target_file``."""
    ffmpeg.input(source_file).output(target_file).overwrite_output().run(
        quiet=True
    )
    return target_file


def parse_captions(file_path: str) -> list[Cue]:
    """Reads an SRT file into raw cues carrying timecode strings."""
    subs = pysubs2.load(file_path, encoding="utf-8")
    return [
        Cue(
            text=event.plaintext,
            start_time=ms_to_timecode(event.start),
            end_time=ms_to_timecode(event.end),
        )
        for event in subs
        if not event.is_comment
    ]


def fetch_subtitles(url: str, language: str | None = None) -> SubtitleFetch:
    """
    Retrieves the raw caption cues of ``url`` in one language.

    Arguments:
        url (str): Source video address.
        language (str | None): Caption language, defaults to the configured one.

    Returns:
        SubtitleFetch: Cues with AVAILABLE, or an empty result with
            UNAVAILABLE or FAILED.
    """
    language = language or Config.SUBTITLE_CONFIG["language"]
    caption_file: str | None = None
    srt_file: str | None = None
    try:
        caption_file = download_captions(url, language)
        if not caption_file:
            logger.info(
                "No '%s' captions available for %s; rendering without them.",
                language,
                url,
            )
            return SubtitleFetch(status=SubtitleStatus.UNAVAILABLE)

        srt_file = tmp_path(unique_name(f".{Config.SUBTITLE_CONFIG['format']}"))
        convert_captions(caption_file, srt_file)
        cues: list[Cue] = parse_captions(srt_file)
    except Exception as err:
        logger.warning(
            msg=f"Caption retrieval failed, rendering without captions: {err}",
            exc_info=True,
        )
        return SubtitleFetch(status=SubtitleStatus.FAILED, error=str(err))
    finally:
        discard(caption_file)
        discard(srt_file)

    logger.info(msg=f"Retrieved {len(cues)} '{language}' caption cues.")
    return SubtitleFetch(status=SubtitleStatus.AVAILABLE, cues=cues)

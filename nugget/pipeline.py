"""End-to-end orchestration of one nugget render."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from halo import Halo

from nugget.domain import Cue, Interval, InvalidInterval, parse_intervals
from nugget.errors import CollaboratorFailure
from nugget.subtitles.normalizer import normalize_cues
from nugget.subtitles.overlay import build_overlays
from nugget.subtitles.remapper import flatten_remapped, remap_cues
from nugget.subtitles.source import SubtitleFetch, SubtitleStatus, fetch_subtitles
from nugget.utils.logger import get_logger
from nugget.utils.tempfiles import discard
from nugget.utils.timeline_utils import print_cue_timeline
from nugget.video.assembler import assemble
from nugget.video.download import download_video
from nugget.video.formats import list_formats

logger = get_logger(__name__)


@dataclass(frozen=True)
class NuggetRequest:
    """Input contract for one render."""

    url: str
    intervals: list[Interval]
    output: str
    language: str
    source_file: str | None = None
    show_captions: bool = False


@dataclass(frozen=True)
class NuggetResult:
    """Output contract for one render."""

    output: str
    subtitle_status: SubtitleStatus
    cues: list[Cue] = field(default_factory=list)
    overlay_count: int = 0


def prepare_captions(
    raw_cues: Sequence[Cue], intervals: Sequence[Interval]
) -> list[Cue]:
    """Normalizes raw cues and rebases them onto the concatenated timeline."""
    normalized = normalize_cues(raw_cues)
    return flatten_remapped(remap_cues(normalized, intervals))


def _gather_inputs(request: NuggetRequest) -> tuple[SubtitleFetch, str | None]:
    """Fetches captions and, without a local source, the best video format."""
    with Halo(
        text="Fetching captions and video formats...",
        spinner="dots",
        text_color="green",
    ):
        with ThreadPoolExecutor(max_workers=2) as executor:
            subtitle_future = executor.submit(
                fetch_subtitles, request.url, request.language
            )
            formats_future = (
                None
                if request.source_file
                else executor.submit(list_formats, request.url)
            )
            subtitles = subtitle_future.result()
            listing = formats_future.result() if formats_future else None

    if listing is None:
        return subtitles, request.source_file
    if listing.best is None:
        raise CollaboratorFailure("metadata", "no encoding with an audio track")
    return subtitles, download_video(request.url, listing.best)


def generate_nugget(request: NuggetRequest) -> NuggetResult:
    """
    Renders the captioned nugget described by ``request``.

    Caption problems never abort the run; metadata, download and render
    failures raise ``CollaboratorFailure``.
    """
    intervals = parse_intervals(request.intervals)
    if not intervals:
        raise InvalidInterval("At least one interval is required")

    subtitles, source = _gather_inputs(request)
    downloaded = source if source != request.source_file else None
    try:
        cues = prepare_captions(subtitles.cues, intervals)
        if request.show_captions:
            print_cue_timeline(cues)
        overlays = build_overlays(cues)
        output = assemble(source, intervals, overlays, request.output)
    finally:
        discard(downloaded)

    logger.info(
        "Nugget written to %s (%d captions, captions %s).",
        output,
        len(cues),
        subtitles.status,
    )
    return NuggetResult(
        output=output,
        subtitle_status=subtitles.status,
        cues=cues,
        overlay_count=len(overlays),
    )

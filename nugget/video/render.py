"""ffmpeg operations used to cut, join and decorate clips."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any

import ffmpeg

from nugget.errors import RenderError
from nugget.utils.logger import get_logger

logger: logging.Logger = get_logger(__name__)


def _run(stage: str, build: Callable[[], Any]) -> None:
    try:
        build().overwrite_output().run(quiet=True)
    except ffmpeg.Error as err:
        stderr = (err.stderr or b"").decode("utf-8", errors="replace").strip()
        raise RenderError(stage, stderr) from err


def extract_clip(source: str, seek: str, duration: float, output: str) -> str:
    """Writes ``duration`` seconds of ``source`` starting at ``seek`` to ``output``."""
    logger.debug(msg=f"Extracting {duration}s at {seek} into {output}")
    _run(
        "extraction",
        lambda: ffmpeg.input(source, ss=seek).output(output, t=duration),
    )
    return output


def concat_clips(parts: Sequence[str], output: str) -> str:
    """Joins clips, in the given order, into one file."""
    logger.debug(msg=f"Concatenating {len(parts)} clips into {output}")

    def _build() -> Any:
        streams = []
        for part in parts:
            clip = ffmpeg.input(part)
            streams.extend([clip.video, clip.audio])
        joined = ffmpeg.concat(*streams, v=1, a=1).node
        return ffmpeg.output(joined[0], joined[1], output)

    _run("concatenation", _build)
    return output


def render_filtered(
    source: str,
    crop: dict[str, Any],
    pad: dict[str, Any],
    drawtexts: Iterable[dict[str, Any]],
    output: str,
) -> str:
    """Crops, pads and draws every text overlay over ``source``."""

    def _build() -> Any:
        clip = ffmpeg.input(source)
        video = clip.video.filter("crop", **crop).filter("pad", **pad)
        for options in drawtexts:
            video = video.filter("drawtext", **options)
        return ffmpeg.output(video, clip.audio, output)

    _run("render", _build)
    return output

"""
Clip assembly for the video nugget.

Intervals become seek/duration pairs, each pair is extracted as a standalone
clip, the clips are concatenated in interval order and the result is rendered
with the fixed crop, pad and the caption overlays.

Functions:
    - parse_intervals: Converts intervals into seek/duration clip segments.
    - extract_parts: Extracts every segment concurrently, in interval order.
    - merge_parts: Concatenates the extracted parts.
    - render_nugget: Renders the merged clip with crop, pad and overlays.
    - assemble: Runs the three steps above.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import Future, ThreadPoolExecutor

from nugget.config import Config
from nugget.domain import ClipSegment, Interval, OverlayDescriptor
from nugget.domain import parse_intervals as parse_interval_pairs
from nugget.errors import CollaboratorFailure
from nugget.subtitles.overlay import to_drawtext_options
from nugget.utils.logger import get_logger
from nugget.utils.tempfiles import discard, tmp_path, unique_name
from nugget.video import render

logger: logging.Logger = get_logger(__name__)


def parse_intervals(
    intervals: Sequence[Interval] | Sequence[Sequence[str]],
) -> list[ClipSegment]:
    """
    Converts ``[from, to]`` intervals into seek/duration segments.

    Arguments:
        intervals: Ordered source intervals.

    Returns:
        list[ClipSegment]: One segment per interval, seeking to ``from``
            with a dot decimal separator.
    """
    return [
        ClipSegment(
            index=index,
            seek=interval.start.replace(",", "."),
            duration=interval.duration,
        )
        for index, interval in enumerate(parse_interval_pairs(intervals))
    ]


def _as_failure(stage: str, err: Exception) -> CollaboratorFailure:
    if isinstance(err, CollaboratorFailure):
        return err
    return CollaboratorFailure(stage, str(err))


def extract_parts(source: str, segments: Sequence[ClipSegment]) -> list[str]:
    """
    Extracts every segment of ``source`` as its own clip.

    Extractions run concurrently; the returned paths follow segment order.
    The first failure aborts the step and every produced part is removed.
    """
    prefix: str = unique_name("")
    outputs: list[str] = [
        tmp_path(f"{prefix}-part-{segment.index}.mp4") for segment in segments
    ]
    max_workers: int = max(1, min(len(segments), Config.EXTRACTION_CONFIG["max_workers"]))

    logger.info(msg=f"Extracting {len(segments)} clips with {max_workers} workers.")
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures: list[Future[str]] = [
            executor.submit(
                render.extract_clip, source, segment.seek, segment.duration, output
            )
            for segment, output in zip(segments, outputs)
        ]
        try:
            parts: list[str] = [future.result() for future in futures]
        except Exception as err:
            for future in futures:
                future.cancel()
            executor.shutdown(wait=True)
            for output in outputs:
                discard(output)
            logger.error(msg=f"Clip extraction failed: {err}", exc_info=True)
            raise _as_failure("extraction", err) from err
    return parts


def merge_parts(parts: Sequence[str]) -> str:
    """Concatenates ``parts`` in order; the parts are released afterwards."""
    merged: str = tmp_path(unique_name(".mp4"))
    try:
        render.concat_clips(parts, merged)
    except Exception as err:
        discard(merged)
        logger.error(msg=f"Clip concatenation failed: {err}", exc_info=True)
        raise _as_failure("concatenation", err) from err
    finally:
        for part in parts:
            discard(part)
    return merged


def render_nugget(
    merged: str, overlays: Sequence[OverlayDescriptor], output: str
) -> str:
    """
    Renders ``merged`` with the configured crop, pad and caption overlays.

    The merged file is released whatever the outcome. A failed render leaves
    no output file behind.
    """
    drawtexts = [to_drawtext_options(descriptor) for descriptor in overlays]
    logger.info(msg=f"Rendering {output} with {len(drawtexts)} caption overlays.")
    try:
        render.render_filtered(
            merged,
            Config.RENDER_CONFIG["crop"],
            Config.RENDER_CONFIG["pad"],
            drawtexts,
            output,
        )
    except Exception as err:
        discard(output)
        logger.error(msg=f"Final render failed: {err}", exc_info=True)
        raise _as_failure("render", err) from err
    finally:
        discard(merged)
    return output


def assemble(
    source: str,
    intervals: Sequence[Interval] | Sequence[Sequence[str]],
    overlays: Sequence[OverlayDescriptor],
    output: str,
) -> str:
    """Cuts, joins and renders ``source`` into the final ``output`` file."""
    parts: list[str] = extract_parts(source, parse_intervals(intervals))
    merged: str = merge_parts(parts)
    return render_nugget(merged, overlays, output)

"""Selection and re-timing of cues onto the concatenated clip timeline."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace
from itertools import chain

from nugget.domain import Cue, Interval, parse_intervals
from nugget.utils.logger import get_logger
from nugget.utils.timecode import as_seconds

logger: logging.Logger = get_logger(__name__)


def interval_offsets(intervals: Sequence[Interval]) -> list[float]:
    """Returns where each interval starts on the output timeline.

    The first interval starts at 0, every following one right after the
    previous one ends.
    """
    offsets: list[float] = []
    consumed = 0.0
    for interval in intervals:
        offsets.append(round(consumed, 1))
        consumed += interval.end_seconds - interval.start_seconds
    return offsets


def _select_contained(cues: Sequence[Cue], start: float, end: float) -> list[Cue]:
    selected: list[Cue] = []
    for cue in cues:
        cue_start = as_seconds(cue.start_time)
        cue_end = as_seconds(cue.end_time)
        if cue_start >= start and cue_end <= end:
            selected.append(cue)
        elif cue_end > start and cue_start < end:
            # Straddling cues are never truncated.
            logger.debug(
                "Dropping cue %r straddling interval %.1f-%.1f", cue.text, start, end
            )
    return selected


def remap_cues(
    cues: Sequence[Cue],
    intervals: Sequence[Interval] | Sequence[Sequence[str]],
) -> list[list[Cue]]:
    """Cuts normalized cues per interval and rebases them on the output timeline.

    Returns one list per interval, in interval order. An interval without any
    fully contained cue yields an empty list.
    """
    parsed = parse_intervals(intervals)
    groups: list[list[Cue]] = []
    for interval, offset in zip(parsed, interval_offsets(parsed)):
        start = interval.start_seconds
        groups.append(
            [
                replace(
                    cue,
                    start_time=round(as_seconds(cue.start_time) - start + offset, 1),
                    end_time=round(as_seconds(cue.end_time) - start + offset, 1),
                )
                for cue in _select_contained(cues, start, interval.end_seconds)
            ]
        )
        logger.debug(
            "Interval %s-%s keeps %d cues at offset %.1f",
            interval.start,
            interval.end,
            len(groups[-1]),
            offset,
        )
    return groups


def flatten_remapped(groups: Sequence[Sequence[Cue]]) -> list[Cue]:
    """Joins per-interval cue lists in interval order without cross-interval dedup."""
    return list(chain.from_iterable(groups))

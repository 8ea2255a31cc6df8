"""Cleanup of raw caption cues before they are cut into intervals."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace

from nugget.domain import Cue
from nugget.utils.logger import get_logger
from nugget.utils.timecode import as_seconds

logger: logging.Logger = get_logger(__name__)


def drop_rolling_duplicates(cues: Sequence[Cue]) -> list[Cue]:
    """Removes cues whose text is already contained in the previous kept cue.

    Automatic captions re-emit a rolling two-line buffer, so each new cue
    usually repeats the line shown before it. Comparison uses the kept cue's
    original text.
    """
    kept: list[Cue] = []
    for cue in cues:
        if kept and cue.text in kept[-1].text:
            logger.debug("Dropping duplicate cue %r", cue.text)
            continue
        kept.append(cue)
    return kept


def strip_carried_line(cue: Cue) -> Cue:
    """Keeps only the line after the first line break, if there is one."""
    if "\n" not in cue.text:
        return cue
    return replace(cue, text=cue.text.split("\n")[1])


def close_gaps(cues: Sequence[Cue]) -> list[Cue]:
    """Extends every cue but the last until the next cue starts."""
    closed: list[Cue] = []
    for index, cue in enumerate(cues):
        if index + 1 < len(cues):
            cue = replace(cue, end_time=cues[index + 1].start_time)
        closed.append(cue)
    return closed


def normalize_cues(cues: Sequence[Cue]) -> list[Cue]:
    """Dedups, strips carried-over lines, closes gaps and converts times to seconds.

    The order of the steps matters: gaps are closed on the cleaned sequence,
    and times are converted last.

    Running it again on its output is a no-op as long as no kept text is a
    substring of the kept text before it once carried lines are stripped.
    Dedup sees the full two-line text on the first pass but only the
    stripped line on later passes, so ``"xyz\\nab"`` followed by ``"abc\\nb"``
    keeps both cues once and merges them on a second run.
    """
    deduplicated = drop_rolling_duplicates(cues)
    stripped = [strip_carried_line(cue) for cue in deduplicated]
    closed = close_gaps(stripped)
    normalized = [
        replace(
            cue,
            start_time=as_seconds(cue.start_time),
            end_time=as_seconds(cue.end_time),
        )
        for cue in closed
    ]
    logger.debug(
        "Normalized %d raw cues into %d cues", len(cues), len(normalized)
    )
    return normalized

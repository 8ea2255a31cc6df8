"""Domain data structures for cues, intervals, overlays and video formats."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import NamedTuple

from nugget.utils.timecode import to_seconds


class InvalidInterval(ValueError):
    """Raised when an interval is not a ``[from, to]`` pair with ``to`` after ``from``."""


@dataclass(frozen=True)
class Cue:
    """One subtitle display unit.

    Raw cues carry timecode strings; normalized and remapped cues carry seconds.
    """

    text: str
    start_time: float | str
    end_time: float | str


class Interval(NamedTuple):
    """A source-video span, both bounds as timecode strings."""

    start: str
    end: str

    @property
    def start_seconds(self) -> float:
        return to_seconds(self.start)

    @property
    def end_seconds(self) -> float:
        return to_seconds(self.end)

    @property
    def duration(self) -> float:
        return round(self.end_seconds - self.start_seconds, 1)

    @classmethod
    def parse(cls, pair: Sequence[str]) -> Interval:
        """Builds an interval from a two-element ``[from, to]`` pair."""
        if isinstance(pair, str) or len(pair) != 2:
            raise InvalidInterval(f"Interval must be a [from, to] pair, got {pair!r}")
        interval = cls(str(pair[0]), str(pair[1]))
        if interval.end_seconds <= interval.start_seconds:
            raise InvalidInterval(
                f"Interval end {interval.end} must be after start {interval.start}"
            )
        return interval


def parse_intervals(pairs: Sequence[Sequence[str]]) -> list[Interval]:
    """Validates caller supplied ``[from, to]`` pairs, preserving their order."""
    return [
        pair if isinstance(pair, Interval) else Interval.parse(pair) for pair in pairs
    ]


@dataclass(frozen=True)
class OverlayDescriptor:
    """A positioned text overlay visible over an output-timeline window."""

    text: str
    font_size: int
    x: str
    y: str
    visible_from: float
    visible_to: float


@dataclass(frozen=True)
class CueOverlays:
    """Overlays generated for exactly one cue."""

    primary: OverlayDescriptor
    secondary: OverlayDescriptor | None = None

    def descriptors(self) -> list[OverlayDescriptor]:
        if self.secondary is None:
            return [self.primary]
        return [self.primary, self.secondary]


class ClipSegment(NamedTuple):
    """Seek/duration instruction for extracting one interval."""

    index: int
    seek: str
    duration: float


@dataclass(frozen=True)
class VideoFormat:
    """One encoding offered by the video host."""

    format_id: str
    extension: str
    width: int | None
    height: int | None
    has_video: bool
    audio_codec: str | None
    resolution: str

    @property
    def has_audio(self) -> bool:
        return self.audio_codec is not None


@dataclass(frozen=True)
class FormatListing:
    """Available encodings sorted by width plus the selected best one."""

    formats: list[VideoFormat]
    best: VideoFormat | None

"""Conversion of subtitle timecodes into seconds on the video timeline."""

from __future__ import annotations

import math


class InvalidTimecode(ValueError):
    """Raised when a timecode string cannot be read as HH:MM:SS[,mmm]."""


def to_seconds(timecode: str) -> float:
    """Converts ``HH:MM:SS`` or ``HH:MM:SS,mmm`` into seconds rounded to 0.1.

    Example: ``"00:01:30,330"`` -> ``90.3``.
    """
    if not isinstance(timecode, str):
        raise InvalidTimecode(f"Timecode must be a string, got {timecode!r}")
    parts = timecode.strip().split(":")
    if len(parts) < 3:
        raise InvalidTimecode(f"Timecode {timecode!r} needs HH:MM:SS segments")

    hours_raw, minutes_raw, seconds_raw = parts[0], parts[1], parts[2]
    try:
        hours = int(hours_raw)
        minutes = int(minutes_raw)
        seconds = float(seconds_raw.replace(",", "."))
    except ValueError as err:
        raise InvalidTimecode(f"Timecode {timecode!r} is not numeric") from err
    if not math.isfinite(seconds):
        raise InvalidTimecode(f"Timecode {timecode!r} is not numeric")
    if hours < 0 or minutes < 0 or seconds < 0:
        raise InvalidTimecode(f"Timecode {timecode!r} has a negative component")

    return round(hours * 3600 + minutes * 60 + seconds, 1)


def as_seconds(value: str | float | int) -> float:
    """Returns seconds for either a timecode string or an already numeric time."""
    if isinstance(value, bool):
        raise InvalidTimecode(f"Unsupported time value {value!r}")
    if isinstance(value, (int, float)):
        if value < 0:
            raise InvalidTimecode(f"Time value {value!r} is negative")
        return round(float(value), 1)
    return to_seconds(value)

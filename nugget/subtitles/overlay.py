"""
Overlay generation for burning remapped cues into the rendered nugget.

Each cue becomes one centred line near the bottom of the frame, or two smaller
stacked lines when its text is too long for a single line. Descriptors are
turned into ffmpeg ``drawtext`` options by ``to_drawtext_options``.

Functions:
    - split_long_text: Splits overlong cue text into head and tail lines.
    - build_cue_overlays: Builds the overlays of one cue.
    - build_overlays: Builds the flattened overlay list for a cue stream.
    - to_drawtext_options: Converts a descriptor into drawtext filter options.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from nugget.config import Config
from nugget.domain import Cue, CueOverlays, OverlayDescriptor
from nugget.utils.logger import get_logger
from nugget.utils.timecode import InvalidTimecode, as_seconds

logger: logging.Logger = get_logger(__name__)


class InvalidCue(ValueError):
    """Raised when a cue lacks the text or times needed to draw it."""


def split_long_text(text: str, search_chars: int) -> tuple[str, str]:
    """
    Splits text at the last space found within the first ``search_chars``.

    When that window holds no usable space the split happens at
    ``search_chars`` itself. The tail keeps its leading space.

    Arguments:
        text (str): Cue text longer than one overlay line.
        search_chars (int): Width of the window searched for a space.

    Returns:
        tuple[str, str]: Head and tail lines.
    """
    position: int = text[:search_chars].rfind(" ")
    if position <= 0:
        position = search_chars
    return text[:position], text[position:]


def _read_window(cue: Cue) -> tuple[float, float]:
    start = getattr(cue, "start_time", None)
    end = getattr(cue, "end_time", None)
    if start is None or end is None:
        raise InvalidCue(f"Cue {cue!r} is missing its start or end time")
    try:
        return as_seconds(start), as_seconds(end)
    except InvalidTimecode as err:
        raise InvalidCue(f"Cue {cue!r} has unreadable times: {err}") from err


def build_cue_overlays(cue: Cue) -> CueOverlays:
    """Builds one overlay for short text or a head/tail pair for long text."""
    text = getattr(cue, "text", None)
    if not isinstance(text, str):
        raise InvalidCue(f"Cue {cue!r} has no text")
    visible_from, visible_to = _read_window(cue)
    layout: dict = Config.OVERLAY_CONFIG

    if len(text) <= layout["max_single_line_chars"]:
        return CueOverlays(
            primary=OverlayDescriptor(
                text=text,
                font_size=layout["single_line_font_size"],
                x=layout["x"],
                y=layout["single_line_y"],
                visible_from=visible_from,
                visible_to=visible_to,
            )
        )

    head, tail = split_long_text(text, layout["wrap_search_chars"])
    return CueOverlays(
        primary=OverlayDescriptor(
            text=head,
            font_size=layout["multi_line_font_size"],
            x=layout["x"],
            y=layout["head_y"],
            visible_from=visible_from,
            visible_to=visible_to,
        ),
        secondary=OverlayDescriptor(
            text=tail,
            font_size=layout["multi_line_font_size"],
            x=layout["x"],
            y=layout["tail_y"],
            visible_from=visible_from,
            visible_to=visible_to,
        ),
    )


def build_overlays(cues: Sequence[Cue]) -> list[OverlayDescriptor]:
    """
    Builds overlays for every cue, keeping cue order.

    An invalid cue aborts the whole build with ``InvalidCue``.
    """
    descriptors: list[OverlayDescriptor] = []
    for cue in cues:
        descriptors.extend(build_cue_overlays(cue).descriptors())
    logger.debug(msg=f"Built {len(descriptors)} overlays for {len(cues)} cues.")
    return descriptors


def to_drawtext_options(descriptor: OverlayDescriptor) -> dict[str, Any]:
    """Returns the ffmpeg ``drawtext`` options that draw one descriptor."""
    options: dict[str, Any] = {
        "enable": (
            f"between(t,{descriptor.visible_from},{descriptor.visible_to})"
        ),
        "fontcolor": Config.RENDER_CONFIG["font_color"],
        "x": descriptor.x,
        "y": descriptor.y,
        "text": descriptor.text,
        "fontsize": descriptor.font_size,
    }
    if Config.RENDER_CONFIG["font_file"]:
        options["fontfile"] = Config.RENDER_CONFIG["font_file"]
    return options

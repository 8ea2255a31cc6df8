"""
Console rendering of the remapped caption timeline.

Functions:
    - display_time: Formats output-timeline seconds for display.
    - color_txt: Colorizes a string.
    - print_cue_timeline: Prints the cue timeline vertically.
"""

import logging
from typing import Sequence

from colored import attr, bg, fg

from nugget.domain import Cue
from nugget.utils.logger import get_logger


logger: logging.Logger = get_logger(__name__)


def display_time(seconds: float) -> str:
    """
    Returns output-timeline seconds as ``MmSS.Ss`` or ``S.Ss``.

    Arguments:
        seconds (float): Time in seconds.

    Returns:
        str: Formatted time.
    """
    minutes, remainder = divmod(float(seconds), 60)
    if minutes:
        return f"{int(minutes)}m{remainder:04.1f}s"
    return f"{remainder:.1f}s"


def color_txt(
    string: str, fg_color: str, bg_color: str, padding: int = 0
) -> str:
    """
    Colorizes a string.

    Arguments:
        string (str): String to be colorized.
        fg_color (str): Foreground color.
        bg_color (str): Background color.
        padding (int): Width the string is padded to.

    Returns:
        str: Colorized string.
    """
    if padding:
        string = string.ljust(padding)

    return f"{fg(fg_color)}{bg(bg_color)}{string}{attr('reset')}"


def print_cue_timeline(cues: Sequence[Cue]) -> None:
    """
    Prints the remapped cues vertically: start, end and caption text.

    Arguments:
        cues (Sequence[Cue]): Cues on the output timeline.
    """
    if not cues:
        logger.info(msg="No captions to print.")
        return

    logger.info(msg=f"Printing caption timeline with {len(cues)} entries.")
    rows = [
        (display_time(cue.start_time), display_time(cue.end_time), cue.text.strip())
        for cue in cues
    ]
    max_start_width: int = max(len("Start"), *(len(row[0]) for row in rows))
    max_end_width: int = max(len("End"), *(len(row[1]) for row in rows))

    # Header
    print(color_txt("Start", "black", "green", max_start_width + 1), end="")
    print(color_txt("End", "black", "yellow", max_end_width + 1), end="")
    print(color_txt("Caption", "black", "blue"))

    for start, end, text in rows:
        print(f"{start.ljust(max_start_width)} {end.ljust(max_end_width)} {text}")

"""Behavior tests for caption overlay descriptors and drawtext options."""

import pytest

from nugget.config import Config
from nugget.domain import Cue
from nugget.subtitles.overlay import (
    InvalidCue,
    build_cue_overlays,
    build_overlays,
    split_long_text,
    to_drawtext_options,
)

LONG_TEXT = "Eu gosto muito de aprender português todos os dias"


def test_short_text_yields_one_bottom_line() -> None:
    overlays = build_overlays([Cue("Olá a todos", 1.0, 3.5)])

    assert len(overlays) == 1
    descriptor = overlays[0]
    assert descriptor.text == "Olá a todos"
    assert descriptor.font_size == 48
    assert descriptor.x == "(main_w/2-text_w/2)"
    assert descriptor.y == "(main_h-70)"
    assert (descriptor.visible_from, descriptor.visible_to) == (1.0, 3.5)


def test_thirty_characters_still_fit_on_one_line() -> None:
    text = "x" * 30

    assert build_cue_overlays(Cue(text, 0.0, 1.0)).secondary is None


def test_long_text_is_split_at_last_space_before_character_24() -> None:
    overlays = build_cue_overlays(Cue(LONG_TEXT, 4.0, 6.0))

    head, tail = overlays.primary, overlays.secondary
    assert tail is not None
    assert head.text == "Eu gosto muito de"
    assert tail.text == " aprender português todos os dias"
    assert head.font_size == tail.font_size == 36
    assert (head.visible_from, head.visible_to) == (tail.visible_from, tail.visible_to)
    assert head.y == "(main_h-86)"
    assert tail.y == "(main_h-44)"
    assert head.y != tail.y


def test_text_without_space_is_split_at_character_24() -> None:
    head, tail = split_long_text("a" * 40, 24)

    assert head == "a" * 24
    assert tail == "a" * 16


def test_overlays_keep_cue_order_and_do_not_leak_between_cues() -> None:
    cues = [Cue(LONG_TEXT, 0.0, 2.0), Cue("curto", 2.0, 3.0)]

    overlays = build_overlays(cues)

    assert [descriptor.text for descriptor in overlays] == [
        "Eu gosto muito de",
        " aprender português todos os dias",
        "curto",
    ]
    assert overlays[-1].font_size == 48


def test_cue_without_text_is_rejected() -> None:
    with pytest.raises(InvalidCue):
        build_overlays([Cue(None, 0.0, 1.0)])  # type: ignore[arg-type]


def test_cue_without_times_is_rejected() -> None:
    with pytest.raises(InvalidCue):
        build_cue_overlays(Cue("text", None, 1.0))  # type: ignore[arg-type]


def test_drawtext_options_carry_visibility_window(monkeypatch) -> None:
    monkeypatch.setitem(Config.RENDER_CONFIG, "font_file", None)
    descriptor = build_cue_overlays(Cue("Olá", 1.0, 3.5)).primary

    options = to_drawtext_options(descriptor)

    assert options == {
        "enable": "between(t,1.0,3.5)",
        "fontcolor": "white",
        "x": "(main_w/2-text_w/2)",
        "y": "(main_h-70)",
        "text": "Olá",
        "fontsize": 48,
    }


def test_drawtext_options_include_configured_font(monkeypatch) -> None:
    monkeypatch.setitem(Config.RENDER_CONFIG, "font_file", "/fonts/sans.ttf")
    descriptor = build_cue_overlays(Cue("Olá", 1.0, 3.5)).primary

    assert to_drawtext_options(descriptor)["fontfile"] == "/fonts/sans.ttf"

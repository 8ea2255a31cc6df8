"""Behavior tests for cutting cues per interval and rebasing them."""

import pytest

from nugget.domain import Cue, Interval, InvalidInterval
from nugget.subtitles.remapper import flatten_remapped, interval_offsets, remap_cues

INTERVALS = [["00:01:19", "00:01:40"], ["00:04:30", "00:05:00"]]


def test_one_cue_per_interval_lands_on_joined_timeline() -> None:
    cues = [Cue("first", 80.0, 82.0), Cue("second", 275.0, 278.0)]

    remapped = flatten_remapped(remap_cues(cues, INTERVALS))

    assert len(remapped) == 2
    assert remapped[0] == Cue("first", 1.0, 3.0)
    assert remapped[1].start_time >= 21.0
    assert remapped[1] == Cue("second", 26.0, 29.0)


def test_straddling_cues_are_excluded_not_clipped() -> None:
    cues = [
        Cue("before", 77.0, 80.0),
        Cue("inside", 85.0, 86.5),
        Cue("after", 99.0, 101.0),
    ]

    groups = remap_cues(cues, INTERVALS)

    assert [cue.text for cue in groups[0]] == ["inside"]
    assert groups[1] == []


def test_remapping_preserves_cue_duration() -> None:
    cues = [
        Cue("a", 79.0, 81.3),
        Cue("b", 81.3, 84.9),
        Cue("c", 271.2, 275.7),
        Cue("d", 290.4, 300.0),
    ]

    for original, remapped in zip(cues, flatten_remapped(remap_cues(cues, INTERVALS))):
        assert remapped.end_time - remapped.start_time == pytest.approx(
            original.end_time - original.start_time
        )


def test_offsets_accumulate_over_all_prior_intervals() -> None:
    intervals = [
        ["00:00:00", "00:00:10"],
        ["00:01:00", "00:01:20"],
        ["00:02:00", "00:02:30"],
    ]
    cues = [Cue("third", 122.0, 124.0)]

    groups = remap_cues(cues, intervals)

    assert groups[0] == [] and groups[1] == []
    assert groups[2] == [Cue("third", 32.0, 34.0)]


def test_interval_offsets_are_running_durations() -> None:
    intervals = [Interval.parse(pair) for pair in INTERVALS]

    assert interval_offsets(intervals) == [0.0, 21.0]


def test_cues_are_not_deduplicated_across_intervals() -> None:
    intervals = [["00:00:00", "00:00:10"], ["00:00:00", "00:00:10"]]
    cues = [Cue("repeat", 2.0, 4.0)]

    remapped = flatten_remapped(remap_cues(cues, intervals))

    assert remapped == [Cue("repeat", 2.0, 4.0), Cue("repeat", 12.0, 14.0)]


def test_remap_does_not_mutate_input_cues() -> None:
    cues = [Cue("first", 80.0, 82.0)]

    remap_cues(cues, INTERVALS)

    assert cues == [Cue("first", 80.0, 82.0)]


def test_remap_rejects_inverted_interval() -> None:
    with pytest.raises(InvalidInterval):
        remap_cues([], [["00:00:10", "00:00:05"]])

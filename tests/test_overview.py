#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""Unit tests for selection overviews"""

import numpy as np
import pytest

import keycircle


@pytest.mark.parametrize(
    "index,steps,expected",
    [(0, 1, 1), (11, 1, 0), (0, -1, 11), (3, 12, 3), (5, 2, 7)],
)
def test_step_position(index, steps, expected):
    assert keycircle.step_position(index, steps) == expected


@pytest.mark.xfail(raises=keycircle.ParameterError)
def test_step_position_bad():
    keycircle.step_position(12)


def test_toggle_mode():
    assert keycircle.toggle_mode("major") == "minor"
    assert keycircle.toggle_mode("minor") == "major"


def test_cycle_preference():
    assert keycircle.cycle_preference("auto") == "sharps"
    assert keycircle.cycle_preference("sharps") == "flats"
    assert keycircle.cycle_preference("flats") == "auto"


@pytest.mark.xfail(raises=keycircle.ParameterError)
def test_cycle_preference_bad():
    keycircle.cycle_preference("naturals")


def test_key_overview_c_major():
    ov = keycircle.key_overview(0)

    assert ov["tonic"] == "C"
    assert ov["relative"] == "A"
    assert ov["scale"] == ["C", "D", "E", "F", "G", "A", "B"]
    assert ov["accidentals"] == []
    assert [c["label"] for c in ov["chords"]] == list(keycircle.SEVENTH_LABELS["major"])
    assert ov["chords"][0]["notes"] == ["C", "E", "G", "B"]
    assert np.isclose(ov["tonic_hz"], 261.6255653005986)


def test_key_overview_spoke_flats():
    ov = keycircle.key_overview(6, preference="flats", sevenths=False)

    assert ov["tonic"] == "G♭"
    assert ov["relative"] == "E♭"
    assert ov["scale"] == ["G♭", "A♭", "B♭", "C♭", "D♭", "E♭", "F"]
    assert ov["accidentals"] == ["B♭", "E♭", "A♭", "D♭", "G♭", "C♭"]
    assert [c["label"] for c in ov["chords"]] == list(keycircle.TRIAD_LABELS["major"])


def test_key_overview_a_minor():
    ov = keycircle.key_overview(0, mode="minor", sevenths=False)

    assert ov["tonic"] == "A"
    assert ov["relative"] == "C"
    assert ov["scale"][-1] == "G♯"
    dominant = ov["chords"][4]
    assert dominant["label"] == "V"
    assert dominant["notes"] == ["E", "G♯", "B"]
    assert np.allclose(dominant["hz"], keycircle.voice_chord(["E", "G#", "B"]))
    assert ov["tonic_hz"] == 440.0


def test_key_overview_ascii():
    ov = keycircle.key_overview(5, mode="minor", unicode=False)
    assert ov["scale"] == ["G#", "A#", "B", "C#", "D#", "E", "F##"]
    assert ov["accidentals"] == ["F#", "C#", "G#", "D#", "A#"]


def test_key_overview_all(position, preference):
    for mode in ("major", "minor"):
        for sevenths in (False, True):
            ov = keycircle.key_overview(position, mode=mode, preference=preference, sevenths=sevenths)
            assert len(ov["scale"]) == 7
            assert len(ov["chords"]) == 7
            for chord in ov["chords"]:
                assert len(chord["notes"]) == len(chord["hz"]) == (4 if sevenths else 3)

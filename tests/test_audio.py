#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""Unit tests for signal synthesis"""

import numpy as np
import pytest

import keycircle


@pytest.mark.parametrize("sr", [8000, 22050])
@pytest.mark.parametrize("duration", [0.25, 0.45])
def test_note_signal(sr, duration):
    y = keycircle.note_signal(440.0, sr=sr, duration=duration)

    assert y.shape == (int(duration * sr),)
    assert np.all(np.isfinite(y))
    assert np.max(np.abs(y)) <= 0.32 + 1e-8
    # starts and ends near silence
    assert np.abs(y[0]) < 1e-3
    assert np.max(np.abs(y[-10:])) < 1e-3


def test_note_signal_peak():
    y = keycircle.note_signal(100.0, sr=22050, duration=1.0, peak=0.5)
    assert np.max(np.abs(y)) <= 0.5 + 1e-8
    assert np.max(np.abs(y)) > 0.4


def test_chord_signal():
    freqs = keycircle.voice_chord(["C", "E", "G"])
    y = keycircle.chord_signal(freqs, sr=8000)

    assert y.shape == (6400,)
    assert np.max(np.abs(y)) <= 0.28 + 0.28 + 0.22 + 1e-8
    assert np.max(np.abs(y)) > 0.1


def test_chord_signal_single_voice():
    y1 = keycircle.chord_signal([440.0], sr=8000, duration=0.5)
    y2 = keycircle.note_signal(440.0, sr=8000, duration=0.5, peak=0.28, attack=0.02)
    assert np.allclose(y1, y2)


@pytest.mark.xfail(raises=keycircle.ParameterError)
@pytest.mark.parametrize(
    "frequency,sr,duration",
    [(0, 22050, 0.5), (-440, 22050, 0.5), (440, 0, 0.5), (440, 22050, 0.01)],
)
def test_note_signal_bad(frequency, sr, duration):
    keycircle.note_signal(frequency, sr=sr, duration=duration)


@pytest.mark.xfail(raises=keycircle.ParameterError)
def test_chord_signal_empty():
    keycircle.chord_signal([])

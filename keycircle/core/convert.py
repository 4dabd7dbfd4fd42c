#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Conversions between spelled notes, MIDI numbers, and frequencies"""

from typing import Iterable, Sequence, Union, overload

import numpy as np

from .._typing import _FloatLike_co, _ScalarOrSequence, _SequenceLike
from .spelling import Spelling, normalize_note

__all__ = ["NATURAL_PITCH_CLASSES", "spelled_to_midi", "midi_to_hz", "note_to_hz", "voice_chord"]

NATURAL_PITCH_CLASSES = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}

_NoteLike = Union[str, Spelling]


def spelled_to_midi(note: _NoteLike, *, octave: int = 4) -> int:
    """Convert a spelled note and octave to a MIDI number.

    The pitch class is that of the natural letter shifted by the
    accidentals and wrapped into ``[0, 12)``; the octave then selects
    ``12 * (octave + 1)`` as its base, so ``C4 = 60`` and ``A4 = 69``.
    Enharmonic spellings within an octave number map to the same
    number, e.g. ``C♯4`` and ``D♭4``.

    Parameters
    ----------
    note : str or Spelling
        Strings are normalized with `normalize_note`.

    octave : int
        Scientific pitch octave number

    Returns
    -------
    midi : int

    See Also
    --------
    midi_to_hz
    note_to_hz

    Examples
    --------
    >>> keycircle.spelled_to_midi('A')
    69
    >>> keycircle.spelled_to_midi('Db', octave=4)
    61
    >>> keycircle.spelled_to_midi('B#', octave=3)
    48
    """
    spelling = normalize_note(note)
    pitch_class = (NATURAL_PITCH_CLASSES[spelling.letter] + spelling.accidental) % 12
    return 12 * (octave + 1) + pitch_class


@overload
def midi_to_hz(notes: _FloatLike_co) -> np.floating:
    ...


@overload
def midi_to_hz(notes: _SequenceLike[_FloatLike_co]) -> np.ndarray:
    ...


def midi_to_hz(notes: _ScalarOrSequence[_FloatLike_co]) -> Union[np.floating, np.ndarray]:
    """Get the frequency (Hz) of MIDI note(s) in twelve-tone equal
    temperament with ``A4 = 440 Hz``.

    Parameters
    ----------
    notes : int or np.ndarray [shape=(n,), dtype=int]
        midi number(s) of the note(s)

    Returns
    -------
    frequency : number or np.ndarray [shape=(n,), dtype=float]
        frequency (frequencies) of ``notes`` in Hz

    Examples
    --------
    >>> keycircle.midi_to_hz(69)
    440.0
    >>> keycircle.midi_to_hz(np.arange(60, 72, 4))
    array([261.626, 329.628, 415.305])
    """
    return 440.0 * (2.0 ** ((np.asanyarray(notes) - 69.0) / 12.0))


@overload
def note_to_hz(note: _NoteLike, *, octave: int = ...) -> np.floating:
    ...


@overload
def note_to_hz(note: Iterable[_NoteLike], *, octave: int = ...) -> np.ndarray:
    ...


def note_to_hz(
    note: Union[_NoteLike, Iterable[_NoteLike]], *, octave: int = 4
) -> Union[np.floating, np.ndarray]:
    """Get the frequency of one or more spelled notes at a given octave.

    Parameters
    ----------
    note : str, Spelling, or iterable of either
    octave : int

    Returns
    -------
    frequency : number or np.ndarray

    Examples
    --------
    >>> keycircle.note_to_hz('A', octave=5)
    880.0
    >>> keycircle.note_to_hz(['C', 'E', 'G'])
    array([261.626, 329.628, 391.995])
    """
    if isinstance(note, (str, Spelling)):
        return midi_to_hz(spelled_to_midi(note, octave=octave))

    return midi_to_hz(np.array([spelled_to_midi(n, octave=octave) for n in note]))


def voice_chord(notes: Sequence[_NoteLike], *, octave: int = 4) -> np.ndarray:
    """Voice a chord for playback.

    The first two tones (root and third) sound at ``octave``, and all
    remaining tones (fifth and any extension) one octave above.

    Parameters
    ----------
    notes : sequence of str or Spelling
        Chord tones, root first

    octave : int
        Reference octave for the root and third

    Returns
    -------
    frequencies : np.ndarray [shape=(len(notes),)]

    Examples
    --------
    >>> keycircle.voice_chord(['C', 'E', 'G'])
    array([261.626, 329.628, 783.991])
    """
    midi = [spelled_to_midi(n, octave=octave if i < 2 else octave + 1) for i, n in enumerate(notes)]
    return midi_to_hz(np.asarray(midi))

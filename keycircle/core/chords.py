#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Diatonic chords and roman-numeral labels"""

from typing import List, NamedTuple, Sequence, Tuple

from .._typing import _ModeKind
from ..util.exceptions import ParameterError
from ..util.utils import valid_mode
from .convert import spelled_to_midi
from .spelling import Spelling, normalize_note

__all__ = [
    "Chord",
    "TRIAD_LABELS",
    "SEVENTH_LABELS",
    "diatonic_triads",
    "diatonic_sevenths",
    "diatonic_chords",
    "chord_quality",
]

TRIAD_LABELS = dict(
    major=("I", "ii", "iii", "IV", "V", "vi", "vii°"),
    minor=("i", "ii°", "III+", "iv", "V", "VI", "vii°"),
)

# Conventional names, not derived from the intervals
SEVENTH_LABELS = dict(
    major=("Imaj7", "ii7", "iii7", "IVmaj7", "V7", "vi7", "viiø7"),
    minor=("i mMaj7", "iiø7", "III+maj7", "iv7", "V7", "VImaj7", "vii°7"),
)

# Semitones above the root -> quality
QUALITIES = {
    (4, 7): "maj",
    (3, 7): "min",
    (3, 6): "dim",
    (4, 8): "aug",
    (4, 7, 11): "maj7",
    (4, 7, 10): "7",
    (3, 7, 10): "min7",
    (3, 6, 10): "hdim7",
    (3, 6, 9): "dim7",
    (3, 7, 11): "minmaj7",
    (4, 8, 11): "augmaj7",
}


class Chord(NamedTuple):
    """A labeled diatonic chord, listed root first."""

    label: str
    notes: Tuple[Spelling, ...]


def _stack_thirds(
    scale: Sequence[Spelling], labels: Sequence[str], size: int
) -> List[Chord]:
    if len(scale) != 7:
        raise ParameterError(f"Scale must have 7 notes, given len(scale)={len(scale)}")

    notes = [normalize_note(n) for n in scale]
    return [
        Chord(labels[i], tuple(notes[(i + 2 * k) % 7] for k in range(size)))
        for i in range(7)
    ]


def diatonic_triads(
    scale: Sequence[Spelling], *, mode: _ModeKind = "major"
) -> List[Chord]:
    """Build the seven diatonic triads of a scale.

    Each triad stacks scale degrees ``(i, i+2, i+4)`` (mod 7).

    Parameters
    ----------
    scale : sequence of Spelling, length 7
        A scale as produced by `build_scale`

    mode : {'major', 'minor'}
        Selects the roman numerals: ``I ii iii IV V vi vii°`` for major,
        ``i ii° III+ iv V VI vii°`` for harmonic minor.

    Returns
    -------
    triads : list of Chord, length 7
        In scale-degree order

    Raises
    ------
    ParameterError
        If ``scale`` does not have 7 notes, or ``mode`` is unsupported

    See Also
    --------
    diatonic_sevenths

    Examples
    --------
    >>> scale = keycircle.build_scale('a', mode='minor')
    >>> chord = keycircle.diatonic_triads(scale, mode='minor')[4]
    >>> chord.label, [str(n) for n in chord.notes]
    ('V', ['E', 'G#', 'B'])
    """
    valid_mode(mode)
    return _stack_thirds(scale, TRIAD_LABELS[mode], 3)


def diatonic_sevenths(
    scale: Sequence[Spelling], *, mode: _ModeKind = "major"
) -> List[Chord]:
    """Build the seven diatonic seventh chords of a scale.

    Each chord stacks scale degrees ``(i, i+2, i+4, i+6)`` (mod 7).
    Labels follow conventional chord-quality naming:

    - major: ``Imaj7 ii7 iii7 IVmaj7 V7 vi7 viiø7``
    - harmonic minor: ``i mMaj7 iiø7 III+maj7 iv7 V7 VImaj7 vii°7``

    Parameters
    ----------
    scale : sequence of Spelling, length 7
    mode : {'major', 'minor'}

    Returns
    -------
    sevenths : list of Chord, length 7

    Examples
    --------
    >>> chords = keycircle.diatonic_sevenths(keycircle.build_scale('C'))
    >>> [c.label for c in chords]
    ['Imaj7', 'ii7', 'iii7', 'IVmaj7', 'V7', 'vi7', 'viiø7']
    """
    valid_mode(mode)
    return _stack_thirds(scale, SEVENTH_LABELS[mode], 4)


def diatonic_chords(
    scale: Sequence[Spelling], *, mode: _ModeKind = "major", sevenths: bool = False
) -> List[Chord]:
    """Build diatonic triads, or seventh chords if ``sevenths=True``."""
    if sevenths:
        return diatonic_sevenths(scale, mode=mode)
    return diatonic_triads(scale, mode=mode)


def chord_quality(chord: Chord) -> str:
    """Analyze the quality of a chord from its intervals.

    The spelled notes are mapped to pitch classes, and the semitone
    distances above the root are matched against the triad and seventh
    qualities ``maj``, ``min``, ``dim``, ``aug``, ``maj7``, ``7``,
    ``min7``, ``hdim7``, ``dim7``, ``minmaj7`` and ``augmaj7``.

    Parameters
    ----------
    chord : Chord

    Returns
    -------
    quality : str

    Raises
    ------
    ParameterError
        If the intervals do not form a known quality

    Examples
    --------
    >>> scale = keycircle.build_scale('a', mode='minor')
    >>> [keycircle.chord_quality(c) for c in keycircle.diatonic_triads(scale, mode='minor')]
    ['min', 'dim', 'aug', 'min', 'maj', 'maj', 'dim']
    """
    root = spelled_to_midi(chord.notes[0])
    intervals = tuple((spelled_to_midi(n) - root) % 12 for n in chord.notes[1:])

    try:
        return QUALITIES[intervals]
    except KeyError as exc:
        raise ParameterError(
            f"Unknown chord quality for intervals={intervals} in {chord.label!r}"
        ) from exc

#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Display-ready summaries of a circle-of-fifths selection"""

from typing import Any, Dict

from .._typing import _ModeKind, _PreferenceKind
from ..util.utils import MODES, PREFERENCES, valid_mode, valid_preference
from .chords import diatonic_chords
from .circle import CIRCLE, circle_position, key_name, relative_key_name
from .convert import note_to_hz, voice_chord
from .scale import build_scale, scale_signature
from .signature import signature_notes
from .spelling import normalize_note, render

__all__ = ["step_position", "toggle_mode", "cycle_preference", "key_overview"]


def step_position(index: int, steps: int = 1) -> int:
    """Move around the circle by ``steps`` fifths, wrapping at either end.

    Examples
    --------
    >>> keycircle.step_position(11)
    0
    >>> keycircle.step_position(0, -1)
    11
    """
    circle_position(index)
    return (index + steps) % len(CIRCLE)


def toggle_mode(mode: _ModeKind) -> str:
    """Switch between major and (harmonic) minor."""
    valid_mode(mode)
    return MODES[1 - MODES.index(mode)]


def cycle_preference(preference: _PreferenceKind) -> str:
    """Advance the enharmonic preference: auto → sharps → flats → auto."""
    valid_preference(preference)
    return PREFERENCES[(PREFERENCES.index(preference) + 1) % len(PREFERENCES)]


def key_overview(
    index: int,
    *,
    mode: _ModeKind = "major",
    preference: _PreferenceKind = "auto",
    sevenths: bool = True,
    unicode: bool = True,
) -> Dict[str, Any]:
    """Summarize a selected key for display and playback.

    Parameters
    ----------
    index : int in [0, 11]
        Circle position
    mode : {'major', 'minor'}
    preference : {'auto', 'sharps', 'flats'}
    sevenths : bool
        List seventh chords if ``True``, triads otherwise
    unicode : bool
        Render accidentals with Unicode glyphs

    Returns
    -------
    overview : dict
        - ``'tonic'``: rendered name of the selected key
        - ``'relative'``: rendered name of its relative key
        - ``'scale'``: list of the seven rendered scale notes
        - ``'accidentals'``: rendered notes of the key signature
          (empty for C major / A minor)
        - ``'chords'``: list of dicts with ``'label'``, ``'notes'``
          (rendered) and ``'hz'`` (voiced frequencies)
        - ``'tonic_hz'``: frequency of the tonic in octave 4

    Examples
    --------
    >>> ov = keycircle.key_overview(9, mode='minor', sevenths=False)
    >>> ov['tonic'], ov['relative'], ov['scale']
    ('C', 'E♭', ['C', 'D', 'E♭', 'F', 'G', 'A♭', 'B'])
    """
    tonic = key_name(index, mode=mode, preference=preference)
    scale = build_scale(tonic, mode=mode, preference=preference)
    signature = scale_signature(tonic, mode=mode, preference=preference)

    chords = [
        dict(
            label=chord.label,
            notes=[render(n, unicode=unicode) for n in chord.notes],
            hz=voice_chord(chord.notes),
        )
        for chord in diatonic_chords(scale, mode=mode, sevenths=sevenths)
    ]

    return dict(
        tonic=render(tonic, unicode=unicode),
        relative=render(relative_key_name(index, mode=mode, preference=preference), unicode=unicode),
        scale=[render(n, unicode=unicode) for n in scale],
        accidentals=[render(n, unicode=unicode) for n in signature_notes(signature)],
        chords=chords,
        tonic_hz=note_to_hz(normalize_note(tonic), octave=4),
    )

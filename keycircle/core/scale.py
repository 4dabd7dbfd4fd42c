#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Diatonic scale construction"""

from typing import Tuple, Union

from .._cache import cache
from .._typing import _ModeKind, _PreferenceKind
from ..util.utils import valid_mode, valid_preference
from .circle import relative_major
from .signature import KeySignature, apply_signature, key_signature
from .spelling import NATURAL_LETTERS, Spelling, normalize_note, raise_half_step

__all__ = ["build_scale", "scale_signature"]


def scale_signature(
    tonic: Union[str, Spelling],
    *,
    mode: _ModeKind = "major",
    preference: _PreferenceKind = "auto",
) -> KeySignature:
    """Find the key signature governing a scale.

    Major scales use their own signature.  Harmonic minor scales use the
    signature of their relative major; the raised seventh is an
    accidental outside the signature.

    Parameters
    ----------
    tonic : str or Spelling
    mode : {'major', 'minor'}
    preference : {'auto', 'sharps', 'flats'}

    Returns
    -------
    signature : KeySignature

    Examples
    --------
    >>> keycircle.scale_signature('e', mode='minor')
    KeySignature(kind='#', count=1, letters=('F',))
    """
    valid_mode(mode)
    valid_preference(preference)

    if mode == "major":
        return key_signature(normalize_note(tonic))

    return key_signature(relative_major(tonic, preference=preference))


@cache(level=20)
def build_scale(
    tonic: Union[str, Spelling],
    *,
    mode: _ModeKind = "major",
    preference: _PreferenceKind = "auto",
) -> Tuple[Spelling, ...]:
    """Spell the seven notes of a major or harmonic minor scale.

    The scale walks the seven letters upward from the tonic's letter and
    spells each one under the governing key signature (see
    `scale_signature`).  The first note is always the tonic as given,
    and in minor the seventh degree is raised by a half step to form the
    leading tone.

    Parameters
    ----------
    tonic : str or Spelling
        Tonic name, e.g. ``'Eb'`` or ``'c#'``.  Slash-separated
        alternates keep their first name.

    mode : {'major', 'minor'}
        ``'minor'`` builds the harmonic minor scale.

    preference : {'auto', 'sharps', 'flats'}
        Enharmonic preference, used to pick the relative major of the
        pivot minor keys (see `relative_major`).

    Returns
    -------
    scale : tuple of Spelling, length 7
        ``scale[0]`` is the tonic, ``scale[2]`` the third, ``scale[4]``
        the fifth and ``scale[6]`` the seventh.

    Raises
    ------
    ParameterError
        If ``mode`` or ``preference`` is not supported, or the major
        tonic has no conventional key signature.

    See Also
    --------
    diatonic_triads
    diatonic_sevenths

    Examples
    --------
    >>> [str(n) for n in keycircle.build_scale('D')]
    ['D', 'E', 'F#', 'G', 'A', 'B', 'C#']

    >>> [str(n) for n in keycircle.build_scale('a', mode='minor')]
    ['A', 'B', 'C', 'D', 'E', 'F', 'G#']

    >>> [keycircle.render(n) for n in keycircle.build_scale('g#', mode='minor')]
    ['G♯', 'A♯', 'B', 'C♯', 'D♯', 'E', 'F𝄪']
    """
    signature = scale_signature(tonic, mode=mode, preference=preference)
    spelled = normalize_note(tonic)

    start = NATURAL_LETTERS.index(spelled.letter)
    scale = [
        apply_signature(NATURAL_LETTERS[(start + i) % 7], signature) for i in range(7)
    ]

    # Keep the tonic's own accidental
    scale[0] = spelled

    if mode == "minor":
        scale[6] = raise_half_step(scale[6])

    return tuple(scale)

#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""The circle of fifths and enharmonic resolution"""

import warnings
from typing import NamedTuple

from ..util.exceptions import ParameterError
from ..util.utils import valid_mode, valid_preference
from .._typing import _ModeKind, _PreferenceKind
from .spelling import ASCII_TRANS, normalize_minor

__all__ = [
    "CirclePosition",
    "CIRCLE",
    "MINOR_RELATIVES",
    "circle_position",
    "resolve_enharmonic",
    "relative_major",
    "key_name",
    "relative_key_name",
]


class CirclePosition(NamedTuple):
    """One key area of the circle of fifths.

    ``accidentals`` is positive for sharp keys and negative for flat keys.
    The two spoke positions at the sharp/flat boundary carry both names
    of their enharmonic pair, separated by a slash.
    """

    major: str
    minor: str
    accidentals: int


# Ordered by ascending fifths from C
CIRCLE = (
    CirclePosition("C", "a", 0),
    CirclePosition("G", "e", 1),
    CirclePosition("D", "b", 2),
    CirclePosition("A", "f#", 3),
    CirclePosition("E", "c#", 4),
    CirclePosition("B", "g#", 5),
    CirclePosition("F# / Gb", "d# / eb", 6),
    CirclePosition("Db / C#", "bb / a#", -5),
    CirclePosition("Ab", "f", -4),
    CirclePosition("Eb", "c", -3),
    CirclePosition("Bb", "g", -2),
    CirclePosition("F", "d", -1),
)

MINOR_RELATIVES = {
    "a": "C",
    "e": "G",
    "b": "D",
    "f#": "A",
    "c#": "E",
    "g#": "B",
    "d#": "F#",
    "a#": "C#",
    "d": "F",
    "g": "Bb",
    "c": "Eb",
    "f": "Ab",
    "bb": "Db",
    "eb": "Gb",
    "ab": "Cb",
}

# Minor tonics whose relative major depends on the enharmonic preference:
# minor -> (sharp major, flat major)
PIVOT_RELATIVES = {
    "a#": ("C#", "Db"),
    "bb": ("C#", "Db"),
    "d#": ("F#", "Gb"),
    "eb": ("F#", "Gb"),
    "g#": ("B", "Cb"),
    "ab": ("B", "Cb"),
}


def circle_position(index: int) -> CirclePosition:
    """Look up a position of the circle of fifths.

    Parameters
    ----------
    index : int in [0, 11]
        Number of fifths above C

    Returns
    -------
    position : CirclePosition

    Raises
    ------
    ParameterError
        If ``index`` is out of range

    Examples
    --------
    >>> keycircle.circle_position(6)
    CirclePosition(major='F# / Gb', minor='d# / eb', accidentals=6)
    """
    if not 0 <= index < len(CIRCLE):
        raise ParameterError(f"index={index} must be in the range [0, {len(CIRCLE) - 1}]")
    return CIRCLE[index]


def resolve_enharmonic(
    name: str, accidentals: int, *, preference: _PreferenceKind = "auto"
) -> str:
    """Choose one name from a slash-separated enharmonic pair.

    The sharp candidate is whichever half carries a sharp, regardless of
    its position around the slash.

    Parameters
    ----------
    name : str
        A key name, possibly of the form ``'F# / Gb'``.
        Names without a slash are returned unchanged.

    accidentals : int
        Signed accidental count of the circle position holding ``name``

    preference : {'auto', 'sharps', 'flats'}
        - ``'sharps'``: always pick the sharp candidate
        - ``'flats'``: always pick the flat candidate
        - ``'auto'``: sharp candidate if ``accidentals >= 0``, else flat

    Returns
    -------
    resolved : str

    Raises
    ------
    ParameterError
        If ``preference`` is not supported

    Examples
    --------
    >>> keycircle.resolve_enharmonic('Db / C#', -5)
    'Db'
    >>> keycircle.resolve_enharmonic('Db / C#', -5, preference='sharps')
    'C#'
    >>> keycircle.resolve_enharmonic('E', 4, preference='flats')
    'E'
    """
    valid_preference(preference)

    if "/" not in name:
        return name

    first, second = (part.strip() for part in name.split("/")[:2])

    if "#" in first.translate(ASCII_TRANS):
        sharp_name, flat_name = first, second
    else:
        sharp_name, flat_name = second, first

    if preference == "sharps":
        return sharp_name
    if preference == "flats":
        return flat_name
    return sharp_name if accidentals >= 0 else flat_name


def relative_major(minor: str, *, preference: _PreferenceKind = "auto") -> str:
    """Find the relative major key of a minor tonic.

    Three minor tonics sit at the enharmonic boundary of the circle
    (``A♯/B♭``, ``D♯/E♭``, ``G♯/A♭``).  Their relative majors are chosen
    by preference alone: ``'flats'`` gives ``D♭``, ``G♭``, ``C♭`` and
    any other preference gives ``C♯``, ``F♯``, ``B``, whichever way the
    minor tonic itself is spelled.

    Parameters
    ----------
    minor : str
        Minor tonic, any case, e.g. ``'f#'`` or ``'B♭'``

    preference : {'auto', 'sharps', 'flats'}

    Returns
    -------
    major : str
        ASCII name of the relative major key

    Warns
    -----
    UserWarning
        If ``minor`` has no conventional relative major.
        ``'C'`` is returned in this case.

    Examples
    --------
    >>> keycircle.relative_major('a')
    'C'
    >>> keycircle.relative_major('g#', preference='flats')
    'Cb'
    >>> keycircle.relative_major('bb')
    'C#'
    >>> keycircle.relative_major('bb', preference='flats')
    'Db'
    """
    valid_preference(preference)

    key = normalize_minor(minor)

    if key in PIVOT_RELATIVES:
        sharp_major, flat_major = PIVOT_RELATIVES[key]
        return flat_major if preference == "flats" else sharp_major

    if key not in MINOR_RELATIVES:
        warnings.warn(
            f"No relative major for minor key {minor!r}, using 'C'",
            stacklevel=2,
        )
        return "C"

    return MINOR_RELATIVES[key]


def key_name(
    index: int, *, mode: _ModeKind = "major", preference: _PreferenceKind = "auto"
) -> str:
    """Resolve the tonic name of a circle position in a given mode.

    Examples
    --------
    >>> keycircle.key_name(7, preference='sharps')
    'C#'
    >>> keycircle.key_name(6, mode='minor')
    'd#'
    """
    valid_mode(mode)
    position = circle_position(index)
    name = position.major if mode == "major" else position.minor
    return resolve_enharmonic(name, position.accidentals, preference=preference)


def relative_key_name(
    index: int, *, mode: _ModeKind = "major", preference: _PreferenceKind = "auto"
) -> str:
    """Resolve the relative key of a circle position: the minor name in
    major mode, and the major name in minor mode.

    Examples
    --------
    >>> keycircle.relative_key_name(3)
    'f#'
    >>> keycircle.relative_key_name(7, mode='minor', preference='flats')
    'Db'
    """
    valid_mode(mode)
    other = "minor" if mode == "major" else "major"
    return key_name(index, mode=other, preference=preference)

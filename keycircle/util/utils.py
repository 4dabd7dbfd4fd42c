#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Input validation utilities"""

import re

from .exceptions import ParameterError

__all__ = [
    "MODES",
    "PREFERENCES",
    "valid_note",
    "valid_mode",
    "valid_preference",
]

MODES = ("major", "minor")
"""Supported scale modes (``minor`` is harmonic minor)."""

PREFERENCES = ("auto", "sharps", "flats")
"""Supported enharmonic preferences."""

# A letter followed by a homogeneous run of at most two accidentals
NOTE_RE = re.compile(
    r"^(?P<note>[A-Ga-g])"
    r"(?P<accidental>##?|bb?|♯|♭|\U0001d12a|\U0001d12b)?$"
)


def valid_note(note: str) -> bool:
    """Validate a single note spelling.

    A valid note is a letter ``A``-``G`` (either case) followed by at
    most one accidental mark: ``#``, ``##``, ``b``, ``bb``, or one of the
    Unicode glyphs ``♯``, ``𝄪``, ``♭``, ``𝄫``.  Sharps and flats may not
    be mixed.

    Parameters
    ----------
    note : str
        The note to validate, e.g. ``'F#'`` or ``'B♭'``

    Returns
    -------
    valid : bool
        True if ``note`` passes validation

    Raises
    ------
    ParameterError
        If ``note`` is not a string or not a valid spelling

    Examples
    --------
    >>> keycircle.util.valid_note('Ebb')
    True

    >>> keycircle.util.valid_note('E#b')
    Traceback (most recent call last):
    ...
    ParameterError: Invalid note 'E#b': ...
    """
    if not isinstance(note, str):
        raise ParameterError(f"Note must be a string, given type(note)={type(note)}")

    if not NOTE_RE.match(note.strip()):
        raise ParameterError(
            f"Invalid note {note!r}: expected a letter A-G followed by an "
            "optional accidental from #, ##, b, bb, ♯, \U0001d12a, ♭, \U0001d12b"
        )

    return True


def valid_mode(mode: str) -> bool:
    """Validate a mode name.

    Parameters
    ----------
    mode : str
        One of :data:`MODES`

    Returns
    -------
    valid : bool

    Raises
    ------
    ParameterError
        If ``mode`` is not supported
    """
    if mode not in MODES:
        raise ParameterError(f"mode={mode!r} must be one of {MODES}")
    return True


def valid_preference(preference: str) -> bool:
    """Validate an enharmonic preference.

    Parameters
    ----------
    preference : str
        One of :data:`PREFERENCES`

    Returns
    -------
    valid : bool

    Raises
    ------
    ParameterError
        If ``preference`` is not supported
    """
    if preference not in PREFERENCES:
        raise ParameterError(f"preference={preference!r} must be one of {PREFERENCES}")
    return True

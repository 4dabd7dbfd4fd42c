#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Note spelling: normalization, display rendering, and alteration"""

from collections import Counter
from typing import NamedTuple, Optional, Union

from ..util.exceptions import ParameterError

__all__ = [
    "Spelling",
    "NATURAL_LETTERS",
    "normalize_note",
    "normalize_minor",
    "render",
    "raise_half_step",
]

NATURAL_LETTERS = ("C", "D", "E", "F", "G", "A", "B")

# Unicode accidentals are folded down to ASCII before counting
ASCII_TRANS = str.maketrans({"♯": "#", "\U0001d12a": "##", "♭": "b", "\U0001d12b": "bb"})

UNICODE_GLYPHS = {1: "♯", 2: "\U0001d12a", -1: "♭", -2: "\U0001d12b", 0: ""}


class Spelling(NamedTuple):
    """A spelled note: a natural letter plus a signed accidental count.

    Positive ``accidental`` values count sharps and negative values count
    flats, so a spelling can never mix the two.

    Examples
    --------
    >>> keycircle.Spelling("F", 1)
    Spelling(letter='F', accidental=1)
    >>> str(keycircle.Spelling("B", -2))
    'Bbb'
    """

    letter: str
    accidental: int = 0

    def __str__(self) -> str:
        if self.accidental >= 0:
            return self.letter + "#" * self.accidental
        return self.letter + "b" * -self.accidental


_NoteLike = Union[str, Spelling]


def normalize_note(note: Optional[_NoteLike]) -> Spelling:
    """Normalize a raw note token into a :class:`Spelling`.

    Normalization is lenient and never fails:

    1. Unicode accidentals (``♯ ♭ 𝄪 𝄫``) are mapped to ASCII.
    2. Only the first of any slash-separated alternates is kept,
       e.g. ``'F# / Gb'`` becomes ``'F#'``.
    3. The letter is upper-cased.
    4. Any character after the letter other than ``#`` or ``b`` is
       ignored, and sharp/flat pairs cancel.

    Empty input, or input that does not start with a letter ``A``-``G``,
    produces ``C``.  Use `keycircle.util.valid_note` to reject such
    input instead.

    Parameters
    ----------
    note : str or Spelling
        The note token.  Spellings are returned unchanged.

    Returns
    -------
    spelling : Spelling

    See Also
    --------
    normalize_minor
    keycircle.util.valid_note

    Examples
    --------
    >>> keycircle.normalize_note('f#')
    Spelling(letter='F', accidental=1)
    >>> keycircle.normalize_note('Db / C#')
    Spelling(letter='D', accidental=-1)
    >>> keycircle.normalize_note('B♭♭')
    Spelling(letter='B', accidental=-2)
    >>> keycircle.normalize_note('')
    Spelling(letter='C', accidental=0)
    """
    if isinstance(note, Spelling):
        return note

    token = (note or "").translate(ASCII_TRANS).split("/")[0].strip()

    if not token or token[0].upper() not in NATURAL_LETTERS:
        return Spelling("C")

    counts = Counter(token[1:])
    return Spelling(token[0].upper(), counts["#"] - counts["b"])


def normalize_minor(note: Optional[_NoteLike]) -> str:
    """Normalize a minor-key tonic into its lower-case lookup key.

    This applies the same rules as `normalize_note`, and is only used to
    index minor-key tables; the result is never rendered.

    Parameters
    ----------
    note : str or Spelling

    Returns
    -------
    key : str
        Lower-case ASCII name, e.g. ``'f#'`` or ``'bb'``

    Examples
    --------
    >>> keycircle.normalize_minor('bb / a#')
    'bb'
    >>> keycircle.normalize_minor('D♯')
    'd#'
    """
    return str(normalize_note(note)).lower()


def render(note: _NoteLike, *, unicode: bool = True) -> str:
    """Render a spelling as a display string.

    Parameters
    ----------
    note : str or Spelling
        The note to render.  Strings are normalized first.

    unicode : bool
        If ``True`` (default), use the glyphs ``♯ 𝄪 ♭ 𝄫``.

        If ``False``, use ASCII: ``#``, ``##``, ``b``, ``bb``.

    Returns
    -------
    name : str

    Examples
    --------
    >>> keycircle.render(keycircle.Spelling('F', 2))
    'F𝄪'
    >>> keycircle.render('Ebb', unicode=False)
    'Ebb'
    >>> keycircle.render('eb')
    'E♭'
    """
    spelling = normalize_note(note)

    if not unicode:
        return str(spelling)

    sign = (spelling.accidental > 0) - (spelling.accidental < 0)
    size = abs(spelling.accidental)

    return (
        spelling.letter
        + UNICODE_GLYPHS[2 * sign] * (size // 2)
        + UNICODE_GLYPHS[sign] * (size % 2)
    )


def raise_half_step(note: _NoteLike) -> Spelling:
    """Raise a spelling by one chromatic half step, keeping its letter.

    A flat is removed if present (``B♭ → B``, ``B𝄫 → B♭``); otherwise a
    sharp is added (``G → G♯``, ``F♯ → F𝄪``).  This is how the leading
    tone of a harmonic minor scale is formed.

    Parameters
    ----------
    note : str or Spelling

    Returns
    -------
    raised : Spelling

    Raises
    ------
    ParameterError
        If ``note`` is already a double sharp

    Examples
    --------
    >>> keycircle.raise_half_step('G')
    Spelling(letter='G', accidental=1)
    >>> keycircle.raise_half_step('Bbb')
    Spelling(letter='B', accidental=-1)
    """
    spelling = normalize_note(note)

    if spelling.accidental >= 2:
        raise ParameterError(f"Cannot raise {spelling} beyond a double sharp")

    return spelling._replace(accidental=spelling.accidental + 1)

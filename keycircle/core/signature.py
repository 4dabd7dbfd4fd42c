#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Major key signatures"""

from typing import List, NamedTuple, Tuple, Union

from ..util.exceptions import ParameterError
from ..util.utils import valid_note
from .spelling import Spelling, normalize_note

__all__ = [
    "KeySignature",
    "ORDER_SHARPS",
    "ORDER_FLATS",
    "MAJOR_SIGNATURES",
    "key_signature",
    "apply_signature",
    "signature_notes",
]

ORDER_SHARPS = ("F", "C", "G", "D", "A", "E", "B")
ORDER_FLATS = ("B", "E", "A", "D", "G", "C", "F")

# Signed accidental counts: positive for sharps, negative for flats
MAJOR_SIGNATURES = {
    "C": 0,
    "G": 1,
    "D": 2,
    "A": 3,
    "E": 4,
    "B": 5,
    "F#": 6,
    "C#": 7,
    "F": -1,
    "Bb": -2,
    "Eb": -3,
    "Ab": -4,
    "Db": -5,
    "Gb": -6,
    "Cb": -7,
}


class KeySignature(NamedTuple):
    """The sharps or flats of a key signature.

    ``letters`` is always the first ``count`` letters of
    :data:`ORDER_SHARPS` (``kind='#'``) or :data:`ORDER_FLATS`
    (``kind='b'``).  A key without accidentals has ``kind='#'``.
    """

    kind: str
    count: int
    letters: Tuple[str, ...]


def key_signature(major: Union[str, Spelling]) -> KeySignature:
    """Look up the key signature of a major key.

    The fifteen conventional major keys are supported, from ``Cb``
    (seven flats) to ``C#`` (seven sharps).

    Parameters
    ----------
    major : str or Spelling
        Name of the major key, e.g. ``'Eb'`` or ``'F♯'``

    Returns
    -------
    signature : KeySignature

    Raises
    ------
    ParameterError
        If ``major`` is malformed, or is not one of the fifteen
        conventional major keys (e.g. ``'D#'``)

    See Also
    --------
    apply_signature
    signature_notes

    Examples
    --------
    >>> keycircle.key_signature('D')
    KeySignature(kind='#', count=2, letters=('F', 'C'))
    >>> keycircle.key_signature('Ab')
    KeySignature(kind='b', count=4, letters=('B', 'E', 'A', 'D'))
    """
    if not isinstance(major, Spelling):
        valid_note(major)

    name = str(normalize_note(major))

    try:
        value = MAJOR_SIGNATURES[name]
    except KeyError as exc:
        raise ParameterError(f"No conventional major key signature for {name!r}") from exc

    if value >= 0:
        return KeySignature("#", value, ORDER_SHARPS[:value])

    return KeySignature("b", -value, ORDER_FLATS[:-value])


def apply_signature(letter: str, signature: KeySignature) -> Spelling:
    """Spell a natural letter under a key signature.

    Parameters
    ----------
    letter : str
        A natural letter ``A``-``G``

    signature : KeySignature

    Returns
    -------
    spelling : Spelling
        The letter with one sharp or flat if the signature affects it,
        otherwise the bare letter.

    Examples
    --------
    >>> sig = keycircle.key_signature('D')
    >>> keycircle.apply_signature('C', sig)
    Spelling(letter='C', accidental=1)
    >>> keycircle.apply_signature('D', sig)
    Spelling(letter='D', accidental=0)
    """
    if signature.count == 0 or letter not in signature.letters:
        return Spelling(letter)

    return Spelling(letter, 1 if signature.kind == "#" else -1)


def signature_notes(signature: KeySignature) -> List[Spelling]:
    """List the altered notes of a key signature, in signature order.

    Examples
    --------
    >>> [str(n) for n in keycircle.signature_notes(keycircle.key_signature('Eb'))]
    ['Bb', 'Eb', 'Ab']
    """
    return [apply_signature(letter, signature) for letter in signature.letters]

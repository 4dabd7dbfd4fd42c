#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""Unit tests for key signatures"""

import pytest

import keycircle
from keycircle import KeySignature, Spelling


@pytest.mark.parametrize("major,value", list(keycircle.MAJOR_SIGNATURES.items()))
def test_key_signature_table(major, value):
    sig = keycircle.key_signature(major)

    assert sig.count == abs(value)
    assert len(sig.letters) == sig.count
    if value >= 0:
        assert sig.kind == "#"
        assert sig.letters == keycircle.ORDER_SHARPS[: sig.count]
    else:
        assert sig.kind == "b"
        assert sig.letters == keycircle.ORDER_FLATS[: sig.count]


def test_key_signature_fifteen_keys():
    assert len(keycircle.MAJOR_SIGNATURES) == 15
    assert sorted(keycircle.MAJOR_SIGNATURES.values()) == list(range(-7, 8))


@pytest.mark.parametrize(
    "major,expected",
    [
        ("C", KeySignature("#", 0, ())),
        ("D", KeySignature("#", 2, ("F", "C"))),
        ("F♯", KeySignature("#", 6, ("F", "C", "G", "D", "A", "E"))),
        ("Ab", KeySignature("b", 4, ("B", "E", "A", "D"))),
        (Spelling("C", -1), KeySignature("b", 7, ("B", "E", "A", "D", "G", "C", "F"))),
    ],
)
def test_key_signature(major, expected):
    assert keycircle.key_signature(major) == expected


@pytest.mark.xfail(raises=keycircle.ParameterError)
@pytest.mark.parametrize("major", ["D#", "Fb", "B#", "H", "E#b", ""])
def test_key_signature_bad(major):
    keycircle.key_signature(major)


@pytest.mark.parametrize(
    "letter,major,expected",
    [
        ("C", "D", Spelling("C", 1)),
        ("D", "D", Spelling("D")),
        ("B", "F", Spelling("B", -1)),
        ("F", "F", Spelling("F")),
        ("E", "C", Spelling("E")),
        ("B", "C#", Spelling("B", 1)),
    ],
)
def test_apply_signature(letter, major, expected):
    assert keycircle.apply_signature(letter, keycircle.key_signature(major)) == expected


@pytest.mark.parametrize(
    "major,notes",
    [
        ("C", []),
        ("E", ["F#", "C#", "G#", "D#"]),
        ("Eb", ["Bb", "Eb", "Ab"]),
    ],
)
def test_signature_notes(major, notes):
    sig = keycircle.key_signature(major)
    assert [str(n) for n in keycircle.signature_notes(sig)] == notes

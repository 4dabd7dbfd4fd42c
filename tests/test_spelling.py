#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""Unit tests for note spelling"""

import pytest

import keycircle
from keycircle import Spelling


@pytest.mark.parametrize(
    "raw,letter,accidental",
    [
        ("C", "C", 0),
        ("f#", "F", 1),
        ("Db / C#", "D", -1),
        ("F# / Gb", "F", 1),
        ("bb", "B", -1),
        ("B♭♭", "B", -2),
        ("E\U0001d12b", "E", -2),
        ("G\U0001d12a", "G", 2),
        ("A♯", "A", 1),
        ("Ab7", "A", -1),
        (" g ", "G", 0),
        ("C#b", "C", 0),
        ("", "C", 0),
        (None, "C", 0),
        ("x#", "C", 0),
    ],
)
def test_normalize_note(raw, letter, accidental):
    assert keycircle.normalize_note(raw) == Spelling(letter, accidental)


def test_normalize_note_passthrough():
    spelling = Spelling("E", -1)
    assert keycircle.normalize_note(spelling) is spelling


@pytest.mark.parametrize(
    "raw,key",
    [("a", "a"), ("F#", "f#"), ("bb / a#", "bb"), ("D♯", "d#"), ("Eb", "eb"), ("", "c")],
)
def test_normalize_minor(raw, key):
    assert keycircle.normalize_minor(raw) == key


@pytest.mark.parametrize(
    "note,unicode,expected",
    [
        (Spelling("C"), True, "C"),
        (Spelling("F", 1), True, "F♯"),
        (Spelling("F", 2), True, "F\U0001d12a"),
        (Spelling("B", -1), True, "B♭"),
        (Spelling("B", -2), True, "B\U0001d12b"),
        (Spelling("C", 3), True, "C\U0001d12a♯"),
        (Spelling("F", 2), False, "F##"),
        (Spelling("E", -2), False, "Ebb"),
        ("eb", True, "E♭"),
        ("g#", False, "G#"),
    ],
)
def test_render(note, unicode, expected):
    assert keycircle.render(note, unicode=unicode) == expected


@pytest.mark.parametrize("letter", keycircle.NATURAL_LETTERS)
@pytest.mark.parametrize("accidental", [-2, -1, 0, 1, 2])
@pytest.mark.parametrize("unicode", [False, True])
def test_render_normalize_inverse(letter, accidental, unicode):
    spelling = Spelling(letter, accidental)
    shown = keycircle.render(spelling, unicode=unicode)
    assert keycircle.normalize_note(shown) == spelling
    assert keycircle.render(keycircle.normalize_note(shown), unicode=unicode) == shown


def test_str_ascii():
    assert str(Spelling("C", 1)) == "C#"
    assert str(Spelling("A", -2)) == "Abb"
    assert str(Spelling("D")) == "D"


@pytest.mark.parametrize(
    "note,raised",
    [
        ("G", Spelling("G", 1)),
        ("F#", Spelling("F", 2)),
        ("Bb", Spelling("B", 0)),
        ("Bbb", Spelling("B", -1)),
        (Spelling("E", 0), Spelling("E", 1)),
    ],
)
def test_raise_half_step(note, raised):
    assert keycircle.raise_half_step(note) == raised


@pytest.mark.xfail(raises=keycircle.ParameterError)
def test_raise_half_step_double_sharp():
    keycircle.raise_half_step("F##")

#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Synthesis of note and chord signals for playback"""

from typing import Sequence

import numpy as np

from .._typing import _FloatLike_co
from ..util.exceptions import ParameterError

__all__ = ["note_signal", "chord_signal"]

# Envelopes ramp between this floor and the voice peak
ENVELOPE_FLOOR = 1e-4


def _envelope(
    n_samples: int, *, sr: float, attack: float, peak: float, duration: float
) -> np.ndarray:
    """Exponential attack from the floor to `peak`, then exponential decay
    back to the floor at `duration`."""
    t = np.arange(n_samples) / sr

    rise = ENVELOPE_FLOOR * (peak / ENVELOPE_FLOOR) ** np.clip(t / attack, 0, 1)
    fall_t = np.clip((t - attack) / (duration - attack), 0, 1)
    fall = peak * (ENVELOPE_FLOOR / peak) ** fall_t

    env: np.ndarray = np.where(t < attack, rise, fall)
    return env


def _check(frequency: _FloatLike_co, sr: float, duration: float, attack: float) -> None:
    if frequency <= 0:
        raise ParameterError(f"frequency={frequency} must be strictly positive")
    if sr <= 0:
        raise ParameterError(f"sr={sr} must be strictly positive")
    if duration <= attack:
        raise ParameterError(f"duration={duration} must exceed the attack time {attack}")


def note_signal(
    frequency: _FloatLike_co,
    *,
    sr: float = 22050,
    duration: float = 0.45,
    peak: float = 0.32,
    attack: float = 0.02,
) -> np.ndarray:
    """Synthesize a single enveloped sine tone.

    The tone rises exponentially to ``peak`` over ``attack`` seconds and
    decays exponentially to silence at ``duration``.

    Parameters
    ----------
    frequency : float > 0
        Frequency in Hz, e.g. from `note_to_hz`
    sr : number > 0
        Sampling rate of the output signal
    duration : float > attack
        Length of the signal in seconds
    peak : float > 0
        Peak amplitude
    attack : float > 0
        Attack time in seconds

    Returns
    -------
    y : np.ndarray [shape=(int(duration * sr),)]

    Raises
    ------
    ParameterError
        If ``frequency`` or ``sr`` is not positive, or ``duration`` does
        not exceed ``attack``

    Examples
    --------
    >>> y = keycircle.note_signal(keycircle.note_to_hz('A'), sr=22050)
    >>> y.shape
    (9922,)
    """
    _check(frequency, sr, duration, attack)

    n_samples = int(duration * sr)
    phase = 2 * np.pi * frequency * np.arange(n_samples) / sr
    env = _envelope(n_samples, sr=sr, attack=attack, peak=peak, duration=duration)
    y: np.ndarray = env * np.sin(phase)
    return y


def chord_signal(
    frequencies: Sequence[_FloatLike_co],
    *,
    sr: float = 22050,
    duration: float = 0.8,
) -> np.ndarray:
    """Synthesize a chord as a sum of enveloped sine voices.

    Voice ``i`` peaks at 0.28 (0.22 for the third voice, which usually
    carries the fifth an octave up) after ``0.02 + 0.01 * i`` seconds,
    so the voices enter as a slight roll.

    Parameters
    ----------
    frequencies : sequence of float > 0
        Voice frequencies, e.g. from `voice_chord`
    sr : number > 0
    duration : float > 0

    Returns
    -------
    y : np.ndarray [shape=(int(duration * sr),)]

    Examples
    --------
    >>> freqs = keycircle.voice_chord(['C', 'E', 'G'])
    >>> y = keycircle.chord_signal(freqs, sr=8000)
    >>> y.shape
    (6400,)
    """
    if len(frequencies) == 0:
        raise ParameterError("At least one frequency must be provided")

    y = np.zeros(int(duration * sr))
    for i, frequency in enumerate(frequencies):
        y += note_signal(
            frequency,
            sr=sr,
            duration=duration,
            peak=0.22 if i == 2 else 0.28,
            attack=0.02 + 0.01 * i,
        )
    return y

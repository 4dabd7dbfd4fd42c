#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
keycircle
=========

Note spelling, key signatures, scales, diatonic chords and equal-tempered
frequencies for the twelve key areas of the circle of fifths.

>>> import keycircle
>>> tonic = keycircle.key_name(6, preference='flats')
>>> [keycircle.render(n) for n in keycircle.build_scale(tonic)]
['G♭', 'A♭', 'B♭', 'C♭', 'D♭', 'E♭', 'F']
"""

import lazy_loader as lazy
from .version import version as __version__

__getattr__, __dir__, __all__ = lazy.attach_stub(__name__, __file__)

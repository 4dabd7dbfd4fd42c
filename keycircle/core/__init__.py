#!/usr/bin/env python
# -*- coding: utf-8 -*-
""" Core music-theory functions"""

from .spelling import *  # pylint: disable=wildcard-import
from .signature import *  # pylint: disable=wildcard-import
from .circle import *  # pylint: disable=wildcard-import
from .convert import *  # pylint: disable=wildcard-import
from .scale import *  # pylint: disable=wildcard-import
from .chords import *  # pylint: disable=wildcard-import
from .audio import *  # pylint: disable=wildcard-import
from .overview import *  # pylint: disable=wildcard-import


__all__ = []
__all__ += spelling.__all__
__all__ += signature.__all__
__all__ += circle.__all__
__all__ += convert.__all__
__all__ += scale.__all__
__all__ += chords.__all__
__all__ += audio.__all__
__all__ += overview.__all__

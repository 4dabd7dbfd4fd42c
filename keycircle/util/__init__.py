#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Utilities
=========

Input validation
----------------
.. autosummary::
    :toctree: generated/

    valid_note
    valid_mode
    valid_preference

Exceptions
----------
.. autosummary::
    :toctree: generated/

    exceptions.KeycircleError
    exceptions.ParameterError
"""

import lazy_loader as lazy

__getattr__, __dir__, __all__ = lazy.attach_stub(__name__, __file__)

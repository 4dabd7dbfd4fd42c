#!/usr/bin/env python
# -*- encoding: utf-8 -*-
'''Exception classes for keycircle'''


class KeycircleError(Exception):
    '''The root keycircle exception class'''
    pass


class ParameterError(KeycircleError):
    '''Exception class for mal-formed inputs'''
    pass

#!/usr/bin/env python
# Test configuration and customization

import os

import pytest

# Tests run against uncached functions
for key in ["DIR", "MMAP", "COMPRESS", "VERBOSE", "LEVEL"]:
    os.environ.pop("KEYCIRCLE_CACHE_{:s}".format(key), None)


@pytest.fixture(params=range(12), ids=lambda i: "pos{:02d}".format(i))
def position(request):
    """Every index of the circle of fifths"""
    return request.param


@pytest.fixture(params=["auto", "sharps", "flats"])
def preference(request):
    return request.param

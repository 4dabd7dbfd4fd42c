#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Version info"""

import importlib
import os
import sys

version = "0.3.1"

# Runtime dependencies, by import name
DEPENDENCIES = ["numpy", "joblib", "decorator", "typing_extensions", "lazy_loader"]


def __get_mod_version(modname):
    try:
        mod = sys.modules.get(modname) or importlib.import_module(modname)
    except ImportError:
        return None
    return getattr(mod, "__version__", "installed, no version number available")


def show_versions() -> None:
    """Print the keycircle version, its runtime dependencies, and the
    cache configuration read from the environment.

    Examples
    --------
    >>> keycircle.show_versions()  # doctest: +SKIP
    keycircle: 0.3.1
    python: 3.11.4 ...
    numpy: 1.26.0
    ...
    KEYCIRCLE_CACHE_DIR: None
    """
    print(f"keycircle: {version}")
    print(f"python: {sys.version}\n")
    for dep in DEPENDENCIES:
        print("{}: {}".format(dep, __get_mod_version(dep)))
    print("")
    for key in ["DIR", "LEVEL"]:
        name = f"KEYCIRCLE_CACHE_{key}"
        print("{}: {}".format(name, os.environ.get(name)))

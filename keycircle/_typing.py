from __future__ import annotations

from typing import Sequence, TypeVar, Union, Any
from typing_extensions import Literal
import numpy as np


_T = TypeVar("_T")
_SequenceLike = Union[Sequence[_T], np.ndarray]
_ScalarOrSequence = Union[_T, _SequenceLike[_T]]

# Scalar aliases follow numpy/_typing/_scalars.py
_BoolLike_co = Union[bool, np.bool_]
_IntLike_co = Union[_BoolLike_co, int, "np.integer[Any]"]
_FloatLike_co = Union[_IntLike_co, float, "np.floating[Any]"]

# Scale modes ("minor" is harmonic minor)
_ModeKind = Literal["major", "minor"]

# Enharmonic preference for spoke positions and pivot minors
_PreferenceKind = Literal["auto", "sharps", "flats"]

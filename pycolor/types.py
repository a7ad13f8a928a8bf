"""Internal types module"""
from __future__ import annotations

from typing import Tuple, TypeVar, Union

T_co = TypeVar('T_co', covariant=True)
Nb = TypeVar('Nb', bound=Union[float, int])  # Number
Tup3 = Tuple[Nb, Nb, Nb]
Tup4 = Tuple[Nb, Nb, Nb, Nb]
Scalar = Union[int, float]
Pct = float
"""Percentage points, usually in the range 0.0 - 100.0"""

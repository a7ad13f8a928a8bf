"""Miscellaneous and utility functions"""

__all__ = ['clamp_value', 'chunk', 'round_channel']

from itertools import islice
from typing import Iterable, Iterator, Literal, Tuple, overload

from .types import Nb, T_co


def clamp_value(val: Nb, min_val: Nb, max_val: Nb) -> Nb:
    """
    Clamp value val between min_val and max_val

    :param val:         Value to clamp
    :param min_val:     Minimum value
    :param max_val:     Maximum value
    :return:            Clamped value
    """
    return min_val if val < min_val else max_val if val > max_val else val  # type: ignore


def round_channel(val: float) -> int:
    """
    Clamp a raw channel value in the range 0 - 255 and round it to the nearest integer (ties to even)

    :param val:         Raw channel value
    :return:            Channel value
    """
    return int(round(clamp_value(val, 0, 255)))


@overload
def chunk(iterable: Iterable[T_co], size: Literal[2] = 2) -> Iterator[Tuple[T_co, T_co]]:
    ...


@overload
def chunk(iterable: Iterable[T_co], size: Literal[3]) -> Iterator[Tuple[T_co, T_co, T_co]]:
    ...


def chunk(iterable: Iterable[T_co], size: int = 2) -> Iterator[Tuple[T_co, ...]]:  # type: ignore
    """
    Split an iterable of arbitrary length into equal size chunks

    :param iterable:        Iterable to be splitted it up
    :param size:            Chunk size, defaults to 2
    :return:                Iterator of tuples
    :yield:                 Tuple of size ``size``
    """
    niter = iter(iterable)
    return iter(lambda: tuple(islice(niter, size)), ())

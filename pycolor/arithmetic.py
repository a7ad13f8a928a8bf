"""
Channel arithmetic between two colours or between a colour and a scalar.

Red, green and blue are always combined elementwise.
Alpha takes part only if ``alpha_math`` is set on one of the colours involved,
otherwise the result keeps the alpha of the (left) colour operand.
Raw results are rounded to the nearest integer and clamped in the range 0 - 255.
Dividing by zero never raises: the channel becomes 0.
"""
from __future__ import annotations

__all__ = ['add', 'subtract', 'multiply', 'divide']

from numbers import Real
from typing import Callable

import numpy as np
from numpy.typing import NDArray
from typing_extensions import TypeGuard

from ._logging import logger
from .color import Color
from .types import Scalar


def is_operand(x: object) -> TypeGuard[Color | Scalar]:
    """
    :param x:           Any object
    :return:            True if x can take part in colour arithmetic
    """
    return isinstance(x, Color) or (isinstance(x, Real) and not isinstance(x, bool))


def _safe_divide(a: NDArray[np.float64], b: NDArray[np.float64]) -> NDArray[np.float64]:
    zeros = b == 0
    if zeros.any():
        logger.debug(f'divide: division by zero on channel(s) {np.flatnonzero(zeros).tolist()}, defined as 0')
    return np.divide(a, b, out=np.zeros_like(a), where=~zeros)


def _operate(
    left: Color | Scalar, right: Color | Scalar,
    op: Callable[[NDArray[np.float64], NDArray[np.float64]], NDArray[np.float64]], name: str
) -> Color:
    if isinstance(left, Color) and isinstance(right, Color):
        base = left
        alpha_math = left.alpha_math or right.alpha_math
    elif isinstance(left, Color) and is_operand(right):
        base = left
        alpha_math = left.alpha_math
    elif isinstance(right, Color) and is_operand(left):
        base = right
        alpha_math = right.alpha_math
    else:
        raise TypeError(
            f'{name}: unsupported operand types {type(left).__name__} and {type(right).__name__}, '
            'at least one Color and otherwise a real number is expected'
        )

    lhs = np.array(tuple(left) if isinstance(left, Color) else (float(left), ) * 4, np.float64)
    rhs = np.array(tuple(right) if isinstance(right, Color) else (float(right), ) * 4, np.float64)

    result = np.clip(np.rint(op(lhs, rhs)), 0, 255).astype(np.int64)
    if not alpha_math:
        result[3] = base.alpha
    r, g, b, a = (int(x) for x in result)

    logger.trace(f'{name}: {left!r}, {right!r} -> {(r, g, b, a)!r}')
    return base.__class__(rgba=(r, g, b, a), alpha_math=base.alpha_math)


def add(a: Color | Scalar, b: Color | Scalar, /) -> Color:
    """
    Add two colours, or a scalar to every channel of a colour

    :param a:           Color or real number
    :param b:           Color or real number
    :return:            New Color object
    """
    return _operate(a, b, np.add, 'add')


def subtract(a: Color | Scalar, b: Color | Scalar, /) -> Color:
    """
    Subtract b from a channel by channel

    :param a:           Color or real number
    :param b:           Color or real number
    :return:            New Color object
    """
    return _operate(a, b, np.subtract, 'subtract')


def multiply(a: Color | Scalar, b: Color | Scalar, /) -> Color:
    """
    Multiply two colours channel by channel, or every channel of a colour by a scalar

    :param a:           Color or real number
    :param b:           Color or real number
    :return:            New Color object
    """
    return _operate(a, b, np.multiply, 'multiply')


def divide(a: Color | Scalar, b: Color | Scalar, /) -> Color:
    """
    Divide a by b channel by channel.
    A zero divisor gives 0 for the affected channel instead of raising.

    :param a:           Color or real number
    :param b:           Color or real number
    :return:            New Color object
    """
    return _operate(a, b, _safe_divide, 'divide')

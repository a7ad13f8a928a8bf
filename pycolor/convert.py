# pycolor: A colour value library converting between hexadecimal, RGB, CMYK, HSL and HSV.
# Copyright (C) 2019 Antonio Strippoli (CoffeeStraw/YellowFlash)
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# pycolor is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public License
# along with this program. If not, see http://www.gnu.org/licenses/.
"""Conversion module"""
from __future__ import annotations

__all__ = ['ConvertColour']

import colorsys
import re
from typing import Final, FrozenSet, Optional, Tuple

from ._logging import logger
from .exception import InvalidFormat
from .misc import chunk, clamp_value
from .types import Tup3, Tup4


class ConvertColour:
    """
    Colour conversion class

    RGB values handled here are floats in the range 0.0 - 1.0,
    hue is in degrees, saturation, lightness and value are percentages.
    """

    HEX_LENGTHS: Final[FrozenSet[int]] = frozenset({3, 4, 6, 8})
    """Accepted number of hexadecimal digits"""

    SHORT_HEX_STEP: Final[int] = 0x11
    """A single hexadecimal digit ``d`` stands for the byte ``dd``, i.e. ``d * 17``"""

    # -------------------------------------------------------------------------
    # ---------------------------- Hex Conversions ----------------------------
    # -------------------------------------------------------------------------
    @classmethod
    def hex_to_rgba(cls, h: str, /, ndigits: Optional[int] = None) -> Tup4[int]:
        """
        Parse a hexadecimal string of 3, 4, 6 or 8 digits, with or without a leading ``#``

        Short forms duplicate each digit (``1`` -> ``11``).
        Forms without an alpha digit get an opaque alpha (255).

        :param h:           Hexadecimal string
        :param ndigits:     Exact number of digits required, defaults to any of 3, 4, 6 and 8
        :return:            Tuple of R, G, B and Alpha in the range 0 - 255
        """
        digits = h.strip()
        if digits.startswith('#'):
            digits = digits[1:]

        if not re.fullmatch(r'[0-9A-Fa-f]+', digits):
            logger.debug(f'ConvertColour: rejected hexadecimal string {h!r}')
            raise InvalidFormat(f'ConvertColour: {h!r} is not a hexadecimal string')
        if len(digits) not in cls.HEX_LENGTHS or (ndigits is not None and len(digits) != ndigits):
            expected = ndigits if ndigits is not None else '3, 4, 6 or 8'
            logger.debug(f'ConvertColour: rejected hexadecimal string {h!r}')
            raise InvalidFormat(
                f'ConvertColour: {h!r} has {len(digits)} hexadecimal digits, expected {expected}'
            )

        if len(digits) <= 4:
            values = [int(d, 16) * cls.SHORT_HEX_STEP for d in digits]
        else:
            values = [int(''.join(pair), 16) for pair in chunk(digits, 2)]
        if len(values) == 3:
            values.append(255)
        r, g, b, a = values
        return r, g, b, a

    @staticmethod
    def rgb_to_hex(r: int, g: int, b: int, a: Optional[int] = None) -> str:
        """
        Make a ``#RRGGBB`` or ``#RRGGBBAA`` uppercase string

        :param r:           Red value in the range 0 - 255
        :param g:           Green value in the range 0 - 255
        :param b:           Blue value in the range 0 - 255
        :param a:           Alpha value in the range 0 - 255, if wanted
        :return:            Hexadecimal string
        """
        values = (r, g, b) if a is None else (r, g, b, a)
        return '#' + ''.join(f'{v:02X}' for v in values)

    @classmethod
    def rgb_to_short_hex(cls, r: int, g: int, b: int, a: Optional[int] = None) -> str:
        """
        Make a ``#RGB`` or ``#RGBA`` uppercase string.
        Each digit is the channel divided by 17 and rounded, so it's a lossy approximation:
        doubling each digit (``d`` -> ``dd``) gives back the nearest representable byte.

        :param r:           Red value in the range 0 - 255
        :param g:           Green value in the range 0 - 255
        :param b:           Blue value in the range 0 - 255
        :param a:           Alpha value in the range 0 - 255, if wanted
        :return:            Short hexadecimal string
        """
        values = (r, g, b) if a is None else (r, g, b, a)
        return '#' + ''.join(f'{round(v / cls.SHORT_HEX_STEP):X}' for v in values)

    # -------------------------------------------------------------------------
    # --------------------------- CMYK Conversions ----------------------------
    # -------------------------------------------------------------------------
    @staticmethod
    def cmyk_to_rgb(c: float, m: float, y: float, k: float) -> Tup3[float]:
        c, m, y, k = (clamp_value(x, 0.0, 1.0) for x in (c, m, y, k))
        return (1 - c) * (1 - k), (1 - m) * (1 - k), (1 - y) * (1 - k)

    @staticmethod
    def rgb_to_cmyk(r: float, g: float, b: float) -> Tup4[float]:
        k = 1 - max(r, g, b)
        if k == 1:
            # Pure black, cyan magenta and yellow are undefined
            return 0.0, 0.0, 0.0, 1.0
        c, m, y = ((1 - x - k) / (1 - k) for x in (r, g, b))
        return clamp_value(c, 0.0, 1.0), clamp_value(m, 0.0, 1.0), clamp_value(y, 0.0, 1.0), k

    # -------------------------------------------------------------------------
    # ------------------------ HSL and HSV Conversions ------------------------
    # -------------------------------------------------------------------------
    @staticmethod
    def _chroma_to_rgb(h: float, chroma: float, m: float) -> Tup3[float]:
        h %= 360
        x = chroma * (1 - abs((h / 60) % 2 - 1))
        sector = min(int(h // 60), 5)
        r, g, b = (
            (chroma, x, 0.0),
            (x, chroma, 0.0),
            (0.0, chroma, x),
            (0.0, x, chroma),
            (x, 0.0, chroma),
            (chroma, 0.0, x),
        )[sector]
        return r + m, g + m, b + m

    @classmethod
    def hsl_to_rgb(cls, h: float, s: float, l: float) -> Tup3[float]:
        # https://en.wikipedia.org/wiki/HSL_and_HSV#HSL_to_RGB
        s = clamp_value(s, 0.0, 100.0) / 100
        l = clamp_value(l, 0.0, 100.0) / 100
        chroma = (1 - abs(2 * l - 1)) * s
        return cls._chroma_to_rgb(h, chroma, l - chroma / 2)

    @classmethod
    def hsv_to_rgb(cls, h: float, s: float, v: float) -> Tup3[float]:
        # https://en.wikipedia.org/wiki/HSL_and_HSV#HSV_to_RGB
        s = clamp_value(s, 0.0, 100.0) / 100
        v = clamp_value(v, 0.0, 100.0) / 100
        chroma = v * s
        return cls._chroma_to_rgb(h, chroma, v - chroma)

    @staticmethod
    def rgb_to_hsl(r: float, g: float, b: float) -> Tup3[float]:
        h, l, s = colorsys.rgb_to_hls(r, g, b)
        return h * 360, s * 100, l * 100

    @staticmethod
    def rgb_to_hsv(r: float, g: float, b: float) -> Tup3[float]:
        h, s, v = colorsys.rgb_to_hsv(r, g, b)
        return h * 360, s * 100, v * 100

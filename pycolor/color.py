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
"""Colour value module"""
from __future__ import annotations

__all__ = ['Color', 'SUPPORTED_FORMATS', 'INPUT_FORMATS']

from decimal import Decimal
from numbers import Real
from typing import Any, Callable, Dict, Final, Iterable, Iterator, Optional, Sequence, Tuple, Type, TypeVar

from typing_extensions import TypeGuard

from ._logging import logger
from .convert import ConvertColour as CC
from .exception import InvalidFormat, UnsupportedFormat
from .misc import clamp_value, round_channel
from .types import Pct, Scalar, Tup3, Tup4

_ColorT = TypeVar('_ColorT', bound='Color')

SUPPORTED_FORMATS: Final[Tuple[str, ...]] = (
    'hex', 'hex3', 'hex4', 'hex6', 'hex8',
    'rgb', 'rgba', 'rgbd', 'rgbad',
    'cmyk', 'hsl', 'hsv',
)
"""Format names accepted by :py:meth:`Color.to_string`"""

INPUT_FORMATS: Final[Tuple[str, ...]] = SUPPORTED_FORMATS
"""Keywords accepted by the :py:class:`Color` constructor and :py:meth:`Color.parse`"""

_HEX_DIGITS: Final[Dict[str, Optional[int]]] = {'hex': None, 'hex3': 3, 'hex4': 4, 'hex6': 6, 'hex8': 8}

_ARITY: Final[Dict[str, int]] = {'rgb': 3, 'rgba': 4, 'rgbd': 3, 'rgbad': 4, 'cmyk': 4, 'hsl': 3, 'hsv': 3}

_CHANNELS: Final[Tuple[str, ...]] = ('_red', '_green', '_blue', '_alpha')


def _are_numbers(values: Sequence[Any]) -> TypeGuard[Sequence[Scalar]]:
    return all(isinstance(v, (Real, Decimal)) and not isinstance(v, bool) for v in values)


def _to_float_if_decimal(x: Any) -> Any:
    # Decimal doesn't mix with the float maths of the converters
    return float(x) if isinstance(x, Decimal) else x


def _scale(rgb: Tup3[float]) -> Tup3[float]:
    r, g, b = rgb
    return r * 255, g * 255, b * 255


# Each parser takes the numeric values of its format and returns raw RGBA in the range 0 - 255
_PARSERS: Final[Dict[str, Callable[..., Tup4[float]]]] = {
    'rgb': lambda r, g, b: (r, g, b, 255),
    'rgba': lambda r, g, b, a: (r, g, b, a),
    'rgbd': lambda r, g, b: (r * 255, g * 255, b * 255, 255),
    'rgbad': lambda r, g, b, a: (r * 255, g * 255, b * 255, a * 255),
    'cmyk': lambda c, m, y, k: (*_scale(CC.cmyk_to_rgb(c, m, y, k)), 255),
    'hsl': lambda h, s, l: (*_scale(CC.hsl_to_rgb(h, s, l)), 255),
    'hsv': lambda h, s, v: (*_scale(CC.hsv_to_rgb(h, s, v)), 255),
}

_ALPHA_FORMATS: Final[Tuple[str, ...]] = ('rgba', 'rgbad')


def _num(x: float, ndigits: int) -> str:
    # + 0.0 turns a negative zero into a positive one
    return f'{round(x, ndigits) + 0.0:g}'


class Color:
    """
    A single colour stored as integer red, green, blue and alpha channels in the range 0 - 255.

    Channels are immutable: every manipulation or arithmetic operation returns a new object.
    ``alpha_math`` is the only mutable attribute; it tells whether the alpha channel takes part
    in arithmetic and in :py:meth:`invert`.
    Sharing an object between threads is safe as long as nobody flips ``alpha_math`` concurrently.

    .. code-block:: python

        >>> Color(10, 20, 30)                   # RGB
        >>> Color(0.5, 0.2, 0.0, 0.1)           # CMYK
        >>> Color('#1CE')                       # any hexadecimal form
        >>> Color(hsl=(210, 50, 40))
        >>> Color(rgba=(10, 20, 30, 128))       # alpha_math is set
        >>> Color(10, 20, 30, alpha=100, alpha_math=True)

    Out-of-range values are clamped, never rejected.
    """

    __slots__ = ('_red', '_green', '_blue', '_alpha', 'alpha_math')

    _red: int
    _green: int
    _blue: int
    _alpha: int

    alpha_math: bool
    """Whether alpha participates in arithmetic and inversion"""

    def __init__(
        self, *args: Any, alpha: Optional[float] = None, alpha_math: Optional[bool] = None, **kwargs: Any
    ) -> None:
        """
        Make a new Color object

        :param args:            Three numbers (R, G, B), four numbers (C, M, Y, K),
                                a hexadecimal string, another Color, or a sequence of any of these numbers.
                                Numbers are any ``numbers.Real`` (bool excluded) or ``decimal.Decimal``
        :param alpha:           Alpha value in the range 0 - 255, overriding the parsed one
        :param alpha_math:      Force the alpha_math flag instead of deriving it from the input form
        :param kwargs:          A single format keyword among :py:data:`INPUT_FORMATS`
        """
        unknown = [k for k in kwargs if k not in INPUT_FORMATS]
        if unknown:
            raise InvalidFormat(f'{self.__class__.__name__}: unknown format keyword(s) {", ".join(unknown)}')
        if len(kwargs) > 1 or (kwargs and args):
            raise InvalidFormat(f'{self.__class__.__name__}: exactly one colour input is expected')

        if kwargs:
            ((tag, value),) = kwargs.items()
            rgba, auto_alpha_math = self._parse(tag, value)
        elif len(args) == 1 and isinstance(args[0], Color):
            rgba, auto_alpha_math = args[0].rgba(), args[0].alpha_math
        elif len(args) == 1 and isinstance(args[0], str):
            rgba, auto_alpha_math = self._parse('hex', args[0])
        elif len(args) == 1 and isinstance(args[0], Sequence) and not isinstance(args[0], (bytes, bytearray)):
            rgba, auto_alpha_math = self._parse_positional(tuple(args[0]))
        else:
            rgba, auto_alpha_math = self._parse_positional(args)

        if alpha is not None:
            if not _are_numbers((alpha, )):
                raise InvalidFormat(f'{self.__class__.__name__}: alpha must be a number, got {alpha!r}')
            rgba = (*rgba[:3], _to_float_if_decimal(alpha))

        for name, value in zip(_CHANNELS, rgba):
            channel = round_channel(value)
            if channel != value:
                logger.debug(f'{self.__class__.__name__}: {name[1:]} value {value!r} rounded or clamped to {channel}')
            object.__setattr__(self, name, channel)
        self.alpha_math = auto_alpha_math if alpha_math is None else bool(alpha_math)

    def _parse_positional(self, args: Tuple[Any, ...]) -> Tuple[Tup4[float], bool]:
        if len(args) == 3:
            return self._parse('rgb', args)
        if len(args) == 4:
            return self._parse('cmyk', args)
        raise InvalidFormat(
            f'{self.__class__.__name__}: expected 3 (RGB) or 4 (CMYK) numbers, got {len(args)} argument(s)'
        )

    def _parse(self, tag: str, value: Any) -> Tuple[Tup4[float], bool]:
        clsname = self.__class__.__name__

        if tag in _HEX_DIGITS:
            if not isinstance(value, str):
                raise InvalidFormat(f'{clsname}: {tag} expects a string, got {value!r}')
            rgba = CC.hex_to_rgba(value, _HEX_DIGITS[tag])
            alpha_math = len(value.strip().lstrip('#')) in {4, 8}
        else:
            if isinstance(value, (str, bytes, bytearray)) or not isinstance(value, Iterable):
                raise InvalidFormat(f'{clsname}: {tag} expects a sequence of numbers, got {value!r}')
            value = tuple(value)
            if len(value) != _ARITY[tag]:
                raise InvalidFormat(f'{clsname}: {tag} expects {_ARITY[tag]} values, got {len(value)}')
            if not _are_numbers(value):
                raise InvalidFormat(f'{clsname}: {tag} values must be numbers, got {tuple(value)!r}')
            rgba = _PARSERS[tag](*map(_to_float_if_decimal, value))
            alpha_math = tag in _ALPHA_FORMATS

        logger.trace(f'{clsname}: parsed {tag} {value!r} as {tuple(rgba)!r}')
        return rgba, alpha_math

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _CHANNELS:
            raise AttributeError(f'{self.__class__.__name__} is immutable; cannot assign to {name[1:]}')
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if name in _CHANNELS:
            raise AttributeError(f'{self.__class__.__name__} is immutable; cannot delete {name[1:]}')
        super().__delattr__(name)

    # -------------------------------------------------------------------------
    # ------------------------------- Factories -------------------------------
    # -------------------------------------------------------------------------
    @classmethod
    def parse(cls: Type[_ColorT], tag: str, values: Any, /, **kwargs: Any) -> _ColorT:
        """
        Make a Color object from a format name known at runtime

        .. code-block:: python

            >>> Color.parse('hsv', (120, 100, 50))

        :param tag:         Format name among :py:data:`INPUT_FORMATS`
        :param values:      Hexadecimal string or sequence of numbers
        :param kwargs:      ``alpha`` and ``alpha_math`` modifiers
        :return:            Color object
        """
        if tag not in INPUT_FORMATS:
            raise InvalidFormat(f'{cls.__name__}: unknown format {tag!r}')
        return cls(**{tag: values}, **kwargs)

    @classmethod
    def from_hex(cls: Type[_ColorT], h: str, /, **kwargs: Any) -> _ColorT:
        return cls(hex=h, **kwargs)

    @classmethod
    def from_rgb(cls: Type[_ColorT], r: float, g: float, b: float, /, **kwargs: Any) -> _ColorT:
        return cls(rgb=(r, g, b), **kwargs)

    @classmethod
    def from_rgba(cls: Type[_ColorT], r: float, g: float, b: float, a: float, /, **kwargs: Any) -> _ColorT:
        return cls(rgba=(r, g, b, a), **kwargs)

    @classmethod
    def from_rgbd(cls: Type[_ColorT], r: float, g: float, b: float, /, **kwargs: Any) -> _ColorT:
        return cls(rgbd=(r, g, b), **kwargs)

    @classmethod
    def from_rgbad(cls: Type[_ColorT], r: float, g: float, b: float, a: float, /, **kwargs: Any) -> _ColorT:
        return cls(rgbad=(r, g, b, a), **kwargs)

    @classmethod
    def from_cmyk(cls: Type[_ColorT], c: float, m: float, y: float, k: float, /, **kwargs: Any) -> _ColorT:
        return cls(cmyk=(c, m, y, k), **kwargs)

    @classmethod
    def from_hsl(cls: Type[_ColorT], h: float, s: Pct, l: Pct, /, **kwargs: Any) -> _ColorT:
        return cls(hsl=(h, s, l), **kwargs)

    @classmethod
    def from_hsv(cls: Type[_ColorT], h: float, s: Pct, v: Pct, /, **kwargs: Any) -> _ColorT:
        return cls(hsv=(h, s, v), **kwargs)

    # -------------------------------------------------------------------------
    # ------------------------------- Accessors -------------------------------
    # -------------------------------------------------------------------------
    @property
    def red(self) -> int:
        """Red value"""
        return self._red

    @property
    def green(self) -> int:
        """Green value"""
        return self._green

    @property
    def blue(self) -> int:
        """Blue value"""
        return self._blue

    @property
    def alpha(self) -> int:
        """Alpha value, 255 is fully opaque"""
        return self._alpha

    def rgb(self) -> Tup3[int]:
        return self._red, self._green, self._blue

    def rgba(self) -> Tup4[int]:
        return self._red, self._green, self._blue, self._alpha

    def rgbd(self) -> Tup3[float]:
        """
        :return:            R, G and B in the range 0.0 - 1.0
        """
        return self._red / 255, self._green / 255, self._blue / 255

    def rgbad(self) -> Tup4[float]:
        """
        :return:            R, G, B and Alpha in the range 0.0 - 1.0
        """
        return (*self.rgbd(), self._alpha / 255)

    def hex(self) -> str:
        """
        :return:            ``#RRGGBB`` uppercase string
        """
        return CC.rgb_to_hex(*self.rgb())

    def hex8(self) -> str:
        """
        :return:            ``#RRGGBBAA`` uppercase string
        """
        return CC.rgb_to_hex(*self.rgba())

    def hex3(self) -> str:
        """
        Lossy short form, each digit ``d`` stands for the byte ``dd``

        :return:            ``#RGB`` uppercase string
        """
        return CC.rgb_to_short_hex(*self.rgb())

    def hex4(self) -> str:
        """
        Lossy short form with alpha, each digit ``d`` stands for the byte ``dd``

        :return:            ``#RGBA`` uppercase string
        """
        return CC.rgb_to_short_hex(*self.rgba())

    def cmyk(self) -> Tup4[float]:
        """
        :return:            Cyan, Magenta, Yellow and Key (black) in the range 0.0 - 1.0
        """
        return CC.rgb_to_cmyk(*self.rgbd())

    def hsl(self) -> Tup3[float]:
        """
        :return:            Hue in degrees 0.0 - 360.0 (exclusive),
                            saturation and lightness as percentages 0.0 - 100.0
        """
        return CC.rgb_to_hsl(*self.rgbd())

    def hsv(self) -> Tup3[float]:
        """
        :return:            Hue in degrees 0.0 - 360.0 (exclusive),
                            saturation and value as percentages 0.0 - 100.0
        """
        return CC.rgb_to_hsv(*self.rgbd())

    def to_string(self, fmt: str = 'hex', /) -> str:
        """
        Render the colour as text

        .. code-block:: python

            >>> Color(10, 20, 30).to_string('rgb')
            'rgb(10, 20, 30)'
            >>> Color(255, 0, 0).to_string('hsl')
            'hsl(0, 100%, 50%)'

        :param fmt:         Format name among :py:data:`SUPPORTED_FORMATS`, defaults to ``hex``
        :return:            Textual representation
        """
        if fmt in {'hex', 'hex6'}:
            return self.hex()
        if fmt == 'hex3':
            return self.hex3()
        if fmt == 'hex4':
            return self.hex4()
        if fmt == 'hex8':
            return self.hex8()
        if fmt in {'rgb', 'rgba'}:
            values = ', '.join(map(str, getattr(self, fmt)()))
        elif fmt in {'rgbd', 'rgbad', 'cmyk'}:
            values = ', '.join(_num(x, 4) for x in getattr(self, fmt)())
        elif fmt in {'hsl', 'hsv'}:
            h, s, x = getattr(self, fmt)()
            values = f'{_num(h, 2)}, {_num(s, 2)}%, {_num(x, 2)}%'
        else:
            logger.debug(f'{self.__class__.__name__}: unsupported output format {fmt!r}')
            raise UnsupportedFormat(
                f'{self.__class__.__name__}: unsupported format {fmt!r}, expected one of {", ".join(SUPPORTED_FORMATS)}'
            )
        return f'{fmt}({values})'

    # -------------------------------------------------------------------------
    # ----------------------------- Manipulators ------------------------------
    # -------------------------------------------------------------------------
    def _adjust_hsl(self: _ColorT, saturation: Pct = 0.0, lightness: Pct = 0.0) -> _ColorT:
        h, s, l = self.hsl()
        return self.__class__(
            hsl=(h, clamp_value(s + saturation, 0.0, 100.0), clamp_value(l + lightness, 0.0, 100.0)),
            alpha=self._alpha, alpha_math=self.alpha_math
        )

    def lighten(self: _ColorT, pct: Pct) -> _ColorT:
        """
        Increase the HSL lightness

        :param pct:         Percentage points to add, the result is clamped in the range 0 - 100
        :return:            New Color object
        """
        return self._adjust_hsl(lightness=pct)

    def darken(self: _ColorT, pct: Pct) -> _ColorT:
        """
        Decrease the HSL lightness

        :param pct:         Percentage points to remove, the result is clamped in the range 0 - 100
        :return:            New Color object
        """
        return self._adjust_hsl(lightness=-pct)

    def saturate(self: _ColorT, pct: Pct) -> _ColorT:
        """
        Increase the HSL saturation

        :param pct:         Percentage points to add, the result is clamped in the range 0 - 100
        :return:            New Color object
        """
        return self._adjust_hsl(saturation=pct)

    def desaturate(self: _ColorT, pct: Pct) -> _ColorT:
        """
        Decrease the HSL saturation

        :param pct:         Percentage points to remove, the result is clamped in the range 0 - 100
        :return:            New Color object
        """
        return self._adjust_hsl(saturation=-pct)

    def invert(self: _ColorT) -> _ColorT:
        """
        Replace each channel by its complement to 255.
        Alpha is inverted only if ``alpha_math`` is set.

        :return:            New Color object
        """
        r, g, b, a = self.rgba()
        return self.__class__(
            rgba=(255 - r, 255 - g, 255 - b, 255 - a if self.alpha_math else a),
            alpha_math=self.alpha_math
        )

    def with_alpha(self: _ColorT, alpha: float) -> _ColorT:
        """
        :param alpha:       New alpha value in the range 0 - 255
        :return:            New Color object with the same RGB values
        """
        return self.__class__(rgb=self.rgb(), alpha=alpha, alpha_math=self.alpha_math)

    def interpolate(self: _ColorT, nobj: Color, pct: float, /) -> _ColorT:
        """
        Interpolate the channels of the current object with nobj
        and returns a new interpolated object.

        :param nobj:        Second colour
        :param pct:         Percentage value in the range 0.0 - 1.0
        :return:            New Color object
        """
        if not isinstance(nobj, Color):
            raise TypeError(f'{self.__class__.__name__}: can\'t interpolate with {type(nobj).__name__}')
        pct = clamp_value(pct, 0.0, 1.0)
        return self.__class__(
            rgba=tuple((1 - pct) * v1 + pct * v2 for v1, v2 in zip(self, nobj)),
            alpha_math=self.alpha_math
        )

    # -------------------------------------------------------------------------
    # ----------------------------- Value protocol ----------------------------
    # -------------------------------------------------------------------------
    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        clsname = self.__class__.__name__
        return '%s(red=%r, green=%r, blue=%r, alpha=%r, alpha_math=%r)' % (clsname, *self.rgba(), self.alpha_math)

    def __eq__(self, __o: object) -> bool:
        if not isinstance(__o, Color):
            return NotImplemented
        return self.rgba() == __o.rgba()

    def __hash__(self) -> int:
        return hash(self.rgba())

    def __iter__(self) -> Iterator[int]:
        return iter(self.rgba())

    def __len__(self) -> int:
        return len(_CHANNELS)

    def __copy__(self: _ColorT) -> _ColorT:
        return self.__class__(rgba=self.rgba(), alpha_math=self.alpha_math)

    def __deepcopy__(self: _ColorT, *args: Any) -> _ColorT:
        return self.__copy__()

    def __getstate__(self) -> Tuple[Tup4[int], bool]:
        return self.rgba(), self.alpha_math

    def __setstate__(self, state: Tuple[Tup4[int], bool]) -> None:
        rgba, alpha_math = state
        for name, value in zip(_CHANNELS, rgba):
            object.__setattr__(self, name, value)
        self.alpha_math = alpha_math

    # -------------------------------------------------------------------------
    # ------------------------------- Operators -------------------------------
    # -------------------------------------------------------------------------
    def __add__(self, __x: Color | Scalar) -> Color:
        from .arithmetic import add, is_operand
        return add(self, __x) if is_operand(__x) else NotImplemented

    def __radd__(self, __x: Scalar) -> Color:
        from .arithmetic import add, is_operand
        return add(__x, self) if is_operand(__x) else NotImplemented

    def __sub__(self, __x: Color | Scalar) -> Color:
        from .arithmetic import is_operand, subtract
        return subtract(self, __x) if is_operand(__x) else NotImplemented

    def __rsub__(self, __x: Scalar) -> Color:
        from .arithmetic import is_operand, subtract
        return subtract(__x, self) if is_operand(__x) else NotImplemented

    def __mul__(self, __x: Color | Scalar) -> Color:
        from .arithmetic import is_operand, multiply
        return multiply(self, __x) if is_operand(__x) else NotImplemented

    def __rmul__(self, __x: Scalar) -> Color:
        from .arithmetic import is_operand, multiply
        return multiply(__x, self) if is_operand(__x) else NotImplemented

    def __truediv__(self, __x: Color | Scalar) -> Color:
        from .arithmetic import divide, is_operand
        return divide(self, __x) if is_operand(__x) else NotImplemented

    def __rtruediv__(self, __x: Scalar) -> Color:
        from .arithmetic import divide, is_operand
        return divide(__x, self) if is_operand(__x) else NotImplemented

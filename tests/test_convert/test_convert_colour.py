from __future__ import annotations

import pytest
import pytest_check as check
from pycolor import ConvertColour, InvalidFormat


def _close(a: tuple, b: tuple, tol: float = 1e-9) -> bool:
    return all(abs(x - y) <= tol for x, y in zip(a, b))


def test_hex_to_rgba() -> None:
    check.equal(ConvertColour.hex_to_rgba('#0A141E'), (10, 20, 30, 255))
    check.equal(ConvertColour.hex_to_rgba('0a141e80'), (10, 20, 30, 128))
    check.equal(ConvertColour.hex_to_rgba('#1CE'), (17, 204, 238, 255))
    check.equal(ConvertColour.hex_to_rgba('1CE0'), (17, 204, 238, 0))
    check.equal(ConvertColour.hex_to_rgba('#FFF', 3), (255, 255, 255, 255))


@pytest.mark.parametrize('value, ndigits', [('#FFFF', 3), ('FFF', 6), ('#FFFFFF', 8), ('##FFF', None), ('FF F', None)])
def test_hex_to_rgba_invalid(value: str, ndigits: int | None) -> None:
    with pytest.raises(InvalidFormat):
        ConvertColour.hex_to_rgba(value, ndigits)


def test_rgb_to_hex() -> None:
    check.equal(ConvertColour.rgb_to_hex(10, 20, 30), '#0A141E')
    check.equal(ConvertColour.rgb_to_hex(255, 255, 255, 0), '#FFFFFF00')


def test_rgb_to_short_hex() -> None:
    check.equal(ConvertColour.rgb_to_short_hex(0, 136, 255), '#08F')
    check.equal(ConvertColour.rgb_to_short_hex(8, 9, 25, 26), '#0112')


def test_hex_round_trip() -> None:
    for r in range(0, 256, 51):
        for g in range(0, 256, 51):
            for b in range(0, 256, 51):
                h = ConvertColour.rgb_to_hex(r, g, b)
                check.equal(ConvertColour.hex_to_rgba(h), (r, g, b, 255))


def test_cmyk() -> None:
    check.equal(ConvertColour.rgb_to_cmyk(0.0, 0.0, 0.0), (0.0, 0.0, 0.0, 1.0))
    check.equal(ConvertColour.rgb_to_cmyk(1.0, 1.0, 1.0), (0.0, 0.0, 0.0, 0.0))
    check.is_true(_close(ConvertColour.rgb_to_cmyk(0.5, 0.25, 0.0), (0.0, 0.5, 1.0, 0.5)))
    check.equal(ConvertColour.cmyk_to_rgb(0.0, 0.5, 1.0, 0.5), (0.5, 0.25, 0.0))
    check.equal(ConvertColour.cmyk_to_rgb(2.0, -1.0, 0.0, 0.0), (0.0, 1.0, 1.0))


def test_hsl() -> None:
    check.is_true(_close(ConvertColour.hsl_to_rgb(0, 100, 50), (1.0, 0.0, 0.0)))
    check.is_true(_close(ConvertColour.hsl_to_rgb(720, 100, 50), (1.0, 0.0, 0.0)))
    check.is_true(_close(ConvertColour.hsl_to_rgb(359.999, 100, 50), (1.0, 0.0, 0.0), 1e-4))
    check.is_true(_close(ConvertColour.rgb_to_hsl(1.0, 0.0, 0.0), (0.0, 100.0, 50.0)))
    check.is_true(_close(ConvertColour.rgb_to_hsl(0.0, 0.0, 1.0), (240.0, 100.0, 50.0)))


def test_hsv() -> None:
    check.is_true(_close(ConvertColour.hsv_to_rgb(120, 100, 100), (0.0, 1.0, 0.0)))
    check.is_true(_close(ConvertColour.hsv_to_rgb(240, 50, 50), (0.25, 0.25, 0.5)))
    check.is_true(_close(ConvertColour.rgb_to_hsv(0.25, 0.25, 0.5), (240.0, 50.0, 50.0)))
    check.is_true(_close(ConvertColour.rgb_to_hsv(0.0, 0.0, 0.0), (0.0, 0.0, 0.0)))


def test_hsl_hsv_round_trip() -> None:
    for r in range(0, 256, 51):
        for g in range(0, 256, 51):
            for b in range(0, 256, 51):
                rgb = (r / 255, g / 255, b / 255)
                check.is_true(_close(ConvertColour.hsl_to_rgb(*ConvertColour.rgb_to_hsl(*rgb)), rgb))
                check.is_true(_close(ConvertColour.hsv_to_rgb(*ConvertColour.rgb_to_hsv(*rgb)), rgb))
                check.is_true(_close(ConvertColour.cmyk_to_rgb(*ConvertColour.rgb_to_cmyk(*rgb)), rgb))

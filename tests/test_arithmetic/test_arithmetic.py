from __future__ import annotations

from fractions import Fraction

import pytest
import pytest_check as check
from pycolor import Color, add, divide, multiply, subtract


def test_add_colors() -> None:
    check.equal((Color(10, 20, 30) + Color(1, 2, 3)).rgba(), (11, 22, 33, 255))
    check.equal((Color(200, 200, 200) + Color(100, 0, 0)).rgb(), (255, 200, 200))


def test_subtract_colors() -> None:
    check.equal((Color(10, 20, 30) - Color(1, 2, 3)).rgb(), (9, 18, 27))
    check.equal((Color(10, 20, 30) - Color(20, 20, 20)).rgb(), (0, 0, 10))


def test_multiply_colors() -> None:
    check.equal((Color(10, 20, 30) * Color(2, 3, 10)).rgb(), (20, 60, 255))


def test_divide_colors() -> None:
    check.equal((Color(10, 20, 30) / Color(2, 3, 4)).rgb(), (5, 7, 8))


def test_scalar_operands() -> None:
    color = Color(10, 20, 30)
    check.equal((color + 5).rgb(), (15, 25, 35))
    check.equal((5 + color).rgb(), (15, 25, 35))
    check.equal((color - 50).rgb(), (0, 0, 0))
    check.equal((100 - color).rgb(), (90, 80, 70))
    check.equal((color * 2).rgb(), (20, 40, 60))
    check.equal((2 * color).rgb(), (20, 40, 60))
    check.equal((color / 4).rgb(), (2, 5, 8))
    check.equal((60 / Color(10, 0, 30)).rgb(), (6, 0, 2))
    check.equal((color * Fraction(1, 2)).rgb(), (5, 10, 15))
    check.equal((color * 2.5).rgb(), (25, 50, 75))


def test_rounding_ties_to_even() -> None:
    check.equal((Color(1, 3, 5) * 0.5).rgb(), (0, 2, 2))
    check.equal((Color(5, 5, 5) * 0.5).rgb(), (2, 2, 2))
    check.equal((Color(7, 7, 7) * 0.5).rgb(), (4, 4, 4))


def test_alpha_excluded_without_alpha_math() -> None:
    color = Color(10, 20, 30, alpha=100)
    check.equal((color * 2).alpha, 100)
    check.equal((color + Color(1, 1, 1, alpha=50)).alpha, 100)
    check.equal((color / 0).alpha, 100)


def test_alpha_included_with_alpha_math() -> None:
    color = Color(rgba=(10, 20, 30, 100))
    check.equal((color * 2).alpha, 200)
    check.equal((color + 200).alpha, 255)
    check.equal((color / 0).rgba(), (0, 0, 0, 0))
    check.is_true((color * 2).alpha_math)


def test_alpha_math_of_either_operand() -> None:
    result = Color(1, 2, 3, alpha=200) - Color(rgba=(0, 0, 0, 50))
    check.equal(result.rgba(), (1, 2, 3, 150))
    check.is_false(result.alpha_math)

    result = Color(rgba=(0, 0, 0, 50)) + Color(1, 2, 3, alpha=100)
    check.equal(result.rgba(), (1, 2, 3, 150))
    check.is_true(result.alpha_math)


def test_division_by_zero() -> None:
    check.equal(Color(10, 20, 30) / 0, Color(0, 0, 0))
    result = Color(10, 20, 30) / Color(0, 5, 0)
    check.equal(result.rgba(), (0, 4, 0, 255))
    check.equal((0 / Color(0, 0, 0)).rgb(), (0, 0, 0))


def test_operands_unchanged() -> None:
    a, b = Color(10, 20, 30), Color(1, 2, 3)
    _ = a + b
    check.equal(a.rgb(), (10, 20, 30))
    check.equal(b.rgb(), (1, 2, 3))


def test_named_functions() -> None:
    a, b = Color(10, 20, 30), Color(1, 2, 3)
    check.equal(add(a, b), a + b)
    check.equal(subtract(a, b), a - b)
    check.equal(multiply(a, b), a * b)
    check.equal(divide(a, b), a / b)
    check.equal(add(1, a), 1 + a)
    check.equal(divide(a, 0), a / 0)


def test_result_is_color_subclass() -> None:
    class Colour(Color):
        pass

    check.is_instance(Colour(1, 2, 3) * 2, Colour)
    check.is_instance(2 * Colour(1, 2, 3), Colour)


@pytest.mark.parametrize('other', ['a', None, (1, 2, 3), True, [1]])
def test_unsupported_operand(other: object) -> None:
    color = Color(10, 20, 30)
    with pytest.raises(TypeError):
        color + other  # type: ignore[operator]
    with pytest.raises(TypeError):
        other * color  # type: ignore[operator]


def test_named_functions_reject_non_colors() -> None:
    with pytest.raises(TypeError):
        add(1, 2)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        subtract(Color(1, 2, 3), 'a')  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        divide(False, Color(1, 2, 3))  # type: ignore[arg-type]

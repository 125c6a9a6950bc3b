"""
Polar & Transcendental — модуль, аргумент, полярная форма, exp/log, корни

Функции принимают Complex или действительное число. Для действительного
входа у exp, log и sqrt есть быстрый путь, который остаётся в
действительной области:

    exp(x)  = (e^x, 0)
    log(x)  = (ln x, 0)      — NaN для x < 0, -inf для x = 0
    sqrt(x) = (√x, 0)        — NaN для x < 0

Для Complex используется главная ветвь (аргумент в (-π, π]):

    log(z)  = (ln|z|, arg z)
    sqrt(z) = polar(√|z|, arg(z) / 2)

Поэтому log(-1) = (nan, 0), а log(make(-1, 0)) = (0, π). Асимметрия
сохраняется намеренно.
"""

import math
from typing import Any

from imagine.core.domain.complex_number import Complex, as_complex, make, to_float
from imagine.core.domain.errors import InvalidArgument, type_name
from imagine.core.math.numerical_safeguards import (
    ieee_cos,
    ieee_exp,
    ieee_log,
    ieee_sin,
    ieee_sqrt,
    is_integer_number,
    is_real_number,
    round_half_up,
)


# =============================================================================
# СКАЛЯРНЫЕ ЗАПРОСЫ
# =============================================================================


def abs_(z: Any) -> float:
    """
    Модуль (норма) числа.

    Для Complex: sqrt(a² + b²). Для действительного: abs(x).

    Raises:
        InvalidArgument: Если z не Complex и не действительное число
    """
    if isinstance(z, Complex):
        return math.hypot(z.real, z.imag)
    if is_real_number(z):
        return abs(to_float(z, "abs"))
    raise InvalidArgument("abs", f"cannot calculate norm of {type_name(z)!r}")


norm = abs_


def arg(z: Any) -> float:
    """
    Аргумент (фаза) числа, радианы.

    Для Complex: atan2(b, a). Для действительного всегда 0, включая
    отрицательные числа: x трактуется как (x, 0) с нулевой фазой.
    """
    if isinstance(z, Complex):
        return math.atan2(z.imag, z.real)
    if is_real_number(z):
        return 0.0
    raise InvalidArgument("arg", f"cannot calculate argument of {type_name(z)!r}")


# =============================================================================
# ПОЛЯРНАЯ ФОРМА
# =============================================================================


def cis(theta: Any) -> Complex:
    """cos θ + i sin θ. Только для действительного θ."""
    if not is_real_number(theta):
        raise InvalidArgument("cis", f"angle must be a real number, got {type_name(theta)!r}")
    theta = to_float(theta, "cis")
    return make(ieee_cos(theta), ieee_sin(theta))


def polar(r: Any, theta: Any) -> Complex:
    """
    Число по модулю и аргументу: r · cis(θ).

    Raises:
        InvalidArgument: Если r или θ не действительные числа
    """
    if not is_real_number(r):
        raise InvalidArgument("polar", f"modulus must be a real number, got {type_name(r)!r}")
    if not is_real_number(theta):
        raise InvalidArgument("polar", f"angle must be a real number, got {type_name(theta)!r}")
    r = to_float(r, "polar")
    unit = cis(to_float(theta, "polar"))
    return make(r * unit.real, r * unit.imag)


# =============================================================================
# EXP / LOG / SQRT
# =============================================================================


def exp(z: Any) -> Complex:
    """Экспонента: (e^x, 0) для действительного, e^a · cis(b) для (a, b)."""
    if is_real_number(z):
        return make(ieee_exp(to_float(z, "exp")), 0.0)
    z = as_complex(z, "exp")
    return polar(ieee_exp(z.real), z.imag)


def log(z: Any) -> Complex:
    """
    Натуральный логарифм.

    Для действительного: (ln x, 0), без перехода в комплексную ветвь.
    Для Complex: главное значение (ln|z|, arg z).
    """
    if is_real_number(z):
        return make(ieee_log(to_float(z, "log")), 0.0)
    z = as_complex(z, "log")
    return make(ieee_log(abs_(z)), arg(z))


def sqrt(z: Any) -> Complex:
    """
    Главный квадратный корень.

    Для действительного: (√x, 0), NaN для x < 0.
    Для Complex: polar(√|z|, arg(z) / 2).
    """
    if is_real_number(z):
        return make(ieee_sqrt(to_float(z, "sqrt")), 0.0)
    z = as_complex(z, "sqrt")
    return polar(ieee_sqrt(abs_(z)), arg(z) / 2)


def roots(z: Any, n: Any) -> list[Complex]:
    """
    Все n корней n-й степени из z.

    k-й корень: |z|^(1/n) · cis((arg z + 2πk) / n), k = 0..n-1,
    в порядке возрастания k. Первый элемент — главный корень.

    Args:
        z: Complex или действительное число
        n: Степень корня (целое >= 1)

    Returns:
        Список из ровно n значений

    Raises:
        InvalidArgument: Если n не положительное целое

    Examples:
        >>> [str(w) for w in roots(1, 2)]
        ['1', '-1']
    """
    if not is_integer_number(n) or n < 1:
        raise InvalidArgument("roots", f"root index must be a positive integer, got {n!r}")

    z = as_complex(z, "roots")
    modulus = abs_(z) ** (1.0 / n)
    theta = arg(z)
    return [polar(modulus, (theta + 2 * math.pi * k) / n) for k in range(n)]


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_(z: Any, dp: Any = 0) -> Complex:
    """
    Покомпонентное округление до dp десятичных знаков (half-up).

    При dp = 0 — ближайшее гауссово целое.

    Raises:
        InvalidArgument: Если dp не целое число
    """
    if not is_integer_number(dp):
        raise InvalidArgument("round", f"decimal places must be an integer, got {type_name(dp)!r}")

    z = as_complex(z, "round")
    return make(round_half_up(z.real, dp), round_half_up(z.imag, dp))

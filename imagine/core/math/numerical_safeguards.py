"""
Numerical Safeguards — скалярные примитивы для комплексной арифметики

Модуль содержит всё, что работает с отдельными float-компонентами:
- Проверки типов: является ли значение действительным / целым числом
- Epsilon-сравнения float (абсолютная толерантность)
- Округление half-up до заданного числа десятичных знаков
- IEEE-754 версии деления, log, sqrt, exp, cos, sin

ПОЛИТИКА ОСОБЫХ ТОЧЕК:
Python поднимает исключения там, где IEEE-754 возвращает inf/nan
(1.0 / 0.0, math.log(0.0), math.sqrt(-1.0), math.exp(1000.0), math.cos(inf)).
Библиотека предпочитает распространение inf/nan исключениям, поэтому
все такие операции проходят через функции ieee_* этого модуля.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Функции ieee_* никогда не поднимают исключений для float-входов
2. bool не считается действительным числом
3. Все операции детерминированы и воспроизводимы
"""

import math
import numbers
from typing import Any, Final


# С 2**52 соседние double отстоят на 1.0 и больше: дробной части нет
_EXACT_INTEGER_LIMIT: Final[float] = 2.0 ** 52


# =============================================================================
# ПРОВЕРКИ ТИПОВ
# =============================================================================


def is_real_number(value: Any) -> bool:
    """
    Проверка, является ли значение действительным числом.

    Принимаются int, float, fractions.Fraction и любые numbers.Real.
    bool исключён: True/False не являются числами для этой библиотеки.

    Examples:
        >>> is_real_number(3)
        True
        >>> is_real_number(2.5)
        True
        >>> is_real_number(True)
        False
        >>> is_real_number(1j)
        False
    """
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_integer_number(value: Any) -> bool:
    """Проверка, является ли значение целым числом (numbers.Integral, не bool)."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(a: float, b: float, tol: float) -> bool:
    """
    Сравнение float с абсолютной толерантностью.

    Алгоритм:
        abs(a - b) <= tol

    Относительная толерантность не используется: компоненты комплексного
    числа сравниваются с одним и тем же абсолютным epsilon.

    NaN не близок ни к чему, включая сам NaN.

    Examples:
        >>> is_close(1.0, 1.0 + 1e-13, 1e-12)
        True
        >>> is_close(1.0, 1.1, 1e-12)
        False
    """
    return abs(a - b) <= tol


def is_zero(value: float, tol: float) -> bool:
    """True если abs(value) <= tol."""
    return abs(value) <= tol


def snap(value: float, tol: float, targets: tuple[float, ...] = (0.0, 1.0, -1.0)) -> float:
    """
    Притягивание значения к ближайшей «круглой» точке.

    Если value в пределах tol от одной из targets, возвращается эта точка
    (первая подходящая в порядке перечисления). Иначе value без изменений.

    Examples:
        >>> snap(1e-15, 1e-12)
        0.0
        >>> snap(-0.9999999999999, 1e-12)
        -1.0
        >>> snap(0.5, 1e-12)
        0.5
    """
    for target in targets:
        if is_close(value, target, tol):
            return target
    return value


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_up(value: float, dp: int = 0) -> float:
    """
    Округление до dp десятичных знаков, половина округляется вверх.

    Алгоритм:
        floor(value * 10**dp + 0.5) / 10**dp

    «Вверх» означает к +inf: 2.5 → 3.0, -2.5 → -2.0.
    Отрицательный dp округляет до десятков, сотен и т.д.
    NaN и Inf возвращаются без изменений.

    Граничные случаи (исключений нет):
        - dp >= 0 и |value| >= 2**52 (значение уже целое) → без изменений
        - 10**dp или value * 10**dp переполняется → без изменений
        - 10**dp исчезает в 0 (dp << 0) → 0.0 со знаком value

    Args:
        value: Значение для округления
        dp: Число десятичных знаков (default: 0)

    Returns:
        Округлённое значение (float)

    Examples:
        >>> round_half_up(2.5)
        3.0
        >>> round_half_up(-2.5)
        -2.0
        >>> round_half_up(1.2345, 2)
        1.23
        >>> round_half_up(125.0, -1)
        130.0
    """
    if not is_valid_float(value):
        return value
    if dp >= 0 and abs(value) >= _EXACT_INTEGER_LIMIT:
        return value

    try:
        scale = 10.0 ** dp
    except OverflowError:
        # 10**dp вне диапазона double
        scale = 0.0 if dp < 0 else math.inf
    if scale == math.inf:
        return value
    if scale == 0:
        return math.copysign(0.0, value)

    scaled = value * scale
    if not is_valid_float(scaled):
        return value
    return math.floor(scaled + 0.5) / scale


# =============================================================================
# IEEE-754 ОПЕРАЦИИ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с семантикой IEEE-754 вместо ZeroDivisionError.

    При denominator == 0:
        - numerator == 0 или NaN → NaN
        - иначе → ±inf (знак = знак numerator × знак denominator,
          с учётом -0.0)

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if math.isnan(numerator) or numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def ieee_log(value: float) -> float:
    """
    Натуральный логарифм с семантикой IEEE-754.

    log(0) → -inf, log(x < 0) → NaN, log(NaN) → NaN.
    """
    if value > 0 or math.isnan(value):
        return math.log(value)
    if value == 0:
        return -math.inf
    return math.nan


def ieee_sqrt(value: float) -> float:
    """Квадратный корень: NaN для отрицательных значений."""
    if value >= 0 or math.isnan(value):
        return math.sqrt(value)
    return math.nan


def ieee_exp(value: float) -> float:
    """Экспонента: +inf при переполнении вместо OverflowError."""
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf


def ieee_cos(value: float) -> float:
    """Косинус: NaN для ±inf вместо ValueError."""
    if math.isinf(value):
        return math.nan
    return math.cos(value)


def ieee_sin(value: float) -> float:
    """Синус: NaN для ±inf вместо ValueError."""
    if math.isinf(value):
        return math.nan
    return math.sin(value)

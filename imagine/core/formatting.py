"""
Formatting — человекочитаемое представление комплексного числа

Перед выводом каждая компонента в пределах epsilon от 0, 1 или -1
притягивается к этой точке. Хранимое значение не меняется.

Правила для притянутых (a, b):

    b == 0              → "a"
    a == 0, b == 1      → "i"
    a == 0, b == -1     → "-i"
    a == 0              → "bi"
    b == 1              → "a + i"
    b == -1             → "a - i"
    b > 0               → "a + bi"
    b < 0               → "a - |b|i"

Целые значения выводятся без дробной части ("3", а не "3.0").
"""

from typing import Any, Optional

from imagine.core.domain.complex_number import as_complex
from imagine.core.math.numerical_safeguards import snap
from imagine.core.math.precision import PrecisionContext, get_epsilon


def format_real(value: float) -> str:
    """
    Кратчайшее представление float без хвоста ".0".

    Examples:
        >>> format_real(3.0)
        '3'
        >>> format_real(0.5)
        '0.5'
        >>> format_real(1e+20)
        '1e+20'
    """
    text = repr(value)
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_complex(z: Any, context: Optional[PrecisionContext] = None) -> str:
    """
    Строка вида "3 + 4i".

    Args:
        z: Complex или действительное число
        context: Явный контекст точности (default: общий контекст)

    Examples:
        >>> format_complex(make(3, 4))
        '3 + 4i'
        >>> format_complex(make(0, -1))
        '-i'
        >>> format_complex(make(2, -0.5))
        '2 - 0.5i'
    """
    z = as_complex(z, "format")
    eps = get_epsilon(context)
    a = snap(z.real, eps)
    b = snap(z.imag, eps)

    if b == 0:
        return format_real(a)

    if a == 0:
        if b == 1:
            return "i"
        if b == -1:
            return "-i"
        return f"{format_real(b)}i"

    if b == 1:
        return f"{format_real(a)} + i"
    if b == -1:
        return f"{format_real(a)} - i"
    if b < 0:
        return f"{format_real(a)} - {format_real(-b)}i"
    return f"{format_real(a)} + {format_real(b)}i"

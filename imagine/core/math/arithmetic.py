"""
Arithmetic — операторы над комплексными числами

Для x = (a, b), y = (c, d) после коэрсии действительных операндов:

    add:   (a + c, b + d)
    sub:   (a - c, b - d)
    mul:   (ac - bd, ad + bc)
    div:   ((ac + bd) / (c² + d²), (bc - ad) / (c² + d²))
    neg:   (-a, -b)
    power: exp(y · log(x))  — только главная ветвь
    eq:    |a - c| <= eps и |b - d| <= eps

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый аргумент проходит через as_complex() на входе операции
2. Деление на (0, 0) не поднимает исключение: результат несёт inf/nan
3. power(0, y) распространяет NaN через особенность логарифма
4. eq() читает epsilon в момент сравнения
"""

from typing import Any, Optional

from imagine.core.domain.complex_number import Complex, as_complex, make
from imagine.core.math.numerical_safeguards import ieee_divide, is_close
from imagine.core.math.precision import PrecisionContext, get_epsilon


def add(x: Any, y: Any) -> Complex:
    """Сумма x + y."""
    x, y = as_complex(x, "add"), as_complex(y, "add")
    return make(x.real + y.real, x.imag + y.imag)


def sub(x: Any, y: Any) -> Complex:
    """Разность x - y."""
    x, y = as_complex(x, "sub"), as_complex(y, "sub")
    return make(x.real - y.real, x.imag - y.imag)


def mul(x: Any, y: Any) -> Complex:
    """Произведение x · y."""
    x, y = as_complex(x, "mul"), as_complex(y, "mul")
    a, b, c, d = x.real, x.imag, y.real, y.imag
    return make(a * c - b * d, a * d + b * c)


def div(x: Any, y: Any) -> Complex:
    """
    Частное x / y.

    Делитель с нулевой нормой не является ошибкой: компоненты
    результата получают IEEE-754 значения (±inf или nan).

    Examples:
        >>> div(make(3, 4), 0)
        Complex(real=nan, imag=nan)
    """
    x, y = as_complex(x, "div"), as_complex(y, "div")
    a, b, c, d = x.real, x.imag, y.real, y.imag
    denom = c * c + d * d
    return make(ieee_divide(a * c + b * d, denom), ieee_divide(b * c - a * d, denom))


def neg(x: Any) -> Complex:
    """Противоположное -x."""
    x = as_complex(x, "neg")
    return make(-x.real, -x.imag)


def conj(z: Any) -> Complex:
    """Комплексно сопряжённое (a, -b)."""
    z = as_complex(z, "conj")
    return make(z.real, -z.imag)


def power(x: Any, y: Any) -> Complex:
    """
    Степень x^y = exp(y · log(x)).

    Главная ветвь логарифма. Для x = 0 результат содержит NaN.
    """
    from imagine.core.math.transcendental import exp, log

    x, y = as_complex(x, "power"), as_complex(y, "power")
    return exp(mul(y, log(x)))


def eq(x: Any, y: Any, context: Optional[PrecisionContext] = None) -> bool:
    """
    Равенство с толерантностью epsilon.

    Действительные операнды коэрсируются. Сравнение покомпонентное
    и симметричное, но не транзитивное вблизи границы толерантности.

    Args:
        x: Complex или действительное число
        y: Complex или действительное число
        context: Явный контекст точности (default: общий контекст)

    Examples:
        >>> eq(make(1, 0), 1)
        True
        >>> eq(make(1, 1e-13), make(1, 0))
        True
    """
    x, y = as_complex(x, "eq"), as_complex(y, "eq")
    eps = get_epsilon(context)
    return is_close(x.real, y.real, eps) and is_close(x.imag, y.imag, eps)

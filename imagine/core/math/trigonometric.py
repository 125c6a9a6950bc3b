"""
Trigonometric / Hyperbolic — тригонометрия через exp/log/sqrt

Все функции выводятся из exponential/logarithm слоя и наследуют его
главные ветви. Действительные аргументы коэрсируются в (x, 0), поэтому
здесь всегда работает комплексная ветвь log/sqrt.

    sinh z  = (e^z - e^-z) / 2
    cosh z  = (e^z + e^-z) / 2
    tanh z  = (e^2z - 1) / (e^2z + 1)
    asinh z = log(z + sqrt(z² + 1))
    acosh z = log(z + sqrt(z² - 1))
    atanh z = ½ log((1 + z) / (1 - z))

    sin z   = -i sinh(iz)
    cos z   = cosh(iz)
    tan z   = -i tanh(iz)
    asin z  = -i log(sqrt(1 - z²) + iz)
    acos z  = -i log(i sqrt(1 - z²) + z)
    atan z  = -(i/2) log((i - z) / (i + z))
"""

from typing import Any

from imagine.core.domain.complex_number import I, Complex, as_complex
from imagine.core.math.transcendental import exp, log, sqrt


# =============================================================================
# HYPERBOLIC
# =============================================================================


def sinh(z: Any) -> Complex:
    z = as_complex(z, "sinh")
    return (exp(z) - exp(-z)) / 2


def cosh(z: Any) -> Complex:
    z = as_complex(z, "cosh")
    return (exp(z) + exp(-z)) / 2


def tanh(z: Any) -> Complex:
    z = as_complex(z, "tanh")
    e2z = exp(2 * z)
    return (e2z - 1) / (e2z + 1)


def asinh(z: Any) -> Complex:
    z = as_complex(z, "asinh")
    return log(z + sqrt(z * z + 1))


def acosh(z: Any) -> Complex:
    z = as_complex(z, "acosh")
    return log(z + sqrt(z * z - 1))


def atanh(z: Any) -> Complex:
    z = as_complex(z, "atanh")
    return 0.5 * log((1 + z) / (1 - z))


# =============================================================================
# CIRCULAR
# =============================================================================


def sin(z: Any) -> Complex:
    z = as_complex(z, "sin")
    return -I * sinh(I * z)


def cos(z: Any) -> Complex:
    z = as_complex(z, "cos")
    return cosh(I * z)


def tan(z: Any) -> Complex:
    # tan z = -i tanh(iz)
    z = as_complex(z, "tan")
    return -I * tanh(I * z)


def asin(z: Any) -> Complex:
    z = as_complex(z, "asin")
    return -I * log(sqrt(1 - z * z) + I * z)


def acos(z: Any) -> Complex:
    z = as_complex(z, "acos")
    return -I * log(I * sqrt(1 - z * z) + z)


def atan(z: Any) -> Complex:
    z = as_complex(z, "atan")
    return -(I / 2) * log((I - z) / (I + z))

"""
imagine — комплексная арифметика

Значение a + bi, арифметика с перегрузкой операторов, полярная форма,
семейство exp/log, тригонометрия и форматирование с epsilon-толерантностью.
"""

from imagine.core.domain.complex_number import (
    ONE,
    ZERO,
    I,
    Complex,
    as_complex,
    clone,
    complex_of,
    is_complex,
    make,
)
from imagine.core.domain.errors import InvalidArgument
from imagine.core.formatting import format_complex
from imagine.core.math.arithmetic import add, conj, div, eq, mul, neg, power, sub
from imagine.core.math.precision import (
    DEFAULT_EPSILON,
    PrecisionContext,
    get_context,
    get_epsilon,
    local_precision,
    set_epsilon,
)
from imagine.core.math.transcendental import (
    abs_,
    arg,
    cis,
    exp,
    log,
    norm,
    polar,
    roots,
    round_,
    sqrt,
)
from imagine.core.math.trigonometric import (
    acos,
    acosh,
    asin,
    asinh,
    atan,
    atanh,
    cos,
    cosh,
    sin,
    sinh,
    tan,
    tanh,
)
from imagine.exports import EXPORTS, import_all, partial_import

__all__ = [
    # Value type
    "Complex",
    "ZERO",
    "ONE",
    "I",
    "make",
    "as_complex",
    "is_complex",
    "clone",
    "complex_of",
    # Errors
    "InvalidArgument",
    # Precision
    "DEFAULT_EPSILON",
    "PrecisionContext",
    "get_context",
    "get_epsilon",
    "set_epsilon",
    "local_precision",
    # Arithmetic
    "add",
    "sub",
    "mul",
    "div",
    "neg",
    "power",
    "eq",
    "conj",
    # Polar & transcendental
    "abs_",
    "norm",
    "arg",
    "cis",
    "polar",
    "exp",
    "log",
    "sqrt",
    "roots",
    "round_",
    # Trigonometric / hyperbolic
    "sin",
    "cos",
    "tan",
    "asin",
    "acos",
    "atan",
    "sinh",
    "cosh",
    "tanh",
    "asinh",
    "acosh",
    "atanh",
    # Formatting
    "format_complex",
    # Selective import
    "EXPORTS",
    "import_all",
    "partial_import",
]

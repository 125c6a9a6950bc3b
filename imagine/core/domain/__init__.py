"""
Domain types: значение Complex и исключения библиотеки.
"""

from imagine.core.domain.errors import InvalidArgument
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

__all__ = [
    "InvalidArgument",
    "Complex",
    "ZERO",
    "ONE",
    "I",
    "make",
    "as_complex",
    "is_complex",
    "clone",
    "complex_of",
]

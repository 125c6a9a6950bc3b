"""
Complex — значение a + bi

Immutable Pydantic модель из двух IEEE-754 double компонент: real и imag.

Создание значения:
- make(real, imag)     — из двух действительных чисел
- as_complex(x)        — коэрсия: Complex без изменений, real x → (x, 0)
- complex_of(a, b)     — make(a, b), либо as_complex(a) при одном аргументе
- результат любой арифметической операции (новый экземпляр)

Значения никогда не изменяются после создания, поэтому могут свободно
разделяться между потоками.

Операторы (+ - * / ** unary-) принимают Complex или действительное число с
любой стороны; коэрсия выполняется до вычисления. == сравнивает с
толерантностью epsilon и только два Complex: сравнение с действительным
числом требует явной коэрсии (или функции eq).
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from imagine.core.domain.errors import InvalidArgument, type_name
from imagine.core.math.numerical_safeguards import is_real_number


class Complex(BaseModel):
    """
    Комплексное число a + bi.

    Равенство толерантное (epsilon) и поэтому не транзитивно вблизи
    границы толерантности. По той же причине значение не хэшируемо.

    Создаётся через make() / as_complex(); прямой вызов
    Complex(real=..., imag=...) строго валидируется Pydantic.
    """

    real: float = Field(..., description="Действительная часть")
    imag: float = Field(..., description="Мнимая часть")

    model_config = {"frozen": True, "strict": True}

    # Толерантное равенство несовместимо с хэшированием
    __hash__ = None  # type: ignore[assignment]

    # -------------------------------------------------------------------------
    # Скалярные запросы
    # -------------------------------------------------------------------------

    def norm(self) -> float:
        """Модуль sqrt(real² + imag²)."""
        return transcendental.abs_(self)

    def arg(self) -> float:
        """Аргумент atan2(imag, real), радианы в (-π, π]."""
        return transcendental.arg(self)

    def conj(self) -> "Complex":
        """Комплексно сопряжённое."""
        return arithmetic.conj(self)

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return arithmetic.add(self, other)

    def __radd__(self, other: Any) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return arithmetic.add(other, self)

    def __sub__(self, other: Any) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return arithmetic.sub(self, other)

    def __rsub__(self, other: Any) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return arithmetic.sub(other, self)

    def __mul__(self, other: Any) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return arithmetic.mul(self, other)

    def __rmul__(self, other: Any) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return arithmetic.mul(other, self)

    def __truediv__(self, other: Any) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return arithmetic.div(self, other)

    def __rtruediv__(self, other: Any) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return arithmetic.div(other, self)

    def __pow__(self, other: Any) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return arithmetic.power(self, other)

    def __rpow__(self, other: Any) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return arithmetic.power(other, self)

    def __neg__(self) -> "Complex":
        return arithmetic.neg(self)

    def __abs__(self) -> float:
        return transcendental.abs_(self)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return arithmetic.eq(self, other)

    def __ne__(self, other: Any) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return not arithmetic.eq(self, other)

    # -------------------------------------------------------------------------
    # Конверсия
    # -------------------------------------------------------------------------

    def __complex__(self) -> complex:
        return complex(self.real, self.imag)

    def __str__(self) -> str:
        return formatting.format_complex(self)


def _is_operand(value: Any) -> bool:
    return isinstance(value, Complex) or is_real_number(value)


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def make(real: Any = None, imag: Any = None) -> Complex:
    """
    Создание комплексного числа из двух действительных чисел.

    Args:
        real: Действительная часть (обязательная)
        imag: Мнимая часть (обязательная)

    Returns:
        Complex(real, imag) с компонентами float

    Raises:
        InvalidArgument: Если часть отсутствует, не является действительным
            числом (Complex, str, bool, ...) или не представима как float

    Examples:
        >>> make(3, 4)
        Complex(real=3.0, imag=4.0)
    """
    for part, value in (("real", real), ("imag", imag)):
        if not is_real_number(value):
            raise InvalidArgument(
                "make",
                f"{part} part must be a real number, got {type_name(value)!r}",
            )

    return Complex(real=to_float(real, "make"), imag=to_float(imag, "make"))


def to_float(value: Any, operation: str) -> float:
    """
    Действительное число → float.

    Raises:
        InvalidArgument: Если значение (например, int вне диапазона double)
            не представимо как float
    """
    try:
        return float(value)
    except OverflowError:
        raise InvalidArgument(
            operation, f"{type_name(value)!r} value is not representable as float"
        )


def as_complex(value: Any, operation: str = "as_complex") -> Complex:
    """
    Коэрсия значения в Complex.

    Complex возвращается без изменений, действительное x → (x, 0).

    Args:
        value: Complex или действительное число
        operation: Имя операции для сообщения об ошибке

    Raises:
        InvalidArgument: Для любого другого типа
    """
    if isinstance(value, Complex):
        return value
    if is_real_number(value):
        return Complex(real=to_float(value, operation), imag=0.0)
    raise InvalidArgument(operation, f"cannot convert {type_name(value)!r} to Complex")


def is_complex(value: Any) -> bool:
    """Является ли значение Complex (тотальный предикат)."""
    return isinstance(value, Complex)


def clone(z: Complex) -> Complex:
    """
    Независимая копия значения.

    Raises:
        InvalidArgument: Если z не Complex
    """
    if not isinstance(z, Complex):
        raise InvalidArgument("clone", f"expected Complex, got {type_name(z)!r}")
    return make(z.real, z.imag)


def complex_of(value: Any, imag: Optional[Any] = None) -> Complex:
    """
    Короткая форма конструктора.

    complex_of(a) == as_complex(a), complex_of(a, b) == make(a, b).
    """
    if imag is None:
        return as_complex(value, "complex_of")
    return make(value, imag)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO = make(0.0, 0.0)
ONE = make(1.0, 0.0)
I = make(0.0, 1.0)


# Арифметика и форматирование ссылаются на Complex; импорт после определения
# типа разрывает цикл.
from imagine.core import formatting  # noqa: E402
from imagine.core.math import arithmetic, transcendental  # noqa: E402

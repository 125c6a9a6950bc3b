"""
Tests for Complex value type

Покрывает:
- Конструкторы make / as_complex / complex_of / clone
- Ошибки InvalidArgument для недопустимых типов
- Immutability (frozen=True) и нехэшируемость
- Перегрузку операторов с коэрсией действительных операндов
- Толерантное == только между Complex
- Конверсии (complex(), str(), repr())
"""

import math
from fractions import Fraction

import pytest
from pydantic import ValidationError

from imagine.core.domain import (
    ONE,
    ZERO,
    I,
    Complex,
    InvalidArgument,
    as_complex,
    clone,
    complex_of,
    is_complex,
    make,
)
from imagine.core.math.arithmetic import eq


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def z():
    """3 + 4i"""
    return make(3, 4)


# =============================================================================
# TESTS: make
# =============================================================================


class TestMake:
    """Тесты конструктора make."""

    def test_components_stored_as_float(self):
        w = make(3, 4)
        assert w.real == 3.0
        assert w.imag == 4.0
        assert isinstance(w.real, float)
        assert isinstance(w.imag, float)

    def test_accepts_fraction(self):
        w = make(Fraction(1, 2), -2)
        assert w.real == 0.5
        assert w.imag == -2.0

    def test_non_finite_components_allowed(self):
        w = make(math.inf, math.nan)
        assert w.real == math.inf
        assert math.isnan(w.imag)

    @pytest.mark.parametrize(
        "real, imag",
        [
            ("1", 2),
            (1, "2"),
            (make(1, 2), 0),
            (1j, 0),
            (True, 0),
            (None, 0),
        ],
    )
    def test_non_real_parts_rejected(self, real, imag):
        with pytest.raises(InvalidArgument, match="make: (real|imag) part must be a real number"):
            make(real, imag)

    def test_missing_part_rejected(self):
        with pytest.raises(InvalidArgument, match="imag part"):
            make(1)

    def test_unrepresentable_integer_rejected(self):
        with pytest.raises(InvalidArgument, match="not representable"):
            make(10**400, 0)

    def test_invalid_argument_is_type_and_value_error(self):
        with pytest.raises(TypeError):
            make("x", 0)
        with pytest.raises(ValueError):
            make("x", 0)


class TestDirectConstruction:
    """Прямой вызов Complex(...) строго валидируется Pydantic."""

    def test_keyword_construction(self):
        assert Complex(real=1.0, imag=2.0) == make(1, 2)

    def test_string_rejected(self):
        with pytest.raises(ValidationError):
            Complex(real="1", imag=0.0)

    def test_missing_field_rejected(self):
        with pytest.raises(ValidationError):
            Complex(real=1.0)


# =============================================================================
# TESTS: coercion and helpers
# =============================================================================


class TestAsComplex:
    """Тесты коэрсии as_complex."""

    def test_real_promoted(self):
        w = as_complex(5)
        assert is_complex(w)
        assert w == make(5, 0)

    def test_complex_returned_unchanged(self, z):
        assert as_complex(z) is z

    @pytest.mark.parametrize("value", ["x", None, 1j, True, [1, 2]])
    def test_other_types_rejected(self, value):
        with pytest.raises(InvalidArgument, match="cannot convert"):
            as_complex(value)

    def test_error_names_operation_and_type(self):
        with pytest.raises(InvalidArgument, match="sqrt: cannot convert 'str' to Complex") as exc:
            as_complex("x", "sqrt")
        assert exc.value.operation == "sqrt"

    def test_unrepresentable_integer_names_operation(self):
        with pytest.raises(InvalidArgument, match="^csc: 'int' value is not representable as float"):
            as_complex(10**400, "csc")


def test_is_complex_total():
    assert is_complex(make(0, 0))
    assert not is_complex(0)
    assert not is_complex(None)
    assert not is_complex(1j)


class TestClone:
    """Тесты clone."""

    def test_equal_but_distinct(self, z):
        copy = clone(z)
        assert copy == z
        assert copy is not z
        assert copy.real == z.real and copy.imag == z.imag

    def test_rejects_non_complex(self):
        with pytest.raises(InvalidArgument, match="clone"):
            clone(5)


class TestComplexOf:
    """Тесты короткого конструктора complex_of."""

    def test_one_argument_coerces(self, z):
        assert complex_of(7) == make(7, 0)
        assert complex_of(z) is z

    def test_two_arguments_construct(self):
        assert complex_of(3, 4) == make(3, 4)

    def test_invalid(self):
        with pytest.raises(InvalidArgument, match="complex_of"):
            complex_of("3")


def test_constants():
    assert (ZERO.real, ZERO.imag) == (0.0, 0.0)
    assert (ONE.real, ONE.imag) == (1.0, 0.0)
    assert (I.real, I.imag) == (0.0, 1.0)


# =============================================================================
# TESTS: immutability
# =============================================================================


class TestImmutability:
    """frozen=True: значения не изменяются."""

    def test_assignment_rejected(self, z):
        with pytest.raises(ValidationError):
            z.real = 10.0
        assert z.real == 3.0

    def test_operations_return_new_instances(self, z):
        result = z + 0
        assert result == z
        assert result is not z

    def test_not_hashable(self, z):
        with pytest.raises(TypeError):
            hash(z)


# =============================================================================
# TESTS: operators
# =============================================================================


class TestOperators:
    """Перегрузка операторов с коэрсией."""

    def test_add_with_reals_on_both_sides(self, z):
        assert z + 1 == make(4, 4)
        assert 1 + z == make(4, 4)
        assert z + 0.5 == make(3.5, 4)

    def test_sub_with_reals_on_both_sides(self, z):
        assert z - 1 == make(2, 4)
        assert 1 - z == make(-2, -4)

    def test_mul_and_div(self, z):
        assert 2 * z == make(6, 8)
        assert z * 2 == make(6, 8)
        assert z / 2 == make(1.5, 2)
        assert 25 / z == make(3, -4)

    def test_neg(self, z):
        assert -z == make(-3, -4)

    def test_pow(self, z):
        assert z ** 2 == make(-7, 24)
        assert z ** make(0, 0) == ONE

    def test_rpow(self):
        assert 2 ** make(3, 0) == make(8, 0)

    def test_i_squared(self):
        assert I * I == make(-1, 0)
        assert I ** 2 == make(-1, 0)

    def test_unsupported_operand_raises_type_error(self, z):
        with pytest.raises(TypeError):
            z + "1"
        with pytest.raises(TypeError):
            "1" * z
        with pytest.raises(TypeError):
            z / None

    def test_builtin_complex_not_an_operand(self, z):
        with pytest.raises(TypeError):
            z + 1j


class TestEquality:
    """== толерантно и только между Complex."""

    def test_tolerant(self, z):
        assert z == make(3 + 1e-13, 4 - 1e-13)
        assert not z == make(3.001, 4)
        assert z != make(3.001, 4)

    def test_real_operand_not_coerced(self):
        assert not make(3, 0) == 3
        assert make(3, 0) != 3
        assert eq(make(3, 0), 3)


# =============================================================================
# TESTS: conversions and queries
# =============================================================================


class TestConversions:
    """complex(), str(), repr() и методы-запросы."""

    def test_builtin_complex(self, z):
        assert complex(z) == 3 + 4j

    def test_str(self, z):
        assert str(z) == "3 + 4i"

    def test_repr(self, z):
        assert repr(z) == "Complex(real=3.0, imag=4.0)"

    def test_norm_and_abs(self, z):
        assert z.norm() == 5.0
        assert abs(z) == 5.0

    def test_arg(self, z):
        assert z.arg() == pytest.approx(math.atan2(4, 3))

    def test_conj(self, z):
        assert z.conj() == make(3, -4)

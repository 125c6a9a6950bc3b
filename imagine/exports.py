"""
Exports — реестр экспортируемых операций и выборочный импорт

EXPORTS отображает экспортное имя на объект. Имена, которые затенили бы
встроенные функции Python или функции math (abs, round, exp, sin, ...),
получают префикс "c". Внутренние помощники (cis) не экспортируются.

    import_all(globals())
    partial_import(["cconj", {"i": "I"}], globals())

Целевое пространство имён — dict (например, globals()) или любой объект,
принимающий атрибуты (модуль, SimpleNamespace).
"""

import logging
import sys
from collections.abc import Mapping, MutableMapping
from types import MappingProxyType, ModuleType
from typing import Any, Dict, Iterable, List, Optional, Union

from jsonschema import ValidationError

from imagine.core.contracts import validate_import_request
from imagine.core.domain.complex_number import (
    ONE,
    ZERO,
    I,
    as_complex,
    clone,
    complex_of,
    is_complex,
    make,
)
from imagine.core.domain.errors import InvalidArgument, type_name
from imagine.core.formatting import format_complex
from imagine.core.math import arithmetic, transcendental, trigonometric

logger = logging.getLogger(__name__)


EXPORTS: Mapping[str, Any] = MappingProxyType(
    {
        # Constants
        "i": I,
        "zero": ZERO,
        "one": ONE,
        # Construction
        "make": make,
        "as_complex": as_complex,
        "is_complex": is_complex,
        "clone": clone,
        "complex_of": complex_of,
        # Arithmetic
        "cconj": arithmetic.conj,
        "ceq": arithmetic.eq,
        "cpow": arithmetic.power,
        # Polar & transcendental
        "cabs": transcendental.abs_,
        "cnorm": transcendental.norm,
        "carg": transcendental.arg,
        "cpolar": transcendental.polar,
        "cexp": transcendental.exp,
        "clog": transcendental.log,
        "csqrt": transcendental.sqrt,
        "croots": transcendental.roots,
        "cround": transcendental.round_,
        # Trigonometric / hyperbolic
        "csin": trigonometric.sin,
        "ccos": trigonometric.cos,
        "ctan": trigonometric.tan,
        "casin": trigonometric.asin,
        "cacos": trigonometric.acos,
        "catan": trigonometric.atan,
        "csinh": trigonometric.sinh,
        "ccosh": trigonometric.cosh,
        "ctanh": trigonometric.tanh,
        "casinh": trigonometric.asinh,
        "cacosh": trigonometric.acosh,
        "catanh": trigonometric.atanh,
        # Formatting
        "cformat": format_complex,
    }
)


ImportSelection = Union[str, Mapping[str, str], Iterable[Union[str, Mapping[str, str]]]]


def _package() -> ModuleType:
    return sys.modules[__package__]


def _assign(into: Any, name: str, value: Any) -> None:
    if isinstance(into, MutableMapping):
        into[name] = value
    else:
        setattr(into, name, value)


def _normalize_selection(which: ImportSelection) -> Dict[str, Any]:
    """
    Приведение выбора к контракту import_request.

    Строка → одно имя, Mapping → переименования, иначе итерируемое из
    строк и Mapping вперемешку. Одно имя переименовывается не более одного раза.
    """
    names: List[Any] = []
    renames: Dict[Any, Any] = {}

    if isinstance(which, str):
        names.append(which)
    elif isinstance(which, Mapping):
        renames.update(which)
    else:
        try:
            items = list(which)
        except TypeError:
            raise InvalidArgument(
                "partial_import", f"cannot select exports from {type_name(which)!r}"
            )
        for item in items:
            if not isinstance(item, Mapping):
                names.append(item)
                continue
            for name, new_name in item.items():
                if name in renames:
                    raise InvalidArgument(
                        "partial_import", f"{name!r} is renamed more than once"
                    )
                renames[name] = new_name

    return {"names": names, "renames": renames}


def _validate_request(operation: str, request: Dict[str, Any]) -> None:
    try:
        validate_import_request(request)
    except ValidationError as e:
        raise InvalidArgument(operation, f"invalid import request: {e.message}")

    for name in [*request["names"], *request["renames"]]:
        if name not in EXPORTS:
            raise InvalidArgument(operation, f"{name!r} is not an exported name")


def import_all(into: Any, renames: Optional[Mapping[str, str]] = None) -> ModuleType:
    """
    Копирование всех экспортов в пространство имён.

    Args:
        into: dict (globals()) или объект с атрибутами
        renames: {экспортное имя: новое имя} (optional)

    Returns:
        Пакет imagine (для цепочек вызовов)

    Raises:
        InvalidArgument: Если renames нарушает контракт или ссылается на
            неизвестное имя
    """
    renames = dict(renames or {})
    _validate_request("import_all", {"names": [], "renames": renames})

    for name, value in EXPORTS.items():
        _assign(into, renames.get(name, name), value)

    logger.debug("imported %d exports (%d renamed)", len(EXPORTS), len(renames))
    return _package()


def partial_import(which: ImportSelection, into: Any) -> ModuleType:
    """
    Копирование выбранных экспортов в пространство имён.

    Args:
        which: Список имён, {экспортное имя: новое имя} или список,
            где имена и словари переименований перемешаны
        into: dict (globals()) или объект с атрибутами

    Returns:
        Пакет imagine (для цепочек вызовов)

    Raises:
        InvalidArgument: Если выбор нарушает контракт или содержит
            неэкспортируемое имя (например, cis), или одно имя
            переименовано дважды

    Examples:
        >>> ns = {}
        >>> _ = partial_import(["cconj", {"i": "I"}], ns)
        >>> sorted(ns)
        ['I', 'cconj']
    """
    request = _normalize_selection(which)
    _validate_request("partial_import", request)

    for name in request["names"]:
        _assign(into, name, EXPORTS[name])
    for name, new_name in request["renames"].items():
        _assign(into, new_name, EXPORTS[name])

    logger.debug(
        "imported %s",
        ", ".join([*request["names"], *(f"{k} as {v}" for k, v in request["renames"].items())]),
    )
    return _package()

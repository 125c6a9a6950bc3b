"""
Precision — epsilon-параметр для сравнений и форматирования

Единственный изменяемый параметр библиотеки: абсолютная толерантность
(epsilon), с которой сравниваются компоненты комплексных чисел и
притягиваются к 0/±1 при форматировании.

- Значение по умолчанию: 1e-12 (double precision)
- Один общий для процесса контекст (get_context / set_epsilon)
- Явный контекст можно передать в eq() и format_complex()
- local_precision() временно меняет epsilon и восстанавливает его

Epsilon читается в момент сравнения, а не кэшируется при импорте.

Блокировок нет: контекст задаётся один раз при старте и дальше только
читается. Конкурентная запись из нескольких потоков не поддерживается.
"""

import logging
from contextlib import contextmanager
from typing import Final, Iterator, Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


# Double floating point precision.
# Для вычислений в single precision разумно 1e-6.
DEFAULT_EPSILON: Final[float] = 1e-12


class PrecisionContext(BaseModel):
    """
    Контекст точности.

    Присваивание epsilon валидируется (validate_assignment): ноль,
    отрицательные значения, NaN и Inf отклоняются с ValidationError.
    """

    epsilon: float = Field(
        DEFAULT_EPSILON,
        gt=0,
        allow_inf_nan=False,
        description="Абсолютная толерантность сравнения компонент",
    )

    model_config = {"validate_assignment": True}


# Глобальный контекст процесса
_DEFAULT_CONTEXT = PrecisionContext()


def get_context() -> PrecisionContext:
    """Общий для процесса контекст точности."""
    return _DEFAULT_CONTEXT


def get_epsilon(context: Optional[PrecisionContext] = None) -> float:
    """
    Текущий epsilon.

    Args:
        context: Явный контекст (default: общий контекст процесса)
    """
    if context is None:
        context = _DEFAULT_CONTEXT
    return context.epsilon


def set_epsilon(value: float) -> float:
    """
    Установка epsilon в общем контексте процесса.

    Args:
        value: Новый epsilon (> 0, конечный)

    Returns:
        Предыдущее значение epsilon

    Raises:
        pydantic.ValidationError: Если value не положительное конечное число
    """
    previous = _DEFAULT_CONTEXT.epsilon
    _DEFAULT_CONTEXT.epsilon = value
    logger.debug("epsilon changed: %r -> %r", previous, _DEFAULT_CONTEXT.epsilon)
    return previous


@contextmanager
def local_precision(epsilon: float) -> Iterator[PrecisionContext]:
    """
    Временная замена epsilon в общем контексте.

    Предыдущее значение восстанавливается при выходе, в том числе по
    исключению.

    Examples:
        >>> with local_precision(1e-6):
        ...     get_epsilon()
        1e-06
    """
    previous = set_epsilon(epsilon)
    try:
        yield _DEFAULT_CONTEXT
    finally:
        set_epsilon(previous)

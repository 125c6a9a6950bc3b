"""
Исключения imagine.

Жёсткие ошибки зарезервированы для несовпадения типов и формы аргументов.
Особые точки (деление на ноль, log(0), sqrt(-1)) ошибками не являются:
они распространяются как inf/nan.
"""

from typing import Any


class InvalidArgument(TypeError, ValueError):
    """
    Недопустимый аргумент операции.

    Поднимается синхронно, если:
    - значение не является ни Complex, ни действительным числом
    - нарушено структурное ограничение (нецелый индекс корня,
      нецелое число знаков округления, недействительный угол)

    Наследует и TypeError, и ValueError: ошибка типа значения и ошибка
    формы аргумента попадают в одну категорию.

    Attributes:
        operation: Имя операции, получившей аргумент
    """

    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(f"{operation}: {message}")


def type_name(value: Any) -> str:
    """Имя типа значения для сообщений об ошибках."""
    return type(value).__name__

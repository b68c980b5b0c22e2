"""
Numeric Built-ins — таблицы бинарных операторов и унарных функций

Единственное место, где задаётся набор встроенных имён. Токенайзер
классифицирует идентификатор как Function только если он есть в
USER_FUNCTION_NAMES; расширение набора функций — это изменение этой таблицы.

Все built-ins тотальны на float (см. numerical_safeguards).
"""

import math
import operator
from types import MappingProxyType
from typing import Callable, Final, Mapping

from src.core.domain.token import NEGATION
from src.core.math.numerical_safeguards import (
    ieee_divide,
    ieee_log,
    ieee_pow,
    total_unary,
)

BinaryFunc = Callable[[float, float], float]
UnaryFunc = Callable[[float], float]


# =============================================================================
# БИНАРНЫЕ ОПЕРАТОРЫ
# =============================================================================

# Сложение, вычитание и умножение float в CPython не бросают:
# переполнение даёт inf, inf - inf даёт NaN.
BINARY_OPERATORS: Final[Mapping[str, BinaryFunc]] = MappingProxyType(
    {
        "+": operator.add,
        "-": operator.sub,
        "*": operator.mul,
        "/": ieee_divide,
        "^": ieee_pow,
    }
)


# =============================================================================
# УНАРНЫЕ ФУНКЦИИ
# =============================================================================

UNARY_FUNCTIONS: Final[Mapping[str, UnaryFunc]] = MappingProxyType(
    {
        "sin": total_unary(math.sin),
        "cos": total_unary(math.cos),
        "tan": total_unary(math.tan),
        "log": ieee_log,
        "sqrt": total_unary(math.sqrt),
        NEGATION: operator.neg,
    }
)

# Имена, которые пользователь может набрать. Синтетическое отрицание
# порождается только переписыванием унарного минуса.
USER_FUNCTION_NAMES: Final[frozenset[str]] = frozenset(
    name for name in UNARY_FUNCTIONS if name != NEGATION
)


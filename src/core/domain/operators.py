"""
OperatorSpec — таблица приоритетов и ассоциативности

Фиксированная read-only таблица, общая для всего процесса:

    +  -   precedence 1, left
    *  /   precedence 2, left
    ^      precedence 3, right

Отрицание (синтетическая функция neg) связывает слабее ^ и сильнее * /:
    -3^2  = -(3^2) = -9
    2^-3  = 2^(-3)
    -2*3  = (-2)*3
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping


class Associativity(str, Enum):
    """Ассоциативность оператора при равном приоритете"""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class OperatorSpec:
    """Приоритет и ассоциативность одного оператора."""

    precedence: int
    associativity: Associativity

    @property
    def is_left_associative(self) -> bool:
        return self.associativity == Associativity.LEFT


OPERATOR_TABLE: Final[Mapping[str, OperatorSpec]] = MappingProxyType(
    {
        "+": OperatorSpec(1, Associativity.LEFT),
        "-": OperatorSpec(1, Associativity.LEFT),
        "*": OperatorSpec(2, Associativity.LEFT),
        "/": OperatorSpec(2, Associativity.LEFT),
        "^": OperatorSpec(3, Associativity.RIGHT),
    }
)

NEGATION_SPEC: Final[OperatorSpec] = OperatorSpec(3, Associativity.RIGHT)


def operator_spec(symbol: str) -> OperatorSpec:
    """
    Спецификация оператора по символу.

    Raises:
        KeyError: если символ не является бинарным оператором
    """
    return OPERATOR_TABLE[symbol]

"""
Token — лексические единицы выражения

Замкнутый набор вариантов (sum type):
- Number(value)      — числовой литерал
- Variable(name)     — свободная переменная (в рендере связывается только x)
- Function(name)     — унарная функция (арность всегда 1)
- Operator(symbol)   — бинарный оператор: + - * / ^
- LeftParen / RightParen

Все токены immutable (frozen dataclass). Каждый проход пайплайна строит
новую последовательность, ничего не мутируя на месте.
"""

from dataclasses import dataclass
from typing import Final


# Имя синтетической унарной функции отрицания.
# Не входит в пользовательский набор имён, поэтому токенайзер его не порождает.
NEGATION: Final[str] = "neg"

OPERATOR_SYMBOLS: Final[str] = "+-*/^"


# =============================================================================
# ВАРИАНТЫ ТОКЕНА
# =============================================================================


@dataclass(frozen=True)
class Number:
    """Числовой литерал."""

    value: float

    def __str__(self) -> str:
        text = repr(self.value)
        return text[:-2] if text.endswith(".0") else text


@dataclass(frozen=True)
class Variable:
    """Свободная переменная."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Function:
    """Унарная функция (включая синтетическое отрицание)."""

    name: str

    @property
    def is_negation(self) -> bool:
        return self.name == NEGATION

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Operator:
    """Бинарный оператор."""

    symbol: str

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class LeftParen:
    def __str__(self) -> str:
        return "("


@dataclass(frozen=True)
class RightParen:
    def __str__(self) -> str:
        return ")"


Token = Number | Variable | Function | Operator | LeftParen | RightParen

# Готовые экземпляры для часто порождаемых токенов
LEFT_PAREN: Final[LeftParen] = LeftParen()
RIGHT_PAREN: Final[RightParen] = RightParen()
IMPLICIT_MULTIPLY: Final[Operator] = Operator("*")
NEGATE: Final[Function] = Function(NEGATION)


def format_tokens(tokens) -> str:
    """Текстовое представление последовательности токенов через пробел."""
    return " ".join(str(token) for token in tokens)

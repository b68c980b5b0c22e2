"""
Token Rewriter — два независимых прохода по токенам

1. insert_implicit_multiplication: вставка '*' между соседними токенами,
   позволяющая писать 2x, x sin(x), )(, 2(3)
2. rewrite_unary_minus: '-' в позиции операнда → синтетическая функция neg

Порядок обязателен: сначала неявное умножение, затем унарный минус,
затем shunting-yard.
"""

from typing import Iterable

from src.core.domain.token import (
    IMPLICIT_MULTIPLY,
    NEGATE,
    Function,
    LeftParen,
    Number,
    Operator,
    RightParen,
    Token,
    Variable,
)

# Пары (предыдущий, текущий), между которыми подразумевается умножение.
# Number+Number не вставляется: токенайзер не порождает соседние числа
# без разделителя.
_ENDS_OPERAND = (Number, Variable, RightParen)
_STARTS_OPERAND = (Variable, Function, LeftParen)


def _needs_multiplication(previous: Token, current: Token) -> bool:
    if isinstance(previous, _ENDS_OPERAND) and isinstance(current, _STARTS_OPERAND):
        return True
    return isinstance(previous, Variable) and isinstance(current, Number)


def insert_implicit_multiplication(tokens: Iterable[Token]) -> list[Token]:
    """
    Вставка неявного умножения.

    Тотальная функция: ошибок не бывает.

    Examples:
        2x      → 2 * x
        2(3+1)  → 2 * ( 3 + 1 )
        (x)(x)  → ( x ) * ( x )
        x2      → x * 2
    """
    result: list[Token] = []
    previous: Token | None = None

    for token in tokens:
        if previous is not None and _needs_multiplication(previous, token):
            result.append(IMPLICIT_MULTIPLY)
        result.append(token)
        previous = token

    return result


def rewrite_unary_minus(tokens: Iterable[Token]) -> list[Token]:
    """
    Переклассификация унарного минуса.

    '-' становится функцией neg, если он первый токен либо предыдущий
    *выходной* токен — Operator или '('. Предыдущий neg этому правилу не
    удовлетворяет: "--3" остаётся neg - 3 и отвергается при компиляции.

    Examples:
        3 - 2    → 3 - 2        (бинарный)
        -3       → neg 3
        (-3)     → ( neg 3 )
        2^-3     → 2 ^ neg 3
    """
    result: list[Token] = []

    for token in tokens:
        if isinstance(token, Operator) and token.symbol == "-":
            previous = result[-1] if result else None
            if previous is None or isinstance(previous, (Operator, LeftParen)):
                result.append(NEGATE)
                continue
        result.append(token)

    return result

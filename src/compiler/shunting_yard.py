"""
Shunting-Yard Converter — инфиксная запись → постфиксная (RPN)

Стек операторов + выходная последовательность:
- Number, Variable → сразу в выход
- Function → в стек
- Operator → снять со стека всё, что связывает сильнее, затем положить
- '(' → в стек
- ')' → снять до '(' включительно, затем снять пользовательскую функцию,
  если она на вершине (sin(x) применяется к группе в скобках)
- в конце — снять весь стек

Непарные скобки в обе стороны → UnmatchedParenError.
"""

from typing import Iterable

from src.compiler.errors import ExpressionSyntaxError, UnmatchedParenError
from src.core.domain.operators import NEGATION_SPEC, OperatorSpec, operator_spec
from src.core.domain.token import (
    Function,
    LeftParen,
    Number,
    Operator,
    RightParen,
    Token,
    Variable,
)


def _spec_for(symbol: str) -> OperatorSpec:
    try:
        return operator_spec(symbol)
    except KeyError:
        raise ExpressionSyntaxError(f"Unknown operator {symbol!r}") from None


def _should_pop(top: Token, incoming: OperatorSpec) -> bool:
    """Снимать ли вершину стека перед укладкой входящего оператора."""
    if isinstance(top, Function):
        if not top.is_negation:
            return True
        top_spec = NEGATION_SPEC
    elif isinstance(top, Operator):
        top_spec = _spec_for(top.symbol)
    else:
        # '(' — граница группы
        return False

    if top_spec.precedence > incoming.precedence:
        return True
    return top_spec.precedence == incoming.precedence and incoming.is_left_associative


def to_postfix(tokens: Iterable[Token]) -> list[Token]:
    """
    Преобразование инфиксной последовательности в постфиксную.

    Args:
        tokens: Токены после неявного умножения и переписывания унарного минуса

    Returns:
        Токены в постфиксном порядке (без скобок)

    Raises:
        UnmatchedParenError: ')' без парной '(' или '(' без парной ')'

    Examples:
        2 + 3 * 4   → 2 3 4 * +
        2 ^ 3 ^ 2   → 2 3 2 ^ ^
        neg 3 ^ 2   → 3 2 ^ neg
        sin ( x )   → x sin
    """
    output: list[Token] = []
    stack: list[Token] = []

    for token in tokens:
        if isinstance(token, (Number, Variable)):
            output.append(token)

        elif isinstance(token, Function):
            stack.append(token)

        elif isinstance(token, Operator):
            incoming = _spec_for(token.symbol)
            while stack and _should_pop(stack[-1], incoming):
                output.append(stack.pop())
            stack.append(token)

        elif isinstance(token, LeftParen):
            stack.append(token)

        elif isinstance(token, RightParen):
            found_left = False
            while stack:
                top = stack.pop()
                if isinstance(top, LeftParen):
                    found_left = True
                    break
                output.append(top)
            if not found_left:
                raise UnmatchedParenError(")")

            # Отрицание остаётся в стеке и подчиняется приоритету: -(2)^2 = -4
            if stack and isinstance(stack[-1], Function) and not stack[-1].is_negation:
                output.append(stack.pop())

        else:
            raise TypeError(f"Unknown token type: {type(token).__name__}")

    while stack:
        top = stack.pop()
        if isinstance(top, LeftParen):
            raise UnmatchedParenError("(")
        output.append(top)

    return output

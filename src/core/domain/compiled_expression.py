"""
CompiledExpression — скомпилированная программа в постфиксной записи (RPN)

Результат успешной компиляции. Immutable: новая компиляция целиком заменяет
программу, а не патчит её.

Инварианты:
- program не содержит скобок
- каждая Function имеет арность 1
- вычисление с привязкой всех свободных переменных даёт ровно одно значение
"""

from dataclasses import dataclass
from typing import Any, Dict, List

from src.core.domain.token import (
    Function,
    LeftParen,
    Number,
    Operator,
    RightParen,
    Token,
    Variable,
    format_tokens,
)


@dataclass(frozen=True)
class CompiledExpression:
    """Постфиксная программа вместе с исходным текстом выражения."""

    source: str
    program: tuple[Token, ...]

    def free_variables(self) -> frozenset[str]:
        """Имена всех переменных, на которые ссылается программа."""
        return frozenset(t.name for t in self.program if isinstance(t, Variable))

    def to_dict(self) -> Dict[str, Any]:
        """
        JSON-совместимое представление (контракт compiled_expression).

        Returns:
            {"source": ..., "program": [{"kind": ..., ...}, ...]}
        """
        return {
            "source": self.source,
            "program": [token_to_dict(token) for token in self.program],
        }

    def __len__(self) -> int:
        return len(self.program)

    def __str__(self) -> str:
        return format_tokens(self.program)


def token_to_dict(token: Token) -> Dict[str, Any]:
    """Сериализация одного токена."""
    if isinstance(token, Number):
        return {"kind": "number", "value": token.value}
    if isinstance(token, Variable):
        return {"kind": "variable", "name": token.name}
    if isinstance(token, Function):
        return {"kind": "function", "name": token.name}
    if isinstance(token, Operator):
        return {"kind": "operator", "symbol": token.symbol}
    if isinstance(token, LeftParen):
        return {"kind": "lparen"}
    if isinstance(token, RightParen):
        return {"kind": "rparen"}
    raise TypeError(f"Unknown token type: {type(token).__name__}")


def token_from_dict(data: Dict[str, Any]) -> Token:
    """Обратная операция к token_to_dict."""
    kind = data["kind"]
    if kind == "number":
        return Number(float(data["value"]))
    if kind == "variable":
        return Variable(data["name"])
    if kind == "function":
        return Function(data["name"])
    if kind == "operator":
        return Operator(data["symbol"])
    if kind == "lparen":
        return LeftParen()
    if kind == "rparen":
        return RightParen()
    raise ValueError(f"Unknown token kind: {kind!r}")


def tokens_from_dicts(items: List[Dict[str, Any]]) -> tuple[Token, ...]:
    return tuple(token_from_dict(item) for item in items)

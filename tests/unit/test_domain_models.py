"""
Тесты для доменных моделей

Покрывает:
- Immutability токенов и программы
- Равенство и строковое представление токенов
- Таблицу операторов
- Сериализацию токенов
"""

from dataclasses import FrozenInstanceError

import pytest

from src.core.domain import (
    NEGATE,
    NEGATION,
    NEGATION_SPEC,
    OPERATOR_TABLE,
    Associativity,
    CompiledExpression,
    Function,
    LeftParen,
    Number,
    Operator,
    OperatorSpec,
    RightParen,
    Variable,
    format_tokens,
    operator_spec,
)
from src.core.domain.compiled_expression import token_from_dict, token_to_dict


class TestTokens:
    """Токены"""

    def test_frozen(self) -> None:
        token = Number(1.0)
        with pytest.raises(FrozenInstanceError):
            token.value = 2.0  # type: ignore[misc]

    def test_equality_by_value(self) -> None:
        assert Variable("x") == Variable("x")
        assert Variable("x") != Function("x")
        assert LeftParen() == LeftParen()

    def test_hashable(self) -> None:
        assert len({Number(1.0), Number(1.0), Operator("+")}) == 2

    def test_negation_token(self) -> None:
        assert NEGATE == Function(NEGATION)
        assert NEGATE.is_negation
        assert not Function("sin").is_negation

    def test_string_forms(self) -> None:
        tokens = [Number(2.5), Variable("x"), Function("sin"), Operator("^"), LeftParen(), RightParen()]
        assert format_tokens(tokens) == "2.5 x sin ^ ( )"

    def test_integral_number_format(self) -> None:
        assert str(Number(3.0)) == "3"

    def test_number_format_not_rounded(self) -> None:
        assert str(Number(3.14159265)) == "3.14159265"
        assert str(Number(1234567.0)) == "1234567"

    @pytest.mark.parametrize(
        "token",
        [Number(1.5), Variable("t"), Function("cos"), Operator("/"), LeftParen(), RightParen()],
    )
    def test_dict_form_inverse(self, token) -> None:
        assert token_from_dict(token_to_dict(token)) == token

    def test_unknown_kind(self) -> None:
        with pytest.raises(ValueError, match="Unknown token kind"):
            token_from_dict({"kind": "comma"})


class TestOperatorTable:
    """Таблица приоритетов"""

    @pytest.mark.parametrize(
        "symbol,precedence,associativity",
        [
            ("+", 1, Associativity.LEFT),
            ("-", 1, Associativity.LEFT),
            ("*", 2, Associativity.LEFT),
            ("/", 2, Associativity.LEFT),
            ("^", 3, Associativity.RIGHT),
        ],
    )
    def test_entries(self, symbol: str, precedence: int, associativity: Associativity) -> None:
        assert operator_spec(symbol) == OperatorSpec(precedence, associativity)

    def test_read_only(self) -> None:
        with pytest.raises(TypeError):
            OPERATOR_TABLE["%"] = OperatorSpec(2, Associativity.LEFT)  # type: ignore[index]

    def test_negation_between_multiplication_and_power(self) -> None:
        assert NEGATION_SPEC.precedence > operator_spec("*").precedence
        assert NEGATION_SPEC.precedence == operator_spec("^").precedence
        assert not NEGATION_SPEC.is_left_associative

    def test_unknown_symbol(self) -> None:
        with pytest.raises(KeyError):
            operator_spec("%")


class TestCompiledExpression:
    """Программа"""

    def test_frozen(self) -> None:
        compiled = CompiledExpression(source="x", program=(Variable("x"),))
        with pytest.raises(FrozenInstanceError):
            compiled.source = "y"  # type: ignore[misc]

    def test_free_variables(self) -> None:
        compiled = CompiledExpression(
            source="x*y+x",
            program=(Variable("x"), Variable("y"), Operator("*"), Variable("x"), Operator("+")),
        )
        assert compiled.free_variables() == frozenset({"x", "y"})

    def test_len_and_str(self) -> None:
        compiled = CompiledExpression(source="-x", program=(Variable("x"), NEGATE))
        assert len(compiled) == 2
        assert str(compiled) == "x neg"

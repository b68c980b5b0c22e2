"""
Tests for the compile/evaluate boundary

Покрывает свойства внешнего интерфейса ядра:
- детерминированность
- приоритеты и ассоциативность
- неявное умножение и унарный минус
- области определения (inf/NaN вместо ошибок)
- структурные ошибки компиляции
- несвязанные переменные
"""

import math
import struct

import pytest

from src.compiler import (
    CompileError,
    ExpressionSyntaxError,
    LexError,
    MalformedProgramError,
    UnboundVariableError,
    UnmatchedParenError,
    compile_expression,
    evaluate,
    evaluate_at,
)
from src.core.domain import CompiledExpression, Number, Operator


def _value(source: str, x: float = 0.0) -> float:
    return evaluate_at(compile_expression(source), x)


# =============================================================================
# СВОЙСТВА ВЫЧИСЛЕНИЯ
# =============================================================================


class TestDeterminism:
    """Повторные вызовы дают побитово одинаковый результат"""

    @pytest.mark.parametrize(
        "source", ["sin(x)^2 + cos(x)^2", "log(x)/x", "2^-x", "-x", "x/-1", "sqrt(x)"]
    )
    def test_repeated_evaluation_bit_identical(self, source: str) -> None:
        compiled = compile_expression(source)
        for x in (-2.5, -0.0, 0.0, 0.1, 7.0):
            first = evaluate_at(compiled, x)
            second = evaluate_at(compiled, x)
            assert struct.pack("<d", first) == struct.pack("<d", second)

    def test_signed_zero_preserved(self) -> None:
        """-x в нуле даёт -0.0, а не 0.0"""
        result = evaluate_at(compile_expression("-x"), 0.0)

        assert struct.pack("<d", result) == struct.pack("<d", -0.0)
        assert struct.pack("<d", result) != struct.pack("<d", 0.0)

    def test_recompile_equal(self) -> None:
        assert compile_expression("2x+1") == compile_expression("2x+1")


class TestPrecedence:
    """Приоритеты"""

    @pytest.mark.parametrize("x", [0.0, 1.0, -3.5])
    def test_multiplication_before_addition(self, x: float) -> None:
        assert _value("2+3*4", x) == 14.0

    def test_power_right_associative(self) -> None:
        assert _value("2^3^2") == 512.0

    def test_subtraction_left_associative(self) -> None:
        assert _value("2-3-1") == -2.0

    def test_division_left_associative(self) -> None:
        assert _value("8/4/2") == 1.0


class TestImplicitMultiplication:
    """Неявное умножение"""

    def test_number_variable(self) -> None:
        assert _value("2x", 5.0) == 10.0

    @pytest.mark.parametrize("x", [0.0, 42.0])
    def test_number_group(self, x: float) -> None:
        assert _value("2(3+1)", x) == 8.0

    def test_variable_function(self) -> None:
        assert _value("x sin(x)", math.pi / 2) == pytest.approx(math.pi / 2)

    def test_group_group(self) -> None:
        assert _value("(x+1)(x-1)", 3.0) == 8.0

    def test_variable_number(self) -> None:
        assert _value("x2", 4.0) == 8.0


class TestUnaryMinus:
    """Унарный минус"""

    def test_negation_looser_than_power(self) -> None:
        assert _value("-3^2") == -9.0

    def test_negated_group_power(self) -> None:
        assert _value("(-3)^2") == 9.0

    def test_negative_exponent(self) -> None:
        assert _value("2^-3") == 0.125

    def test_negation_times(self) -> None:
        assert _value("2*-3") == -6.0

    def test_negative_variable(self) -> None:
        assert _value("-x", 4.0) == -4.0

    def test_binary_minus(self) -> None:
        assert _value("3 - 2") == 1.0


class TestDomain:
    """Сингулярности дают неконечные значения, а не ошибки"""

    def test_reciprocal_at_zero(self) -> None:
        assert _value("1/x", 0.0) == math.inf

    def test_negative_reciprocal_at_zero(self) -> None:
        assert _value("-1/x", 0.0) == -math.inf

    def test_log_negative(self) -> None:
        assert math.isnan(_value("log(x)", -1.0))

    def test_log_zero(self) -> None:
        assert _value("log(x)", 0.0) == -math.inf

    def test_sqrt_negative(self) -> None:
        assert math.isnan(_value("sqrt(x)", -4.0))

    def test_fractional_power_of_negative(self) -> None:
        assert math.isnan(_value("x^0.5", -4.0))

    def test_overflow(self) -> None:
        assert _value("10^x", 400.0) == math.inf


# =============================================================================
# ОШИБКИ КОМПИЛЯЦИИ
# =============================================================================


class TestCompileErrors:
    """Структурные и лексические ошибки"""

    def test_trailing_operator(self) -> None:
        with pytest.raises(ExpressionSyntaxError, match="missing an operand"):
            compile_expression("2+")

    def test_lex_error(self) -> None:
        with pytest.raises(LexError) as exc_info:
            compile_expression("2$3")

        assert exc_info.value.position == 1
        assert exc_info.value.character == "$"

    @pytest.mark.parametrize("source", ["", "   ", "()"])
    def test_empty_expression(self, source: str) -> None:
        with pytest.raises(ExpressionSyntaxError, match="empty expression"):
            compile_expression(source)

    def test_adjacent_numbers(self) -> None:
        with pytest.raises(ExpressionSyntaxError, match="leaves 2 values"):
            compile_expression("2 3")

    def test_unmatched_right_paren(self) -> None:
        with pytest.raises(UnmatchedParenError):
            compile_expression("2)")

    def test_unmatched_left_paren(self) -> None:
        with pytest.raises(UnmatchedParenError):
            compile_expression("sin(x")

    def test_double_minus(self) -> None:
        with pytest.raises(ExpressionSyntaxError):
            compile_expression("--3")

    def test_lone_minus(self) -> None:
        with pytest.raises(ExpressionSyntaxError, match="neg"):
            compile_expression("-")

    @pytest.mark.parametrize("source", ["2+", "2$3", "2)", "*", "sin()"])
    def test_all_compile_errors_share_base(self, source: str) -> None:
        with pytest.raises(CompileError):
            compile_expression(source)


# =============================================================================
# ПЕРЕМЕННЫЕ
# =============================================================================


class TestVariables:
    """Связывание переменных"""

    def test_unbound_variable(self) -> None:
        compiled = compile_expression("x + y")

        with pytest.raises(UnboundVariableError) as exc_info:
            evaluate_at(compiled, 1.0)

        assert exc_info.value.name == "y"

    def test_other_variables_compile(self) -> None:
        compiled = compile_expression("a b c")
        assert compiled.free_variables() == frozenset({"a", "b", "c"})

    def test_generic_bindings(self) -> None:
        compiled = compile_expression("x y + 1")
        assert evaluate(compiled, {"x": 2.0, "y": 3.0}) == 7.0

    def test_hand_built_program_malformed(self) -> None:
        compiled = CompiledExpression(source="", program=(Number(1.0), Operator("+")))

        with pytest.raises(MalformedProgramError):
            evaluate_at(compiled, 0.0)


class TestCompiledExpression:
    """Скомпилированная программа"""

    def test_string_form(self) -> None:
        assert str(compile_expression("2+3*4")) == "2 3 4 * +"

    def test_string_form_keeps_precision(self) -> None:
        assert str(compile_expression("3.14159265x")) == "3.14159265 x *"

    def test_source_kept(self) -> None:
        assert compile_expression("2x").source == "2x"

    def test_program_is_tuple(self) -> None:
        assert isinstance(compile_expression("x").program, tuple)

    def test_to_dict(self) -> None:
        data = compile_expression("-x").to_dict()
        assert data == {
            "source": "-x",
            "program": [
                {"kind": "variable", "name": "x"},
                {"kind": "function", "name": "neg"},
            ],
        }

"""
Compiler Pipeline — внешняя граница ядра

    compile_expression(source) → CompiledExpression | CompileError
    evaluate_at(compiled, x)   → float | EvalError

Компиляция (раз на правку выражения):
    tokenize → insert_implicit_multiplication → rewrite_unary_minus
             → to_postfix → check_program

Вычисление (раз на сэмпл): evaluate_program с единственной привязкой x.
Прочие переменные компилируются без ошибок и дают UnboundVariableError
только при вычислении.
"""

from typing import Final, Mapping

from src.compiler.errors import ExpressionSyntaxError
from src.compiler.evaluator import check_program, evaluate_program
from src.compiler.rewriter import insert_implicit_multiplication, rewrite_unary_minus
from src.compiler.shunting_yard import to_postfix
from src.compiler.tokenizer import tokenize
from src.core.domain.compiled_expression import CompiledExpression

PLOT_VARIABLE: Final[str] = "x"


def compile_expression(source: str) -> CompiledExpression:
    """
    Компиляция текста выражения в постфиксную программу.

    Чистая функция: без I/O и без глобального состояния. Программа либо
    собирается полностью, либо бросается исключение.

    Raises:
        LexError: нераспознанный символ или неразборное число
        ExpressionSyntaxError: непарные скобки, пропущенный операнд, пустое
            выражение, лишний операнд

    Examples:
        >>> str(compile_expression("2+3*4"))
        '2 3 4 * +'
        >>> str(compile_expression("2x"))
        '2 x *'
    """
    tokens = tokenize(source)
    tokens = insert_implicit_multiplication(tokens)
    tokens = rewrite_unary_minus(tokens)
    program = tuple(to_postfix(tokens))

    reason = check_program(program)
    if reason is not None:
        raise ExpressionSyntaxError(reason)

    return CompiledExpression(source=source, program=program)


def evaluate(compiled: CompiledExpression, bindings: Mapping[str, float]) -> float:
    """Вычисление скомпилированного выражения с произвольными привязками."""
    return evaluate_program(compiled.program, bindings)


def evaluate_at(compiled: CompiledExpression, x: float) -> float:
    """
    Вычисление в точке x.

    Raises:
        UnboundVariableError: выражение ссылается на переменную, отличную от x
        MalformedProgramError: программа собрана не компилятором и невалидна
    """
    return evaluate_program(compiled.program, {PLOT_VARIABLE: x})

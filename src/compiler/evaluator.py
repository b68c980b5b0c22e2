"""
RPN Evaluator — вычисление постфиксной программы

Один проход с явным стеком операндов:
- Number → push value
- Variable → push bindings[name]
- Operator → pop right, pop left, push op(left, right)
- Function → pop arg, push func(arg)

Горячий путь: вызывается по разу на каждый горизонтальный сэмпл кадра.
Программа и привязки только читаются, поэтому вызовы независимы и
безопасны для параллельного выполнения.
"""

from typing import Iterable, Mapping

from src.compiler.errors import MalformedProgramError, UnboundVariableError
from src.core.domain.token import Function, Number, Operator, Token, Variable
from src.core.math.numeric_builtins import BINARY_OPERATORS, UNARY_FUNCTIONS


def evaluate_program(program: Iterable[Token], bindings: Mapping[str, float]) -> float:
    """
    Вычисление постфиксной программы.

    Args:
        program: Токены в постфиксном порядке
        bindings: Значения свободных переменных

    Returns:
        Результат; inf и NaN — допустимые значения (разрыв графика)

    Raises:
        UnboundVariableError: переменной нет в bindings
        MalformedProgramError: underflow стека, в конце не ровно одно значение,
            пустая программа, скобка или неизвестное имя в программе
    """
    stack: list[float] = []
    push = stack.append
    pop = stack.pop

    for token in program:
        if isinstance(token, Number):
            push(token.value)

        elif isinstance(token, Variable):
            try:
                push(bindings[token.name])
            except KeyError:
                raise UnboundVariableError(token.name) from None

        elif isinstance(token, Operator):
            if len(stack) < 2:
                raise MalformedProgramError(f"operator {token.symbol!r} needs two operands")
            func = BINARY_OPERATORS.get(token.symbol)
            if func is None:
                raise MalformedProgramError(f"unknown operator {token.symbol!r}")
            right = pop()
            left = pop()
            push(func(left, right))

        elif isinstance(token, Function):
            if not stack:
                raise MalformedProgramError(f"function {token.name!r} needs an argument")
            func = UNARY_FUNCTIONS.get(token.name)
            if func is None:
                raise MalformedProgramError(f"unknown function {token.name!r}")
            push(func(pop()))

        else:
            raise MalformedProgramError(f"unexpected token {token} in postfix program")

    if len(stack) != 1:
        raise MalformedProgramError(f"program leaves {len(stack)} values on the stack")

    return stack[0]


def check_program(program: Iterable[Token]) -> str | None:
    """
    Статическая проверка структуры программы без вычисления.

    Симулирует глубину стека операндов. Используется компилятором и
    загрузчиком контракта, чтобы невалидная программа не попала к рендеру.

    Returns:
        None если программа даёт ровно одно значение, иначе причина отказа
    """
    depth = 0
    count = 0

    for token in program:
        count += 1
        if isinstance(token, (Number, Variable)):
            depth += 1
        elif isinstance(token, Operator):
            if token.symbol not in BINARY_OPERATORS:
                return f"unknown operator {token.symbol!r}"
            if depth < 2:
                return f"operator {token.symbol!r} is missing an operand"
            depth -= 1
        elif isinstance(token, Function):
            if token.name not in UNARY_FUNCTIONS:
                return f"unknown function {token.name!r}"
            if depth < 1:
                return f"function {token.name!r} is missing an argument"
        else:
            return f"unexpected token {token} in postfix program"

    if count == 0:
        return "empty expression"
    if depth != 1:
        return f"expression leaves {depth} values (missing operator?)"
    return None

"""
Ошибки компиляции и вычисления

Два независимых домена отказов:
- compile-time: LexError, ExpressionSyntaxError (ожидаемы при наборе текста,
  восстанавливаются повторной компиляцией на следующей правке)
- evaluate-time: UnboundVariableError, MalformedProgramError

Неконечные числовые результаты (inf, NaN) ошибками не являются.
"""


# =============================================================================
# COMPILE-TIME
# =============================================================================


class CompileError(Exception):
    """Базовый класс ошибок компиляции выражения."""

    pass


class LexError(CompileError):
    """
    Символ, не подходящий ни под одно правило токенайзера.

    Attributes:
        position: 0-based смещение в исходной строке
        character: нераспознанный символ (для неразборного числа — первый
            символ числовой последовательности)
    """

    def __init__(self, position: int, character: str, detail: str = ""):
        self.position = position
        self.character = character
        self.detail = detail
        message = f"Unexpected character {character!r} at position {position}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class ExpressionSyntaxError(CompileError):
    """Структурная ошибка выражения (скобки, пропущенные операнды)."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class UnmatchedParenError(ExpressionSyntaxError):
    """Непарная скобка: ')' без '(' или '(' без ')'."""

    def __init__(self, paren: str):
        self.paren = paren
        super().__init__(f"Unmatched {paren!r}")


# =============================================================================
# EVALUATE-TIME
# =============================================================================


class EvalError(Exception):
    """Базовый класс ошибок вычисления программы."""

    pass


class UnboundVariableError(EvalError):
    """Переменная программы отсутствует в привязках."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unbound variable: {name!r}")


class MalformedProgramError(EvalError):
    """
    Программа не даёт ровно одно значение (underflow стека, лишние операнды,
    пустая программа, неизвестный оператор).

    Для программы, полученной из compile_expression, недостижима:
    вызывающему коду следует логировать её как нарушение инварианта.
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Malformed program: {reason}")

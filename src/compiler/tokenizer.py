"""
Tokenizer — строка → последовательность токенов

Правила (проверяются в фиксированном порядке в каждой позиции):
1. ASCII пробел пропускается
2. цифра или '.' → максимальная серия цифр и точек → Number
   (несколько точек принимаются сканером; отказ float() → LexError)
3. ASCII буква → максимальная серия букв → Function, если имя есть в
   USER_FUNCTION_NAMES (с учётом регистра), иначе Variable
4. + - * / ^ → Operator
5. ( ) → скобки
6. иначе LexError

Ограничение: многобуквенные переменные не разбиваются ("xy" — одна
переменная xy, а не x*y).
"""

from typing import Final

from src.compiler.errors import LexError
from src.core.domain.token import (
    LEFT_PAREN,
    OPERATOR_SYMBOLS,
    RIGHT_PAREN,
    Function,
    Number,
    Operator,
    Token,
    Variable,
)
from src.core.math.numeric_builtins import USER_FUNCTION_NAMES

_DIGITS: Final[str] = "0123456789"
_NUMBER_CHARS: Final[str] = _DIGITS + "."


def _is_ascii_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def tokenize(source: str) -> list[Token]:
    """
    Разбор строки выражения на токены.

    Args:
        source: Текст выражения, набранный пользователем

    Returns:
        Список токенов в порядке появления

    Raises:
        LexError: на нераспознанном символе или неразборном числе

    Examples:
        >>> [str(t) for t in tokenize("2x + sin(x)")]
        ['2', 'x', '+', 'sin', '(', 'x', ')']
    """
    tokens: list[Token] = []
    pos = 0
    length = len(source)

    while pos < length:
        ch = source[pos]

        if ch == " ":
            pos += 1
            continue

        if ch in _NUMBER_CHARS:
            start = pos
            while pos < length and source[pos] in _NUMBER_CHARS:
                pos += 1
            lexeme = source[start:pos]
            try:
                value = float(lexeme)
            except ValueError:
                raise LexError(start, ch, f"invalid number {lexeme!r}") from None
            tokens.append(Number(value))
            continue

        if _is_ascii_letter(ch):
            start = pos
            while pos < length and _is_ascii_letter(source[pos]):
                pos += 1
            name = source[start:pos]
            if name in USER_FUNCTION_NAMES:
                tokens.append(Function(name))
            else:
                tokens.append(Variable(name))
            continue

        if ch in OPERATOR_SYMBOLS:
            tokens.append(Operator(ch))
        elif ch == "(":
            tokens.append(LEFT_PAREN)
        elif ch == ")":
            tokens.append(RIGHT_PAREN)
        else:
            raise LexError(pos, ch)
        pos += 1

    return tokens

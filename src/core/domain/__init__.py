"""
Domain models and value objects.

Contains tokens, the operator precedence table, and the compiled postfix program.
"""

from src.core.domain.compiled_expression import CompiledExpression
from src.core.domain.operators import (
    NEGATION_SPEC,
    OPERATOR_TABLE,
    Associativity,
    OperatorSpec,
    operator_spec,
)
from src.core.domain.token import (
    IMPLICIT_MULTIPLY,
    LEFT_PAREN,
    NEGATE,
    NEGATION,
    RIGHT_PAREN,
    Function,
    LeftParen,
    Number,
    Operator,
    RightParen,
    Token,
    Variable,
    format_tokens,
)

__all__ = [
    # Tokens
    "Token",
    "Number",
    "Variable",
    "Function",
    "Operator",
    "LeftParen",
    "RightParen",
    "NEGATION",
    "NEGATE",
    "IMPLICIT_MULTIPLY",
    "LEFT_PAREN",
    "RIGHT_PAREN",
    "format_tokens",
    # Operator table
    "Associativity",
    "OperatorSpec",
    "OPERATOR_TABLE",
    "NEGATION_SPEC",
    "operator_spec",
    # Compiled program
    "CompiledExpression",
]

"""Expression compiler — строка выражения → постфиксная программа → float.

tokenize → insert_implicit_multiplication → rewrite_unary_minus → to_postfix
→ evaluate_program
"""

from .errors import (
    CompileError,
    EvalError,
    ExpressionSyntaxError,
    LexError,
    MalformedProgramError,
    UnboundVariableError,
    UnmatchedParenError,
)
from .evaluator import check_program, evaluate_program
from .pipeline import PLOT_VARIABLE, compile_expression, evaluate, evaluate_at
from .rewriter import insert_implicit_multiplication, rewrite_unary_minus
from .session import CompileOutcome, ExpressionSession, RetentionPolicy, SessionConfig
from .shunting_yard import to_postfix
from .tokenizer import tokenize

__all__ = [
    # Pipeline
    "compile_expression",
    "evaluate",
    "evaluate_at",
    "PLOT_VARIABLE",
    # Stages
    "tokenize",
    "insert_implicit_multiplication",
    "rewrite_unary_minus",
    "to_postfix",
    "evaluate_program",
    "check_program",
    # Session
    "ExpressionSession",
    "SessionConfig",
    "RetentionPolicy",
    "CompileOutcome",
    # Errors
    "CompileError",
    "LexError",
    "ExpressionSyntaxError",
    "UnmatchedParenError",
    "EvalError",
    "UnboundVariableError",
    "MalformedProgramError",
]

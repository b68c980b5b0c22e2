"""
Core math modules

Численные примитивы, определённые на всех float, и таблицы встроенных функций.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    INF,
    NAN,
    ieee_divide,
    ieee_log,
    ieee_pow,
    is_valid_float,
    total_unary,
)

# Numeric Built-ins
from src.core.math.numeric_builtins import (
    BINARY_OPERATORS,
    UNARY_FUNCTIONS,
    USER_FUNCTION_NAMES,
)

__all__ = [
    # Numerical Safeguards — Constants
    "INF",
    "NAN",
    # Numerical Safeguards — Functions
    "ieee_divide",
    "ieee_log",
    "ieee_pow",
    "is_valid_float",
    "total_unary",
    # Numeric Built-ins — Tables
    "BINARY_OPERATORS",
    "UNARY_FUNCTIONS",
    "USER_FUNCTION_NAMES",
]

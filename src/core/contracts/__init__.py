"""
Contract Validation Module

Валидация JSON-представления скомпилированных программ.
"""

from .validators import (
    CompiledExpressionValidator,
    ContractValidator,
    SchemaLoader,
    load_compiled_expression,
    validate_compiled_expression,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CompiledExpressionValidator",
    # Functions
    "validate_compiled_expression",
    "load_compiled_expression",
]

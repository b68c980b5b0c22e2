"""
JSON Schema Contract Validators

Валидация экспортированной постфиксной программы (CompiledExpression.to_dict)
перед тем, как она попадёт к рендеру из внешнего источника (файл, сеть).
Использует библиотеку jsonschema.

Схемы (каталог schema/ рядом с модулем):
- compiled_expression.json
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from src.compiler.errors import MalformedProgramError
from src.compiler.evaluator import check_program
from src.core.domain.compiled_expression import CompiledExpression, tokens_from_dicts


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в пакете: src/core/contracts/schema/.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'compiled_expression')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Базовый класс для валидаторов контрактов."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        return self.validator.iter_errors(data)


class CompiledExpressionValidator(ContractValidator):
    def __init__(self):
        super().__init__("compiled_expression")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_compiled_expression(data: Dict[str, Any]) -> None:
    """
    Валидация экспортированной программы по схеме.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CompiledExpressionValidator().validate(data)


def load_compiled_expression(data: Dict[str, Any]) -> CompiledExpression:
    """
    Загрузка программы из JSON-совместимого dict.

    Схема проверяет форму токенов, затем check_program — что программа
    даёт ровно одно значение.

    Raises:
        ValidationError: Если данные не соответствуют схеме
        MalformedProgramError: Если программа структурно невалидна
    """
    validate_compiled_expression(data)

    program = tokens_from_dicts(data["program"])
    reason = check_program(program)
    if reason is not None:
        raise MalformedProgramError(reason)

    return CompiledExpression(source=data["source"], program=program)

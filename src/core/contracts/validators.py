"""
JSON Schema Contract Validators

Валидация serialized layout BigNum согласно формальному JSON Schema
контракту. Использует библиотеку jsonschema (Draft 2020-12).

Схемы (src/core/contracts/schema/):
- bignum_layout.json
"""

import json
from pathlib import Path
from typing import Any, Dict, List

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат рядом с модулем в schema/, поэтому доступны и после
    установки пакета.
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
            schema_name: Имя схемы без расширения (например, 'bignum_layout')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема сама по себе невалидна
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидация данных против одной JSON Schema."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def get_errors(self, data: Dict[str, Any]) -> List[str]:
        """
        Все ошибки валидации в читаемом виде.

        Returns:
            Список сообщений "path: message", пустой если данные валидны
        """
        messages = []
        for error in sorted(self.validator.iter_errors(data), key=lambda e: list(e.path)):
            path = "/".join(str(p) for p in error.path) or "<root>"
            messages.append(f"{path}: {error.message}")
        return messages


class BigNumLayoutValidator(ContractValidator):
    """Валидатор serialized layout BigNum."""

    def __init__(self):
        super().__init__("bignum_layout")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_bignum_layout(data: Dict[str, Any]) -> None:
    """
    Валидация serialized layout.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    BigNumLayoutValidator().validate(data)

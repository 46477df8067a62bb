"""
Scalar Contracts — JSON Schema граница формата обмена

Формат обмена — одиночный JSON-скаляр без обёртки-объекта. Каждый
скалярный тип описан схемой Draft 2020-12 в nonzero/contracts/schema/:
- nz_int.json:   целое i64, не 0
- nz_float.json: число, не ±0, не NaN
- nz_sign.json:  целое из {-1, 1}

Стандартный type checker JSON Schema считает 5.0 целым, а bool в Python
является подклассом int. Оба расходятся со strict-моделями pydantic,
поэтому контракты проверяются StrictScalarValidator:
- "integer": только int (не bool, не float с нулевой дробной частью)
- "number":  int или float (не bool, не NaN)

ScalarContract.decode() — единственный путь JSON-текст → скаляр Python;
NzInt.from_json, NzFloat.from_json и NzSign.from_json проходят через него.
"""

import json
import logging
import math
from pathlib import Path
from typing import Any, Dict, List, Union

import jsonschema
from jsonschema import Draft202012Validator, validators
from jsonschema.exceptions import best_match

logger = logging.getLogger(__name__)

SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# STRICT TYPE CHECKER
# =============================================================================


def _is_strict_integer(checker: Any, instance: Any) -> bool:
    return isinstance(instance, int) and not isinstance(instance, bool)


def _is_strict_number(checker: Any, instance: Any) -> bool:
    if isinstance(instance, bool) or not isinstance(instance, (int, float)):
        return False
    return not (isinstance(instance, float) and math.isnan(instance))


StrictScalarValidator = validators.extend(
    Draft202012Validator,
    type_checker=Draft202012Validator.TYPE_CHECKER.redefine_many(
        {"integer": _is_strict_integer, "number": _is_strict_number}
    ),
)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузка и meta-валидация схем с кэшированием.

    Args:
        schema_dir: Каталог схем (по умолчанию схемы пакета)

    Raises:
        RuntimeError: Если каталог не существует
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени без расширения ('nz_int').

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            StrictScalarValidator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


# =============================================================================
# SCALAR CONTRACT
# =============================================================================


class ScalarContract:
    """Контракт одного скалярного типа"""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or SchemaLoader()).load_schema(schema_name)
        self._validator = StrictScalarValidator(self.schema)

    def check(self, data: Any) -> None:
        """
        Проверка уже декодированного скаляра.

        Raises:
            jsonschema.ValidationError: Если скаляр нарушает контракт
        """
        error = best_match(self._validator.iter_errors(data))
        if error is not None:
            logger.debug("%s contract rejected %r: %s", self.schema_name, data, error.message)
            raise error

    def is_valid(self, data: Any) -> bool:
        return self._validator.is_valid(data)

    def error_messages(self, data: Any) -> List[str]:
        """Все нарушения контракта, по одному сообщению на нарушение."""
        return sorted(e.message for e in self._validator.iter_errors(data))

    def decode(self, text: Union[str, bytes]) -> Any:
        """
        JSON-текст → проверенный скаляр Python.

        Поддерживаются токены Infinity / -Infinity (так сериализуется NzFloat).

        Raises:
            json.JSONDecodeError: Если текст не является JSON
            jsonschema.ValidationError: Если скаляр нарушает контракт
        """
        data = json.loads(text)
        self.check(data)
        return data


_CONTRACTS: Dict[str, ScalarContract] = {}


def contract_for(schema_name: str) -> ScalarContract:
    """Кэшированный контракт для схемы пакета."""
    contract = _CONTRACTS.get(schema_name)
    if contract is None:
        contract = ScalarContract(schema_name)
        _CONTRACTS[schema_name] = contract
    return contract

"""
JSON Schema Contract Validators

Выходной контракт igbo_year (результат IgboYear.to_contract()) описан
JSON Schema Draft 2020-12 в schema/igbo_year.json и поставляется как
package data.

- SchemaLoader: загрузка + meta-validation + кэш
- ContractValidator / IgboYearValidator: проверка документа
- validate_igbo_year: проверка с исключением
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, Iterator, List, Optional

from jsonschema import Draft202012Validator, SchemaError, ValidationError


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"
IGBO_YEAR_SCHEMA: Final[str] = "igbo_year"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Загрузчик JSON Schema файлов из каталога (default: schema/ рядом с модулем)"""

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без расширения.

        Raises:
            FileNotFoundError: Файла нет
            ValueError: Файл не является валидной JSON Schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


@lru_cache(maxsize=None)
def default_loader() -> SchemaLoader:
    """Общий загрузчик для схем пакета (создаётся при первом обращении)"""
    return SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


def format_error(error: ValidationError) -> str:
    """'months/0/days/3/weekday: ...' — путь до поля и сообщение jsonschema"""
    path = "/".join(str(part) for part in error.absolute_path)
    return f"{path or '<root>'}: {error.message}"


class ContractValidator:
    """Проверка документов против одной схемы"""

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or default_loader()).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первое найденное нарушение
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)

    def describe_errors(self, data: Dict[str, Any]) -> List[str]:
        """Все нарушения в виде строк, упорядоченных по пути в документе"""
        errors = sorted(self.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])
        return [format_error(error) for error in errors]


class IgboYearValidator(ContractValidator):
    """Валидатор контракта igbo_year"""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__(IGBO_YEAR_SCHEMA, loader)


def validate_igbo_year(data: Dict[str, Any]) -> None:
    """
    Проверка документа igbo_year.

    Raises:
        ValidationError: Документ не соответствует схеме
    """
    IgboYearValidator().validate(data)

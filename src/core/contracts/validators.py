"""
JSON Schema Contract Validators

Модуль для валидации конфигураций геометрии согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы:
- geometry.json (общий конверт: schema_version + type)
- cartesian_geometry.json (декартова область)

Допустимые значения type в конверте не зашиты в geometry.json:
их передаёт слой конфигурации из реестра вариантов геометрии.
"""

import copy
import json
from pathlib import Path
from typing import Any, ClassVar, Dict, Iterable, List, Optional

import jsonschema
from jsonschema import Draft202012Validator


# Каталог схем по умолчанию: <корень проекта>/contracts/schema
DEFAULT_SCHEMA_DIR = Path(__file__).resolve().parents[3] / "contracts" / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов с кэшем.

    Каждая схема при первой загрузке проходит meta-validation
    (Draft 2020-12), дальше возвращается из кэша.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self.schema_dir = Path(schema_dir) if schema_dir is not None else DEFAULT_SCHEMA_DIR
        if not self.schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self.schema_dir}")

        self._cache: Dict[str, Dict[str, Any]] = {}

    def schema_names(self) -> List[str]:
        """Имена всех схем каталога (без расширения), по алфавиту"""
        return sorted(path.stem for path in self.schema_dir.glob("*.json"))

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени.

        Args:
            schema_name: Имя схемы без расширения (например, 'cartesian_geometry')

        Returns:
            Схема как dict (общий объект кэша, не изменять)

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        cached = self._cache.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self.schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

        self._cache[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый валидатор контракта.

    Подкласс задаёт SCHEMA_NAME и при необходимости уточняет
    загруженную схему в specialize_schema (на копии, кэш не меняется).
    """

    SCHEMA_NAME: ClassVar[str]

    def __init__(self, loader: Optional[SchemaLoader] = None):
        base_schema = (loader or _SCHEMA_LOADER).load_schema(self.SCHEMA_NAME)
        self.schema = self.specialize_schema(copy.deepcopy(base_schema))
        Draft202012Validator.check_schema(self.schema)
        self.validator = Draft202012Validator(self.schema)

    def specialize_schema(self, schema: Dict[str, Any]) -> Dict[str, Any]:
        return schema

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Первое найденное нарушение
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем нарушениям (ValidationError)"""
        return self.validator.iter_errors(data)


class GeometryValidator(ContractValidator):
    """
    Валидатор конверта geometry.

    Args:
        variant_types: Зарегистрированные значения поля type
    """

    SCHEMA_NAME = "geometry"

    def __init__(self, variant_types: Iterable[str], loader: Optional[SchemaLoader] = None):
        self.variant_types = sorted(set(variant_types))
        if not self.variant_types:
            raise ValueError("At least one geometry variant type is required")
        super().__init__(loader)

    def specialize_schema(self, schema: Dict[str, Any]) -> Dict[str, Any]:
        schema["properties"]["type"]["enum"] = list(self.variant_types)
        return schema


class CartesianGeometryValidator(ContractValidator):
    """Валидатор для cartesian_geometry контракта"""

    SCHEMA_NAME = "cartesian_geometry"


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_geometry(data: Dict[str, Any], variant_types: Iterable[str]) -> None:
    """
    Валидация конверта конфигурации геометрии.

    Args:
        data: Документ конфигурации
        variant_types: Допустимые значения type

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    GeometryValidator(variant_types).validate(data)


def validate_cartesian_geometry(data: Dict[str, Any]) -> None:
    """
    Валидация конфигурации декартовой геометрии.

    Проверяет только форму документа; порядок экстентов (min < max)
    проверяется моделью CartesianGeometry.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CartesianGeometryValidator().validate(data)

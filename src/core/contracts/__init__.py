"""
Contract Validation Module

Модуль для валидации JSON контрактов конфигурации геометрии.
"""

from .validators import (
    DEFAULT_SCHEMA_DIR,
    CartesianGeometryValidator,
    ContractValidator,
    GeometryValidator,
    SchemaLoader,
    validate_cartesian_geometry,
    validate_geometry,
)

__all__ = [
    # Constants
    "DEFAULT_SCHEMA_DIR",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "GeometryValidator",
    "CartesianGeometryValidator",
    # Functions
    "validate_geometry",
    "validate_cartesian_geometry",
]

"""
Geometry Config — загрузка геометрии из JSON конфигурации

Конфигурация описывает вариант геометрии полем type и его параметры:

    {"schema_version": "1", "type": "cartesian",
     "x_min": 0.0, "x_max": 1.0, "y_min": -1.0, "y_max": 1.0, "z_min": 4.0, "z_max": 5.5}

Порядок обработки:
1. Валидация конверта (schema_version, type) — geometry.json;
   допустимые type берутся из реестра вариантов
2. Валидация документа схемой варианта — например, cartesian_geometry.json
3. Создание модели; инварианты домена проверяет сама модель
"""

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Final, FrozenSet, Tuple, Type, Union

from src.core.contracts import CartesianGeometryValidator, ContractValidator, validate_geometry
from src.core.domain.geometry import CartesianGeometry, Geometry, InvalidDomainExtents

logger = logging.getLogger(__name__)


# Версия формата конфигурации геометрии
GEOMETRY_SCHEMA_VERSION: Final[str] = "1"

# Служебные поля конверта, не являющиеся параметрами модели
_ENVELOPE_FIELDS: Final = ("schema_version", "type")


# =============================================================================
# РЕЕСТР ВАРИАНТОВ
# =============================================================================

# type -> (фабрика валидатора контракта, класс модели)
_GEOMETRY_VARIANTS: Dict[str, Tuple[Callable[[], ContractValidator], Type[Geometry]]] = {
    CartesianGeometry.geometry_type: (CartesianGeometryValidator, CartesianGeometry),
}


def geometry_types() -> FrozenSet[str]:
    """Зарегистрированные значения поля type"""
    return frozenset(_GEOMETRY_VARIANTS)


# =============================================================================
# ЗАГРУЗКА / ВЫГРУЗКА
# =============================================================================


def geometry_from_config(data: Dict[str, Any]) -> Geometry:
    """
    Создание геометрии из словаря конфигурации.

    Args:
        data: Документ конфигурации (dict)

    Returns:
        Экземпляр варианта Geometry, выбранного по полю type

    Raises:
        jsonschema.ValidationError: Если документ не соответствует контракту
        InvalidDomainExtents: Если экстенты нарушают min < max
        pydantic.ValidationError: Если значения не являются конечными числами
    """
    validate_geometry(data, _GEOMETRY_VARIANTS)

    geometry_type = data["type"]
    validator_factory, model_cls = _GEOMETRY_VARIANTS[geometry_type]
    validator_factory().validate(data)

    params = {key: value for key, value in data.items() if key not in _ENVELOPE_FIELDS}
    try:
        geometry = model_cls(**params)
    except InvalidDomainExtents as e:
        logger.warning("Rejected %s geometry config: %s", geometry_type, e)
        raise

    logger.debug("Built %s geometry from config: %s", geometry_type, params)
    return geometry


def geometry_to_config(geometry: Geometry) -> Dict[str, Any]:
    """
    Выгрузка геометрии в документ конфигурации.

    Результат проходит валидацию контракта и обратно загружается
    geometry_from_config в равную геометрию.
    """
    config: Dict[str, Any] = {
        "schema_version": GEOMETRY_SCHEMA_VERSION,
        "type": geometry.geometry_type,
    }
    config.update(geometry.model_dump())
    return config


def load_geometry(path: Union[str, Path]) -> Geometry:
    """
    Загрузка геометрии из JSON файла.

    Args:
        path: Путь к JSON файлу конфигурации

    Returns:
        Экземпляр Geometry

    Raises:
        FileNotFoundError: Если файл не найден
        json.JSONDecodeError: Если файл не является валидным JSON
    """
    config_path = Path(path)
    logger.debug("Loading geometry config from %s", config_path)

    with open(config_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    return geometry_from_config(data)

"""
Geometry configuration: loading and dumping geometry documents.
"""

from src.core.config.geometry_config import (
    GEOMETRY_SCHEMA_VERSION,
    geometry_from_config,
    geometry_types,
    geometry_to_config,
    load_geometry,
)

__all__ = [
    "GEOMETRY_SCHEMA_VERSION",
    "geometry_from_config",
    "geometry_types",
    "geometry_to_config",
    "load_geometry",
]

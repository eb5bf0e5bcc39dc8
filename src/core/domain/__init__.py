"""
Domain models and value objects.

Contains the simulation domain geometry: Geometry, CartesianGeometry, Axis.
"""

from src.core.domain.geometry import (
    CARTESIAN_BOUNDARIES,
    Axis,
    Boundary,
    CartesianGeometry,
    Geometry,
    InvalidDomainExtents,
)

__all__ = [
    # Types
    "Axis",
    "Boundary",
    "CARTESIAN_BOUNDARIES",
    # Geometry models
    "Geometry",
    "CartesianGeometry",
    # Exceptions
    "InvalidDomainExtents",
]

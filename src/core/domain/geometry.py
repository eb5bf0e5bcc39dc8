"""
Geometry — Геометрия расчётной области

Неизменяемое описание пространственной области моделирования и её
именованных границ.

- Geometry: абстрактная модель, обязанная сообщать набор своих границ
- CartesianGeometry: прямоугольная (axis-aligned) 3-D область с шестью
  экстентами и производными длинами по осям

Все методы, кроме конструктора, являются чистыми геттерами.
Любая невалидная область отклоняется при создании (InvalidDomainExtents).
"""

from abc import abstractmethod
from enum import Enum
from typing import Any, ClassVar, Dict, FrozenSet, Final, Optional, Tuple

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ТИПЫ
# =============================================================================

# Имя границы области (например, "x_min")
Boundary = str


class Axis(str, Enum):
    """Оси декартовой системы координат"""

    X = "x"
    Y = "y"
    Z = "z"

    @property
    def min_boundary(self) -> Boundary:
        return f"{self.value}_min"

    @property
    def max_boundary(self) -> Boundary:
        return f"{self.value}_max"


# Фиксированный набор границ декартовой области
CARTESIAN_BOUNDARIES: Final[FrozenSet[Boundary]] = frozenset(
    name for axis in Axis for name in (axis.min_boundary, axis.max_boundary)
)


# =============================================================================
# ИСКЛЮЧЕНИЯ
# =============================================================================


class InvalidDomainExtents(Exception):
    """
    Невалидные экстенты области: минимум не строго меньше максимума.

    Возникает только при создании геометрии. Повтор с теми же
    аргументами бессмысленен: вызывающий код должен исправить экстенты.

    Attributes:
        invalid_axes: Оси, на которых нарушено условие min < max
    """

    def __init__(self, invalid_axes: Tuple[Axis, ...], details: str = ""):
        self.invalid_axes = invalid_axes
        axes = ", ".join(axis.value for axis in invalid_axes)
        message = f"Invalid domain extents on axes [{axes}]. Minimum must be less than maximum."
        if details:
            message = f"{message} ({details})"
        super().__init__(message)


# =============================================================================
# GEOMETRY (абстрактная модель)
# =============================================================================


class Geometry(BaseModel):
    """
    Абстрактная геометрия расчётной области.

    Единственный обязательный контракт — набор именованных границ.
    Конструктор и валидация определяются каждым конкретным вариантом.
    Предполагается, что геометрия неизменяема после создания (frozen=True).
    """

    # Тег варианта для слоя конфигурации
    geometry_type: ClassVar[str]

    model_config = {"frozen": True}

    def model_copy(self, *, update: Optional[Dict[str, Any]] = None, deep: bool = False) -> "Geometry":
        """
        Копия геометрии с изменёнными параметрами.

        В отличие от BaseModel.model_copy, копия проходит полную валидацию,
        поэтому невалидная геометрия не может быть получена и этим путём.

        Raises:
            InvalidDomainExtents: Если обновлённые экстенты нарушают min < max
        """
        return type(self).model_validate({**self.model_dump(), **(update or {})})

    @abstractmethod
    def boundaries(self) -> FrozenSet[Boundary]:
        """
        Набор имён границ геометрии.

        Returns:
            Неизменяемое множество имён границ
        """


# =============================================================================
# CARTESIAN GEOMETRY
# =============================================================================


class CartesianGeometry(Geometry):
    """
    Декартова геометрия: прямоугольная область, выровненная по осям x, y, z.

    Инварианты:
    1. x_min < x_max, y_min < y_max, z_min < z_max (строго, равенство невалидно)
    2. lx(), ly(), lz() строго положительны
    3. boundaries() всегда {x_min, x_max, y_min, y_max, z_min, z_max}

    Экстенты хранятся как есть, без нормализации и конверсии единиц.
    """

    geometry_type: ClassVar[str] = "cartesian"

    x_min: float = Field(..., description="Минимальная координата x")
    x_max: float = Field(..., description="Максимальная координата x")
    y_min: float = Field(..., description="Минимальная координата y")
    y_max: float = Field(..., description="Максимальная координата y")
    z_min: float = Field(..., description="Минимальная координата z")
    z_max: float = Field(..., description="Максимальная координата z")

    # strict: bool и строки не приводятся к float, int допускается
    model_config = {"frozen": True, "strict": True, "allow_inf_nan": False, "extra": "forbid"}

    @model_validator(mode="after")
    def validate_extents(self) -> "CartesianGeometry":
        """
        Проверка, что минимум строго меньше максимума по всем трём осям.

        Проверяются все оси; в исключении перечисляются все нарушения.

        Raises:
            InvalidDomainExtents: Если хотя бы на одной оси min >= max
        """
        invalid_axes = tuple(axis for axis in Axis if not self._lower(axis) < self._upper(axis))
        if invalid_axes:
            details = ", ".join(
                f"{axis.value}: [{self._lower(axis)}, {self._upper(axis)}]" for axis in invalid_axes
            )
            raise InvalidDomainExtents(invalid_axes, details)
        return self

    @classmethod
    def from_extents(
        cls,
        x_min: float,
        x_max: float,
        y_min: float,
        y_max: float,
        z_min: float,
        z_max: float,
    ) -> "CartesianGeometry":
        """
        Создание геометрии из экстентов в каноническом порядке.

        Args:
            x_min, x_max: Границы по x
            y_min, y_max: Границы по y
            z_min, z_max: Границы по z

        Returns:
            Валидная CartesianGeometry

        Raises:
            InvalidDomainExtents: Если на какой-либо оси min >= max
        """
        return cls(x_min=x_min, x_max=x_max, y_min=y_min, y_max=y_max, z_min=z_min, z_max=z_max)

    def _lower(self, axis: Axis) -> float:
        return getattr(self, axis.min_boundary)

    def _upper(self, axis: Axis) -> float:
        return getattr(self, axis.max_boundary)

    def boundaries(self) -> FrozenSet[Boundary]:
        return CARTESIAN_BOUNDARIES

    def extent(self, axis: Axis) -> Tuple[float, float]:
        """
        Экстенты области по оси.

        Args:
            axis: Ось (Axis.X / Axis.Y / Axis.Z)

        Returns:
            Пара (min, max)
        """
        return self._lower(axis), self._upper(axis)

    def length(self, axis: Axis) -> float:
        """Длина области по оси (max - min), всегда > 0"""
        return self._upper(axis) - self._lower(axis)

    def lx(self) -> float:
        """Длина области по x"""
        return self.length(Axis.X)

    def ly(self) -> float:
        """Длина области по y"""
        return self.length(Axis.Y)

    def lz(self) -> float:
        """Длина области по z"""
        return self.length(Axis.Z)

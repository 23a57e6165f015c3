"""
Interval — Направленный полуоткрытый интервал [start, end)

Immutable Pydantic модель, описывающая исходный (from) и целевой (to)
интервалы маппинга.

ИНВАРИАНТЫ:
1. start и end — вещественные числа (bool, complex и NaN отвергаются)
2. Порядок не требуется: start > end означает "развёрнутый" интервал,
   маппинг на него инвертирует направление изменения
3. Интервал start == end вырожден; как источник маппинга он недопустим
"""

from numbers import Number
from typing import Any, Union

from pydantic import BaseModel, Field, field_validator

from src.map_range.numeric import RangeMappingError


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DegenerateIntervalError(RangeMappingError, ZeroDivisionError):
    """
    Исходный интервал нулевой ширины (start == end).

    Маппинг из такого интервала требует деления на ноль и не определён.
    """

    def __init__(self, interval: "Interval"):
        self.interval = interval
        super().__init__(
            f"Source interval has zero width: [{interval.start!r}, {interval.end!r})"
        )


# =============================================================================
# INTERVAL MODEL
# =============================================================================


class Interval(BaseModel):
    """
    Направленный полуоткрытый интервал [start, end).

    Immutable модель (frozen=True). Допускает позиционное создание:
    Interval(0, 10) эквивалентно Interval(start=0, end=10).
    """

    start: Any = Field(..., description="Начало интервала (включительно)")
    end: Any = Field(..., description="Конец интервала (исключительно)")

    model_config = {"frozen": True}  # Immutable

    def __init__(self, start: Any, end: Any, **data: Any) -> None:
        super().__init__(start=start, end=end, **data)

    @field_validator("start", "end")
    @classmethod
    def validate_bound(cls, v: Any) -> Any:
        """Границы — вещественные числа, не bool и не NaN."""
        if isinstance(v, bool) or not isinstance(v, Number) or isinstance(v, complex):
            raise ValueError(f"Interval bounds must be real numbers, got {v!r}")
        if v != v:
            raise ValueError("Interval bounds cannot be NaN")
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def coerce(cls, obj: "IntervalLike") -> "Interval":
        """
        Приведение интервало-подобного объекта к Interval.

        Поддерживаются:
        - Interval (возвращается как есть)
        - tuple/list из двух чисел: (start, end)
        - range с шагом 1 или -1: range(0, 10) -> [0, 10)

        Args:
            obj: Интервало-подобный объект

        Returns:
            Interval

        Raises:
            TypeError: Если тип объекта не поддерживается
            ValueError: Если у tuple/list не два элемента, у range шаг не +/-1,
                        или границы не являются числами

        Examples:
            >>> Interval.coerce((0, 10))
            Interval(start=0, end=10)
            >>> Interval.coerce(range(5, 2, -1))
            Interval(start=5, end=2)
        """
        if isinstance(obj, Interval):
            return obj

        if isinstance(obj, range):
            if obj.step not in (1, -1):
                raise ValueError(f"range step must be 1 or -1, got {obj.step}")
            return cls(obj.start, obj.stop)

        if isinstance(obj, (tuple, list)):
            if len(obj) != 2:
                raise ValueError(f"Interval needs exactly 2 bounds, got {len(obj)}: {obj!r}")
            return cls(obj[0], obj[1])

        raise TypeError(f"Cannot build an Interval from {type(obj).__name__}: {obj!r}")

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def is_degenerate(self) -> bool:
        """Нулевая ширина: start == end."""
        return self.start == self.end

    def to_tuple(self) -> tuple[Any, Any]:
        return (self.start, self.end)

    def __repr__(self) -> str:
        return f"Interval(start={self.start!r}, end={self.end!r})"


IntervalLike = Union[Interval, tuple[Any, Any], list, range]

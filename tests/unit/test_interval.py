"""
Тесты для Interval — направленного полуоткрытого интервала

Проверяет:
1. Создание и валидацию границ (Pydantic)
2. Immutability
3. Приведение tuple/list/range к Interval
4. Вырожденные и развёрнутые интервалы
"""

import math
from fractions import Fraction

import pytest
from pydantic import ValidationError

from src.map_range.interval import DegenerateIntervalError, Interval
from src.map_range.numeric import RangeMappingError


# =============================================================================
# ТЕСТЫ СОЗДАНИЯ
# =============================================================================


class TestIntervalCreation:
    """Тесты создания Interval"""

    def test_positional_and_keyword(self) -> None:
        """Позиционное и именованное создание эквивалентны"""
        assert Interval(0, 10) == Interval(start=0, end=10)

    def test_bounds_keep_their_type(self) -> None:
        """Границы не приводятся к другому типу"""
        interval = Interval(0, 10)
        assert isinstance(interval.start, int)
        assert Interval(0.5, 1.5).start == 0.5
        assert Interval(Fraction(1, 3), 1).start == Fraction(1, 3)

    def test_reversed_interval_allowed(self) -> None:
        """Развёрнутый интервал валиден"""
        interval = Interval(10, 0)
        assert interval.start > interval.end
        assert not interval.is_degenerate

    @pytest.mark.parametrize("bad_bound", [True, "0", None, 1 + 2j, math.nan])
    def test_invalid_bounds_rejected(self, bad_bound) -> None:
        """bool, строки, None, complex и NaN отвергаются"""
        with pytest.raises(ValidationError):
            Interval(bad_bound, 10)

        with pytest.raises(ValidationError):
            Interval(0, bad_bound)

    def test_immutable(self) -> None:
        """Interval нельзя изменить после создания"""
        interval = Interval(0, 10)
        with pytest.raises(ValidationError):
            interval.start = 5

    def test_hashable(self) -> None:
        """Frozen интервалы хешируются"""
        assert len({Interval(0, 10), Interval(0, 10), Interval(10, 0)}) == 2

    def test_repr_and_tuple(self) -> None:
        """Представление и конверсия в tuple"""
        interval = Interval(-1.0, 1.0)
        assert repr(interval) == "Interval(start=-1.0, end=1.0)"
        assert interval.to_tuple() == (-1.0, 1.0)


# =============================================================================
# ТЕСТЫ ПРИВЕДЕНИЯ
# =============================================================================


class TestIntervalCoerce:
    """Тесты Interval.coerce"""

    def test_interval_returned_as_is(self) -> None:
        """Interval возвращается без копирования"""
        interval = Interval(0, 10)
        assert Interval.coerce(interval) is interval

    def test_tuple_and_list(self) -> None:
        """Пара границ в tuple или list"""
        assert Interval.coerce((0, 10)) == Interval(0, 10)
        assert Interval.coerce([10.0, 0.0]) == Interval(10.0, 0.0)

    def test_range(self) -> None:
        """range(start, stop) → [start, stop)"""
        assert Interval.coerce(range(0, 10)) == Interval(0, 10)
        assert Interval.coerce(range(5, 2, -1)) == Interval(5, 2)

    def test_range_with_step_rejected(self) -> None:
        """range с шагом не +/-1 не является интервалом"""
        with pytest.raises(ValueError, match="range step"):
            Interval.coerce(range(0, 10, 2))

    def test_wrong_length_rejected(self) -> None:
        """Ровно две границы"""
        with pytest.raises(ValueError, match="exactly 2 bounds"):
            Interval.coerce((0, 5, 10))

        with pytest.raises(ValueError, match="exactly 2 bounds"):
            Interval.coerce([0])

    def test_unsupported_type_rejected(self) -> None:
        """Прочие типы → TypeError"""
        with pytest.raises(TypeError, match="Cannot build an Interval"):
            Interval.coerce(10)

        with pytest.raises(TypeError):
            Interval.coerce({"start": 0, "end": 10})

    def test_invalid_bounds_in_tuple(self) -> None:
        """Нечисловые границы в tuple → ValidationError (ValueError)"""
        with pytest.raises(ValueError):
            Interval.coerce(("a", 1))


# =============================================================================
# ТЕСТЫ СВОЙСТВ
# =============================================================================


class TestIntervalProperties:
    """Тесты is_degenerate"""

    def test_degenerate(self) -> None:
        """start == end — вырожденный интервал"""
        assert Interval(3, 3).is_degenerate
        assert Interval(3, 3.0).is_degenerate
        assert not Interval(3, 4).is_degenerate


# =============================================================================
# ТЕСТЫ ИСКЛЮЧЕНИЯ
# =============================================================================


class TestDegenerateIntervalError:
    """Тесты DegenerateIntervalError"""

    def test_hierarchy(self) -> None:
        """Ошибка является RangeMappingError и ZeroDivisionError"""
        error = DegenerateIntervalError(Interval(1, 1))
        assert isinstance(error, RangeMappingError)
        assert isinstance(error, ZeroDivisionError)
        assert error.interval == Interval(1, 1)
        assert "zero width" in str(error)

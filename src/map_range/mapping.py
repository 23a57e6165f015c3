"""
Range Mapping — Affine Value Mapping Between Intervals

Модуль переводит значение, выраженное относительно исходного интервала
from, в значение относительно целевого интервала to:

    to.start + (value - from.start) * (to.end - to.start) / (from.end - from.start)

Два варианта:
- map_range: plain арифметика вида, при невалидных условиях исключение
- checked_map_range: checked арифметика вида, при невалидных условиях None

Результат не ограничивается интервалами: экстраполяция за пределы from и to
допустима. Развёрнутый интервал (start > end) инвертирует направление.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Порядок шагов фиксирован: sub, sub, mul, sub, div, add
   (умножение выполняется до деления)
2. Вырожденный from (start == end) → DegenerateIntervalError / None
3. Любой непредставимый шаг → NumericOverflowError / None
4. checked_map_range никогда не выбрасывает исключений из-за значений
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from src.map_range.interval import DegenerateIntervalError, Interval, IntervalLike
from src.map_range.numeric import NumericKind, kind_of

logger = logging.getLogger(__name__)


# =============================================================================
# UNCHECKED MAP
# =============================================================================


def map_range(
    value: Any,
    from_: IntervalLike,
    to: IntervalLike,
    kind: Optional[NumericKind] = None,
) -> Any:
    """
    Маппинг значения из интервала from_ в интервал to.

    Args:
        value: Исходное значение
        from_: Исходный интервал (Interval, (start, end) или range)
        to: Целевой интервал (Interval, (start, end) или range)
        kind: Числовой вид (default: общий вид value и границ, см. kind_of)

    Returns:
        Отображённое значение (не ограничено интервалами)

    Raises:
        DegenerateIntervalError: Если from_.start == from_.end
        NumericOverflowError: Если значение, граница или промежуточный шаг
            не представимы в виде (unsigned underflow при value < from_.start,
            развёрнутый unsigned интервал, переполнение при масштабировании)
        TypeError: Если value или границы не поддерживаются видом

    Examples:
        >>> from src.map_range.numeric import I32, U8
        >>> map_range(5.0, (0.0, 10.0), (0.0, 20.0))
        10.0
        >>> map_range(10, (0, 5), (0, -5), kind=I32)
        -10
        >>> map_range(200, (0, 10), (0, 20), kind=U8)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        NumericOverflowError: mul is not representable as u8: ...
    """
    source = Interval.coerce(from_)
    target = Interval.coerce(to)
    if kind is None:
        kind = kind_of(value, source.start, source.end, target.start, target.end)

    value = kind.require(value)
    from_start = kind.require(source.start)
    from_end = kind.require(source.end)
    to_start = kind.require(target.start)
    to_end = kind.require(target.end)

    if from_end == from_start:
        raise DegenerateIntervalError(source)

    offset = kind.sub(value, from_start)
    scaled = kind.mul(offset, kind.sub(to_end, to_start))
    return kind.add(to_start, kind.div(scaled, kind.sub(from_end, from_start)))


# =============================================================================
# CHECKED MAP
# =============================================================================


def _absent(step: str, operands: tuple[Any, ...], kind: NumericKind) -> None:
    logger.debug(
        "checked_map_range: %s failed in %s, operands=%r", step, kind.name, operands
    )
    return None


def checked_map_range(
    value: Any,
    from_: IntervalLike,
    to: IntervalLike,
    kind: Optional[NumericKind] = None,
) -> Optional[Any]:
    """
    Checked-версия map_range: None вместо исключения.

    Каждый шаг выполняется checked-операцией вида; первый невалидный шаг
    прерывает вычисление и возвращает None.

    Args:
        value: Исходное значение
        from_: Исходный интервал
        to: Целевой интервал
        kind: Числовой вид (default: общий вид value и границ, см. kind_of)

    Returns:
        Отображённое значение или None, если:
        - from_ вырожден (деление на ноль)
        - значение или граница не представимы в виде
        - любой шаг sub/mul/div/add выходит за представимый диапазон

    Raises:
        TypeError/ValueError: Только для некорректных аргументов
            (не число, не интервал), но не для числовых условий

    Examples:
        >>> from src.map_range.numeric import U32
        >>> checked_map_range(10, (0, 5), (5, 2), kind=U32) is None
        True
        >>> checked_map_range(10, (0, 5), (2, 5), kind=U32)
        8
    """
    source = Interval.coerce(from_)
    target = Interval.coerce(to)
    if kind is None:
        kind = kind_of(value, source.start, source.end, target.start, target.end)

    bounds = (value, source.start, source.end, target.start, target.end)
    accepted = [kind.accept(bound) for bound in bounds]
    if any(item is None for item in accepted):
        return _absent("input", bounds, kind)
    value, from_start, from_end, to_start, to_end = accepted

    if from_end == from_start:
        return _absent("degenerate source", (from_start, from_end), kind)

    offset = kind.checked_sub(value, from_start)
    if offset is None:
        return _absent("sub", (value, from_start), kind)

    to_span = kind.checked_sub(to_end, to_start)
    if to_span is None:
        return _absent("sub", (to_end, to_start), kind)

    scaled = kind.checked_mul(offset, to_span)
    if scaled is None:
        return _absent("mul", (offset, to_span), kind)

    from_span = kind.checked_sub(from_end, from_start)
    if from_span is None:
        return _absent("sub", (from_end, from_start), kind)

    quotient = kind.checked_div(scaled, from_span)
    if quotient is None:
        return _absent("div", (scaled, from_span), kind)

    result = kind.checked_add(to_start, quotient)
    if result is None:
        return _absent("add", (to_start, quotient), kind)
    return result


# =============================================================================
# RANGE MAPPER
# =============================================================================


@dataclass(frozen=True)
class RangeMapper:
    """
    Переиспользуемый маппер между двумя фиксированными интервалами.

    Immutable (frozen=True), сравнивается и хэшируется по значению.
    Интервалы приводятся к Interval один раз при создании; вырожденность
    источника проверяется при каждом вызове (map бросает исключение,
    checked_map возвращает None).

    Attributes:
        source: Исходный интервал
        target: Целевой интервал
        kind: Числовой вид (None: выводится заново при каждом вызове)

    Examples:
        >>> from src.map_range.numeric import F32
        >>> to_texture = RangeMapper((-1.0, 1.0), (0.0, 1.0), kind=F32)
        >>> to_texture.map(0.0)
        0.5
    """

    source: IntervalLike
    target: IntervalLike
    kind: Optional[NumericKind] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "source", Interval.coerce(self.source))
        object.__setattr__(self, "target", Interval.coerce(self.target))

    def map(self, value: Any) -> Any:
        """См. map_range."""
        return map_range(value, self.source, self.target, self.kind)

    def checked_map(self, value: Any) -> Optional[Any]:
        """См. checked_map_range."""
        return checked_map_range(value, self.source, self.target, self.kind)

    def map_many(self, values: Iterable[Any]) -> list[Any]:
        """Маппинг последовательности; первая ошибка прерывает обработку."""
        return [self.map(value) for value in values]

    def checked_map_many(self, values: Iterable[Any]) -> list[Optional[Any]]:
        """Checked-маппинг последовательности; None на месте невалидных значений."""
        return [self.checked_map(value) for value in values]

    def inverse(self) -> "RangeMapper":
        """
        Обратный маппер: to -> from.

        Raises:
            DegenerateIntervalError: Если целевой интервал вырожден
                (обратное отображение не определено)
        """
        if self.target.is_degenerate:
            raise DegenerateIntervalError(self.target)
        return RangeMapper(self.target, self.source, self.kind)

    def __repr__(self) -> str:
        kind = self.kind.name if self.kind is not None else "auto"
        return f"RangeMapper({self.source.to_tuple()!r} -> {self.target.to_tuple()!r}, kind={kind})"

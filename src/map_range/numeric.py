"""
Numeric Kinds — Plain & Checked Arithmetic

Модуль описывает числовые "виды" (kinds), над которыми работает маппинг
диапазонов, и для каждого вида предоставляет два набора операций:
- plain: add/sub/mul/div — при невалидном результате выбрасывают исключение
- checked: checked_add/checked_sub/checked_mul/checked_div — возвращают None

Семейства видов:
- SIGNED:    I8, I16, I32, I64, I128   — [-2**(bits-1), 2**(bits-1) - 1]
- UNSIGNED:  U8, U16, U32, U64, U128   — [0, 2**bits - 1]
- FLOAT:     F32, F64                  — только конечные IEEE значения
- UNBOUNDED: INT                       — int без ограничений (Python int)
- GENERIC:   NUMBER                    — собственные операторы значения
                                         (Fraction, Decimal, ...)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Целочисленное деление усекается к нулю (-7 / 2 == -3), как в fixed-width
   арифметике, а не округляется вниз как оператор //
2. Plain-операции fixed-width видов ВСЕГДА выбрасывают NumericOverflowError
   при выходе за представимый диапазон (никакого wrapping)
3. Checked-операции никогда не выбрасывают исключений из-за значений,
   только из-за некорректных типов аргументов (TypeError)
4. F32 результаты округляются до single precision после каждого шага
"""

import math
import struct
from dataclasses import dataclass
from enum import Enum
from numbers import Number
from typing import Any, Final, Optional

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Машинный epsilon для single precision (f32::EPSILON)
F32_EPSILON: Final[float] = 2.0**-23


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RangeMappingError(ArithmeticError):
    """Базовое исключение для всех числовых ошибок маппинга диапазонов."""


class NumericOverflowError(RangeMappingError, OverflowError):
    """
    Результат шага (или входное значение) не представим в данном виде.

    Включает unsigned underflow (например, 10 - 20 для U32), переполнение
    при умножении и нефинитный результат для float видов.

    Attributes:
        operation: Имя шага ("add", "sub", "mul", "div" или "input")
        operands: Операнды, на которых произошла ошибка
        kind: Числовой вид, в котором выполнялась операция
    """

    def __init__(self, operation: str, operands: tuple[Any, ...], kind: "NumericKind"):
        self.operation = operation
        self.operands = operands
        self.kind = kind
        super().__init__(
            f"{operation} is not representable as {kind.name}: operands={operands!r}"
        )


class NumericDivisionByZero(RangeMappingError, ZeroDivisionError):
    """Plain-деление на ноль внутри числового вида."""

    def __init__(self, operands: tuple[Any, ...], kind: "NumericKind"):
        self.operation = "div"
        self.operands = operands
        self.kind = kind
        super().__init__(f"division by zero in {kind.name}: operands={operands!r}")


# =============================================================================
# ТИПЫ
# =============================================================================


class KindFamily(str, Enum):
    """Семейство числового вида"""

    SIGNED = "signed"
    UNSIGNED = "unsigned"
    FLOAT = "float"
    UNBOUNDED = "unbounded"
    GENERIC = "generic"


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# =============================================================================


def round_to_f32(value: float) -> float:
    """
    Округление float до ближайшего single precision значения.

    Значения за пределами диапазона f32 превращаются в +/-inf,
    как при приведении double -> float.

    Examples:
        >>> round_to_f32(0.1)
        0.10000000149011612
        >>> round_to_f32(1e39)
        inf
    """
    if not math.isfinite(value):
        return value
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def div_trunc(numerator: int, denominator: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Raises:
        ZeroDivisionError: Если denominator == 0

    Examples:
        >>> div_trunc(7, 2)
        3
        >>> div_trunc(-7, 2)
        -3
        >>> div_trunc(7, -2)
        -3
    """
    quotient = numerator // denominator
    if quotient < 0 and quotient * denominator != numerator:
        # // округляет вниз, нам нужно к нулю
        quotient += 1
    return quotient


def _is_finite(value: Any) -> bool:
    # Decimal проверяет себя сам: float(Decimal("1e400")) == inf
    if hasattr(value, "is_finite"):
        return value.is_finite()
    try:
        return math.isfinite(value)
    except (OverflowError, TypeError, ValueError):
        # int/Fraction вне диапазона double конечны
        return True


# =============================================================================
# NUMERIC KIND
# =============================================================================


@dataclass(frozen=True)
class NumericKind:
    """
    Числовой вид: набор plain и checked арифметических операций.

    Immutable (frozen=True), сравнивается по значению. Вид — это аналог
    конкретного числового типа (u8, i32, f32, ...): значения остаются
    обычными Python числами, а вид определяет правила их арифметики.

    Attributes:
        name: Имя вида ("u8", "i32", "f64", "int", "number")
        family: Семейство вида
        bits: Ширина для fixed-width видов (None для остальных)
    """

    name: str
    family: KindFamily
    bits: Optional[int] = None

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def is_integer(self) -> bool:
        return self.family in (KindFamily.SIGNED, KindFamily.UNSIGNED, KindFamily.UNBOUNDED)

    @property
    def is_float(self) -> bool:
        return self.family is KindFamily.FLOAT

    @property
    def is_fixed_width(self) -> bool:
        return self.family in (KindFamily.SIGNED, KindFamily.UNSIGNED)

    @property
    def min_value(self) -> Optional[int]:
        """Минимальное представимое значение (только для fixed-width видов)."""
        if self.family is KindFamily.SIGNED:
            return -(1 << (self.bits - 1))
        if self.family is KindFamily.UNSIGNED:
            return 0
        return None

    @property
    def max_value(self) -> Optional[int]:
        """Максимальное представимое значение (только для fixed-width видов)."""
        if self.family is KindFamily.SIGNED:
            return (1 << (self.bits - 1)) - 1
        if self.family is KindFamily.UNSIGNED:
            return (1 << self.bits) - 1
        return None

    # -------------------------------------------------------------------------
    # Операнды и представимость
    # -------------------------------------------------------------------------

    def coerce(self, value: Any) -> Any:
        """
        Приведение операнда к представлению данного вида.

        Проверяет только тип: integer виды принимают int, float виды —
        int и float (F32 дополнительно округляет до single precision),
        NUMBER — любое не-complex число. bool не является числом.

        Args:
            value: Операнд

        Returns:
            Нормализованный операнд

        Raises:
            TypeError: Если тип операнда не поддерживается видом
        """
        if isinstance(value, bool):
            raise TypeError(f"bool is not a valid {self.name} operand: {value!r}")

        if self.is_integer:
            if not isinstance(value, int):
                raise TypeError(
                    f"{self.name} operands must be int, got {type(value).__name__}: {value!r}"
                )
            return value

        if self.is_float:
            if not isinstance(value, (int, float)):
                raise TypeError(
                    f"{self.name} operands must be int or float, "
                    f"got {type(value).__name__}: {value!r}"
                )
            try:
                value = float(value)
            except OverflowError:
                # int вне диапазона double; отсекается is_representable
                value = math.inf if value > 0 else -math.inf
            if self.name == "f32":
                value = round_to_f32(value)
            return value

        if not isinstance(value, Number) or isinstance(value, complex):
            raise TypeError(f"{self.name} operands must be real numbers, got {value!r}")
        return value

    def is_representable(self, value: Any) -> bool:
        """
        Проверка, что значение лежит в представимом множестве вида.

        Examples:
            >>> U8.is_representable(255)
            True
            >>> U8.is_representable(256)
            False
            >>> U32.is_representable(-1)
            False
            >>> F64.is_representable(float("inf"))
            False
        """
        if self.is_fixed_width:
            return self.min_value <= value <= self.max_value
        if self.family is KindFamily.UNBOUNDED:
            return True
        return _is_finite(value)

    def require(self, value: Any) -> Any:
        """
        Приведение операнда с обязательной проверкой представимости.

        Raises:
            TypeError: Если тип операнда не поддерживается
            NumericOverflowError: Если значение не представимо в виде
        """
        value = self.coerce(value)
        if not self.is_representable(value):
            raise NumericOverflowError("input", (value,), self)
        return value

    def accept(self, value: Any) -> Optional[Any]:
        """Checked-вариант require: None вместо NumericOverflowError."""
        value = self.coerce(value)
        if not self.is_representable(value):
            return None
        return value

    # -------------------------------------------------------------------------
    # Сырые операции
    # -------------------------------------------------------------------------

    def _raw(self, operation: str, a: Any, b: Any) -> Any:
        if operation == "add":
            result = a + b
        elif operation == "sub":
            result = a - b
        elif operation == "mul":
            result = a * b
        elif operation == "div":
            if self.is_integer:
                result = div_trunc(a, b)
            else:
                result = a / b
        else:
            raise ValueError(f"Unknown operation: {operation}")

        if self.name == "f32":
            result = round_to_f32(result)
        return result

    def _plain(self, operation: str, a: Any, b: Any) -> Any:
        a = self.coerce(a)
        b = self.coerce(b)
        try:
            result = self._raw(operation, a, b)
        except ZeroDivisionError as e:
            raise NumericDivisionByZero((a, b), self) from e
        except OverflowError as e:
            # float * float не бросает, но Decimal/Fraction -> float может
            raise NumericOverflowError(operation, (a, b), self) from e

        if not self.is_representable(result):
            raise NumericOverflowError(operation, (a, b), self)
        return result

    def _checked(self, operation: str, a: Any, b: Any) -> Optional[Any]:
        a = self.coerce(a)
        b = self.coerce(b)
        try:
            result = self._raw(operation, a, b)
        except ArithmeticError:
            # ZeroDivisionError, OverflowError, decimal.InvalidOperation
            return None

        if not self.is_representable(result):
            return None
        return result

    # -------------------------------------------------------------------------
    # Plain арифметика
    # -------------------------------------------------------------------------

    def add(self, a: Any, b: Any) -> Any:
        """a + b; NumericOverflowError при выходе за диапазон."""
        return self._plain("add", a, b)

    def sub(self, a: Any, b: Any) -> Any:
        """a - b; NumericOverflowError при выходе за диапазон (unsigned underflow)."""
        return self._plain("sub", a, b)

    def mul(self, a: Any, b: Any) -> Any:
        """a * b; NumericOverflowError при выходе за диапазон."""
        return self._plain("mul", a, b)

    def div(self, a: Any, b: Any) -> Any:
        """
        a / b (для integer видов — с усечением к нулю).

        Raises:
            NumericDivisionByZero: Если b == 0
            NumericOverflowError: Если результат не представим (I8: -128 / -1)
        """
        return self._plain("div", a, b)

    # -------------------------------------------------------------------------
    # Checked арифметика
    # -------------------------------------------------------------------------

    def checked_add(self, a: Any, b: Any) -> Optional[Any]:
        return self._checked("add", a, b)

    def checked_sub(self, a: Any, b: Any) -> Optional[Any]:
        return self._checked("sub", a, b)

    def checked_mul(self, a: Any, b: Any) -> Optional[Any]:
        return self._checked("mul", a, b)

    def checked_div(self, a: Any, b: Any) -> Optional[Any]:
        return self._checked("div", a, b)

    def __repr__(self) -> str:
        return f"NumericKind({self.name})"


# =============================================================================
# ВИДЫ
# =============================================================================

I8: Final[NumericKind] = NumericKind("i8", KindFamily.SIGNED, 8)
I16: Final[NumericKind] = NumericKind("i16", KindFamily.SIGNED, 16)
I32: Final[NumericKind] = NumericKind("i32", KindFamily.SIGNED, 32)
I64: Final[NumericKind] = NumericKind("i64", KindFamily.SIGNED, 64)
I128: Final[NumericKind] = NumericKind("i128", KindFamily.SIGNED, 128)

U8: Final[NumericKind] = NumericKind("u8", KindFamily.UNSIGNED, 8)
U16: Final[NumericKind] = NumericKind("u16", KindFamily.UNSIGNED, 16)
U32: Final[NumericKind] = NumericKind("u32", KindFamily.UNSIGNED, 32)
U64: Final[NumericKind] = NumericKind("u64", KindFamily.UNSIGNED, 64)
U128: Final[NumericKind] = NumericKind("u128", KindFamily.UNSIGNED, 128)

F32: Final[NumericKind] = NumericKind("f32", KindFamily.FLOAT, 32)
F64: Final[NumericKind] = NumericKind("f64", KindFamily.FLOAT, 64)

INT: Final[NumericKind] = NumericKind("int", KindFamily.UNBOUNDED)
NUMBER: Final[NumericKind] = NumericKind("number", KindFamily.GENERIC)


def _kind_of_one(value: Any) -> NumericKind:
    if isinstance(value, bool):
        raise TypeError(f"bool is not a numeric value: {value!r}")
    if isinstance(value, int):
        return INT
    if isinstance(value, float):
        return F64
    if isinstance(value, Number) and not isinstance(value, complex):
        return NUMBER
    raise TypeError(f"Expected a real number, got {type(value).__name__}: {value!r}")


def kind_of(*values: Any) -> NumericKind:
    """
    Вывод общего числового вида по Python типам значений.

    Каждое значение классифицируется отдельно:
    - int   -> INT (Python int не переполняется)
    - float -> F64
    - прочие числа (Fraction, Decimal, ...) -> NUMBER

    Общий вид — самый широкий из найденных: NUMBER > F64 > INT.
    Поэтому int значение с float границами считается в F64.

    Raises:
        TypeError: Для bool, complex, не-чисел и пустого вызова

    Examples:
        >>> kind_of(5)
        NumericKind(int)
        >>> kind_of(5, 0, 10.5)
        NumericKind(f64)
    """
    if not values:
        raise TypeError("kind_of() requires at least one value")

    kinds = {_kind_of_one(value) for value in values}
    if NUMBER in kinds:
        return NUMBER
    if F64 in kinds:
        return F64
    return INT

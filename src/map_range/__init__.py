"""
map_range — линейный маппинг значений между интервалами

Перевод значения из исходного интервала в целевой через аффинное
преобразование, для float и fixed-width целых видов (signed и unsigned),
в plain (исключение) и checked (None) вариантах.
"""

# Numeric kinds
from src.map_range.numeric import (
    # Constants
    F32_EPSILON,
    # Exceptions
    NumericDivisionByZero,
    NumericOverflowError,
    RangeMappingError,
    # Types
    KindFamily,
    NumericKind,
    # Kinds
    F32,
    F64,
    I8,
    I16,
    I32,
    I64,
    I128,
    INT,
    NUMBER,
    U8,
    U16,
    U32,
    U64,
    U128,
    # Functions
    kind_of,
)

# Interval
from src.map_range.interval import DegenerateIntervalError, Interval, IntervalLike

# Mapping
from src.map_range.mapping import RangeMapper, checked_map_range, map_range

__all__ = [
    # Numeric — Constants
    "F32_EPSILON",
    # Numeric — Exceptions
    "RangeMappingError",
    "NumericOverflowError",
    "NumericDivisionByZero",
    # Numeric — Types
    "KindFamily",
    "NumericKind",
    # Numeric — Kinds
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "F32",
    "F64",
    "INT",
    "NUMBER",
    # Numeric — Functions
    "kind_of",
    # Interval
    "DegenerateIntervalError",
    "Interval",
    "IntervalLike",
    # Mapping
    "map_range",
    "checked_map_range",
    "RangeMapper",
]

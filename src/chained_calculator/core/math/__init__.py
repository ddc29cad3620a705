"""
Core math modules для chained-calculator

Десятичные примитивы: конверсия, точная арифметика, округление, сужение типов.
"""

# Decimal Arithmetic
from chained_calculator.core.math.decimal_arithmetic import (
    # Constants
    ARITHMETIC_CONTEXT,
    DECIMAL_ZERO,
    DEFAULT_DIVIDE_SCALE,
    INT32_BITS,
    INT64_BITS,
    ROUNDING_MODE,
    # Types
    BinaryOperator,
    # Exceptions
    OperandParseError,
    # Operators
    decimal_add,
    decimal_multiply,
    decimal_subtract,
    divide_half_up,
    # Conversion
    round_half_up,
    to_decimal,
    validate_scale,
    # Narrowing
    narrow_to_int,
    narrow_to_int32,
    narrow_to_int64,
    to_float,
)

__all__ = [
    # Decimal Arithmetic — Constants
    "ARITHMETIC_CONTEXT",
    "DECIMAL_ZERO",
    "DEFAULT_DIVIDE_SCALE",
    "INT32_BITS",
    "INT64_BITS",
    "ROUNDING_MODE",
    # Decimal Arithmetic — Types
    "BinaryOperator",
    # Decimal Arithmetic — Exceptions
    "OperandParseError",
    # Decimal Arithmetic — Operators
    "decimal_add",
    "decimal_multiply",
    "decimal_subtract",
    "divide_half_up",
    # Decimal Arithmetic — Conversion
    "round_half_up",
    "to_decimal",
    "validate_scale",
    # Decimal Arithmetic — Narrowing
    "narrow_to_int",
    "narrow_to_int32",
    "narrow_to_int64",
    "to_float",
]

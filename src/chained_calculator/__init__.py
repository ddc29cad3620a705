"""
chained-calculator — цепочечная арифметика высокой точности

Fluent builder поверх decimal.Decimal: начальное значение, цепочка
add/subtract/multiply/divide (с опциональным округлением операнда),
извлечение результата как Decimal, float или целого.

    from chained_calculator import ChainedCalculator

    ChainedCalculator.start_with(13).divide(7).get_value()       # 1.857142857
    ChainedCalculator.start_with(13).divide_with_scale(7, 2).get_value()  # 1.86
    ChainedCalculator.start_with(5).add("oops").get_value()       # 5.0 (!)

Последний пример: нераспознаваемый текст молча становится нулём.
CalculatorConfig(strict_parsing=True) превращает это в OperandParseError.
"""

from chained_calculator.core.domain import (
    DEFAULT_CONFIG,
    CalculatorConfig,
    ChainedCalculator,
    FrozenChainedCalculator,
)
from chained_calculator.core.math import (
    DEFAULT_DIVIDE_SCALE,
    ROUNDING_MODE,
    OperandParseError,
    to_decimal,
)

__version__ = "1.0.0"

__all__ = [
    "CalculatorConfig",
    "ChainedCalculator",
    "DEFAULT_CONFIG",
    "DEFAULT_DIVIDE_SCALE",
    "FrozenChainedCalculator",
    "OperandParseError",
    "ROUNDING_MODE",
    "to_decimal",
]

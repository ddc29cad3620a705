"""
DecimalAccessors — общие методы извлечения значения

Базовый класс для ChainedCalculator и FrozenChainedCalculator:
- Типизированные accessors (Decimal, float, int64, int32)
- Разрешение операнда в Decimal перед применением операции
"""

from decimal import Decimal
from typing import Any

from chained_calculator.core.domain.config import CalculatorConfig
from chained_calculator.core.math.decimal_arithmetic import (
    narrow_to_int32,
    narrow_to_int64,
    round_half_up,
    to_decimal,
    to_float,
)


class DecimalAccessors:
    """
    Accessors поверх атрибута `value` (Decimal).

    Правила сужения:
    - get_value: Decimal без потерь (или HALF_UP до scale)
    - get_double: ближайший float
    - get_long: усечение к нулю, младшие 64 бита
    - get_integer: усечение к нулю, младшие 32 бита

    Подкласс обязан предоставить атрибут `value`.
    """

    __slots__ = ()

    def get_value(self, scale: int | None = None) -> Decimal:
        """Текущее значение; при заданном scale округлённое HALF_UP."""
        if scale is None:
            return self.value
        return round_half_up(self.value, scale)

    def get_double(self, scale: int | None = None) -> float:
        return to_float(self.get_value(scale))

    def get_long(self, scale: int | None = None) -> int:
        return narrow_to_int64(self.get_value(scale))

    def get_integer(self, scale: int | None = None) -> int:
        return narrow_to_int32(self.get_value(scale))


def resolve_operand(
    operand: Any,
    before_scale: int | None,
    config: CalculatorConfig,
) -> Decimal | None:
    """
    Разрешение операнда в Decimal.

    Returns:
        None для None-операнда (операция не применяется);
        value другого калькулятора как есть (before_scale игнорируется:
        его значение уже считается итоговым);
        иначе to_decimal(operand, before_scale).
    """
    if operand is None:
        return None
    if isinstance(operand, DecimalAccessors):
        return operand.value
    return to_decimal(operand, before_scale, strict=config.strict_parsing)

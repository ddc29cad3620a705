"""
FrozenChainedCalculator — immutable вариант цепочечного калькулятора

Immutable Pydantic модель: каждая операция возвращает НОВЫЙ экземпляр,
исходный никогда не изменяется. Безопасен для разделения между потоками.

    >>> base = FrozenChainedCalculator.start_with(10)
    >>> doubled = base.multiply(2)
    >>> base.get_value(), doubled.get_value(0)
    (Decimal('10.0'), Decimal('20'))

Семантика операндов, округления и ошибок совпадает с ChainedCalculator.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field

from chained_calculator.core.domain.accessors import DecimalAccessors, resolve_operand
from chained_calculator.core.domain.calculator import ChainedCalculator
from chained_calculator.core.domain.config import DEFAULT_CONFIG, CalculatorConfig
from chained_calculator.core.math.decimal_arithmetic import (
    DECIMAL_ZERO,
    BinaryOperator,
    decimal_add,
    decimal_multiply,
    decimal_subtract,
    divide_half_up,
    to_decimal,
)


class FrozenChainedCalculator(BaseModel, DecimalAccessors):
    """
    Immutable снапшот значения цепочки.

    None операнд возвращает тот же экземпляр (значение не меняется).
    """

    value: Decimal = Field(DECIMAL_ZERO, description="Текущее значение цепочки")
    config: CalculatorConfig = Field(DEFAULT_CONFIG, description="Конфигурация калькулятора")

    model_config = {"frozen": True}

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def start_with(
        cls, seed: Any, config: CalculatorConfig | None = None
    ) -> "FrozenChainedCalculator":
        """Точка входа цепочки (правила конверсии seed как у ChainedCalculator)."""
        config = config if config is not None else DEFAULT_CONFIG
        return cls(value=to_decimal(seed, strict=config.strict_parsing), config=config)

    @classmethod
    def from_calculator(cls, calculator: ChainedCalculator) -> "FrozenChainedCalculator":
        """Снапшот текущего значения mutable калькулятора."""
        return cls(value=calculator.value, config=calculator.config)

    def thaw(self) -> ChainedCalculator:
        """Новый mutable калькулятор, начинающий с этого значения."""
        return ChainedCalculator(self.value, self.config)

    # -------------------------------------------------------------------------
    # Операции (каждая возвращает новый экземпляр)
    # -------------------------------------------------------------------------

    def apply_operator(
        self,
        operator: BinaryOperator,
        operand: Any,
        before_scale: int | None = None,
    ) -> "FrozenChainedCalculator":
        resolved = resolve_operand(operand, before_scale, self.config)
        if resolved is None:
            return self
        return self.model_copy(update={"value": operator(self.value, resolved)})

    def add(self, other: Any, before_scale: int | None = None) -> "FrozenChainedCalculator":
        return self.apply_operator(decimal_add, other, before_scale)

    def subtract(self, other: Any, before_scale: int | None = None) -> "FrozenChainedCalculator":
        return self.apply_operator(decimal_subtract, other, before_scale)

    def multiply(self, other: Any, before_scale: int | None = None) -> "FrozenChainedCalculator":
        return self.apply_operator(decimal_multiply, other, before_scale)

    def divide(self, other: Any, before_scale: int | None = None) -> "FrozenChainedCalculator":
        return self.divide_with_scale(other, self.config.divide_scale, before_scale)

    def divide_with_scale(
        self,
        other: Any,
        scale: int,
        before_scale: int | None = None,
    ) -> "FrozenChainedCalculator":
        return self.apply_operator(
            lambda current, divisor: divide_half_up(current, divisor, scale),
            other,
            before_scale,
        )

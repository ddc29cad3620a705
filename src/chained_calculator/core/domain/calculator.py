"""
ChainedCalculator — цепочечная десятичная арифметика

Mutable аккумулятор: каждая операция читает текущее значение, комбинирует его
с операндом и записывает результат обратно, возвращая ТОТ ЖЕ экземпляр.

    >>> ChainedCalculator.start_with(1).add(2).multiply(3).get_value()
    Decimal('9.00')

Порядок вычисления строго слева направо: (1 + 2) * 3, не 1 + 2 * 3.

ALIASING:
    calc.add(1) возвращает calc. Любая ссылка на результат цепочки указывает
    на исходный объект; для независимой копии используйте copy(), для
    immutable варианта FrozenChainedCalculator.

ВЛАДЕНИЕ И ПОТОКИ:
    Экземпляр НЕ потокобезопасен и не содержит внутренней блокировки.
    Один владелец, последовательные вызовы. При разделении между потоками
    вызывающий сам обеспечивает синхронизацию (например, threading.Lock):
    не более одной мутирующей операции одновременно; чтение (get_*)
    безопасно только при отсутствии параллельной мутации.

ОШИБКИ:
    - None операнд → операция не применяется
    - Нераспознаваемый операнд → 0 (см. CalculatorConfig.strict_parsing)
    - Деление на ноль → исключение decimal пропагирует к вызывающему
"""

from decimal import Decimal
from typing import Any

from chained_calculator.core.domain.accessors import DecimalAccessors, resolve_operand
from chained_calculator.core.domain.config import DEFAULT_CONFIG, CalculatorConfig
from chained_calculator.core.math.decimal_arithmetic import (
    BinaryOperator,
    decimal_add,
    decimal_multiply,
    decimal_subtract,
    divide_half_up,
    to_decimal,
)


class ChainedCalculator(DecimalAccessors):
    """
    Аккумулятор для цепочечных вычислений над Decimal.

    Инварианты:
    - value всегда конечный Decimal (никогда None)
    - Каждая мутирующая операция возвращает self

    Операнд операции может быть:
    - None (no-op)
    - int, float, Decimal, строка с десятичным литералом
    - ChainedCalculator / FrozenChainedCalculator (значение берётся как есть,
      before_scale игнорируется)

    before_scale: округление HALF_UP операнда ДО применения операции.
    """

    def __init__(self, seed: Any = None, config: CalculatorConfig | None = None):
        self._config = config if config is not None else DEFAULT_CONFIG
        # Seed конвертируется без pre-scale; невалидный seed → 0
        self._value = to_decimal(seed, strict=self._config.strict_parsing)

    @classmethod
    def start_with(
        cls, seed: Any, config: CalculatorConfig | None = None
    ) -> "ChainedCalculator":
        """
        Точка входа цепочки.

        Args:
            seed: Начальное значение (None или невалидное → 0)
            config: Конфигурация (default: DEFAULT_CONFIG)
        """
        return cls(seed, config)

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def value(self) -> Decimal:
        """Текущее значение (без округления)."""
        return self._value

    @property
    def config(self) -> CalculatorConfig:
        return self._config

    # -------------------------------------------------------------------------
    # Применение операций
    # -------------------------------------------------------------------------

    def apply_operator(
        self,
        operator: BinaryOperator,
        operand: Any,
        before_scale: int | None = None,
    ) -> "ChainedCalculator":
        """
        Применение бинарной операции: value = operator(value, operand).

        Args:
            operator: Функция (current, operand) -> Decimal
            operand: Операнд (см. docstring класса)
            before_scale: Scale округления операнда до операции (optional)

        Returns:
            self (для продолжения цепочки)
        """
        resolved = resolve_operand(operand, before_scale, self._config)
        if resolved is None:
            return self

        self._value = operator(self._value, resolved)
        return self

    def add(self, other: Any, before_scale: int | None = None) -> "ChainedCalculator":
        return self.apply_operator(decimal_add, other, before_scale)

    def subtract(self, other: Any, before_scale: int | None = None) -> "ChainedCalculator":
        return self.apply_operator(decimal_subtract, other, before_scale)

    def multiply(self, other: Any, before_scale: int | None = None) -> "ChainedCalculator":
        return self.apply_operator(decimal_multiply, other, before_scale)

    def divide(self, other: Any, before_scale: int | None = None) -> "ChainedCalculator":
        """
        Деление с результатом config.divide_scale знаков (default 9), HALF_UP.

        Raises:
            decimal.DivisionByZero: Деление ненулевого значения на 0
            decimal.InvalidOperation: 0 / 0
        """
        return self.divide_with_scale(other, self._config.divide_scale, before_scale)

    def divide_with_scale(
        self,
        other: Any,
        scale: int,
        before_scale: int | None = None,
    ) -> "ChainedCalculator":
        """
        Деление с заданным scale результата, HALF_UP.

        Example:
            >>> ChainedCalculator.start_with(13).divide_with_scale(7, 2).get_value()
            Decimal('1.86')
        """
        return self.apply_operator(
            lambda current, divisor: divide_half_up(current, divisor, scale),
            other,
            before_scale,
        )

    # -------------------------------------------------------------------------
    # Утилиты
    # -------------------------------------------------------------------------

    def copy(self) -> "ChainedCalculator":
        """Независимый калькулятор с тем же значением и конфигурацией."""
        return ChainedCalculator(self._value, self._config)

    def __repr__(self) -> str:
        return f"ChainedCalculator(value={self._value})"

"""
CalculatorConfig — Конфигурация цепочечного калькулятора

Immutable Pydantic модель. Значения по умолчанию воспроизводят стандартное
поведение: divide() с scale 9 (HALF_UP), невалидные операнды → 0.
"""

from pydantic import BaseModel, Field

from chained_calculator.core.math.decimal_arithmetic import DEFAULT_DIVIDE_SCALE


class CalculatorConfig(BaseModel):
    """
    Параметры калькулятора.

    Общий для всех шагов цепочки; передаётся в start_with().
    """

    divide_scale: int = Field(
        DEFAULT_DIVIDE_SCALE,
        ge=0,
        description="Число дробных знаков результата divide() (HALF_UP)",
    )
    strict_parsing: bool = Field(
        False,
        description="OperandParseError вместо молчаливой подстановки нуля",
    )

    model_config = {"frozen": True}


# Конфигурация по умолчанию (разделяемая, immutable)
DEFAULT_CONFIG = CalculatorConfig()

"""
Calculator models and configuration.

Contains the mutable ChainedCalculator, its immutable counterpart
FrozenChainedCalculator and the shared CalculatorConfig.
"""

from chained_calculator.core.domain.accessors import DecimalAccessors, resolve_operand
from chained_calculator.core.domain.calculator import ChainedCalculator
from chained_calculator.core.domain.config import DEFAULT_CONFIG, CalculatorConfig
from chained_calculator.core.domain.frozen_calculator import FrozenChainedCalculator

__all__ = [
    # Config
    "CalculatorConfig",
    "DEFAULT_CONFIG",
    # Accessors
    "DecimalAccessors",
    "resolve_operand",
    # Calculators
    "ChainedCalculator",
    "FrozenChainedCalculator",
]

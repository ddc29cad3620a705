"""
Tests for CalculatorConfig

Покрывает:
- Значения по умолчанию
- Валидацию полей
- Immutability (frozen=True)
"""

import pytest
from pydantic import ValidationError

from chained_calculator import DEFAULT_CONFIG, CalculatorConfig, ChainedCalculator


def test_config_defaults():
    """Тест значений по умолчанию."""
    config = CalculatorConfig()

    assert config.divide_scale == 9
    assert config.strict_parsing is False
    assert config == DEFAULT_CONFIG


def test_config_negative_divide_scale_rejected():
    """Тест constraint divide_scale >= 0."""
    with pytest.raises(ValidationError, match="greater than or equal to 0"):
        CalculatorConfig(divide_scale=-1)


def test_config_non_integer_divide_scale_rejected():
    """Тест типа divide_scale."""
    with pytest.raises(ValidationError):
        CalculatorConfig(divide_scale="nine")


def test_config_immutability():
    """Тест immutability CalculatorConfig (frozen=True)."""
    config = CalculatorConfig()

    with pytest.raises(ValidationError, match="frozen"):
        config.divide_scale = 2  # type: ignore


def test_calculator_uses_default_config():
    """Тест: без config калькулятор использует DEFAULT_CONFIG."""
    assert ChainedCalculator.start_with(1).config is DEFAULT_CONFIG


def test_config_from_dict():
    """Тест создания из dict (например, из настроек приложения)."""
    config = CalculatorConfig.model_validate({"divide_scale": 4, "strict_parsing": True})

    assert config.divide_scale == 4
    assert config.strict_parsing is True

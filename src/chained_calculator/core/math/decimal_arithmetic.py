"""
Decimal Arithmetic — точные примитивы для цепочечных вычислений

Модуль обеспечивает десятичную арифметику без ошибок двоичного представления:
- Конверсия произвольного операнда в Decimal (None/число/Decimal/текст)
- Точные сложение, вычитание и умножение (arbitrary precision)
- Деление с фиксированным scale и округлением HALF_UP (без двойного округления)
- Округление до заданного числа дробных знаков (HALF_UP)
- Сужение к fixed-width целым (int32/int64) и float

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Конверсия никогда не возвращает None/NaN/Inf (невалидный ввод → 0)
2. Сложение, вычитание, умножение не теряют точность
3. Деление на ноль НЕ подавляется: пропагирует исключение модуля decimal
4. Все операции детерминированы и не зависят от thread-local decimal context

ИЗВЕСТНАЯ ПОТЕРЯ ТОЧНОСТИ:
    Числовые операнды (int, float, Fraction, ...) конвертируются через float
    (64-bit double) и его кратчайшее repr. Поэтому 0.1 → Decimal("0.1"), но
    int больше 2**53 теряет младшие разряды. Для точных значений передавайте
    Decimal или строку.

ОСТОРОЖНО (silent zero):
    Нераспознаваемый текст ("abc", "NaN") молча превращается в 0. Опечатка во
    входных данных даёт неверный результат, а не ошибку. Для строгой проверки
    используйте strict=True (OperandParseError).
"""

import logging
import math
import numbers
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_HALF_UP,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
)
from typing import Any, Callable, Final

logger = logging.getLogger(__name__)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Десятичный ноль (результат конверсии None и невалидного ввода)
DECIMAL_ZERO: Final[Decimal] = Decimal(0)

# Scale результата для divide() по умолчанию (знаков после запятой)
DEFAULT_DIVIDE_SCALE: Final[int] = 9

# Единственный режим округления: 0.5 → от нуля
ROUNDING_MODE: Final[str] = ROUND_HALF_UP

# Разрядность fixed-width целых для get_integer/get_long
INT32_BITS: Final[int] = 32
INT64_BITS: Final[int] = 64

# Контекст с максимальной точностью: add/subtract/multiply точны.
# Деление через этот контекст не выполняется (бесконечные дроби), см. divide_half_up.
ARITHMETIC_CONTEXT: Final[Context] = Context(
    prec=MAX_PREC,
    rounding=ROUND_HALF_UP,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    traps=[InvalidOperation, DivisionByZero, Overflow],
)

BinaryOperator = Callable[[Decimal, Decimal], Decimal]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class OperandParseError(ValueError):
    """
    Операнд не может быть представлен конечным Decimal.

    Возникает ТОЛЬКО при strict=True. В режиме по умолчанию такой операнд
    молча заменяется нулём.
    """

    pass


# =============================================================================
# ВАЛИДАЦИЯ И ОКРУГЛЕНИЕ
# =============================================================================


def validate_scale(scale: Any, name: str = "scale") -> int:
    """
    Валидация scale (число дробных знаков).

    Отрицательный scale допустим: округление до десятков, сотен и т.д.

    Args:
        scale: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        scale без изменений

    Raises:
        TypeError: Если scale не int (bool тоже отклоняется)
    """
    if isinstance(scale, bool) or not isinstance(scale, int):
        raise TypeError(f"{name} must be an int, got {type(scale).__name__}: {scale!r}")
    return scale


def round_half_up(value: Decimal, scale: int) -> Decimal:
    """
    Округление до scale дробных знаков по правилу HALF_UP.

    Examples:
        >>> round_half_up(Decimal("1.855"), 2)
        Decimal('1.86')
        >>> round_half_up(Decimal("-2.5"), 0)
        Decimal('-3')
        >>> round_half_up(Decimal("1250"), -2)
        Decimal('1.3E+3')
    """
    validate_scale(scale)
    exponent = Decimal((0, (1,), -scale))
    return value.quantize(exponent, rounding=ROUNDING_MODE, context=ARITHMETIC_CONTEXT)


# =============================================================================
# БИНАРНЫЕ ОПЕРАЦИИ
# =============================================================================


def decimal_add(left: Decimal, right: Decimal) -> Decimal:
    """Точное сложение."""
    return ARITHMETIC_CONTEXT.add(left, right)


def decimal_subtract(left: Decimal, right: Decimal) -> Decimal:
    """Точное вычитание."""
    return ARITHMETIC_CONTEXT.subtract(left, right)


def decimal_multiply(left: Decimal, right: Decimal) -> Decimal:
    """Точное умножение."""
    return ARITHMETIC_CONTEXT.multiply(left, right)


def divide_half_up(dividend: Decimal, divisor: Decimal, scale: int) -> Decimal:
    """
    Деление с результатом ровно scale дробных знаков, округление HALF_UP.

    Частное вычисляется как точная рациональная дробь и округляется ОДИН раз,
    поэтому двойного округления нет при любой длине мантиссы.

    Args:
        dividend: Делимое
        divisor: Делитель
        scale: Число дробных знаков результата

    Returns:
        Округлённое частное (exponent == -scale)

    Raises:
        TypeError: Если scale не int
        decimal.DivisionByZero: x / 0 при x != 0
        decimal.InvalidOperation: 0 / 0

    Examples:
        >>> divide_half_up(Decimal(13), Decimal(7), 9)
        Decimal('1.857142857')
        >>> divide_half_up(Decimal(13), Decimal(7), 2)
        Decimal('1.86')
    """
    validate_scale(scale)

    if divisor.is_zero():
        # Ошибку формирует сам decimal (DivisionByZero / DivisionUndefined)
        return ARITHMETIC_CONTEXT.divide(dividend, divisor)

    dividend_num, dividend_den = dividend.as_integer_ratio()
    divisor_num, divisor_den = divisor.as_integer_ratio()

    # dividend / divisor * 10**scale как целая дробь numerator / denominator
    numerator = dividend_num * divisor_den
    denominator = dividend_den * divisor_num
    if scale >= 0:
        numerator *= 10**scale
    else:
        denominator *= 10 ** (-scale)

    negative = (numerator < 0) != (denominator < 0)
    quotient, remainder = divmod(abs(numerator), abs(denominator))

    # HALF_UP: остаток >= половины делителя → от нуля
    if 2 * remainder >= abs(denominator):
        quotient += 1

    if negative:
        quotient = -quotient

    return Decimal(quotient).scaleb(-scale, ARITHMETIC_CONTEXT)


# =============================================================================
# КОНВЕРСИЯ ОПЕРАНДОВ
# =============================================================================


def _substitute_zero(raw: Any, reason: str, strict: bool) -> Decimal:
    if strict:
        raise OperandParseError(f"Cannot convert {raw!r} to a finite Decimal: {reason}")
    logger.debug("Operand %r coerced to zero: %s", raw, reason)
    return DECIMAL_ZERO


def _real_to_decimal(raw: numbers.Real, strict: bool) -> Decimal:
    # Через 64-bit float: известная потеря точности (см. docstring модуля)
    try:
        as_float = float(raw)
    except OverflowError:
        return _substitute_zero(raw, "out of float range", strict)

    if not math.isfinite(as_float):
        return _substitute_zero(raw, "non-finite number", strict)

    return Decimal(repr(as_float))


def _text_to_decimal(raw: Any, strict: bool) -> Decimal:
    try:
        result = ARITHMETIC_CONTEXT.create_decimal(str(raw))
    except InvalidOperation:
        return _substitute_zero(raw, "not a decimal literal", strict)

    if not result.is_finite():
        return _substitute_zero(raw, "non-finite literal", strict)

    return result


def to_decimal(raw: Any, scale: int | None = None, strict: bool = False) -> Decimal:
    """
    Конверсия произвольного значения в конечный Decimal.

    Правила:
    - None → 0 (всегда, в том числе при strict=True)
    - Decimal → без изменений (NaN/Inf → 0)
    - bool/int/float/Fraction (numbers.Real) → через float и его repr
      (NaN/Inf и int вне диапазона float → 0)
    - Иначе → разбор str(raw) как десятичного литерала (ошибка → 0)
    - scale задан → округление HALF_UP до scale дробных знаков

    Args:
        raw: Исходное значение
        scale: Число дробных знаков для округления (optional)
        strict: Бросать OperandParseError вместо подстановки нуля

    Returns:
        Конечный Decimal

    Raises:
        OperandParseError: Только при strict=True и невалидном вводе
        TypeError: Если scale задан, но не int

    Examples:
        >>> to_decimal(None)
        Decimal('0')
        >>> to_decimal(0.1)
        Decimal('0.1')
        >>> to_decimal("12.345", scale=2)
        Decimal('12.35')
        >>> to_decimal("not-a-number")
        Decimal('0')
    """
    if raw is None:
        return DECIMAL_ZERO

    if isinstance(raw, Decimal):
        result = raw if raw.is_finite() else _substitute_zero(raw, "non-finite decimal", strict)
    elif isinstance(raw, numbers.Real):
        result = _real_to_decimal(raw, strict)
    else:
        result = _text_to_decimal(raw, strict)

    if scale is not None:
        return round_half_up(result, scale)
    return result


# =============================================================================
# СУЖЕНИЕ К ЧИСЛОВЫМ ТИПАМ
# =============================================================================


def narrow_to_int(value: Decimal, bits: int) -> int:
    """
    Сужение Decimal к знаковому целому фиксированной разрядности.

    Алгоритм:
    1. Дробная часть отбрасывается (усечение к нулю, НЕ округление)
    2. Остаются младшие `bits` бит в дополнительном коде (overflow → wrap)

    Examples:
        >>> narrow_to_int(Decimal("3.5"), 32)
        3
        >>> narrow_to_int(Decimal("-3.9"), 32)
        -3
        >>> narrow_to_int(Decimal(2**31), 32)
        -2147483648
    """
    truncated = int(value)
    modulus = 1 << bits
    wrapped = truncated & (modulus - 1)
    if wrapped >= modulus >> 1:
        wrapped -= modulus
    return wrapped


def narrow_to_int32(value: Decimal) -> int:
    """Усечение к 32-bit знаковому целому."""
    return narrow_to_int(value, INT32_BITS)


def narrow_to_int64(value: Decimal) -> int:
    """Усечение к 64-bit знаковому целому."""
    return narrow_to_int(value, INT64_BITS)


def to_float(value: Decimal) -> float:
    """
    Ближайший 64-bit float.

    Вне диапазона float → ±inf, слишком малые → 0.0 (без исключений).
    """
    return float(value)

"""
Numerical Safeguards — float32 примитивы

Модуль обеспечивает единое численное представление элементов матрицы:
- Сужение float (binary64) до IEEE-754 binary32 (round-to-nearest)
- Каноническое строковое представление элемента (для plain/TeX/нотации)
- Удаление пробельных символов перед токенизацией нотации

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все элементы матрицы хранятся как float, точно представимые в binary32
2. format_entry детерминирован: parse(format_entry(x)) == x для любого float32 x
3. Переполнение float32 даёт ±inf, а не исключение
"""

import math
import numbers
import struct
from typing import Final

# =============================================================================
# FLOAT32 ПАРАМЕТРЫ
# =============================================================================

# Количество значащих цифр, достаточное для round-trip любого binary32
FLOAT32_MAX_SIGNIFICANT_DIGITS: Final[int] = 9

# Граница, до которой целые значения печатаются без экспоненты
INTEGER_DISPLAY_LIMIT: Final[float] = 1e16


# =============================================================================
# СУЖЕНИЕ
# =============================================================================


def to_float32(value: float) -> float:
    """
    Сужение числа до ближайшего binary32 значения.

    Args:
        value: Любое вещественное число (int, Fraction, float, numpy scalar)

    Returns:
        float, точно представимый в binary32.
        Значения за пределами диапазона float32 (в том числе целые,
        не помещающиеся даже в binary64) дают ±inf.

    Raises:
        TypeError: Если value не является вещественным числом

    Examples:
        >>> to_float32(13.5)
        13.5
        >>> to_float32(0.1)
        0.10000000149011612
        >>> to_float32(10**400)
        inf
    """
    if not isinstance(value, numbers.Real):
        raise TypeError(f"Matrix entries must be real numbers, got {type(value).__name__}")

    try:
        return struct.unpack("f", struct.pack("f", float(value)))[0]
    except OverflowError:
        return math.inf if value > 0 else -math.inf


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_entry(value: float) -> str:
    """
    Каноническое строковое представление элемента матрицы.

    Алгоритм:
        1. NaN/Inf → "nan", "inf", "-inf"
        2. Целые значения → без дробной части ("4", не "4.0")
        3. Иначе → кратчайшая запись %g, которая после сужения до float32
           даёт то же значение

    Examples:
        >>> format_entry(4.0)
        '4'
        >>> format_entry(13.5)
        '13.5'
        >>> format_entry(to_float32(0.1))
        '0.1'
    """
    target = to_float32(value)

    if math.isnan(target):
        return "nan"
    if math.isinf(target):
        return "inf" if target > 0 else "-inf"

    if target.is_integer() and abs(target) < INTEGER_DISPLAY_LIMIT:
        return str(int(target))

    for digits in range(1, FLOAT32_MAX_SIGNIFICANT_DIGITS + 1):
        text = f"{target:.{digits}g}"
        if to_float32(float(text)) == target:
            return text

    return repr(target)


def remove_whitespace(text: str) -> str:
    """
    Удаление всех пробельных символов (включая табуляции и переводы строк).

    Examples:
        >>> remove_whitespace(" 1, 2;\\n 3, 4 ")
        '1,2;3,4'
    """
    return "".join(text.split())

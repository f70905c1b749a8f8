"""
Notation — Текстовая нотация матрицы

Грамматика:
    matrix := row (";" row)*
    row    := entry ("," entry)*
    entry  := floating-point literal

Пробельные символы незначимы в любом месте строки:

    "4, 2, 6, 3;
     5, 2, 6, 2;
     12, 13.5, 5, 2;
     3, 5, 6, 2"

Токенизатор допускает строки разной длины: прямоугольность проверяет
конструктор Matrix (ShapeError, а не FormatError).
"""

import logging
import re
from typing import Final, Sequence

from matrixkit.core.errors import FormatError
from matrixkit.core.math.numerical_safeguards import (
    format_entry,
    remove_whitespace,
    to_float32,
)

logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

ROW_SEPARATOR: Final[str] = ";"
ENTRY_SEPARATOR: Final[str] = ","

# ASCII floating-point литерал: знак, цифры, дробная часть, экспонента; nan/inf
# Подчёркивания и не-ASCII цифры, которые принимает float(), запрещены
FLOAT_LITERAL: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|nan|inf|infinity)",
    re.IGNORECASE,
)


# =============================================================================
# PARSING
# =============================================================================


def _literal_to_float(token: str) -> float:
    if FLOAT_LITERAL.fullmatch(token) is None:
        raise ValueError(f"not a floating-point literal: {token!r}")
    return float(token)


def parse_entry(token: str, source: str) -> float:
    """
    Разбор одного элемента нотации в float32.

    Единственная точка, где строка превращается в число.

    Args:
        token: Элемент без пробелов (например, '13.5')
        source: Исходная строка целиком (для сообщения об ошибке)

    Returns:
        Значение, суженное до float32

    Raises:
        FormatError: Если token не является floating-point литералом
    """
    try:
        return to_float32(_literal_to_float(token))
    except ValueError as exc:
        raise FormatError(
            f'Error, cannot parse "{source}" into a matrix: entry "{token}" '
            f"is not a floating-point number",
            source=source,
            token=token,
        ) from exc


def parse_notation(text: str) -> list[list[float]]:
    """
    Токенизация нотации в список строк.

    Args:
        text: Строка вида "1, 2; 3, 4"

    Returns:
        Список строк (строки могут иметь разную длину)

    Raises:
        FormatError: Пустая строка после удаления пробелов или
            невалидный элемент (включая пустые элементы "1,,2" и "1,2;")
    """
    cleaned = remove_whitespace(text)
    if not cleaned:
        raise FormatError(
            f'Cannot parse an empty string into a matrix, got "{text}"',
            source=text,
        )

    rows = [
        [parse_entry(token, text) for token in row.split(ENTRY_SEPARATOR)]
        for row in cleaned.split(ROW_SEPARATOR)
    ]

    logger.debug("Parsed notation into %d row(s)", len(rows))
    return rows


# =============================================================================
# WRITING
# =============================================================================


def to_notation(rows: Sequence[Sequence[float]]) -> str:
    """
    Запись строк в нотацию (обратная операция к parse_notation).

    Examples:
        >>> to_notation([[1.0, 2.0], [3.0, 13.5]])
        '1,2;3,13.5'
    """
    return ROW_SEPARATOR.join(
        ENTRY_SEPARATOR.join(format_entry(value) for value in row) for row in rows
    )

"""
Core math modules для matrixkit

Численные примитивы: сужение до float32, форматирование, очистка нотации.
"""

from matrixkit.core.math.numerical_safeguards import (
    FLOAT32_MAX_SIGNIFICANT_DIGITS,
    INTEGER_DISPLAY_LIMIT,
    format_entry,
    remove_whitespace,
    to_float32,
)

__all__ = [
    # Constants
    "FLOAT32_MAX_SIGNIFICANT_DIGITS",
    "INTEGER_DISPLAY_LIMIT",
    # Functions
    "format_entry",
    "remove_whitespace",
    "to_float32",
]

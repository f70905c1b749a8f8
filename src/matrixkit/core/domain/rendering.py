"""
Rendering — Строковое представление матрицы

Два независимых алгоритма:
- Plain: псевдографика для консоли

    ⌈4 2 6 1 5⌉
    |3 6 9 2 2|
    ⌊0 2 2 2 4⌋

  Матрица из одной строки: [4 2 6 1 5]

- TeX: окружение bmatrix (квадратные скобки) или vmatrix (определитель)

    \\begin{bmatrix}
    4&2\\\\
    3&6
    \\end{bmatrix}

Оба алгоритма используют format_entry для чисел.
"""

from dataclasses import dataclass
from typing import Final, Sequence

from matrixkit.core.math.numerical_safeguards import format_entry

# =============================================================================
# CONSTANTS
# =============================================================================

TEX_ENV_BRACKETS: Final[str] = "bmatrix"
TEX_ENV_DETERMINANT: Final[str] = "vmatrix"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class RenderConfig:
    """Конфигурация рендеринга.

    Глифы скобок для plain-вывода и разделители для TeX.
    """

    # Матрица из одной строки
    single_open: str = "["
    single_close: str = "]"

    # Первая / последняя / внутренние строки
    top_open: str = "⌈"
    top_close: str = "⌉"
    bottom_open: str = "⌊"
    bottom_close: str = "⌋"
    middle_open: str = "|"
    middle_close: str = "|"

    entry_separator: str = " "

    # TeX
    tex_column_separator: str = "&"
    tex_row_separator: str = "\\\\"
    tex_environment: str = TEX_ENV_BRACKETS


DEFAULT_RENDER_CONFIG: Final[RenderConfig] = RenderConfig()


# =============================================================================
# PLAIN
# =============================================================================


def _row_brackets(index: int, row_count: int, config: RenderConfig) -> tuple[str, str]:
    if row_count == 1:
        return config.single_open, config.single_close
    if index == 0:
        return config.top_open, config.top_close
    if index == row_count - 1:
        return config.bottom_open, config.bottom_close
    return config.middle_open, config.middle_close


def render_plain(
    rows: Sequence[Sequence[float]],
    config: RenderConfig = DEFAULT_RENDER_CONFIG,
) -> str:
    """
    Plain-представление: каждая строка в скобках, завершается '\\n'.

    Args:
        rows: Прямоугольный буфер матрицы
        config: Глифы и разделители

    Returns:
        Многострочная строка
    """
    lines = []
    for index, row in enumerate(rows):
        opening, closing = _row_brackets(index, len(rows), config)
        body = config.entry_separator.join(format_entry(value) for value in row)
        lines.append(f"{opening}{body}{closing}\n")
    return "".join(lines)


# =============================================================================
# TEX
# =============================================================================


def render_tex(
    rows: Sequence[Sequence[float]],
    environment: str | None = None,
    config: RenderConfig = DEFAULT_RENDER_CONFIG,
) -> str:
    """
    TeX-представление матрицы.

    Элементы строки разделяются '&', строки — '\\\\' (кроме последней).
    После \\end{...} перевода строки нет.

    Args:
        rows: Прямоугольный буфер матрицы
        environment: Имя окружения (default: config.tex_environment)
        config: Разделители

    Returns:
        Блок \\begin{env} ... \\end{env}
    """
    env = environment if environment is not None else config.tex_environment
    parts = [f"\\begin{{{env}}}\n"]

    for index, row in enumerate(rows):
        parts.append(config.tex_column_separator.join(format_entry(value) for value in row))
        if index != len(rows) - 1:
            parts.append(config.tex_row_separator)
        parts.append("\n")

    parts.append(f"\\end{{{env}}}")
    return "".join(parts)

"""
Matrix — Неизменяемая прямоугольная матрица float32

Immutable Pydantic модель (frozen=True): буфер state (tuple of tuples),
размерность Dimension и вариант MatrixKind. Любая операция, порождающая матрицу,
создаёт новый экземпляр с собственной копией данных.

Способы создания:
- Matrix(data): вложенные последовательности чисел
- Matrix.parse(text): текстовая нотация "1, 2; 3, 4"
- Matrix.formulate(rows, cols, *entries): плоский список в row-major порядке
- Matrix.column_vector(values): вектор-столбец
- Matrix.from_dict(payload): словарь по JSON Schema контракту "matrix"
- Matrix.model_validate({"state": ..., "dimension": ..., "kind": ...}): те же
  инварианты через model_validator, ошибки оборачиваются в ValidationError
- get_row / get_column / as_* : производные матрицы

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Буфер содержит >= 1 строки, все строки одной длины >= 1
2. Буфер никогда не разделяется с данными вызывающего кода
3. После создания буфер, размерность и вариант не меняются
4. Инвариант варианта (SQUARE/VECTOR/AUGMENTED) проверяется при создании
"""

import logging
from enum import Enum
from typing import Any, Final, Iterable, Sequence

from pydantic import BaseModel, Field, field_validator, model_validator

from matrixkit.core.contracts.validators import validate_matrix_payload
from matrixkit.core.domain.dimension import Dimension
from matrixkit.core.domain.notation import parse_notation, to_notation
from matrixkit.core.domain.rendering import (
    DEFAULT_RENDER_CONFIG,
    TEX_ENV_BRACKETS,
    TEX_ENV_DETERMINANT,
    RenderConfig,
    render_plain,
    render_tex,
)
from matrixkit.core.errors import MatrixIndexError, ShapeError
from matrixkit.core.math.numerical_safeguards import to_float32

logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

# Расширенная матрица: минимум один столбец коэффициентов и столбец свободных членов
AUGMENTED_MIN_COLS: Final[int] = 2


# =============================================================================
# ENUMS
# =============================================================================


class MatrixKind(str, Enum):
    """Вариант матрицы (тег формы поверх одного представления)"""

    GENERIC = "generic"
    SQUARE = "square"
    VECTOR = "vector"
    AUGMENTED = "augmented"


# =============================================================================
# HELPERS
# =============================================================================


def pad(data: Sequence[Sequence[float]]) -> list[list[float]]:
    """
    Дополнение рваного массива нулями справа до длины самой длинной строки.

    Предварительная обработка перед Matrix(data): сама по себе ничего
    не валидирует и конструктором автоматически не вызывается.

    Args:
        data: Строки произвольной длины

    Returns:
        Новый список строк одинаковой длины; исходные значения
        остаются на своих позициях, новые ячейки равны 0.0

    Examples:
        >>> pad([[1, 2, 3], [4]])
        [[1, 2, 3], [4, 0.0, 0.0]]
    """
    if not data:
        return []

    longest = max(len(row) for row in data)
    return [list(row) + [0.0] * (longest - len(row)) for row in data]


def _copy_state(data: Iterable[Iterable[float]]) -> tuple[tuple[float, ...], ...]:
    return tuple(tuple(to_float32(value) for value in row) for row in data)


def _check_not_empty(state: tuple[tuple[float, ...], ...]) -> None:
    if not state:
        raise ShapeError("The input array must contain at least one row")


def _check_rectangular(state: tuple[tuple[float, ...], ...]) -> None:
    expected = len(state[0])
    for index, row in enumerate(state[1:], start=1):
        if len(row) != expected:
            raise ShapeError(
                f"Each row of the input array must have the same length: "
                f"row 0 has {expected} entries, row {index} has {len(row)}"
            )
    if expected == 0:
        raise ShapeError("The input array rows must contain at least one entry")


def _check_kind(kind: MatrixKind, dimension: Dimension) -> None:
    if kind is MatrixKind.SQUARE and not dimension.is_square():
        raise ShapeError(f"A square matrix requires rows == cols, got {dimension}")
    if kind is MatrixKind.VECTOR and dimension.cols != 1:
        raise ShapeError(f"A vector requires exactly 1 column, got {dimension}")
    if kind is MatrixKind.AUGMENTED and dimension.cols < AUGMENTED_MIN_COLS:
        raise ShapeError(
            f"An augmented matrix requires at least {AUGMENTED_MIN_COLS} columns, "
            f"got {dimension}"
        )


# =============================================================================
# MATRIX
# =============================================================================


class Matrix(BaseModel):
    """
    Прямоугольная матрица float32.

    Индексация с нуля: первый элемент — get(0, 0).
    Immutable модель (frozen=True): присваивание или удаление поля
    вызывает pydantic.ValidationError.
    """

    state: tuple[tuple[float, ...], ...] = Field(
        ..., description="Строки матрицы (row-major, float32)"
    )
    dimension: Dimension = Field(..., description="Размерность rows x cols")
    kind: MatrixKind = Field(default=MatrixKind.GENERIC, description="Вариант матрицы")

    model_config = {"frozen": True}

    def __init__(
        self,
        data: Sequence[Sequence[float]] | None = None,
        kind: MatrixKind | str = MatrixKind.GENERIC,
        **fields: Any,
    ):
        """
        Создание матрицы из вложенных последовательностей.

        Ошибки формы пробрасываются как ShapeError до pydantic-валидации,
        чтобы вызывающий код не получал их обёрнутыми в ValidationError.

        model_validate вызывает __init__ с именованными полями
        (state, dimension): они передаются pydantic без изменений,
        инварианты проверяет check_invariants.

        Args:
            data: Строки матрицы (копируются, каждый элемент сужается до float32)
            kind: Вариант матрицы (default: GENERIC)

        Raises:
            ShapeError: None / нет строк / нет столбцов / рваные строки /
                нарушен инвариант варианта
            TypeError: Элемент не является вещественным числом
        """
        if fields:
            super().__init__(kind=kind, **fields)
            return

        if data is None:
            raise ShapeError("The input array must not be None")

        state = _copy_state(data)
        _check_not_empty(state)
        _check_rectangular(state)

        kind = MatrixKind(kind)
        dimension = Dimension(rows=len(state), cols=len(state[0]))
        _check_kind(kind, dimension)

        super().__init__(state=state, dimension=dimension, kind=kind)

        logger.debug("Constructed %s matrix (%s)", kind.value, dimension)

    @field_validator("state")
    @classmethod
    def narrow_entries(cls, value: tuple[tuple[float, ...], ...]) -> tuple[tuple[float, ...], ...]:
        """Каждый элемент сужается до float32 (идемпотентно)."""
        return _copy_state(value)

    @model_validator(mode="after")
    def check_invariants(self) -> "Matrix":
        """Инварианты формы для model_validate (минуя __init__)."""
        _check_not_empty(self.state)
        _check_rectangular(self.state)
        actual = (len(self.state), len(self.state[0]))
        if self.dimension.as_tuple() != actual:
            raise ShapeError(
                f"Dimension {self.dimension} does not match entries of dimension "
                f"{actual[0]} x {actual[1]}"
            )
        _check_kind(self.kind, self.dimension)
        return self

    # -------------------------------------------------------------------------
    # Альтернативные конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "Matrix":
        """
        Создание матрицы из текстовой нотации.

        Строки разделяются ';', элементы — ','. Пробелы игнорируются:

            Matrix.parse("4, 2, 6, 3; 5, 2, 6, 2; 12, 13.5, 5, 2; 3, 5, 6, 2")

        Raises:
            FormatError: Пустая строка или невалидный элемент
            ShapeError: Строки разной длины
        """
        return cls(parse_notation(text))

    @classmethod
    def formulate(cls, row_count: int, col_count: int, *entries: float) -> "Matrix":
        """
        Создание матрицы row_count x col_count из плоского списка.

        Элементы заполняются в row-major порядке: сначала вся строка 0,
        затем вся строка 1 и т.д.

        Raises:
            ShapeError: row_count * col_count != len(entries)
        """
        if row_count * col_count != len(entries):
            raise ShapeError(
                f"Cannot format entries of length {len(entries)} into a "
                f"{row_count} x {col_count} matrix"
            )

        state = [
            list(entries[row * col_count:(row + 1) * col_count])
            for row in range(row_count)
        ]
        logger.debug("Formulated %d entries into %d x %d", len(entries), row_count, col_count)
        return cls(state)

    @classmethod
    def column_vector(cls, values: Iterable[float]) -> "Matrix":
        """
        Вектор-столбец (вариант VECTOR) из плоской последовательности.

        Raises:
            ShapeError: Последовательность пуста
        """
        return cls([[value] for value in values], kind=MatrixKind.VECTOR)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "Matrix":
        """
        Создание матрицы из словаря контракта "matrix".

        Raises:
            jsonschema.ValidationError: payload не соответствует схеме
            ShapeError: rows/cols не совпадают с entries
        """
        validate_matrix_payload(payload)

        matrix = cls(payload["entries"], kind=payload.get("kind", MatrixKind.GENERIC))
        declared = (payload["rows"], payload["cols"])
        if matrix.dimension.as_tuple() != declared:
            raise ShapeError(
                f"Declared dimension {declared[0]} x {declared[1]} does not match "
                f"entries of dimension {matrix.dimension}"
            )
        return matrix

    # -------------------------------------------------------------------------
    # Запросы формы
    # -------------------------------------------------------------------------

    @property
    def row_count(self) -> int:
        return self.dimension.rows

    @property
    def col_count(self) -> int:
        return self.dimension.cols

    def is_square(self) -> bool:
        return self.dimension.is_square()

    def is_row_vector(self) -> bool:
        return self.dimension.rows == 1

    def is_column_vector(self) -> bool:
        return self.dimension.cols == 1

    # -------------------------------------------------------------------------
    # Доступ к элементам
    # -------------------------------------------------------------------------

    def get(self, row: int, col: int) -> float:
        """
        Элемент (row, col).

        Raises:
            MatrixIndexError: Индекс отрицательный или >= размерности
        """
        if row < 0 or row >= self.row_count:
            raise MatrixIndexError(row, "row", self.row_count)
        if col < 0 or col >= self.col_count:
            raise MatrixIndexError(col, "column", self.col_count)
        return self.state[row][col]

    def component(self, index: int) -> float:
        """
        Компонента вектора (только для варианта VECTOR).

        Raises:
            ShapeError: Матрица не является VECTOR
            MatrixIndexError: index вне [0, row_count)
        """
        if self.kind is not MatrixKind.VECTOR:
            raise ShapeError(
                f"Component access requires a vector, got a {self.kind.value} matrix"
            )
        if index < 0 or index >= self.row_count:
            raise MatrixIndexError(index, "component", self.row_count)
        return self.state[index][0]

    def to_list(self) -> list[list[float]]:
        """Глубокая копия буфера."""
        return [list(row) for row in self.state]

    # -------------------------------------------------------------------------
    # Производные матрицы
    # -------------------------------------------------------------------------

    def get_column(self, index: int) -> "Matrix":
        """
        Столбец index как вектор (вариант VECTOR, row_count x 1).

        Raises:
            MatrixIndexError: index вне [0, col_count)
        """
        if index < 0 or index >= self.col_count:
            raise MatrixIndexError(index, "column", self.col_count)
        return Matrix.column_vector(row[index] for row in self.state)

    def get_row(self, index: int) -> "Matrix":
        """
        Строка index как матрица 1 x col_count.

        Raises:
            MatrixIndexError: index вне [0, row_count)
        """
        if index < 0 or index >= self.row_count:
            raise MatrixIndexError(index, "row", self.row_count)
        return Matrix([self.state[index]])

    def as_square_matrix(self) -> "Matrix":
        """
        Raises:
            ShapeError: Количество строк и столбцов не совпадает
        """
        if not self.is_square():
            raise ShapeError(
                f"Cannot convert a non-square matrix ({self.dimension}) into a square matrix"
            )
        return Matrix(self.state, kind=MatrixKind.SQUARE)

    def as_vector(self) -> "Matrix":
        """
        Raises:
            ShapeError: Количество столбцов не равно 1
        """
        if not self.is_column_vector():
            raise ShapeError(
                f"Cannot convert a matrix with {self.col_count} columns into a vector"
            )
        return self.get_column(0)

    def as_generic_matrix(self) -> "Matrix":
        return Matrix(self.state)

    def as_augmented_matrix(self) -> "Matrix":
        """
        Raises:
            ShapeError: Меньше AUGMENTED_MIN_COLS столбцов
        """
        if self.col_count < AUGMENTED_MIN_COLS:
            raise ShapeError(
                f"Cannot convert a matrix with {self.col_count} column(s) into an "
                f"augmented matrix, at least {AUGMENTED_MIN_COLS} are required"
            )
        return Matrix(self.state, kind=MatrixKind.AUGMENTED)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    @staticmethod
    def compare(first: "Matrix", second: "Matrix") -> bool:
        """
        Структурное сравнение: размерности и точное равенство всех элементов.

        Без epsilon-толерантности. Вариант (kind) не сравнивается.
        """
        if first.dimension != second.dimension:
            return False
        return all(
            a == b
            for row_a, row_b in zip(first.state, second.state)
            for a, b in zip(row_a, row_b)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix.compare(self, other)

    def __hash__(self) -> int:
        return hash((self.dimension.as_tuple(), self.state))

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def render_plain(self, config: RenderConfig = DEFAULT_RENDER_CONFIG) -> str:
        return render_plain(self.state, config)

    def render_tex(
        self,
        environment: str | None = None,
        config: RenderConfig = DEFAULT_RENDER_CONFIG,
    ) -> str:
        return render_tex(self.state, environment, config)

    def tex(self) -> str:
        """TeX с квадратными скобками (bmatrix)."""
        return self.render_tex(TEX_ENV_BRACKETS)

    def tex_determinant(self) -> str:
        """TeX с вертикальными чертами (vmatrix), обозначение определителя."""
        return self.render_tex(TEX_ENV_DETERMINANT)

    def to_notation(self) -> str:
        return to_notation(self.state)

    def to_dict(self) -> dict[str, Any]:
        """Словарь по JSON Schema контракту "matrix"."""
        return {
            "kind": self.kind.value,
            "rows": self.row_count,
            "cols": self.col_count,
            "entries": self.to_list(),
        }

    def __str__(self) -> str:
        return self.render_plain()

    def __repr__(self) -> str:
        return f"<Matrix {self.dimension} {self.kind.value}: {self.to_notation()!r}>"

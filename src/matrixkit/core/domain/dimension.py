"""
Dimension — Размерность матрицы

Immutable Pydantic модель (rows, cols). Используется для проверки границ
индексов и сравнения форм. Собственной валидации >= 1 не выполняет,
это обязанность Matrix.
"""

from pydantic import BaseModel, Field


class Dimension(BaseModel):
    """
    Пара (rows, cols).

    Immutable модель (frozen=True): создаётся один раз на матрицу
    и никогда не изменяется.
    """

    rows: int = Field(..., ge=0, description="Количество строк")
    cols: int = Field(..., ge=0, description="Количество столбцов")

    model_config = {"frozen": True}

    def is_square(self) -> bool:
        """Количество строк совпадает с количеством столбцов."""
        return self.rows == self.cols

    def as_tuple(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    def __str__(self) -> str:
        return f"{self.rows} x {self.cols}"

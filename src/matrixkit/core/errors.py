"""
Errors — Таксономия ошибок matrixkit

Три вида ошибок, все неустранимые в точке возникновения:
- ShapeError: нарушение прямоугольности / размерности / инварианта варианта
- FormatError: текстовая нотация не разбирается
- MatrixIndexError: индекс строки/столбца/компоненты вне диапазона

Ошибки не логируются и не заменяются значениями по умолчанию:
они сразу пробрасываются вызывающему коду.
"""


class MatrixError(Exception):
    """Базовый класс всех ошибок matrixkit."""

    pass


class ShapeError(MatrixError, ValueError):
    """
    Нарушение формы матрицы.

    Возникает при пустом входе, рваных строках, несовпадении произведения
    размерностей при formulate, нарушении инварианта варианта
    (SQUARE/VECTOR/AUGMENTED).
    """

    pass


class FormatError(MatrixError, ValueError):
    """
    Текстовая нотация не может быть разобрана в матрицу.

    Attributes:
        source: Исходная строка (без изменений, для диагностики)
        token: Элемент, который не удалось разобрать (None для пустой строки)
    """

    def __init__(self, message: str, source: str, token: str | None = None):
        super().__init__(message)
        self.source = source
        self.token = token


class MatrixIndexError(MatrixError, IndexError):
    """
    Индекс вне допустимого диапазона.

    Attributes:
        index: Переданный индекс
        axis: Ось доступа ("row", "column", "component")
        bound: Верхняя граница (исключительно), допустимо 0 <= index < bound
    """

    def __init__(self, index: int, axis: str, bound: int):
        super().__init__(
            f"{axis.capitalize()} index {index} is out of bounds, "
            f"expected 0 <= index < {bound}"
        )
        self.index = index
        self.axis = axis
        self.bound = bound

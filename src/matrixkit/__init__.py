"""
matrixkit — immutable float32 matrices

Construction (nested sequences, text notation, row-major lists),
shape queries, slicing, variant conversion, structural comparison,
plain and TeX rendering.
"""

import logging

from matrixkit.core.domain import Dimension, Matrix, MatrixKind, RenderConfig, pad
from matrixkit.core.errors import FormatError, MatrixError, MatrixIndexError, ShapeError

__version__ = "0.1.0"

# Библиотека не настраивает логирование сама, см. matrixkit.logging_config
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Dimension",
    "Matrix",
    "MatrixKind",
    "RenderConfig",
    "pad",
    # Errors
    "MatrixError",
    "ShapeError",
    "FormatError",
    "MatrixIndexError",
]

"""
Domain models and value objects.

Contains the matrix value object, its dimension record, text notation
and rendering.
"""

from matrixkit.core.domain.dimension import Dimension
from matrixkit.core.domain.matrix import (
    AUGMENTED_MIN_COLS,
    Matrix,
    MatrixKind,
    pad,
)
from matrixkit.core.domain.notation import (
    ENTRY_SEPARATOR,
    ROW_SEPARATOR,
    parse_entry,
    parse_notation,
    to_notation,
)
from matrixkit.core.domain.rendering import (
    DEFAULT_RENDER_CONFIG,
    TEX_ENV_BRACKETS,
    TEX_ENV_DETERMINANT,
    RenderConfig,
    render_plain,
    render_tex,
)

__all__ = [
    # Dimension
    "Dimension",
    # Matrix
    "AUGMENTED_MIN_COLS",
    "Matrix",
    "MatrixKind",
    "pad",
    # Notation
    "ENTRY_SEPARATOR",
    "ROW_SEPARATOR",
    "parse_entry",
    "parse_notation",
    "to_notation",
    # Rendering
    "DEFAULT_RENDER_CONFIG",
    "TEX_ENV_BRACKETS",
    "TEX_ENV_DETERMINANT",
    "RenderConfig",
    "render_plain",
    "render_tex",
]

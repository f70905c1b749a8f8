"""
Contract Validation Module

Валидация сериализованных матриц по JSON Schema контрактам.
"""

from .validators import (
    ContractValidator,
    MatrixValidator,
    SchemaLoader,
    validate_matrix_payload,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MatrixValidator",
    # Functions
    "validate_matrix_payload",
]

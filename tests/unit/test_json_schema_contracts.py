"""
Tests for JSON Schema Contract Validators

Тестирование контракта matrix:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей, типов и constraints
- Интеграция с Matrix.to_dict / Matrix.from_dict
"""

import json

import pytest
from jsonschema import ValidationError

from matrixkit import Matrix, MatrixKind, ShapeError
from matrixkit.core.contracts import (
    MatrixValidator,
    SchemaLoader,
    validate_matrix_payload,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_payload():
    """Валидный словарь матрицы 2 x 3."""
    return {
        "kind": "generic",
        "rows": 2,
        "cols": 3,
        "entries": [[1.0, 2.0, 3.0], [4.0, 5.0, 6.5]],
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем."""

    def test_load_matrix_schema(self):
        schema = SchemaLoader().load_schema("matrix")
        assert schema["title"] == "matrix"
        assert set(schema["required"]) == {"kind", "rows", "cols", "entries"}

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("matrix") is loader.load_schema("matrix")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "nowhere")

    def test_invalid_schema(self, tmp_path):
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_kind_enum_matches_matrix_kind(self):
        schema = SchemaLoader().load_schema("matrix")
        assert set(schema["properties"]["kind"]["enum"]) == {kind.value for kind in MatrixKind}


# =============================================================================
# VALIDATION
# =============================================================================


class TestMatrixValidator:
    """Тесты валидации словаря матрицы."""

    def test_valid(self, valid_payload):
        validate_matrix_payload(valid_payload)
        assert MatrixValidator().is_valid(valid_payload)

    @pytest.mark.parametrize("field", ["kind", "rows", "cols", "entries"])
    def test_missing_required(self, valid_payload, field):
        del valid_payload[field]
        with pytest.raises(ValidationError):
            validate_matrix_payload(valid_payload)

    def test_unknown_kind(self, valid_payload):
        valid_payload["kind"] = "diagonal"
        with pytest.raises(ValidationError):
            validate_matrix_payload(valid_payload)

    def test_zero_rows(self, valid_payload):
        valid_payload["rows"] = 0
        with pytest.raises(ValidationError):
            validate_matrix_payload(valid_payload)

    def test_non_numeric_entry(self, valid_payload):
        valid_payload["entries"][0][1] = "2"
        with pytest.raises(ValidationError):
            validate_matrix_payload(valid_payload)

    def test_empty_row(self, valid_payload):
        valid_payload["entries"] = [[]]
        assert not MatrixValidator().is_valid(valid_payload)

    def test_additional_property(self, valid_payload):
        valid_payload["dtype"] = "float32"
        errors = list(MatrixValidator().iter_errors(valid_payload))
        assert len(errors) == 1


# =============================================================================
# MATRIX INTEGRATION
# =============================================================================


class TestMatrixDictRoundTrip:
    """Интеграция Matrix.to_dict / Matrix.from_dict."""

    def test_to_dict(self):
        payload = Matrix([[1, 2], [3, 4]]).as_square_matrix().to_dict()
        assert payload == {
            "kind": "square",
            "rows": 2,
            "cols": 2,
            "entries": [[1.0, 2.0], [3.0, 4.0]],
        }
        validate_matrix_payload(payload)

    def test_to_dict_json_serializable(self):
        payload = Matrix.column_vector([0.5, 1.5]).to_dict()
        restored = Matrix.from_dict(json.loads(json.dumps(payload)))
        assert restored.kind is MatrixKind.VECTOR
        assert restored == Matrix.column_vector([0.5, 1.5])

    def test_from_dict(self, valid_payload):
        matrix = Matrix.from_dict(valid_payload)
        assert matrix.get(1, 2) == 6.5
        assert matrix.kind is MatrixKind.GENERIC

    def test_from_dict_schema_violation(self, valid_payload):
        valid_payload["rows"] = "2"
        with pytest.raises(ValidationError):
            Matrix.from_dict(valid_payload)

    def test_from_dict_dimension_mismatch(self, valid_payload):
        valid_payload["cols"] = 2
        with pytest.raises(ShapeError, match="does not match"):
            Matrix.from_dict(valid_payload)

    def test_from_dict_ragged(self, valid_payload):
        valid_payload["entries"] = [[1.0, 2.0, 3.0], [4.0]]
        with pytest.raises(ShapeError):
            Matrix.from_dict(valid_payload)

    def test_from_dict_kind_invariant(self, valid_payload):
        valid_payload["kind"] = "square"
        with pytest.raises(ShapeError):
            Matrix.from_dict(valid_payload)

"""Tests for REST error response models."""

from materials_explorer.entrypoints.http.error_responses import ErrorDetail, ErrorResponse


class TestErrorDetail:
    """Tests for ErrorDetail model."""

    def test_creates_error_detail_with_all_fields(self) -> None:
        detail = ErrorDetail(
            field="crystal_system",
            message="'hexagonall' is not a value of this catalog",
            code="UNKNOWN_VALUE",
        )

        assert detail.field == "crystal_system"
        assert detail.code == "UNKNOWN_VALUE"

    def test_code_is_optional(self) -> None:
        detail = ErrorDetail(field="lower", message="Input should be a valid number")

        assert detail.model_dump() == {
            "field": "lower",
            "message": "Input should be a valid number",
            "code": None,
        }


class TestErrorResponse:
    """Tests for ErrorResponse model."""

    def test_simple_error(self) -> None:
        response = ErrorResponse(detail="Session not found", code="NOT_FOUND")

        assert response.errors is None
        assert response.model_dump(exclude_none=True) == {
            "detail": "Session not found",
            "code": "NOT_FOUND",
        }

    def test_error_with_field_details(self) -> None:
        response = ErrorResponse(
            detail="Catalog failed validation",
            code="CATALOG_LOAD_ERROR",
            errors=[
                ErrorDetail(field="[0].nsites", message="Input should be a valid integer", code="int_type"),
                ErrorDetail(field="[4].elements", message="Value error, elements must not repeat"),
            ],
        )

        data = response.model_dump()

        assert len(data["errors"]) == 2
        assert data["errors"][0]["field"] == "[0].nsites"
        assert data["errors"][1]["code"] is None

    def test_openapi_examples_are_declared(self) -> None:
        schema = ErrorResponse.model_json_schema()

        assert "examples" in schema

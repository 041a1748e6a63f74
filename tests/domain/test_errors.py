"""Tests for domain error classes."""

from materials_explorer.domain.errors import (
    DomainError,
    LoadError,
    NotFoundError,
    ParseError,
    ValidationError,
)


class TestDomainError:
    """Tests for base DomainError class."""

    def test_creates_error_with_message(self) -> None:
        error = DomainError("Something went wrong")

        assert error.message == "Something went wrong"
        assert error.error_code == "DOMAIN_ERROR"
        assert error.context == {}

    def test_to_dict_returns_structured_format(self) -> None:
        error = DomainError("Test error", facet="density", value=3)

        assert error.to_dict() == {
            "message": "Test error",
            "code": "DOMAIN_ERROR",
            "facet": "density",
            "value": 3,
        }

    def test_str_representation(self) -> None:
        assert str(DomainError("Test message")) == "Test message"


class TestValidationError:
    """Tests for ValidationError class."""

    def test_default_message_without_errors(self) -> None:
        error = ValidationError()

        assert error.message == "Validation error"
        assert error.errors is None
        assert error.to_dict() == {"message": "Validation error", "code": "VALIDATION_ERROR"}

    def test_field_errors_are_included_in_dict(self) -> None:
        errors = [{"field": "facet", "message": "Unknown facet 'x'", "code": "UNKNOWN_FACET"}]
        error = ValidationError(errors=errors)

        assert error.message == "Validation failed"
        assert error.to_dict()["errors"] == errors


class TestLoadError:
    """LoadError is a validation failure with its own code."""

    def test_is_validation_error_with_own_code(self) -> None:
        error = LoadError("Catalog failed validation", errors=[{"field": "[0].density", "message": "x"}])

        assert isinstance(error, ValidationError)
        assert error.error_code == "CATALOG_LOAD_ERROR"
        assert error.to_dict()["code"] == "CATALOG_LOAD_ERROR"


class TestParseError:
    def test_keeps_raw_text(self) -> None:
        error = ParseError("3.5x")

        assert error.error_code == "PARSE_ERROR"
        assert error.context == {"raw": "3.5x"}
        assert "3.5x" in error.message


class TestNotFoundError:
    def test_message_with_identifier(self) -> None:
        error = NotFoundError("Material", "mp-1")

        assert error.message == "Material with identifier 'mp-1' not found"
        assert error.context == {"resource": "Material", "identifier": "mp-1"}

    def test_message_without_identifier(self) -> None:
        assert NotFoundError("Session").message == "Session not found"

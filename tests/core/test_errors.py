"""Error hierarchy — status codes and public bodies."""

from reviews_api.core.errors import (
    BadRequestError,
    ErrorCategory,
    InternalError,
    NotFoundError,
    StorageError,
    UnauthorizedError,
    ValidationFailedError,
)


def test_error_statuses():
    assert NotFoundError("Review not found").http_status == 404
    assert BadRequestError("No fields to update").http_status == 400
    assert UnauthorizedError("Invalid API key").http_status == 401
    assert InternalError("Failed to fetch reviews").http_status == 500


def test_simple_errors_use_error_envelope():
    assert UnauthorizedError("API key is required").to_response() == {
        "error": "API key is required",
    }


def test_validation_errors_use_errors_envelope():
    exc = ValidationFailedError(["a", "b"])
    assert exc.http_status == 400
    assert exc.category == ErrorCategory.VALIDATION
    assert exc.to_response() == {"errors": ["a", "b"]}


def test_storage_error_hides_driver_detail():
    exc = StorageError("connection refused on 10.0.0.5", "list")
    assert exc.detail == "connection refused on 10.0.0.5"
    assert exc.to_response() == {"error": "Internal server error"}
    assert "10.0.0.5" not in str(exc.to_response())

# student_registry/exceptions.py
# Exception taxonomy for the API and the JSON handlers that render it.
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError


class StudentRegistryException(Exception):
    """
    Base exception for the Student Registry API.

    Carries the HTTP status and a machine-readable code so handlers can
    render a structured response.
    """

    def __init__(
        self,
        message: str,
        code: str = "STUDENT_REGISTRY_ERROR",
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.details:
            result["details"] = self.details
        return result


class InvalidInputError(StudentRegistryException):
    """Raised when a mapper is handed an absent DTO."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_INPUT",
            status_code=400,
        )


class ValidationFailedError(StudentRegistryException):
    """Raised when one or more DTO fields break their rules."""

    def __init__(self, errors: Dict[str, str]):
        super().__init__(
            message=f"Validation failed for: {', '.join(errors)}",
            code="VALIDATION_FAILED",
            status_code=400,
            details=errors,
        )
        self.errors = errors


class StudentNotFoundError(StudentRegistryException):
    """Raised when a student ID doesn't exist."""

    def __init__(self, student_id: int):
        super().__init__(
            message=f"Student not found: {student_id}",
            code="STUDENT_NOT_FOUND",
            status_code=404,
            details={"student_id": student_id},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def student_registry_exception_handler(
    request: Request,
    exc: StudentRegistryException
) -> JSONResponse:
    """Render a StudentRegistryException; field errors go out as a bare field->message map."""
    if isinstance(exc, ValidationFailedError):
        return JSONResponse(status_code=exc.status_code, content=exc.errors)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def integrity_error_handler(
    request: Request,
    exc: IntegrityError
) -> JSONResponse:
    """Uniqueness and foreign key violations raised by the datastore."""
    return JSONResponse(
        status_code=409,
        content={
            "detail": "The request conflicts with existing data",
            "code": "PERSISTENCE_CONFLICT",
        }
    )

"""Error handling utilities for request validation and internal errors."""
from typing import List, Dict, Any

from fastapi.responses import JSONResponse
from pydantic import ValidationError


def describe_validation_errors(validation_error: ValidationError) -> List[Dict[str, Any]]:
    """Convert Pydantic validation errors to field/error pairs."""
    errors = []

    for error in validation_error.errors():
        field = ".".join(str(loc) for loc in error["loc"])
        error_type = error["type"]
        error_msg = error["msg"]

        if field == "FileName" and error_type == "string_type":
            error_msg = "FileName must be a string"
        elif error_type == "model_type":
            error_msg = "Request body must be a JSON object"

        errors.append({
            "field": field or "body",
            "error": error_msg
        })

    return errors


def create_internal_error_response() -> JSONResponse:
    """Create standardized internal error response."""
    return JSONResponse(
        status_code=500,
        content={
            "message": "Internal error",
            "errors": []
        }
    )

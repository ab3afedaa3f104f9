"""
SimpleForm Backend: Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the three failure kinds of the API.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return JSON error responses with the matching HTTP status code.
Who:   Raised by validation and the response store; caught by handlers.

Exception Hierarchy:
    SimpleFormError (base)
    ├── ValidationError   → 400 Bad Request (client can fix)
    ├── NotFoundError     → 404 Not Found
    └── StorageError      → 500 Internal Server Error
"""

from typing import Any, Dict, List, Optional


class SimpleFormError(Exception):
    """
    Base exception for all SimpleForm application errors.

    Attributes:
        message:  Human-readable error description, returned in the API response
        context:  Additional debug info, logged and returned only where safe
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(SimpleFormError):
    """
    Raised when a submitted record breaks a field constraint.

    When:    Missing/empty name, email or feedback; rating outside 1..5;
             malformed JSON or wrong field types.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "Response validation failed: name is required",
            "details": {"fields": ["name"]},
            "request_id": "a1b2c3d4"
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        fields: Optional[List[str]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if fields:
            ctx["fields"] = list(fields)
        super().__init__(message=message, context=ctx)
        self.fields = list(fields or [])


class NotFoundError(SimpleFormError):
    """
    Raised when no record matches the requested identifier.

    When:    GET/PUT/DELETE /responses/{id} with an unknown or malformed id.
    HTTP:    404 Not Found

    SQLAlchemy returns None for missing rows; the store converts that None
    into this exception so routes stay free of status-code logic.
    """

    def __init__(
        self,
        resource: str = "Response",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)
        self.resource_id = resource_id


class StorageError(SimpleFormError):
    """
    Raised when the storage engine fails unexpectedly.

    When:    Connection lost, driver error, constraint violation the
             validator did not anticipate.
    HTTP:    500 Internal Server Error

    Never retried; the failure description is attached to the response.
    """

    def __init__(
        self,
        message: str = "A storage error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

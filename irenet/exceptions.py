"""
Irenet Backend — Custom Exception Hierarchy
===========================================

What:  Application-specific exceptions for the three failure kinds a
       resource operation can produce.
How:   Each exception carries a client-facing message and an optional
       context dict. Global handlers registered in main.py turn them into
       `{"success": false, "error": <message>}` responses.
Who:   Raised by services and the request-body dependency.

Exception Hierarchy:
    IrenetError (base)
    ├── ValidationError   → 400 Bad Request (missing/unparseable input)
    ├── NotFoundError     → 404 Not Found (read of an absent row)
    └── DatabaseError     → 500 Internal Server Error (any storage failure)

Storage failures are not classified: a duplicate email, a foreign key
violation and a lost connection all become DatabaseError, and the message
returned to the client is the underlying driver message, verbatim.
"""

from typing import Any, Dict, Optional

from sqlalchemy.exc import DBAPIError, IntegrityError, SQLAlchemyError


class IrenetError(Exception):
    """
    Base exception for all Irenet application errors.

    Attributes:
        message:  Client-facing error text, returned as the `error` field
        context:  Additional debug info (logged, not returned)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(IrenetError):
    """
    Raised when a required field is missing or the body cannot be parsed.

    HTTP: 400 Bad Request. The message is static ("Missing required fields",
    "Status is required") so clients can match on it.
    """

    def __init__(
        self,
        message: str = "Missing required fields",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(IrenetError):
    """
    Raised when a single-row read finds nothing.

    HTTP: 404 Not Found. Only reads raise this; updates of absent rows
    succeed silently.
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)


class DatabaseError(IrenetError):
    """
    Raised when a database statement fails.

    HTTP: 500 Internal Server Error, with the driver's message passed
    through as-is.
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

    @classmethod
    def from_sqlalchemy(cls, exc: SQLAlchemyError, operation: str) -> "DatabaseError":
        """
        Wraps a SQLAlchemy exception, keeping the driver-level message.

        DBAPIError's own str() appends the SQL text and parameters; the
        original driver exception (`exc.orig`) carries just the message.
        """
        if isinstance(exc, DBAPIError) and exc.orig is not None:
            message = str(exc.orig)
        else:
            message = str(exc)
        context = {
            "operation": operation,
            "error_type": type(exc).__name__,
            "constraint_violation": isinstance(exc, IntegrityError),
        }
        return cls(message=message, context=context)

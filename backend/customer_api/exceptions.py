"""
Customer API — Custom Exception Hierarchy
==========================================

What:  Defines application-specific exceptions for different error scenarios.
Why:   Custom exceptions map cleanly onto HTTP status codes without try/except
       blocks in every route handler.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by services and auth dependencies; caught by global handlers.
When:  During request processing, before or inside a route handler.

Exception Hierarchy:
    CustomerApiError (base)
    ├── ValidationError        → 400 Bad Request
    ├── AuthenticationError    → 401 Unauthorized (missing/invalid bearer token)
    ├── AuthorizationError     → 403 Forbidden (authenticated, policy failed)
    ├── NotFoundError          → 404 Not Found
    └── DatabaseError          → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class CustomerApiError(Exception):
    """
    Base exception for all Customer API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, returned only where the handler allows)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(CustomerApiError):
    """
    Raised when client input is well-formed but not acceptable.

    HTTP:    400 Bad Request
    When:    PUT body carries an id that differs from the path id.
    Schema-level problems (wrong types, malformed JSON) stay with FastAPI's 422.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class AuthenticationError(CustomerApiError):
    """
    Raised when a request to a protected route has no usable bearer token.

    HTTP:    401 Unauthorized, with `WWW-Authenticate: Bearer`
    When:    Header missing, scheme is not Bearer, signature/audience/issuer
             check fails, or the token has expired.
    """

    def __init__(
        self,
        message: str = "Not authenticated",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class AuthorizationError(CustomerApiError):
    """
    Raised when an authenticated principal does not satisfy a route's policy.

    HTTP:    403 Forbidden
    Distinct from AuthenticationError: the caller is known, just not allowed.
    """

    def __init__(
        self,
        policy: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["policy"] = policy
        super().__init__(
            message=f"Access denied: policy '{policy}' is not satisfied",
            context=ctx,
        )
        self.policy = policy


class NotFoundError(CustomerApiError):
    """
    Raised when a requested resource does not exist.

    HTTP:    404 Not Found
    SQLAlchemy returns None for missing rows; the service layer converts
    that into this exception.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(CustomerApiError):
    """
    Raised when a database operation fails unexpectedly.

    HTTP:    500 Internal Server Error
    When:    Connection lost, constraint violation (e.g. duplicate customer id).

    The client always receives a generic message; the original error type
    lives in `context` and is logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

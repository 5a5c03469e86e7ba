"""
NoteVault Backend — Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for each error scenario.
How:   Each exception carries a user-facing message, an optional context
       dict and the HTTP status it maps to. Global handlers registered in
       main.py turn them into structured JSON responses.
Who:   Raised by services, repositories and the access guard.

Exception Hierarchy:
    NoteVaultError (base)
    ├── ValidationError          → 400 Bad Request (field-level messages)
    ├── AuthError                → 401 Unauthorized / 403 Forbidden
    ├── ConflictError            → 403 Forbidden (duplicate email)
    │   └── DuplicateRecordError → raised by repositories on unique violations
    ├── NotFoundError            → 404 Not Found
    └── DatabaseError            → 500 Internal Server Error
"""

from typing import Any, Dict, List, Optional


class NoteVaultError(Exception):
    """
    Base exception for all NoteVault application errors.

    Attributes:
        message:      User-facing error description (safe to return in API response)
        context:      Additional debug info (logged, returned only where a handler opts in)
        status_code:  HTTP status the global handler responds with
        error_code:   Machine-readable error identifier in the response body
    """

    status_code: int = 500
    error_code: str = "server_error"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NoteVaultError):
    """
    Raised when client input fails validation.

    `errors` maps field name → list of messages, e.g.
    {"email": ["Email is not valid"], "password": ["Password is not provided"]}.

    Example response:
        {
            "error": "validation_error",
            "message": "Email is not valid",
            "details": {"fields": {"email": ["Email is not valid"]}}
        }
    """

    status_code = 400
    error_code = "validation_error"

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        errors: Optional[Dict[str, List[str]]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        self.errors: Dict[str, List[str]] = dict(errors or {})
        if field and field not in self.errors:
            self.errors[field] = [message]
        if self.errors:
            ctx["fields"] = self.errors
        super().__init__(message=message, context=ctx)
        self.field = field


class AuthError(NoteVaultError):
    """
    Raised when a caller cannot be authenticated.

    Two flavours share this class:
        - credential failures on sign-in → 403, deliberately generic message
        - missing / invalid / expired bearer token → 401

    The message never says which part of the credentials was wrong.
    """

    error_code = "unauthorized"

    def __init__(
        self,
        message: str = "Unauthorized",
        status_code: int = 401,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
        self.status_code = status_code
        if status_code == 403:
            self.error_code = "forbidden"


class ConflictError(NoteVaultError):
    """
    Raised when a write would violate a uniqueness rule.

    When:    Sign-up or profile edit with an email that already belongs to a user.
    HTTP:    403 Forbidden (mirrors the public contract of the API).
    """

    status_code = 403
    error_code = "conflict"

    def __init__(
        self,
        message: str = "Resource already exists",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class DuplicateRecordError(ConflictError):
    """Raised by repositories when the store rejects a duplicate unique value."""

    def __init__(
        self,
        field: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=f"{field} already exists", field=field, context=context)


class NotFoundError(NoteVaultError):
    """
    Raised when a requested resource does not exist.

    Note lookups never raise this: a note that is missing or owned by
    someone else is an empty result. It is used for records the caller
    must be able to see, such as their own profile.
    """

    status_code = 404
    error_code = "not_found"

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


class DatabaseError(NoteVaultError):
    """
    Raised when database operations fail unexpectedly.

    The message returned to the client is always generic; the original
    exception type is kept in `context` for server-side logs only.
    """

    status_code = 500
    error_code = "server_error"

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

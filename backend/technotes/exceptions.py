"""
TechNotes Backend: Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the users/notes rules.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the matching status code.
Who:   Raised by repositories and services; caught by global handlers.

Exception Hierarchy:
    TechNotesError (base)
    ├── ValidationError     → 400 Bad Request (missing or mistyped field)
    ├── NotFoundError       → 400 Bad Request (unknown id, empty collection)
    ├── ConflictError       → 409 Conflict (duplicate username/title, owned notes)
    └── StorageError        → 500 Internal Server Error
        └── RejectedWrite   → a constraint refused the row; services answer 400
            └── UniqueViolation → services answer 409 (ConflictError)

NotFoundError maps to 400 rather than 404: the users/notes API reports a
missing record the same way it reports a bad body.
"""

from typing import Any, Dict, Optional


class TechNotesError(Exception):
    """
    Base exception for all TechNotes application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, returned only for client errors)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(TechNotesError):
    """
    Raised when client input fails validation.

    When:    Missing required fields, non-boolean flags, empty role lists,
             or a write the persistence layer refused.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "All fields are required",
            "details": {"fields": ["title", "completed"]}
        }
    """

    def __init__(
        self,
        message: str = "All fields are required",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(TechNotesError):
    """
    Raised when a referenced record, or any record at all, does not exist.

    When:    Update/delete of an unknown id; listing an empty collection.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "The requested record was not found",
        resource: Optional[str] = None,
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if resource:
            ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class ConflictError(TechNotesError):
    """
    Raised when a write would break a uniqueness or ownership rule.

    When:    Duplicate username, duplicate note title, deleting a user who
             still owns notes.
    HTTP:    409 Conflict
    """

    def __init__(
        self,
        message: str = "Conflicting record",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class StorageError(TechNotesError):
    """
    Raised when a database operation fails unexpectedly.

    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic.
        Constraint names and SQL are logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class RejectedWrite(StorageError):
    """
    Raised by repositories when an integrity constraint refuses a write.

    Services report it as ValidationError ("Invalid ... data received").
    """

    def __init__(
        self,
        message: str = "The record was rejected by the database",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class UniqueViolation(RejectedWrite):
    """
    Raised by repositories when a unique index rejects a write.

    Services catch this and raise ConflictError, so two concurrent creates
    racing past the duplicate check still produce a 409 for the loser.
    """

    def __init__(
        self,
        message: str = "Unique constraint violated",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

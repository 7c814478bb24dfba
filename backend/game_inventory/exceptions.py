"""
Game Inventory — Custom Exception Hierarchy
============================================

What:  Application-specific exceptions for the failure modes of a request.
How:   Each exception carries a message and optional context dict.
       Global handlers (registered in main.py) turn NotFoundError and
       DatabaseError into rendered error pages; routes catch the form and
       delete exceptions themselves because those redisplay a page.
Who:   Raised by services and the store; caught by routes and handlers.

Exception Hierarchy:
    InventoryError (base)
    ├── NotFoundError         → 404 error page
    ├── FormValidationError   → form redisplayed with messages (200)
    ├── DeleteBlockedError    → delete confirmation redisplayed (200)
    └── DatabaseError         → 500 error page, details logged only
"""

from typing import Any, Dict, List, Optional, Sequence


class InventoryError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to render)
        context:  Additional debug info (logged but NOT rendered)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(InventoryError):
    """
    Raised when a requested identifier does not resolve to a record.

    The store returns None for missing rows; services convert that into
    this exception so the handler can answer with a 404 page.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource.capitalize()} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class FormValidationError(InventoryError):
    """
    Raised when one or more submitted form fields fail validation.

    Carries every field error (not just the first) and the sanitized
    values so the form can be redisplayed as the user left it.
    """

    def __init__(
        self,
        errors: Sequence[Any],
        values: Dict[str, str],
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["fields"] = [getattr(e, "field", None) for e in errors]
        super().__init__(message="Form validation failed", context=ctx)
        self.errors: List[Any] = list(errors)
        self.values = values


class DeleteBlockedError(InventoryError):
    """
    Raised when a console cannot be deleted because games still reference it.

    Not an error page: the route shows the confirmation view again with
    the blocking games listed.
    """

    def __init__(
        self,
        record: Any,
        dependents: Sequence[Any],
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["dependent_count"] = len(dependents)
        super().__init__(
            message="Record has dependent records and cannot be deleted",
            context=ctx,
        )
        self.record = record
        self.dependents = list(dependents)


class DatabaseError(InventoryError):
    """
    Raised when a store operation fails unexpectedly.

    The rendered message is always generic; the original error type is kept
    in context for the server log.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

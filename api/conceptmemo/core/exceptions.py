"""
Custom exceptions for the application.
"""


class ConceptMemoException(Exception):
    """Base exception for all Concept Memo application exceptions."""
    pass


class ValidationError(ConceptMemoException):
    """Raised when validation fails."""
    pass


class NotFoundError(ConceptMemoException):
    """
    Raised when a requested resource is not found.

    Also raised when the resource exists but belongs to another user;
    the two cases are reported identically.
    """
    pass


class AuthenticationError(ConceptMemoException):
    """Raised when the caller has no session identity."""
    pass

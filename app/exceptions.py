"""
Custom Exception Classes

This module defines custom exceptions for consistent error handling and
error responses across the application.
"""

from typing import Any

from fastapi import status


class CMSException(Exception):
    """Base exception class for all CMS-related exceptions"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


# ============================================================================
# Authentication & Authorization Exceptions
# ============================================================================


class AuthenticationError(CMSException):
    """Raised when authentication fails"""

    def __init__(self, message: str = "Authentication failed", details: dict[str, Any] | None = None):
        super().__init__(message=message, status_code=status.HTTP_401_UNAUTHORIZED, details=details or {})


class InvalidTokenError(AuthenticationError):
    """Raised when JWT token is invalid"""

    def __init__(self, message: str = "Invalid or malformed token"):
        super().__init__(message=message)


class AuthorizationError(CMSException):
    """Raised when user lacks a capability for an action"""

    def __init__(
        self, message: str = "You do not have permission to perform this action", required_capability: str | None = None
    ):
        details = {"required_capability": required_capability} if required_capability else {}
        super().__init__(message=message, status_code=status.HTTP_403_FORBIDDEN, details=details)


class RequestRejectedError(CMSException):
    """Raised when a form submission is missing fields or fails nonce verification.

    Halts the request; nothing has been written when this is raised.
    """

    def __init__(self, message: str = "Could not verify the request, please try again.", action: str | None = None):
        details = {"action": action} if action else {}
        super().__init__(message=message, status_code=status.HTTP_403_FORBIDDEN, details=details)


# ============================================================================
# Resource Not Found Exceptions
# ============================================================================


class ResourceNotFoundError(CMSException):
    """Base class for resource not found errors"""

    def __init__(self, resource_type: str, resource_id: Any | None = None):
        message = f"{resource_type} not found"
        if resource_id is not None:
            message = f"{resource_type} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details={"resource_type": resource_type, "resource_id": resource_id},
        )


class PostNotFoundError(ResourceNotFoundError):
    """Raised when a post is not found or is not publicly viewable"""

    def __init__(self, post_id: Any | None = None):
        super().__init__(resource_type="Post", resource_id=post_id)

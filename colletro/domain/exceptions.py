"""Domain exceptions for the Colletro application.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class ColletroException(Exception):
    """Base exception for all Colletro application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON error responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(ColletroException):
    """Raised when input validation fails (e.g. empty batch, wrong type)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class FolderCycleException(ValidationException):
    """Raised when a folder move would make a folder its own ancestor."""

    def __init__(self, folder_id: str, parent_id: str) -> None:
        super().__init__(
            "A folder cannot be moved inside itself or one of its subfolders",
            field="parent_id",
        )
        self.details.update({"folder_id": folder_id, "parent_id": parent_id})


class AuthenticationException(ColletroException):
    """Raised when no identity can be resolved (missing or invalid token)."""

    def __init__(self, message: str = "Authentication required") -> None:
        """Initialize with optional message.

        Args:
            message: Description of the authentication failure.
        """
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(ColletroException):
    """Raised when the caller is known but lacks ownership or admin rights."""

    def __init__(
        self,
        resource: str | None = None,
        action: str | None = None,
        message: str = "Permission denied",
    ) -> None:
        """Initialize with optional resource, action, and message.

        Args:
            resource: Optional resource type (e.g. 'collection', 'item').
            action: Optional action that was attempted (e.g. 'unshare').
            message: Human-readable message; default used when resource/action omitted.
        """
        if resource and action:
            message = f"Permission denied: {action} on {resource}"
        details: dict[str, Any] = {}
        if resource:
            details["resource"] = resource
        if action:
            details["action"] = action
        super().__init__(message, "PERMISSION_DENIED", details)


class ResourceNotFoundException(ColletroException):
    """Raised when a requested resource does not exist or is not visible to the caller."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'collection', 'community_collection').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class ConflictException(ColletroException):
    """Raised when a write would duplicate something that must be unique (e.g. a second report)."""

    def __init__(self, message: str, resource_type: str | None = None) -> None:
        details = {"resource_type": resource_type} if resource_type else {}
        super().__init__(message, "CONFLICT", details)


class MetadataSourceTimeoutException(ColletroException):
    """Raised when an external metadata source does not answer in time."""

    def __init__(self, source_id: str, timeout_seconds: float) -> None:
        super().__init__(
            f"Metadata source '{source_id}' timed out after {timeout_seconds} seconds",
            "METADATA_SOURCE_TIMEOUT",
            {"source_id": source_id, "timeout_seconds": timeout_seconds},
        )


class SqlNotConfiguredException(ColletroException):
    """Raised when an operation requires the database but it is not configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )

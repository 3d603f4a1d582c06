"""Tests for domain exceptions (error_code, message, details)."""

from colletro.core.exception_handlers import status_for_error_code
from colletro.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    ColletroException,
    ConflictException,
    FolderCycleException,
    MetadataSourceTimeoutException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    ValidationException,
)


def test_colletro_exception_default_error_code() -> None:
    """Base ColletroException uses class name as error_code when not provided."""
    exc = ColletroException("Something failed")
    assert exc.error_code == "ColletroException"
    assert exc.to_dict() == {"error": "ColletroException", "message": "Something failed", "details": {}}


def test_validation_exception_with_field() -> None:
    exc = ValidationException("Invalid", field="items")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "items"}


def test_folder_cycle_is_a_validation_error() -> None:
    exc = FolderCycleException("f1", "f2")
    assert isinstance(exc, ValidationException)
    assert exc.details == {"field": "parent_id", "folder_id": "f1", "parent_id": "f2"}


def test_authentication_exception_default_message() -> None:
    exc = AuthenticationException()
    assert exc.message == "Authentication required"
    assert exc.error_code == "AUTHENTICATION_ERROR"


def test_authorization_exception_with_resource_and_action() -> None:
    """AuthorizationException builds message from resource and action."""
    exc = AuthorizationException("item", "delete")
    assert exc.message == "Permission denied: delete on item"
    assert exc.details == {"resource": "item", "action": "delete"}


def test_authorization_exception_custom_message() -> None:
    exc = AuthorizationException(message="Admin access required")
    assert exc.message == "Admin access required"
    assert exc.details == {}


def test_resource_not_found() -> None:
    exc = ResourceNotFoundException("collection", "c1")
    assert exc.message == "collection not found: c1"
    assert exc.details == {"resource_type": "collection", "resource_id": "c1"}


def test_metadata_timeout_and_sql_not_configured_codes() -> None:
    assert MetadataSourceTimeoutException("comic-vine", 2).error_code == "METADATA_SOURCE_TIMEOUT"
    assert SqlNotConfiguredException().error_code == "SERVICE_UNAVAILABLE"


def test_error_codes_map_to_http_status() -> None:
    assert status_for_error_code("RESOURCE_NOT_FOUND") == 404
    assert status_for_error_code("AUTHENTICATION_ERROR") == 401
    assert status_for_error_code("PERMISSION_DENIED") == 403
    assert status_for_error_code("VALIDATION_ERROR") == 400
    assert status_for_error_code("METADATA_SOURCE_TIMEOUT") == 504
    assert status_for_error_code("SERVICE_UNAVAILABLE") == 503
    assert status_for_error_code("SomethingElse") == 400


def test_conflict_maps_to_409() -> None:
    exc = ConflictException("Already reported", resource_type="content_report")
    assert exc.error_code == "CONFLICT"
    assert exc.details == {"resource_type": "content_report"}
    assert status_for_error_code(exc.error_code) == 409

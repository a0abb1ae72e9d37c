# api/utils/errors.py
from fastapi import HTTPException, status
from typing import Optional, Dict, Any
import logging
import traceback

from cable_router.errors import CableRouterError

logger = logging.getLogger("cable_router.api")

HTTP_422_UNPROCESSABLE = 422

class APIError(Exception):
    """
    Error raised by the routing endpoints with a ready HTTP status.

    Endpoint handlers raise it for request problems the routing engine cannot
    see, such as a snap point id that is not part of the submitted scene.
    The detail body carries a stable `code` that API clients can match on.
    """
    def __init__(
        self,
        status_code: int,
        detail: str,
        internal_code: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None
    ):
        """
        Args:
            status_code: HTTP status of the response
            detail: Message shown to the API client
            internal_code: Stable code such as "resource_not_found"
            extra: Additional context, e.g. the core exception type
        """
        self.status_code = status_code
        self.detail = detail
        self.internal_code = internal_code
        self.extra = extra or {}
        super().__init__(detail)

    def to_http_exception(self) -> HTTPException:
        """
        Build the HTTPException raised from an endpoint handler.

        The detail is a dict with `detail`, plus `code` and `extra` when set.
        """
        error_response = {
            "detail": self.detail,
        }

        if self.internal_code:
            error_response["code"] = self.internal_code

        if self.extra:
            error_response["extra"] = self.extra

        return HTTPException(
            status_code=self.status_code,
            detail=error_response
        )

class ResourceNotFoundError(APIError):
    """A snap point or other scene element referenced by id is absent from the scene."""
    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        extra: Optional[Dict[str, Any]] = None
    ):
        """
        Args:
            resource_type: Kind of scene element, e.g. "snap point"
            resource_id: Id the request referenced
            extra: Additional context
        """
        detail = f"{resource_type.capitalize()} with ID '{resource_id}' not found"
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            internal_code="resource_not_found",
            extra=extra
        )

class ValidationError(APIError):
    """
    A payload the routing engine rejected (422).

    Raised for core `CableRouterError`s such as invalid dimensions, full snap
    points or broken routes, and for inconsistent height rules.
    """
    def __init__(
        self,
        detail: str,
        field: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None
    ):
        """
        Args:
            detail: Message from the rejecting check
            field: Request field at fault, when known
            extra: Additional context
        """
        message = "Validation error"
        if field:
            message += f" for field '{field}'"
        message += f": {detail}"

        super().__init__(
            status_code=HTTP_422_UNPROCESSABLE,
            detail=message,
            internal_code="validation_error",
            extra=extra
        )

def handle_exception(e: Exception, resource_type: str = "resource", resource_id: Optional[str] = None) -> HTTPException:
    """
    Handle exceptions and convert to appropriate HTTPExceptions.

    Routing engine errors (malformed dimensions, full snap points, broken
    routes) become 422 responses; anything unexpected becomes a 500.

    Args:
        e: The exception to handle
        resource_type: Type of resource being accessed (for context)
        resource_id: ID of the resource (for context)

    Returns:
        HTTPException with appropriate status code and details
    """
    # If it's already an APIError, just convert it
    if isinstance(e, APIError):
        return e.to_http_exception()

    # If it's already an HTTPException, return it
    if isinstance(e, HTTPException):
        return e

    if isinstance(e, (CableRouterError, ValueError)):
        logger.warning(f"Rejected {resource_type} payload: {e}")
        return ValidationError(str(e), extra={"error_type": type(e).__name__}).to_http_exception()

    # Log the full error
    error_detail = traceback.format_exc()
    logger.error(f"Unhandled exception: {str(e)}\n{error_detail}")

    # Return a generic 500 error
    error_response = {
        "detail": f"An unexpected error occurred: {str(e)}",
        "code": "internal_server_error"
    }

    if resource_id:
        error_response["resource_id"] = resource_id

    if resource_type:
        error_response["resource_type"] = resource_type

    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=error_response
    )

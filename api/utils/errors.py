# File: api/utils/errors.py
from fastapi import HTTPException, status
from typing import Optional, Dict, Any
import logging
import traceback

logger = logging.getLogger("score_cutter.api")

class APIError(Exception):
    """
    Base class for errors the API reports to clients on purpose.
    
    Args:
        status_code: HTTP status code to return
        detail: Human-readable error message
        internal_code: Machine-readable code clients can switch on
        extra: Additional context echoed in the response
    """
    def __init__(
        self, 
        status_code: int, 
        detail: str, 
        internal_code: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None
    ):
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail
        self.internal_code = internal_code
        self.extra = extra or {}
    
    def to_http_exception(self) -> HTTPException:
        """Convert to a FastAPI HTTPException with a structured detail body."""
        body: Dict[str, Any] = {"detail": self.detail}
        if self.internal_code:
            body["code"] = self.internal_code
        if self.extra:
            body["extra"] = self.extra
        return HTTPException(status_code=self.status_code, detail=body)

class ValidationError(APIError):
    """Input that passes schema validation but is inconsistent (400)."""
    def __init__(
        self,
        detail: str,
        field: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None
    ):
        prefix = f"Validation error for field '{field}'" if field else "Validation error"
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{prefix}: {detail}",
            internal_code="validation_error",
            extra=extra
        )

def handle_exception(e: Exception, resource_type: str = "resource") -> HTTPException:
    """
    Map any exception raised inside an endpoint to an HTTPException.
    
    APIErrors and HTTPExceptions pass through. ValueErrors raised by the
    score_cutter models on construction become 400 validation errors.
    Anything else is logged with its traceback and returned as a 500.
    
    Args:
        e: The exception to handle
        resource_type: Kind of data being processed (for context)
        
    Returns:
        HTTPException with appropriate status code and details
    """
    if isinstance(e, APIError):
        return e.to_http_exception()
    if isinstance(e, HTTPException):
        return e
    if isinstance(e, ValueError):
        return ValidationError(str(e), extra={"resource_type": resource_type}).to_http_exception()
        
    logger.error(f"Unhandled exception while processing {resource_type}: {e}\n{traceback.format_exc()}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={
            "detail": f"An unexpected error occurred: {str(e)}",
            "code": "internal_server_error",
            "resource_type": resource_type,
        }
    )

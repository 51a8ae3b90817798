"""
Standardized response utilities
"""

import logging
from typing import Any, Optional
from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse

from app.schemas.common import StandardResponse, ErrorResponse
from app.services.errors import RegistryError

logger = logging.getLogger(__name__)

def success_response(
    message: str,
    data: Any = None,
    status_code: int = 200
) -> JSONResponse:
    """Create standardized success response"""
    response = StandardResponse(
        success=True,
        message=message,
        data=data
    )
    return JSONResponse(
        content=response.model_dump(),
        status_code=status_code
    )

def error_response(
    message: str,
    error_code: Optional[str] = None,
    details: Any = None,
    status_code: int = 400
) -> JSONResponse:
    """Create standardized error response"""
    response = ErrorResponse(
        message=message,
        error_code=error_code,
        details=details
    )
    return JSONResponse(
        content=response.model_dump(),
        status_code=status_code
    )

async def registry_error_handler(request: Request, exc: RegistryError) -> JSONResponse:
    """Render a rejected registry operation"""
    logger.warning(f"{request.method} {request.url.path} rejected: {exc.kind} ({exc.code}) {exc.message}")
    return error_response(
        message=exc.message,
        error_code=exc.kind,
        details={"code": exc.code},
        status_code=exc.status_code
    )

def not_found_error(resource: str = "Resource"):
    """Create not found error"""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{resource} not found"
    )

def rate_limit_error():
    """Create rate limit error"""
    return HTTPException(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        detail="Rate limit exceeded. Please try again later."
    )

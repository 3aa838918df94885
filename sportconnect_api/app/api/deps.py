"""
Shared dependencies for API handlers.

The façade is built once by ``create_app`` and kept on ``app.state``;
handlers receive it through :func:`get_match_api`.  Service errors are
turned into HTTP errors with :func:`to_http_exception`.
"""

import logging

from fastapi import HTTPException, Request, status

from ..core.exceptions import (
    MatchFull,
    NotFoundError,
    SportConnectError,
    StorageFailure,
    Unauthorized,
    ValidationError,
)
from ..services.api_service import MatchApi

logger = logging.getLogger(__name__)


def get_match_api(request: Request) -> MatchApi:
    return request.app.state.match_api


def to_http_exception(exc: SportConnectError) -> HTTPException:
    if isinstance(exc, ValidationError):
        return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc))
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, MatchFull):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    if isinstance(exc, Unauthorized):
        return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc))
    if isinstance(exc, StorageFailure):
        logger.error("Storage failure while handling request: %s", exc)
        return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Service unavailable")
    logger.error("Unhandled service error: %s", exc)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal error")

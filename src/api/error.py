"""API error handling

Use case errors are raised as ClientError from routes and rendered by
client_error_handler as {"error": {"code", "message"}}.
"""

import logging
from fastapi import Request, status
from fastapi.responses import JSONResponse
from libs.result import Error
from src.app.use_cases.payments.errors import INVALID_REQUEST_CODES, NOT_FOUND_CODES

logger = logging.getLogger(__name__)


class ClientError(Exception):
    def __init__(self, error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code


def status_code_for(error: Error) -> int:
    """HTTP status for a use case error code"""
    if error.code in INVALID_REQUEST_CODES:
        return status.HTTP_400_BAD_REQUEST
    if error.code in NOT_FOUND_CODES:
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: {exc.error.code} ({exc.error.reason})"
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": {"code": exc.error.code, "message": exc.error.message}},
    )

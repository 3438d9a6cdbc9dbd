from fastapi import HTTPException, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse

from shared.logging import get_logger

logger = get_logger(__name__)


class CartServiceError(HTTPException):
    """Base class for failures that end the current request."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str):
        super().__init__(status_code=type(self).status_code, detail=detail)


class MalformedInput(CartServiceError):
    # body is not JSON or does not look like a cart
    status_code = status.HTTP_400_BAD_REQUEST


class UnknownCustomer(CartServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class UpstreamUnavailable(CartServiceError):
    # customer service unreachable, or the request body could not be read
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class SerializationFailure(CartServiceError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(exc: CartServiceError) -> JSONResponse:
    """Render an error outside the router, same shape as FastAPI's HTTPException."""
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


async def cart_service_error_handler(request: Request, exc: CartServiceError):
    logger.warning(
        "%s %s failed with %s: %s",
        request.method, request.url.path, exc.status_code, exc.detail,
    )
    return await http_exception_handler(request, exc)

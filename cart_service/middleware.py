"""
ASGI middleware for the cart service.

Order (outermost to innermost):
1. LoggingMiddleware - start/end entries with duration for every request
2. ValidationMiddleware - customer existence check for writes on /carts

Starlette wraps in reverse order of add_middleware, so main.py adds
ValidationMiddleware first and LoggingMiddleware last.
"""
import time
from typing import Iterable, Optional

from pydantic import ValidationError
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from shared.logging import get_logger

from .customers import CustomerDirectory
from .errors import CartServiceError, MalformedInput, UnknownCustomer, UpstreamUnavailable, error_response
from .schemas import CartCreate

logger = get_logger(__name__)

WRITE_METHODS = frozenset({"POST", "PUT", "PATCH"})


async def read_body(receive: Receive) -> bytes:
    """Drain the request body from the ASGI receive channel."""
    chunks = []
    while True:
        message = await receive()
        if message["type"] == "http.disconnect":
            raise UpstreamUnavailable("Client disconnected before the request body was read")
        chunks.append(message.get("body", b""))
        if not message.get("more_body", False):
            return b"".join(chunks)


def replay_body(body: bytes, receive: Receive) -> Receive:
    """Return a receive callable that hands out ``body`` again, then defers to ``receive``."""
    delivered = False

    async def receive_again() -> Message:
        nonlocal delivered
        if not delivered:
            delivered = True
            return {"type": "http.request", "body": body, "more_body": False}
        return await receive()

    return receive_again


class ValidationMiddleware:
    def __init__(
        self,
        app: Optional[ASGIApp],
        directory: CustomerDirectory,
        paths: Iterable[str] = ("/carts",),
        methods: Iterable[str] = WRITE_METHODS,
    ):
        if app is None:
            raise RuntimeError("No next handler defined for validation middleware")
        self.app = app
        self.directory = directory
        self.paths = frozenset(paths)
        self.methods = frozenset(m.upper() for m in methods)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if (
            scope["type"] != "http"
            or scope["method"] not in self.methods
            or scope["path"] not in self.paths
        ):
            await self.app(scope, receive, send)
            return

        try:
            body = await read_body(receive)
            await self.check_customer(body)
        except CartServiceError as exc:
            logger.warning(
                "Rejected %s %s with %s: %s",
                scope["method"], scope["path"], exc.status_code, exc.detail,
            )
            response = error_response(exc)
            await response(scope, receive, send)
            return

        await self.app(scope, replay_body(body, receive), send)

    async def check_customer(self, body: bytes) -> None:
        try:
            candidate = CartCreate.model_validate_json(body)
        except ValidationError as e:
            raise MalformedInput("Request body is not a valid cart") from e

        if not await self.directory.exists(candidate.customer_id):
            raise UnknownCustomer(f"Invalid customer ID: {candidate.customer_id}")


class LoggingMiddleware:
    def __init__(self, app: Optional[ASGIApp]):
        if app is None:
            raise RuntimeError("No next handler defined for logging middleware")
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        method, path = scope["method"], scope["path"]
        status_code = 500

        async def send_wrapper(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        logger.info("Received %s request on route: %s", method, path)
        started = time.perf_counter()
        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            logger.info(
                "Response generated for %s on route %s. Status: %s. Duration: %.6fs",
                method, path, status_code, time.perf_counter() - started,
            )

# cart_service/main.py
from typing import Optional

import uvicorn
from fastapi import FastAPI

from shared.config import Settings, get_settings
from shared.logging import get_logger

from .carts import router as carts_router
from .customers import CustomerClient, CustomerDirectory
from .errors import CartServiceError, cart_service_error_handler
from .middleware import LoggingMiddleware, ValidationMiddleware
from .store import CartStore

logger = get_logger(__name__)


def create_app(
    store: Optional[CartStore] = None,
    directory: Optional[CustomerDirectory] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    settings = settings or get_settings()
    if directory is None:
        directory = CustomerClient(
            settings.customer_service_url,
            timeout=settings.customer_service_timeout,
        )

    app = FastAPI(title="cart-service")
    app.state.store = store if store is not None else CartStore()
    app.state.settings = settings

    # last added runs first, so logging wraps validation
    app.add_middleware(ValidationMiddleware, directory=directory, paths=("/carts",), methods=("POST",))
    app.add_middleware(LoggingMiddleware)

    app.add_exception_handler(CartServiceError, cart_service_error_handler)

    app.include_router(carts_router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    logger.info("Starting cart-service on %s:%s", settings.host, settings.port)
    uvicorn.run("cart_service.main:app", host=settings.host, port=settings.port)

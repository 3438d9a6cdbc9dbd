from typing import Optional, Protocol

import httpx
from fastapi import status

from shared.config import CUSTOMER_SERVICE_URL
from shared.logging import get_logger

from .errors import UpstreamUnavailable

logger = get_logger(__name__)


class CustomerDirectory(Protocol):
    async def exists(self, customer_id: int) -> bool:
        ...


class CustomerClient:
    """Existence checks against the customer service.

    Sends ``HEAD /customers/{id}``: 404 means the customer does not exist,
    any 2xx means it does. Every other status and every transport error is
    reported as ``UpstreamUnavailable``. Nothing is retried.

    ``timeout`` defaults to None, so a customer service that never answers
    keeps the calling request open indefinitely.
    """

    def __init__(
        self,
        base_url: str = CUSTOMER_SERVICE_URL,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def customer_url(self, customer_id: int) -> str:
        return f"{self.base_url}/customers/{customer_id}"

    async def exists(self, customer_id: int) -> bool:
        url = self.customer_url(customer_id)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.head(url)
        except httpx.HTTPError as e:
            logger.error("Existence check for customer %s failed: %r", customer_id, e)
            raise UpstreamUnavailable("Customer service unavailable") from e

        if resp.status_code == status.HTTP_404_NOT_FOUND:
            return False
        if resp.is_success:
            return True
        logger.error("Customer service answered %s for customer %s", resp.status_code, customer_id)
        raise UpstreamUnavailable(f"Customer service error: {resp.status_code}")
